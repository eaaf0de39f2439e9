"""Image loading — fetch by URL or read by path, base64-encoded with a normalized content type."""
import asyncio
import base64
import mimetypes
from dataclasses import dataclass
from pathlib import Path

import httpx

from image_describer.constants import (
    DEFAULT_CONTENT_TYPE,
    HTTP_TIMEOUT,
    MSG_FILE_READ_FAILED,
    MSG_IMAGE_FAILED,
    MSG_URL_FETCH_FAILED,
    URL_PREFIXES,
)
from image_describer.errors import ImageLoadError


@dataclass(frozen=True)
class ImageData:
    encoded_image: str
    content_type: str

    @property
    def data_url(self) -> str:
        return f"data:{self.content_type};base64,{self.encoded_image}"


def is_url(identifier: str) -> bool:
    return identifier.startswith(URL_PREFIXES)


def normalize_content_type(content_type: str) -> str:
    """Lower-case, drop parameters such as charset, and map image/jpg → image/jpeg."""
    base = content_type.split(";", 1)[0].strip().lower()
    match base:
        case "":
            return DEFAULT_CONTENT_TYPE
        case "image/jpg":
            return "image/jpeg"
        case other:
            return other


def guess_content_type(path: str) -> str:
    guessed, _ = mimetypes.guess_type(path)
    return guessed or DEFAULT_CONTENT_TYPE


async def _get(url: str, client: httpx.AsyncClient) -> tuple[bytes, str]:
    response = await client.get(url)
    match response.status_code:
        case 200:
            pass
        case _:
            raise ImageLoadError(MSG_URL_FETCH_FAILED % url)
    content_type = response.headers.get("content-type") or guess_content_type(
        httpx.URL(url).path
    )
    return response.content, content_type


async def _fetch_url(url: str, http_client: httpx.AsyncClient | None) -> tuple[bytes, str]:
    try:
        if http_client is not None:
            return await _get(url, http_client)
        async with httpx.AsyncClient(timeout=HTTP_TIMEOUT, follow_redirects=True) as client:
            return await _get(url, client)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise ImageLoadError(MSG_IMAGE_FAILED % exc) from exc


async def _read_file(path: str) -> tuple[bytes, str]:
    try:
        raw = await asyncio.to_thread(Path(path).read_bytes)
    except OSError as exc:
        raise ImageLoadError(MSG_FILE_READ_FAILED % (path, exc)) from exc
    return raw, guess_content_type(path)


async def load_image(
    identifier: str, http_client: httpx.AsyncClient | None = None
) -> ImageData:
    """Load an image from a URL or local path. Raises ImageLoadError on failure."""
    match is_url(identifier):
        case True:
            raw, content_type = await _fetch_url(identifier, http_client)
        case False:
            raw, content_type = await _read_file(identifier)
    return ImageData(
        encoded_image=base64.standard_b64encode(raw).decode(),
        content_type=normalize_content_type(content_type),
    )
