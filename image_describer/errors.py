"""Exception taxonomy shared by the batch executor and the provider clients."""


class ConfigurationError(ValueError):
    """Provider credentials are missing or incomplete."""


class BatchSizeError(ValueError):
    """A batch exceeds the provider's per-request image cap."""


class DescriptionError(RuntimeError):
    """A single image could not be described."""


class ImageLoadError(DescriptionError):
    """An image could not be fetched or read."""
