"""All magic values live here — no inline literals anywhere else."""

# Generation defaults
DEFAULT_PROMPT = "What's in this image?"
DEFAULT_MAX_TOKENS = 300
DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."
OPENAI_VISION_MODEL = "gpt-4o"
CLAUDE_VISION_MODEL = "claude-3-sonnet-20240229"
AZURE_OPENAI_API_VERSION = "2024-07-01-preview"

# Batch limits
DEFAULT_CONCURRENCY = 3
MAX_BATCH_SIZE = 20

# Provider names (CLI + factory)
PROVIDER_OPENAI = "openai"
PROVIDER_AZURE = "azure"
PROVIDER_CLAUDE = "claude"
PROVIDERS: tuple[str, ...] = (PROVIDER_OPENAI, PROVIDER_AZURE, PROVIDER_CLAUDE)

# Image loading
URL_PREFIXES: tuple[str, ...] = ("http://", "https://")
DEFAULT_CONTENT_TYPE = "image/jpeg"
CLAUDE_MEDIA_TYPES: frozenset[str] = frozenset(
    {"image/jpeg", "image/png", "image/gif", "image/webp"}
)
HTTP_TIMEOUT: float = 30.0

# Error messages
MSG_BATCH_TOO_LARGE = "Maximum of %d images allowed per batch request"
MSG_BAD_CONCURRENCY = "concurrency must be a positive integer, got %r"
MSG_OPENAI_NOT_CONFIGURED = (
    "OpenAI API key must be provided via constructor or OPENAI_API_KEY environment variable."
)
MSG_CLAUDE_NOT_CONFIGURED = (
    "Anthropic API key must be provided via constructor or ANTHROPIC_API_KEY environment variable."
)
MSG_AZURE_NOT_CONFIGURED = (
    "Missing required Azure OpenAI configuration: %s. "
    "These must be provided via constructor or environment variables."
)
MSG_NO_PROVIDER = (
    "No vision provider configured — set ANTHROPIC_API_KEY, OPENAI_API_KEY "
    "or the AZURE_OPENAI_* variables"
)
MSG_UNKNOWN_PROVIDER = "Unknown provider %r (expected one of: %s)"
MSG_OPENAI_FAILED = "OpenAI API request failed: %s"
MSG_AZURE_FAILED = "Azure OpenAI API request failed: %s"
MSG_CLAUDE_FAILED = "Claude API request failed: %s"
MSG_OPENAI_EMPTY = "No response content received from OpenAI"
MSG_AZURE_EMPTY = "No response content received from Azure OpenAI"
MSG_CLAUDE_EMPTY = "No response content received from Claude"
MSG_URL_FETCH_FAILED = "Could not retrieve image from URL: %s"
MSG_FILE_READ_FAILED = "Could not read local file: %s. Error: %s"
MSG_IMAGE_FAILED = "Error processing image: %s"

# Log messages
MSG_BATCH_START = "Describing %d image(s) with concurrency %d"
MSG_BATCH_DONE = "Batch finished: %d/%d succeeded"
MSG_ITEM_START = "→ %s"
MSG_ITEM_FAILED = "✗ %s: %s"
MSG_USING_PROVIDER = "Using %s vision provider"
