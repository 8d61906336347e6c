import logging
import re

# NeoWs takes its key as a query parameter, so it shows up in request URLs
_API_KEY_PATTERN = re.compile(r"(api_key=)[^&\s\"']+", re.IGNORECASE)


def mask_api_key(text: str) -> str:
    """Replace the value of every ``api_key=`` query parameter with ``***``."""
    return _API_KEY_PATTERN.sub(r"\1***", text)


class RedactingFilter(logging.Filter):
    """
    Mask API keys in the rendered log message, then cut it to ``max_length``.

    The message is rendered before masking so that a key split across the
    format string and its arguments is still caught.
    """

    def __init__(self, name: str = "", max_length: int = 250):
        super().__init__(name)
        self.max_length = max_length

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        cleaned = mask_api_key(message)
        if len(cleaned) > self.max_length:
            cleaned = cleaned[:self.max_length] + "..."

        if cleaned != message:
            record.msg = cleaned
            record.args = None
        return True
