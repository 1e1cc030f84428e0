import logging
from typing import Optional

from minigrep.core.errors import FileAccessError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class PlainTextReader:
    """
    Loads a whole text file into memory.
    Decoding is strict: invalid bytes fail the read instead of being replaced.
    """

    def __init__(self, config: Optional[dict] = None):
        self.config = config or {}
        self.encoding = self.config.get("encoding") or DEFAULT_ENCODING

    def read(self, path: str) -> str:
        try:
            with open(path, "r", encoding=self.encoding, errors="strict", newline="") as f:
                content = f.read()
        except (OSError, ValueError) as e:
            logger.debug("Failed to read %s: %s", path, e)
            raise FileAccessError(path, e) from e

        logger.debug("Read %d characters from %s (%s)", len(content), path, self.encoding)
        return content
