import sys
import logging
from typing import Any, Dict, List, Optional, TextIO

from minigrep.config_loader import get_encoding
from minigrep.core.config import Config
from minigrep.core.reader import PlainTextReader
from minigrep.core.search.service import search_lines

logger = logging.getLogger(__name__)


def run(config: Config, settings: Optional[Dict[str, Any]] = None, out: Optional[TextIO] = None) -> List[str]:
    """
    Reads config.file_path, searches it and writes every matching line to `out`.
    The whole file is read before anything is written, so a FileAccessError
    leaves `out` untouched.
    """
    if out is None:
        out = sys.stdout

    reader = PlainTextReader({"encoding": get_encoding(settings or {})})
    contents = reader.read(config.file_path)

    results = search_lines(config.query, contents, config.case_sensitive)
    for line in results:
        out.write(line + "\n")

    logger.debug("Printed %d line(s) from %s", len(results), config.file_path)
    return results
