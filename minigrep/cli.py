from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Mapping, Optional, Sequence

from minigrep.config_loader import load_settings, get_log_level
from minigrep.core.config import Config
from minigrep.core.errors import FileAccessError, MissingArgument
from minigrep.runner import run

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # stdout carries matches only
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    if argv is None:
        argv = sys.argv
    if environ is None:
        environ = os.environ

    settings = load_settings(environ)
    if settings["status"] != "OK":
        print(f"Problem loading settings: {settings['error']}", file=sys.stderr)
        return 1

    configure_logging(get_log_level(settings["data"]))

    try:
        config = Config.from_args(argv, environ)
    except MissingArgument as e:
        logger.debug("Missing argument: %s", e.argument)
        prog = Path(argv[0]).name if argv else "minigrep"
        print(f"Problem parsing arguments: {e}", file=sys.stderr)
        print(f"Usage: {prog} <query> <filename>", file=sys.stderr)
        return 1

    try:
        results = run(config, settings["data"])
    except FileAccessError as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    logger.info("Search for %r in %s: %d match(es)", config.query, config.file_path, len(results))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
