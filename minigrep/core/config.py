import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from minigrep.core.errors import MissingArgument

logger = logging.getLogger(__name__)

CASE_INSENSITIVE_ENV = "CASE_INSENSITIVE"


@dataclass(frozen=True)
class Config:
    """
    One search invocation: what to look for, where, and how.
    """
    query: str
    file_path: str
    case_sensitive: bool = True

    @classmethod
    def from_args(cls, args: Iterable[str], environ: Mapping[str, str]) -> "Config":
        """
        Builds a Config from the process arguments (program name first)
        and an environment mapping.
        Only the presence of CASE_INSENSITIVE matters, not its value.
        """
        remaining = iter(args)
        next(remaining, None)  # program name

        query = next(remaining, None)
        if query is None:
            raise MissingArgument("query", "Didn't get a query string")

        file_path = next(remaining, None)
        if file_path is None:
            raise MissingArgument("file_path", "Didn't get a file name")

        case_sensitive = CASE_INSENSITIVE_ENV not in environ

        config = cls(query=query, file_path=file_path, case_sensitive=case_sensitive)
        logger.debug("Config built: %s", config)
        return config
