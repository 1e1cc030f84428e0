import logging
from typing import List

logger = logging.getLogger(__name__)


def split_lines(contents: str) -> List[str]:
    """
    Splits text on "\\n" only. A trailing "\\r" is dropped from each line and
    a final terminator does not add an empty line.
    Unlike str.splitlines(), \\x0b, \\x0c, \\u2028 etc. stay inside the line.
    """
    if not contents:
        return []

    lines = contents.split("\n")
    if lines[-1] == "":
        lines.pop()

    return [line[:-1] if line.endswith("\r") else line for line in lines]


def search(query: str, contents: str) -> List[str]:
    """
    Returns every line of `contents` containing `query`, in order.
    Case-sensitive, plain substring match.
    """
    results = [line for line in split_lines(contents) if query in line]
    logger.debug("search(%r): %d matching line(s)", query, len(results))
    return results


def search_case_insensitive(query: str, contents: str) -> List[str]:
    """
    Like search(), but matching compares str.lower() of both sides
    (Unicode default lowercase mapping, not locale dependent).
    Matched lines are returned in their original casing.
    """
    query = query.lower()
    results = [line for line in split_lines(contents) if query in line.lower()]
    logger.debug("search_case_insensitive(%r): %d matching line(s)", query, len(results))
    return results


def search_lines(query: str, contents: str, case_sensitive: bool = True) -> List[str]:
    """Runs search() or search_case_insensitive() depending on `case_sensitive`."""
    if case_sensitive:
        return search(query, contents)
    return search_case_insensitive(query, contents)
