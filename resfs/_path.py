import re
from functools import lru_cache


def split_path(path: str) -> list[str]:
    """Return the segments of a virtual path, resolved against the root.

    ``\\`` counts as ``/``, empty and ``.`` segments are skipped and ``..``
    drops the previous segment. Climbing above the root raises ValueError.
    """
    parts: list[str] = []
    for part in path.replace("\\", "/").split("/"):
        if part == "..":
            if not parts:
                raise ValueError(f"Path traversal attempt detected: '{path}'")
            parts.pop()
        elif part and part != ".":
            parts.append(part)
    return parts


def normalize_path(path: str) -> str:
    return "/" + "/".join(split_path(path))


def join_path(separator: str, *parts: str) -> str:
    """Join the non-empty *parts* with *separator*."""
    return separator.join(p for p in parts if p)


@lru_cache(maxsize=256)
def _compile_glob(pattern: str) -> "re.Pattern[str]":
    escaped = re.escape(pattern)
    return re.compile(escaped.replace(r"\*", ".*").replace(r"\?", "."), re.DOTALL)


def glob_match(name: str, pattern: str) -> bool:
    """Match a single name segment against *pattern*.

    Only `*` (any run of characters) and `?` (one character) are special;
    everything else, brackets included, matches literally and case-sensitively.
    """
    return _compile_glob(pattern).fullmatch(name) is not None
