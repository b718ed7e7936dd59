from __future__ import annotations

from typing import TYPE_CHECKING

from ._exceptions import ResFSResourceNotResolvableError
from ._names import DEFAULT_DELIMITER
from ._path import join_path

if TYPE_CHECKING:
    from ._catalog import CatalogLookup


def candidate_identifiers(
    directory_real_path: str,
    name: str,
    path_separator: str = "/",
    delimiter: str = DEFAULT_DELIMITER,
) -> tuple[str, ...]:
    """Return the catalog keys a file may be stored under, in lookup order.

    The first candidate is the separator-joined real path, the second is the
    same string in delimiter form with stray delimiters trimmed. When both
    spell the same key only one is returned.
    """
    full_name = join_path(path_separator, directory_real_path, name)
    dotted = full_name.replace(path_separator, delimiter).strip(delimiter)
    if dotted == full_name:
        return (full_name,)
    return full_name, dotted


def resolve_identifier(
    catalog: CatalogLookup,
    directory_real_path: str,
    name: str,
    path_separator: str = "/",
    delimiter: str = DEFAULT_DELIMITER,
) -> str:
    """Return the first candidate key of *name* that exists in *catalog*.

    Raises ResFSResourceNotResolvableError when none of them does.
    """
    candidates = candidate_identifiers(directory_real_path, name, path_separator, delimiter)
    for key in candidates:
        if catalog.exists(key):
            return key
    raise ResFSResourceNotResolvableError(name, candidates)
