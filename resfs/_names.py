"""Canonicalisation and classification of flat resource names.

A raw catalog key such as ``"App.Assets.Logo.png"`` is first reduced to a
name relative to the directory being built (``"Assets.Logo.png"`` for the
root of namespace ``"App"``) and then classified by how many delimiters it
still contains:

* at most one delimiter: a file of the current directory (``"Logo.png"``,
  ``"README"``);
* more than one: a member of a subdirectory named by its first token.
"""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_DELIMITER = "."


def strip_namespace_root(name: str, namespace_root: str, delimiter: str = DEFAULT_DELIMITER) -> str:
    """Remove *namespace_root* from the front of *name* at a token boundary."""
    if name == namespace_root:
        return ""
    if name.startswith(namespace_root + delimiter):
        return name[len(namespace_root):]
    return name


def normalize_names(
    names: Iterable[str],
    namespace_root: str | None = None,
    delimiter: str = DEFAULT_DELIMITER,
) -> list[str]:
    """Return canonical relative names, preserving input order.

    The namespace root (when given) is stripped, then leading delimiters are
    trimmed. Names that end up empty are dropped.
    """
    result: list[str] = []
    for name in names:
        if namespace_root:
            name = strip_namespace_root(name, namespace_root, delimiter)
        name = name.lstrip(delimiter)
        if name:
            result.append(name)
    return result


def count_separators(name: str, delimiter: str = DEFAULT_DELIMITER) -> int:
    return name.count(delimiter)


def is_file_name(name: str, delimiter: str = DEFAULT_DELIMITER) -> bool:
    return count_separators(name, delimiter) <= 1


def partition_names(
    names: Iterable[str], delimiter: str = DEFAULT_DELIMITER
) -> tuple[list[str], list[str]]:
    """Split canonical names into ``(file_names, directory_member_names)``."""
    file_names: list[str] = []
    member_names: list[str] = []
    for name in names:
        if is_file_name(name, delimiter):
            file_names.append(name)
        else:
            member_names.append(name)
    return file_names, member_names


def split_first_token(name: str, delimiter: str = DEFAULT_DELIMITER) -> tuple[str, str]:
    head, _, rest = name.partition(delimiter)
    return head, rest


def group_by_first_token(
    names: Iterable[str], delimiter: str = DEFAULT_DELIMITER
) -> dict[str, list[str]]:
    """Group directory members by first token, keeping each name's remainder.

    ``["A.b.c", "A.d.e", "B.f.g"]`` becomes
    ``{"A": ["b.c", "d.e"], "B": ["f.g"]}``. Keys keep first-seen order.
    """
    groups: dict[str, list[str]] = {}
    for name in names:
        head, rest = split_first_token(name, delimiter)
        groups.setdefault(head, []).append(rest)
    return groups
