"""Recursive construction of a resource tree from a flat key listing."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ._catalog import CatalogLookup
from ._diagnostics import DiagnosticEvent, DiagnosticSink, LoggingSink
from ._exceptions import ResFSConfigurationError, ResFSResourceNotResolvableError
from ._names import DEFAULT_DELIMITER, group_by_first_token, normalize_names, partition_names
from ._nodes import ResourceDirectory, ResourceFile
from ._resolver import resolve_identifier

logger = logging.getLogger(__name__)


def build_tree(
    catalog: CatalogLookup | None,
    namespace_root: str | None = None,
    *,
    names: Iterable[str] | None = None,
    path_separator: str = "/",
    delimiter: str = DEFAULT_DELIMITER,
    sink: DiagnosticSink | None = None,
) -> ResourceDirectory:
    """Build the directory tree for *catalog* and return its root.

    *names* defaults to ``catalog.list_all()``; *namespace_root* defaults to
    ``catalog.namespace_root`` and becomes the name of the root directory.
    Entries that cannot be resolved are reported to *sink* and left out.

    Raises ResFSConfigurationError when the arguments cannot describe a tree.
    """
    if catalog is None:
        raise ResFSConfigurationError("A backing catalog is required.")
    if namespace_root is None:
        namespace_root = getattr(catalog, "namespace_root", None)
    if not namespace_root:
        raise ResFSConfigurationError("Namespace root must not be empty.")
    if sink is None:
        sink = LoggingSink()

    root = ResourceDirectory(namespace_root, catalog, None, path_separator, delimiter)
    raw_names = catalog.list_all() if names is None else list(names)
    _populate(root, normalize_names(raw_names, namespace_root, delimiter), sink)
    logger.debug(
        "Built resource tree %r from %d keys (%d top-level entries).",
        namespace_root, len(raw_names), len(root),
    )
    return root


def build_directory(
    name: str,
    names: Iterable[str],
    parent: ResourceDirectory,
    sink: DiagnosticSink,
) -> ResourceDirectory:
    """Build the subdirectory *name* of *parent* from its members' remainders."""
    directory = ResourceDirectory(
        name, parent.catalog, parent, parent.path_separator, parent.delimiter
    )
    _populate(directory, normalize_names(names, None, directory.delimiter), sink)
    return directory


def _populate(directory: ResourceDirectory, names: list[str], sink: DiagnosticSink) -> None:
    file_names, member_names = partition_names(names, directory.delimiter)
    groups = group_by_first_token(member_names, directory.delimiter)
    subdirs = [build_directory(key, rest, directory, sink) for key, rest in groups.items()]
    files: list[ResourceFile] = []
    # a catalog may list the same key twice
    for name in dict.fromkeys(file_names):
        node = _create_file(directory, name, sink)
        if node is not None:
            files.append(node)
    directory._freeze(subdirs, files)


def _create_file(
    directory: ResourceDirectory, name: str, sink: DiagnosticSink
) -> ResourceFile | None:
    try:
        identifier = resolve_identifier(
            directory.catalog,
            directory.real_path,
            name,
            directory.path_separator,
            directory.delimiter,
        )
    except ResFSResourceNotResolvableError as e:
        sink(DiagnosticEvent(
            kind="unresolved",
            name=name,
            directory=directory.virtual_path,
            message=f"Virtual file not found: {e.candidates[0]}",
            candidates=e.candidates,
            error=e,
        ))
        return None
    except Exception as e:
        sink(DiagnosticEvent(
            kind="lookup_error",
            name=name,
            directory=directory.virtual_path,
            message=f"Catalog lookup failed for {name!r}: {e}",
            error=e,
        ))
        return None
    return ResourceFile(name, directory, identifier)
