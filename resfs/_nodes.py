from __future__ import annotations

import weakref
from collections.abc import Iterator
from typing import TYPE_CHECKING

from ._exceptions import ResFSConfigurationError
from ._names import DEFAULT_DELIMITER
from ._path import glob_match, join_path

if TYPE_CHECKING:
    from ._catalog import CatalogLookup

# ---------------------------------------------------------------------------
#  Node types
# ---------------------------------------------------------------------------


class ResourceFile:
    __slots__ = (
        "name",
        "resolved_identifier",
        "catalog",
        "real_path",
        "virtual_path",
        "_parent_ref",
        "__weakref__",
    )

    is_directory = False

    def __init__(self, name: str, parent: ResourceDirectory, resolved_identifier: str) -> None:
        self.name: str = name
        self.resolved_identifier: str = resolved_identifier
        self.catalog: CatalogLookup = parent.catalog
        self.real_path: str = join_path(parent.path_separator, parent.real_path, name)
        self.virtual_path: str = parent.virtual_path.rstrip("/") + "/" + name
        self._parent_ref: weakref.ref[ResourceDirectory] = weakref.ref(parent)

    @property
    def parent(self) -> ResourceDirectory | None:
        return self._parent_ref()

    @property
    def modified_at(self) -> float:
        return self.catalog.origin_mtime()

    def modification_time(self) -> float:
        return self.modified_at

    def __repr__(self) -> str:
        return f"ResourceFile({self.virtual_path!r} -> {self.resolved_identifier!r})"


class ResourceDirectory:
    """A directory of the resource tree.

    Instances are built by :func:`resfs.build_tree` and are immutable
    afterwards: ``directories`` and ``files`` are tuples sorted by name, and
    every node of one tree shares the same catalog.
    """

    __slots__ = (
        "name",
        "catalog",
        "path_separator",
        "delimiter",
        "real_path",
        "virtual_path",
        "_parent_ref",
        "_directories",
        "_files",
        "__weakref__",
    )

    is_directory = True

    def __init__(
        self,
        name: str,
        catalog: CatalogLookup | None,
        parent: ResourceDirectory | None = None,
        path_separator: str = "/",
        delimiter: str = DEFAULT_DELIMITER,
    ) -> None:
        if catalog is None:
            raise ResFSConfigurationError("A backing catalog is required.")
        if not name:
            raise ResFSConfigurationError("Directory name must not be empty.")
        if not path_separator:
            raise ResFSConfigurationError("Path separator must not be empty.")
        if len(delimiter) != 1:
            raise ResFSConfigurationError(
                f"Name delimiter must be a single character, got {delimiter!r}."
            )
        self.name: str = name
        self.catalog: CatalogLookup = catalog
        self.path_separator: str = path_separator
        self.delimiter: str = delimiter
        self._directories: tuple[ResourceDirectory, ...] = ()
        self._files: tuple[ResourceFile, ...] = ()
        if parent is None:
            self._parent_ref: weakref.ref[ResourceDirectory] | None = None
            self.real_path: str = name.lstrip(delimiter)
            self.virtual_path: str = "/"
        else:
            self._parent_ref = weakref.ref(parent)
            self.real_path = join_path(path_separator, parent.real_path, name)
            self.virtual_path = parent.virtual_path.rstrip("/") + "/" + name

    # -- structure --

    @property
    def parent(self) -> ResourceDirectory | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None

    @property
    def directories(self) -> tuple[ResourceDirectory, ...]:
        return self._directories

    @property
    def files(self) -> tuple[ResourceFile, ...]:
        return self._files

    def _freeze(
        self,
        directories: list[ResourceDirectory],
        files: list[ResourceFile],
    ) -> None:
        self._directories = tuple(sorted(directories, key=lambda d: d.name))
        self._files = tuple(sorted(files, key=lambda f: f.name))

    @property
    def modified_at(self) -> float:
        return self.catalog.origin_mtime()

    def modification_time(self) -> float:
        return self.modified_at

    # -- listing --

    def list_files(self) -> list[ResourceFile]:
        return list(self._files)

    def list_directories(self) -> list[ResourceDirectory]:
        return list(self._directories)

    def enumerate_all(self) -> Iterator[Node]:
        """Yield child directories, then files. Each call starts afresh."""
        yield from self._directories
        yield from self._files

    def __iter__(self) -> Iterator[Node]:
        return self.enumerate_all()

    def __len__(self) -> int:
        return len(self._directories) + len(self._files)

    def __contains__(self, name: object) -> bool:
        return any(node.name == name for node in self.enumerate_all())

    # -- lookup --

    def find_file(self, name: str) -> ResourceFile | None:
        return next((f for f in self._files if f.name == name), None)

    def find_files_matching(self, pattern: str) -> Iterator[ResourceFile]:
        return (f for f in self._files if glob_match(f.name, pattern))

    def find_directory(self, name: str) -> ResourceDirectory | None:
        return next((d for d in self._directories if d.name == name), None)

    def walk(self) -> Iterator[tuple[ResourceDirectory, list[ResourceDirectory], list[ResourceFile]]]:
        """Top-down walk of this subtree."""
        yield self, list(self._directories), list(self._files)
        for child in self._directories:
            yield from child.walk()

    def __repr__(self) -> str:
        return (
            f"ResourceDirectory({self.virtual_path!r}, "
            f"directories={len(self._directories)}, files={len(self._files)})"
        )


Node = ResourceDirectory | ResourceFile
