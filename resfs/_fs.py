from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from ._builder import build_tree
from ._catalog import CatalogLookup, MappingCatalog, PackageCatalog, ZipCatalog
from ._diagnostics import DiagnosticEvent, DiagnosticSink, LoggingSink
from ._names import DEFAULT_DELIMITER
from ._nodes import Node, ResourceDirectory, ResourceFile
from ._path import glob_match, split_path
from ._typing import ResFSStatResult, ResFSStats

# ---------------------------------------------------------------------------
#  ResourceFileSystem
# ---------------------------------------------------------------------------


class ResourceFileSystem:
    """Read-only, path-addressed view over a resource catalog.

    The tree is built once, in the constructor, and never changes; all
    methods are safe to call from several threads without locking. Virtual
    paths are ``/``-separated and rooted at the namespace root, so the key
    ``App.Assets.Logo.png`` of namespace ``App`` is ``/Assets/Logo.png``.
    """

    def __init__(
        self,
        catalog: CatalogLookup,
        namespace_root: str | None = None,
        path_separator: str = "/",
        delimiter: str = DEFAULT_DELIMITER,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self._catalog: CatalogLookup = catalog
        self._sink: DiagnosticSink = sink if sink is not None else LoggingSink()
        self._diagnostics: list[DiagnosticEvent] = []
        self._root: ResourceDirectory = build_tree(
            catalog,
            namespace_root,
            path_separator=path_separator,
            delimiter=delimiter,
            sink=self._record,
        )

    @classmethod
    def from_keys(
        cls,
        keys: Iterable[str],
        namespace_root: str,
        mtime: float | None = None,
        **kwargs,
    ) -> ResourceFileSystem:
        return cls(MappingCatalog(keys, namespace_root, mtime), **kwargs)

    @classmethod
    def from_zip(
        cls, path: str | os.PathLike[str], namespace_root: str | None = None, **kwargs
    ) -> ResourceFileSystem:
        return cls(ZipCatalog(path, namespace_root), **kwargs)

    @classmethod
    def from_package(cls, package: str, **kwargs) -> ResourceFileSystem:
        return cls(PackageCatalog(package), **kwargs)

    def _record(self, event: DiagnosticEvent) -> None:
        self._diagnostics.append(event)
        self._sink(event)

    # -- properties --

    @property
    def root(self) -> ResourceDirectory:
        return self._root

    @property
    def catalog(self) -> CatalogLookup:
        return self._catalog

    @property
    def diagnostics(self) -> list[DiagnosticEvent]:
        """Events reported while the tree was built."""
        return list(self._diagnostics)

    # -- path helpers --

    def _resolve_directory(self, parts: list[str]) -> ResourceDirectory | None:
        current: ResourceDirectory | None = self._root
        for part in parts:
            if current is None:
                return None
            current = current.find_directory(part)
        return current

    def _resolve_path(self, parts: list[str]) -> Node | None:
        if not parts:
            return self._root
        parent = self._resolve_directory(parts[:-1])
        if parent is None:
            return None
        # a directory shadows a file of the same name
        directory = parent.find_directory(parts[-1])
        if directory is not None:
            return directory
        return parent.find_file(parts[-1])

    @staticmethod
    def _visible_files(directory: ResourceDirectory) -> list[str]:
        # files hidden behind a directory of the same name are not listed
        return [f.name for f in directory.files if directory.find_directory(f.name) is None]

    # -- public API --

    def get_directory(self, path: str) -> ResourceDirectory | None:
        try:
            parts = split_path(path)
        except ValueError:
            return None
        return self._resolve_directory(parts)

    def get_file(self, path: str) -> ResourceFile | None:
        try:
            parts = split_path(path)
        except ValueError:
            return None
        if not parts:
            return None
        parent = self._resolve_directory(parts[:-1])
        if parent is None:
            return None
        return parent.find_file(parts[-1])

    def exists(self, path: str) -> bool:
        try:
            parts = split_path(path)
        except ValueError:
            return False
        return self._resolve_path(parts) is not None

    def is_dir(self, path: str) -> bool:
        return self.get_directory(path) is not None

    def is_file(self, path: str) -> bool:
        return self.get_file(path) is not None

    def resolve_identifier(self, path: str) -> str | None:
        """Return the catalog key behind the file at *path*, or None."""
        node = self.get_file(path)
        return node.resolved_identifier if node is not None else None

    def listdir(self, path: str = "/") -> list[str]:
        parts = split_path(path)
        node = self._resolve_path(parts)
        if node is None:
            raise FileNotFoundError(f"No such directory: '{path}'")
        if not isinstance(node, ResourceDirectory):
            raise NotADirectoryError(f"Not a directory: '{path}'")
        return [d.name for d in node.directories] + self._visible_files(node)

    def stat(self, path: str) -> ResFSStatResult:
        parts = split_path(path)
        node = self._resolve_path(parts)
        if node is None:
            raise FileNotFoundError(f"No such file or directory: '{path}'")
        if isinstance(node, ResourceDirectory):
            return ResFSStatResult(
                name=node.name,
                is_dir=True,
                modified_at=node.modified_at,
                resolved_identifier=None,
                child_count=len(node),
            )
        return ResFSStatResult(
            name=node.name,
            is_dir=False,
            modified_at=node.modified_at,
            resolved_identifier=node.resolved_identifier,
            child_count=0,
        )

    def stats(self) -> ResFSStats:
        file_count = 0
        dir_count = 0
        for _directory, _dirs, files in self._root.walk():
            dir_count += 1
            file_count += len(files)
        return ResFSStats(
            namespace_root=self._root.name,
            key_count=len(self._catalog.list_all()),
            file_count=file_count,
            dir_count=dir_count,
            unresolved_count=sum(1 for e in self._diagnostics if e.kind == "unresolved"),
            modified_at=self._root.modified_at,
        )

    def walk(self, path: str = "/") -> Iterator[tuple[str, list[str], list[str]]]:
        """Recursively walk the directory tree (top-down)."""
        parts = split_path(path)
        node = self._resolve_path(parts)
        if node is None:
            raise FileNotFoundError(f"No such directory: '{path}'")
        if not isinstance(node, ResourceDirectory):
            raise NotADirectoryError(f"Not a directory: '{path}'")
        for directory, dirs, _files in node.walk():
            yield directory.virtual_path, [d.name for d in dirs], self._visible_files(directory)

    def glob(self, pattern: str) -> list[str]:
        """Return a sorted list of paths matching *pattern*.

        Supports `*` (single dir), `**` (recursive) and `?`; other characters,
        brackets included, match literally.
        """
        pattern = pattern.replace("\\", "/")
        if not pattern.startswith("/"):
            pattern = "/" + pattern
        parts = [p for p in pattern.split("/") if p]
        results: set[str] = set()
        self._glob_match(self._root, parts, 0, results)
        return sorted(results)

    def _glob_match(
        self,
        node: ResourceDirectory,
        parts: list[str],
        idx: int,
        results: set[str],
    ) -> None:
        if idx >= len(parts):
            return
        part = parts[idx]
        is_last = idx == len(parts) - 1

        if part == "**":
            # --- Zero-depth match: skip ** and try next part at current node ---
            if not is_last:
                self._glob_match(node, parts, idx + 1, results)
            else:
                self._collect_all_paths(node, results)
            # --- One-or-more depth match: recurse into subdirectories ---
            for child in node.directories:
                self._glob_match(child, parts, idx, results)
            return

        for child in node.enumerate_all():
            if not glob_match(child.name, part):
                continue
            if is_last:
                results.add(child.virtual_path)
            elif isinstance(child, ResourceDirectory):
                self._glob_match(child, parts, idx + 1, results)

    def _collect_all_paths(self, node: ResourceDirectory, results: set[str]) -> None:
        for child in node.enumerate_all():
            results.add(child.virtual_path)
            if isinstance(child, ResourceDirectory):
                self._collect_all_paths(child, results)

    def __repr__(self) -> str:
        return f"ResourceFileSystem(namespace_root={self._root.name!r}, catalog={self._catalog!r})"
