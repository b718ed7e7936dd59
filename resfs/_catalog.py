"""Backing catalogs: flat listings of dot-delimited resource keys.

A catalog answers two questions while a tree is built: which keys exist
(:meth:`list_all`) and whether one particular key exists (:meth:`exists`).
It also reports one modification time for everything it holds.
"""

from __future__ import annotations

import importlib
import importlib.resources
import os
import time
import zipfile
from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from ._exceptions import ResFSConfigurationError


@runtime_checkable
class CatalogLookup(Protocol):
    namespace_root: str

    def exists(self, key: str) -> bool: ...

    def list_all(self) -> list[str]: ...

    def origin_mtime(self) -> float: ...


class _KeySetCatalog:
    """Shared storage for catalogs whose keys are known up front."""

    def __init__(self, keys: Iterable[str], namespace_root: str, mtime: float) -> None:
        self.namespace_root: str = namespace_root
        # dict keeps insertion order and drops duplicates
        self._keys: dict[str, None] = dict.fromkeys(keys)
        self._mtime: float = mtime

    def exists(self, key: str) -> bool:
        return key in self._keys

    def list_all(self) -> list[str]:
        return list(self._keys)

    def origin_mtime(self) -> float:
        return self._mtime

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(namespace_root={self.namespace_root!r}, keys={len(self._keys)})"


class MappingCatalog(_KeySetCatalog):
    """Catalog over an in-memory collection of keys.

    *keys* may be any iterable of strings, including the keys of a mapping.
    The modification time defaults to the moment the catalog was created.
    """

    def __init__(
        self,
        keys: Iterable[str],
        namespace_root: str,
        mtime: float | None = None,
    ) -> None:
        super().__init__(keys, namespace_root, time.time() if mtime is None else mtime)


class ZipCatalog(_KeySetCatalog):
    """Catalog over the members of a ZIP archive.

    ``assets/img/logo.png`` inside ``bundle.zip`` becomes the key
    ``bundle.assets.img.logo.png``. Directory entries are skipped.
    """

    def __init__(self, path: str | os.PathLike[str], namespace_root: str | None = None) -> None:
        path = os.fspath(path)
        try:
            with zipfile.ZipFile(path, "r") as zf:
                members = [zi.filename for zi in zf.infolist() if not zi.is_dir()]
            mtime = os.stat(path).st_mtime
        except (zipfile.BadZipFile, OSError) as e:
            raise ResFSConfigurationError(f"Cannot open ZIP file: {e}") from e
        if namespace_root is None:
            namespace_root = os.path.splitext(os.path.basename(path))[0]
        self.path: str = path
        super().__init__(
            (_dotted_key(namespace_root, m.strip("/").split("/")) for m in members),
            namespace_root,
            mtime,
        )


class PackageCatalog(_KeySetCatalog):
    """Catalog over the data files shipped inside an importable package.

    ``mypkg/assets/logo.png`` becomes ``mypkg.assets.logo.png``. Python
    sources and bytecode caches are left out unless *include_code* is set.
    """

    def __init__(self, package: str, include_code: bool = False) -> None:
        try:
            module = importlib.import_module(package)
            root = importlib.resources.files(package)
        except (ImportError, TypeError) as e:
            raise ResFSConfigurationError(f"Cannot load package {package!r}: {e}") from e
        origin = getattr(module, "__file__", None)
        package_dir = os.path.dirname(origin) if origin else ""
        # packages loaded from a zip have no directory to stat
        mtime = os.path.getmtime(package_dir) if package_dir and os.path.isdir(package_dir) else 0.0
        self.package: str = package
        super().__init__(
            (_dotted_key(package, parts) for parts in _iter_resources(root, (), include_code)),
            package,
            mtime,
        )


def _dotted_key(namespace_root: str, parts: Iterable[str]) -> str:
    return ".".join([namespace_root, *parts])


def _iter_resources(node, prefix: tuple[str, ...], include_code: bool) -> Iterator[tuple[str, ...]]:
    for child in sorted(node.iterdir(), key=lambda c: c.name):
        if child.is_dir():
            if child.name == "__pycache__":
                continue
            yield from _iter_resources(child, prefix + (child.name,), include_code)
        elif include_code or not child.name.endswith((".py", ".pyc")):
            yield prefix + (child.name,)
