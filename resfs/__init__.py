from ._builder import build_directory, build_tree
from ._catalog import CatalogLookup, MappingCatalog, PackageCatalog, ZipCatalog
from ._diagnostics import CollectingSink, DiagnosticEvent, DiagnosticSink, LoggingSink
from ._exceptions import ResFSConfigurationError, ResFSResourceNotResolvableError
from ._fs import ResourceFileSystem
from ._names import group_by_first_token, normalize_names, partition_names
from ._nodes import Node, ResourceDirectory, ResourceFile
from ._resolver import candidate_identifiers, resolve_identifier
from ._typing import ResFSStatResult, ResFSStats

__all__ = [
    "ResourceFileSystem",
    "ResourceDirectory",
    "ResourceFile",
    "Node",
    "build_tree",
    "build_directory",
    "CatalogLookup",
    "MappingCatalog",
    "ZipCatalog",
    "PackageCatalog",
    "DiagnosticEvent",
    "DiagnosticSink",
    "LoggingSink",
    "CollectingSink",
    "ResFSConfigurationError",
    "ResFSResourceNotResolvableError",
    "ResFSStats",
    "ResFSStatResult",
    "normalize_names",
    "partition_names",
    "group_by_first_token",
    "candidate_identifiers",
    "resolve_identifier",
]
__version__ = "0.1.0"
