from typing import TypedDict


class ResFSStats(TypedDict):
    namespace_root: str
    key_count: int
    file_count: int
    dir_count: int
    unresolved_count: int
    modified_at: float


class ResFSStatResult(TypedDict):
    name: str
    is_dir: bool
    modified_at: float
    resolved_identifier: str | None
    child_count: int
