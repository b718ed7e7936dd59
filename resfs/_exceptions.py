class ResFSConfigurationError(ValueError):
    """Raised when a tree cannot be built from the given arguments. Subclass of ValueError."""


class ResFSResourceNotResolvableError(LookupError):
    """Raised when no candidate identifier of a file exists in the catalog.

    The tree builder absorbs it and omits the file; it never reaches callers
    of the read API.
    """
    def __init__(self, name: str, candidates: tuple[str, ...]) -> None:
        self.name = name
        self.candidates = candidates
        super().__init__(
            f"Resource not found in catalog: {name!r} "
            f"(tried {', '.join(repr(c) for c in candidates)})."
        )
