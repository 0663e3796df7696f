"""
Error types for scoped attribute resolution.

Resolution misses are never errors; they surface as None. Only missing
collaborators, import declaration problems and bad configuration raise.
"""


class ScopedAttrError(Exception):
    """Base exception for all scopedattr errors"""
    def __init__(self, message: str, error_code: str = "E0000"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class MissingContextError(ScopedAttrError):
    """
    A required collaborator is absent: the resolution context itself, or the
    scope storage it is expected to carry. Resolution cannot proceed.
    """
    def __init__(self, message: str):
        super().__init__(message, error_code="E0001")


class ScopeUnavailableError(ScopedAttrError):
    """Direct access to a scope tier that is not currently active (e.g. no session)."""
    def __init__(self, scope):
        super().__init__(f"Scope '{scope}' is not active", error_code="E0002")
        self.scope = scope


class ImportResolutionError(ScopedAttrError):
    """An import declaration is malformed or names something that cannot be loaded."""
    def __init__(self, message: str, error_code: str = "E0101"):
        super().__init__(message, error_code=error_code)


class ImportConflictError(ImportResolutionError):
    """Two import declarations bind the same simple name to different targets."""
    def __init__(self, name: str, existing: str, requested: str):
        super().__init__(
            f"Import of '{requested}' conflicts with previous import of '{existing}' for name '{name}'",
            error_code="E0102",
        )
        self.name = name


class AmbiguousImportError(ImportResolutionError):
    """A simple class name is found in more than one imported package."""
    def __init__(self, name: str, candidates):
        joined = ", ".join(candidates)
        super().__init__(f"Class name '{name}' is ambiguous: {joined}", error_code="E0103")
        self.name = name
        self.candidates = list(candidates)


class ResolverConfigurationError(ScopedAttrError):
    """The resolver was constructed with an unusable configuration."""
    def __init__(self, message: str):
        super().__init__(message, error_code="E0201")
