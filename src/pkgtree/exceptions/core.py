"""
Exception classes for package loading.

This module defines specific exception types for the three ways a package
request can fail: the path does not resolve to a directory, a source file in
the directory does not parse, or the parsed packages do not reduce to exactly
one package of the requested role.
"""

from collections.abc import Iterable, Sequence

from pkgtree.core.positions import Position


class PkgTreeError(Exception):
    """Base exception for all pkgtree errors."""

    pass


class PathResolutionError(PkgTreeError):
    """Raised when a package path does not resolve to a source directory."""

    def __init__(self, path: str, reason: str):
        """
        Initialize the exception.

        Params:
            path: The package path that could not be resolved
            reason: Why the path could not be resolved
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot resolve package path '{path}': {reason}")


class ParseError(PkgTreeError):
    """Raised when a source file fails to parse."""

    def __init__(
        self,
        message: str,
        position: Position,
        additional_errors: Sequence["ParseError"] = (),
    ):
        """
        Initialize the exception.

        Params:
            message: Description of the syntax problem
            position: Location of the problem (filename, line and column)
            additional_errors: Other parse failures from the same directory load
        """
        self.message = message
        self.position = position
        self.additional_errors = tuple(additional_errors)
        super().__init__(f"{position}: {message}")

    @property
    def filename(self) -> str:
        """Name of the file that failed to parse."""
        return self.position.filename

    def with_additional(self, errors: Iterable["ParseError"]) -> "ParseError":
        """Return a copy of this error carrying the given sibling failures."""
        return ParseError(self.message, self.position, tuple(errors))


class SelectionError(PkgTreeError):
    """Raised when role filtering does not leave exactly one package."""

    def __init__(self, message: str, role: str):
        """
        Initialize the exception.

        Params:
            message: Error message describing the selection failure
            role: Name of the requested role
        """
        self.role = role
        super().__init__(message)


class TooManyPackagesError(SelectionError):
    """Raised when more than one package matches the requested role."""

    def __init__(self, names: Iterable[str], role: str):
        """
        Initialize the exception.

        Params:
            names: Identifiers of every package that matched
            role: Name of the requested role
        """
        self.names = tuple(sorted(names))
        super().__init__(
            f"More than one {role} package found in a directory: {', '.join(self.names)}",
            role,
        )


class NoMatchingPackageError(SelectionError):
    """Raised when no package matches the requested role."""

    def __init__(self, role: str, available: Iterable[str] = ()):
        """
        Initialize the exception.

        Params:
            role: Name of the requested role
            available: Identifiers of the packages that were found but did not match
        """
        self.available = tuple(sorted(available))
        if self.available:
            message = f"No {role} package found (found: {', '.join(self.available)})"
        else:
            message = f"No {role} package found (directory has no source files)"
        super().__init__(message, role)
