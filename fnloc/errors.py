"""
Exceptions raised by fnloc.

The metric calculators never raise; these errors surface from reading,
parsing and discovering source files, and are turned into skipped files
or CLI error messages by the callers.
"""


class FnlocError(Exception):
    """Base class for all fnloc errors."""


class SourceReadError(FnlocError):
    """A source file could not be read or decoded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading {path}: {reason}")


class RustParseError(FnlocError):
    """The Rust source contains syntax the parser could not recover from."""

    def __init__(self, path: str, line: int, column: int):
        self.path = path
        self.line = line
        self.column = column
        super().__init__(f"Failed to parse Rust source {path} at {line}:{column}")


class DirectoryNotAccessibleError(FnlocError):
    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"Directory not accessible: {directory}")


class NoRustFilesError(FnlocError):
    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"No Rust files found in directory: {directory}")
