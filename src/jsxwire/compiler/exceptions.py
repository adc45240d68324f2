"""Errors raised while parsing templates and generating JSX."""

from typing import Optional


class JsxWireError(Exception):
    """Base class for all jsxwire errors."""


class JsxWireSyntaxError(JsxWireError):
    """Template markup could not be turned into a tree."""

    def __init__(
        self, message: str, file_path: Optional[str] = None, line: Optional[int] = None
    ) -> None:
        self.message = message
        self.file_path = file_path
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        if self.file_path and self.line:
            return f"{self.file_path}:{self.line}: {self.message}"
        if self.file_path:
            return f"{self.file_path}: {self.message}"
        if self.line:
            return f"line {self.line}: {self.message}"
        return self.message


class MalformedNodeError(JsxWireError):
    """A node violates the structural contract of the renderer.

    Raised before any output is produced, e.g. for a control element with more
    than one child or a spread attribute whose value is not a single binding.
    """

    def __init__(self, message: str, node_name: Optional[str] = None) -> None:
        self.node_name = node_name
        if node_name:
            message = f"<{node_name}>: {message}"
        super().__init__(message)
