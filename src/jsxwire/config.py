"""Configuration shared by the code generator, module writer and build."""

from dataclasses import dataclass


@dataclass(frozen=True)
class JsxWireConfig:
    # One indentation unit of generated source
    indent: str = "  "
    # Extension of generated files
    extension: str = ".jsx"
    # Emit `import React from 'react';` at the top of each module
    react_import: bool = True
    # Templates picked up by `build_project`
    template_suffix: str = ".html"

    def __post_init__(self) -> None:
        if not self.indent or self.indent.strip():
            raise ValueError("indent must be a non-empty run of whitespace")
        if not self.extension.startswith("."):
            raise ValueError(f"extension must start with '.', got {self.extension!r}")
        if not self.template_suffix.startswith("."):
            raise ValueError(
                f"template_suffix must start with '.', got {self.template_suffix!r}"
            )
