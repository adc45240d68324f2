"""Lexer for `{{ expression }}` bindings."""

from dataclasses import dataclass
from typing import List, Tuple, Union


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Binding:
    """A single `{{ ... }}` span. `expression` is whitespace-trimmed."""

    expression: str


Part = Union[Literal, Binding]


@dataclass(frozen=True)
class Interpolation:
    """Structured view of a value split into literal text and bindings."""

    parts: Tuple[Part, ...]

    @property
    def is_single_span(self) -> bool:
        """True when the whole value is exactly one binding."""
        return len(self.parts) == 1 and isinstance(self.parts[0], Binding)

    @property
    def has_bindings(self) -> bool:
        return any(isinstance(part, Binding) for part in self.parts)

    @property
    def expressions(self) -> Tuple[str, ...]:
        return tuple(part.expression for part in self.parts if isinstance(part, Binding))


class MustacheInterpolationParser:
    """Splits a string on `{{ }}` delimiters.

    An unterminated `{{` and a span with a blank expression are kept as
    literal text, so every input string has a valid parse.
    """

    OPEN = "{{"
    CLOSE = "}}"

    def parse(self, value: str) -> Interpolation:
        parts: List[Part] = []
        literal: List[str] = []
        pos = 0

        while pos < len(value):
            start = value.find(self.OPEN, pos)
            if start == -1:
                break
            end = value.find(self.CLOSE, start + len(self.OPEN))
            if end == -1:
                break

            expression = value[start + len(self.OPEN) : end].strip()
            if not expression:
                literal.append(value[pos : end + len(self.CLOSE)])
            else:
                literal.append(value[pos:start])
                if any(literal):
                    parts.append(Literal("".join(literal)))
                literal = []
                parts.append(Binding(expression))
            pos = end + len(self.CLOSE)

        literal.append(value[pos:])
        if any(literal):
            parts.append(Literal("".join(literal)))

        return Interpolation(tuple(parts))
