"""Document tree nodes produced by the HTML parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass
class Text:
    """A run of character data."""

    text: str

    def render(self, indent: int = 0) -> str:
        """Return an indented, human-readable outline of this node."""
        return f"{' ' * indent}TEXT: {self.text}\n"


@dataclass
class Element:
    """An element with a tag name, attributes and child nodes."""

    tag_name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def render(self, indent: int = 0) -> str:
        """Return an indented outline of this element and its descendants."""
        pad = " " * indent
        lines = [f"{pad}ELEMENT: {self.tag_name}\n"]
        lines.extend(
            f"{pad} - {key}: {value}\n"
            for key, value in self.attributes.items()
            if key in ("id", "class")
        )
        lines.extend(child.render(indent + 2) for child in self.children)
        return "".join(lines)


Node = Union[Text, Element]