"""Stylesheet model, selector matching and style-tree construction."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union

from .dom import Element, Node

Specificity = tuple[int, int, int]


class Unit(enum.Enum):
    """Length units understood by the stylesheet model."""

    PX = "px"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


@dataclass(frozen=True)
class Keyword:
    """A bare identifier value such as ``auto``."""

    name: str


@dataclass(frozen=True)
class Length:
    """A numeric length with a unit."""

    value: float
    unit: Unit = Unit.PX

    def to_px(self) -> float:
        """Return the length in pixels."""
        if self.unit is Unit.PX:
            return self.value
        return 0.0


@dataclass(frozen=True)
class ColorValue:
    """A colour used as a property value."""

    color: Color


Value = Union[Keyword, Length, ColorValue]


@dataclass
class Declaration:
    """A ``name: value`` pair inside a rule."""

    name: str
    value: Value


@dataclass
class SimpleSelector:
    """A selector made of an optional tag, an optional id and classes."""

    tag_name: Optional[str] = None
    id: Optional[str] = None
    class_names: list[str] = field(default_factory=list)

    def specificity(self) -> Specificity:
        """Return the (ids, classes, tags) specificity triple."""
        return (
            1 if self.id is not None else 0,
            len(self.class_names),
            1 if self.tag_name is not None else 0,
        )

    def __str__(self) -> str:
        parts = [self.tag_name or ""]
        if self.id is not None:
            parts.append(f"#{self.id}")
        parts.extend(f".{name}" for name in self.class_names)
        return "".join(parts)


Selector = SimpleSelector
MatchedRule = tuple[Specificity, "Rule"]
PropertyMap = dict[str, Value]


@dataclass
class Rule:
    """Selectors together with the declarations they apply."""

    selectors: list[Selector] = field(default_factory=list)
    declarations: list[Declaration] = field(default_factory=list)


def _format_value(value: Value) -> str:
    if isinstance(value, Keyword):
        return value.name
    if isinstance(value, Length):
        suffix = "px" if value.unit is Unit.PX else ""
        return f"{value.value:g}{suffix}"
    if isinstance(value, ColorValue):
        c = value.color
        return f"#{c.r:x}{c.g:x}{c.b:x}"
    return ""


@dataclass
class Stylesheet:
    """An ordered list of rules."""

    rules: list[Rule] = field(default_factory=list)

    def render(self) -> str:
        """Return a human-readable listing of the rules."""
        out: list[str] = []
        for number, rule in enumerate(self.rules, start=1):
            out.append(f"Rule #{number}:\n")
            selectors = "".join(f"{selector} " for selector in rule.selectors)
            out.append(f"  Selectors: {selectors}\n")
            out.append("  Declarations:\n")
            out.extend(
                f"    {decl.name}: {_format_value(decl.value)}\n"
                for decl in rule.declarations
            )
            out.append("\n")
        return "".join(out)


@dataclass
class StyleNode:
    """A document node paired with the property values that apply to it."""

    node: Node
    specified_values: PropertyMap = field(default_factory=dict)
    children: list[StyleNode] = field(default_factory=list)


def matches(node: Node, selector: Selector) -> bool:
    """Tell whether ``selector`` matches ``node``."""
    if isinstance(selector, SimpleSelector):
        return matches_simple_selector(node, selector)
    return False


def matches_simple_selector(node: Node, selector: SimpleSelector) -> bool:
    """Tell whether a simple selector matches ``node``.

    A class matches when its name occurs anywhere in the ``class`` attribute.
    """
    if not isinstance(node, Element):
        return False
    if selector.tag_name is not None and node.tag_name != selector.tag_name:
        return False
    if selector.id is not None and node.attributes.get("id") != selector.id:
        return False
    classes = node.attributes.get("class")
    return all(
        classes is not None and name in classes for name in selector.class_names
    )


def match_rule(node: Node, rule: Rule) -> Optional[MatchedRule]:
    """Return the specificity of the first matching selector and the rule."""
    for selector in rule.selectors:
        if matches(node, selector):
            if isinstance(selector, SimpleSelector):
                return selector.specificity(), rule
            return (0, 0, 0), rule
    return None


def matching_rules(node: Node, stylesheet: Stylesheet) -> list[MatchedRule]:
    """Return every rule of ``stylesheet`` that applies to ``node``, in order."""
    return [
        matched
        for matched in (match_rule(node, rule) for rule in stylesheet.rules)
        if matched is not None
    ]


def specified_values(node: Node, stylesheet: Stylesheet) -> PropertyMap:
    """Return the property values for ``node``; more specific rules win."""
    values: PropertyMap = {}
    if not isinstance(node, Element):
        return values
    rules = sorted(matching_rules(node, stylesheet), key=lambda m: m[0])
    for _, rule in rules:
        for declaration in rule.declarations:
            values[declaration.name] = declaration.value
    return values


def style_tree(root: Node, stylesheet: Stylesheet) -> StyleNode:
    """Build a tree of styled nodes mirroring ``root``."""
    children = (
        [style_tree(child, stylesheet) for child in root.children]
        if isinstance(root, Element)
        else []
    )
    return StyleNode(root, specified_values(root, stylesheet), children)