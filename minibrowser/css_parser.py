"""A small parser for a subset of CSS."""

from __future__ import annotations

import re

from .css import (
    Color,
    ColorValue,
    Declaration,
    Keyword,
    Length,
    Rule,
    Selector,
    SimpleSelector,
    Stylesheet,
    Unit,
    Value,
)
from .scanner import ParseError, Scanner

_NUMBER = re.compile(r"\d*(?:\.\d*)?")
_HEX = re.compile(r"\s*([0-9a-fA-F]+)")


def _is_identifier_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in ("-", "_")


class CSSParser(Scanner):
    """Parses rules of simple selectors and declarations into a stylesheet."""

    def parse(self) -> Stylesheet:
        """Parse the whole input into a :class:`Stylesheet`."""
        return Stylesheet(self._parse_rules())

    def _parse_rules(self) -> list[Rule]:
        rules: list[Rule] = []
        while True:
            self.consume_whitespace()
            if self.eof():
                return rules
            rules.append(self._parse_rule())

    def _parse_rule(self) -> Rule:
        selectors = self._parse_selectors()
        declarations = self._parse_declarations()
        return Rule(selectors, declarations)

    def _parse_identifier(self) -> str:
        return self.consume_while(_is_identifier_char)

    def _parse_simple_selector(self) -> SimpleSelector:
        selector = SimpleSelector()
        while not self.eof():
            char = self.peek()
            if char == "#":
                self.consume()
                selector.id = self._parse_identifier()
            elif char == ".":
                self.consume()
                selector.class_names.append(self._parse_identifier())
            elif char == "*":
                self.consume()
            elif _is_identifier_char(char):
                selector.tag_name = self._parse_identifier()
            else:
                break
        return selector

    def _parse_selectors(self) -> list[Selector]:
        selectors: list[Selector] = []
        while True:
            selectors.append(self._parse_simple_selector())
            self.consume_whitespace()
            char = self.peek()
            if char == ",":
                self.consume()
                self.consume_whitespace()
            elif char == "{":
                break
            else:
                raise ParseError(f"Unexpected character {char} in selector list")
        selectors.sort(key=lambda s: s.specificity(), reverse=True)
        return selectors

    def _parse_declarations(self) -> list[Declaration]:
        self.expect("{")
        declarations: list[Declaration] = []
        while True:
            self.consume_whitespace()
            if self.peek() == "}":
                self.consume()
                return declarations
            declarations.append(self._parse_declaration())

    def _parse_declaration(self) -> Declaration:
        name = self._parse_identifier()
        self.consume_whitespace()
        self.expect(":")
        self.consume_whitespace()
        value = self._parse_value()
        self.consume_whitespace()
        self.expect(";")
        return Declaration(name, value)

    def _parse_value(self) -> Value:
        char = self.peek()
        if "0" <= char <= "9" and char != "":
            return self._parse_length()
        if char == "#":
            return self._parse_color()
        return Keyword(self._parse_identifier())

    def _parse_length(self) -> Length:
        value = self._parse_float()
        return Length(value, self._parse_unit())

    def _parse_float(self) -> float:
        text = self.consume_while(lambda c: c.isascii() and (c.isdigit() or c == "."))
        number = _NUMBER.match(text).group(0)
        try:
            return float(number)
        except ValueError:
            raise ParseError(f"Invalid number: {text}") from None

    def _parse_unit(self) -> Unit:
        unit = self._parse_identifier().lower()
        if unit == "px":
            return Unit.PX
        raise ParseError(f"Unrecognized unit: {unit}")

    def _parse_color(self) -> ColorValue:
        self.expect("#")
        r = self._parse_hex_pair()
        g = self._parse_hex_pair()
        b = self._parse_hex_pair()
        return ColorValue(Color(r, g, b, 255))

    def _parse_hex_pair(self) -> int:
        if self.pos + 2 > len(self.source):
            raise ParseError("Unexpected end of input in color hex value")
        pair = self.consume() + self.consume()
        match = _HEX.match(pair)
        if match is None:
            raise ParseError(f"Invalid hex color value: {pair}")
        return int(match.group(1), 16) & 0xFF


def parse_css(source: str) -> Stylesheet:
    """Parse ``source`` into a :class:`Stylesheet`."""
    return CSSParser(source).parse()