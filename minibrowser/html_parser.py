"""A small parser for a strict subset of HTML."""

from __future__ import annotations

from .dom import Element, Node, Text
from .scanner import ParseError, Scanner


def _is_name_char(char: str) -> bool:
    return char.isascii() and char.isalnum()


class HTMLParser(Scanner):
    """Parses elements with quoted attributes and text into a node tree."""

    def parse(self) -> Node:
        """Parse the whole input.

        A single top-level node is returned as is; otherwise the nodes are
        wrapped in an ``html`` element.
        """
        nodes = self._parse_nodes()
        if len(nodes) == 1:
            return nodes[0]
        return Element("html", {}, nodes)

    def _parse_name(self) -> str:
        return self.consume_while(_is_name_char)

    def _parse_nodes(self) -> list[Node]:
        nodes: list[Node] = []
        while True:
            self.consume_whitespace()
            if self.eof() or self.starts_with("</"):
                return nodes
            nodes.append(self._parse_node())

    def _parse_node(self) -> Node:
        if self.starts_with("<"):
            return self._parse_element()
        return Text(self.consume_while(lambda c: c != "<"))

    def _parse_element(self) -> Element:
        self.expect("<")
        tag_name = self._parse_name()
        attributes = self._parse_attributes()
        self.expect(">")

        children = self._parse_nodes()

        self.expect("</")
        self.expect(tag_name)
        self.expect(">")
        return Element(tag_name, attributes, children)

    def _parse_attributes(self) -> dict[str, str]:
        attributes: dict[str, str] = {}
        while True:
            self.consume_whitespace()
            if self.peek() == ">":
                return attributes
            name = self._parse_name()
            self.expect("=")
            attributes[name] = self._parse_attribute_value()

    def _parse_attribute_value(self) -> str:
        open_quote = self.consume()
        if open_quote not in ('"', "'"):
            raise ParseError("Expected attribute value to start with a quote")
        value = self.consume_while(lambda c: c != open_quote)
        close_quote = self.consume()
        if close_quote != open_quote:
            raise ParseError(
                "Expected attribute value to end with a matching quote "
                f"(expected '{open_quote}', got '{close_quote}')"
            )
        return value


def parse_html(source: str) -> Node:
    """Parse ``source`` and return the root node."""
    return HTMLParser(source).parse()