"""Command line entry point: parse a document and a stylesheet and print both."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .css_parser import parse_css
from .html_parser import parse_html
from .scanner import ParseError

DEFAULT_HTML = (
    '<html><body><h1 class="test">Hello World</h1>'
    '<span id="highlighted">!!!!!</span> I am well!</body></html>'
)
DEFAULT_CSS = (
    "h1 { color: #111111; } .test { margin: auto; padding: 20px; } "
    "h1.test {color:red;} #highlighted.blue{color:blue;  font-size: 20px;}"
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the parsed HTML tree and stylesheet; return an exit status."""
    arg_parser = argparse.ArgumentParser(
        prog="minibrowser",
        description="Parse an HTML document and a CSS stylesheet and print them.",
    )
    arg_parser.add_argument("html", nargs="?", default=DEFAULT_HTML)
    arg_parser.add_argument("css", nargs="?", default=DEFAULT_CSS)
    args = arg_parser.parse_args(argv)

    try:
        node = parse_html(args.html)
        stylesheet = parse_css(args.css)
    except ParseError as exc:
        print(f"error: {exc}")
        return 1

    print("HTML Tree Structure:")
    print(node.render(), end="")
    print("\nCSS Stylesheet:")
    print(stylesheet.render(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())