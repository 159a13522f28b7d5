"""A toy browser engine: HTML and CSS parsing, selector matching and style trees."""

__version__ = "0.1.0"
__all__ = ["scanner", "dom", "html_parser", "css", "css_parser", "cli"]