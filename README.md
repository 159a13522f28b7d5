# minibrowser

A small browser engine core. It covers the first stages of rendering a page:

- a parser for a simple subset of HTML, which builds a tree of `Element` and `Text` nodes
- a parser for a simple subset of CSS: simple selectors (tag, `#id`, `.class`, `*`), and declarations whose values are keywords, `px` lengths or `#rrggbb` colours
- selector matching with specificity, and the building of a style tree that gives each node its specified values

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
minibrowser
```

With no arguments this parses a built-in sample document and stylesheet, then prints the HTML tree and the parsed rules. Your own input can be given as two optional positional arguments, the HTML text first and the CSS text second:

```
minibrowser '<p class="intro">Hi</p>' 'p { color: #ff0000; }'
```

If either input cannot be parsed, the command prints `error: ...` and exits with status 1.

## Library use

```python
from minibrowser.html_parser import parse_html
from minibrowser.css_parser import parse_css
from minibrowser.css import style_tree, specified_values

root = parse_html('<html><body><h1 class="test">Hello</h1></body></html>')
print(root.render(0))

sheet = parse_css("h1 { color: #111111; } .test { padding: 20px; }")
print(sheet.render())

styled = style_tree(root, sheet)
```

Modules:

- `minibrowser.scanner`: `Scanner`, the character cursor both parsers build on, and `ParseError`, a subclass of `ValueError`.
- `minibrowser.dom`: the `Text` and `Element` node dataclasses, each with `render(indent)` giving an indented outline (for elements, only the `id` and `class` attributes are shown).
- `minibrowser.html_parser`: `HTMLParser` and `parse_html(source)`.
- `minibrowser.css`: the stylesheet model (`Unit`, `Color`, `Keyword`, `Length`, `ColorValue`, `Declaration`, `SimpleSelector`, `Rule`, `Stylesheet`, `StyleNode`) and the functions `matches`, `matches_simple_selector`, `match_rule`, `matching_rules`, `specified_values` and `style_tree`.
- `minibrowser.css_parser`: `CSSParser` and `parse_css(source)`.
- `minibrowser.cli`: `main(argv=None)`, the command above.

`parse_html` returns one node. When the input has more than one top-level node, they are wrapped in an `html` element. Malformed input raises `minibrowser.scanner.ParseError`.

The supported HTML is deliberately small. Every element must be closed with its matching end tag, attribute values must be quoted, and there are no comments, doctypes or self-closing tags.

In CSS, the selectors of each rule are kept in order of decreasing specificity. Where two rules set the same property, the rule with the higher specificity wins; between rules of equal specificity, the later one wins. A class selector matches when its name occurs anywhere within the element's `class` attribute. `Stylesheet.render` prints colour channels in hexadecimal without zero padding.

## What it does not do

The package stops at specified values. It does not compute inherited or cascaded values beyond that, and it has no layout, painting, networking or window: it cannot fetch or display a page.