import pytest

from minibrowser.dom import Element, Text
from minibrowser.html_parser import HTMLParser, parse_html
from minibrowser.scanner import ParseError

SAMPLE = (
    '<html><body><h1 class="test">Hello World</h1>'
    '<span id="highlighted">!!!!!</span> I am well!</body></html>'
)


def test_sample_document_structure():
    root = parse_html(SAMPLE)
    expected = Element(
        "html",
        {},
        [
            Element(
                "body",
                {},
                [
                    Element("h1", {"class": "test"}, [Text("Hello World")]),
                    Element("span", {"id": "highlighted"}, [Text("!!!!!")]),
                    Text("I am well!"),
                ],
            )
        ],
    )
    assert root == expected


def test_sample_document_render():
    lines = parse_html(SAMPLE).render().splitlines()
    assert lines == [
        "ELEMENT: html",
        "  ELEMENT: body",
        "    ELEMENT: h1",
        "     - class: test",
        "      TEXT: Hello World",
        "    ELEMENT: span",
        "     - id: highlighted",
        "      TEXT: !!!!!",
        "    TEXT: I am well!",
    ]


def test_parser_class_matches_function():
    assert HTMLParser(SAMPLE).parse() == parse_html(SAMPLE)


def test_single_root_is_returned_unwrapped():
    assert parse_html("<p>x</p>") == Element("p", {}, [Text("x")])


def test_multiple_roots_are_wrapped_in_html():
    root = parse_html("<p>a</p><p>b</p>")
    assert root == Element(
        "html", {}, [Element("p", {}, [Text("a")]), Element("p", {}, [Text("b")])]
    )


def test_empty_input_gives_empty_html_element():
    assert parse_html("") == Element("html", {}, [])


def test_plain_text_input():
    assert parse_html("just text") == Text("just text")


def test_leading_whitespace_before_text_is_skipped():
    root = parse_html("<p>   hi there </p>")
    assert root.children == [Text("hi there ")]


def test_single_quoted_attribute_and_whitespace():
    root = parse_html("<a  href='x' \n id=\"y\" >t</a>")
    assert root.attributes == {"href": "x", "id": "y"}


def test_repeated_attribute_keeps_last_value():
    root = parse_html('<a id="one" id="two"></a>')
    assert root.attributes == {"id": "two"}


def test_empty_element():
    assert parse_html("<div></div>") == Element("div")


def test_mismatched_closing_tag_raises():
    with pytest.raises(ParseError, match="expected 'p'"):
        parse_html("<p>text</div>")


def test_missing_closing_tag_raises():
    with pytest.raises(ParseError, match="expected '</'"):
        parse_html("<p>text")


def test_unquoted_attribute_raises():
    with pytest.raises(ParseError, match="start with a quote"):
        parse_html("<p id=x></p>")


def test_mismatched_quotes_raise():
    with pytest.raises(ParseError, match="matching quote"):
        parse_html("<p id=\"x></p>")


def test_attribute_without_equals_raises():
    with pytest.raises(ParseError, match="expected '='"):
        parse_html("<p hidden></p>")


def test_unterminated_start_tag_raises():
    with pytest.raises(ParseError):
        parse_html("<p")