import pytest

from stencil.events.property import CaptureMode
from stencil.templates.parser import MessageTemplateParser
from stencil.templates.tokens import PropertyToken, TextToken


@pytest.fixture
def parser():
    return MessageTemplateParser()


def test_parse_text_and_property(parser):
    template = parser.parse("Hello, {Thing}!")
    assert template.tokens == (
        TextToken("Hello, ", 0),
        PropertyToken("Thing", "{Thing}", start_index=7),
        TextToken("!", 14),
    )


def test_parse_empty_template(parser):
    template = parser.parse("")
    assert template.tokens == ()
    assert template.property_tokens == ()


def test_parse_is_idempotent(parser):
    text = "User {UserId} did {@Action,-10:x} at {0}"
    assert parser.parse(text) == parser.parse(text)
    assert parser.parse(text).tokens == MessageTemplateParser().parse(text).tokens


@pytest.mark.parametrize(
    "text,expected",
    [
        ("{Name:0.00}", PropertyToken("Name", "{Name:0.00}", format="0.00")),
        ("{Name,8}", PropertyToken("Name", "{Name,8}", alignment=8)),
        ("{Name,-8}", PropertyToken("Name", "{Name,-8}", alignment=-8)),
        (
            "{Name,-8:x}",
            PropertyToken("Name", "{Name,-8:x}", format="x", alignment=-8),
        ),
        (
            "{@Order}",
            PropertyToken("Order", "{@Order}", capture=CaptureMode.DESTRUCTURE),
        ),
        ("{$Order}", PropertyToken("Order", "{$Order}", capture=CaptureMode.STRINGIFY)),
        ("{user_id}", PropertyToken("user_id", "{user_id}")),
        ("{0}", PropertyToken("0", "{0}")),
    ],
)
def test_parse_single_placeholder(parser, text, expected):
    assert parser.parse(text).tokens == (expected,)


def test_format_may_contain_comma(parser):
    (token,) = parser.parse("{Amount:,}").tokens
    assert token == PropertyToken("Amount", "{Amount:,}", format=",")


@pytest.mark.parametrize(
    "text",
    [
        "{",
        "{Name",
        "Hello {Name",
        "{}",
        "{ }",
        "{@}",
        "{Na me}",
        "{Name-1}",
        "{Name,}",
        "{Name,0}",
        "{Name,x}",
        "{Name,5-}",
        "{Name,²}",
        "{Name,:x}",
    ],
)
def test_malformed_placeholders_are_text(parser, text):
    template = parser.parse(text)
    assert template.property_tokens == ()
    assert "".join(t.text for t in template.tokens) == text


def test_unterminated_brace_keeps_preceding_property(parser):
    template = parser.parse("{A} and {B")
    assert [t.property_name for t in template.property_tokens] == ["A"]
    assert template.tokens[-1] == TextToken("{B", 8)


def test_escaped_braces(parser):
    template = parser.parse("{{literal}} {Name}")
    assert template.tokens[0] == TextToken("{literal} ", 0)
    assert template.property_tokens[0].property_name == "Name"


def test_lone_closing_brace_is_text(parser):
    template = parser.parse("a } b")
    assert template.tokens == (TextToken("a } b", 0),)


def test_positional_detection(parser):
    assert parser.parse("{0} and {1}").is_positional
    assert not parser.parse("{0} and {Name}").is_positional
    assert not parser.parse("no properties").is_positional
    (token,) = parser.parse("{12}").property_tokens
    assert token.position == 12
    (named,) = parser.parse("{Name}").property_tokens
    assert named.position is None


def test_unicode_property_names(parser):
    (token,) = parser.parse("{Größe}").property_tokens
    assert token.property_name == "Größe"
