"""Tests for building a stylesheet tree from CSS source."""

import logging

import pytest

from cssdedupe.errors import ParseError
from cssdedupe.model.tree import AtRule, Comment, Declaration, Rule
from cssdedupe.stylesheet import parse_stylesheet


# ---------------------------------------------------------------------------
# Rules and declarations
# ---------------------------------------------------------------------------


class TestRules:
    def test_single_rule(self):
        sheet = parse_stylesheet(".button { color: red; color: blue; }")
        assert len(sheet.nodes) == 1
        rule = sheet.nodes[0]
        assert isinstance(rule, Rule)
        assert rule.selector == ".button"
        assert [(d.prop, d.value) for d in rule.declarations()] == [("color", "red"), ("color", "blue")]
        assert rule.parent is sheet

    def test_important_flag(self):
        rule = parse_stylesheet(".a { color: red !important; margin: 0; }").nodes[0]
        color, margin = rule.declarations()
        assert color.important is True
        assert color.value == "red"
        assert margin.important is False

    def test_value_trimmed(self):
        rule = parse_stylesheet(".a {   padding :   1px  2px   ; }").nodes[0]
        assert rule.declarations()[0].value == "1px  2px"

    def test_property_name_verbatim(self):
        rule = parse_stylesheet(".a { -webkit-Transform: none; --Main-Color: red; }").nodes[0]
        assert [d.prop for d in rule.declarations()] == ["-webkit-Transform", "--Main-Color"]

    def test_complex_selectors(self):
        sheet = parse_stylesheet('.button:hover::before { content: "x"; } input[type="text"] { border: 0; }')
        assert [r.selector for r in sheet.nodes] == ['.button:hover::before', 'input[type="text"]']

    def test_function_values(self):
        rule = parse_stylesheet(".a { width: calc(100% - 20px); color: rgba(0, 0, 0, 0.5); }").nodes[0]
        assert [d.value for d in rule.declarations()] == ["calc(100% - 20px)", "rgba(0, 0, 0, 0.5)"]

    def test_empty_rule(self):
        rule = parse_stylesheet(".empty {\n\n}").nodes[0]
        assert rule.nodes == []

    def test_nested_rule(self):
        rule = parse_stylesheet(".a { color: red; &:hover { color: blue; } margin: 0; }").nodes[0]
        assert [n.type for n in rule.nodes] == ["decl", "rule", "decl"]
        nested = rule.nodes[1]
        assert nested.selector == "&:hover"
        assert nested.parent is rule
        assert [d.prop for d in nested.declarations()] == ["color"]


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class TestComments:
    def test_top_level_comment(self):
        sheet = parse_stylesheet("/* header */ .a { color: red; }")
        assert isinstance(sheet.nodes[0], Comment)
        assert sheet.nodes[0].text == " header "

    def test_comment_inside_rule(self):
        rule = parse_stylesheet(".a { /* note */ color: red; }").nodes[0]
        assert isinstance(rule.nodes[0], Comment)
        assert isinstance(rule.nodes[1], Declaration)


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


class TestAtRules:
    def test_media_contains_rules(self):
        sheet = parse_stylesheet("@media (max-width: 768px) { .r { color: red; } }")
        media = sheet.nodes[0]
        assert isinstance(media, AtRule)
        assert media.name == "media"
        assert media.params == "(max-width: 768px)"
        assert isinstance(media.nodes[0], Rule)
        assert media.nodes[0].parent is media

    def test_keyframes_steps_are_rules(self):
        sheet = parse_stylesheet("@-webkit-keyframes slide { 0% { left: 0; } to { left: 10px; } }")
        frames = sheet.nodes[0]
        assert frames.name == "-webkit-keyframes"
        assert [r.selector for r in frames.nodes] == ["0%", "to"]

    def test_font_face_contains_declarations(self):
        sheet = parse_stylesheet('@font-face { font-family: "Foo"; src: url(foo.woff); }')
        face = sheet.nodes[0]
        assert [d.prop for d in face.declarations()] == ["font-family", "src"]

    def test_statement_at_rule(self):
        sheet = parse_stylesheet('@import "styles.css";')
        imp = sheet.nodes[0]
        assert imp.name == "import"
        assert imp.params == '"styles.css"'
        assert imp.nodes is None
        assert not imp.has_block


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestParseErrors:
    def test_missed_semicolon(self):
        source = ".malformed {\n  color: red\n  color: blue;\n}"
        with pytest.raises(ParseError, match="Missed semicolon") as exc_info:
            parse_stylesheet(source)
        assert exc_info.value.line == 3

    def test_custom_property_may_contain_colons(self):
        rule = parse_stylesheet(".a {\n  --raw: a\n  b: c;\n}").nodes[0]
        assert rule.declarations()[0].prop == "--raw"

    def test_ie_filter_progid_allowed(self):
        source = ".a {\n  filter:\n    progid:DXImageTransform.Microsoft.gradient(startColorstr='#000');\n}"
        decl = parse_stylesheet(source).nodes[0].declarations()[0]
        assert decl.prop == "filter"
        assert decl.value.startswith("progid:DXImageTransform.Microsoft.gradient(")

    def test_invalid_declaration_dropped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="cssdedupe.stylesheet.parser"):
            rule = parse_stylesheet(".a { 12: x; color: red; }").nodes[0]
        assert [(d.prop, d.value) for d in rule.declarations()] == [("color", "red")]
        assert "Dropping invalid declaration" in caplog.text

    def test_missing_colon_dropped(self):
        rule = parse_stylesheet(".a { color red; margin: 0; }").nodes[0]
        assert [d.prop for d in rule.declarations()] == ["margin"]

    def test_unterminated_rule(self):
        with pytest.raises(ParseError):
            parse_stylesheet(".a { color: red; } .b")


class TestEmptyInput:
    def test_empty_string(self):
        assert parse_stylesheet("").nodes == []

    def test_whitespace_only(self):
        assert parse_stylesheet("   \n\t  ").nodes == []
