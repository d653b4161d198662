"""Tests for extract_fields.roles module."""

from extract_fields.roles import (
    FIELD_RULES,
    RULES_BY_NAME,
    author_title_html,
    body_text_html,
    first_text_run,
    joined_text,
)
from parse_snippets.models import CharacterRange, ParagraphRange


def _paragraph(*ranges: CharacterRange, style: str = "") -> ParagraphRange:
    return ParagraphRange(applied_style=style, character_ranges=list(ranges))


class TestFirstTextRun:
    def test_returns_first_run_of_first_range(self) -> None:
        paragraph = _paragraph(CharacterRange(["Jordan", " Lee"]), CharacterRange(["ignored"]))
        assert first_text_run(paragraph) == "Jordan"

    def test_empty_paragraph_returns_empty(self) -> None:
        assert first_text_run(_paragraph()) == ""

    def test_range_without_runs_returns_empty(self) -> None:
        assert first_text_run(_paragraph(CharacterRange([]))) == ""


class TestJoinedText:
    def test_concatenates_all_runs_without_formatting(self) -> None:
        paragraph = _paragraph(
            CharacterRange(["Storm ", "Hits "]),
            CharacterRange(["Campus"], font_style="Italic"),
        )
        assert joined_text(paragraph) == "Storm Hits Campus"


class TestAuthorTitleHtml:
    def test_regular_ranges_are_emphasized(self) -> None:
        paragraph = _paragraph(
            CharacterRange(["Senior Reporter, "]),
            CharacterRange(["The Polytechnic"], font_style="Regular"),
        )
        assert author_title_html(paragraph) == "Senior Reporter, <i>The Polytechnic</i>"

    def test_italic_ranges_are_left_alone(self) -> None:
        paragraph = _paragraph(CharacterRange(["Staff Writer"], font_style="Italic"))
        assert author_title_html(paragraph) == "Staff Writer"


class TestBodyTextHtml:
    def test_tab_splits_paragraphs(self) -> None:
        paragraph = _paragraph(CharacterRange(["A\tB"]))
        assert body_text_html(paragraph) == "<p>A</p><p>B</p>"

    def test_italic_ranges_are_emphasized(self) -> None:
        paragraph = _paragraph(
            CharacterRange(["Read "]),
            CharacterRange(["The Polytechnic"], font_style="Italic"),
            CharacterRange([" today."]),
        )
        assert body_text_html(paragraph) == "<p>Read <i>The Polytechnic</i> today.</p>"

    def test_tab_inside_italic_range(self) -> None:
        paragraph = _paragraph(CharacterRange(["x\ty"], font_style="Italic"))
        assert body_text_html(paragraph) == "<p><i>x</p><p>y</i></p>"

    def test_empty_paragraph_renders_empty_container(self) -> None:
        assert body_text_html(_paragraph()) == "<p></p>"


class TestRoleTable:
    def test_every_field_has_one_rule(self) -> None:
        assert set(RULES_BY_NAME) == {
            "author_name",
            "author_title",
            "kicker",
            "body_html",
            "headline",
            "photo_byline",
            "photo_caption",
        }
        assert len(FIELD_RULES) == len(RULES_BY_NAME)

    def test_exact_match_rules(self) -> None:
        assert RULES_BY_NAME["author_name"].matches("ParagraphStyle/Author")
        assert not RULES_BY_NAME["author_name"].matches("ParagraphStyle/Author Job")
        assert RULES_BY_NAME["photo_caption"].matches("ParagraphStyle/Caption")
        assert not RULES_BY_NAME["photo_caption"].matches("ParagraphStyle/Caption Bold")

    def test_headline_matches_substring(self) -> None:
        rule = RULES_BY_NAME["headline"]
        assert rule.matches("ParagraphStyle/Headline Default")
        assert rule.matches("ParagraphStyle/News%3aHeadline 3 col")
        assert not rule.matches("ParagraphStyle/Kicker")
