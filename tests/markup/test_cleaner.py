# ABOUTME: Tests for wiki markup cleaning
# ABOUTME: Covers reference removal, formatting tokens, align attributes, quote escaping and idempotence

import pytest

from wiki_visualizer.markup.cleaner import clean, escape_quotes


class TestReferenceRemoval:
    """Reference annotations are deleted along with their content."""

    def test_removes_paired_reference(self):
        assert clean('68465<ref name="census">INSEE 2003</ref>') == "68465"

    def test_removes_escaped_paired_reference(self):
        assert clean("68465&lt;ref&gt;INSEE 2003&lt;/ref&gt;") == "68465"

    def test_removes_self_closing_reference(self):
        assert clean('26843<ref name="census" />') == "26843"

    def test_removes_escaped_self_closing_reference(self):
        assert clean("26843&lt;ref name=&quot;census&quot; /&gt;") == "26843"

    def test_self_closing_reference_does_not_swallow_following_text(self):
        text = 'a<ref name="n"/> keep <ref>b</ref>c'
        assert clean(text) == "a keep c"

    def test_removes_multiline_reference(self):
        assert clean("1<ref>line one\nline two</ref>2") == "12"


class TestFormattingRemoval:
    """Wikilink brackets and bold/italic quotes are stripped."""

    def test_removes_wikilink_brackets(self):
        assert clean("[[France]] || 68465") == "France || 68465"

    def test_removes_bold_and_italic(self):
        assert clean("'''bold''' and ''italic''") == "bold and italic"

    def test_removes_bold_italic(self):
        assert clean("'''''en'''''") == "en"

    def test_removes_align_attribute(self):
        result = clean('| align="right" | 5')
        assert "align" not in result
        assert result.split() == ["|", "5"]

    def test_removes_escaped_align_attribute(self):
        result = clean("| align=&quot;center&quot; | 7")
        assert "align" not in result
        assert result.split() == ["|", "7"]

    def test_removes_every_distinct_align_attribute(self):
        assert clean('align="left" | a || align="right" | b') == " a ||  b"

    def test_removes_tokens_joined_by_an_earlier_removal(self):
        assert clean("[''[Paris]'']") == "Paris"


class TestQuoteEscaping:
    def test_escapes_single_quotes(self):
        assert clean("l'Europe") == "l\\'Europe"

    def test_leaves_escaped_quotes_alone(self):
        assert escape_quotes("l\\'Europe") == "l\\'Europe"

    def test_odd_quote_run_leaves_one_escaped_quote(self):
        assert clean("''''") == "\\'"


class TestCleanProperties:
    def test_plain_text_is_unchanged(self):
        assert clean("! en !! 2003 !! East") == "! en !! 2003 !! East"

    def test_empty_text(self):
        assert clean("") == ""

    @pytest.mark.parametrize(
        "text",
        [
            "plain",
            "l'Europe",
            "''''",
            "[''[x]'']",
            "'''''en'''''",
            '| [[France]]<ref name="a"/> || align="right" | 68465<ref>src</ref>',
            "&lt;ref&gt;unclosed",
            "it's ''quoted'' [[link]]]",
        ],
    )
    def test_clean_is_idempotent(self, text):
        once = clean(text)
        assert clean(once) == once
