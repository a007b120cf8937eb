"""Tests for part-of-speech highlighting."""

from ydict.core.annotator import PartOfSpeechHighlighter
from ydict.core.constants import TextConstants
from ydict.models import AnnotatedText, StyleTag


class TestPartOfSpeechHighlighter:
    """Test class for PartOfSpeechHighlighter."""

    def setup_method(self):
        self.highlighter = PartOfSpeechHighlighter(TextConstants.PART_OF_SPEECH_TOKENS)

    def test_token_with_period_space(self):
        assert self.highlighter.find("n. 你好") == [(0, 2)]

    def test_no_token_boundary(self):
        assert self.highlighter.find("naive. ") == []
        assert self.highlighter.find("adv.") == []  # no separator after the period

    def test_fullwidth_period(self):
        text = "释义：adj。美好的"
        spans = self.highlighter.find(text)
        assert [text[s:e] for s, e in spans] == ["adj。"]

    def test_longest_token_wins(self):
        text = "vt. 测试 vi. 测试 v. 测试"
        spans = self.highlighter.find(text)
        assert [text[s:e] for s, e in spans] == ["vt.", "vi.", "v."]

    def test_token_glued_to_letters_ignored(self):
        assert self.highlighter.find("salon. x") == []
        assert self.highlighter.find("你n. 好") == []

    def test_synthetic_token_set(self):
        highlighter = PartOfSpeechHighlighter(["xyz"])
        assert highlighter.find("xyz. n. ") == [(0, 4)]

    def test_empty_token_set(self):
        highlighter = PartOfSpeechHighlighter([])
        assert highlighter.find("n. adj. ") == []

    def test_highlight_annotates_in_place(self):
        out = AnnotatedText()
        out.append("hell", StyleTag.ENTRY)
        out.append("\n   n. 地狱", StyleTag.PLAIN)

        returned = self.highlighter.highlight(out)

        assert returned is out
        assert out.slice(StyleTag.PART_OF_SPEECH) == ["n."]
        assert out.plain == "hell\n   n. 地狱"
