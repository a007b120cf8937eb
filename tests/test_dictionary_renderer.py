"""Tests for rendering dictionary results."""

from ydict.config.settings import settings
from ydict.core.dictionary_renderer import DictionaryRenderer
from ydict.models import (
    AnnotatedText,
    BasicEntries,
    BilingualEntries,
    DictionaryResult,
    NetworkDefinitions,
    Phonetic,
    Sense,
    StyleTag,
    WordForm,
)

PHONETICS = [
    Phonetic(label="英", pronunciation="/həˈləʊ/"),
    Phonetic(label="美", pronunciation="/həˈloʊ/"),
]


def basic_result(**kwargs) -> DictionaryResult:
    return DictionaryResult(
        explanation=BasicEntries(
            entries=[
                Sense(label="int.", text="喂，你好（用于问候）"),
                Sense(text="【名】 （Hello）人名；（法）埃洛"),
            ]
        ),
        **kwargs,
    )


class TestDictionaryRenderer:
    """Test class for DictionaryRenderer."""

    def setup_method(self):
        self.renderer = DictionaryRenderer()

    def test_basic_full_layout(self):
        result = basic_result(
            phonetics=PHONETICS,
            exam_tags=["初中", "CET4"],
            word_forms=[WordForm(label="复数", value="hellos")],
        )
        out = self.renderer.render(result, "hello")

        assert out.plain == (
            "hello  英 /həˈləʊ/  美 /həˈloʊ/"
            "\n\n"
            "int. 喂，你好（用于问候）\n【名】 (Hello)人名；(法)埃洛"
            "\n\n"
            "复数  hellos"
            "\n\n"
            "初中 / CET4"
        )
        assert out.slice(StyleTag.LABEL) == ["英", "美", "复数"]
        assert out.slice(StyleTag.PHONETIC) == ["/həˈləʊ/", "/həˈloʊ/", "初中 / CET4"]
        assert out.slice(StyleTag.ENTRY) == ["int."]

    def test_phonetics_height(self):
        out = self.renderer.render(basic_result(phonetics=PHONETICS), "hello")

        heights = out.spans(StyleTag.HEIGHT)
        assert len(heights) == 1
        assert out.plain[heights[0].start : heights[0].end] == "英 /həˈləʊ/  美 /həˈloʊ/"
        assert heights[0].value == settings.render.phonetic_height

    def test_exam_tags_height(self):
        out = self.renderer.render(basic_result(exam_tags=["考研"]), "hello")

        heights = out.spans(StyleTag.HEIGHT)
        assert [out.plain[h.start : h.end] for h in heights] == ["考研"]
        assert heights[0].value == settings.render.exam_height

    def test_bilingual_uses_first_pronunciation_only(self):
        result = DictionaryResult(
            phonetics=[
                Phonetic(label="拼", pronunciation="nǐ hǎo"),
                Phonetic(label="x", pronunciation="other"),
            ],
            explanation=BilingualEntries(
                entries=[
                    Sense(label="hello", text="你好（问候）"),
                    Sense(label="hi", text="嗨"),
                ]
            ),
        )
        out = self.renderer.render(result, "你好")

        assert out.plain == "你好  nǐ hǎo\n\nhello\n  你好（问候）\n\nhi\n  嗨"
        assert out.slice(StyleTag.PHONETIC) == ["nǐ hǎo"]
        assert out.slice(StyleTag.HEADWORD) == ["hello", "hi"]
        assert out.slice(StyleTag.LABEL) == []

    def test_network_definitions_one_per_line(self):
        result = DictionaryResult(
            explanation=NetworkDefinitions(definitions=["永远的神（网络用语）", "eternal god"])
        )
        out = self.renderer.render(result, "yyds")

        # Brackets stay full-width outside the label-less basic path
        assert out.plain == "永远的神（网络用语）\neternal god"
        assert out.annotations == []

    def test_bracket_normalization_only_without_label(self):
        out = self.renderer.render(basic_result(), "hello")

        lines = out.plain.split("\n")
        assert lines[0] == "int. 喂，你好（用于问候）"
        assert lines[1] == "【名】 (Hello)人名；(法)埃洛"

    def test_word_forms_tab_separated(self):
        forms = [
            WordForm(label="复数", value="hellos"),
            WordForm(label="过去式", value="helloed"),
        ]
        out = self.renderer.render(basic_result(word_forms=forms), "hello")

        assert out.plain.endswith("复数  hellos\t过去式  helloed")

    def test_word_forms_wrap_at_width(self):
        narrow = settings.render.model_copy(update={"word_forms_width": 10})
        renderer = DictionaryRenderer(narrow)
        forms = [
            WordForm(label="复数", value="hellos"),
            WordForm(label="第三人称单数", value="helloes"),
            WordForm(label="过去式", value="x"),
            WordForm(label="现在分词", value="helloing"),
        ]
        out = renderer.render(basic_result(word_forms=forms), "hello")
        section = out.plain.split("\n\n")[-1]

        # "复数  hellos" spans 12 columns, so the next pair starts a new line
        assert section == "复数  hellos\n第三人称单数  helloes\n过去式  x\t现在分词  helloing"

    def test_word_forms_width_counts_display_columns(self):
        narrow = settings.render.model_copy(update={"word_forms_width": 12})
        renderer = DictionaryRenderer(narrow)
        forms = [
            WordForm(label="复数", value="abcdef"),
            WordForm(label="过去式", value="x"),
        ]
        out = renderer.render(basic_result(word_forms=forms), "hello")

        # 10 characters but 12 columns wide
        assert out.plain.split("\n\n")[-1] == "复数  abcdef\n过去式  x"

    def test_no_phonetics_section_when_empty(self):
        out = self.renderer.render(basic_result(), "hello")
        assert not out.plain.startswith("hello")

    def test_rendering_is_repeatable(self):
        result = basic_result(
            phonetics=PHONETICS,
            exam_tags=["CET4"],
            word_forms=[WordForm(label="复数", value="hellos")],
        )
        first = self.renderer.render(result, "hello")
        second = self.renderer.render(result, "hello")

        assert first.plain.encode("utf-8") == second.plain.encode("utf-8")
        assert first.annotations == second.annotations
        assert isinstance(first, AnnotatedText)
