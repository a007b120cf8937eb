"""Shared constants across the application"""


class YoudaoConstants:
    """Endpoints, headers and page selectors for dict.youdao.com"""

    DICT_URL = "https://dict.youdao.com/result"
    SUGGEST_URL = "https://dict.youdao.com/suggest"

    # Language code that must appear on one side of a dictionary lookup
    CHINESE = "zh"

    # Suggestion API status meaning success
    SUCCESS_CODE = 200
    STATUS_FALLBACK_MESSAGE = "Suggestion request failed with status {code}"

    DEFAULT_USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/124.0 Safari/537.36"
    )

    DEFAULT_HEADERS = {
        "Accept": (
            "text/html,application/xhtml+xml,application/json;q=0.9,*/*;q=0.8"
        ),
        "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
        "Connection": "keep-alive",
        "Referer": "https://dict.youdao.com/",
    }


class SelectorConstants:
    """Class and id names of the result page structure"""

    # Phonetics: <div class="per-phone"><span>英</span><span class="phonetic">/.../</span></div>
    PHONE = "per-phone"
    PHONETIC = "phonetic"

    # Main dictionary region
    MAIN_REGION_ID = "catalogue_author"

    # Chinese -> other: category blocks with a sense label and translation
    BILINGUAL_BLOCK = "word-exp-ce"
    BILINGUAL_LABEL = "point"
    BILINGUAL_TRANS = "word-exp_tran"
    BILINGUAL_TRANS_FALLBACK = "col2"

    # Network words: only web definitions are available
    NETWORK_CONTAINER = "web_trans"
    NETWORK_ITEM = "trans-content"

    # General dictionary: optional part of speech plus translation
    BASIC_BLOCK = "word-exp"
    BASIC_POS = "pos"
    BASIC_TRANS = "trans"

    EXAM_TAG = "exam_type-value"

    WORD_FORM_CELL = "word-wfs-cell-less"
    WORD_FORM_NAME = "wfs-name"
    WORD_FORM_VALUE = "transformation"


class TextConstants:
    """Constants for text processing and rendering"""

    WHITESPACE_PATTERN = r"\s+"

    # Full-width parenthesized text, normalized to half-width for display
    FULLWIDTH_BRACKETS_PATTERN = r"（([^（）]*)）"

    # Characters left unescaped by URL hexification
    URL_SAFE_CHARS = "-_.~"

    # Part-of-speech abbreviations highlighted in suggestion explanations
    PART_OF_SPEECH_TOKENS: tuple[str, ...] = (
        "n",
        "v",
        "vt",
        "vi",
        "adj",
        "adv",
        "pron",
        "prep",
        "conj",
        "int",
        "interj",
        "art",
        "num",
        "abbr",
        "aux",
        "pl",
        "phr",
        "det",
    )

    # Ideographic full stop that may close a part-of-speech token
    FULLWIDTH_POS_SEPARATOR = "。"

    PHONETIC_SEPARATOR = "  "
    EXAM_TAG_SEPARATOR = " / "
    SECTION_SEPARATOR = "\n\n"
    EXPLAIN_INDENT = "   "
    BILINGUAL_INDENT = "  "
