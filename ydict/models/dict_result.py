"""Pydantic models for dictionary page results"""

from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator


class Phonetic(BaseModel):
    """Pronunciation paired with its accent label"""

    label: str = Field(default="", description="Accent label, e.g. 英 or 美")
    pronunciation: str = Field(description="Phonetic transcription")

    @field_validator("label", "pronunciation")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()


class Sense(BaseModel):
    """Translation text with an optional part-of-speech or sense label"""

    label: str = Field(default="", description="Part of speech or sense label")
    text: str = Field(description="Translation text")

    @field_validator("label")
    @classmethod
    def strip_label(cls, v: str) -> str:
        return v.strip() if v else ""

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Ensure translation is not empty"""
        if not v or not v.strip():
            raise ValueError("Translation cannot be empty")
        return v.strip()


class WordForm(BaseModel):
    """Inflected form of the headword, e.g. plural or past tense"""

    label: str = Field(description="Form name")
    value: str = Field(description="Form value")


class NetworkDefinitions(BaseModel):
    """Web definitions shown for network words"""

    kind: Literal["network"] = "network"
    definitions: list[str] = Field(min_length=1)

    @field_validator("definitions")
    @classmethod
    def drop_blank(cls, v: list[str]) -> list[str]:
        cleaned = [d.strip() for d in v if d and d.strip()]
        if not cleaned:
            raise ValueError("Network definitions cannot be empty")
        return cleaned


class BilingualEntries(BaseModel):
    """Category-labeled translations (Chinese to other language pages)"""

    kind: Literal["bilingual"] = "bilingual"
    entries: list[Sense] = Field(min_length=1)


class BasicEntries(BaseModel):
    """General dictionary translations"""

    kind: Literal["basic"] = "basic"
    entries: list[Sense] = Field(min_length=1)


Explanation = Annotated[
    NetworkDefinitions | BilingualEntries | BasicEntries,
    Field(discriminator="kind"),
]


class DictionaryResult(BaseModel):
    """Structured content of one dictionary result page"""

    phonetics: list[Phonetic] = Field(default=[], description="Pronunciations")
    explanation: Explanation = Field(description="Exactly one explanation variant")
    exam_tags: list[str] = Field(default=[], description="Exam vocabulary lists")
    word_forms: list[WordForm] = Field(default=[], description="Inflected forms")

    @property
    def is_bilingual(self) -> bool:
        return isinstance(self.explanation, BilingualEntries)
