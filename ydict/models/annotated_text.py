"""Plain text with character-range style annotations"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class StyleTag(str, Enum):
    """Presentation tags interpreted by a downstream display layer"""

    PHONETIC = "phonetic"
    LABEL = "label"
    HEADWORD = "headword"
    ENTRY = "entry"
    PART_OF_SPEECH = "part_of_speech"
    PLAIN = "plain"
    # Display properties; ``Annotation.value`` holds the amount
    HEIGHT = "height"
    LINE_HEIGHT = "line_height"
    WRAP_PREFIX = "wrap_prefix"


@dataclass(frozen=True)
class Annotation:
    """A tag applied to ``text[start:end]``"""

    start: int
    end: int
    tag: StyleTag
    value: Any = None

    def shifted(self, offset: int) -> Annotation:
        return Annotation(self.start + offset, self.end + offset, self.tag, self.value)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "start": self.start,
            "end": self.end,
            "tag": self.tag.value,
        }
        if self.value is not None:
            out["value"] = self.value
        return out


@dataclass
class AnnotatedText:
    """Text buffer that records styles as ranges instead of inline markup.

    Annotations never contribute characters, so ``plain`` is always the
    text a reader would see with styling removed.
    """

    text: str = ""
    annotations: list[Annotation] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    @property
    def plain(self) -> str:
        return self.text

    def append(self, text: str, *tags: StyleTag) -> tuple[int, int]:
        """Append ``text`` styled with ``tags`` and return its span"""
        start = len(self.text)
        self.text += text
        end = len(self.text)
        if text:
            for tag in tags:
                self.annotations.append(Annotation(start, end, tag))
        return start, end

    def annotate(
        self, start: int, end: int, tag: StyleTag, value: Any = None
    ) -> None:
        """Attach ``tag`` to an existing range"""
        if not 0 <= start <= end <= len(self.text):
            raise ValueError(
                f"Annotation range {start}:{end} outside text of length {len(self.text)}"
            )
        if start == end:
            return
        self.annotations.append(Annotation(start, end, tag, value))

    def extend(self, other: AnnotatedText) -> tuple[int, int]:
        """Append another annotated text, shifting its ranges"""
        offset = len(self.text)
        self.text += other.text
        self.annotations.extend(a.shifted(offset) for a in other.annotations)
        return offset, len(self.text)

    @classmethod
    def join(cls, separator: str, parts: Iterable[AnnotatedText]) -> AnnotatedText:
        out = cls()
        for i, part in enumerate(parts):
            if i:
                out.append(separator)
            out.extend(part)
        return out

    def spans(self, tag: StyleTag) -> list[Annotation]:
        """Annotations carrying ``tag`` in document order"""
        return sorted(
            (a for a in self.annotations if a.tag == tag),
            key=lambda a: (a.start, a.end),
        )

    def slice(self, tag: StyleTag) -> list[str]:
        """Texts covered by ``tag``"""
        return [self.text[a.start : a.end] for a in self.spans(tag)]

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "annotations": [a.to_dict() for a in self.annotations],
        }
