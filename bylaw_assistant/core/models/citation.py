"""Citation domain models."""
from dataclasses import dataclass
from typing import Literal, Union

SegmentKind = Literal["text", "citation"]


@dataclass(frozen=True)
class Citation:
    """Verified reference to a bylaw section."""
    bylaw_number: str
    title: str
    section: str
    excerpt: str  # verbatim matched substring
    verified: bool = True

    def to_dict(self) -> dict[str, object]:
        return {
            "bylawNumber": self.bylaw_number,
            "title": self.title,
            "section": self.section,
            "excerpt": self.excerpt,
            "verified": self.verified,
        }


@dataclass(frozen=True)
class Segment:
    """One piece of annotated text: a plain run or a citation marker."""
    kind: SegmentKind
    payload: Union[str, Citation]

    @classmethod
    def text(cls, value: str) -> "Segment":
        return cls(kind="text", payload=value)

    @classmethod
    def citation(cls, value: Citation) -> "Segment":
        return cls(kind="citation", payload=value)

    @property
    def source_text(self) -> str:
        """Input text this segment covers."""
        if isinstance(self.payload, Citation):
            return self.payload.excerpt
        return self.payload

    def to_dict(self) -> dict[str, object]:
        if isinstance(self.payload, Citation):
            return {"kind": self.kind, "citation": self.payload.to_dict()}
        return {"kind": self.kind, "text": self.payload}
