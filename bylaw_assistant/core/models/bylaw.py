"""Bylaw reference data models."""
from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class BylawInfo:
    """Catalog entry: one bylaw and the phrases that name it."""
    number: str
    title: str
    aliases: tuple[str, ...] = ()
    pdf_filename: str = ""
    verified: bool = True


class AnswerTopic(Enum):
    """High-risk topics with hand-verified answers."""
    CONSTRUCTION_NOISE = "construction_noise"
    LEAF_BLOWERS = "leaf_blowers"
    NOISE = "noise"
    TREE_REMOVAL = "tree_removal"
    DOG_CONTROL = "dog_control"
    ZONING = "zoning"


@dataclass(frozen=True)
class BylawAnswer:
    """Canned answer with exact section citations."""
    bylaw_number: str
    title: str
    citation: str
    answer: str
    source: str
    keywords: tuple[str, ...] = field(default=(), compare=False)

    def to_dict(self) -> dict[str, str]:
        return {
            "bylawNumber": self.bylaw_number,
            "title": self.title,
            "citation": self.citation,
            "answer": self.answer,
            "source": self.source,
        }
