"""Citation service - detects bylaw references and gates them on the verified list."""

import logging
import re
from typing import Iterable, Iterator, Optional

from ..catalog.bylaws import SEPARATORS, BylawCatalog
from ..models.citation import Citation, Segment

logger = logging.getLogger(__name__)

DEFAULT_SECTION = "1"

REFERENCE_GRAMMAR = r"""
    (?:(?:Oak\ Bay(?:'s)?|Municipal)\s+)?
    (?:
        (?P<topic>\b(?:{topics}))
        \s+Bylaw
        (?:\s*\(?(?:No\.?|Number)?\s*(?P<topic_number>\d{4})\b\)?)?
      |
        \bBylaw(?:\s+(?:No\.?|Number)?)?\s*(?P<number>\d{4})\b
    )
    (?:,?\s*(?:Sections?(?![a-z])|Sec\.|§)\s*(?P<section>[\w.()]*[\w)]))?
    """


def topic_pattern(alias: str) -> str:
    """Alias as a pattern where any hyphen or whitespace run matches any other."""
    return r"[-\s]+".join(re.escape(word) for word in SEPARATORS.split(alias.strip()))


def build_reference_pattern(catalog: BylawCatalog) -> re.Pattern:
    """Compile the reference grammar with the catalog's aliases as topic names."""
    aliases = sorted(set(catalog.aliases), key=len, reverse=True)
    topics = "|".join(topic_pattern(a) for a in aliases)
    return re.compile(
        REFERENCE_GRAMMAR.replace("{topics}", topics), re.IGNORECASE | re.VERBOSE
    )


BYLAW_REFERENCE = build_reference_pattern(BylawCatalog())


class CitationService:
    """Turns free text into plain runs and verified citation markers."""

    def __init__(
        self,
        catalog: Optional[BylawCatalog] = None,
        verified: Optional[Iterable[str]] = None,
    ):
        """Initialize citation service.

        Args:
            catalog: Bylaw catalog for name and title lookups.
            verified: Override for the citable bylaw numbers.
        """
        self._catalog = catalog or BylawCatalog()
        self._verified = (
            frozenset(verified) if verified is not None else self._catalog.verified_numbers
        )
        self._pattern = (
            BYLAW_REFERENCE if catalog is None else build_reference_pattern(self._catalog)
        )

    def find_references(self, text: str) -> Iterator[re.Match]:
        """Non-overlapping bylaw references, left to right, with offsets."""
        return self._pattern.finditer(text)

    def resolve(self, match: re.Match) -> Optional[Citation]:
        """Build a citation for a reference, or None if it must stay plain text."""
        topic = match.group("topic")
        number = match.group("topic_number") or match.group("number")

        if not number and topic:
            number = self._catalog.resolve_name(topic)

        if not number:
            logger.debug(f"Unresolved bylaw reference: '{match.group(0)}'")
            return None

        if number not in self._verified:
            logger.debug(f"Unverified bylaw {number}, leaving as text")
            return None

        title = f"{topic} Bylaw" if topic else self._catalog.title_for(number)

        return Citation(
            bylaw_number=number,
            title=title,
            section=match.group("section") or DEFAULT_SECTION,
            excerpt=match.group(0),
        )

    def annotate(self, text: str) -> Iterator[Segment]:
        """Partition text into plain runs and citation markers.

        Segments cover the input exactly once, in order. Adjacent plain
        text is merged, so text without citable references yields a
        single text segment equal to the input.

        Args:
            text: Model output or any user-facing text.

        Yields:
            Text and citation segments.
        """
        pending = ""
        last = 0

        for match in self.find_references(text):
            citation = self.resolve(match)
            if citation is None:
                continue

            pending += text[last:match.start()]
            if pending:
                yield Segment.text(pending)
                pending = ""

            yield Segment.citation(citation)
            last = match.end()

        pending += text[last:]
        if pending or last == 0:
            yield Segment.text(pending)

    def citations(self, text: str) -> list[Citation]:
        """Verified citations found in text."""
        return [
            s.payload for s in self.annotate(text) if isinstance(s.payload, Citation)
        ]
