"""Answer service - canned verified answers for high-risk topics."""

import logging
from typing import Optional

from ..catalog.answers import (
    ANSWERS,
    ANTI_NOISE_OVERVIEW,
    ANTI_NOISE_TRIGGERS,
    TOPIC_PRIORITY,
    no_match_answer,
)
from ..models.bylaw import AnswerTopic, BylawAnswer

logger = logging.getLogger(__name__)


class AnswerService:
    """Keyword classifier over the hand-verified answer table."""

    def __init__(
        self,
        answers: dict[AnswerTopic, BylawAnswer] | None = None,
        priority: tuple[AnswerTopic, ...] = TOPIC_PRIORITY,
    ):
        self._answers = answers or ANSWERS
        self._priority = priority

    def classify(self, topic: str) -> Optional[AnswerTopic]:
        """Map a free-form topic to one of the verified answer topics.

        Topics are checked in priority order; the first one with a keyword
        contained in the lowercased input wins.

        Args:
            topic: Free-form topic or question.

        Returns:
            Matching topic, or None if nothing matched.
        """
        normalized = topic.lower().strip()

        for candidate in self._priority:
            for keyword in self._answers[candidate].keywords:
                if keyword in normalized:
                    logger.debug(f"Answer topic {candidate.value} via '{keyword}'")
                    return candidate

        return None

    def answer(self, topic: str) -> BylawAnswer:
        """Verified answer for a topic, or the no-match answer."""
        matched = self.classify(topic)
        if matched is None:
            logger.info(f"No verified answer for topic '{topic[:50]}'")
            return no_match_answer(topic)
        return self._answers[matched]

    def lookup(self, topic: str) -> BylawAnswer:
        """Like `answer`, but Anti-Noise Bylaw questions get the full overview."""
        normalized = topic.lower().strip()
        if any(trigger in normalized for trigger in ANTI_NOISE_TRIGGERS):
            return ANTI_NOISE_OVERVIEW
        return self.answer(topic)
