import pytest

from bylaw_assistant.core.catalog.answers import ANSWERS, ANTI_NOISE_OVERVIEW
from bylaw_assistant.core.models.bylaw import AnswerTopic
from bylaw_assistant.core.services.answer_service import AnswerService


@pytest.fixture
def answers():
    return AnswerService()


@pytest.mark.parametrize(
    "topic, expected",
    [
        ("What permits do I need for a renovation?", AnswerTopic.CONSTRUCTION_NOISE),
        ("When can I do construction work?", AnswerTopic.CONSTRUCTION_NOISE),
        ("construction noise on weekends", AnswerTopic.CONSTRUCTION_NOISE),
        ("Leaf Blower hours", AnswerTopic.LEAF_BLOWERS),
        ("my neighbour is too loud", AnswerTopic.NOISE),
        ("Can I remove an arbutus?", AnswerTopic.TREE_REMOVAL),
        ("dog on the beach", AnswerTopic.DOG_CONTROL),
        ("secondary suite rules", AnswerTopic.ZONING),
    ],
)
def test_classify(answers, topic, expected):
    assert answers.classify(topic) is expected


def test_classify_is_deterministic(answers):
    topic = "loud leaf blower during construction"
    assert {answers.classify(topic) for _ in range(5)} == {AnswerTopic.CONSTRUCTION_NOISE}


def test_nonsense_topic_gets_default(answers):
    assert answers.classify("xyzzy") is None
    assert answers.answer("xyzzy").answer.startswith("I don't have specific information")


def test_unknown_topic(answers):
    assert answers.classify("parking tickets") is None

    answer = answers.answer("parking tickets")
    assert answer.bylaw_number == ""
    assert '"parking tickets"' in answer.answer


def test_answer_carries_exact_citation(answers):
    answer = answers.answer("leaf blowers")

    assert answer == ANSWERS[AnswerTopic.LEAF_BLOWERS]
    assert answer.bylaw_number == "3210"
    assert answer.citation == "Section 4(5)(a) and 4(5)(b)"


@pytest.mark.parametrize("topic", ["Bylaw 3210", "anti-noise bylaw", "Anti Noise rules"])
def test_lookup_anti_noise_overview(answers, topic):
    assert answers.lookup(topic) is ANTI_NOISE_OVERVIEW


def test_lookup_falls_back_to_answer(answers):
    assert answers.lookup("tree cutting") == ANSWERS[AnswerTopic.TREE_REMOVAL]


def test_classify_ignores_overview(answers):
    assert answers.classify("anti-noise") is AnswerTopic.NOISE


def test_answer_serialization(answers):
    body = answers.answer("dog leash").to_dict()

    assert body["bylawNumber"] == "4013"
    assert set(body) == {"bylawNumber", "title", "citation", "answer", "source"}
