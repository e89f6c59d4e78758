from types import SimpleNamespace

import pytest

from bylaw_assistant.infrastructure.embeddings.openai_embedder import OpenAIEmbedder


class FakeEmbeddings:
    def __init__(self, fail_batches: bool = False, fail_all: bool = False):
        self.fail_batches = fail_batches
        self.fail_all = fail_all
        self.requests: list = []

    def create(self, model, input):
        self.requests.append(input)
        if self.fail_all or (self.fail_batches and isinstance(input, list)):
            raise RuntimeError("rate limited")
        texts = input if isinstance(input, list) else [input]
        return SimpleNamespace(
            data=[SimpleNamespace(embedding=[float(len(t)), 1.0]) for t in texts]
        )


def make_embedder(embeddings: FakeEmbeddings, sleeps: list) -> OpenAIEmbedder:
    client = SimpleNamespace(embeddings=embeddings)
    return OpenAIEmbedder(client=client, sleep=sleeps.append)


def test_embed_single_text():
    embeddings = FakeEmbeddings()
    embedder = make_embedder(embeddings, [])

    assert embedder.embed("tree") == [4.0, 1.0]
    assert embeddings.requests == ["tree"]


def test_empty_text_replaced():
    embeddings = FakeEmbeddings()
    make_embedder(embeddings, []).embed("   ")

    assert embeddings.requests == ["Empty text"]


def test_embed_error_propagates():
    embedder = make_embedder(FakeEmbeddings(fail_all=True), [])

    with pytest.raises(RuntimeError):
        embedder.embed("tree")


def test_batches_of_ten_with_delay_between():
    embeddings = FakeEmbeddings()
    sleeps: list = []
    texts = [f"chunk {i}" for i in range(23)]

    vectors = make_embedder(embeddings, sleeps).embed_batch(texts)

    assert len(vectors) == 23
    assert [len(r) for r in embeddings.requests] == [10, 10, 3]
    assert sleeps == [0.5, 0.5]


def test_failed_batch_falls_back_to_single_requests():
    embeddings = FakeEmbeddings(fail_batches=True)
    texts = ["a", "bb", "ccc"]

    vectors = make_embedder(embeddings, []).embed_batch(texts)

    assert vectors == [[1.0, 1.0], [2.0, 1.0], [3.0, 1.0]]
    assert embeddings.requests == [texts, "a", "bb", "ccc"]
