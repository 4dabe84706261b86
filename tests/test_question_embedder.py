# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-15
# Description: test_question_embedder.py
# -----------------------------------------------------------------------------
import math
import threading
import time

import pytest

from conftest import FakeEmbeddingModel
from embedding.QuestionEmbedder import EmbeddingFailure, QuestionEmbedder
from preprocessing.TextNormalizer import TextTooShort


def test_embed_returns_unit_vector_and_loads_once(embedder, fake_model):
    assert embedder.state == QuestionEmbedder.UNINITIALIZED

    v1 = embedder.embed("What is 2+2?")
    v2 = embedder.embed("<b>What</b>   is 3+3?")

    assert embedder.state == QuestionEmbedder.READY
    assert embedder.load_count == 1
    assert len(v1) == len(v2) == embedder.dimension == 8
    assert math.isclose(math.sqrt(sum(x * x for x in v1)), 1.0, rel_tol=1e-5)
    # model sees cleaned text only
    assert fake_model.calls == ["What is 2+2?", "What is 3+3?"]


def test_embed_rejects_short_text_before_loading_model():
    factory_calls = []

    def factory():
        factory_calls.append(1)
        return FakeEmbeddingModel()

    embedder = QuestionEmbedder(model_factory=factory)
    with pytest.raises(TextTooShort):
        embedder.embed("x")

    assert factory_calls == []
    assert embedder.state == QuestionEmbedder.UNINITIALIZED


def test_concurrent_first_use_triggers_a_single_load():
    started = threading.Event()
    factory_calls = []

    def slow_factory():
        factory_calls.append(1)
        started.set()
        time.sleep(0.2)
        return FakeEmbeddingModel()

    embedder = QuestionEmbedder(model_factory=slow_factory)
    models = []
    errors = []

    def worker():
        try:
            models.append(embedder.get_or_init())
        except Exception as e:  # pragma: no cover - surfaced by assertion below
            errors.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert errors == []
    assert len(factory_calls) == 1
    assert embedder.load_count == 1
    assert len(models) == 8
    assert all(m is models[0] for m in models)


def test_failed_load_surfaces_embedding_failure_and_allows_retry():
    attempts = []

    def flaky_factory():
        attempts.append(1)
        if len(attempts) == 1:
            raise OSError("weights not downloadable")
        return FakeEmbeddingModel()

    embedder = QuestionEmbedder(model_factory=flaky_factory)

    with pytest.raises(EmbeddingFailure):
        embedder.embed("What is 2+2?")
    assert embedder.state == QuestionEmbedder.UNINITIALIZED

    assert len(embedder.embed("What is 2+2?")) == 8
    assert embedder.state == QuestionEmbedder.READY
    assert len(attempts) == 2


def test_model_error_is_wrapped_and_not_retried():
    class BrokenModel:
        calls = 0

        def run(self, text, *, pooling="mean", normalize=True):
            BrokenModel.calls += 1
            raise RuntimeError("inference exploded")

    embedder = QuestionEmbedder(model_factory=BrokenModel)
    with pytest.raises(EmbeddingFailure):
        embedder.embed("What is 2+2?")
    assert BrokenModel.calls == 1


def test_nested_model_output_is_flattened():
    embedder = QuestionEmbedder(model_factory=lambda: FakeEmbeddingModel(nested=True))
    vector = embedder.embed("What is 2+2?")
    assert len(vector) == 8
    assert all(isinstance(x, float) for x in vector)


def test_dimension_change_is_rejected():
    class ShrinkingModel:
        def __init__(self):
            self.dim = 4

        def run(self, text, *, pooling="mean", normalize=True):
            self.dim -= 1
            return [0.5] * self.dim

    embedder = QuestionEmbedder(model_factory=ShrinkingModel)
    embedder.embed("first text")
    with pytest.raises(EmbeddingFailure):
        embedder.embed("second text")


def test_model_receives_mean_pooling_and_normalize_flags():
    seen = {}

    class SpyModel:
        def run(self, text, *, pooling="mean", normalize=True):
            seen["pooling"] = pooling
            seen["normalize"] = normalize
            return [1.0, 0.0]

    QuestionEmbedder(model_factory=SpyModel).embed("hello there")
    assert seen == {"pooling": "mean", "normalize": True}
