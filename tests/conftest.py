"""Fixtures shared by the test suite."""

from datetime import timedelta

import pytest

from textorigin.analysis import Analyser
from textorigin.data_models import FeatureSet


class PinnedRandom:
    """Random source always returning the same value clamped to the range."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value

    def uniform(self, a: float, b: float) -> float:
        return max(a, min(b, self.value))


LEVERAGED_TEXT = " ".join(["Leveraged."] * 18)

HIGH_VARIANCE_LENGTHS = [4, 30, 8, 25, 3, 40, 6, 22, 5, 35]
# 178 words in total, the last 16 repeat the first ones.
HIGH_VARIANCE_DISTINCT_WORDS = 162


def build_high_variance_text() -> str:
    """Build ten sentences of very different lengths with a rich vocabulary."""
    words = [
        f"word{index % HIGH_VARIANCE_DISTINCT_WORDS}"
        for index in range(sum(HIGH_VARIANCE_LENGTHS))
    ]
    sentences = []
    start = 0
    for length in HIGH_VARIANCE_LENGTHS:
        sentence = words[start : start + length]
        start += length
        sentences.append(" ".join(sentence).capitalize() + ".")
    return " ".join(sentences)


def make_features(
    std_dev: float = 12.0, type_token_ratio: float = 0.55, density: float = 0.0
) -> FeatureSet:
    """Build features of a text with the given scoring inputs."""
    return FeatureSet(
        sentence_lengths=[],
        average_sentence_length=0.0,
        sentence_length_variance=std_dev**2,
        sentence_length_std_dev=std_dev,
        burstiness_score=min(100.0, std_dev * 8),
        word_count=100,
        unique_word_count=int(type_token_ratio * 100),
        type_token_ratio=type_token_ratio,
        vocabulary_richness_score=min(100.0, type_token_ratio * 160),
        buzzword_count=int(density * 100),
        buzzword_density=density,
    )


@pytest.fixture
def pinned_analyser() -> Analyser:
    """Analyser without jitter, perplexity noise or processing delay."""
    return Analyser(PinnedRandom(0.0), processing_delay=timedelta(0))


@pytest.fixture
def high_variance_text() -> str:
    return build_high_variance_text()
