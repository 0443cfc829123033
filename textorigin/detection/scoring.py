"""Module with the weighted scoring formula of the heuristic detector."""

from typing import Final, Protocol

from loguru import logger

from textorigin.data_models import FeatureSet, Score
from textorigin.detection.features import clamp

BASE_SCORE: Final = 50.0

# Sentence length standard deviation regarded as neutral.
NEUTRAL_STD_DEV: Final = 12.0
STD_DEV_WEIGHT: Final = 3.0

# Type-token ratio regarded as neutral.
NEUTRAL_TYPE_TOKEN_RATIO: Final = 0.55
TYPE_TOKEN_RATIO_WEIGHT: Final = 60.0

BUZZWORD_DENSITY_WEIGHT: Final = 800.0

# Half-width of the uniform confidence jitter.
JITTER_AMPLITUDE: Final = 5.0

MIN_AI_SCORE: Final = 5.0
MAX_AI_SCORE: Final = 98.0

# An AI score strictly above this value means an LLM-written text.
CLASSIFICATION_THRESHOLD: Final = 55


class RandomSource(Protocol):
    """Source of uniformly distributed random numbers, e.g. `random.Random`."""

    def uniform(self, a: float, b: float) -> float:
        """Get a random number N such that a <= N <= b."""
        ...


class Scorer:
    """Combination of linguistic features into a probability of LLM authorship."""

    def __init__(self, random_source: RandomSource) -> None:
        """
        Initialise the scorer with its source of jitter.

        Args:
            random_source (RandomSource): Source of the confidence jitter.
        """
        self._random_source = random_source

    def score(self, features: FeatureSet) -> Score:
        """
        Score features of a text.

        Low sentence length variance, low lexical diversity and frequent buzzwords
        push the score towards LLM authorship.

        Args:
            features (FeatureSet): Features of the text.

        Returns:
            Score: AI score in percent, clamped to [5, 98].
        """
        jitter = self._random_source.uniform(-JITTER_AMPLITUDE, JITTER_AMPLITUDE)

        std_dev = features.sentence_length_std_dev
        ttr = features.type_token_ratio

        ai_score = BASE_SCORE
        ai_score += (NEUTRAL_STD_DEV - std_dev) * STD_DEV_WEIGHT
        ai_score += (NEUTRAL_TYPE_TOKEN_RATIO - ttr) * TYPE_TOKEN_RATIO_WEIGHT
        ai_score += features.buzzword_density * BUZZWORD_DENSITY_WEIGHT
        ai_score += jitter
        ai_score = clamp(ai_score, MIN_AI_SCORE, MAX_AI_SCORE)

        logger.debug(f"AI score: {ai_score:.3f} (jitter: {jitter:+.3f})")
        return Score(ai_score=ai_score, jitter=jitter)
