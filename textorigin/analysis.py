"""Module assembling analyses of texts from the heuristic detector's output."""

import asyncio
import math
from datetime import timedelta
from typing import Final

from loguru import logger

from textorigin.configuration import config
from textorigin.data_models import AnalysisResult, FeatureSet, LinguisticAnalysis
from textorigin.detection.features import clamp
from textorigin.detection.heuristics import Heuristics
from textorigin.detection.report import generate_flags, get_suggestions, get_verdict
from textorigin.detection.scoring import CLASSIFICATION_THRESHOLD, RandomSource

# The perplexity proxy is a damped human score plus uniform noise.
PERPLEXITY_HUMAN_WEIGHT: Final = 0.8
PERPLEXITY_NOISE: Final = 20.0
SENTENCE_VARIETY_SCALE: Final = 2.0


def round_half_up(value: float) -> int:
    """
    Round a non-negative number to the nearest integer, halves rounded up.

    Args:
        value (float): A non-negative number.

    Returns:
        int: The rounded number, e.g. 2 for 1.5 and 3 for 2.5.
    """
    return math.floor(value + 0.5)


class Analyser:
    """Analyser of texts producing a verdict with interpretable evidence."""

    def __init__(
        self,
        random_source: RandomSource | None = None,
        processing_delay: timedelta = config.processing_delay,
        *,
        buzzword_phrase_matching: bool = config.buzzword_phrase_matching,
    ) -> None:
        """
        Initialise the heuristic detector.

        Args:
            random_source (RandomSource | None, optional): Source of randomness
                of the jitter and the perplexity proxy. Defaults to a private
                `random.Random` instance.
            processing_delay (timedelta, optional): Delay before an asynchronous
                analysis returns. Defaults to the value from the configuration.
            buzzword_phrase_matching (bool, optional): Whether multi-word buzzwords
                are matched. Defaults to the value from the configuration.
        """
        self._heuristics = Heuristics(
            random_source, buzzword_phrase_matching=buzzword_phrase_matching
        )
        self._random_source = self._heuristics.random_source
        self._processing_delay = processing_delay

    def run(self, text: str) -> AnalysisResult:
        """
        Analyse a text immediately.

        Args:
            text (str): The text to be analysed. Empty texts are accepted.

        Raises:
            TypeError: Raised if `text` is not a string.

        Returns:
            AnalysisResult: The verdict with supporting evidence.
        """
        features, score = self._heuristics.evaluate(text)

        ai_probability = round_half_up(score.ai_score)
        is_ai_generated = ai_probability > CLASSIFICATION_THRESHOLD
        headline, summary = get_verdict(is_ai_generated=is_ai_generated)

        result = AnalysisResult(
            is_ai_generated=is_ai_generated,
            ai_probability=ai_probability,
            human_probability=100 - ai_probability,
            verdict_headline=headline,
            summary=summary,
            linguistic_analysis=self._describe(features, score.human_score),
            flags=generate_flags(features),
            suggestions=get_suggestions(is_ai_generated=is_ai_generated),
        )
        logger.debug(
            f"Analysed {features.word_count} word(s): {result.ai_probability}% AI"
        )
        return result

    async def analyze(self, text: str) -> AnalysisResult:
        """
        Analyse a text and return the result after the processing delay.

        Args:
            text (str): The text to be analysed. Empty texts are accepted.

        Raises:
            TypeError: Raised if `text` is not a string.

        Returns:
            AnalysisResult: The verdict with supporting evidence.
        """
        result = self.run(text)
        await asyncio.sleep(self._processing_delay.total_seconds())
        return result

    def _describe(
        self, features: FeatureSet, human_score: float
    ) -> LinguisticAnalysis:
        # Correlated with the verdict, it does not measure perplexity.
        perplexity = human_score * PERPLEXITY_HUMAN_WEIGHT
        perplexity += self._random_source.uniform(0.0, PERPLEXITY_NOISE)
        sentence_variety = features.sentence_length_variance * SENTENCE_VARIETY_SCALE

        return LinguisticAnalysis(
            perplexity_score=round_half_up(clamp(perplexity, 0.0, 100.0)),
            burstiness_score=round_half_up(features.burstiness_score),
            vocabulary_richness=round_half_up(features.vocabulary_richness_score),
            sentence_variety=round_half_up(clamp(sentence_variety, 0.0, 100.0)),
        )


async def analyze(text: str) -> AnalysisResult:
    """
    Analyse a text with the default configuration.

    Args:
        text (str): The text to be analysed.

    Returns:
        AnalysisResult: The verdict with supporting evidence.
    """
    return await Analyser().analyze(text)
