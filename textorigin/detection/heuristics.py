"""Module with heuristic checks for LLM generated content."""

import random

from textorigin.data_models import FeatureSet, Score
from textorigin.detection.features import FeatureExtractor
from textorigin.detection.scoring import RandomSource, Scorer


class Heuristics:
    """Heuristic-based approach based on burstiness, vocabulary and buzzwords."""

    def __init__(
        self,
        random_source: RandomSource | None = None,
        *,
        buzzword_phrase_matching: bool = False,
    ) -> None:
        """
        Initialise feature extraction and scoring.

        Args:
            random_source (RandomSource | None, optional): Source of the confidence
                jitter. Defaults to a private `random.Random` instance.
            buzzword_phrase_matching (bool, optional): Whether multi-word buzzwords
                are matched as consecutive words. Defaults to False.
        """
        self.random_source = random_source or random.Random()  # noqa: S311
        self._feature_extractor = FeatureExtractor(
            phrase_matching=buzzword_phrase_matching
        )
        self._scorer = Scorer(self.random_source)

    def evaluate(self, text: str) -> tuple[FeatureSet, Score]:
        """
        Extract features of a text and score them.

        Args:
            text (str): Text to be evaluated.

        Raises:
            TypeError: Raised if `text` is not a string.

        Returns:
            tuple[FeatureSet, Score]: Features of the text and its unrounded score.
        """
        if not isinstance(text, str):
            raise TypeError(
                f"Only `str` can be analysed but got `{type(text).__qualname__}`."
            )
        features = self._feature_extractor.extract(text)
        return features, self._scorer.score(features)
