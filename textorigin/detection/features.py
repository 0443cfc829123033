"""Module extracting linguistic features used by the heuristic detector."""

import math
from typing import Final

from loguru import logger

from textorigin.data_models import FeatureSet
from textorigin.nlp.sentence_splitter import (
    SentenceSplitter,
    TerminatorSentenceSplitter,
)
from textorigin.nlp.tokeniser import Tokeniser, WordTokeniser, count_words

# Display scaling of the sentence length standard deviation.
BURSTINESS_SCALE: Final = 8.0
# Display scaling of the type-token ratio.
VOCABULARY_RICHNESS_SCALE: Final = 160.0

# Generic phrases overused in LLM-written resumes and cover letters.
# Multi-token entries never equal a single token, so they only count
# with phrase matching enabled.
BUZZWORDS: Final = (
    "spearheaded",
    "orchestrated",
    "leveraged",
    "utilized",
    "seamlessly",
    "pivotal",
    "transformative",
    "robust",
    "paradigm",
    "synergy",
    "demonstrated",
    "proven track record",
    "dynamic",
    "meticulous",
    "navigated",
    "fostered",
    "results-driven",
    "visionary",
)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """
    Limit a value to the inclusive range [minimum, maximum].

    Args:
        value (float): The value to be limited.
        minimum (float): The lower bound.
        maximum (float): The upper bound.

    Returns:
        float: The closest value to `value` inside the range.
    """
    return max(minimum, min(maximum, value))


class FeatureExtractor:
    """Extractor of burstiness, vocabulary richness and buzzword statistics."""

    def __init__(
        self,
        sentence_splitter: SentenceSplitter | None = None,
        tokeniser: Tokeniser | None = None,
        buzzwords: tuple[str, ...] = BUZZWORDS,
        *,
        phrase_matching: bool = False,
    ) -> None:
        """
        Initialise text segmentation and the buzzword lexicon.

        Args:
            sentence_splitter (SentenceSplitter | None, optional): Splitter used to
                find sentences. Defaults to `TerminatorSentenceSplitter`.
            tokeniser (Tokeniser | None, optional): Tokeniser used to find words.
                Defaults to `WordTokeniser`.
            buzzwords (tuple[str, ...], optional): Buzzword lexicon.
                Defaults to `BUZZWORDS`.
            phrase_matching (bool, optional): Whether entries spanning several
                tokens are matched as consecutive tokens. Defaults to False.
        """
        self._sentence_splitter = sentence_splitter or TerminatorSentenceSplitter()
        self._tokeniser = tokeniser or WordTokeniser()
        self._buzzwords = frozenset(buzzword.lower() for buzzword in buzzwords)
        self._phrase_matching = phrase_matching
        tokenised = (tuple(self._tokeniser.tokenise(entry)) for entry in buzzwords)
        self._phrases = [phrase for phrase in tokenised if len(phrase) > 1]

    def extract(self, text: str) -> FeatureSet:
        """
        Compute linguistic statistics of a text.

        Args:
            text (str): The text to be described.

        Returns:
            FeatureSet: Statistics of sentence lengths, vocabulary and buzzwords.
        """
        sentences = self._sentence_splitter.split_into_sentences(text)
        words = self._tokeniser.tokenise(text)

        sentence_lengths = [count_words(sentence.strip()) for sentence in sentences]
        sentence_count = len(sentence_lengths) or 1
        average = sum(sentence_lengths) / sentence_count
        variance = (
            sum((length - average) ** 2 for length in sentence_lengths)
            / sentence_count
        )
        std_dev = math.sqrt(variance)

        word_count = len(words)
        unique_word_count = len(set(words))
        type_token_ratio = unique_word_count / (word_count or 1)

        buzzwords_found = self._find_buzzwords(words)
        buzzword_density = len(buzzwords_found) / (word_count or 1)

        features = FeatureSet(
            sentence_lengths=sentence_lengths,
            average_sentence_length=average,
            sentence_length_variance=variance,
            sentence_length_std_dev=std_dev,
            burstiness_score=clamp(std_dev * BURSTINESS_SCALE, 0.0, 100.0),
            word_count=word_count,
            unique_word_count=unique_word_count,
            type_token_ratio=type_token_ratio,
            vocabulary_richness_score=clamp(
                type_token_ratio * VOCABULARY_RICHNESS_SCALE, 0.0, 100.0
            ),
            buzzword_count=len(buzzwords_found),
            buzzword_density=buzzword_density,
            buzzwords_found=buzzwords_found,
        )
        logger.debug(
            f"Extracted features from {len(sentences)} sentence(s) and "
            f"{word_count} word(s): std_dev={std_dev:.3f}, "
            f"ttr={type_token_ratio:.3f}, buzzwords={len(buzzwords_found)}"
        )
        return features

    def _find_buzzwords(self, words: list[str]) -> list[str]:
        found = [word for word in words if word in self._buzzwords]
        if not self._phrase_matching:
            return found

        for phrase in self._phrases:
            span = len(phrase)
            found.extend(
                " ".join(phrase)
                for start in range(len(words) - span + 1)
                if tuple(words[start : start + span]) == phrase
            )
        return found
