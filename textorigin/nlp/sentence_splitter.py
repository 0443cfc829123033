"""Module for splitting a text into sentences."""

import re
from abc import ABC, abstractmethod
from typing_extensions import override


class SentenceSplitter(ABC):
    """Interface for splitting a text into sentences."""

    @abstractmethod
    def split_into_sentences(self, text: str) -> list[str]:
        """
        Split a text into sentences.

        Args:
            text (str): Text to be split.

        Returns:
            list[str]: List of sentences, one items is one sentence. Never empty.
        """


class TerminatorSentenceSplitter(SentenceSplitter):
    """Splitter cutting a text after each run of `.`, `!` or `?` terminators."""

    _TERMINATORS = ".!?"
    _SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+")

    @override
    def split_into_sentences(self, text: str) -> list[str]:
        # Unterminated trailing text is dropped. Cutting it off before matching
        # keeps the scan linear, a failed match from every position is quadratic.
        last_terminator = max(text.rfind(character) for character in self._TERMINATORS)
        if last_terminator == -1:
            return [text]
        sentences = self._SENTENCE_PATTERN.findall(text[: last_terminator + 1])
        # A text with terminators only is a single sentence too.
        return sentences or [text]
