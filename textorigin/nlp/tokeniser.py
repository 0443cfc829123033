"""Module with natural language tokenisers."""

import re
from abc import ABC, abstractmethod
from typing_extensions import override

from nltk.tokenize import RegexpTokenizer


class Tokeniser(ABC):
    """An interface of a natural language tokeniser."""

    @abstractmethod
    def tokenise(self, text: str) -> list[str]:
        """
        Split a text into textual tokens.

        Args:
            text (str): A text to be split.

        Returns:
            list[str]: A list of resulting textual tokens.

        """


class WordTokeniser(Tokeniser):
    """Tokeniser extracting lowercase words made of letters, digits and `_`."""

    def __init__(self) -> None:
        """Initialise the tokeniser of ASCII-only words, so "café" yields "caf"."""
        self._tokeniser = RegexpTokenizer(r"\w+", flags=re.ASCII)

    @override
    def tokenise(self, text: str) -> list[str]:
        return self._tokeniser.tokenize(text.lower())


def count_words(sentence: str) -> int:
    """
    Count whitespace-separated words in a sentence.

    Args:
        sentence (str): A single sentence, possibly padded with whitespace.

    Returns:
        int: The number of whitespace-separated chunks, 0 for a blank sentence.
    """
    return len(sentence.split())
