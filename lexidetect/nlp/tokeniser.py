"""Module with natural language tokenisers."""

from abc import ABC, abstractmethod
from typing import override

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
    """Tokeniser producing lowercase words, with punctuation discarded."""

    # Runs of letters or digits, optionally joined by an apostrophe (it's, don't).
    WORD_PATTERN = r"[^\W_]+(?:['’][^\W_]+)*"

    def __init__(self) -> None:
        """Initialise a regular expression based tokeniser."""
        self._tokeniser = RegexpTokenizer(self.WORD_PATTERN)

    @override
    def tokenise(self, text: str) -> list[str]:
        return self._tokeniser.tokenize(text.lower())
