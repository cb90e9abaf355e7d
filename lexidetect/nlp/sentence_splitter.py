"""Module for splitting a text into sentences."""

import re
from abc import ABC, abstractmethod
from typing import override

from lexidetect.data_models import Sentence


class SentenceSplitter(ABC):
    """Interface for splitting a text into sentences."""

    @abstractmethod
    def split_into_sentences(self, text: str) -> list[str]:
        """
        Split a text into sentences.

        Args:
            text (str): Text to be split.

        Returns:
            list[str]: List of sentences, one items is one sentence.
        """

    @abstractmethod
    def split_with_offsets(self, text: str) -> list[Sentence]:
        """
        Split a text into sentences located in the original text.

        Args:
            text (str): Text to be split.

        Returns:
            list[Sentence]: Non-overlapping sentences in the order of the text.
                `text[sentence.start:sentence.end]` spans the sentence without its
                leading whitespace, up to and including its delimiter.
        """


class DelimiterSentenceSplitter(SentenceSplitter):
    """Sentence splitter cutting a text after runs of `.`, `!` and `?`."""

    DELIMITER = re.compile(r"[.!?]+")

    @override
    def split_into_sentences(self, text: str) -> list[str]:
        fragments = (fragment.strip() for fragment in self.DELIMITER.split(text))
        return [fragment for fragment in fragments if fragment]

    @override
    def split_with_offsets(self, text: str) -> list[Sentence]:
        sentences = []
        offset = 0
        for match in self.DELIMITER.finditer(text):
            sentence = self._locate(text, offset, match.start(), match.group())
            if sentence is not None:
                sentences.append(sentence)
            offset = match.end()

        # A trailing fragment without a delimiter is still a sentence.
        sentence = self._locate(text, offset, len(text), "")
        if sentence is not None:
            sentences.append(sentence)
        return sentences

    def _locate(
        self, text: str, start: int, end: int, delimiter: str
    ) -> Sentence | None:
        fragment = text[start:end]
        content = fragment.strip()
        if not content:
            return None

        content_start = start + (len(fragment) - len(fragment.lstrip()))
        if delimiter:
            content_end = end + len(delimiter)
        else:
            content_end = start + len(fragment.rstrip())
        return Sentence(
            start=content_start,
            end=content_end,
            content=content,
            delimiter=delimiter,
        )
