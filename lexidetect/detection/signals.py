"""Module with statistical signals of LLM-written text."""

from abc import ABC
from collections import Counter
from collections.abc import Sequence

import numpy as np

from lexidetect.data_models import Range

MAX_SCORE = 100.0


class Signal(ABC):
    """
    A statistical property of a text convertible into an AI-likeness score.

    Every signal is inverted: the lower the raw value, the more AI-like the text.
    Values at or above `bounds.max` score 0, values at or below `bounds.min` score
    100 and values in between are interpolated linearly.
    """

    bounds: Range

    def normalise(self, value: float) -> float:
        """
        Map a raw value of the signal to an AI-likeness score.

        Args:
            value (float): Raw value of the signal.

        Returns:
            float: Score in the range [0, 100]. 100 means very AI-like.
        """
        if value >= self.bounds.max:
            return 0.0
        if value <= self.bounds.min:
            return MAX_SCORE
        span = self.bounds.max - self.bounds.min
        return MAX_SCORE - (value - self.bounds.min) / span * MAX_SCORE


class Predictability(Signal):
    """Perplexity proxy derived from the entropy of word bigrams."""

    bounds = Range(min=20, max=100)

    def measure(self, tokens: Sequence[str]) -> float:
        """
        Calculate the bigram perplexity of a sequence of words.

        Args:
            tokens (Sequence[str]): Words in the order of the text.

        Returns:
            float: `2^H` where H is the Shannon entropy of bigram frequencies.
                0.0 if there are fewer than two words.
        """
        if len(tokens) < 2:  # noqa: PLR2004
            return 0.0

        bigrams = Counter(
            f"{first} {second}" for first, second in zip(tokens, tokens[1:])
        )
        counts = np.fromiter(bigrams.values(), dtype=float)
        probabilities = counts / counts.sum()
        entropy = -np.sum(probabilities * np.log2(probabilities))
        return float(2**entropy)


class RhythmVariance(Signal):
    """Burstiness of a text, i.e. variation of its sentence lengths."""

    bounds = Range(min=0.2, max=0.5)

    def measure(self, sentence_lengths: Sequence[int]) -> float:
        """
        Calculate burstiness from word counts of consecutive sentences.

        Args:
            sentence_lengths (Sequence[int]): Number of words in each sentence.

        Returns:
            float: `(σ - μ) / (σ + μ)`, where σ is population standard deviation and
                μ is mean of sentence lengths. 0.0 for fewer than two sentences.
        """
        if len(sentence_lengths) < 2:  # noqa: PLR2004
            return 0.0

        lengths = np.asarray(sentence_lengths, dtype=float)
        mean = float(lengths.mean())
        deviation = float(lengths.std())
        if deviation + mean == 0:
            return 0.0
        return (deviation - mean) / (deviation + mean)


class VocabularyDiversity(Signal):
    """Type-token ratio of the words of a text."""

    bounds = Range(min=0.4, max=0.6)

    def measure(self, tokens: Sequence[str]) -> float:
        """
        Calculate the ratio of unique words to all words.

        Args:
            tokens (Sequence[str]): Words of the text.

        Returns:
            float: Type-token ratio in [0, 1]. 0.0 if there are no words.
        """
        if not tokens:
            return 0.0
        return len(set(tokens)) / len(tokens)
