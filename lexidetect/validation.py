"""Module with validation of texts submitted for analysis."""

from lexidetect.configuration import config
from lexidetect.nlp.tokeniser import WordTokeniser

_tokeniser = WordTokeniser()


class TextValidationError(ValueError):
    """Raised if a text cannot be submitted for analysis."""


def count_words(text: str) -> int:
    """
    Count words of a text the way the detector does.

    Args:
        text (str): The text.

    Returns:
        int: The number of words.
    """
    return len(_tokeniser.tokenise(text))


def validate_text(
    text: str,
    min_words: int = config.min_words,
    max_words: int = config.max_words,
) -> int:
    """
    Check whether a text is suitable for analysis.

    Args:
        text (str): The text to be analysed.
        min_words (int, optional): The minimal number of words. Defaults to
            the value from the configuration.
        max_words (int, optional): The maximal number of words. Defaults to
            the value from the configuration.

    Raises:
        TextValidationError: Raised if the text is empty, too short or too long.

    Returns:
        int: The number of words of the text.
    """
    if not text.strip():
        raise TextValidationError("The text to be analysed cannot be empty.")

    words = count_words(text)
    if words < min_words:
        raise TextValidationError(
            f"Text too short for analysis (minimum {min_words} words). "
            f"Your text contains {words} words."
        )
    if words > max_words:
        raise TextValidationError(
            f"Text exceeds the {max_words}-word limit for analysis. "
            f"Your text contains {words} words."
        )
    return words
