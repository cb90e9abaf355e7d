"""Module with structural cues characteristic of specific model families."""

import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar, override

import emoji

from lexidetect.data_models import ModelFamily

Check = Callable[[str], bool]


class StructuralDetector(ABC):
    """Detector of layout and rhetoric typical of a model family."""

    family: ClassVar[ModelFamily]

    @abstractmethod
    def _get_checks(self) -> dict[str, tuple[Check, float]]:
        """
        Get named checks with the points each of them is worth.

        Returns:
            dict[str, tuple[Check, float]]: Mapping of names of cues to pairs of
                a predicate and points added when the predicate holds.
        """

    def find_cues(self, text: str) -> dict[str, float]:
        """
        Find structural cues present in a text.

        Args:
            text (str): The original, not lowercased text.

        Returns:
            dict[str, float]: Mapping of names of present cues to their points.
        """
        return {
            name: points
            for name, (check, points) in self._get_checks().items()
            if check(text)
        }

    def score(self, text: str) -> float:
        """Sum points of all structural cues present in a text."""
        return float(sum(self.find_cues(text).values()))


class GeminiStructure(StructuralDetector):
    """Emoji headings, hashtags and bold list labels favoured by Gemini."""

    family = ModelFamily.GEMINI

    SIGNATURE_EMOJI: ClassVar[frozenset[str]] = frozenset("🧠⚠🛠👇🚀💡✨")
    TRAILING_HASHTAGS = re.compile(r"(?:#[a-zA-Z0-9]+\s*){2,}$")
    HEADING_EMOJI: ClassVar[frozenset[str]] = frozenset("🧠⚠🛠🚀💡✨")
    # The lookahead lets consecutive markers be tried on the same line.
    HEADING_MARKER = re.compile(r"###\s+(?=([^\n]*))")
    BOLD_LABEL_LIST_ITEM = re.compile(r"\d\.\s+\*\*[^*]+:\*\*")

    @override
    def _get_checks(self) -> dict[str, tuple[Check, float]]:
        return {
            "signature emoji": (self._has_signature_emoji, 15.0),
            "hashtag cluster at the end": (self._ends_with_hashtags, 10.0),
            "emoji-led section heading": (self._has_emoji_heading, 15.0),
            "numbered list with bold labels": (self._has_bold_label_list, 15.0),
            "'think of X as' analogy": (self._has_think_of_as_analogy, 10.0),
        }

    @staticmethod
    def _base_symbol(character: str) -> str:
        # Variation selectors (U+FE0F) do not change the symbol.
        return character.replace("\ufe0f", "")

    def _has_signature_emoji(self, text: str) -> bool:
        return any(
            self._base_symbol(item["emoji"]) in self.SIGNATURE_EMOJI
            for item in emoji.emoji_list(text)
        )

    def _ends_with_hashtags(self, text: str) -> bool:
        return self.TRAILING_HASHTAGS.search(text.strip()) is not None

    def _has_emoji_heading(self, text: str) -> bool:
        for marker in self.HEADING_MARKER.finditer(text):
            title = marker.group(1).lstrip()
            found = emoji.emoji_list(title)
            if (
                found
                and found[0]["match_start"] == 0
                and self._base_symbol(found[0]["emoji"]) in self.HEADING_EMOJI
            ):
                return True
        return False

    def _has_bold_label_list(self, text: str) -> bool:
        return self.BOLD_LABEL_LIST_ITEM.search(text) is not None

    def _has_think_of_as_analogy(self, text: str) -> bool:
        lowercased_text = text.lower()
        return "think of" in lowercased_text and " as " in lowercased_text


class ClaudeStructure(StructuralDetector):
    """Two-part rhetoric, emphatic one-liners and long dashes favoured by Claude."""

    family = ModelFamily.CLAUDE

    SET_QUESTION = re.compile(r"(?i:the (?:fear|reality|challenge|catch)\?)\s+[A-Z]")
    EMPHASIS_SENTENCE = re.compile(
        r"(?:\n|\.)\s*(?:not true|precisely|exactly|indeed)\.\s*(?:\n|\.|$)",
        re.IGNORECASE,
    )
    ENGAGEMENT_QUESTION = re.compile(
        r"what['’]s been your experience|have you noticed patterns", re.IGNORECASE
    )

    @override
    def _get_checks(self) -> dict[str, tuple[Check, float]]:
        return {
            "set question with an answer": (self._has_set_question, 20.0),
            "standalone emphasis sentence": (self._has_emphasis_sentence, 15.0),
            "'think of it like X vs Y' analogy": (self._has_versus_analogy, 15.0),
            "engagement question": (self._has_engagement_question, 10.0),
            "em-dash usage": (self._has_em_dash, 15.0),
        }

    def _has_set_question(self, text: str) -> bool:
        return self.SET_QUESTION.search(text) is not None

    def _has_emphasis_sentence(self, text: str) -> bool:
        return self.EMPHASIS_SENTENCE.search(text) is not None

    def _has_versus_analogy(self, text: str) -> bool:
        lowercased_text = text.lower()
        return "think of it like" in lowercased_text and " vs " in lowercased_text

    def _has_engagement_question(self, text: str) -> bool:
        return self.ENGAGEMENT_QUESTION.search(text) is not None

    def _has_em_dash(self, text: str) -> bool:
        return "—" in text
