"""Module localising spans of a text that drive the verdict."""

import re

from loguru import logger

from lexidetect.configuration import config
from lexidetect.data_models import CriticalSection, FingerprintGroup, Sentence
from lexidetect.detection.fingerprints import FAMILY_ORDER, FingerprintLibrary
from lexidetect.detection.signals import Predictability, VocabularyDiversity
from lexidetect.nlp.sentence_splitter import DelimiterSentenceSplitter, SentenceSplitter
from lexidetect.nlp.tokeniser import Tokeniser, WordTokeniser

PHRASE_CONFIDENCE = 95.0
SENTENCE_PHRASE_BOOST = 20.0
MAX_SCORE = 100.0
LOW_DIVERSITY = 0.4
REASON_SEPARATOR = " • "


class ReasonBuilder:
    """
    Builder of explanations of critical sections within a single analysis.

    Explanations are derived from the evidence behind a section. If two sections
    would get the same explanation, the later one is suffixed with the number of
    its occurrence so that no two sections share an explanation.
    """

    def __init__(self, library: FingerprintLibrary) -> None:
        """Initialise the builder with no explanations issued yet."""
        self._library = library
        self._issued: set[str] = set()

    def _register(self, reason: str) -> str:
        candidate = reason
        occurrence = 1
        while candidate in self._issued:
            occurrence += 1
            candidate = f"{reason} (occurrence {occurrence})"
        self._issued.add(candidate)
        return candidate

    def for_phrase(self, phrase: str) -> str:
        """
        Explain a match of a fingerprint phrase.

        Args:
            phrase (str): The matched fingerprint phrase.

        Returns:
            str: Explanation naming the model family fingerprinted by the phrase,
                or the generic group if the phrase is not family-specific.
        """
        family = self._library.family_of(phrase)
        if family is not None:
            return self._register(f"Common {family.value} writing pattern: '{phrase}'")
        return self._register(f"Detected common AI phrase: '{phrase}'")

    def _find_family_patterns(self, sentence: str) -> list[str]:
        patterns = []
        for group in FAMILY_ORDER:
            patterns.extend(
                f"{group.value} pattern: '{phrase}'"
                for phrase in self._library.find(sentence, group)
            )
        return patterns

    def for_sentence(self, score: float, sentence: str, diversity: float) -> str:
        """
        Explain why a whole sentence looks LLM-written.

        Specific AI phrases come first, then a model family pattern, then a note on
        vocabulary diversity. A description of the score band is the fallback.

        Args:
            score (float): AI-likeness score of the sentence in [0, 100].
            sentence (str): The trimmed sentence.
            diversity (float): Type-token ratio of the sentence.

        Returns:
            str: The explanation.
        """
        reasons = []

        generic_phrases = self._library.find(sentence, FingerprintGroup.GENERIC)
        if generic_phrases:
            quoted = '", "'.join(generic_phrases[:2])
            reasons.append(f'Contains AI phrase: "{quoted}"')

        family_patterns = self._find_family_patterns(sentence)
        if family_patterns:
            reasons.append(family_patterns[0])

        if diversity < LOW_DIVERSITY:
            reasons.append(f"Low vocabulary diversity ({round(diversity * 100)}%)")

        if not reasons:
            if score > 85:  # noqa: PLR2004
                reasons.append("Highly repetitive structure and predictable patterns")
            elif score > 70:  # noqa: PLR2004
                reasons.append("Predictable word choice with consistent rhythm")
            else:
                reasons.append("Consistent sentence structure typical of AI")

        return self._register(REASON_SEPARATOR.join(reasons))


class CriticalSectionExtractor:
    """Extractor of fingerprint phrases and suspicious sentences from a text."""

    def __init__(
        self,
        library: FingerprintLibrary,
        tokeniser: Tokeniser | None = None,
        sentence_splitter: SentenceSplitter | None = None,
        sentence_threshold: float = config.sentence_threshold,
        min_sentence_words: int = 5,
    ) -> None:
        """
        Initialise the extractor and compile patterns of fingerprint phrases.

        Args:
            library (FingerprintLibrary): Fingerprint phrases to look for.
            tokeniser (Tokeniser | None, optional): Word tokeniser. Defaults to
                `WordTokeniser`.
            sentence_splitter (SentenceSplitter | None, optional): Sentence splitter.
                Defaults to `DelimiterSentenceSplitter`.
            sentence_threshold (float, optional): The minimal score of a sentence
                to be flagged. Defaults to the value from the configuration.
            min_sentence_words (int, optional): Shorter sentences are never flagged.
                Defaults to 5.
        """
        self._library = library
        self._tokeniser = tokeniser or WordTokeniser()
        self._sentence_splitter = sentence_splitter or DelimiterSentenceSplitter()
        self._sentence_threshold = sentence_threshold
        self._min_sentence_words = min_sentence_words
        self._predictability = Predictability()
        self._diversity = VocabularyDiversity()

        # Longest phrases first.
        self._phrase_patterns = [
            (phrase, self._compile(phrase)) for phrase in library.all_phrases()
        ]

    @staticmethod
    def _compile(phrase: str) -> re.Pattern[str]:
        # Word boundaries only where the phrase itself starts or ends with a word
        # character, e.g. "not true." must not require a boundary after the dot.
        start = r"\b" if re.match(r"\w", phrase) else ""
        end = r"\b" if re.search(r"\w$", phrase) else ""
        return re.compile(start + re.escape(phrase) + end, re.IGNORECASE)

    def extract(self, text: str) -> list[CriticalSection]:
        """
        Find critical sections of a text.

        Overlapping sections are preserved. Renderers resolve overlaps by taking
        sections in the order of their starts and skipping those starting before
        the end of the previously taken section.

        Args:
            text (str): The analysed text.

        Returns:
            list[CriticalSection]: Sections sorted by their start offsets.
        """
        reasons = ReasonBuilder(self._library)
        phrase_sections = self._find_phrases(text, reasons)
        sentence_sections = self._find_sentences(text, reasons)
        logger.debug(
            f"Found {len(phrase_sections)} phrase and {len(sentence_sections)} "
            "sentence critical sections"
        )
        return sorted(
            phrase_sections + sentence_sections, key=lambda section: section.start
        )

    def _find_phrases(
        self, text: str, reasons: ReasonBuilder
    ) -> list[CriticalSection]:
        sections = []
        for phrase, pattern in self._phrase_patterns:
            for match in pattern.finditer(text):
                sections.append(
                    CriticalSection(
                        start=match.start(),
                        end=match.end(),
                        confidence=PHRASE_CONFIDENCE,
                        reason=reasons.for_phrase(phrase),
                        text=match.group(),
                    )
                )
        return sections

    def score_sentence(self, sentence: str) -> float:
        """
        Score how AI-like a single sentence is.

        Args:
            sentence (str): The trimmed sentence.

        Returns:
            float: Weighted predictability and diversity scores plus 20 points for
                each generic AI phrase, at most 100.
        """
        tokens = self._tokeniser.tokenise(sentence)
        predictability = self._predictability.normalise(
            self._predictability.measure(tokens)
        )
        diversity = self._diversity.normalise(self._diversity.measure(tokens))
        score = 0.6 * predictability + 0.4 * diversity

        phrases = self._library.find(sentence, FingerprintGroup.GENERIC)
        score += SENTENCE_PHRASE_BOOST * len(phrases)
        return min(MAX_SCORE, score)

    def _find_sentences(
        self, text: str, reasons: ReasonBuilder
    ) -> list[CriticalSection]:
        sections = []
        for sentence in self._sentence_splitter.split_with_offsets(text):
            section = self._inspect_sentence(text, sentence, reasons)
            if section is not None:
                sections.append(section)
        return sections

    def _inspect_sentence(
        self, text: str, sentence: Sentence, reasons: ReasonBuilder
    ) -> CriticalSection | None:
        tokens = self._tokeniser.tokenise(sentence.content)
        if len(tokens) < self._min_sentence_words:
            return None

        score = self.score_sentence(sentence.content)
        if score < self._sentence_threshold:
            return None

        diversity = self._diversity.measure(tokens)
        return CriticalSection(
            start=sentence.start,
            end=sentence.end,
            confidence=round(score, 2),
            reason=reasons.for_sentence(score, sentence.content, diversity),
            text=text[sentence.start : sentence.end],
        )
