"""Module with detectors of LLM-written text."""

from abc import ABC, abstractmethod
from typing import override

from loguru import logger

from lexidetect.configuration import config
from lexidetect.data_models import DetectionResult, Language
from lexidetect.detection.attribution import ModelAttributor
from lexidetect.detection.critical_sections import CriticalSectionExtractor
from lexidetect.detection.fingerprints import (
    FingerprintLibrary,
    load_fingerprint_library,
)
from lexidetect.detection.fusion import ConfidenceFuser
from lexidetect.detection.signals import (
    Predictability,
    RhythmVariance,
    VocabularyDiversity,
)
from lexidetect.nlp.sentence_splitter import DelimiterSentenceSplitter
from lexidetect.nlp.tokeniser import WordTokeniser

# Reported burstiness stays strictly inside (-1, 1) after rounding.
BURSTINESS_LIMIT = 0.99


class Detector(ABC):
    """An interface for a LLM-written text detector."""

    @abstractmethod
    def detect(self, text: str, language: Language) -> float:
        """
        Detect and get probability of a text being LLM-written.

        Args:
            text (str): Text to be evaluated.
            language (Language): Language, in which a text is written.

        Returns:
            float: Probability of the text being LLM-generated.
                1.0 means certainly prepared by an LLM, 0.0 means human-made.
                The value is always in the range [0, 1].
        """

    @abstractmethod
    def get_threshold(self) -> float:
        """
        Get a value above which a text is considered LLM-written.

        Returns:
            float: Floating point value threshold for a detector.
        """

    def get_name(self) -> str:
        """
        Get name of the detector.

        Returns:
            str: Name of the detector.
        """
        return type(self).__name__


class MathematicalDetector(Detector):
    """Explainable detector based on statistics and fingerprints of a text."""

    def __init__(
        self,
        library: FingerprintLibrary | None = None,
        min_words: int = 50,
        sentence_threshold: float = config.sentence_threshold,
    ) -> None:
        """
        Initialise signals, the attributor and the critical section extractor.

        Args:
            library (FingerprintLibrary | None, optional): Fingerprint phrases.
                Defaults to the library from the configured file.
            min_words (int, optional): Texts with fewer words get a neutral result
                without any analysis. Defaults to 50.
            sentence_threshold (float, optional): The minimal score of a sentence
                to be reported as critical. Defaults to the value from
                the configuration.
        """
        if library is None:
            library = load_fingerprint_library()
        self._library = library
        self._min_words = min_words
        self._tokeniser = WordTokeniser()
        self._sentence_splitter = DelimiterSentenceSplitter()

        self._predictability = Predictability()
        self._rhythm = RhythmVariance()
        self._diversity = VocabularyDiversity()

        self._attributor = ModelAttributor(self._library)
        self._fuser = ConfidenceFuser()
        self._extractor = CriticalSectionExtractor(
            self._library,
            tokeniser=self._tokeniser,
            sentence_splitter=self._sentence_splitter,
            sentence_threshold=sentence_threshold,
        )

    @override
    def detect(self, text: str, language: Language) -> float:
        if language != "english":
            raise ValueError("Currently, only `english` is supported as a language.")
        return self.analyze(text).ai_confidence / 100

    @override
    def get_threshold(self) -> float:
        return 0.7

    def _measure_rhythm(self, text: str) -> float:
        sentence_lengths = [
            len(self._tokeniser.tokenise(sentence))
            for sentence in self._sentence_splitter.split_into_sentences(text)
        ]
        return self._rhythm.measure(sentence_lengths)

    def analyze(self, text: str) -> DetectionResult:
        """
        Analyse how likely a text was written by a language model.

        Args:
            text (str): The text to be analysed.

        Returns:
            DetectionResult: Scores, critical sections and the likely model family.
                Texts shorter than the minimal number of words get a neutral result
                with 50% AI confidence.
        """
        tokens = self._tokeniser.tokenise(text)
        if len(tokens) < self._min_words:
            logger.warning(
                f"The text has only {len(tokens)} words, fewer than "
                f"{self._min_words} required for analysis. Returning a neutral result."
            )
            return DetectionResult(
                ai_confidence=50.0,
                perplexity_score=0.0,
                burstiness_score=0.0,
                diversity_score=0.0,
            )

        perplexity = self._predictability.measure(tokens)
        burstiness = self._measure_rhythm(text)
        diversity = self._diversity.measure(tokens)
        logger.debug(
            f"Perplexity: {perplexity:.2f}, burstiness: {burstiness:.2f}, "
            f"diversity: {diversity:.2f}"
        )

        attribution = self._attributor.attribute(text)
        ai_confidence = self._fuser.fuse(
            predictability=self._predictability.normalise(perplexity),
            rhythm=self._rhythm.normalise(burstiness),
            diversity=self._diversity.normalise(diversity),
            phrase_boost=self._library.phrase_boost(text),
            attribution=attribution,
        )

        model_confidence = None
        if attribution.confidence is not None:
            model_confidence = round(attribution.confidence, 2)

        return DetectionResult(
            ai_confidence=round(ai_confidence, 2),
            perplexity_score=round(perplexity, 2),
            burstiness_score=max(
                -BURSTINESS_LIMIT, min(BURSTINESS_LIMIT, round(burstiness, 2))
            ),
            diversity_score=round(diversity, 2),
            critical_sections=tuple(self._extractor.extract(text)),
            likely_model=attribution.family,
            model_confidence=model_confidence,
        )
