"""Module with attribution of a text to a family of language models."""

from loguru import logger

from lexidetect.data_models import Attribution, ModelFamily
from lexidetect.detection.fingerprints import FingerprintLibrary
from lexidetect.detection.structural import (
    ClaudeStructure,
    GeminiStructure,
    StructuralDetector,
)

MAX_FAMILY_SCORE = 100.0


class ModelAttributor:
    """Attributor picking the model family whose fingerprints a text matches best."""

    def __init__(
        self,
        library: FingerprintLibrary,
        structural_detectors: list[StructuralDetector] | None = None,
        confidence_floor: float = 30.0,
    ) -> None:
        """
        Initialise the attributor.

        Args:
            library (FingerprintLibrary): Fingerprint phrases of model families.
            structural_detectors (list[StructuralDetector] | None, optional):
                Detectors adding a bonus to the score of their family.
                Defaults to the Gemini and Claude detectors.
            confidence_floor (float, optional): The minimal score of the best family
                to attribute a text to it. Defaults to 30.
        """
        self._library = library
        if structural_detectors is None:
            structural_detectors = [GeminiStructure(), ClaudeStructure()]
        self._structural_detectors = {
            detector.family: detector for detector in structural_detectors
        }
        self._confidence_floor = confidence_floor

    def _score_phrases(self, lowercased_text: str, family: ModelFamily) -> float:
        phrases = self._library.phrases_of_family(family)
        found = sum(phrase in lowercased_text for phrase in phrases)
        return found / len(phrases) * MAX_FAMILY_SCORE

    def score_family(self, text: str, family: ModelFamily) -> float:
        """
        Score how well a text matches fingerprints of a model family.

        Args:
            text (str): The analysed text.
            family (ModelFamily): The family to be scored.

        Returns:
            float: Percentage of matched fingerprint phrases of the family plus its
                structural bonus, at most 100.
        """
        score = self._score_phrases(text.lower(), family)
        detector = self._structural_detectors.get(family)
        if detector is not None:
            cues = detector.find_cues(text)
            if cues:
                logger.debug(f"Structural cues of {family.value}: {sorted(cues)}")
            score += sum(cues.values())
        return min(MAX_FAMILY_SCORE, score)

    def attribute(self, text: str) -> Attribution:
        """
        Attribute a text to the best matching model family.

        Ties are resolved in favour of the family declared first in `ModelFamily`.

        Args:
            text (str): The analysed text.

        Returns:
            Attribution: The attributed family with its confidence, or an empty
                attribution if no family reaches the confidence floor.
        """
        scores = {family: self.score_family(text, family) for family in ModelFamily}
        best_family = max(scores, key=lambda family: scores[family])
        best_score = scores[best_family]
        logger.debug(
            "Model family scores: "
            + ", ".join(f"{family.value}={score:.2f}" for family, score in scores.items())
        )

        if best_score < self._confidence_floor:
            return Attribution(scores=scores)
        return Attribution(family=best_family, confidence=best_score, scores=scores)
