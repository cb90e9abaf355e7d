"""Module with fusion of independent signals into a single AI confidence."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from lexidetect.data_models import Attribution

MAX_CONFIDENCE = 100.0


class SignalWeights(BaseModel):
    """Weights of normalised statistical signals."""

    predictability: float = Field(0.4, ge=0.0, le=1.0)
    rhythm: float = Field(0.3, ge=0.0, le=1.0)
    diversity: float = Field(0.3, ge=0.0, le=1.0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_weights_sum(self) -> Self:
        """Validate whether weights sum up to 1.0."""
        total = round(self.predictability + self.rhythm + self.diversity, 9)
        if total != 1.0:
            raise ValueError(
                f"Weights of signals have to sum up to 1.0 but they sum up to {total}."
            )
        return self


class ConfidenceFuser:
    """Fuser of normalised signals, phrase boost and model attribution."""

    def __init__(
        self,
        weights: SignalWeights | None = None,
        model_boost_threshold: float = 60.0,
        max_model_boost: float = 40.0,
    ) -> None:
        """
        Initialise the fuser.

        Args:
            weights (SignalWeights | None, optional): Weights of normalised signals.
                Defaults to 0.4 predictability, 0.3 rhythm, 0.3 diversity.
            model_boost_threshold (float, optional): Minimal confidence of model
                attribution to boost AI confidence. Defaults to 60.
            max_model_boost (float, optional): The boost for an attribution with
                100% confidence. Defaults to 40.
        """
        self._weights = weights or SignalWeights()
        self._model_boost_threshold = model_boost_threshold
        self._max_model_boost = max_model_boost

    def fuse(
        self,
        predictability: float,
        rhythm: float,
        diversity: float,
        phrase_boost: float,
        attribution: Attribution,
    ) -> float:
        """
        Combine evidence into a confidence of a text being LLM-written.

        Explicit fingerprints are strong evidence on their own, so both boosts can
        outweigh human-like statistics.

        Args:
            predictability (float): Normalised predictability score in [0, 100].
            rhythm (float): Normalised rhythm variance score in [0, 100].
            diversity (float): Normalised vocabulary diversity score in [0, 100].
            phrase_boost (float): Points for generic AI phrases.
            attribution (Attribution): Attribution of the text to a model family.

        Returns:
            float: AI confidence in [0, 100].
        """
        confidence = (
            self._weights.predictability * predictability
            + self._weights.rhythm * rhythm
            + self._weights.diversity * diversity
        )
        confidence = min(MAX_CONFIDENCE, confidence + phrase_boost)

        if (
            attribution.family is not None
            and attribution.confidence is not None
            and attribution.confidence >= self._model_boost_threshold
        ):
            model_boost = attribution.confidence / 100 * self._max_model_boost
            confidence = min(MAX_CONFIDENCE, confidence + model_boost)

        return max(0.0, confidence)
