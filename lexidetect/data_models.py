"""Module with project-wide data models."""

from enum import Enum
from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

Language = Literal["english"]
Number = float | int

LIKELY_AI_THRESHOLD = 70.0
LIKELY_HUMAN_THRESHOLD = 30.0
SOPHISTICATED_MODEL_CONFIDENCE = 60.0


class Range(BaseModel):
    """Inclusive continuous range of numeric values."""

    min: Number
    max: Number

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_order(self) -> Self:
        """Validate whether the lower bound is below the upper one."""
        if self.min >= self.max:
            raise ValueError(
                f"The lower bound {self.min} has to be below the upper bound "
                f"{self.max}."
            )
        return self


class ModelFamily(str, Enum):
    """Families of language models that can be attributed as an author."""

    GPT = "GPT"
    CLAUDE = "Claude"
    GEMINI = "Gemini"


class FingerprintGroup(str, Enum):
    """Groups a fingerprint phrase may belong to."""

    GENERIC = "generic"
    GPT = "GPT"
    CLAUDE = "Claude"
    GEMINI = "Gemini"

    def to_model_family(self) -> ModelFamily | None:
        """
        Map a group to the model family it fingerprints.

        Returns:
            ModelFamily | None: The model family or None for the generic group.
        """
        if self is FingerprintGroup.GENERIC:
            return None
        return ModelFamily(self.value)


class Verdict(str, Enum):
    """Coarse classification of a text derived from its AI confidence."""

    LIKELY_AI = "likely_ai"
    MIXED = "mixed"
    LIKELY_HUMAN = "likely_human"


class CamelModel(BaseModel):
    """Immutable model serialised with camelCase field names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Sentence(BaseModel):
    """A sentence located in the original text."""

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    content: str
    delimiter: str

    model_config = ConfigDict(frozen=True)


class CriticalSection(CamelModel):
    """A flagged span of the analysed text with an explanation."""

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=1)
    confidence: float = Field(..., ge=0.0, le=100.0)
    reason: str
    text: str

    @model_validator(mode="after")
    def validate_span(self) -> Self:
        """Validate whether the span is non-empty and matches its text."""
        if self.start >= self.end:
            raise ValueError(
                f"A critical section has to end ({self.end}) after it starts "
                f"({self.start})."
            )
        if len(self.text) != self.end - self.start:
            raise ValueError(
                "The length of the text of a critical section has to match its span."
            )
        return self


class Attribution(BaseModel):
    """Outcome of attributing a text to a model family."""

    family: ModelFamily | None = None
    confidence: float | None = None
    scores: dict[ModelFamily, float] = {}

    model_config = ConfigDict(frozen=True)


class DetectionResult(CamelModel):
    """Result of a single analysis of a text."""

    ai_confidence: float = Field(..., ge=0.0, le=100.0)
    perplexity_score: float = Field(..., ge=0.0)
    burstiness_score: float = Field(..., gt=-1.0, lt=1.0)
    diversity_score: float = Field(..., ge=0.0, le=1.0)
    critical_sections: tuple[CriticalSection, ...] = ()
    likely_model: ModelFamily | None = None
    model_confidence: float | None = Field(None, ge=0.0, le=100.0)

    @model_validator(mode="after")
    def validate_model_confidence(self) -> Self:
        """Validate whether model confidence is present only with a model."""
        if (self.likely_model is None) != (self.model_confidence is None):
            raise ValueError(
                "Model confidence has to be present if and only if a model family "
                "is attributed."
            )
        return self

    def is_likely_ai(self) -> bool:
        """Check whether the text is most likely LLM-written."""
        return self.ai_confidence > LIKELY_AI_THRESHOLD

    def is_mixed(self) -> bool:
        """Check whether the text looks partially LLM-written or edited."""
        return LIKELY_HUMAN_THRESHOLD < self.ai_confidence <= LIKELY_AI_THRESHOLD

    def is_likely_human(self) -> bool:
        """Check whether the text is most likely human-written."""
        return self.ai_confidence <= LIKELY_HUMAN_THRESHOLD

    def get_verdict(self) -> Verdict:
        """
        Classify the text by its AI confidence.

        Returns:
            Verdict: The verdict for the text.
        """
        if self.is_likely_ai():
            return Verdict.LIKELY_AI
        if self.is_mixed():
            return Verdict.MIXED
        return Verdict.LIKELY_HUMAN

    def get_label(self) -> str:
        """
        Get a human-readable label of the verdict.

        Returns:
            str: The label.
        """
        return {
            Verdict.LIKELY_AI: "Likely AI-Generated",
            Verdict.MIXED: "Mixed or Edited AI",
            Verdict.LIKELY_HUMAN: "Likely Human-Written",
        }[self.get_verdict()]

    def get_remarks(self) -> list[str]:
        """
        Get remarks explaining notable aspects of the result.

        Returns:
            list[str]: Remarks, possibly empty.
        """
        remarks = []
        if (
            self.likely_model is not None
            and self.model_confidence is not None
            and self.model_confidence >= SOPHISTICATED_MODEL_CONFIDENCE
            and not self.is_likely_ai()
        ):
            remarks.append(
                f"Sophisticated AI writing: the text shows clear "
                f"{self.likely_model.value}-specific patterns "
                f"({self.model_confidence}% confidence) while keeping human-like "
                "variation in sentence structure and vocabulary."
            )
        if self.likely_model is None and not self.is_likely_human():
            remarks.append(
                "No model family could be attributed with sufficient confidence."
            )
        return remarks
