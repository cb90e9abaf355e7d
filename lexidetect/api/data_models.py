"""Package with data models for the API."""

from pydantic import BaseModel, Field

from lexidetect.data_models import CamelModel, DetectionResult, Verdict


class HealthcheckResponse(BaseModel):
    """Response from the healthcheck endpoint indicating the status of the system."""

    is_healthy: bool


class AnalysisRequest(BaseModel):
    """API request for an analysis of a text."""

    text: str = Field(..., min_length=1)


class AnalysisResponse(CamelModel):
    """Response sent when a client requests an analysis of a text."""

    result: DetectionResult
    verdict: Verdict
    label: str
    word_count: int
    remarks: list[str]

    @classmethod
    def from_result(cls, result: DetectionResult, word_count: int) -> "AnalysisResponse":
        """
        Build a response from a detection result.

        Args:
            result (DetectionResult): The result of the analysis.
            word_count (int): The number of words of the analysed text.

        Returns:
            AnalysisResponse: The response.
        """
        return cls(
            result=result,
            verdict=result.get_verdict(),
            label=result.get_label(),
            word_count=word_count,
            remarks=result.get_remarks(),
        )
