"""Package with data models for the API."""

from pydantic import BaseModel, Field, field_validator


class HealthcheckResponse(BaseModel):
    """Response from the healthcheck endpoint indicating the status of the system."""

    is_healthy: bool


class AnalysisRequest(BaseModel):
    """API request for a text origin analysis."""

    text: str = Field(..., description="Text to be analysed.")

    @field_validator("text")
    @classmethod
    def validate_not_blank(cls, text: str) -> str:
        """Reject texts without any content to be analysed."""
        if not text.strip():
            raise ValueError("The text to be analysed is empty.")
        return text
