"""
Pydantic schemas for the speech-to-text endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field


class TranscriptionResponse(BaseModel):
    """Response model for POST /speech/transcribe."""

    text: str = Field(
        ...,
        description="Transcript returned by the speech-to-text service (may be empty)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "buy groceries tomorrow"
            }
        }
    )
