"""Pydantic response models for the Image to Prompt API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body for the ``GET /api/health`` endpoint.

    Attributes:
        status: Always ``"ok"`` when the server is serving requests.
        version: Installed package version.
        model_id: Gemini model used for prompt generation.
    """

    status: str = Field(default="ok", description="Server status")
    version: str = Field(..., description="Application version")
    model_id: str = Field(..., description="Gemini model identifier")
