"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has its own request and response model. All models
include Field descriptions for rich OpenAPI docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- chars_per_second overrides must be > 0 (validated by pydantic)
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class ScriptRequest(BaseModel):
    """A script sent for recalculation or caption synthesis."""

    script: str = Field(
        description="Full markdown script with inline (MM:SS) time markers.",
    )
    chars_per_second: Optional[float] = Field(
        default=None,
        gt=0,
        description="Reading speed override. Defaults to the server configuration.",
    )


class ExportRequest(ScriptRequest):
    """A script sent for download in one export format."""

    basename: Optional[str] = Field(
        default=None,
        description="File stem for the download. Defaults to AI_StoryLab_Script_<date>.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class RecalculateResponse(BaseModel):
    script: str = Field(description="The script with every time marker recomputed.")
    marker_count: int = Field(description="Number of lines carrying a time marker.")


class CaptionEntryModel(BaseModel):
    sequence_number: int = Field(description="1-based cue number.")
    start_seconds: float = Field(description="Cue start in seconds.")
    end_seconds: float = Field(description="Cue end in seconds.")
    text: str = Field(description="Caption text, may span several lines.")


class CaptionsResponse(BaseModel):
    entries: List[CaptionEntryModel] = Field(description="Cues in textual order.")
    srt: str = Field(description="The same cues serialized as SRT.")


class FormatInfo(BaseModel):
    key: str = Field(description="Formatter identifier used in export URLs.")
    name: str = Field(description="Human-readable format name.")


class HealthResponse(BaseModel):
    status: str = Field(description="Always 'ok' when the service is up.")
    version: str = Field(description="Package version.")


class ErrorResponse(BaseModel):
    detail: str = Field(description="Human-readable error message.")
