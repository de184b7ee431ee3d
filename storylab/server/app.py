"""FastAPI application exposing the script timing engine over HTTP.

WHY: The browser front end owns the script while the user edits it, but the
timing logic lives in Python. The front end posts the script on "save edit"
(recalculate) and on "download" (export), and gets the new text or file
back.

HOW: A single FastAPI app with endpoints grouped by tags. Every call is
stateless: the script comes in with the request and nothing is kept
afterwards.

RULES:
- All endpoints have OpenAPI descriptions
- Error responses use the ErrorResponse schema
- Unknown export format -> 404, invalid pacing configuration -> 400
- Downloads carry Content-Disposition: attachment with the dated filename,
  an ASCII filename= fallback plus an RFC 5987 filename*= for non-ASCII names
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional
from urllib.parse import quote

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from script_timing import (
    PacingModel,
    build_caption_entries,
    count_markers,
    recalculate_timestamps,
    render_srt,
)
from storylab import __version__
from storylab.config import load_pacing
from storylab.export import export_basename, run_formatters
from storylab.formatters import FORMATTERS
from storylab.server.models import (
    CaptionEntryModel,
    CaptionsResponse,
    ErrorResponse,
    ExportRequest,
    FormatInfo,
    HealthResponse,
    RecalculateResponse,
    ScriptRequest,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="StoryLab Script API",
    description=(
        "Retime markdown video scripts after editing and export them as "
        "plain text or SRT subtitles."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


def _pacing(chars_per_second: Optional[float]) -> PacingModel:
    """Resolve the request's pacing, mapping config errors to HTTP 400."""
    try:
        return load_pacing(chars_per_second)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


def _content_disposition(filename: str) -> str:
    """Build an attachment header that survives non-ASCII and quote characters.

    Header values are latin-1 on the wire, so the plain filename= carries an
    ASCII fallback and the real UTF-8 name goes in filename*=.
    """
    fallback = filename.encode("ascii", "replace").decode("ascii")
    fallback = re.sub(r'[\x00-\x1f\x7f"\\?]', "_", fallback)
    if fallback == filename:
        return 'attachment; filename="{}"'.format(filename)
    return "attachment; filename=\"{}\"; filename*=UTF-8''{}".format(
        fallback, quote(filename, safe="")
    )


# ---------------------------------------------------------------------------
# Endpoints: Scripts
# ---------------------------------------------------------------------------


@app.post(
    "/scripts/recalculate",
    response_model=RecalculateResponse,
    tags=["scripts"],
    summary="Recompute time markers",
    description=(
        "Rewrites every (MM:SS) marker from a reading-speed estimate of the "
        "text before it. All other characters are returned unchanged."
    ),
    responses={400: {"model": ErrorResponse, "description": "Invalid pacing"}},
)
async def recalculate(request: ScriptRequest) -> RecalculateResponse:
    pacing = _pacing(request.chars_per_second)
    script = recalculate_timestamps(request.script, pacing)
    return RecalculateResponse(script=script, marker_count=count_markers(script))


@app.post(
    "/scripts/captions",
    response_model=CaptionsResponse,
    tags=["scripts"],
    summary="Synthesize caption cues",
    description="Returns the caption cues derived from the script's markers, plus SRT.",
    responses={400: {"model": ErrorResponse, "description": "Invalid pacing"}},
)
async def captions(request: ScriptRequest) -> CaptionsResponse:
    pacing = _pacing(request.chars_per_second)
    entries = build_caption_entries(request.script, pacing)
    return CaptionsResponse(
        entries=[
            CaptionEntryModel(
                sequence_number=e.sequence_number,
                start_seconds=e.start_seconds,
                end_seconds=e.end_seconds,
                text=e.text,
            )
            for e in entries
        ],
        srt=render_srt(entries),
    )


@app.post(
    "/scripts/export/{format_key}",
    tags=["scripts"],
    summary="Download the script in one export format",
    description=(
        "Runs one formatter over the script and returns the file as an "
        "attachment named <basename><suffix>."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Invalid pacing"},
        404: {"model": ErrorResponse, "description": "Unknown export format"},
    },
)
async def export_script(format_key: str, request: ExportRequest) -> Response:
    if format_key not in FORMATTERS:
        raise HTTPException(
            status_code=404,
            detail="Unknown format '{}'. Available formats: {}".format(
                format_key, ", ".join(sorted(FORMATTERS.keys()))
            ),
        )

    pacing = _pacing(request.chars_per_second)
    output = run_formatters(request.script, [format_key], pacing)[0]
    filename = "{}{}".format(request.basename or export_basename(), output.suffix)
    logger.info("Exporting %s as %s", format_key, filename)

    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={"Content-Disposition": _content_disposition(filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats, Health
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available export formats",
)
async def list_formats() -> List[FormatInfo]:
    return [
        FormatInfo(key=key, name=FORMATTERS[key].name)
        for key in sorted(FORMATTERS)
    ]


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the storylab-api console script."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
