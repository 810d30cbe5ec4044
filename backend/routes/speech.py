"""
Speech-to-text API endpoint.

Accepts an audio recording from the browser and returns its transcript so the
client can feed it into /actions/determine.
"""

from typing import Annotated, Optional

import httpx
from fastapi import APIRouter, File, HTTPException, UploadFile, status

from backend.schemas.speech import TranscriptionResponse
from backend.services.speech_service import (
    MissingAudioError,
    SpeechToTextAPIError,
    SpeechToTextConfigError,
    convert_speech_to_text,
)
from backend.utils.constants import (
    EXTRA_AUDIO_CONTENT_TYPES,
    MAX_AUDIO_SIZE_BYTES,
    MAX_AUDIO_SIZE_MB,
)
from backend.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/speech", tags=["speech"])


def _is_audio_content_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    base_type = content_type.split(";", 1)[0].strip().lower()
    return base_type.startswith("audio/") or base_type in EXTRA_AUDIO_CONTENT_TYPES


@router.post(
    "/transcribe",
    response_model=TranscriptionResponse,
    status_code=status.HTTP_200_OK,
    summary="Transcribe an audio recording",
    description=f"""
    Upload an audio recording (max {MAX_AUDIO_SIZE_MB}MB) and get its transcript.

    This endpoint:
    - Accepts audio/* files (and video/webm from MediaRecorder)
    - Forwards the file to ElevenLabs speech-to-text
    - Returns the transcript (empty string when nothing was recognised)
    """
)
async def transcribe_audio(
    file: Annotated[UploadFile, File(description="Audio recording")]
) -> TranscriptionResponse:
    """
    Transcribe an uploaded audio file.

    Upstream failures keep the ElevenLabs status code and body in the error
    detail so the client can show them.
    """
    if not _is_audio_content_type(file.content_type):
        logger.warning(f"Invalid content type: {file.content_type}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "invalid_file_type",
                "details": "File must be an audio recording"
            }
        )

    audio_bytes = await file.read()

    if len(audio_bytes) > MAX_AUDIO_SIZE_BYTES:
        logger.warning(f"Audio too large: {len(audio_bytes)} bytes")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "file_too_large",
                "details": f"Audio must be smaller than {MAX_AUDIO_SIZE_MB}MB"
            }
        )

    try:
        transcript = await convert_speech_to_text(
            audio_bytes,
            filename=file.filename,
            content_type=file.content_type
        )
    except SpeechToTextConfigError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "configuration_error",
                "details": str(e)
            }
        )
    except MissingAudioError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "error": "missing_audio",
                "details": str(e)
            }
        )
    except SpeechToTextAPIError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "error": "transcription_failed",
                "details": str(e),
                "upstream_status": e.status_code,
                "upstream_body": e.detail
            }
        )
    except httpx.HTTPError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "error": "transcription_unavailable",
                "details": f"Could not reach the speech-to-text service: {type(e).__name__}"
            }
        )

    return TranscriptionResponse(text=transcript)
