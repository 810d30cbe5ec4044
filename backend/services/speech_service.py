"""
Speech-to-Text Service - ElevenLabs Scribe

Forwards an uploaded audio blob to the ElevenLabs speech-to-text API and
returns the transcript.

Architecture:
- Pattern: Direct HTTP pass-through (one multipart POST)
- API: https://api.elevenlabs.io/v1/speech-to-text (settings.ELEVENLABS_STT_URL)
- Model: scribe_v1 (settings.ELEVENLABS_STT_MODEL)
- Auth: `xi-api-key` header

Errors are not recovered here. Every failure raises a SpeechToTextError
subclass (or the underlying httpx error) for the route to map.
"""

from typing import Optional

import httpx

from backend.config import settings
from backend.utils.logging import get_logger

logger = get_logger(__name__)


class SpeechToTextError(Exception):
    """Base class for speech-to-text failures."""


class SpeechToTextConfigError(SpeechToTextError):
    """Raised when the ElevenLabs API key is not configured."""


class MissingAudioError(SpeechToTextError):
    """Raised when no audio content was supplied."""


class SpeechToTextAPIError(SpeechToTextError):
    """Raised when ElevenLabs answers with a non-success status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"API error: {status_code} - {detail}")
        self.status_code = status_code
        self.detail = detail


async def convert_speech_to_text(
    audio: Optional[bytes],
    *,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
    http_client: Optional[httpx.AsyncClient] = None
) -> str:
    """
    Transcribe an audio file with ElevenLabs.

    Args:
        audio: Raw audio bytes as uploaded by the client
        filename: Original file name (sent along with the multipart part)
        content_type: MIME type of the upload
        http_client: Shared AsyncClient; a short-lived one is created if omitted

    Returns:
        The transcript, or "" when the response has no text

    Raises:
        SpeechToTextConfigError: ELEVENLABS_API_KEY is not set
        MissingAudioError: audio is None or empty
        SpeechToTextAPIError: ElevenLabs returned a non-2xx status
        httpx.HTTPError: transport failure (timeout, connection error)
    """
    # Key check comes first so misconfiguration surfaces even on bad input
    api_key = settings.ELEVENLABS_API_KEY
    if not api_key:
        logger.error("ELEVENLABS_API_KEY not configured")
        raise SpeechToTextConfigError("ElevenLabs API key is not set")

    if not audio:
        logger.warning("Speech-to-text called without audio")
        raise MissingAudioError("No audio file provided")

    content_type = content_type or "application/octet-stream"
    logger.info(
        f"Processing audio file: type={content_type}, size={len(audio)}, "
        f"name={filename or 'unnamed'}"
    )

    files = {"file": (filename or "audio", audio, content_type)}
    data = {"model_id": settings.ELEVENLABS_STT_MODEL}
    headers = {"xi-api-key": api_key}

    logger.debug("Sending request to ElevenLabs API...")
    try:
        if http_client is not None:
            response = await http_client.post(
                settings.ELEVENLABS_STT_URL, headers=headers, data=data, files=files
            )
        else:
            async with httpx.AsyncClient(timeout=settings.STT_TIMEOUT_SECONDS) as client:
                response = await client.post(
                    settings.ELEVENLABS_STT_URL, headers=headers, data=data, files=files
                )
    except httpx.HTTPError as e:
        logger.error(f"Error converting speech to text: {e}")
        raise

    if not response.is_success:
        detail = response.text
        logger.error(
            f"ElevenLabs API error: status={response.status_code}, "
            f"statusText={response.reason_phrase}, detail={detail[:500]}"
        )
        raise SpeechToTextAPIError(response.status_code, detail)

    try:
        payload = response.json()
    except ValueError:
        logger.error(
            f"ElevenLabs returned a non-JSON body: status={response.status_code}, "
            f"detail={response.text[:500]}"
        )
        raise SpeechToTextAPIError(response.status_code, response.text)

    transcript = (payload.get("text") if isinstance(payload, dict) else None) or ""
    logger.info(f"Transcription completed: {len(transcript)} characters")
    return transcript
