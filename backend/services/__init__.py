"""
Service layer for the voice to-do backend.

Services wrap third-party APIs that are not LLM agents (see backend/agents
for those) and raise typed errors that the routes map to HTTP responses.
"""

from .speech_service import (
    MissingAudioError,
    SpeechToTextAPIError,
    SpeechToTextConfigError,
    SpeechToTextError,
    convert_speech_to_text,
)

__all__ = [
    "convert_speech_to_text",
    "SpeechToTextError",
    "SpeechToTextConfigError",
    "MissingAudioError",
    "SpeechToTextAPIError",
]
