"""
Shared constants for the to-do action and speech endpoints.
"""

# Fields the prompt asks the model to fill for each action kind
REQUIRED_FIELDS_BY_ACTION = {
    "add": ("text", "emoji"),
    "delete": ("text",),
    "complete": ("text",),
    "sort": ("sortBy",),
    "edit": ("targetText", "text"),
    "clear": ("listToClear",),
}

# Upload limits for /speech/transcribe
MAX_AUDIO_SIZE_MB = 25
MAX_AUDIO_SIZE_BYTES = MAX_AUDIO_SIZE_MB * 1024 * 1024

# MediaRecorder in some browsers labels audio-only recordings as video/webm
EXTRA_AUDIO_CONTENT_TYPES = ("video/webm",)
