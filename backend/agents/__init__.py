"""
AI Components for the voice to-do backend.

1. TodoActionAgent (Single-Shot Structured Workflow)
   - Uses Gemini with a response schema to map a request to one list action
   - NOT an ADK agent - uses the Google Gen AI SDK directly

Speech-to-text is not an LLM workflow; it lives in
backend/services/speech_service.py and calls ElevenLabs over HTTP.
"""

from backend.agents.todo_action import (
    INPUT_SCHEMA as TODO_ACTION_INPUT_SCHEMA,
)
from backend.agents.todo_action import (
    OUTPUT_SCHEMA as TODO_ACTION_OUTPUT_SCHEMA,
)
from backend.agents.todo_action import (
    TodoActionAgentInput,
    determine_todo_action,
)

__all__ = [
    "determine_todo_action",
    "TodoActionAgentInput",
    "TODO_ACTION_INPUT_SCHEMA",
    "TODO_ACTION_OUTPUT_SCHEMA",
]
