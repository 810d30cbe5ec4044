"""
TodoActionAgent Package

Turns a natural-language request ("bought groceries", "sort by newest",
"i meant buy flowers") into one structured action on a to-do list, using
Google Gemini with a single-shot structured-output call.

Main Components:
- types: TypedDict definitions for the list context
- schemas: JSON schemas (OUTPUT_SCHEMA is sent to Gemini as response_schema)
- prompts: System prompt and user prompt builder
- agent: Runner that calls Gemini and validates the reply

Usage:
    from backend.agents.todo_action import determine_todo_action

    action = determine_todo_action(
        text="bought groceries",
        emoji=None,
        todos=[{"id": "1", "text": "buy groceries", "completed": False,
                "emoji": "🛒", "date": "2025-03-01T10:00:00Z"}],
    )
    action.action  # "complete"
"""

from backend.agents.todo_action.agent import (
    determine_todo_action,
    missing_fields_for_action,
)
from backend.agents.todo_action.types import (
    TodoItemContext,
    TodoActionAgentInput,
)
from backend.agents.todo_action.schemas import (
    INPUT_SCHEMA,
    OUTPUT_SCHEMA,
)
from backend.agents.todo_action.prompts import (
    TODO_ACTION_SYSTEM_PROMPT,
    build_todo_action_user_prompt,
)

__all__ = [
    # Main runner
    "determine_todo_action",
    "missing_fields_for_action",
    # Types
    "TodoItemContext",
    "TodoActionAgentInput",
    # Schemas
    "INPUT_SCHEMA",
    "OUTPUT_SCHEMA",
    # Prompts
    "TODO_ACTION_SYSTEM_PROMPT",
    "build_todo_action_user_prompt",
]
