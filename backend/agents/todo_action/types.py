"""
TodoActionAgent Type Definitions

Strictly typed input contracts for TodoActionAgent.
All types are JSON-serializable and compatible with Pydantic.
"""

from typing import Optional, TypedDict

from backend.schemas.actions import ActionKind, ClearTarget, SortOrder


class TodoItemContext(TypedDict):
    """A to-do item passed to the model as list context."""
    id: str
    text: str
    completed: bool
    emoji: Optional[str]
    date: str  # ISO-8601 datetime string


class TodoActionAgentInput(TypedDict):
    """Input schema for TodoActionAgent."""
    text: str  # What the user typed or dictated
    emoji: Optional[str]  # Emoji picked by the user
    todos: Optional[list[TodoItemContext]]  # Current list, None when not provided


__all__ = [
    "ActionKind",
    "SortOrder",
    "ClearTarget",
    "TodoItemContext",
    "TodoActionAgentInput",
]
