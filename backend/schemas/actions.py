"""
Pydantic schemas for the to-do action endpoint.

These models define the strict request/response contracts for action
determination. Field names on the wire are camelCase to match the web client.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

# Enumerations shared with the Gemini response schema
# (backend/agents/todo_action/schemas.py)
ActionKind = Literal["add", "delete", "complete", "sort", "edit", "clear"]
SortOrder = Literal["newest", "oldest", "alphabetical", "completed"]
ClearTarget = Literal["all", "completed", "incomplete"]


# --- Request models ---

class TodoItem(BaseModel):
    """A single to-do item as currently shown in the client's list."""
    id: str = Field(..., description="Client-side identifier of the to-do")
    text: str = Field(..., description="To-do text (e.g., 'buy groceries')")
    completed: bool = Field(..., description="Whether the to-do is done")
    emoji: Optional[str] = Field(None, description="Emoji attached to the to-do")
    date: datetime = Field(..., description="When the to-do was created")


class DetermineActionRequest(BaseModel):
    """
    Request body for POST /actions/determine.

    `todos` is the client's current list. It is passed to the model as context
    so that requests like "bought groceries" resolve to an existing item.
    """
    text: str = Field(
        ...,
        min_length=1,
        description="What the user typed or dictated"
    )
    emoji: Optional[str] = Field(None, description="Emoji picked by the user, if any")
    todos: Optional[List[TodoItem]] = Field(
        None,
        description="Current to-do list (omit when the list is empty)"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "bought groceries",
                "emoji": None,
                "todos": [
                    {
                        "id": "1",
                        "text": "buy groceries",
                        "completed": False,
                        "emoji": "🛒",
                        "date": "2025-03-01T10:00:00Z"
                    }
                ]
            }
        }
    )


# --- Response models ---

class TodoActionResponse(BaseModel):
    """
    Structured action returned by the model.

    Only `action` is mandatory. Which optional fields are expected depends on
    the action kind (see REQUIRED_FIELDS_BY_ACTION); the model is asked to
    fill them but their absence is not a validation error.
    """
    action: ActionKind = Field(..., description="The action to take")
    text: Optional[str] = Field(None, description="The text of the todo item")
    emoji: Optional[str] = Field(None, description="The emoji of the todo item")
    sort_by: Optional[SortOrder] = Field(
        None,
        alias="sortBy",
        description="The sort order"
    )
    list_to_clear: Optional[ClearTarget] = Field(
        None,
        alias="listToClear",
        description="The list to clear"
    )
    target_text: Optional[str] = Field(
        None,
        alias="targetText",
        description="The exact given text of the todo item to edit, without the emoji"
    )

    model_config = ConfigDict(populate_by_name=True)
