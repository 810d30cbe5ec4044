"""
TodoActionAgent JSON Schemas

OUTPUT_SCHEMA is passed to Gemini as `response_schema` so the model can only
answer with a TodoAction object. It uses the Gemini Schema dialect (OpenAPI
subset with upper-case type names) and mirrors
backend.schemas.actions.TodoActionResponse, which validates the reply.
"""

from typing import get_args

from backend.schemas.actions import ActionKind, ClearTarget, SortOrder

# Input schema for TodoActionAgent (documentation only)
INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "text": {
            "type": "string",
            "description": "What the user typed or dictated"
        },
        "emoji": {
            "type": ["string", "null"],
            "description": "Emoji picked by the user"
        },
        "todos": {
            "type": ["array", "null"],
            "items": {
                "type": "object",
                "properties": {
                    "id": {"type": "string"},
                    "text": {"type": "string"},
                    "completed": {"type": "boolean"},
                    "emoji": {"type": ["string", "null"]},
                    "date": {"type": "string"}
                },
                "required": ["id", "text", "completed", "date"]
            },
            "description": "Current to-do list"
        }
    },
    "required": ["text"]
}

# Output schema for TodoActionAgent (sent to Gemini)
OUTPUT_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "action": {
            "type": "STRING",
            "enum": list(get_args(ActionKind)),
            "description": "The action to take"
        },
        "text": {
            "type": "STRING",
            "description": "The text of the todo item"
        },
        "emoji": {
            "type": "STRING",
            "description": "The emoji of the todo item"
        },
        "sortBy": {
            "type": "STRING",
            "enum": list(get_args(SortOrder)),
            "description": "The sort order"
        },
        "listToClear": {
            "type": "STRING",
            "enum": list(get_args(ClearTarget)),
            "description": "The list to clear"
        },
        "targetText": {
            "type": "STRING",
            "description": "The exact given text of the todo item to edit. do not include the emoji."
        }
    },
    "required": ["action"],
    "propertyOrdering": ["action", "text", "emoji", "sortBy", "listToClear", "targetText"]
}
