"""
TodoActionAgent Runner

Single-shot LLM workflow. Sends the user's request plus the current to-do list
to Gemini with a response schema and validates the JSON it returns.

Errors are not recovered here: a missing API key, any google-genai error and
any pydantic ValidationError on the reply propagate to the caller.
"""

import time
from typing import List, Optional

from google import genai
from google.genai import types

from backend.agents.todo_action.prompts import (
    TODO_ACTION_SYSTEM_PROMPT,
    build_todo_action_user_prompt,
)
from backend.agents.todo_action.schemas import OUTPUT_SCHEMA
from backend.agents.todo_action.types import TodoItemContext
from backend.config import settings
from backend.schemas.actions import TodoActionResponse
from backend.utils.constants import REQUIRED_FIELDS_BY_ACTION
from backend.utils.logging import get_logger

logger = get_logger(__name__)


def missing_fields_for_action(action: TodoActionResponse) -> List[str]:
    """Return the fields the prompt asks for on this action kind that the model left out."""
    payload = action.model_dump(by_alias=True)
    return [
        field for field in REQUIRED_FIELDS_BY_ACTION[action.action]
        if not payload.get(field)
    ]


def determine_todo_action(
    text: str,
    emoji: Optional[str] = None,
    todos: Optional[List[TodoItemContext]] = None
) -> TodoActionResponse:
    """
    Infer which action the user wants to apply to their to-do list.

    Args:
        text: What the user typed or dictated
        emoji: Emoji picked by the user, if any
        todos: Current to-do list, if any

    Returns:
        TodoActionResponse validated against the fixed action enumeration

    Raises:
        ValueError: If GOOGLE_API_KEY is not configured
        pydantic.ValidationError: If the model reply is not a valid TodoAction
        google.genai.errors.APIError: If the Gemini call fails
    """
    logger.info(
        f"TodoActionAgent invoked (emoji={'yes' if emoji else 'no'}, "
        f"todos={len(todos) if todos is not None else 'none'})"
    )
    logger.debug(f"Request text: {text!r}")

    if not settings.GOOGLE_API_KEY:
        logger.error("GOOGLE_API_KEY not configured")
        raise ValueError(
            "GOOGLE_API_KEY is not configured. "
            "Please set it in your .env file to use TodoActionAgent."
        )

    client = genai.Client(api_key=settings.GOOGLE_API_KEY)

    prompt_text = build_todo_action_user_prompt(text=text, emoji=emoji, todos=todos)

    config = types.GenerateContentConfig(
        system_instruction=TODO_ACTION_SYSTEM_PROMPT,
        temperature=0.0,
        response_mime_type="application/json",
        response_schema=OUTPUT_SCHEMA
    )

    start_time = time.perf_counter()
    response = client.models.generate_content(
        model=settings.ACTION_MODEL,
        contents=prompt_text,
        config=config
    )
    duration_ms = int((time.perf_counter() - start_time) * 1000)
    logger.info(f"Time taken: {duration_ms}ms")

    response_text = (response.text or "").strip()
    logger.debug(f"Raw response text: {response_text[:200]}")

    action = TodoActionResponse.model_validate_json(response_text)

    missing = missing_fields_for_action(action)
    if missing:
        logger.warning(
            f"Model returned action={action.action} without {', '.join(missing)}"
        )

    logger.info(f"TodoActionAgent completed: action={action.action}")
    return action
