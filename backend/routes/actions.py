"""
To-do action API endpoint.

Turns a typed or dictated request into one structured action that the web
client applies to its local to-do list. Nothing is persisted server-side.

Flow:
1. POST /actions/determine - Send text (+ emoji, + current list), get an action
"""

import httpx
from fastapi import APIRouter, HTTPException, status
from fastapi.concurrency import run_in_threadpool
from google.genai import errors as genai_errors
from pydantic import ValidationError

from backend.agents.todo_action import determine_todo_action
from backend.schemas.actions import DetermineActionRequest, TodoActionResponse
from backend.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/actions", tags=["actions"])


@router.post(
    "/determine",
    response_model=TodoActionResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Determine the to-do action for a request",
    description="""
    Infer which action (add, delete, complete, sort, edit, clear) the user
    wants to apply to their to-do list.

    This endpoint:
    - Sends the text, optional emoji and current list to TodoActionAgent
    - Returns the action with only the fields relevant to it
    - NEVER persists anything (the client owns the list)
    """
)
async def determine_action(request: DetermineActionRequest) -> TodoActionResponse:
    """
    Determine the action for a natural-language to-do request.

    Step 1: Parse/Validate Request
    - FastAPI validates DetermineActionRequest (text must be non-empty)

    Step 2: Call Agent
    - TodoActionAgent runs in the threadpool (google-genai client is sync)

    Step 3: Map errors
    - Missing GOOGLE_API_KEY -> 500 configuration_error
    - Reply failed schema validation -> 502 invalid_model_response
    - Gemini API failure -> 502 llm_error
    - Gemini unreachable (timeout, connection) -> 502 llm_unavailable
    """
    todos = (
        [todo.model_dump(mode="json") for todo in request.todos]
        if request.todos is not None
        else None
    )

    try:
        action = await run_in_threadpool(
            determine_todo_action,
            text=request.text,
            emoji=request.emoji,
            todos=todos
        )
    # ValidationError subclasses ValueError and must be caught first
    except ValidationError as e:
        logger.error(f"Model reply failed validation: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "error": "invalid_model_response",
                "details": "The language model returned an action that does not match the schema"
            }
        )
    except ValueError as e:
        logger.error(f"TodoActionAgent misconfigured: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={
                "error": "configuration_error",
                "details": str(e)
            }
        )
    except genai_errors.APIError as e:
        logger.error(f"Gemini API error: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "error": "llm_error",
                "details": "Failed to determine action with the language model"
            }
        )
    except httpx.HTTPError as e:
        logger.error(f"Could not reach Gemini: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "error": "llm_unavailable",
                "details": f"Could not reach the language model: {type(e).__name__}"
            }
        )

    return action
