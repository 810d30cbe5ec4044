"""
TodoActionAgent Prompt Templates

Contains both the system prompt and user prompt builder for TodoActionAgent.

TodoActionAgent is a single-shot text workflow: one prompt with the user's
request and the current to-do list, one JSON answer constrained by
OUTPUT_SCHEMA. The model never sees storage and cannot change the list itself;
the web client applies the returned action.

Architecture:
- Pattern: Single-shot structured extraction
- Model: Gemini (settings.ACTION_MODEL)
- Temperature: 0.0 (deterministic)
- Output: Structured JSON
"""

from typing import List, Optional, get_args

from backend.agents.todo_action.types import TodoItemContext
from backend.schemas.actions import ActionKind

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

TODO_ACTION_SYSTEM_PROMPT = """You are TodoActionAgent, the intent parser of a voice-first to-do list app.

<role>
You turn one short natural-language request into exactly one action on the user's to-do list.
</role>

<limitations>
- You cannot read or write the list yourself - the app applies your action
- You must use only the context provided in the prompt
- You answer with a single JSON object and nothing else
</limitations>"""


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def format_todo_list(todos: List[TodoItemContext]) -> str:
    """
    Render the to-do list as `text (emoji)` entries separated by commas.

    Items without an emoji are rendered as their text only.
    """
    entries = []
    for todo in todos:
        emoji = todo.get("emoji")
        entries.append(f"{todo['text']} ({emoji})" if emoji else todo["text"])
    return ", ".join(entries)


def build_todo_action_user_prompt(
    text: str,
    emoji: Optional[str] = None,
    todos: Optional[List[TodoItemContext]] = None
) -> str:
    """
    Build the user prompt for TodoActionAgent.

    The emoji lines are only included when the user picked an emoji, and the
    <todo_list> block only when the caller sent a list (an empty list still
    produces an empty block).

    Args:
        text: What the user typed or dictated
        emoji: Emoji picked by the user, if any
        todos: Current to-do list, if any

    Returns:
        str: Formatted user prompt ready to be sent to Gemini
    """
    emoji_line = f"The user has also entered the following emoji: {emoji}" if emoji else ""
    todo_block = f"<todo_list>{format_todo_list(todos)}</todo_list>" if todos is not None else ""
    emoji_hint = (
        f"Change the emoji to a more appropriate based on the text. The current emoji is: {emoji}"
        if emoji else ""
    )
    action_kinds = ", ".join(get_args(ActionKind))

    return f"""The user has entered the following text: {text}
{emoji_line}
Determine the action to take based on the given context.

Don't make assumptions about the user's intent, the todo list is very important to understand the user's intent.
Go through the todo list and make sure to understand the user's intent based on the todo list.
All the text should be in lowercase!!

{todo_block}

The action should be one of the following: {action_kinds}
- If the action is "add", the text and emoji should be included.
- If the action is "delete", the text should be included.
- If the action is "complete", the text should be included.
- If the action is "sort", the sortBy should be included.
- If the action is "edit", both the targetText (to identify the todo to edit) and the text (the new content) should be included.
- If the action is "clear", the user wants to clear the list of todos with the given listToClear (all, completed, incomplete).

For the add action, the text should be in the future tense. like "buy groceries", "make a post with @theo", "go for violin lesson"

Some queries will be ambiguous stating the tense of the text, which will allow you to infer the correct action to take on the todo list.
The add requests will mostly be in the future tense, while the complete requests will be in the past tense.
The emojis sent by the user should be prioritized and not changed unless they don't match the todo's intent.
The todo list is very important to understand the user's intent.
Example: "todo: 'buy groceries', user request: 'bought groceries', action: 'complete', text: 'buy groceries'"
Example: "todo: 'make a post with @theo', user request: 'i made a post with @theo', action: 'complete', text: 'make a post with @theo'"
Example: "request: 'buy groceries', action: 'add', text: 'buy groceries', emoji: '🛒'"

The edit request will mostly be ambiguous, so make the edit as close to the original as possible to maintain the user's context with the todo to edit.
Some words could be incomplete, like "meet" instead of "meeting", make sure to edit the todo based on the todo list since the todo already exists and just needs a rewrite.

Example edit requests:
"original text: 'meeting w/ John', user request: 'i meant meet Jane', edit: 'meeting w/ Jane'"
"original text: 'buy groceries', user request: 'i meant buy flowers', edit: 'buy flowers'"
"original text: 'go for violin lesson', user request: 'i meant go for a walk', edit: 'go for a walk'"
"original text: 'call for bug report', user request: 'i meant call bharat for it', edit: 'call bharat for bug report'"
"original text: 'meeting with zaid', user request: 'meet is about the new product', edit: 'meeting with zaid about the new product'"

{emoji_hint}"""
