"""
Tests for the TodoActionAgent runner with a mocked Gemini client.

Covers:
- Happy path: model JSON -> validated TodoActionResponse
- Request shape: model id, temperature 0, system prompt, JSON schema output
- Failure paths propagate (missing key, invalid reply, SDK error)
"""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest
from google.genai import types
from pydantic import ValidationError

from backend.agents.todo_action import (
    OUTPUT_SCHEMA,
    TODO_ACTION_SYSTEM_PROMPT,
    determine_todo_action,
)
from backend.agents.todo_action.agent import missing_fields_for_action
from backend.config import settings
from backend.schemas.actions import TodoActionResponse


@pytest.fixture
def mock_gemini():
    """Patch genai.Client and let each test set the reply text."""
    with patch("backend.agents.todo_action.agent.genai.Client") as mock_client_cls:
        mock_client = MagicMock()
        mock_client_cls.return_value = mock_client

        def set_reply(payload):
            mock_response = MagicMock()
            mock_response.text = payload if isinstance(payload, str) else json.dumps(payload)
            mock_client.models.generate_content.return_value = mock_response

        mock_client.set_reply = set_reply
        mock_client.client_cls = mock_client_cls
        yield mock_client


class TestDetermineTodoAction:
    """Tests for determine_todo_action."""

    def test_complete_action_from_past_tense(self, mock_gemini, sample_todos):
        mock_gemini.set_reply({"action": "complete", "text": "buy groceries"})

        result = determine_todo_action(text="bought groceries", todos=sample_todos)

        assert isinstance(result, TodoActionResponse)
        assert result.action == "complete"
        assert result.text == "buy groceries"
        assert result.emoji is None

    def test_camel_case_fields_are_parsed(self, mock_gemini):
        mock_gemini.set_reply({
            "action": "edit",
            "targetText": "buy groceries",
            "text": "buy flowers"
        })

        result = determine_todo_action(text="i meant buy flowers")

        assert result.target_text == "buy groceries"
        assert result.text == "buy flowers"

    def test_sort_and_clear_enums(self, mock_gemini):
        mock_gemini.set_reply({"action": "sort", "sortBy": "alphabetical"})
        assert determine_todo_action(text="sort a to z").sort_by == "alphabetical"

        mock_gemini.set_reply({"action": "clear", "listToClear": "completed"})
        assert determine_todo_action(text="clear done ones").list_to_clear == "completed"

    def test_request_uses_fixed_model_and_zero_temperature(self, mock_gemini):
        mock_gemini.set_reply({"action": "add", "text": "buy milk", "emoji": "🥛"})

        determine_todo_action(text="buy milk", emoji="🥛")

        mock_gemini.client_cls.assert_called_once_with(api_key=settings.GOOGLE_API_KEY)
        call_kwargs = mock_gemini.models.generate_content.call_args.kwargs
        assert call_kwargs["model"] == settings.ACTION_MODEL
        assert "buy milk" in call_kwargs["contents"]
        assert "🥛" in call_kwargs["contents"]
        config = call_kwargs["config"]
        assert config.temperature == 0.0
        assert config.response_mime_type == "application/json"

    def test_request_sends_response_schema_and_system_instruction(self, mock_gemini):
        mock_gemini.set_reply({"action": "sort", "sortBy": "newest"})

        determine_todo_action(text="newest first")

        config = mock_gemini.models.generate_content.call_args.kwargs["config"]
        assert config.system_instruction == TODO_ACTION_SYSTEM_PROMPT

        schema = config.response_schema
        if isinstance(schema, types.Schema):
            schema = schema.model_dump(by_alias=True, exclude_none=True)
        assert schema["properties"]["action"]["enum"] == [
            "add", "delete", "complete", "sort", "edit", "clear"
        ]
        assert schema["required"] == ["action"]
        assert set(schema["properties"]) == set(OUTPUT_SCHEMA["properties"])

    def test_output_schema_enumerates_six_actions(self):
        assert OUTPUT_SCHEMA["properties"]["action"]["enum"] == [
            "add", "delete", "complete", "sort", "edit", "clear"
        ]
        assert OUTPUT_SCHEMA["required"] == ["action"]

    def test_unknown_action_raises_validation_error(self, mock_gemini):
        mock_gemini.set_reply({"action": "archive", "text": "buy milk"})

        with pytest.raises(ValidationError):
            determine_todo_action(text="archive buy milk")

    def test_unknown_sort_order_raises_validation_error(self, mock_gemini):
        mock_gemini.set_reply({"action": "sort", "sortBy": "priority"})

        with pytest.raises(ValidationError):
            determine_todo_action(text="sort by priority")

    def test_empty_reply_raises_validation_error(self, mock_gemini):
        mock_gemini.set_reply("")

        with pytest.raises(ValidationError):
            determine_todo_action(text="buy milk")

    def test_sdk_error_propagates(self, mock_gemini):
        mock_gemini.models.generate_content.side_effect = RuntimeError("quota exceeded")

        with pytest.raises(RuntimeError, match="quota exceeded"):
            determine_todo_action(text="buy milk")

    def test_missing_api_key_raises_before_calling_gemini(self, mock_gemini, monkeypatch):
        monkeypatch.setattr(settings, "GOOGLE_API_KEY", "")

        with pytest.raises(ValueError, match="GOOGLE_API_KEY"):
            determine_todo_action(text="buy milk")

        mock_gemini.client_cls.assert_not_called()

    def test_missing_fields_are_logged_not_raised(self, mock_gemini, caplog):
        mock_gemini.set_reply({"action": "edit", "text": "buy flowers"})

        with caplog.at_level(logging.WARNING):
            result = determine_todo_action(text="i meant buy flowers")

        assert result.action == "edit"
        assert "without targetText" in caplog.text


class TestMissingFieldsForAction:
    """Tests for the per-action field check."""

    def test_add_requires_text_and_emoji(self):
        action = TodoActionResponse(action="add", text="buy milk")

        assert missing_fields_for_action(action) == ["emoji"]

    def test_complete_action_satisfied(self):
        action = TodoActionResponse(action="complete", text="buy milk")

        assert missing_fields_for_action(action) == []

    def test_clear_requires_list_to_clear(self):
        action = TodoActionResponse(action="clear")

        assert missing_fields_for_action(action) == ["listToClear"]
