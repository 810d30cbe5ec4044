"""
Pytest configuration for the voice to-do backend tests.

Sets up test environment and global fixtures.
"""
import os
import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables (must happen before backend.config is imported)
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")
os.environ.setdefault("ELEVENLABS_API_KEY", "test-elevenlabs-key")
os.environ.setdefault("ELEVENLABS_STT_URL", "https://api.elevenlabs.io/v1/speech-to-text")


@pytest.fixture
def sample_todos():
    """A small to-do list in the shape the web client sends."""
    return [
        {
            "id": "todo-1",
            "text": "buy groceries",
            "completed": False,
            "emoji": "🛒",
            "date": "2025-03-01T10:00:00Z"
        },
        {
            "id": "todo-2",
            "text": "make a post with @theo",
            "completed": True,
            "emoji": None,
            "date": "2025-03-02T08:30:00Z"
        }
    ]
