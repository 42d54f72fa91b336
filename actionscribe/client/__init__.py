"""Python client and note-session view state."""

from actionscribe.client.api import ActionScribeClient
from actionscribe.client.session import NoteSession

__all__ = ["ActionScribeClient", "NoteSession"]
