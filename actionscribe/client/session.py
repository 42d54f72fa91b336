"""Note session: the save -> extract -> persist -> merge flow.

Holds the note buffer, the last-saved snapshot, the advisory
``is_processing`` flag, and a read-through cache of the action list. The
server stays the source of truth: every mutating call invalidates the cache
and the list is re-read in the server's order.
"""

import sys
from datetime import datetime
from typing import List, Optional

import httpx

from actionscribe.client.api import ActionScribeClient
from actionscribe.domain.action_parser import parse_action_lines
from actionscribe.domain.delta import extract_new_content
from actionscribe.domain.errors import ActionScribeError
from actionscribe.domain.models import Action

_CLIENT_ERRORS = (httpx.HTTPError, ActionScribeError)


def _log(msg: str):
    print(f"[{datetime.now().isoformat()}] {msg}", file=sys.stderr)


class NoteSession:
    def __init__(self, client: ActionScribeClient):
        self.client = client
        self.note_content = ""
        self.previous_content = ""
        self.is_processing = False
        self._actions: Optional[List[Action]] = None

    def edit(self, text: str) -> None:
        self.note_content = text

    # ---------- Action list cache ----------

    def invalidate(self) -> None:
        self._actions = None

    async def refresh(self) -> List[Action]:
        """Re-read the list; on failure keep whatever was cached."""
        try:
            self._actions = await self.client.list_actions()
        except _CLIENT_ERRORS as e:
            _log(f"Error loading actions: {e}")
        return list(self._actions or [])

    async def actions(self) -> List[Action]:
        if self._actions is None:
            return await self.refresh()
        return list(self._actions)

    # ---------- Flow ----------

    async def save_and_extract(self) -> List[Action]:
        """Extract actions from the lines added since the last save.

        Returns the actions created by this call. The snapshot advances to
        the note as it was when the save was triggered, whatever the outcome.
        """
        if self.is_processing:
            _log("Extraction already in progress, ignoring save")
            return []

        current = self.note_content
        created: List[Action] = []
        delta = extract_new_content(self.previous_content, current)
        if delta.strip():
            created = await self._extract_and_persist(delta)
        self.previous_content = current
        return created

    async def _extract_and_persist(self, delta: str) -> List[Action]:
        created: List[Action] = []
        self.is_processing = True
        try:
            candidates = parse_action_lines(await self.client.extract_actions(delta))
            if candidates:
                # The server dedups against the stored list, not our cache
                created = await self.client.merge_actions(candidates)
        except _CLIENT_ERRORS as e:
            _log(f"Error extracting actions: {e}")
        finally:
            self.is_processing = False

        if created:
            self.invalidate()
            await self.refresh()
        return created

    async def toggle(self, action_id: str) -> Optional[Action]:
        """Flip completion for one action; failures leave state unchanged."""
        current = next((a for a in await self.actions() if a.id == action_id), None)
        if current is None:
            _log(f"Unknown action: {action_id}")
            return None
        try:
            updated = await self.client.set_completed(action_id, not current.completed)
        except _CLIENT_ERRORS as e:
            _log(f"Error updating action: {e}")
            return None
        self.invalidate()
        await self.refresh()
        return updated

    async def remove(self, action_id: str) -> bool:
        try:
            await self.client.delete_action(action_id)
        except _CLIENT_ERRORS as e:
            _log(f"Error deleting action: {e}")
            return False
        self.invalidate()
        await self.refresh()
        return True
