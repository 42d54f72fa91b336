"""HTTP client for the ActionScribe API."""

from typing import Any, List, Optional

import httpx

from actionscribe.domain.errors import (
    ActionScribeError,
    Forbidden,
    InvalidAction,
    NotFound,
    ProviderFailure,
    Unauthorized,
)
from actionscribe.domain.models import Action

_ERRORS_BY_STATUS = {
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    422: InvalidAction,
    500: ProviderFailure,
}


class ActionScribeClient:
    """Async API client bound to one session token."""

    def __init__(
        self,
        base_url: str,
        token: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"Authorization": f"Bearer {token}"},
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "ActionScribeClient":
        return self

    async def __aexit__(self, *args):
        await self.close()

    async def close(self):
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        resp = await self._client.request(method, path, **kwargs)
        if resp.status_code >= 400:
            try:
                detail = resp.json().get("detail", resp.text)
            except ValueError:
                detail = resp.text
            error_cls = _ERRORS_BY_STATUS.get(resp.status_code, ActionScribeError)
            raise error_cls(f"HTTP {resp.status_code}: {detail}")
        if not resp.content:
            return None
        return resp.json()

    async def list_actions(self) -> List[Action]:
        data = await self._request("GET", "/actions")
        return [Action.from_dict(item) for item in data]

    async def create_action(self, text: str) -> Action:
        return Action.from_dict(await self._request("POST", "/actions", json={"text": text}))

    async def merge_actions(self, candidates: List[str]) -> List[Action]:
        """Persist the candidates the server does not already hold."""
        data = await self._request("POST", "/actions/merge", json={"candidates": candidates})
        return [Action.from_dict(item) for item in data]

    async def set_completed(self, action_id: str, completed: bool) -> Action:
        data = await self._request(
            "PATCH", "/actions", json={"id": action_id, "completed": completed}
        )
        return Action.from_dict(data)

    async def delete_action(self, action_id: str) -> None:
        await self._request("DELETE", f"/actions/{action_id}")

    async def extract_actions(self, text: str) -> str:
        """Raw provider output: newline-joined actions or NO_ACTIONS."""
        data = await self._request("POST", "/extract-actions", json={"text": text})
        return data["actions"]
