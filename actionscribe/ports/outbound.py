"""Outbound ports — interfaces for external system adapters."""

from typing import List, Optional, Protocol, runtime_checkable

from actionscribe.domain.models import Action
from actionscribe.ports.inbound import Identity


@runtime_checkable
class LLMPort(Protocol):
    """Interface for language-model providers: text in, text out."""

    @property
    def is_configured(self) -> bool: ...

    async def execute(
        self,
        message: str,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str: ...


@runtime_checkable
class ActionStorePort(Protocol):
    """Interface for the per-user action store (the source of truth)."""

    def list(self, identity: Identity) -> List[Action]: ...
    def create(self, identity: Identity, text: str) -> Action: ...
    def add(self, identity: Identity, action: Action) -> Action: ...
    def update_completion(self, identity: Identity, action_id: str, completed: bool) -> Action: ...
    def delete(self, identity: Identity, action_id: str) -> None: ...
    def owner_id(self, identity: Identity) -> str: ...
