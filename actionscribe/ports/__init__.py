"""Port interfaces (Hexagonal Architecture)."""

from actionscribe.ports.inbound import Identity
from actionscribe.ports.outbound import ActionStorePort, LLMPort

__all__ = [
    "Identity",
    "ActionStorePort",
    "LLMPort",
]
