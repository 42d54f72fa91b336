"""ActionScribe: notes in, to-do items out."""

from actionscribe.config import CONFIG, AppConfig, __version__
from actionscribe.domain.models import Action
from actionscribe.ports.inbound import Identity

__all__ = [
    "CONFIG",
    "AppConfig",
    "Action",
    "Identity",
    "__version__",
]
