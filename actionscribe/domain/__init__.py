"""Domain layer — pure Python, no framework dependencies."""

from actionscribe.domain.models import Action, utcnow
from actionscribe.domain.errors import (
    ActionScribeError,
    Forbidden,
    InvalidAction,
    NotFound,
    ProviderFailure,
    Unauthorized,
)
from actionscribe.domain.delta import extract_new_content, has_new_content
from actionscribe.domain.action_parser import (
    NO_ACTIONS,
    build_extraction_prompt,
    parse_action_lines,
)
from actionscribe.domain.merger import filter_new_candidates, merge_actions

__all__ = [
    "Action",
    "utcnow",
    "ActionScribeError",
    "Forbidden",
    "InvalidAction",
    "NotFound",
    "ProviderFailure",
    "Unauthorized",
    "extract_new_content",
    "has_new_content",
    "NO_ACTIONS",
    "build_extraction_prompt",
    "parse_action_lines",
    "filter_new_candidates",
    "merge_actions",
]
