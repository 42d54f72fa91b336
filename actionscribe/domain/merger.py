"""Deduplicating action merger.

Appends only candidates whose text is new to the list, compared
case-insensitively. Existing actions are never touched.
"""

from datetime import datetime
from typing import Iterable, List, Optional

from actionscribe.domain.models import Action, utcnow


def _key(text: str) -> str:
    return text.strip().lower()


def filter_new_candidates(existing: Iterable[Action], candidates: Iterable[str]) -> List[str]:
    """Return trimmed candidates not already present, in input order.

    A candidate accepted earlier in the same call blocks later repeats too,
    so the merged list never holds two case-insensitively equal texts.
    """
    seen = {_key(action.text) for action in existing}
    accepted: List[str] = []
    for candidate in candidates:
        text = candidate.strip()
        if not text or _key(text) in seen:
            continue
        seen.add(_key(text))
        accepted.append(text)
    return accepted


def merge_actions(
    existing: Iterable[Action],
    candidates: Iterable[str],
    owner_id: str,
    now: Optional[datetime] = None,
) -> List[Action]:
    """Build new actions for every genuinely new candidate.

    Only the new entries are returned; the caller persists them.
    """
    now = now or utcnow()
    return [
        Action.new(owner_id, text, now=now)
        for text in filter_new_candidates(existing, candidates)
    ]
