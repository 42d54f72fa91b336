"""Tests for the Action dataclass."""

from datetime import datetime, timezone

import pytest

from actionscribe.domain.errors import InvalidAction
from actionscribe.domain.models import Action


class TestActionNew:
    def test_trims_text(self):
        a = Action.new("1", "  Buy milk  ")
        assert a.text == "Buy milk"
        assert a.completed is False
        assert a.timestamp.tzinfo is not None

    def test_rejects_blank(self):
        with pytest.raises(InvalidAction):
            Action.new("1", "   ")

    def test_ids_unique(self):
        assert Action.new("1", "a").id != Action.new("1", "a").id


class TestActionDict:
    def test_shape_has_no_owner(self):
        ts = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        a = Action(id="x", text="Call Bob", timestamp=ts, owner_id="9")
        assert a.to_dict() == {
            "id": "x",
            "text": "Call Bob",
            "timestamp": "2024-01-02T03:04:05+00:00",
            "completed": False,
        }

    def test_from_dict(self):
        a = Action.from_dict(
            {"id": "x", "text": "t", "timestamp": "2024-01-02T03:04:05+00:00", "completed": True}
        )
        assert a.completed is True
        assert a.timestamp == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
