"""Inbound port — transport-agnostic caller identity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, passed explicitly into every store/service call."""

    email: str
