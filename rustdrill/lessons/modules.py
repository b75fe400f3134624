"""Public and private names, re-exported constants and the standard clock."""

from __future__ import annotations

from datetime import datetime, timezone

PEAR = "Pear"
APPLE = "Apple"
CUCUMBER = "Cucumber"
CARROT = "Carrot"

fruit = PEAR
veggie = CUCUMBER

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> str:
    """Make a sausage from the secret recipe."""
    _get_secret_recipe()
    return "sausage!"


def favorite_snacks() -> str:
    """The favourite fruit and vegetable in one sentence."""
    return f"favorite snacks: {fruit} and {veggie}"


def seconds_since_epoch(now: datetime | None = None) -> int:
    """Whole seconds from 1970-01-01 00:00:00 UTC to now.

    A naive datetime is taken as UTC. Raises ValueError for a time before
    the epoch.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    delta = now - _EPOCH
    if delta.total_seconds() < 0:
        raise ValueError("SystemTime before UNIX EPOCH!")
    return delta.days * 86400 + delta.seconds