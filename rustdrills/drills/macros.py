"""Message-producing helpers and module-level name exports."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

PEAR = "Pear"
APPLE = "Apple"
CUCUMBER = "Cucumber"
CARROT = "Carrot"

fruit = PEAR
veggie = CUCUMBER

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def my_macro(*args: object) -> str:
    """Message for no argument or for one argument."""
    match args:
        case ():
            return "Check out my macro!"
        case (value,):
            return f"Look at this other macro: {value}"
        case _:
            raise TypeError(f"my_macro takes at most one argument, got {len(args)}")


def hello_macro(text: str) -> str:
    """Prefix text with a greeting."""
    return f"Hello {text}"


def _get_secret_recipe() -> str:
    return "Ginger"


def make_sausage() -> str:
    """Make a sausage from the secret recipe."""
    _get_secret_recipe()
    return "sausage!"


def favorite_snacks() -> str:
    """Name the favourite fruit and vegetable."""
    return f"favorite snacks: {fruit} and {veggie}"


def seconds_since_epoch(now: datetime | None = None) -> int:
    """Whole seconds from the Unix epoch to now; naive times are taken as UTC."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    elapsed = now - _EPOCH
    if elapsed < timedelta(0):
        raise ValueError("SystemTime before UNIX EPOCH!")
    return elapsed // timedelta(seconds=1)