"""Id factories for action creators.

Reducers never generate identifiers themselves. Callers inject one of these
(or any zero-argument callable) into an action creator instead.
"""

from __future__ import annotations

import itertools
import uuid
from typing import Callable


def counter_ids(start: int = 1) -> Callable[[], int]:
    """Return a factory yielding ``start, start + 1, ...``."""
    counter = itertools.count(start)
    return lambda: next(counter)


def uuid_ids() -> Callable[[], str]:
    """Return a factory yielding random UUID4 strings."""
    return lambda: str(uuid.uuid4())
