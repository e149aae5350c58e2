"""Identifier sources for structural nodes."""

import itertools
import uuid
from typing import Callable

IdSource = Callable[[], str]


def random_ids(length: int = 6) -> IdSource:
    """Short random identifiers. Collisions are tolerated."""
    def new_id() -> str:
        return uuid.uuid4().hex[:length]
    return new_id


def counter_ids(prefix: str = 'n') -> IdSource:
    """Deterministic identifiers: n1, n2, ..."""
    counter = itertools.count(1)

    def new_id() -> str:
        return f'{prefix}{next(counter)}'
    return new_id
