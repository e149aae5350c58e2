"""Per-call conversion state shared by the inline and block transducers."""

from contextlib import contextmanager
from typing import Iterator, Optional

from html_to_ricos.ids import IdSource, random_ids

DEFAULT_MAX_DEPTH = 200


class ConversionContext:
    """Holds the id source and recursion depth for a single conversion."""

    def __init__(self, ids: Optional[IdSource] = None, max_depth: int = DEFAULT_MAX_DEPTH):
        self.new_id = ids or random_ids()
        self.max_depth = max_depth
        self.depth = 0

    @property
    def exhausted(self) -> bool:
        return self.depth >= self.max_depth

    @contextmanager
    def nested(self) -> Iterator['ConversionContext']:
        self.depth += 1
        try:
            yield self
        finally:
            self.depth -= 1
