from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from . import config
from .domain.cats import Cat

logger = logging.getLogger(__name__)


class CatStore:
    """
    Application model: an append-only list of cats plus the index of the one on show.

    The cursor is clamped at both ends and the list is never empty, so
    current() always has a cat to return. No method here touches the UI.
    """

    def __init__(self, cats: Iterable[Cat]):
        self._cats: List[Cat] = list(cats)
        if not self._cats:
            raise ValueError("CatStore needs at least one cat to start with")
        self._cursor: int = 0

    @classmethod
    def with_defaults(cls, seed: Optional[Iterable[Tuple[str, str]]] = None) -> "CatStore":
        pairs = config.DEFAULT_CATS if seed is None else seed
        return cls(Cat(name, colour) for name, colour in pairs)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def cats(self) -> Tuple[Cat, ...]:
        return tuple(self._cats)

    def __len__(self) -> int:
        return len(self._cats)

    @property
    def is_first(self) -> bool:
        return self._cursor == 0

    @property
    def is_last(self) -> bool:
        return self._cursor == len(self._cats) - 1

    def current(self) -> Cat:
        return self._cats[self._cursor]

    def next(self) -> None:
        self._cursor = min(self._cursor + 1, len(self._cats) - 1)
        logger.debug(f"next -> cursor {self._cursor}")

    def previous(self) -> None:
        self._cursor = max(self._cursor - 1, 0)
        logger.debug(f"previous -> cursor {self._cursor}")

    def add(self, name: str, colour: str = "") -> Cat:
        # Input checks belong to the caller
        cat = Cat(name, colour)
        self._cats.append(cat)
        self._cursor = len(self._cats) - 1
        logger.info(f"Added cat {name!r} at position {self._cursor + 1}")
        return cat

    def kill(self) -> None:
        cat = self.current()
        if cat.alive:
            logger.info(f"Cat {cat.name!r} at position {self._cursor + 1} marked dead")
        cat.kill()
