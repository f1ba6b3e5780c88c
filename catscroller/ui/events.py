from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Next:
    pass


@dataclass(frozen=True)
class Previous:
    pass


@dataclass(frozen=True)
class Kill:
    pass


@dataclass(frozen=True)
class Add:
    name: str
    colour: str = ""


# Everything the window can ask the controller to do
CatEvent = Union[Next, Previous, Kill, Add]
