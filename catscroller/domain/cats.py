from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Cat:
    """A single browsable record. Death is a flag, the cat stays in the list."""
    name: str
    colour: str = ""
    alive: bool = True

    def kill(self) -> None:
        self.alive = False
