from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .. import config


@dataclass(frozen=True)
class CatViewModel:
    """Everything the window shows, computed from the store in one go."""
    position_text: str
    name_text: str
    colour_text: str = ""
    alive_glyph: str = ""
    text_rgb: Tuple[int, int, int] = config.COLOR_ALIVE
    prev_enabled: bool = False
    next_enabled: bool = False
    kill_enabled: bool = False
    show_colour: bool = True
    show_alive: bool = True
    # Input form handling
    clear_inputs: bool = False
    focus_name: bool = False
