import os
from dataclasses import dataclass
from typing import Dict, List, Tuple


# Application variant: "rich" shows colour and alive state, "simple" only names
VARIANT: str = os.environ.get("CAT_SCROLLER_VARIANT", "rich").strip().lower()
WINDOW_TITLE: str = os.environ.get("CAT_SCROLLER_TITLE", "Cat Scroller 5000")
LOG_LEVEL: str = os.environ.get("CAT_SCROLLER_LOG_LEVEL", "INFO").strip().upper()
DARK_THEME_ENABLED: bool = (os.environ.get("CAT_SCROLLER_DARK", "1").strip() != "0")


# Window and font sizing
WINDOW_W_PX: int = 900
WINDOW_H_PX: int = 500
BASE_FONT_PT: int = int(os.environ.get("CAT_SCROLLER_FONT_PT", "48"))
BASE_FONT_FAMILY: str = "Sans Serif"


# Absolute widget placement (x, y, w, h) in window pixels
RECT_POSITION: Tuple[int, int, int, int] = (50, 50, 50, 100)
RECT_NAME: Tuple[int, int, int, int] = (150, 50, 250, 100)
RECT_COLOUR: Tuple[int, int, int, int] = (450, 50, 250, 100)
RECT_ALIVE: Tuple[int, int, int, int] = (750, 50, 100, 100)
RECT_PREV: Tuple[int, int, int, int] = (50, 200, 225, 100)
RECT_NEXT: Tuple[int, int, int, int] = (325, 200, 225, 100)
RECT_KILL: Tuple[int, int, int, int] = (625, 200, 225, 100)
RECT_NAME_INPUT: Tuple[int, int, int, int] = (50, 350, 300, 100)
RECT_COLOUR_INPUT: Tuple[int, int, int, int] = (400, 350, 300, 100)
RECT_ADD: Tuple[int, int, int, int] = (750, 350, 100, 100)


# Control captions
PREV_TEXT: str = "⯇"
NEXT_TEXT: str = "⯈"
KILL_TEXT: str = "Dead"
ADD_TEXT: str = "+"


# Alive/dead indicator glyphs and label colours as RGB tuples
ALIVE_GLYPH: str = "☻"
DEAD_GLYPH: str = "☠"
COLOR_ALIVE: Tuple[int, int, int] = (255, 255, 255)
COLOR_DEAD: Tuple[int, int, int] = (255, 170, 170)


# Dark palette (Fusion style)
COLOR_WINDOW: Tuple[int, int, int] = (43, 43, 43)
COLOR_BASE: Tuple[int, int, int] = (60, 63, 65)
COLOR_BUTTON: Tuple[int, int, int] = (76, 80, 82)
COLOR_TEXT: Tuple[int, int, int] = (221, 221, 221)
COLOR_DISABLED_TEXT: Tuple[int, int, int] = (120, 120, 120)
COLOR_HIGHLIGHT: Tuple[int, int, int] = (75, 110, 175)


# Seed records (name, colour) loaded at start-up
DEFAULT_CATS: List[Tuple[str, str]] = [
    ("Gary", "Ginger"),
    ("Sally", "Black"),
    ("Harry", "White"),
    ("Tina", "Tabby"),
    ("Phil", "Tabby"),
]


@dataclass(frozen=True)
class VariantFlags:
    has_colour: bool = True
    has_alive: bool = True


VARIANTS: Dict[str, VariantFlags] = {
    "rich": VariantFlags(has_colour=True, has_alive=True),
    "simple": VariantFlags(has_colour=False, has_alive=False),
}


def get_variant_flags(name: str = VARIANT) -> VariantFlags:
    """Resolve a variant name to its feature flags."""
    key = (name or "").strip().lower()
    if key not in VARIANTS:
        raise ValueError(
            f"Unknown variant {name!r}; expected one of: {', '.join(sorted(VARIANTS))}"
        )
    return VARIANTS[key]
