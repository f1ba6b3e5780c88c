from __future__ import annotations
from typing import Optional

from ... import config
from ...model import CatStore
from ..state import CatViewModel


class CatPresenter:
    """
    Transforms the store's current state into a CatViewModel (texts, colours, enabled flags).
    Decouples model state from Qt presentation details, so it needs no display to test.
    """

    def __init__(self, flags: Optional[config.VariantFlags] = None):
        self.flags = flags if flags is not None else config.get_variant_flags()

    def render(self, store: CatStore) -> CatViewModel:
        cat = store.current()
        has_colour = self.flags.has_colour
        has_alive = self.flags.has_alive

        # Without an alive flag every cat is shown as living
        alive = cat.alive or not has_alive
        glyph = ""
        if has_alive:
            glyph = config.ALIVE_GLYPH if alive else config.DEAD_GLYPH

        return CatViewModel(
            position_text=str(store.cursor + 1),
            name_text=cat.name,
            colour_text=cat.colour if has_colour else "",
            alive_glyph=glyph,
            text_rgb=config.COLOR_ALIVE if alive else config.COLOR_DEAD,
            prev_enabled=store.cursor > 0,
            next_enabled=store.cursor < len(store) - 1,
            kill_enabled=has_alive and cat.alive,
            show_colour=has_colour,
            show_alive=has_alive,
            # Simple variant wipes the form on every render
            clear_inputs=not has_alive,
        )
