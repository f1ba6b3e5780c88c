from __future__ import annotations

import dataclasses
import logging
from typing import Optional

from PySide6 import QtCore

from ... import config
from ...model import CatStore
from ..events import Add, CatEvent, Kill, Next, Previous
from ..presenters.cat_presenter import CatPresenter
from ..state import CatViewModel

logger = logging.getLogger(__name__)


class MainController(QtCore.QObject):
    """
    Main controller for the application.
    Applies one store mutation per event, then renders the whole view model.
    """
    view_changed = QtCore.Signal(object)  # CatViewModel

    def __init__(self, store: CatStore, flags: Optional[config.VariantFlags] = None):
        super().__init__()
        self.store = store
        self.flags = flags if flags is not None else config.get_variant_flags()
        self.presenter = CatPresenter(self.flags)

    def refresh(self) -> CatViewModel:
        """Render the current state without changing it."""
        return self._publish(self.presenter.render(self.store))

    def handle(self, event: CatEvent) -> Optional[CatViewModel]:
        """
        Dispatch a single UI event.
        Returns the new view model, or None when the event was ignored.
        """
        if isinstance(event, Next):
            self.store.next()
        elif isinstance(event, Previous):
            self.store.previous()
        elif isinstance(event, Kill):
            if not self.flags.has_alive:
                logger.debug("Kill ignored: variant has no alive state")
                return None
            self.store.kill()
        elif isinstance(event, Add):
            return self._add(event)
        else:
            raise TypeError(f"Unsupported event: {event!r}")
        return self.refresh()

    def _add(self, event: Add) -> Optional[CatViewModel]:
        name = (event.name or "").strip()
        colour = (event.colour or "").strip() if self.flags.has_colour else ""
        if not name or (self.flags.has_colour and not colour):
            return None

        self.store.add(name, colour)
        view = dataclasses.replace(
            self.presenter.render(self.store),
            clear_inputs=True,
            focus_name=True,
        )
        return self._publish(view)

    def _publish(self, view: CatViewModel) -> CatViewModel:
        self.view_changed.emit(view)
        return view
