from __future__ import annotations

import sys
import logging

from . import config

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%H:%M:%S'
)

logger = logging.getLogger(__name__)


def run_qt() -> int:
    from PySide6 import QtWidgets  # type: ignore
    from .model import CatStore
    from .ui.controllers.main_controller import MainController
    from .ui.main_window import MainWindow
    from .ui.theme import apply_dark_theme

    flags = config.get_variant_flags(config.VARIANT)

    app = QtWidgets.QApplication(sys.argv)
    if config.DARK_THEME_ENABLED:
        apply_dark_theme(app)

    store = CatStore.with_defaults()
    controller = MainController(store, flags)
    logger.info(f"Starting {config.WINDOW_TITLE} ({config.VARIANT} variant, {len(store)} cats)")

    win = MainWindow(controller)
    win.show()
    win.center_on_screen()

    rc = app.exec()
    return int(rc)


def main() -> int:
    # Qt is required; raise a clear error if unavailable
    try:
        import PySide6  # noqa: F401
    except Exception as exc:
        raise RuntimeError(
            "PySide6 is required to run the cat scroller."
        ) from exc
    return run_qt()


if __name__ == "__main__":
    raise SystemExit(main())
