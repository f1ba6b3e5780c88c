import os

# Headless Qt for widget tests
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from catscroller import config
from catscroller.model import CatStore


@pytest.fixture(scope="session")
def qapp():
    from PySide6 import QtWidgets

    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def store():
    return CatStore.with_defaults()


@pytest.fixture
def rich():
    return config.get_variant_flags("rich")


@pytest.fixture
def simple():
    return config.get_variant_flags("simple")
