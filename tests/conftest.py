"""
Pytest configuration and fixtures for the box volume tests.
"""

import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from boxvolume.app.scope import ViewModelStore
from boxvolume.app.state import VolumeViewModel


@pytest.fixture(scope="session")
def qapp():
    """Fixture providing the single QApplication for view tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def view_models(qapp):
    """Fixture providing a fresh presenter scope, cleared after the test."""
    store = ViewModelStore()
    yield store
    store.clear()


@pytest.fixture
def view_model(qapp):
    """Fixture providing a standalone presenter."""
    return VolumeViewModel()


@pytest.fixture
def recorder():
    """Object whose ``record`` slot keeps every value it receives."""
    class Recorder:
        def __init__(self):
            self.values = []

        def record(self, value):
            self.values.append(value)

    return Recorder()
