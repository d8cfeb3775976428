"""pytest configuration and fixtures for pyqt-formderive tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def reset_form_config():
    """Restore the default global config after the test."""
    from pyqt_formderive.config import set_form_config

    yield
    set_form_config(None)
