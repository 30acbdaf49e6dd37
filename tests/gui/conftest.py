import pytest
from PySide6.QtWidgets import QApplication

from ..mocks import FakeUserApi, ManualTaskRunner, ScriptedDialogs, make_users


@pytest.fixture(scope='session')
def qapp():
    """Create QApplication instance for GUI tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def api():
    return FakeUserApi(make_users(12))


@pytest.fixture
def runner():
    return ManualTaskRunner()


@pytest.fixture
def dialogs():
    return ScriptedDialogs(answer=True)
