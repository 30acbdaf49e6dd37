"""Hand-written fakes for the API, the background runner and host dialogs."""

from .fake_api import FakeUserApi, make_users
from .task_runner import ManualTaskRunner
from .http import FakeResponse, FakeSession
from .dialogs import ScriptedDialogs

__all__ = [
    "FakeUserApi",
    "make_users",
    "ManualTaskRunner",
    "ScriptedDialogs",
    "FakeResponse",
    "FakeSession",
]
