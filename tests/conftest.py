"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timezone
from typing import Dict, Mapping
from unittest.mock import MagicMock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

from tfsync.keyref import NamespacedName
from tfsync.logger import get_logger, reset_logger

TEST_FINALIZER = "test.app.terraform.io/finalizer"


@pytest.fixture(autouse=True)
def quiet_logger(tmp_path):
    """Route the global logger to a temporary directory for every test."""
    reset_logger()
    logger = get_logger(log_dir=tmp_path / "logs", enable_console=False)
    yield logger
    reset_logger()


@pytest.fixture
def finalizer() -> str:
    return TEST_FINALIZER


@pytest.fixture
def deletion_time() -> datetime:
    return datetime(2025, 2, 1, 12, 0, tzinfo=timezone.utc)


class FakeKeyValueSource:
    """In-memory ConfigMaps and Secrets keyed by NamespacedName."""

    def __init__(self):
        self.config_maps: Dict[NamespacedName, Mapping[str, str]] = {}
        self.secrets: Dict[NamespacedName, Mapping[str, bytes]] = {}

    def get_config_map(self, nn):
        if nn not in self.config_maps:
            raise LookupError(f"configmaps {nn.name!r} not found")
        return self.config_maps[nn]

    def get_secret(self, nn):
        if nn not in self.secrets:
            raise LookupError(f"secrets {nn.name!r} not found")
        return self.secrets[nn]


@pytest.fixture
def kv_source() -> FakeKeyValueSource:
    source = FakeKeyValueSource()
    nn = NamespacedName("default", "workspace-settings")
    source.config_maps[nn] = {"organization": "kubernetes-operator", "project": "default"}
    source.secrets[nn] = {"token": b"  secret-token\n"}
    return source


def make_response(status_code: int = 200, headers=None) -> MagicMock:
    """Build a stand-in for requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.headers = CaseInsensitiveDict(headers or {})
    if status_code >= 400:
        error = requests.exceptions.HTTPError(f"{status_code} Error")
        error.response = resp
        resp.raise_for_status.side_effect = error
    else:
        resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def session_factory():
    """Return a builder for mock sessions answering a single GET."""
    def build(status_code: int = 200, headers=None, exc=None) -> MagicMock:
        session = MagicMock()
        if exc is not None:
            session.get.side_effect = exc
        else:
            session.get.return_value = make_response(status_code, headers)
        return session
    return build
