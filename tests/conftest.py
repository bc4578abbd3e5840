#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Pytest configuration and shared fixtures.
#
"""
Pytest Configuration and Shared Fixtures for the XbeeWeb Test Suite.

This module provides:
- The in-memory database (tests/fixtures/fake_db.py)
- The FastAPI app wired to it (TestClient)
- A test user with a real bcrypt hash
"""

import logging
from dataclasses import dataclass

import pytest
from cryptography.fernet import Fernet
from fastapi.testclient import TestClient

from api.auth_context import set_auth_context
from api.dependencies import get_database
from api.main import app
from auth.cookies import CookieCipher
from auth.passwords import hash_password
from services.info_set import InfoSet
from tests.fixtures.fake_db import FakeDatabase

logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# ============================================================================
# TEST USERS
# ============================================================================

@dataclass
class TestUser:
    """Test user configuration."""
    __test__ = False

    username: str
    password: str


ADMIN = TestUser(username="admin", password="correct horse battery staple")


@pytest.fixture(scope='session')
def admin_hash() -> str:
    """bcrypt is slow, hash once per session."""
    return hash_password(ADMIN.password)


# ============================================================================
# APP FIXTURES
# ============================================================================

@pytest.fixture
def fake_db(admin_hash) -> FakeDatabase:
    db = FakeDatabase()
    db.tables.users[ADMIN.username] = admin_hash
    return db


@pytest.fixture
def info_set() -> InfoSet:
    return InfoSet()


@pytest.fixture
def cookie_cipher() -> CookieCipher:
    return CookieCipher(Fernet.generate_key().decode())


@pytest.fixture
def client(fake_db, info_set, cookie_cipher):
    """
    TestClient without lifespan: startup (real MySQL) is skipped and the
    app state is filled in by hand.
    """
    app.dependency_overrides[get_database] = lambda: fake_db
    app.state.info_set = info_set
    set_auth_context(app, cookie_cipher=cookie_cipher, cookie_secure=False)

    test_client = TestClient(app)
    yield test_client

    test_client.close()
    app.dependency_overrides.clear()
    del app.state.info_set
    del app.state.auth_context


@pytest.fixture
def login(client):
    """Posts credentials (ADMIN by default) and returns the response body."""
    def _login(username: str = ADMIN.username, password: str = ADMIN.password) -> dict:
        response = client.post("/api/login", json={"user": username, "pass": password})
        assert response.status_code == 200, response.text
        return response.json()
    return _login


@pytest.fixture
def authed_client(client, login):
    assert login() == {"success": True}
    return client
