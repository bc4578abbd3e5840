#
# SPDX-License-Identifier: AGPL-3.0-only
# Copyright (c) 2026 m2-eng
# Author: m2-eng
# License: GNU Affero General Public License v3.0 (AGPL-3.0-only)
# Purpose: Node list/add/send API tests.
#
import logging
from datetime import datetime

import pytest

from domain.xbee import Xbee

logger = logging.getLogger(__name__)

NEW_XBEE = {"node_id": 1234, "name": "Temperature Sensor", "units": "C"}


class TestList:
    """GET /api/list"""

    def test_unauthenticated_leaks_no_data(self, client, info_set):
        info_set.register(Xbee(node_id=2, name="Test", units="C"))

        response = client.get("/api/list")

        assert response.status_code == 200
        assert response.json() == {"success": False}

    def test_authenticated_returns_cached_nodes(self, authed_client, info_set):
        info_set.load(
            [Xbee(node_id=2, name="Test", units="C", max_value=150.0)],
            [(2, 413, datetime(2018, 4, 12, 21, 26, 25))],
        )

        body = authed_client.get("/api/list").json()

        assert body["success"] is True
        assert len(body["nodes"]) == 1
        node = body["nodes"][0]
        assert node["uuid"] == 2
        assert node["reading"] == 413
        assert node["max_value"] == 150.0
        assert node["max_voltage"] == 5.0
        assert set(node) == {
            "uuid", "name", "units", "reading", "last_update",
            "min_value", "max_value", "min_voltage", "max_voltage",
        }

    def test_empty_cache(self, authed_client):
        assert authed_client.get("/api/list").json() == {"nodes": [], "success": True}

    def test_list_does_not_touch_database(self, authed_client, fake_db):
        statements = len(fake_db.statements)

        authed_client.get("/api/list")

        assert len(fake_db.statements) == statements


class TestAdd:
    """POST /api/add"""

    def test_unauthenticated_is_not_found(self, client, fake_db, info_set):
        response = client.post("/api/add", json=NEW_XBEE)

        assert response.status_code == 404
        assert fake_db.tables.xbees == []
        assert len(info_set) == 0

    def test_add_inserts_and_lists(self, authed_client, fake_db):
        response = authed_client.post("/api/add", json=NEW_XBEE)

        assert response.json() == {"success": True}
        assert fake_db.tables.xbees == [(1234, "Temperature Sensor", "C", 0.0, 0.0, 0.0, 5.0)]

        nodes = authed_client.get("/api/list").json()["nodes"]
        assert [(n["uuid"], n["name"], n["units"]) for n in nodes] == [(1234, "Temperature Sensor", "C")]
        assert fake_db.checked_out == 0

    def test_duplicate_node_id_accepted(self, authed_client, fake_db):
        assert authed_client.post("/api/add", json=NEW_XBEE).json() == {"success": True}
        assert authed_client.post("/api/add", json=NEW_XBEE).json() == {"success": True}

        assert len(fake_db.tables.xbees) == 2
        assert len(authed_client.get("/api/list").json()["nodes"]) == 1

    @pytest.mark.parametrize("body", [
        {"node_id": "abc", "name": "x", "units": "C"},
        {"node_id": -1, "name": "x", "units": "C"},
        {"name": "x", "units": "C"},
    ])
    def test_invalid_body_rejected(self, authed_client, fake_db, body):
        response = authed_client.post("/api/add", json=body)

        assert response.status_code == 422
        assert fake_db.tables.xbees == []

    def test_database_error_is_503(self, authed_client, fake_db, info_set):
        fake_db.fail_queries = True

        response = authed_client.post("/api/add", json=NEW_XBEE)

        assert response.status_code == 503
        assert "add xbee" in response.json()["detail"]
        assert len(info_set) == 0
        assert fake_db.checked_out == 0

    def test_pool_exhausted_is_503(self, authed_client, fake_db):
        fake_db.fail_checkout = True

        response = authed_client.post("/api/add", json=NEW_XBEE)

        assert response.status_code == 503

    def test_unusable_connection_is_503_and_released(self, authed_client, fake_db, info_set):
        fake_db.fail_cursor = True

        response = authed_client.post("/api/add", json=NEW_XBEE)

        assert response.status_code == 503
        assert fake_db.checked_out == 0
        assert len(info_set) == 0

        fake_db.fail_cursor = False
        assert authed_client.post("/api/add", json=NEW_XBEE).json() == {"success": True}


class TestSend:
    """POST /api/send"""

    def test_unauthenticated_is_not_found(self, client):
        response = client.post("/api/send", json={"content": "Data to send", "dest": 1234})

        assert response.status_code == 404

    def test_echoes_content(self, authed_client, caplog):
        caplog.set_level(logging.INFO, logger="uvicorn.error")
        response = authed_client.post("/api/send", json={"content": "Data to send", "dest": 1234})

        assert response.json() == {"content": "Data to send", "success": True}
        assert "Data to send" in caplog.text

    @pytest.mark.parametrize("dest", [-1, 2**32, "node"])
    def test_destination_must_be_u32(self, authed_client, dest):
        response = authed_client.post("/api/send", json={"content": "x", "dest": dest})

        assert response.status_code == 422

    def test_largest_destination(self, authed_client):
        response = authed_client.post("/api/send", json={"content": "x", "dest": 2**32 - 1})

        assert response.json()["success"] is True


class TestHealth:
    def test_health_is_public(self, client):
        assert client.get("/api/health").json()["status"] == "healthy"
