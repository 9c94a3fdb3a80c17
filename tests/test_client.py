"""
Client bootstrap/refresh and CLI, against a mocked transport.
"""
import json

import httpx
import pytest

from gdfarms import cli
from gdfarms.client import (ApiError, ClientState, IdentityStore, TrackerClient,
                            bootstrap, refresh)

KNOWN_ID = "11111111-1111-4111-8111-111111111111"
NEW_ID = "22222222-2222-4222-8222-222222222222"


class FakeBackend:
    """Minimal stand-in for the API; records init calls."""

    def __init__(self):
        self.init_calls = []
        self.goal = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path

        if path == "/api/user/init":
            body = json.loads(request.content)
            self.init_calls.append(body.get("userId"))
            user_id = body["userId"] if body.get("userId") == KNOWN_ID else NEW_ID
            return httpx.Response(200, json={"success": True, "userId": user_id})

        if path.startswith("/api/settings/"):
            return httpx.Response(200, json={"success": True, "settings": {"currency": "USD"}})
        if path.startswith("/api/items/") and request.method == "GET":
            return httpx.Response(200, json={"success": True, "items": [{"id": 1, "name": "Maize"}]})
        if path.startswith("/api/analytics/"):
            return httpx.Response(200, json={"success": True, "analytics": {"totalItems": 1}})
        if path.endswith("/progress"):
            return httpx.Response(200, json={"success": True, "progress": self.goal})
        if path.startswith("/api/goals/"):
            return httpx.Response(200, json={"success": True, "goal": None})

        return httpx.Response(404, json={"success": False, "message": "Not found"})


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def client(backend):
    with TrackerClient("http://test", transport=httpx.MockTransport(backend)) as c:
        yield c


@pytest.fixture
def store(tmp_path):
    return IdentityStore(tmp_path / "user.json")


class TestIdentityStore:

    def test_missing_file(self, store):
        assert store.load() is None

    def test_corrupt_file(self, store):
        store.path.write_text("{oops", encoding="utf-8")

        assert store.load() is None

    def test_round_trip(self, store):
        store.save(KNOWN_ID)

        assert store.load() == KNOWN_ID


class TestBootstrap:

    def test_first_run_stores_new_id(self, client, store, backend):
        state = bootstrap(client, store)

        assert state == ClientState(user_id=NEW_ID)
        assert store.load() == NEW_ID
        assert backend.init_calls == [None]

    def test_known_id_is_kept(self, client, store, backend):
        store.save(KNOWN_ID)

        state = bootstrap(client, store)

        assert state.user_id == KNOWN_ID
        assert backend.init_calls == [KNOWN_ID]

    def test_unknown_stored_id_is_replaced(self, client, store):
        store.save("lost-id")

        state = bootstrap(client, store)

        assert state.user_id == NEW_ID
        assert store.load() == NEW_ID

    def test_transport_failure_is_offline_mode(self, store):
        def fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        with TrackerClient("http://test", transport=httpx.MockTransport(fail)) as client:
            state = bootstrap(client, store)

        assert state.offline is True
        assert state.user_id is None
        assert store.load() is None


class TestRefresh:

    def test_returns_new_state(self, client):
        state = ClientState(user_id=KNOWN_ID)

        refreshed = refresh(client, state)

        assert refreshed is not state
        assert state.items == ()
        assert refreshed.items == ({"id": 1, "name": "Maize"},)
        assert refreshed.settings == {"currency": "USD"}
        assert refreshed.analytics == {"totalItems": 1}
        assert refreshed.goal is None

    def test_offline_state_is_unchanged(self, client):
        state = ClientState(offline=True)

        assert refresh(client, state) is state


class TestApiError:

    def test_failure_envelope_raises(self, client):
        with pytest.raises(ApiError) as excinfo:
            client.delete_item(KNOWN_ID, 5)

        assert excinfo.value.status_code == 404
        assert excinfo.value.message == "Not found"

    def test_non_object_body_raises(self, store):
        def gateway(request):
            return httpx.Response(502, json=["bad gateway"])

        with TrackerClient("http://test", transport=httpx.MockTransport(gateway)) as client:
            with pytest.raises(ApiError) as excinfo:
                client.health()
            state = bootstrap(client, store)

        assert excinfo.value.status_code == 502
        assert excinfo.value.message == "Invalid response from server"
        assert state.offline is True


class TestCli:

    def test_goal_show_without_goal(self, backend, tmp_path, capsys):
        code = cli.main(
            ["--state-file", str(tmp_path / "u.json"), "goal", "show"],
            transport=httpx.MockTransport(backend),
        )

        assert code == 0
        assert "No goal set yet" in capsys.readouterr().out

    def test_goal_show_prints_suggestions(self, backend, tmp_path, capsys):
        backend.goal = {
            "goal": {"target_revenue": 100, "target_profit": 50, "deadline": "2026-12-31"},
            "daysLeft": 73,
            "revenueNeeded": 40,
            "profitNeeded": -10,
            "suggestions": ["You need to generate $40.00 more in revenue"],
        }

        code = cli.main(
            ["--state-file", str(tmp_path / "u.json"), "goal", "show"],
            transport=httpx.MockTransport(backend),
        )

        out = capsys.readouterr().out
        assert code == 0
        assert "(73 days left)" in out
        assert "- You need to generate $40.00 more in revenue" in out

    def test_api_error_exit_code(self, backend, tmp_path, capsys):
        code = cli.main(
            ["--state-file", str(tmp_path / "u.json"), "items", "delete", "7"],
            transport=httpx.MockTransport(backend),
        )

        assert code == 1
        assert "Error (404)" in capsys.readouterr().err
