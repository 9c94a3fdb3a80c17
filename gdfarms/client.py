"""HTTP client for the tracker API.

State is explicit: bootstrap() and refresh() return a new ClientState
instead of mutating shared objects. The device's identifier lives in a
small JSON file (IdentityStore), the local-storage equivalent.
"""
import json
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = os.getenv("GDFARMS_BACKEND_URL", "http://127.0.0.1:8000")
DEFAULT_STATE_FILE = Path(
    os.getenv("GDFARMS_STATE_FILE", str(Path.home() / ".gdfarms" / "user.json"))
)


class ApiError(Exception):
    """Backend answered with success=false."""

    def __init__(self, status_code: int, message: str, errors: dict | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.errors = errors or {}


@dataclass(frozen=True)
class ClientState:
    user_id: str | None = None
    settings: dict = field(default_factory=dict)
    items: tuple = ()
    analytics: dict = field(default_factory=dict)
    goal: dict | None = None
    offline: bool = False


class IdentityStore:
    """Keeps the bootstrapped userId between runs."""

    def __init__(self, path: Path = DEFAULT_STATE_FILE) -> None:
        self.path = Path(path)

    def load(self) -> str | None:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return None
        user_id = data.get("userId") if isinstance(data, dict) else None
        return user_id or None

    def save(self, user_id: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"userId": user_id}), encoding="utf-8")


class TrackerClient:
    """One method per API operation. Raises ApiError or httpx.HTTPError."""

    def __init__(
        self,
        base_url: str = DEFAULT_BACKEND_URL,
        *,
        transport: httpx.BaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._client = httpx.Client(base_url=base_url, transport=transport, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "TrackerClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _request(self, method: str, url: str, **kwargs) -> dict:
        response = self._client.request(method, url, **kwargs)
        try:
            data = response.json()
        except ValueError as exc:
            raise ApiError(response.status_code, "Invalid response from server") from exc
        if not isinstance(data, dict):
            raise ApiError(response.status_code, "Invalid response from server")
        if response.is_error or not data.get("success"):
            raise ApiError(
                response.status_code,
                data.get("message", "Request failed"),
                data.get("errors"),
            )
        return data

    # ---- Identity / health ----
    def health(self) -> dict:
        return self._request("GET", "/api/health")

    def init_user(self, user_id: str | None = None) -> str:
        return self._request("POST", "/api/user/init", json={"userId": user_id})["userId"]

    # ---- Items ----
    def list_items(self, user_id: str) -> list[dict]:
        return self._request("GET", f"/api/items/{user_id}")["items"]

    def add_item(self, user_id: str, **fields) -> dict:
        return self._request("POST", "/api/items", json={"userId": user_id, **fields})["item"]

    def update_item(self, user_id: str, item_id: int, **fields) -> dict:
        return self._request(
            "PUT", f"/api/items/{item_id}", json={"userId": user_id, **fields}
        )["item"]

    def delete_item(self, user_id: str, item_id: int) -> None:
        self._request("DELETE", f"/api/items/{item_id}/{user_id}")

    # ---- Analytics ----
    def get_analytics(self, user_id: str) -> dict:
        return self._request("GET", f"/api/analytics/{user_id}")["analytics"]

    # ---- Settings ----
    def get_settings(self, user_id: str) -> dict:
        return self._request("GET", f"/api/settings/{user_id}")["settings"]

    def update_settings(
        self, user_id: str, currency: str, app_name: str, unit_preferences: dict
    ) -> dict:
        payload = {
            "currency": currency,
            "app_name": app_name,
            "unit_preferences": unit_preferences,
        }
        return self._request("PUT", f"/api/settings/{user_id}", json=payload)["settings"]

    # ---- Goals ----
    def set_goal(
        self, user_id: str, target_revenue: float, target_profit: float, deadline: str
    ) -> dict:
        payload = {
            "userId": user_id,
            "target_revenue": target_revenue,
            "target_profit": target_profit,
            "deadline": deadline,
        }
        return self._request("POST", "/api/goals", json=payload)["goal"]

    def get_goal(self, user_id: str) -> dict | None:
        return self._request("GET", f"/api/goals/{user_id}")["goal"]

    def get_goal_progress(self, user_id: str) -> dict | None:
        return self._request("GET", f"/api/goals/{user_id}/progress")["progress"]


def bootstrap(client: TrackerClient, store: IdentityStore) -> ClientState:
    """Validate or obtain the device identifier. Never raises on transport errors."""
    try:
        user_id = client.init_user(store.load())
    except (httpx.HTTPError, ApiError) as exc:
        logger.warning("User initialization failed, running offline: %s", exc)
        return ClientState(offline=True)

    store.save(user_id)
    return ClientState(user_id=user_id)


def refresh(client: TrackerClient, state: ClientState) -> ClientState:
    """Re-fetch everything for the state's user; returns a new state."""
    if state.user_id is None:
        return state
    return replace(
        state,
        settings=client.get_settings(state.user_id),
        items=tuple(client.list_items(state.user_id)),
        analytics=client.get_analytics(state.user_id),
        goal=client.get_goal(state.user_id),
    )
