"""HTTP transport for the game server."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from torusbot.net.base import GameProtocolError, read_snapshot, split_join_payload
from torusbot.sim.contracts import Action, GameConfig, TurnSnapshot

logger = logging.getLogger(__name__)

PLAYER_ID_HEADER = "X-Sm-Playerid"
PLAYER_MONIKER_HEADER = "X-Sm-Playermoniker"
DEFAULT_TIMEOUT = 30.0


class GameClient:
    """Talks to one game on the server; each request blocks until the next turn."""

    def __init__(
        self,
        base_url: str,
        game_id: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._game_id = game_id
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout)
        self._player_id: str | None = None

    @property
    def player_id(self) -> str | None:
        return self._player_id

    def join(self, name: str) -> tuple[GameConfig, TurnSnapshot]:
        payload = self._post("join", headers={PLAYER_MONIKER_HEADER: name})
        return split_join_payload(payload)

    def send_action(self, action: Action) -> TurnSnapshot:
        return read_snapshot(self._post(action.value))

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "GameClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _post(self, verb: str, headers: dict[str, str] | None = None) -> Any:
        request_headers = dict(headers or {})
        if self._player_id:
            request_headers[PLAYER_ID_HEADER] = self._player_id
        url = f"/game/{self._game_id}/{verb}"
        try:
            response = self._http.post(url, headers=request_headers)
        except httpx.HTTPError as exc:
            raise GameProtocolError(f"Request to {url} failed: {exc}") from exc

        if not response.is_success:
            raise GameProtocolError(
                f"Unexpected response from {url}: "
                f"{response.status_code} {response.text}"
            )
        if not response.content.strip():
            raise GameProtocolError(f"Empty response body from {url}.")

        player_id = response.headers.get(PLAYER_ID_HEADER)
        if player_id:
            if player_id != self._player_id:
                logger.debug("Server assigned player id %s", player_id)
            self._player_id = player_id
        try:
            return response.json()
        except ValueError as exc:
            raise GameProtocolError(f"Response from {url} is not JSON.") from exc
