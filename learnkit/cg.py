"""Game center: a player registry with broadcast messaging, and its client."""

from __future__ import annotations

import json
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from learnkit.ipc import IpcClient, Response, Server


class CenterError(Exception):
    """Raised when the center rejects a request."""


@dataclass(frozen=True)
class Message:
    """A chat message; ``sender`` is carried as ``from`` on the wire."""

    content: str = ""
    sender: str = ""
    to: str = ""


def _pick(data: dict[str, Any], key: str) -> Any:
    if key in data:
        return data[key]
    for name, value in data.items():
        if name.lower() == key:
            return value
    return None


def _load_object(raw: str) -> dict[str, Any]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as error:
        raise ValueError(f"invalid JSON: {error}") from error
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return data


def _message_to_json(message: Message) -> str:
    return json.dumps(
        {"from": message.sender, "to": message.to, "content": message.content},
        ensure_ascii=False,
        separators=(",", ":"),
    )


def _message_from_json(raw: str) -> Message:
    data = _load_object(raw)
    values = {}
    for key in ("from", "to", "content"):
        value = _pick(data, key)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise ValueError(f"field {key!r} must be a string")
        values[key] = value
    return Message(content=values["content"], sender=values["from"], to=values["to"])


@dataclass
class Player:
    """A player known to the center; delivered messages land in ``inbox``."""

    name: str = ""
    level: int = 0
    exp: int = 0
    room: int = 0
    inbox: list[Message] = field(default_factory=list, init=False, repr=False, compare=False)

    def deliver(self, message: Message) -> None:
        """Receive a message and announce it on the console."""
        self.inbox.append(message)
        print(self.name, "received", message.content)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "level": self.level, "exp": self.exp, "room": self.room}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Player:
        """Build a player from decoded JSON; absent or null fields keep defaults."""
        player = cls()
        name = _pick(data, "name")
        if name is not None:
            if not isinstance(name, str):
                raise ValueError("field 'name' must be a string")
            player.name = name
        for key in ("level", "exp", "room"):
            value = _pick(data, key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"field {key!r} must be an integer")
            setattr(player, key, value)
        return player


class CenterServer(Server):
    """Keeps the list of online players and answers center requests."""

    def __init__(self) -> None:
        self._players: list[Player] = []
        self._lock = threading.RLock()
        self._actions: dict[str, Callable[[str], str]] = {
            "addPlayer": self._add_player,
            "removePlayer": self._remove_player,
            "listPlayer": self._list_player,
            "broadcast": self._broadcast,
        }

    def name(self) -> str:
        return "CenterServer"

    def handle(self, method: str, params: str) -> Response:
        action = self._actions.get(method)
        if action is None:
            return Response("404", f"{method}:{params} not found")
        try:
            body = action(params)
        except (CenterError, ValueError) as error:
            return Response("500", str(error))
        return Response("200", body)

    def _add_player(self, params: str) -> str:
        player = Player.from_dict(_load_object(params))
        with self._lock:
            self._players.append(player)
        return "ok"

    def _remove_player(self, params: str) -> str:
        with self._lock:
            for index, player in enumerate(self._players):
                if player.name == params:
                    del self._players[index]
                    player.deliver(Message(content=f"{params} has left", sender="center", to="all"))
                    return "ok"
        raise CenterError("player not found")

    def _list_player(self, params: str) -> str:
        with self._lock:
            if not self._players:
                raise CenterError("no player online")
            return json.dumps(
                [player.to_dict() for player in self._players],
                ensure_ascii=False,
                separators=(",", ":"),
            )

    def _broadcast(self, params: str) -> str:
        message = _message_from_json(params)
        with self._lock:
            if not self._players:
                raise CenterError("no player online")
            for player in self._players:
                player.deliver(message)
        return "ok"


class CenterClient:
    """Typed calls to a center server over an IPC client."""

    def __init__(self, ipc_client: IpcClient) -> None:
        self.ipc_client = ipc_client

    def _request(self, method: str, params: str) -> Response:
        response = self.ipc_client.call(method, params)
        if response.code != "200":
            raise CenterError(response.body)
        return response

    def add_player(self, player: Player) -> None:
        self._request("addPlayer", json.dumps(player.to_dict(), ensure_ascii=False))

    def remove_player(self, name: str) -> None:
        self._request("removePlayer", name)

    def list_player(self) -> list[Player]:
        response = self._request("listPlayer", "")
        try:
            items = json.loads(response.body)
            if not isinstance(items, list):
                raise ValueError("expected a JSON array")
            return [Player.from_dict(item if isinstance(item, dict) else {}) for item in items]
        except ValueError as error:
            raise CenterError(response.body) from error

    def broadcast(self, message: str) -> None:
        self._request("broadcast", _message_to_json(Message(content=message)))