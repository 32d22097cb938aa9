"""In-process request/response channel between clients and a server object."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Request:
    """A call to a named method with a string payload."""

    method: str = ""
    params: str = ""


@dataclass(frozen=True)
class Response:
    """The status code and body returned for a request."""

    code: str = ""
    body: str = ""


class Server(ABC):
    """Something that answers requests made through an :class:`IpcServer`."""

    @abstractmethod
    def name(self) -> str:
        """Return the server's display name."""

    @abstractmethod
    def handle(self, method: str, params: str) -> Response:
        """Answer one request."""


def _encode(**fields: str) -> str:
    return json.dumps(fields, ensure_ascii=False, separators=(",", ":"))


def _decode(raw: str, *keys: str) -> list[str]:
    """Parse a JSON object and return its string fields (matched case-insensitively)."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as error:
        raise ValueError(f"invalid JSON: {error}") from error
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    lowered = {name.lower(): value for name, value in reversed(list(data.items()))}
    result = []
    for key in keys:
        value = data.get(key, lowered.get(key))
        value = "" if value is None else value
        if not isinstance(value, str):
            raise ValueError(f"field {key!r} must be a string")
        result.append(value)
    return result


class Session:
    """One client's connection to a server."""

    def __init__(self, server: Server) -> None:
        self._server = server
        self.closed = False

    def exchange(self, raw: str) -> str:
        """Handle one JSON-encoded request and return the JSON-encoded response."""
        if self.closed:
            raise RuntimeError("session is closed")
        try:
            request = Request(*_decode(raw, "method", "params"))
        except ValueError:
            print("Failed to parse the request: ", raw)
            raise
        response = self._server.handle(request.method, request.params)
        return _encode(code=response.code, body=response.body)

    def close(self) -> None:
        """End the session; further exchanges fail."""
        if not self.closed:
            self.closed = True
            print("Session closed.")


class IpcServer:
    """Hands out sessions bound to a single server object."""

    def __init__(self, server: Server) -> None:
        self.server = server

    def connect(self) -> Session:
        """Open a new session."""
        session = Session(self.server)
        print("A new session has been created successfully.")
        return session


class IpcClient:
    """Makes calls over its own session to an :class:`IpcServer`."""

    def __init__(self, server: IpcServer) -> None:
        self._session = server.connect()

    def call(self, method: str, params: str) -> Response:
        """Send a request and wait for its response."""
        raw = self._session.exchange(_encode(method=method, params=params))
        return Response(*_decode(raw, "code", "body"))

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()