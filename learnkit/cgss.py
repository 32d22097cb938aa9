"""Interactive console for the casual game server."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from learnkit.cg import CenterClient, CenterError, CenterServer, Player
from learnkit.ipc import IpcClient, IpcServer

HELP_TEXT = """
Commands:
    login <username> <level> <exp>
    logout <username>
    send <message>
    list
    quit(q)
    help
"""

_INTEGER = re.compile(r"[+-]?[0-9]+")
_QUIT_COMMANDS = frozenset({"quit", "q"})


def start_center_service() -> CenterClient:
    """Start a center server and return a client connected to it."""
    return CenterClient(IpcClient(IpcServer(CenterServer())))


class GameShell:
    """Runs console commands against a center client."""

    def __init__(self, client: CenterClient, out: TextIO | None = None) -> None:
        self.client = client
        self.out = out
        self._handlers = {
            "list": self._list,
            "send": self._send,
            "help": self._help,
            "login": self._login,
            "logout": self._logout,
        }

    def _say(self, *parts: object) -> None:
        print(*parts, file=self.out)

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the shell should stop."""
        tokens = line.split(" ")
        if tokens[0] in _QUIT_COMMANDS:
            return False
        handler = self._handlers.get(tokens[0])
        if handler is None:
            self._say("Unrecognized command:", tokens[0])
        else:
            handler(tokens)
        return True

    def _help(self, tokens: list[str]) -> None:
        self._say(HELP_TEXT)

    def _logout(self, tokens: list[str]) -> None:
        if len(tokens) != 2:
            self._say("Usage: logout <username>")
            return
        try:
            self.client.remove_player(tokens[1])
        except CenterError:
            pass

    def _login(self, tokens: list[str]) -> None:
        if len(tokens) != 4:
            self._say("Usage: login <username> <level> <exp>")
            return
        name, level, exp = tokens[1:]
        for label, value in (("level", level), ("exp", exp)):
            if not _INTEGER.fullmatch(value):
                self._say(f"Invalid Parameter: <{label}> should be an integer.")
                return
        try:
            self.client.add_player(Player(name, int(level), int(exp), 0))
        except CenterError as error:
            self._say("Add Player Failed:", error)

    def _list(self, tokens: list[str]) -> None:
        try:
            players = self.client.list_player()
        except CenterError as error:
            self._say("List Player Failed:", error)
            return
        for player in players:
            self._say(player)

    def _send(self, tokens: list[str]) -> None:
        try:
            self.client.broadcast(" ".join(tokens[1:]))
        except CenterError as error:
            self._say("Send Message Failed:", error)


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input until quit or end of input."""
    print("Casual Game Server Solution")
    shell = GameShell(start_center_service())
    shell.execute("help")
    while True:
        print("Enter Command-> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line or not shell.execute(line.rstrip("\r\n")):
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())