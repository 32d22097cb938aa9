"""Interactive console that manages a music library and plays entries."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from learnkit import mp
from learnkit.library import MusicEntry, MusicManager

MENU = """
    Enter following commands to control the player:
    lib list -- View the existing music lib
    lib add <name> <artist> <source> <type> -- Add a music to the music lib
    lib remove <id> -- Remove the specified music from the lib
    play <name> -- Play the specified music
"""

_INTEGER = re.compile(r"[+-]?[0-9]+")
_QUIT_COMMANDS = frozenset({"q", "e"})


class MusicShell:
    """Runs console commands against a music library."""

    def __init__(self, library: MusicManager | None = None, out: TextIO | None = None) -> None:
        self.library = library if library is not None else MusicManager()
        self.out = out
        self._last_id = 1

    def _say(self, *parts: object) -> None:
        print(*parts, file=self.out)

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the shell should stop."""
        if line in _QUIT_COMMANDS:
            return False
        tokens = line.split(" ")
        if tokens[0] == "lib":
            self._lib(tokens)
        elif tokens[0] == "play":
            self._play(tokens)
        else:
            self._say("Unrecognized command:", tokens[0])
        return True

    def _lib(self, tokens: list[str]) -> None:
        sub = tokens[1] if len(tokens) > 1 else ""
        if sub == "list":
            for number, music in enumerate(self.library, start=1):
                self._say(number, ":", music.name, music.artist, music.source, music.type)
        elif sub == "add":
            if len(tokens) != 6:
                self._say("USAGE: lib add <name> <artist> <source> <type>")
                return
            self._last_id += 1
            name, artist, source, kind = tokens[2:]
            self.library.add(
                MusicEntry(id=str(self._last_id), name=name, artist=artist, source=source, type=kind)
            )
        elif sub == "remove":
            if len(tokens) != 3:
                self._say("USAGE: lib remove <id>")
            elif not _INTEGER.fullmatch(tokens[2]):
                self._say("Invalid ID")
            else:
                self.library.remove(int(tokens[2]) - 1)
        else:
            self._say("Unrecognized lib command:", sub)

    def _play(self, tokens: list[str]) -> None:
        if len(tokens) != 2:
            self._say("USAGE: player <name>")
            return
        try:
            music = self.library.find(tokens[1])
        except LookupError:
            self._say("The music", tokens[1], "does not exist.")
            return
        mp.play(music.source, music.type)


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input until 'q', 'e' or end of input."""
    print(MENU)
    shell = MusicShell()
    while True:
        print("Enter Command-> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line or not shell.execute(line.rstrip("\r\n")):
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())