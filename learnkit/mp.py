"""Simulated music players chosen by file type."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass

_STEP_SECONDS = 0.1
_STEP_PROGRESS = 10
_COMPLETE = 100


class Player(ABC):
    """Something that can play a music source."""

    @abstractmethod
    def play(self, source: str) -> None:
        """Play ``source`` to completion."""


def _run(player: _ProgressPlayer, kind: str, source: str) -> None:
    print(f"Playing {kind} music file", source)
    player.progress = 0
    while player.progress < _COMPLETE:
        time.sleep(_STEP_SECONDS)
        print(".")
        player.progress += _STEP_PROGRESS
    print(f"Finished playing {kind} music file", source)


@dataclass
class _ProgressPlayer(Player):
    progress: int = 0


@dataclass
class MP3Player(_ProgressPlayer):
    """Plays mp3 files, reporting progress as it goes."""

    def play(self, source: str) -> None:
        _run(self, "mp3", source)


@dataclass
class WAVPlayer(_ProgressPlayer):
    """Plays wav files, reporting progress as it goes."""

    def play(self, source: str) -> None:
        _run(self, "wav", source)


_PLAYERS: dict[str, type[Player]] = {
    "mp3": MP3Player,
    "wav": WAVPlayer,
}


def play(source: str, mtype: str) -> Player | None:
    """Play ``source`` with the player for ``mtype``.

    Returns the player used, or None when the type is not supported.
    """
    player_class = _PLAYERS.get(mtype)
    if player_class is None:
        print("Unsupported music type", mtype)
        return None
    player = player_class()
    player.play(source)
    return player