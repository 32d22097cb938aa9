"""An in-memory music library addressed by position or by name."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MusicEntry:
    """One piece of music and where to find it."""

    id: str = ""
    name: str = ""
    artist: str = ""
    source: str = ""
    type: str = ""


class MusicManager:
    """An ordered collection of music entries."""

    def __init__(self) -> None:
        self._musics: list[MusicEntry] = []

    def __len__(self) -> int:
        return len(self._musics)

    def __iter__(self):
        return iter(self._musics)

    def get(self, index: int) -> MusicEntry:
        """Return the entry at ``index``; raise IndexError when out of range."""
        if not 0 <= index < len(self._musics):
            raise IndexError("index out of range")
        return self._musics[index]

    def find(self, name: str) -> MusicEntry:
        """Return the first entry called ``name``; raise LookupError if none."""
        if not self._musics:
            raise LookupError("no music entries available")
        for music in self._musics:
            if music.name == name:
                print("Found music: ", music.name)
                return music
        raise LookupError("music not found")

    def add(self, music: MusicEntry) -> None:
        """Append an entry to the library."""
        self._musics.append(music)

    def remove(self, index: int) -> MusicEntry | None:
        """Remove and return the entry at ``index``, or None when out of range."""
        if not 0 <= index < len(self._musics):
            return None
        return self._musics.pop(index)