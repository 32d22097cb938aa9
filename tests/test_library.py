import pytest

from learnkit.library import MusicEntry, MusicManager


def _entry(name="a", entry_id="1"):
    return MusicEntry(
        id=entry_id,
        name=name,
        artist="Celine Dion",
        source="http://qbox.me/24501234",
        type="Pop",
    )


def test_ops():
    mm = MusicManager()
    assert len(mm) == 0

    m1 = _entry()
    mm.add(m1)
    assert len(mm) == 1

    found = mm.find("a")
    assert found.id == m1.id
    assert found.artist == m1.artist
    assert found.name == m1.name
    assert found.source == m1.source
    assert found.type == m1.type

    assert mm.get(0) == m1

    removed = mm.remove(0)
    assert removed == m1
    assert len(mm) == 0


def test_get_out_of_range_raises():
    mm = MusicManager()
    mm.add(_entry())
    with pytest.raises(IndexError, match="index out of range"):
        mm.get(1)
    with pytest.raises(IndexError):
        mm.get(-1)


def test_find_in_empty_library():
    with pytest.raises(LookupError, match="no music entries available"):
        MusicManager().find("a")


def test_find_missing_name():
    mm = MusicManager()
    mm.add(_entry())
    with pytest.raises(LookupError, match="music not found"):
        mm.find("b")


def test_find_returns_first_match():
    mm = MusicManager()
    mm.add(_entry("a", "1"))
    mm.add(_entry("a", "2"))
    assert mm.find("a").id == "1"


def test_remove_out_of_range_returns_none():
    mm = MusicManager()
    mm.add(_entry())
    assert mm.remove(5) is None
    assert mm.remove(-1) is None
    assert len(mm) == 1


def test_remove_keeps_order_of_others():
    mm = MusicManager()
    for name in ("x", "y", "z"):
        mm.add(_entry(name))
    assert mm.remove(1).name == "y"
    assert [music.name for music in mm] == ["x", "z"]