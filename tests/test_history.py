import pytest

from isismock.history import HistoryStorage, VolatileHistoryStorage


def test_abstract_storage_cannot_be_instantiated():
    with pytest.raises(TypeError):
        HistoryStorage()


def test_store_and_read_back():
    storage = VolatileHistoryStorage()
    storage.store(["one", "two"])
    storage.store(["three"])
    assert storage.commands() == ["one", "two", "three"]


def test_oldest_commands_dropped():
    storage = VolatileHistoryStorage(3)
    storage.store(["a", "b"])
    storage.store(["c", "d", "e"])
    assert storage.commands() == ["c", "d", "e"]


def test_default_size_limit():
    storage = VolatileHistoryStorage()
    storage.store(str(i) for i in range(1500))
    commands = storage.commands()
    assert len(commands) == 1000
    assert commands[-1] == "1499"


def test_zero_size_keeps_nothing():
    storage = VolatileHistoryStorage(0)
    storage.store(["a"])
    assert storage.commands() == []


def test_clear():
    storage = VolatileHistoryStorage(5)
    storage.store(["a", "b"])
    storage.clear()
    assert storage.commands() == []
    storage.store(["c"])
    assert storage.commands() == ["c"]


def test_commands_returns_copy():
    storage = VolatileHistoryStorage()
    storage.store(["a"])
    storage.commands().append("b")
    assert storage.commands() == ["a"]