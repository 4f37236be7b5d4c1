import threading

import pytest

from creationkit.singleton import (
    ConfigurableRecordFinder,
    Database,
    DummyDatabase,
    MonostatePrinter,
    PerThreadSingleton,
    SingletonDatabase,
    SingletonRecordFinder,
    SingletonTester,
)

CAPITALS = "Seoul\n17500000\nMexico City\n17400000\n"


def test_singleton_total_population(tmp_path, monkeypatch):
    (tmp_path / "capitals.txt").write_text(CAPITALS, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    rf = SingletonRecordFinder()
    assert rf.total_population(["Seoul", "Mexico City"]) == 17500000 + 17400000
    assert SingletonDatabase.get() is SingletonDatabase.get()


def test_dependant_total_population():
    rf = ConfigurableRecordFinder(DummyDatabase())
    assert rf.total_population(["alpha", "gamma"]) == 4


def test_dummy_database_unknown_name_is_zero():
    assert DummyDatabase().get_population("nowhere") == 0


def test_database_loads_from_file(tmp_path, capsys):
    path = tmp_path / "caps.txt"
    path.write_text(CAPITALS, encoding="utf-8")
    db = SingletonDatabase(path)
    assert capsys.readouterr().out == "Initializing database\n"
    assert db.get_population("Seoul") == 17500000
    assert db.get_population("Mexico City") == 17400000


def test_database_missing_file_is_empty(tmp_path):
    db = SingletonDatabase(tmp_path / "absent.txt")
    assert db.get_population("Seoul") == 0


def test_database_bad_population_raises(tmp_path):
    path = tmp_path / "caps.txt"
    path.write_text("Seoul\nmany\n", encoding="utf-8")
    with pytest.raises(ValueError):
        SingletonDatabase(path)


def test_database_missing_population_raises(tmp_path):
    path = tmp_path / "caps.txt"
    path.write_text("Seoul\n17500000\nTokyo\n", encoding="utf-8")
    with pytest.raises(ValueError):
        SingletonDatabase(path)


def test_database_is_abstract():
    with pytest.raises(TypeError):
        Database()


def test_singleton_tester():
    tester = SingletonTester()
    assert tester.is_singleton(lambda: tester) is True
    assert tester.is_singleton(SingletonTester) is False


def test_monostate_printer_shares_id():
    first = MonostatePrinter()
    second = MonostatePrinter()
    first.id = 42
    assert second.id == 42
    second.id = 7
    assert first.id == 7


def test_per_thread_singleton():
    main_instance = PerThreadSingleton.get()
    assert PerThreadSingleton.get() is main_instance
    assert main_instance.id == threading.get_ident()

    seen = {}

    def worker():
        a = PerThreadSingleton.get()
        b = PerThreadSingleton.get()
        seen["same"] = a is b
        seen["instance"] = a
        seen["ident"] = threading.get_ident()

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()

    assert seen["same"] is True
    assert seen["instance"] is not main_instance
    assert seen["instance"].id == seen["ident"]
    assert seen["instance"].id != main_instance.id