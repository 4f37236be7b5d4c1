from creationkit.multiton import Importance, Multiton, Printer


def test_same_key_gives_same_instance():
    before = Printer.total_instance_count
    first = Printer.get("same-key")
    second = Printer.get("same-key")
    assert second is first
    assert Printer.total_instance_count == before + 1


def test_different_keys_give_different_instances():
    assert Printer.get(Importance.PRIMARY) is not Printer.get(Importance.SECONDARY)


def test_instance_count_grows_once_per_key(capsys):
    capsys.readouterr()
    before = Printer.total_instance_count
    main = Printer.get("count-primary")
    aux = Printer.get("count-secondary")
    aux2 = Printer.get("count-secondary")
    assert aux is aux2
    assert main is not aux
    assert Printer.total_instance_count == before + 2
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"A total of {before + 1} instances created so far",
        f"A total of {before + 2} instances created so far",
    ]


def test_subclasses_have_separate_registries():
    class Alpha(Printer):
        pass

    base = Printer.get("registry-key")
    derived = Alpha.get("registry-key")
    assert type(base).__name__ == "Printer"
    assert type(derived).__name__ == "Alpha"
    assert Printer.get("registry-key") is base
    assert Alpha.get("registry-key") is derived
    assert issubclass(Alpha, Multiton)


def test_any_hashable_key():
    before = Printer.total_instance_count
    by_text = Printer.get("hashable-x")
    assert Printer.get("hashable-x") is by_text
    by_number = Printer.get(12345)
    assert by_number is not by_text
    assert Printer.total_instance_count == before + 2