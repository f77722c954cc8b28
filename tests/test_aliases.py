import pytest

from hshell.aliases import AliasTable


def test_define_and_lookup():
    table = AliasTable()
    table.define("ll=ls -l")
    assert table.lookup("ll") == "ls -l"
    assert len(table) == 1


def test_format_entry_quotes_value():
    table = AliasTable()
    table.define("ll=ls -l")
    assert table.format_entry("ll") == "ll='ls -l'\n"


def test_format_entry_missing_raises():
    table = AliasTable()
    with pytest.raises(KeyError):
        table.format_entry("nope")


def test_lookup_missing_is_none():
    assert AliasTable().lookup("x") is None


def test_empty_value_removes_alias():
    table = AliasTable()
    table.define("g=git")
    table.define("g=")
    assert table.lookup("g") is None
    assert len(table) == 0


def test_redefine_replaces_and_moves_to_end():
    table = AliasTable()
    table.define("a=one")
    table.define("b=two")
    table.define("a=three")
    assert table.lookup("a") == "three"
    assert len(table) == 2
    assert table.format_all() == table.format_entry("b") + table.format_entry("a")


def test_define_without_equals_raises():
    with pytest.raises(ValueError):
        AliasTable().define("nope")


def test_remove_without_equals_raises():
    with pytest.raises(ValueError):
        AliasTable().remove("nope")


def test_remove_reports_result():
    table = AliasTable()
    table.define("x=y")
    assert table.remove("x=") is True
    assert table.remove("x=") is False


def test_format_all_empty():
    assert AliasTable().format_all() == ""


def test_expand_follows_chain():
    table = AliasTable()
    table.define("a=b")
    table.define("b=c")
    assert table.expand("a") == "c"


def test_expand_unknown_word_unchanged():
    table = AliasTable()
    table.define("a=b")
    assert table.expand("zzz") == "zzz"


def test_expand_cycle_terminates():
    table = AliasTable()
    table.define("a=b")
    table.define("b=a")
    assert table.expand("a") == "a"