from hshell.path import find_path, is_command


def test_is_command_regular_file(tmp_path):
    target = tmp_path / "prog"
    target.write_text("")
    assert is_command(str(target)) is True


def test_is_command_directory_and_missing(tmp_path):
    assert is_command(str(tmp_path)) is False
    assert is_command(str(tmp_path / "missing")) is False
    assert is_command("") is False
    assert is_command(None) is False


def test_find_path_no_pathstr():
    assert find_path(None, "ls") is None
    assert find_path("", "ls") is None


def test_find_path_first_match_wins(tmp_path):
    first = tmp_path / "one"
    second = tmp_path / "two"
    first.mkdir()
    second.mkdir()
    (first / "prog").write_text("")
    (second / "prog").write_text("")
    found = find_path(f"{first}:{second}", "prog")
    assert found == f"{first}/prog"


def test_find_path_skips_directories_without_command(tmp_path):
    empty = tmp_path / "empty"
    full = tmp_path / "full"
    empty.mkdir()
    full.mkdir()
    (full / "tool").write_text("")
    assert find_path(f"{empty}:{full}", "tool") == f"{full}/tool"


def test_find_path_not_found(tmp_path):
    assert find_path(str(tmp_path), "nothing-here") is None


def test_find_path_empty_entry_means_cwd(tmp_path, monkeypatch):
    (tmp_path / "local").write_text("")
    monkeypatch.chdir(tmp_path)
    assert find_path("/nonexistent-dir:", "local") == "local"


def test_find_path_dot_slash_command(tmp_path, monkeypatch):
    (tmp_path / "script").write_text("")
    monkeypatch.chdir(tmp_path)
    assert find_path("/nonexistent-dir", "./script") == "./script"