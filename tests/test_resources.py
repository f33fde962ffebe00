from pathlib import Path

from hammingpix.resources import search_and_set_resource_dir


def test_found_in_working_dir(tmp_path, monkeypatch):
    (tmp_path / "res").mkdir()
    monkeypatch.chdir(tmp_path)
    assert search_and_set_resource_dir("res", tmp_path / "elsewhere") is True
    assert Path.cwd().resolve() == (tmp_path / "res").resolve()


def test_found_in_app_dir(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    app = tmp_path / "app"
    (app / "assets").mkdir(parents=True)
    monkeypatch.chdir(work)
    assert search_and_set_resource_dir("assets", app) is True
    assert Path.cwd().resolve() == (app / "assets").resolve()


def test_found_levels_above_app_dir(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    (tmp_path / "assets").mkdir()
    app = tmp_path / "a" / "b"
    app.mkdir(parents=True)
    monkeypatch.chdir(work)
    assert search_and_set_resource_dir("assets", app) is True
    assert Path.cwd().resolve() == (tmp_path / "assets").resolve()


def test_not_found_beyond_three_levels(tmp_path, monkeypatch):
    work = tmp_path / "work"
    work.mkdir()
    (tmp_path / "assets").mkdir()
    app = tmp_path / "a" / "b" / "c" / "d"
    app.mkdir(parents=True)
    monkeypatch.chdir(work)
    assert search_and_set_resource_dir("assets", app) is False
    assert Path.cwd().resolve() == work.resolve()


def test_not_found_leaves_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert search_and_set_resource_dir("nothing", tmp_path) is False
    assert Path.cwd().resolve() == tmp_path.resolve()