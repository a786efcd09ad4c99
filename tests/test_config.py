import io
import sys

import pytest

from handbook_feeds.config import get_config_path, load_config
from handbook_feeds.console import Console, resolve_color
from handbook_feeds.errors import ToolError


def test_defaults_without_config_file(tmp_path):
    cfg = load_config(tmp_path / "config.yml")
    assert cfg["data_file"] == (tmp_path / "data" / "articles.json").resolve()
    assert cfg["feed_file"] == (tmp_path / "feeds" / "articles.xml").resolve()
    assert cfg["articles_dir"] == (tmp_path / "articles").resolve()
    assert cfg["index_file"] == (tmp_path / "index.html").resolve()
    assert cfg["locale"] == "en"
    assert cfg["color"] == "auto"
    assert cfg["rebuild_after_update"] is True
    assert cfg["rebuild_command"] == [sys.executable, "-m", "handbook_feeds.rebuild"]


def test_paths_are_relative_to_config(tmp_path):
    site = tmp_path / "site"
    site.mkdir()
    config = site / "config.yml"
    config.write_text("feed_file: public/rss.xml\ncolor: off\nrebuild_command: make feeds\n", encoding="utf-8")

    cfg = load_config(config, explicit=True)
    assert cfg["feed_file"] == (site / "public" / "rss.xml").resolve()
    assert cfg["color"] is False
    assert cfg["rebuild_command"] == ["make", "feeds"]


def test_default_rebuild_command_names_existing_config(tmp_path):
    config = tmp_path / "config.yml"
    config.write_text("locale: es\n", encoding="utf-8")
    cfg = load_config(config)
    assert cfg["locale"] == "es"
    assert cfg["rebuild_command"][-1] == str(config)


def test_explicit_missing_config_is_fatal(tmp_path):
    with pytest.raises(ToolError):
        load_config(tmp_path / "missing.yml", explicit=True)


def test_invalid_config(tmp_path):
    config = tmp_path / "config.yml"
    config.write_text("feed_file: [unclosed\n", encoding="utf-8")
    with pytest.raises(ToolError):
        load_config(config)
    config.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ToolError):
        load_config(config)


def test_get_config_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert get_config_path() == (tmp_path / "config.yml").resolve()
    assert get_config_path("other.yml") == (tmp_path / "other.yml").resolve()


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def test_resolve_color():
    assert resolve_color(True, io.StringIO()) is True
    assert resolve_color(False, FakeTTY()) is False
    assert resolve_color("auto", FakeTTY()) is True
    assert resolve_color("auto", io.StringIO()) is False


def test_console_streams(capsys):
    console = Console(use_color=False)
    console.info("hello")
    console.warn("careful")
    console.error("broken")
    captured = capsys.readouterr()
    assert captured.out == "[INFO] hello\n"
    assert captured.err == "[WARN] careful\n[ERROR] broken\n"


def test_console_color(capsys):
    Console(use_color=True).info("hello")
    assert capsys.readouterr().out == "\033[32m[INFO]\033[0m hello\n"
