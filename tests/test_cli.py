# tests/test_cli.py
# CLI smoke checks: one-shot commands, interactive loop, error reporting

import io
import json

import pytest
from rich.console import Console

from dictionary_assistant import cli as cli_mod
from dictionary_assistant.assistant import DictionaryAssistant
from dictionary_assistant.cli import CLI, main
from dictionary_assistant.utils.config_manager import Config
from dictionary_assistant.utils.metrics_tracker import Metrics
from dictionary_assistant.utils.timing import timed

DATASET = [
    {"word": "Cat", "meaning": "a feline", "example1": "The cat sat.", "example2": ""},
    {"word": "Catalog", "meaning": "a list", "example1": "", "example2": ""},
    {"word": "Dog", "meaning": "a canine", "example1": "", "example2": ""},
]


def make_console():
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def config_path(tmp_path):
    data = tmp_path / "dict.json"
    data.write_text(json.dumps(DATASET), encoding="utf-8")
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "dataset_path": str(data),
        "cache_capacity": 2,
        "log_path": str(tmp_path / "logs" / "app.log"),
        "metrics_path": str(tmp_path / "metrics.json"),
    }))
    return str(path)


@pytest.fixture
def cli(config_path):
    cfg = Config(config_path, autosave=False)
    return CLI(DictionaryAssistant.from_config(cfg), cfg, metrics=Metrics(persist=False), console=make_console())


def output(console):
    return console.file.getvalue()


def test_one_shot_lookup(config_path):
    console = make_console()
    assert main(["--config", config_path, "lookup", "cat"], console=console) == 0
    out = output(console)
    assert "a feline" in out
    assert "The cat sat." in out


def test_one_shot_suggest(config_path):
    console = make_console()
    assert main(["--config", config_path, "suggest", "ca"], console=console) == 0
    out = output(console)
    assert out.index("Catalog") < out.index("2 • Cat")


def test_one_shot_unknown_word(config_path):
    console = make_console()
    main(["--config", config_path, "lookup", "zebra"], console=console)
    assert "word not found" in output(console)


def test_startup_failure_exit_code(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "dataset_path": str(tmp_path / "missing.json"),
        "log_path": str(tmp_path / "app.log"),
    }))
    console = make_console()
    assert main(["--config", str(path), "lookup", "cat"], console=console) == 1
    assert "startup failed" in output(console)


def test_commands(cli):
    cli.handle("/suggest do")
    cli.handle("dog")
    cli.handle("/stats")
    out = output(cli.console)
    assert "1 • Dog" in out
    assert "a canine" in out
    assert "cache misses" in out


def test_empty_lookup_reports_error(cli):
    cli.handle("/lookup ''")
    assert "error:" in output(cli.console)


def test_suggest_respects_display_limit(cli):
    cli.cfg.set("max_suggestions", 1)
    cli.handle("/suggest c")
    out = output(cli.console)
    assert "1 more" in out


def test_config_command(cli):
    cli.handle("/config cache_capacity 5")
    cli.handle("/config mode nosql")
    out = output(cli.console)
    assert "cache_capacity = 5" in out
    assert "mode must be one of" in out


def test_bench_runs(cli):
    cli.handle("/bench 20")
    assert "bench: 20 lookups" in output(cli.console)
    assert cli.metrics.n["bench_time"] == 1


def test_interactive_loop(cli, monkeypatch):
    lines = iter(["", "/suggest cat", "cat", "/unknown", "/quit"])
    monkeypatch.setattr(cli_mod.Prompt, "ask", lambda *a, **kw: next(lines))
    cli.start()
    out = output(cli.console)
    assert "Catalog" in out
    assert "a feline" in out
    assert "unknown cmd" in out
    assert "bye." in out
    assert not cli.running


def test_interactive_loop_eof(cli, monkeypatch):
    def raise_eof(*a, **kw):
        raise EOFError
    monkeypatch.setattr(cli_mod.Prompt, "ask", raise_eof)
    cli.start()
    assert "bye." in output(cli.console)


def test_unbalanced_quote_is_looked_up(cli):
    cli.handle("/lookup it's")
    cli.handle("/suggest ca")
    out = output(cli.console)
    assert "word not found" in out
    assert "Catalog" in out


def test_timed_returns_result_and_elapsed():
    res, elapsed = timed(lambda a, b=0: a + b)(2, b=3)
    assert res == 5
    assert elapsed >= 0
