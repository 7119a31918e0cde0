"""Tests for the interactive CLI helpers and loop."""

import builtins

from voicebot.api import cli


def test_format_turn_prints_intent_and_logs(pipeline, store):
    output = cli.format_turn(pipeline, store, "Hello")

    assert output.startswith("Intent: greeting (confidence ")
    assert "Simplotel Grand Hotel" in output
    assert store.get_queries()[0].intent == "greeting"


def test_history_command_without_queries(store):
    assert cli.handle_command(store, "/history") == "No queries logged yet."


def test_analytics_command_renders_json(pipeline, store):
    cli.format_turn(pipeline, store, "Hello")

    assert '"totalQueries": 1' in cli.handle_command(store, "/analytics")


def test_plain_text_is_not_a_command(store):
    assert cli.handle_command(store, "hello") is None


def test_main_loop_runs_until_exit(monkeypatch, capsys):
    answers = iter(["", "Do you have rooms available", "/history", "exit"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

    cli.main()

    out = capsys.readouterr().out
    assert "ROOM INVENTORY" in out
    assert "Intent: availability" in out
    assert "[availability] Do you have rooms available" in out
    assert "Shutting down." in out


def test_main_loop_stops_on_eof(monkeypatch, capsys):
    def closed(prompt=""):
        raise EOFError

    monkeypatch.setattr(builtins, "input", closed)

    cli.main()

    assert "Session ended" in capsys.readouterr().out
