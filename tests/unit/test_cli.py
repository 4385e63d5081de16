"""
CLI tests
"""

import json

import pytest

from touchpos import __version__
from touchpos.core.errors import EventError
from touchpos.presentation.cli.main import create_parser, read_event_script, run_cli, run_session


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "touchpos.yaml"
    path.write_text(
        f"storage:\n  path: {tmp_path / 'store.json'}\nlogging:\n  level: WARNING\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def events_file(tmp_path):
    path = tmp_path / "events.jsonl"
    lines = [
        "# morning rush",
        json.dumps({"type": "pos:addToCart", "product": {"id": "p-latte", "name": "Latte", "price": "3.80"}}),
        json.dumps({"type": "pos:addToCart", "product": {"id": "p-latte", "name": "Latte", "price": "3.80"}}),
        "",
        json.dumps({"type": "pos:updateCart", "itemId": "p-latte", "quantity": 3}),
        json.dumps({"type": "pos:navigate", "screen": "cart"}),
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestParser:

    def test_run_arguments(self):
        args = create_parser().parse_args(["run", "-c", "a.yaml", "--theme", "express", "--show-markup"])
        assert args.command == "run"
        assert args.config == "a.yaml"
        assert args.theme == "express"
        assert args.show_markup is True

    def test_version(self, capsys):
        assert run_cli(["--version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_themes_listing(self, capsys):
        assert run_cli(["themes"]) == 0
        out = capsys.readouterr().out
        for name in ("evolution", "restaurant", "express", "oblivion"):
            assert name in out


class TestEventScript:

    def test_skips_comments_and_blank_lines(self, events_file):
        entries = read_event_script(events_file)
        assert len(entries) == 4
        assert entries[-1] == {"type": "pos:navigate", "screen": "cart"}

    def test_invalid_json_reports_line(self, tmp_path):
        path = tmp_path / "bad.jsonl"
        path.write_text('{"type": "pos:clearCart"}\n{oops\n', encoding="utf-8")
        with pytest.raises(EventError) as exc_info:
            read_event_script(path)
        assert ":2:" in str(exc_info.value)


class TestRunSession:

    async def test_replays_events(self, config_file, events_file):
        summary = await run_session(str(config_file), events_path=str(events_file))

        assert summary["initialized"] is True
        assert summary["errors"] == []
        assert summary["state"]["current_screen"] == "cart"
        assert summary["state"]["history"] == ["home", "cart"]
        assert summary["cart"]["item_count"] == 3
        assert summary["cart"]["subtotal"] == "11.40"
        assert summary["title"] == "Cart - POS System"
        assert "cart-screen" in summary["markup"]

    async def test_loads_theme(self, config_file):
        summary = await run_session(str(config_file), theme="restaurant")

        assert summary["state"]["active_theme"] == "restaurant"
        assert "restaurant-theme" in summary["markup"]

    async def test_unknown_theme_is_reported(self, config_file):
        summary = await run_session(str(config_file), theme="neon")

        assert summary["initialized"] is True
        assert any("Unknown theme" in e for e in summary["errors"])

    def test_run_cli_prints_summary(self, config_file, events_file, capsys):
        code = run_cli(["run", "-c", str(config_file), "-e", str(events_file)])

        assert code == 0
        out = json.loads(capsys.readouterr().out)
        assert out["state"]["current_screen"] == "cart"
        assert "markup" not in out

    def test_run_cli_rejects_non_object_event(self, config_file, tmp_path, capsys):
        events = tmp_path / "array.jsonl"
        events.write_text("[1, 2]\n", encoding="utf-8")

        assert run_cli(["run", "-c", str(config_file), "-e", str(events)]) == 1
        assert "Event must be an object" in capsys.readouterr().err

    def test_run_cli_missing_config(self, tmp_path, capsys):
        assert run_cli(["run", "-c", str(tmp_path / "missing.yaml")]) == 1
        assert "Config file not found" in capsys.readouterr().err
