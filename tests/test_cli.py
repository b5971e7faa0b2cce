import pytest

from cargo_tools.cli import main, tool_main


def test_main_prints_processed_input(capsys):
    assert main(["hello"]) == 0
    out = capsys.readouterr().out
    assert out == "[cargo-tools-test] Processed: hello\n"


def test_main_verbose(capsys):
    assert main(["-v", "hello"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Processing input: hello", "[cargo-tools-test] Processed: hello"]


def test_main_requires_input(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code != 0


def test_main_with_cargo_toml(tmp_path, capsys):
    cargo_toml = tmp_path / "Cargo.toml"
    cargo_toml.write_text('[package]\nname = "cli-main"\nversion = "0.1.0"\n', encoding="utf-8")

    assert main(["--config", str(cargo_toml), "data"]) == 0
    assert capsys.readouterr().out == "[cli-main] Processed: data\n"


def test_main_rejects_invalid_config(tmp_path, capsys):
    path = tmp_path / "empty.json"
    path.write_text('{"name": "", "version": "1.0"}', encoding="utf-8")

    assert main(["--config", str(path), "data"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Config name cannot be empty" in captured.err


def test_main_reports_unloadable_config(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "missing.json"), "data"]) == 1
    assert "Could not load config" in capsys.readouterr().err


@pytest.mark.parametrize("action, expected", [
    ("check", "checking..."),
    ("validate", "validating..."),
    ("format", "formatting..."),
])
def test_tool_main_actions(action, expected, capsys):
    assert tool_main([action]) == 0
    assert capsys.readouterr().out == f"[cargo-tools-test] Processed: {expected}\n"


def test_tool_main_rejects_unknown_action():
    with pytest.raises(SystemExit) as exc:
        tool_main(["deploy"])
    assert exc.value.code == 2
