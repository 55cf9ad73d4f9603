import json

import pytest

from pattern_gallery.cli.main import main, parse_args


def test_parse_args_defaults():
    args = parse_args(["strategy"])

    assert args.example == "strategy"
    assert args.config is None
    assert args.interval is None
    assert args.duration is None


def test_runs_strategy(capsys):
    main(["strategy"])

    assert capsys.readouterr().out.splitlines() == ["8", "15"]


def test_runs_adapter(capsys):
    main(["adapter"])

    assert len(capsys.readouterr().out.splitlines()) == 2


def test_observer_options(capsys):
    main(["observer", "--interval", "0.01", "--duration", "0.025"])

    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Done With Observing. I am out."
    assert len(lines) == 2 * 3 + 1


def test_observer_config_file(tmp_path, capsys):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "observer": {"interval_seconds": 0.01, "duration_seconds": 0.015, "observer_ids": [8, 9]},
    }))

    main(["observer", "--config", str(config_file)])

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert sorted(line.split()[2] for line in lines[:-1]) == ["8", "9"]


def test_unknown_example_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["visitor"])

    assert exc_info.value.code == 1
    assert "Unknown example 'visitor'" in capsys.readouterr().err


def test_invalid_observer_option_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["observer", "--interval", "-1"])

    assert exc_info.value.code == 1
    assert "Invalid observer options" in capsys.readouterr().err


def test_missing_config_file_exits_with_error(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["strategy", "--config", "/nonexistent/config.json"])

    assert exc_info.value.code == 1
    assert "Configuration file not found" in capsys.readouterr().err
