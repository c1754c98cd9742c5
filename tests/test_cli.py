import pandas as pd
import pytest

from app import cli
from app.cli import main


def test_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "HaldiRobinson2009Params: indoor_temp, outdoor_temp, previous_absence" in out


def test_describe(capsys):
    assert main(["describe", "YunSteemers2008OutdoorTempNoNightVentilation"]) == 0
    out = capsys.readouterr().out
    assert "outdoor_temp > 15" in out


def test_evaluate_blinds(capsys):
    code = main([
        "evaluate", "HaldiRobinson2008IndoorOutdoorTemp",
        "--system", "OPEN_CLOSE", "--occupant", "ALL_STATES", "--seed", "1",
        "15.01", "20",
    ])
    assert code == 0
    out = capsys.readouterr().out
    assert "Probability of action: 0.00783" in out
    assert "Sampled action:" in out


def test_evaluate_wrong_drive_count(capsys):
    code = main([
        "evaluate", "HaldiRobinson2008IndoorOutdoorTemp",
        "--system", "OPEN_CLOSE", "--occupant", "ALL_STATES", "15.01",
    ])
    assert code == 2
    assert "expected 2 drives" in capsys.readouterr().err


def test_unknown_model(capsys):
    assert main(["describe", "Nope"]) == 2
    assert "Unknown model 'Nope'" in capsys.readouterr().err


def test_bad_state_is_usage_error():
    with pytest.raises(SystemExit) as exc:
        main(["evaluate", "RijalEtAl2007GlobeOutdoorTemp", "--system", "AJAR", "--occupant", "ALL_STATES", "1", "2"])
    assert exc.value.code == 2


def test_simulate(tmp_path, capsys):
    path = tmp_path / "drives.csv"
    pd.DataFrame({"indoor_temp": [20.0, 24.0, 28.0]}).to_csv(path, index=False)
    code = main([
        "simulate", "YunTuohySteemers2009IndoorTemp", str(path),
        "--system", "CLOSE_OPEN", "--occupant", "ARRIVAL", "--user", "ACTIVE",
        "--paths", "50", "--seed", "9",
    ])
    assert code == 0
    out = capsys.readouterr().out
    assert "3 steps, 50 paths" in out
    assert "expected_actions" in out


def test_internal_key_error_is_not_reported_as_usage_error(monkeypatch):
    def broken(args, model):
        raise KeyError("internal")

    monkeypatch.setitem(cli._COMMANDS, "list", broken)
    with pytest.raises(KeyError, match="internal"):
        main(["list"])
