import numpy as np
import pandas as pd
import pytest

from behaviors import HaldiRobinson2008IndoorOutdoorTemp, YunTuohySteemers2009IndoorTemp
from core.config import SimulationConfig
from core.schema import OccupantTransition, SystemTransition, UserType
from data_prep import validate_drive_tape
from engine import compute_probabilities, run_action_simulation
from pm import compute_path_metrics, summarize_action_rates


def test_probabilities_use_row_states(indoor_tape):
    model = YunTuohySteemers2009IndoorTemp()
    p = compute_probabilities(indoor_tape, model, SimulationConfig())

    for i, row in indoor_tape.iterrows():
        expected = model.calculate_action_probability(
            row["user_type"], row["occupant_transition"], row["system_transition"], [row["indoor_temp"]]
        )
        assert p[i] == pytest.approx(expected)
    # closing during presence is gated above 30 °C
    assert p[-1] == 0.0 and p[-2] == 0.0


def test_probabilities_fall_back_to_config_states():
    tape = pd.DataFrame({"indoor_temp": [15.0, 20.0], "outdoor_temp": [10.0, 25.0]})
    model = HaldiRobinson2008IndoorOutdoorTemp()
    config = SimulationConfig(
        system_transition=SystemTransition.OPEN_CLOSE,
        occupant_transition=OccupantTransition.ALL_STATES,
        user_type=UserType.UNKNOWN,
    )
    p = compute_probabilities(tape, model, config)
    assert p[1] > p[0] > 0.0

    assert np.all(compute_probabilities(tape, model, SimulationConfig()) == 0.0)


def test_run_shapes_and_columns(indoor_tape):
    config = SimulationConfig(n_paths=4, seed=3)
    probs, actions = run_action_simulation(indoor_tape, YunTuohySteemers2009IndoorTemp(), config)

    assert list(probs.columns) == ["probability"]
    assert probs.index.equals(indoor_tape.index)
    assert len(actions) == 4 * len(indoor_tape)
    assert list(actions.columns) == ["path_id", "step", "action", "probability"]
    assert set(actions["action"].unique()) <= {0, 1}
    assert actions.groupby("path_id").size().tolist() == [len(indoor_tape)] * 4


def test_run_is_reproducible(indoor_tape):
    config = SimulationConfig(n_paths=20, seed=42, store_probabilities=False)
    model = YunTuohySteemers2009IndoorTemp()
    _, a = run_action_simulation(indoor_tape, model, config)
    _, b = run_action_simulation(indoor_tape, model, config)
    pd.testing.assert_frame_equal(a, b)
    assert "probability" not in a.columns


def test_zero_probability_steps_never_act(indoor_tape):
    _, actions = run_action_simulation(indoor_tape, YunTuohySteemers2009IndoorTemp(), SimulationConfig(n_paths=50))
    zero = actions[actions["probability"] == 0.0]
    assert len(zero) > 0
    assert zero["action"].sum() == 0


def test_run_rejects_missing_columns():
    tape = pd.DataFrame({"outdoor_temp": [20.0]})
    with pytest.raises(ValueError, match="Missing drive columns"):
        run_action_simulation(tape, YunTuohySteemers2009IndoorTemp())


def test_config_rejects_non_positive_paths():
    with pytest.raises(ValueError):
        SimulationConfig(n_paths=0)


def test_metrics_and_summary(indoor_tape):
    config = SimulationConfig(n_paths=2000, seed=5)
    probs, actions = run_action_simulation(indoor_tape, YunTuohySteemers2009IndoorTemp(), config)
    metrics = compute_path_metrics(actions)

    assert list(metrics.columns) == ["path_id", "n_steps", "n_actions", "action_rate"]
    assert len(metrics) == 2000
    assert (metrics["n_steps"] == len(indoor_tape)).all()

    summary = summarize_action_rates(metrics, probs["probability"])
    assert summary["expected_actions"] == pytest.approx(probs["probability"].sum())
    assert summary["mean_actions"] == pytest.approx(summary["expected_actions"], abs=0.2)
    assert summary["P05_actions"] <= summary["P50_actions"] <= summary["P95_actions"]


def test_validation_errors_and_warnings():
    tape = pd.DataFrame({
        "indoor_temp": [21.0, 75.0, None],
        "rainfall": [0, 1, 3],
        "user_type": ["ACTIVE", "sleepy", "MEDIUM"],
    })
    result = validate_drive_tape(tape, ("indoor_temp", "rainfall"))
    assert not result.is_valid
    assert any("non-numeric indoor_temp" in e for e in result.errors)
    assert any("sleepy" in e for e in result.errors)
    assert any("rainfall outside" in w for w in result.warnings)
    assert "ERRORS (2)" in result.summary()


def test_validation_warns_on_implausible_temperature():
    tape = pd.DataFrame({"indoor_temp": [21.0, 75.0]})
    result = validate_drive_tape(tape, ("indoor_temp",))
    assert result.is_valid
    assert result.warnings == ["1 rows have indoor_temp outside [-50, 60] °C — verify units."]


def test_validation_empty_tape():
    result = validate_drive_tape(pd.DataFrame({"indoor_temp": []}), ("indoor_temp",))
    assert result.errors == ["Tape is empty (0 rows)."]


def test_config_states_given_as_text():
    tape = pd.DataFrame({"indoor_temp": [15.0, 20.0], "outdoor_temp": [10.0, 25.0]})
    model = HaldiRobinson2008IndoorOutdoorTemp()
    config = SimulationConfig(
        system_transition="OPEN_CLOSE",
        occupant_transition="all_states",
        user_type="unknown",
    )
    assert config.system_transition is SystemTransition.OPEN_CLOSE
    assert config.occupant_transition is OccupantTransition.ALL_STATES
    assert config.user_type is UserType.UNKNOWN

    p = compute_probabilities(tape, model, config)
    expected = [
        model.calculate_action_probability("UNKNOWN", "ALL_STATES", "OPEN_CLOSE", [i, o])
        for i, o in zip(tape["indoor_temp"], tape["outdoor_temp"])
    ]
    np.testing.assert_allclose(p, expected)


def test_config_rejects_unknown_state_text():
    with pytest.raises(ValueError, match="SystemTransition"):
        SimulationConfig(system_transition="AJAR")


def test_summary_percentile_labels():
    metrics = pd.DataFrame({"path_id": [0, 1, 2], "n_actions": [1, 2, 3]})
    summary = summarize_action_rates(metrics, [0.5, 0.5], percentiles=(0.29, 0.57))
    assert "P29_actions" in summary and "P57_actions" in summary
