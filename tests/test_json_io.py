import json

import pytest
from wire_sim.batch import GroupRuns, ShapeRun
from wire_sim.catalog import SweepGroup
from wire_sim.config import SimConfig
from wire_sim.errors import ConfigError
from wire_sim.io import (
    Experiment,
    config_from_json,
    config_to_json,
    load_experiment,
    profile_from_json,
    profile_to_json,
    results_to_json,
    save_experiment,
    save_results,
)
from wire_sim.shapes import Cosine, Custom, Straight
from wire_sim.vector import Vec2

def test_load_experiment(tmp_path):
    path = tmp_path / "exp.json"
    path.write_text(json.dumps({
        "config": {"mu": 0.1, "dt": 1e-5, "v_initial": [2.0, 0.5]},
        "groups": [
            {"name": "flat", "shapes": [{"type": "straight"}]},
            {"shapes": [{"type": "cosine", "n": 3, "a": 0.01}]},
        ],
    }), encoding="utf-8")

    exp = load_experiment(str(path))
    assert exp.config.mu == 0.1
    assert exp.config.dt == 1e-5
    assert exp.config.v_initial == Vec2(2.0, 0.5)
    assert exp.config.mass == SimConfig().mass
    assert exp.config.max_steps is None
    assert exp.groups[0] == SweepGroup("flat", (Straight(),))
    assert exp.groups[1].name == "group2"
    assert exp.groups[1].profiles == (Cosine(3, 0.01),)

def test_empty_config_gives_defaults():
    assert config_from_json({}) == SimConfig()

def test_config_fields():
    cfg = SimConfig(mass=0.2, max_steps=500)
    d = config_to_json(cfg)
    assert d["mass"] == 0.2
    assert d["v_initial"] == [1.0, 0.0]
    assert d["max_steps"] == 500
    assert config_from_json(d) == cfg

def test_bad_config_value():
    with pytest.raises(ConfigError):
        config_from_json({"mass": -1.0})

def test_experiment_file_round_trip(tmp_path):
    exp = Experiment(
        config=SimConfig(mu=0.05),
        groups=[SweepGroup("mix", (Straight(), Cosine(2, 0.025)))],
    )
    path = tmp_path / "out.json"
    save_experiment(exp, str(path))
    assert load_experiment(str(path)) == exp

def test_profiles():
    assert profile_to_json(Cosine(4, 0.2)) == {"type": "cosine", "n": 4, "a": 0.2}
    assert profile_from_json({"type": "cosine", "n": "4", "a": "0.2"}) == Cosine(4, 0.2)
    assert profile_from_json({"type": "straight"}) == Straight()

    with pytest.raises(ValueError):
        profile_from_json({"type": "spiral"})
    with pytest.raises(ValueError):
        profile_from_json({})
    # a fractional period count would leave B off the wire
    with pytest.raises(ValueError, match="whole number"):
        profile_from_json({"type": "cosine", "n": 1.5, "a": 0.1})
    with pytest.raises(ValueError):
        profile_from_json({"type": "cosine", "n": "2.5", "a": 0.1})
    assert profile_from_json({"type": "cosine", "n": 3.0, "a": 0.1}) == Cosine(3, 0.1)
    with pytest.raises(TypeError):
        profile_to_json(Custom(lambda x: 0.0, name="flat"))

def test_results(tmp_path):
    cfg = SimConfig()
    results = [GroupRuns("g", (
        ShapeRun("Straight", Straight(), time=1.0, steps=10),
        ShapeRun("Straight", Straight(), error="v.x < 0", error_type="BackwardMotionError"),
    ))]
    data = results_to_json(results, cfg)
    ok, bad = data["groups"][0]["runs"]
    assert ok == {"shape": {"type": "straight"}, "description": "Straight", "time": 1.0, "steps": 10}
    assert bad["time"] is None
    assert bad["error_type"] == "BackwardMotionError"

    path = tmp_path / "results.json"
    save_results(results, cfg, str(path))
    assert json.loads(path.read_text(encoding="utf-8")) == data
