import json
import pytest
from hookcuts.cli import main
from hookcuts.settings import Settings, apply_settings, get_settings
from hookcuts.config import Config

SCENARIO = {
    "transcript": "",
    "cues": [
        {"text": "Have you ever wondered why this happens?", "start": 0, "end": 5},
        {"text": "We talked about the setup and the plan for the afternoon session in detail.", "start": 5, "end": 40},
        {"text": "This is the BEST trick, never seen before!", "start": 40, "end": 70},
        {"text": "Then we wrapped up the session and packed the gear.", "start": 70, "end": 75},
    ],
}


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("MAX_CLIPS", "MIN_DURATION_S", "MAX_DURATION_S", "DEBUG"):
        monkeypatch.delenv(f"HOOKCUTS_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def scenario_file(tmp_path):
    path = tmp_path / "transcript.json"
    path.write_text(json.dumps(SCENARIO), encoding="utf-8")
    return path


def test_cli_writes_clips(scenario_file, tmp_path):
    out = tmp_path / "out" / "clips.json"

    assert main(["--input", str(scenario_file), "--output", str(out)]) == 0

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["totalClips"] == 2
    assert [c["startTime"] for c in data["clips"]] == [0.0, 40.0]
    assert data["clips"][0]["viralPotential"] == "MEDIUM"

def test_cli_max_clips_flag(scenario_file, tmp_path):
    out = tmp_path / "clips.json"

    assert main(["--input", str(scenario_file), "--output", str(out), "--max-clips", "1"]) == 0

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["totalClips"] == 1
    assert data["clips"][0]["startTime"] == 0.0

def test_cli_reads_environment(scenario_file, tmp_path, monkeypatch):
    monkeypatch.setenv("HOOKCUTS_MAX_CLIPS", "1")
    out = tmp_path / "clips.json"

    assert main(["--input", str(scenario_file), "--output", str(out)]) == 0

    assert json.loads(out.read_text(encoding="utf-8"))["totalClips"] == 1

def test_cli_missing_input(tmp_path):
    assert main(["--input", str(tmp_path / "nope.json")]) == 1

def test_cli_rejects_inverted_band(scenario_file):
    assert main(["--input", str(scenario_file), "--min-duration", "80", "--max-duration", "20"]) == 1

def test_cli_rejects_malformed_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    assert main(["--input", str(path)]) == 1

def test_apply_settings_only_copies_set_values():
    cfg = apply_settings(Config(), Settings(max_clips=3))

    assert cfg.clips.max_clips == 3
    assert cfg.clips.min_duration_s == 15.0
    assert cfg.clips.max_duration_s == 75.0
    assert cfg.debug is False

def test_config_validate():
    cfg = Config()
    cfg.validate()

    cfg.clips.speaking_rate_wps = 0
    with pytest.raises(ValueError):
        cfg.validate()

def test_cli_keeps_going_past_a_bad_cue(tmp_path):
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"cues": [
        {"text": "Why does this keep happening to everyone?", "start": 0, "end": 10},
        {"text": None, "start": 10, "end": 11},
        {"text": "Here is the slow explanation of the fix.", "start": 11, "end": 30},
    ]}), encoding="utf-8")
    out = tmp_path / "clips.json"

    assert main(["--input", str(path), "--output", str(out)]) == 0

    assert json.loads(out.read_text(encoding="utf-8"))["totalClips"] == 1

def test_cli_configures_logging_once(scenario_file, monkeypatch):
    calls = []
    monkeypatch.setattr("hookcuts.main.setup_logging", lambda debug: calls.append(debug))

    assert main(["--input", str(scenario_file), "--debug"]) == 0

    assert calls == [True]
