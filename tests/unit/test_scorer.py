import pytest
from dataclasses import fields
from hookcuts.config import Config, ScoringConfig
from hookcuts.models.transcript import TranscriptCue
from hookcuts.candidates.models import CandidateWindow, ScoredWindow
from hookcuts.candidates.scorer import (
    NO_SIGNAL_REASON,
    build_reason,
    build_title,
    compute_points,
    points_to_hook_score,
    score_all_windows,
    score_window,
)


@pytest.mark.parametrize("points,expected", [
    (0, 1), (1, 1), (2, 2), (3, 2), (4, 3), (5, 3), (6, 4), (7, 4), (8, 5), (13, 5),
])
def test_points_to_hook_score_default_thresholds(points, expected):
    assert points_to_hook_score(points, ScoringConfig()) == expected

def test_compute_points_sums_fired_weights():
    signals = {"question": True, "superlative": False, "direct_address": True}
    points, fired = compute_points(signals, ScoringConfig())
    assert points == 4
    assert fired == ["question", "direct_address"]

def test_custom_weights_are_respected():
    cfg = ScoringConfig(weights={"question": 10})
    points, _ = compute_points({"question": True, "numeric": True}, cfg)
    assert points == 10

def test_build_reason():
    assert build_reason([]) == NO_SIGNAL_REASON
    assert build_reason(["question", "opening"]) == (
        "Opens with a question or curiosity gap; starts at the very beginning of the video"
    )

def test_build_title_uses_first_sentence():
    title = build_title("Have you ever wondered why this happens? Then more text.", 0.0)
    assert title == "Have you ever wondered why this happens?"

def test_build_title_truncates_long_sentences():
    title = build_title("one two three four five six seven eight nine ten.", 0.0, max_words=8)
    assert title == "one two three four five six seven eight..."

def test_build_title_strips_trailing_period():
    assert build_title("Short and sweet.", 0.0) == "Short and sweet"

def test_build_title_fallback_without_text():
    assert build_title("", 65.0) == "Clip at 1:05"

def test_repeated_keywords_count_once():
    cues = [
        TranscriptCue("filler words here", 0.0, 10.0),
        TranscriptCue("best best best best", 10.0, 40.0),
    ]
    window = CandidateWindow(first_cue=1, last_cue=1, start_s=10.0, end_s=40.0)

    scored = score_window(window, cues, Config())

    assert scored.signals == ["superlative"]
    assert scored.points == 3
    assert scored.hook_score == 2

def test_score_window_combines_text_and_position_signals():
    cues = [
        TranscriptCue("Have you ever wondered why this happens?", 0.0, 5.0),
        TranscriptCue("plain middle part", 5.0, 40.0),
    ]
    window = CandidateWindow(first_cue=0, last_cue=1, start_s=0.0, end_s=40.0)

    scored = score_window(window, cues, Config())

    assert scored.signals == ["question", "direct_address", "opening"]
    assert scored.points == 5
    assert scored.hook_score == 3
    assert scored.hook_text.startswith("Have you ever wondered")

def test_score_all_windows_keeps_order():
    cues = [TranscriptCue("a b c", 0.0, 20.0), TranscriptCue("d e f", 20.0, 40.0)]
    windows = [
        CandidateWindow(1, 1, 20.0, 40.0),
        CandidateWindow(0, 0, 0.0, 20.0),
    ]

    scored = score_all_windows(windows, cues, Config())

    assert [s.start_s for s in scored] == [20.0, 0.0]
    assert all(1 <= s.hook_score <= 5 for s in scored)

def test_scored_window_keeps_signal_ids_only():
    assert [f.name for f in fields(ScoredWindow)] == [
        "window", "hook_score", "points", "hook_text", "signals",
    ]
    cues = [TranscriptCue("Why now?", 0.0, 20.0)]
    scored = score_window(CandidateWindow(0, 0, 0.0, 20.0), cues, Config())
    assert build_reason(scored.signals).startswith("Opens with a question")
