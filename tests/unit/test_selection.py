from hookcuts.config import Config
from hookcuts.models.transcript import TranscriptCue
from hookcuts.candidates.models import CandidateWindow, ClipCandidate, ScoredWindow
from hookcuts.candidates.selection import rank_windows, select_clips, select_windows


def _scored(start, end, score, first=0, last=0, signals=None, hook_text="hook"):
    return ScoredWindow(
        window=CandidateWindow(first, last, float(start), float(end)),
        hook_score=score,
        points=score,
        hook_text=hook_text,
        signals=signals or [],
    )


def _spans(windows):
    return [(w.start_s, w.end_s) for w in windows]


def test_greedy_skips_overlaps_and_returns_chronological():
    windows = [
        _scored(60, 90, 2),
        _scored(20, 50, 4),
        _scored(0, 30, 5),
        _scored(30, 60, 3),
    ]

    selected = select_windows(windows, 3, Config())

    assert _spans(selected) == [(0, 30), (30, 60), (60, 90)]

def test_highest_score_beats_earlier_start():
    windows = [_scored(0, 30, 2), _scored(20, 50, 4)]
    assert _spans(select_windows(windows, 2, Config())) == [(20, 50)]

def test_earlier_start_breaks_score_ties():
    windows = [_scored(10, 40, 3), _scored(0, 30, 3)]
    assert _spans(select_windows(windows, 1, Config())) == [(0, 30)]

def test_same_start_prefers_target_duration():
    cfg = Config()
    cfg.clips.target_duration_s = 35.0
    windows = [_scored(0, 20, 3), _scored(0, 36, 3), _scored(0, 70, 3)]

    assert _spans(rank_windows(windows, cfg)) == [(0, 36), (0, 20), (0, 70)]

def test_output_is_chronological_not_score_order():
    windows = [_scored(100, 130, 5), _scored(0, 30, 3)]
    assert _spans(select_windows(windows, 2, Config())) == [(0, 30), (100, 130)]

def test_fewer_windows_than_requested():
    windows = [_scored(0, 30, 3), _scored(40, 70, 2)]
    assert len(select_windows(windows, 10, Config())) == 2

def test_non_positive_max_clips():
    windows = [_scored(0, 30, 3)]
    assert select_windows(windows, 0, Config()) == []
    assert select_windows(windows, -3, Config()) == []

def test_all_overlapping_returns_single_best():
    windows = [_scored(0, 20, 2), _scored(0, 30, 4), _scored(10, 30, 3)]
    assert _spans(select_windows(windows, 5, Config())) == [(0, 30)]

def test_select_clips_builds_candidates_from_cues():
    cues = [
        TranscriptCue("Why does this work? Let me show you.", 0.0, 10.0),
        TranscriptCue("Here is the rest.", 10.0, 30.0),
    ]
    scored = [_scored(
        0, 30, 4, first=0, last=1,
        signals=["question", "direct_address"],
        hook_text="Why does this work? Let me show you. Here is the rest.",
    )]

    clips = select_clips(scored, cues, 3, Config())

    assert clips == [ClipCandidate(
        title="Why does this work?",
        start_s=0.0,
        end_s=30.0,
        transcript_excerpt="Why does this work? Let me show you. Here is the rest.",
        hook_score=4,
        reason="Opens with a question or curiosity gap; speaks directly to the viewer",
        signals=["question", "direct_address"],
        points=4,
    )]
    assert clips[0].viral_potential == "HIGH"
