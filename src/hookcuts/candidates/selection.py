"""Final clip selection.

Greedy interval scheduling over the scored windows:
1. Rank by hook score (desc), then start (asc), then closeness to the
   target duration, then end (asc)
2. Walk the ranking, accepting a window only if its [start, end) range
   does not intersect an accepted one
3. Stop at max_clips and emit the result in chronological order

The best window wins its neighborhood even when a different combination
of its neighbors would sum to more points.
"""
from __future__ import annotations
import logging
from typing import List, Sequence, Tuple

from hookcuts.config import Config
from hookcuts.candidates.generator import get_text_in_window
from hookcuts.candidates.models import ClipCandidate, ScoredWindow
from hookcuts.candidates.scorer import build_reason, build_title
from hookcuts.models.transcript import TranscriptCue

logger = logging.getLogger(__name__)


def ranking_key(scored: ScoredWindow, target_duration_s: float) -> Tuple[int, float, float, float]:
    """Sort key: best hook first, earliest start wins ties."""
    return (
        -scored.hook_score,
        scored.start_s,
        abs(scored.duration_s - target_duration_s),
        scored.end_s,
    )


def rank_windows(scored: Sequence[ScoredWindow], cfg: Config) -> List[ScoredWindow]:
    target = cfg.clips.target_duration_s
    return sorted(scored, key=lambda s: ranking_key(s, target))


def select_windows(
    scored: Sequence[ScoredWindow],
    max_clips: int,
    cfg: Config
) -> List[ScoredWindow]:
    """
    Greedily pick up to max_clips mutually non-overlapping windows.

    Args:
        scored: Scored windows in any order
        max_clips: Maximum windows to keep
        cfg: Configuration (target duration for tie-breaking)

    Returns:
        Accepted windows in chronological order
    """
    if max_clips <= 0 or not scored:
        return []

    accepted: List[ScoredWindow] = []
    for candidate in rank_windows(scored, cfg):
        if len(accepted) >= max_clips:
            break
        if any(candidate.window.overlaps(a.window) for a in accepted):
            continue
        accepted.append(candidate)

    return sorted(accepted, key=lambda s: (s.start_s, s.end_s))


def to_clip_candidate(
    scored: ScoredWindow,
    cues: Sequence[TranscriptCue],
    cfg: Config
) -> ClipCandidate:
    return ClipCandidate(
        title=build_title(scored.hook_text, scored.start_s, cfg.scoring.title_max_words),
        start_s=scored.start_s,
        end_s=scored.end_s,
        transcript_excerpt=get_text_in_window(cues, scored.start_s, scored.end_s),
        hook_score=scored.hook_score,
        reason=build_reason(scored.signals),
        signals=list(scored.signals),
        points=scored.points,
    )


def select_clips(
    scored: Sequence[ScoredWindow],
    cues: Sequence[TranscriptCue],
    max_clips: int,
    cfg: Config
) -> List[ClipCandidate]:
    """
    Select the final clips and build fresh ClipCandidate values for them.

    Args:
        scored: Scored windows
        cues: Normalized cues the windows index into
        max_clips: Maximum number of clips
        cfg: Configuration

    Returns:
        Clip candidates sorted by start time
    """
    selected = select_windows(scored, max_clips, cfg)
    logger.debug(f"Selected {len(selected)} of {len(scored)} windows (max_clips={max_clips})")
    return [to_clip_candidate(s, cues, cfg) for s in selected]
