"""Heuristic hook scorer for candidate windows.

Scoring is additive: every detector in features.py that fires adds its
weight from ScoringConfig.weights, once per window. The point total is
mapped onto a 1-5 hook score through ScoringConfig.thresholds.

Default weights (max 13 points):
- question (3), superlative (3)
- numeric (2), emotional (2)
- direct_address (1), opening (1), topic_shift (1)

Default thresholds: >=8 -> 5, >=6 -> 4, >=4 -> 3, >=2 -> 2, else 1
"""
from __future__ import annotations
import logging
import re
from typing import Dict, List, Sequence, Tuple

from hookcuts.config import Config, ScoringConfig
from hookcuts.candidates.features import compute_signals, extract_hook_text
from hookcuts.candidates.models import CandidateWindow, ScoredWindow
from hookcuts.models.transcript import TranscriptCue
from hookcuts.utils.system import format_timestamp_simple

logger = logging.getLogger(__name__)

SIGNAL_REASONS = {
    "question": "opens with a question or curiosity gap",
    "superlative": "makes a strong superlative claim",
    "numeric": "cites concrete numbers",
    "emotional": "carries emotional intensity",
    "direct_address": "speaks directly to the viewer",
    "opening": "starts at the very beginning of the video",
    "topic_shift": "starts right after a pause at a topic shift",
}

NO_SIGNAL_REASON = "No strong hook signals detected"


def compute_points(signals: Dict[str, bool], cfg: ScoringConfig) -> Tuple[int, List[str]]:
    """
    Sum the weights of the signals that fired.

    Returns:
        (points, fired) - fired keeps detector order
    """
    fired = [name for name, hit in signals.items() if hit]
    points = sum(cfg.weights.get(name, 0) for name in fired)
    return points, fired


def points_to_hook_score(points: int, cfg: ScoringConfig) -> int:
    """Map a point total onto the 1-5 hook scale."""
    for min_points, score in cfg.thresholds:
        if points >= min_points:
            return score
    return 1


def build_reason(fired: Sequence[str]) -> str:
    if not fired:
        return NO_SIGNAL_REASON
    phrases = [SIGNAL_REASONS.get(name, name) for name in fired]
    reason = "; ".join(phrases)
    return reason[0].upper() + reason[1:]


def build_title(hook_text: str, start_s: float, max_words: int = 8) -> str:
    """
    Placeholder title from the first sentence of the hook.

    Args:
        hook_text: Opening text of the window
        start_s: Window start, used when there is no text
        max_words: Maximum words in title

    Returns:
        Title string
    """
    first_sentence = re.split(r"(?<=[.!?])\s+", hook_text.strip(), maxsplit=1)[0]
    words = first_sentence.split()
    if not words:
        return f"Clip at {format_timestamp_simple(start_s)}"

    title = " ".join(words[:max_words]).rstrip(",;:-")
    if len(words) > max_words:
        return title.rstrip(".!?") + "..."
    return title.rstrip(".")


def score_window(
    window: CandidateWindow,
    cues: Sequence[TranscriptCue],
    cfg: Config
) -> ScoredWindow:
    """
    Score a single window.

    Args:
        window: Candidate window
        cues: Normalized cues the window indexes into
        cfg: Configuration

    Returns:
        ScoredWindow with hook score and the signals that fired
    """
    scoring_cfg = cfg.scoring
    hook_text = extract_hook_text(window, cues, scoring_cfg)
    signals = compute_signals(window, cues, hook_text, scoring_cfg)
    points, fired = compute_points(signals, scoring_cfg)

    return ScoredWindow(
        window=window,
        hook_score=points_to_hook_score(points, scoring_cfg),
        points=points,
        hook_text=hook_text,
        signals=fired,
    )


def score_all_windows(
    windows: Sequence[CandidateWindow],
    cues: Sequence[TranscriptCue],
    cfg: Config
) -> List[ScoredWindow]:
    """Score every window, keeping input order."""
    scored = [score_window(w, cues, cfg) for w in windows]

    if scored:
        top = max(scored, key=lambda s: s.hook_score)
        logger.debug(
            f"Scored {len(scored)} windows; top hook score {top.hook_score} "
            f"at {top.start_s:.1f}s ({', '.join(top.signals) or 'no signals'})"
        )
    return scored
