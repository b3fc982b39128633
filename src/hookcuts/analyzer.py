"""Clip discovery entry point.

analyze_clips runs the whole engine on in-memory data:
normalize cues -> generate windows -> score hooks -> select clips.

It is pure and stateless: no I/O, no clock, no randomness, no shared
state, and the caller's cue sequence is never mutated.
"""
from __future__ import annotations
import logging
import math
import numbers
from typing import List, Optional, Sequence

from hookcuts.config import Config
from hookcuts.candidates.generator import generate_windows
from hookcuts.candidates.models import ClipCandidate
from hookcuts.candidates.normalization import normalize_cues
from hookcuts.candidates.scorer import score_all_windows
from hookcuts.candidates.selection import select_clips
from hookcuts.models.transcript import TranscriptCue

logger = logging.getLogger(__name__)


def coerce_max_clips(max_clips) -> int:
    """Integral, finite, non-negative counts pass through; anything else counts as zero."""
    if isinstance(max_clips, bool) or not isinstance(max_clips, numbers.Real):
        return 0
    if isinstance(max_clips, numbers.Integral):
        return max(int(max_clips), 0)
    value = float(max_clips)
    if not math.isfinite(value) or not value.is_integer():
        return 0
    return max(int(value), 0)


def analyze_clips(
    transcript: Optional[str],
    cues: Optional[Sequence[TranscriptCue]] = (),
    max_clips=8,
    cfg: Optional[Config] = None
) -> List[ClipCandidate]:
    """
    Find up to max_clips non-overlapping clips with the strongest hooks.

    Args:
        transcript: Flattened transcript; only used when cues is empty
        cues: Timed cues in start order (may be empty)
        max_clips: Maximum number of clips to return
        cfg: Configuration (defaults to a fresh Config)

    Returns:
        Clip candidates in chronological order; empty when nothing qualifies
        or cfg fails Config.validate()
    """
    cfg = cfg or Config()
    try:
        cfg.validate()
    except ValueError as e:
        logger.warning(f"Unusable configuration, no clips: {e}")
        return []

    count = coerce_max_clips(max_clips)
    if count == 0:
        logger.debug(f"max_clips={max_clips!r} yields no clips")
        return []

    normalized = normalize_cues(transcript, cues, cfg.clips)
    if not normalized:
        logger.info("No usable transcript content, no clips to analyze")
        return []

    windows = generate_windows(normalized, cfg.clips)
    if not windows:
        logger.info(
            f"No window of {len(normalized)} cues fits the "
            f"{cfg.clips.min_duration_s:.0f}-{cfg.clips.max_duration_s:.0f}s band"
        )
        return []

    scored = score_all_windows(windows, normalized, cfg)
    clips = select_clips(scored, normalized, count, cfg)

    logger.info(
        f"Found {len(clips)} clip(s) from {len(windows)} windows over {len(normalized)} cues"
    )
    return clips
