"""Candidate window generator.

Windows are aligned to cue boundaries rather than sliding over raw time.

Algorithm:
1. Start a window at every cue
2. Extend it cue by cue; the window end is the latest end seen so far
3. Stop extending once the duration would exceed max_duration_s
4. Emit every extension whose duration lies inside the duration band

Emitting every in-band extension keeps the set deliberately redundant so
scoring can pick whichever alignment frames a hook best.
"""
from __future__ import annotations
import logging
from typing import List, Sequence

from hookcuts.config import ClipConfig
from hookcuts.candidates.models import CandidateWindow
from hookcuts.models.transcript import TranscriptCue

logger = logging.getLogger(__name__)


def generate_windows(
    cues: Sequence[TranscriptCue],
    cfg: ClipConfig
) -> List[CandidateWindow]:
    """
    Generate cue-aligned candidate windows inside the duration band.

    Args:
        cues: Normalized cues sorted by start time
        cfg: Clip configuration with the duration band

    Returns:
        Candidate windows ordered by (first cue, last cue)
    """
    if not cues:
        logger.debug("No cues, cannot generate windows")
        return []

    min_len = cfg.min_duration_s
    max_len = cfg.max_duration_s
    windows = []

    for i, first in enumerate(cues):
        start = first.start_s
        end = first.end_s
        for j in range(i, len(cues)):
            end = max(end, cues[j].end_s)
            duration = end - start
            if duration > max_len:
                break
            if validate_window(start, end, min_len, max_len):
                windows.append(CandidateWindow(
                    first_cue=i,
                    last_cue=j,
                    start_s=start,
                    end_s=end,
                ))

    logger.debug(
        f"Generated {len(windows)} windows from {len(cues)} cues "
        f"(band {min_len:.0f}-{max_len:.0f}s)"
    )
    return windows


def validate_window(
    start_s: float,
    end_s: float,
    min_len_s: float,
    max_len_s: float
) -> bool:
    """True when the window duration lies inside the inclusive band."""
    duration = end_s - start_s
    return min_len_s <= duration <= max_len_s


def get_cues_in_window(
    cues: Sequence[TranscriptCue],
    start_s: float,
    end_s: float,
    min_inside_ratio: float = 0.5
) -> List[TranscriptCue]:
    """
    Get cues fully or mostly inside a time range.

    Args:
        cues: Cues to search
        start_s: Range start
        end_s: Range end
        min_inside_ratio: Fraction of a cue's own duration that must fall in range

    Returns:
        Matching cues in their original order
    """
    inside = []
    for cue in cues:
        overlap = min(cue.end_s, end_s) - max(cue.start_s, start_s)
        if overlap <= 0:
            continue
        if overlap >= cue.duration_s * min_inside_ratio:
            inside.append(cue)
    return inside


def get_text_in_window(
    cues: Sequence[TranscriptCue],
    start_s: float,
    end_s: float
) -> str:
    """Concatenated text of the cues fully or mostly inside a time range."""
    return " ".join(
        c.text.strip() for c in get_cues_in_window(cues, start_s, end_s) if c.text.strip()
    )
