"""
Clip candidate discovery package.

Modules:
- models: Data models for windows and clip candidates
- normalization: Cue cleanup and synthetic timing for plain-text transcripts
- generator: Cue-aligned sliding window generation
- features: Hook signal detectors
- scorer: Additive point scoring mapped onto a 1-5 hook score
- selection: Greedy non-overlapping selection in chronological order

Note: To avoid circular imports, import functions directly from submodules:
    from hookcuts.candidates.generator import generate_windows
    from hookcuts.candidates.selection import select_clips
"""

# Only export models at package level (no circular import risk)
from hookcuts.candidates.models import (
    CandidateWindow,
    ScoredWindow,
    ClipCandidate,
)

__all__ = [
    "CandidateWindow",
    "ScoredWindow",
    "ClipCandidate",
]
