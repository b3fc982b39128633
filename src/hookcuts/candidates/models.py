"""Data models for the clip discovery pipeline."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class CandidateWindow:
    """Raw candidate window spanning cues first_cue..last_cue (inclusive)."""
    first_cue: int
    last_cue: int
    start_s: float
    end_s: float

    @property
    def duration_s(self) -> float:
        return self.end_s - self.start_s

    def overlaps(self, other: "CandidateWindow") -> bool:
        """Half-open interval intersection: touching windows do not overlap."""
        return self.start_s < other.end_s and other.start_s < self.end_s


@dataclass
class ScoredWindow:
    """Window with its hook score and the detectors that fired."""
    window: CandidateWindow
    hook_score: int
    points: int
    hook_text: str
    signals: List[str] = field(default_factory=list)

    @property
    def start_s(self) -> float:
        return self.window.start_s

    @property
    def end_s(self) -> float:
        return self.window.end_s

    @property
    def duration_s(self) -> float:
        return self.window.duration_s


@dataclass
class ClipCandidate:
    """
    Final clip suggestion handed to the caller.

    title and reason are placeholders that an enrichment step may
    overwrite; start_s, end_s and transcript_excerpt trace back to the
    source video and must be kept verbatim.
    """
    title: str
    start_s: float
    end_s: float
    transcript_excerpt: str
    hook_score: int
    reason: str
    signals: List[str] = field(default_factory=list)
    points: int = 0

    @property
    def duration_s(self) -> float:
        return self.end_s - self.start_s

    @property
    def viral_potential(self) -> str:
        if self.hook_score >= 4:
            return "HIGH"
        if self.hook_score >= 3:
            return "MEDIUM"
        return "LOW"
