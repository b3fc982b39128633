"""Find short-form clip candidates with strong hooks in timed transcripts."""

from hookcuts.analyzer import analyze_clips
from hookcuts.candidates.models import ClipCandidate
from hookcuts.models.transcript import Transcript, TranscriptCue

__version__ = "0.1.0"

__all__ = [
    "analyze_clips",
    "ClipCandidate",
    "Transcript",
    "TranscriptCue",
]
