from __future__ import annotations
import math
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass
class ClipConfig:
    """Clip duration band and transcript timing parameters."""
    min_duration_s: float = 15.0      # shortest acceptable clip (inclusive)
    max_duration_s: float = 75.0      # longest acceptable clip (inclusive)
    target_duration_s: float = 35.0   # preferred length among equally scored windows
    speaking_rate_wps: float = 2.5    # words per second when synthesizing timings
    max_sentence_words: int = 40      # longer "sentences" are re-chunked
    fallback_chunk_words: int = 25    # chunk size when punctuation is sparse
    max_clips: int = 8                # default number of clips to return


@dataclass
class ScoringConfig:
    """Hook detector windows, weights and score thresholds."""
    hook_window_s: float = 8.0        # opening seconds of a window scanned for hooks
    hook_max_words: int = 40
    opening_window_s: float = 3.0     # "very start of the video" bonus range
    topic_shift_gap_s: float = 2.0    # silence before a cue that marks a topic shift
    title_max_words: int = 8
    weights: Dict[str, int] = field(default_factory=lambda: {
        "question": 3,
        "superlative": 3,
        "numeric": 2,
        "emotional": 2,
        "direct_address": 1,
        "opening": 1,
        "topic_shift": 1,
    })
    # (minimum points, hook score), checked top-down
    thresholds: List[Tuple[int, int]] = field(default_factory=lambda: [
        (8, 5),
        (6, 4),
        (4, 3),
        (2, 2),
    ])


@dataclass
class PathConfig:
    """Input/output file locations for the CLI."""
    input_path: Optional[str] = None
    output_path: Optional[str] = None


@dataclass
class Config:
    """Main configuration container combining all settings."""
    clips: ClipConfig = field(default_factory=ClipConfig)
    scoring: ScoringConfig = field(default_factory=ScoringConfig)
    paths: PathConfig = field(default_factory=PathConfig)
    debug: bool = False               # --debug flag for verbose logging

    def validate(self) -> None:
        """Raise ValueError when the clip band or timing settings are unusable."""
        c = self.clips
        if not (math.isfinite(c.min_duration_s) and math.isfinite(c.max_duration_s)):
            raise ValueError("Clip duration band must be finite")
        if c.min_duration_s < 0 or c.max_duration_s <= 0:
            raise ValueError(
                f"Clip duration band must be positive (got {c.min_duration_s}-{c.max_duration_s}s)"
            )
        if c.min_duration_s > c.max_duration_s:
            raise ValueError(
                f"min_duration_s ({c.min_duration_s}) exceeds max_duration_s ({c.max_duration_s})"
            )
        if not c.speaking_rate_wps > 0:
            raise ValueError(f"speaking_rate_wps must be positive (got {c.speaking_rate_wps})")
        if c.fallback_chunk_words < 1 or c.max_sentence_words < 1:
            raise ValueError("Chunk sizes must be at least one word")
