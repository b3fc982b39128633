"""Hook signal detectors for candidate windows.

Every detector looks at the window's hook region: the cues that begin in
the first few seconds of the window. Each returns a bool so a repeated
keyword can never count twice.

Signals:
- question: open question or curiosity phrase
- superlative: strong claims ("best", "never", ...)
- numeric: numbers and statistics
- emotional: surprise/fear/excitement words, exclamations, shouting
- direct_address: second-person phrasing
- opening / topic_shift: position of the window in the video
"""
from __future__ import annotations
import re
import logging
from typing import Dict, Sequence

from hookcuts.config import ScoringConfig
from hookcuts.candidates.models import CandidateWindow
from hookcuts.models.transcript import TranscriptCue

logger = logging.getLogger(__name__)

CURIOSITY_PHRASES = [
    "how", "why", "what happens", "what if", "what would",
    "have you ever", "ever wondered", "did you know", "do you know",
    "guess what", "the reason", "here's why", "here's how",
    "the secret", "the truth about", "nobody tells you",
    "what nobody", "can you believe", "want to know",
]

SUPERLATIVE_WORDS = [
    "best", "worst", "never", "always", "biggest", "smallest",
    "greatest", "most", "least", "ultimate", "fastest", "easiest",
    "hardest", "craziest", "strongest", "highest", "lowest",
    "everyone", "everybody", "nobody", "no one", "every single",
    "of all time", "number one", "perfect",
]

NUMBER_WORDS = [
    "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
    "eleven", "twelve", "fifteen", "twenty", "thirty", "forty", "fifty",
    "hundred", "hundreds", "thousand", "thousands", "million", "millions",
    "billion", "billions", "dozen", "percent", "half", "double", "triple",
]

EMOTIONAL_WORDS = [
    "amazing", "incredible", "insane", "crazy", "shocking", "shocked",
    "unbelievable", "terrifying", "terrified", "scary", "scared", "afraid",
    "fear", "panic", "nightmare", "disaster", "dangerous", "deadly",
    "wow", "omg", "oh my god", "love", "hate", "angry", "furious",
    "excited", "exciting", "thrilled", "surprising", "surprised",
    "mind-blowing", "mind blowing", "wild", "epic", "hilarious",
    "heartbreaking", "devastating", "brutal", "ridiculous", "obsessed",
]

SECOND_PERSON_PATTERN = re.compile(r"\byou(?:r|rs|rself|rselves|'re|'ve|'ll|'d)?\b")
DIGIT_PATTERN = re.compile(r"\d")
SHOUTED_WORD_PATTERN = re.compile(r"\b[A-Z]{3,}\b")


def _compile_lexicon(phrases: Sequence[str]) -> re.Pattern:
    # Longest first so multi-word phrases win over their prefixes
    ordered = sorted(phrases, key=len, reverse=True)
    return re.compile(r"\b(?:" + "|".join(re.escape(p) for p in ordered) + r")\b")


CURIOSITY_PATTERN = _compile_lexicon(CURIOSITY_PHRASES)
SUPERLATIVE_PATTERN = _compile_lexicon(SUPERLATIVE_WORDS)
NUMBER_WORD_PATTERN = _compile_lexicon(NUMBER_WORDS)
EMOTIONAL_PATTERN = _compile_lexicon(EMOTIONAL_WORDS)


def _prepare(text: str) -> str:
    """Lowercase and fold typographic apostrophes."""
    return text.lower().replace("’", "'").replace("‘", "'")


def extract_hook_text(
    window: CandidateWindow,
    cues: Sequence[TranscriptCue],
    cfg: ScoringConfig
) -> str:
    """
    Text of the window's opening: its first cue plus any cue that starts
    within hook_window_s of the window start, capped at hook_max_words.
    """
    parts = []
    hook_end = window.start_s + cfg.hook_window_s
    for k in range(window.first_cue, window.last_cue + 1):
        cue = cues[k]
        if k > window.first_cue and cue.start_s >= hook_end:
            break
        parts.append(cue.text.strip())

    words = " ".join(parts).split()
    return " ".join(words[:cfg.hook_max_words])


# =============================================================================
# Text Detectors
# =============================================================================

def detect_question(text: str) -> bool:
    """Question mark or curiosity phrase."""
    if not text:
        return False
    if "?" in text:
        return True
    return bool(CURIOSITY_PATTERN.search(_prepare(text)))


def detect_superlative(text: str) -> bool:
    if not text:
        return False
    return bool(SUPERLATIVE_PATTERN.search(_prepare(text)))


def detect_numeric(text: str) -> bool:
    """Digits or spelled-out quantities."""
    if not text:
        return False
    if DIGIT_PATTERN.search(text):
        return True
    return bool(NUMBER_WORD_PATTERN.search(_prepare(text)))


def detect_emotional(text: str) -> bool:
    """Emotion lexicon, an exclamation, or a shouted word in otherwise normal-case text."""
    if not text:
        return False
    if "!" in text:
        return True
    if EMOTIONAL_PATTERN.search(_prepare(text)):
        return True

    words = text.split()
    shouted = SHOUTED_WORD_PATTERN.findall(text)
    # All-caps captions shout every word, so only count emphasis
    upper_words = sum(1 for w in words if w.isupper())
    return bool(shouted) and upper_words < len(words) / 2


def detect_direct_address(text: str) -> bool:
    if not text:
        return False
    return bool(SECOND_PERSON_PATTERN.search(_prepare(text)))


# =============================================================================
# Position Detectors
# =============================================================================

def is_opening_window(
    window: CandidateWindow,
    cues: Sequence[TranscriptCue],
    cfg: ScoringConfig
) -> bool:
    """Window starts at (or within a few seconds of) the first cue."""
    if not cues:
        return False
    return window.start_s - cues[0].start_s <= cfg.opening_window_s


def is_topic_shift(
    window: CandidateWindow,
    cues: Sequence[TranscriptCue],
    cfg: ScoringConfig
) -> bool:
    """A long pause before the window's first cue suggests a new topic."""
    if window.first_cue == 0:
        return False
    prev_end = cues[window.first_cue - 1].end_s
    return window.start_s - prev_end >= cfg.topic_shift_gap_s


def compute_signals(
    window: CandidateWindow,
    cues: Sequence[TranscriptCue],
    hook_text: str,
    cfg: ScoringConfig
) -> Dict[str, bool]:
    """
    Run every detector for one window.

    Returns:
        Ordered mapping signal name -> fired
    """
    return {
        "question": detect_question(hook_text),
        "superlative": detect_superlative(hook_text),
        "numeric": detect_numeric(hook_text),
        "emotional": detect_emotional(hook_text),
        "direct_address": detect_direct_address(hook_text),
        "opening": is_opening_window(window, cues, cfg),
        "topic_shift": is_topic_shift(window, cues, cfg),
    }
