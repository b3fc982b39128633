"""Cue normalization.

Turns whatever the transcript fetcher produced into a clean, time-ordered
list of TranscriptCue:
1. Structured cues are validated, cleaned and stably sorted by start
2. A plain transcript string is split into sentence-like chunks and given
   synthetic timings from cumulative word count / speaking rate
"""
from __future__ import annotations
import html
import logging
import re
from typing import List, Optional, Sequence

from hookcuts.config import ClipConfig
from hookcuts.models.transcript import TranscriptCue

logger = logging.getLogger(__name__)

# Caption-feed annotations such as [Music] or [Applause]
ANNOTATION_PATTERN = re.compile(r"\[[^\]]*\]|\([^)]*(?:music|applause|laughter|inaudible)[^)]*\)", re.IGNORECASE)
SENTENCE_SPLIT_PATTERN = re.compile(r"(?<=[.!?…])\s+")


def clean_text(text: str) -> str:
    """Unescape HTML entities, drop caption annotations and collapse whitespace."""
    if not text:
        return ""
    text = html.unescape(html.unescape(text))
    text = ANNOTATION_PATTERN.sub(" ", text)
    return " ".join(text.split())


def normalize_cues(
    transcript: Optional[str],
    cues: Optional[Sequence[TranscriptCue]],
    cfg: ClipConfig
) -> List[TranscriptCue]:
    """
    Produce a uniform, ordered cue list from cues or a flat transcript.

    Args:
        transcript: Flattened transcript text (used only when cues is empty)
        cues: Timed cues, possibly empty; never mutated
        cfg: Clip configuration (speaking rate, chunk sizes)

    Returns:
        New list of valid cues sorted by start time
    """
    if cues:
        normalized = []
        dropped = 0
        for cue in cues:
            if not isinstance(cue, TranscriptCue) or not cue.is_valid:
                dropped += 1
                continue
            text = clean_text(cue.text)
            if not text:
                dropped += 1
                continue
            normalized.append(TranscriptCue(
                text=text,
                start_s=float(cue.start_s),
                end_s=float(cue.end_s),
            ))
        if dropped:
            logger.debug(f"Dropped {dropped} malformed cue(s)")
        # sorted() is stable, so equal starts keep caption order
        return sorted(normalized, key=lambda c: c.start_s)

    return synthesize_cues(transcript or "", cfg)


def split_into_chunks(text: str, cfg: ClipConfig) -> List[str]:
    """Split on sentence punctuation, re-chunking overlong runs by word count."""
    chunks = []
    for sentence in SENTENCE_SPLIT_PATTERN.split(text):
        words = sentence.split()
        if not words:
            continue
        if len(words) <= cfg.max_sentence_words:
            chunks.append(" ".join(words))
            continue
        size = cfg.fallback_chunk_words
        for i in range(0, len(words), size):
            chunks.append(" ".join(words[i:i + size]))
    return chunks


def synthesize_cues(transcript: str, cfg: ClipConfig) -> List[TranscriptCue]:
    """
    Build cues with approximate timing for a transcript that has none.

    Each chunk spans [words_before / rate, (words_before + n) / rate),
    so timings are strictly increasing and never overlap.
    """
    text = clean_text(transcript)
    if not text:
        return []

    rate = cfg.speaking_rate_wps
    cues = []
    words_before = 0
    for chunk in split_into_chunks(text, cfg):
        n = len(chunk.split())
        cues.append(TranscriptCue(
            text=chunk,
            start_s=round(words_before / rate, 3),
            end_s=round((words_before + n) / rate, 3),
        ))
        words_before += n

    logger.debug(f"Synthesized {len(cues)} cues from {words_before} words at {rate} w/s")
    return cues
