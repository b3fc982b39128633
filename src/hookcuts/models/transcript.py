"""Transcript data models: timed cues plus the flattened transcript string."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
import json
import logging
import math
import os

from pydantic import ValidationError

from hookcuts.schemas import TranscriptPayload
from hookcuts.utils.system import parse_timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranscriptCue:
    """One timed utterance. Invalid cues can be built; the engine skips them."""
    text: str
    start_s: float
    end_s: float

    @property
    def duration_s(self) -> float:
        return self.end_s - self.start_s

    @property
    def is_valid(self) -> bool:
        if not isinstance(self.text, str) or not self.text.strip():
            return False
        try:
            start, end = float(self.start_s), float(self.end_s)
        except (TypeError, ValueError):
            return False
        if not (math.isfinite(start) and math.isfinite(end)):
            return False
        return start >= 0 and end > start


@dataclass
class Transcript:
    """
    A transcript as handed over by the caption fetcher.

    Either field may be empty: `text` is the flattened transcript,
    `cues` the timed utterances when captions carried timing.
    """
    text: str = ""
    cues: List[TranscriptCue] = field(default_factory=list)

    @property
    def full_text(self) -> str:
        if self.text.strip():
            return self.text
        return " ".join(c.text.strip() for c in self.cues if c.text.strip())

    @classmethod
    def from_payload(cls, payload: TranscriptPayload) -> "Transcript":
        cues = [
            TranscriptCue(text=c.text, start_s=c.start_s, end_s=c.end_s)
            for c in payload.cues
        ]
        return cls(text=payload.transcript, cues=cues)

    @classmethod
    def load(cls, path: str) -> "Transcript":
        """
        Load a transcript from disk.

        .json files are validated against TranscriptPayload, .srt files are
        parsed as SubRip captions, anything else is read as plain text.
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Transcript not found: {path}")

        ext = os.path.splitext(path)[1].lower()
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()

        if ext == ".json":
            try:
                data = json.loads(raw)
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid transcript JSON in '{path}': {e.msg}") from e
            # A bare list is a caption feed without the flattened text
            if isinstance(data, list):
                data = {"cues": data}
            try:
                payload = TranscriptPayload.model_validate(data)
            except ValidationError as e:
                raise ValueError(f"Malformed transcript payload in '{path}': {e}") from e
            return cls.from_payload(payload)

        if ext == ".srt":
            return cls(cues=parse_srt_to_cues(raw))

        return cls(text=raw)


def parse_srt_to_cues(raw: str) -> List[TranscriptCue]:
    """Parse SubRip caption text into cues; unparseable blocks are skipped."""
    blocks = [b.strip() for b in raw.replace("\r\n", "\n").split("\n\n") if b.strip()]
    cues = []

    for block in blocks:
        lines = block.splitlines()
        # The numeric index line is optional in the wild
        if "-->" in lines[0]:
            timing_line, text_lines = lines[0], lines[1:]
        elif len(lines) >= 2 and "-->" in lines[1]:
            timing_line, text_lines = lines[1], lines[2:]
        else:
            continue

        start_ts, end_ts = [p.strip() for p in timing_line.split("-->")[:2]]
        # Drop WebVTT-style cue settings after the end timestamp
        end_ts = end_ts.split()[0] if end_ts else end_ts
        try:
            cues.append(TranscriptCue(
                text=" ".join(l.strip() for l in text_lines).strip(),
                start_s=parse_timestamp(start_ts),
                end_s=parse_timestamp(end_ts),
            ))
        except (ValueError, IndexError):
            logger.debug(f"Skipping unparseable SRT block: {timing_line!r}")
            continue

    return cues
