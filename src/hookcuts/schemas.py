import logging
from typing import List, Optional
from pydantic import AliasChoices, BaseModel, Field, ValidationError, field_validator, model_validator

from hookcuts.candidates.models import ClipCandidate

logger = logging.getLogger(__name__)


# --- Input Schemas ---

class CuePayload(BaseModel):
    """A caption cue as delivered by the transcript fetcher."""
    text: str = ""
    start_s: float = Field(validation_alias=AliasChoices("start_s", "start", "startSeconds"))
    end_s: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("end_s", "end", "endSeconds")
    )
    duration: Optional[float] = Field(
        default=None, validation_alias=AliasChoices("duration", "dur")
    )

    @model_validator(mode="after")
    def derive_end(self) -> "CuePayload":
        # Caption feeds carry start + duration instead of an end offset
        if self.end_s is None:
            self.end_s = self.start_s + self.duration if self.duration is not None else self.start_s
        return self


class TranscriptPayload(BaseModel):
    """Request body for clip analysis: flattened text and/or timed cues."""
    transcript: str = Field(
        default="", validation_alias=AliasChoices("transcript", "text", "fullTranscript")
    )
    cues: List[CuePayload] = Field(
        default_factory=list, validation_alias=AliasChoices("cues", "segments")
    )

    @field_validator("cues", mode="before")
    @classmethod
    def drop_malformed_cues(cls, value):
        # Malformed cues are dropped one by one; the rest of the feed is kept
        if not isinstance(value, list):
            return value
        kept = []
        for item in value:
            try:
                kept.append(CuePayload.model_validate(item))
            except ValidationError as e:
                logger.debug(f"Skipping malformed cue {item!r}: {e.error_count()} error(s)")
        return kept


# --- Output Schemas ---

class ClipResponse(BaseModel):
    """Response model for a single clip suggestion."""
    title: str
    start_time: float = Field(alias="startTime")
    end_time: float = Field(alias="endTime")
    duration: float
    hook_score: int = Field(alias="hookScore")
    viral_potential: str = Field(alias="viralPotential")
    reason: str
    transcript: str
    signals: List[str] = []

    class Config:
        populate_by_name = True

    @classmethod
    def from_candidate(cls, clip: ClipCandidate) -> "ClipResponse":
        return cls(
            title=clip.title,
            start_time=clip.start_s,
            end_time=clip.end_s,
            duration=round(clip.duration_s, 3),
            hook_score=clip.hook_score,
            viral_potential=clip.viral_potential,
            reason=clip.reason,
            transcript=clip.transcript_excerpt,
            signals=list(clip.signals),
        )


class ClipsResponse(BaseModel):
    """Response model for a full analysis run."""
    clips: List[ClipResponse] = []
    total_clips: int = Field(default=0, alias="totalClips")
    high_viral_potential: int = Field(default=0, alias="highViralPotential")

    class Config:
        populate_by_name = True

    @classmethod
    def from_candidates(cls, candidates: List[ClipCandidate]) -> "ClipsResponse":
        clips = [ClipResponse.from_candidate(c) for c in candidates]
        return cls(
            clips=clips,
            total_clips=len(clips),
            high_viral_potential=sum(1 for c in clips if c.viral_potential == "HIGH"),
        )
