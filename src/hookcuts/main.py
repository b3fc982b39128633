import json
import logging
import os
from typing import List

from hookcuts.analyzer import analyze_clips
from hookcuts.candidates.models import ClipCandidate
from hookcuts.config import Config
from hookcuts.models.transcript import Transcript
from hookcuts.schemas import ClipsResponse
from hookcuts.utils.system import format_timestamp_simple


def setup_logging(debug: bool):
    level = logging.DEBUG if debug else logging.INFO
    formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s', datefmt='%Y-%m-%d %H:%M:%S')

    # App logger
    app_logger = logging.getLogger("hookcuts")
    app_logger.setLevel(level)
    app_logger.propagate = False

    # Clean up existing handlers to avoid duplication (for long-running processes)
    if app_logger.hasHandlers():
        app_logger.handlers.clear()

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(formatter)
    app_logger.addHandler(ch)

    # Root logger (suppress others)
    root = logging.getLogger()
    root.setLevel(logging.WARNING)


def save_clips(clips: List[ClipCandidate], output_path: str) -> None:
    """Save clips to JSON file in the camelCase response format."""
    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)

    data = ClipsResponse.from_candidates(clips).model_dump(by_alias=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logging.getLogger(__name__).info(f"Saved {len(clips)} clips to '{output_path}'")


def run_analysis(cfg: Config) -> List[ClipCandidate]:
    """
    Load the transcript named in cfg, find clips and optionally save them.

    Raises:
        ValueError: cfg fails validation or the transcript payload is malformed
        FileNotFoundError: the input transcript does not exist
    """
    setup_logging(cfg.debug)
    logger = logging.getLogger(__name__)
    cfg.validate()

    input_path = cfg.paths.input_path
    logger.info(f"Loading transcript '{input_path}'...")
    transcript = Transcript.load(input_path)
    logger.info(f"Loaded {len(transcript.cues)} cues, {len(transcript.full_text)} characters")

    clips = analyze_clips(transcript.text, transcript.cues, cfg.clips.max_clips, cfg)

    if not clips:
        logger.warning("No clip candidates found.")

    for clip in clips:
        logger.info(
            f"  [{format_timestamp_simple(clip.start_s)} - {format_timestamp_simple(clip.end_s)}] "
            f"score={clip.hook_score} {clip.title!r}"
        )
        logger.debug(f"    Reason: {clip.reason}")

    if cfg.paths.output_path:
        save_clips(clips, cfg.paths.output_path)

    return clips
