import argparse
import logging
import sys
from hookcuts.config import Config
from hookcuts.main import run_analysis
from hookcuts.settings import apply_settings, get_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find short-form clip candidates in a video transcript")
    parser.add_argument("--input", type=str, required=True, help="Transcript file (.json, .srt or plain text)")
    parser.add_argument("--output", type=str, help="Write clips JSON to this path")
    parser.add_argument("--max-clips", type=int, help="Maximum number of clips")
    parser.add_argument("--min-duration", type=float, help="Shortest clip in seconds")
    parser.add_argument("--max-duration", type=float, help="Longest clip in seconds")
    parser.add_argument("--speaking-rate", type=float, help="Words per second for untimed transcripts")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = apply_settings(Config(), get_settings())

    if args.debug: cfg.debug = True
    if args.output: cfg.paths.output_path = args.output
    if args.max_clips is not None: cfg.clips.max_clips = args.max_clips
    if args.min_duration is not None: cfg.clips.min_duration_s = args.min_duration
    if args.max_duration is not None: cfg.clips.max_duration_s = args.max_duration
    if args.speaking_rate is not None: cfg.clips.speaking_rate_wps = args.speaking_rate
    cfg.paths.input_path = args.input

    try:
        run_analysis(cfg)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
