def parse_timestamp(ts: str) -> float:
    """Convert SRT timestamp (HH:MM:SS,mmm) to seconds. WebVTT's '.' separator is accepted too."""
    ts = ts.strip().replace(".", ",")
    if "," in ts:
        main, millis = ts.split(",")
    else:
        main, millis = ts, "0"
    parts = [int(part) for part in main.split(":")]
    while len(parts) < 3:
        parts.insert(0, 0)
    hours, minutes, seconds = parts
    return hours * 3600 + minutes * 60 + seconds + int(millis.ljust(3, "0")[:3]) / 1000.0


def format_timestamp_simple(seconds: float) -> str:
    """m:ss, or h:mm:ss past the hour."""
    seconds = max(seconds, 0)
    h, m, s = int(seconds // 3600), int((seconds % 3600) // 60), int(seconds % 60)
    return f"{h}:{m:02d}:{s:02d}" if h > 0 else f"{m}:{s:02d}"
