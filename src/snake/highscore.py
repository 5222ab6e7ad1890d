# highscore.py
import json
import os

from .config import HIGHSCORE_KEY


def load_high_score(path: str) -> int:
    """Stored best score, or 0 when the file is missing or unusable."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return 0
    except (OSError, ValueError) as exc:
        print(f"[SCORE] Ignoring unreadable high score file {path}: {exc}")
        return 0

    value = data.get(HIGHSCORE_KEY) if isinstance(data, dict) else None
    # bool is an int subclass; a stored true/false is not a score
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return 0
    return value


def save_high_score(path: str, value: int) -> bool:
    """Persist value under the high score key. Returns False if the write failed."""
    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump({HIGHSCORE_KEY: int(value)}, f)
    except OSError as exc:
        print(f"[SCORE] Could not save high score to {path}: {exc}")
        return False
    return True
