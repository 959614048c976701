from __future__ import annotations
from pathlib import Path

# Relative to the working directory the CLI is started from
DATA_DIR          = Path("data")
DEFAULT_DECK_FILE = DATA_DIR / "deck.json"
DEFAULT_CONFIG    = Path("flashdeck.yml")

CONFIG_ENV_VAR    = "FLASHDECK_CONFIG"
DECK_FILE_ENV_VAR = "FLASHDECK_DECK_FILE"
LOG_LEVEL_ENV_VAR = "FLASHDECK_LOG_LEVEL"


def resolve_against(path: str | Path, base: Path) -> Path:
    """Resolve ``path`` relative to ``base`` unless it is already absolute."""
    candidate = Path(path).expanduser()
    return candidate if candidate.is_absolute() else base / candidate
