from pathlib import Path
import os

# Project root (signal-db/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directory for persisted signal files and the SQLite manifest
# Priority: 1) environment variable, 2) <project>/data
if "SIGNAL_DB_DATA_DIR" in os.environ:
    DATA_DIR = Path(os.environ["SIGNAL_DB_DATA_DIR"])
else:
    DATA_DIR = PROJECT_ROOT / "data"

DEFAULT_SIGNALS_FILE = DATA_DIR / "signals.txt"
DB_PATH = DATA_DIR / "signal_manifest.db"

# Slots allocated by the demo when no --capacity is given
DEFAULT_CAPACITY = int(os.environ.get("SIGNAL_DB_CAPACITY", "10"))
