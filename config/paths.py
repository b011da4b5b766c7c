import os
from pathlib import Path

# === Base project path ===
PROJECT_ROOT = Path(__file__).resolve().parents[1]

# === Common directories ===
DATA_DIR = PROJECT_ROOT / "data"
CONFIG_DIR = PROJECT_ROOT / "config"
LOG_DIR = PROJECT_ROOT  # or change to PROJECT_ROOT / "logs" in future

# === Default log file path ===
LOG_PATH = Path(os.getenv("COVER_LOG_PATH", LOG_DIR / "cover_run.log"))

# === Constants file ===
CONSTANTS_PATH = CONFIG_DIR / "constants.json"
