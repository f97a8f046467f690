"""Default on-disk locations, relative to the working directory."""
from pathlib import Path

DATA_DIR = Path("Data")
LOGS_DIR = DATA_DIR / "Logs"
DEFAULT_RECORDS_PATH = DATA_DIR / "weights.csv"
