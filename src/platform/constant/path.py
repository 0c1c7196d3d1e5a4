from pathlib import Path


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent.parent.parent

# Log directory
LOG_DIR = BASE_DIR / 'logs'

# Default location for CSV report exports
EXPORT_DIR = BASE_DIR / 'exports'
