"""Static configuration for date-highlighter.

User-editable highlight settings (colors, thresholds, switches) live in a
single JSON file; where that file is and how logging behaves come from the
environment, optionally via a .env file.
"""

import os

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))

# Highlight settings file, shared shape with the editor plugin's data.json.
CONFIG_PATH = os.getenv(
    "DATE_HIGHLIGHTER_CONFIG",
    os.path.join(PROJECT_ROOT, "date-highlighter.json"),
)

# Logging configuration.
# - LOG_LEVEL: DEBUG, INFO, WARNING or ERROR
# - LOG_CONSOLE: "0"/"false" disables the console handler
# - LOG_FILE: rotating log file, relative paths are under PROJECT_ROOT
LOG_LEVEL = os.getenv("DATE_HIGHLIGHTER_LOG_LEVEL", "INFO")
LOG_CONSOLE = os.getenv("DATE_HIGHLIGHTER_LOG_CONSOLE", "1").strip().lower() not in {"0", "false", "no", "off"}
LOG_FILE = os.getenv("DATE_HIGHLIGHTER_LOG_FILE", "")
LOG_MAX_BYTES = int(os.getenv("DATE_HIGHLIGHTER_LOG_MAX_BYTES", str(5 * 1024 * 1024)))
LOG_BACKUP_COUNT = int(os.getenv("DATE_HIGHLIGHTER_LOG_BACKUP_COUNT", "5"))
