# src/uplugin_builder/config.py
import logging
import sys
from pathlib import Path

# --- Core Application Details ---
APP_NAME = "UPlugin Builder"
ORGANIZATION_NAME = "UPlugin Builder"

# --- Engine Layout ---
# Engine installations are the direct children of the selected root whose
# names match this pattern, e.g. "C:/Program Files/Epic Games/UE_5.3".
VERSION_DIR_PATTERN = "UE_*"

# Location of the Unreal Automation Tool inside a single engine installation.
RUN_UAT_DIR = Path("Engine") / "Build" / "BatchFiles"
RUN_UAT_SCRIPT = "RunUAT.bat" if sys.platform == "win32" else "RunUAT.sh"
BUILD_PLUGIN_COMMAND = "BuildPlugin"

# --- Build Output ---
BUILD_LOG_FILE_NAME = "build_log.txt"
READ_CHUNK_SIZE = 4096

# --- Dialog Defaults ---
DEFAULT_ENGINE_ROOT = "C:\\Program Files\\Epic Games" if sys.platform == "win32" else str(Path.home())
DEFAULT_DOCUMENTS_DIR = str(Path.home() / "Documents")
PLUGIN_FILE_FILTER = "Plugin Files (*.uplugin)"

# --- Layout ---
MAX_GRID_COLUMNS = 4


# --- Logging Configuration ---
def configure_logging(log_dir: Path = Path("logs")):
    """Sets up file and console logging for the whole application."""
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "uplugin_builder.log"

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - [%(levelname)s] - %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler()
        ]
    )
    logging.info("--------------------")
    logging.info(f"{APP_NAME} started.")
