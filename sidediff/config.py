# sidediff/config.py

APP_NAME = "sidediff"
APP_AUTHOR = "sidediff"

# Comparison defaults (shared by the CLI and the Qt compare page)
DEFAULT_IGNORE_WS = False
DEFAULT_IGNORE_CASE = False
DEFAULT_NORMALIZE_EOL = True
DEFAULT_INLINE = True

# Unified patch context lines
UNIFIED_CONTEXT = 3

# Input safeguard: refuse to compare huge files
COMPARE_MAX_BYTES = 5 * 1024 * 1024      # 5 MB

# How many bytes the encoding detector samples
ENCODING_SAMPLE_BYTES = 10000

# Shown instead of rows when a comparison produced nothing to display
EMPTY_MODEL_MESSAGE = "No differences to display, or texts are identical."

# CLI
CLI_DEFAULT_WIDTH = 160
CLI_MIN_WIDTH = 40

# UI
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800
WINDOW_TITLE = "sidediff - Text/Code Comparison"
DEFAULT_THEME = "Dark"

# Logging (engine log is written only when SIDEDIFF_DEBUG is set)
DEBUG_ENV_VAR = "SIDEDIFF_DEBUG"
LOG_LEVEL = "DEBUG"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "sidediff.debug.log"
UI_LOG_LEVEL = "INFO"
UI_LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"
UI_LOG_FILE_NAME = "ui.log"
