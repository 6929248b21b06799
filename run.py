import sys
import logging
from datetime import datetime

from sidediff import config
from sidediff.utils.logger import log_dir

# ---------- Logging ----------
LOG_PATH = log_dir() / config.UI_LOG_FILE_NAME

logging.basicConfig(
    level=logging.getLevelName(config.UI_LOG_LEVEL),
    format=config.UI_LOG_FORMAT,
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(LOG_PATH, encoding="utf-8")
    ],
    force=True,
)
logging.info("=== sidediff GUI start %s (log: %s) ===", datetime.now().strftime("%Y-%m-%d %H:%M:%S"), LOG_PATH)

# ---------- Route Qt messages into logging ----------
from PySide6.QtCore import qInstallMessageHandler, QtMsgType

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def _qt_msg_handler(mode, context, message):
    logging.getLogger("qt").log(_QT_LEVELS.get(mode, logging.WARNING), message)

qInstallMessageHandler(_qt_msg_handler)

# ---------- Start app ----------
if __name__ == "__main__":
    try:
        from sidediff.ui_qt.app_window import launch_qt
        rc = launch_qt()
        logging.info("GUI exited with code %s", rc)
        sys.exit(rc)
    except Exception as e:
        logging.exception("Fatal error running sidediff GUI: %s", e)
        raise
