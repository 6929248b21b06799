from __future__ import annotations
import sys
import logging

from PySide6.QtWidgets import QApplication
from qfluentwidgets import FluentWindow, NavigationItemPosition, FluentIcon

from sidediff.ui_qt.pages.compare_page import ComparePage
from sidediff.ui_qt.theming import apply_theme_by_name, theme_pref
from sidediff.utils.prefs import load_prefs, save_prefs
from sidediff import config

log = logging.getLogger("app")


class MainFluentWindow(FluentWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(config.WINDOW_TITLE)
        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        theme = theme_pref(load_prefs())
        log.info("Launching MainFluentWindow (theme_pref=%s)", theme)

        self.compare_page = ComparePage(self)
        self.addSubInterface(self.compare_page, FluentIcon.CODE, "Compare", NavigationItemPosition.TOP)

        apply_theme_by_name(theme)
        self._restore_window_state()

    def _restore_window_state(self):
        prefs = load_prefs()
        geom_hex = prefs.get("window_geometry_hex")
        maximized = bool(prefs.get("window_maximized", False))
        try:
            if geom_hex:
                self.restoreGeometry(bytes.fromhex(geom_hex))
        except ValueError:
            log.warning("Ignoring malformed saved window geometry")
        if maximized:
            self.showMaximized()

    def _save_window_state(self):
        prefs = load_prefs()
        prefs["window_geometry_hex"] = bytes(self.saveGeometry()).hex()
        prefs["window_maximized"] = self.isMaximized()
        save_prefs(prefs)

    def closeEvent(self, event):
        self._save_window_state()
        super().closeEvent(event)


def launch_qt() -> int:
    app = QApplication(sys.argv)
    win = MainFluentWindow()
    win.show()
    return app.exec()
