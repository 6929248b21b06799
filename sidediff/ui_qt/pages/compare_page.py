# sidediff/ui_qt/pages/compare_page.py
from __future__ import annotations

import os
import logging
from typing import TYPE_CHECKING

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFileDialog, QPlainTextEdit, QApplication
)
from qfluentwidgets import (
    InfoBar, InfoBarPosition, PrimaryPushButton, PushButton, ComboBox, SwitchButton
)

from sidediff.core.diff_engine import has_differences, summarize
from sidediff.core.text_loader import TextLoadError, load_text
from sidediff.ui_qt.theming import AVAILABLE_THEMES, apply_theme_by_name, theme_pref
from sidediff.ui_qt.widgets.diff_view import DiffView
from sidediff.utils.prefs import compare_options, load_prefs, save_prefs

if TYPE_CHECKING:
    from sidediff.ui_qt.app_window import MainFluentWindow

log = logging.getLogger("compare")


class ComparePage(QWidget):
    """Compare: two editable panes (paste or load a file), side/unified views."""
    def __init__(self, appwin: "MainFluentWindow"):
        super().__init__(parent=appwin)
        self.setObjectName("ComparePage")
        self.appwin = appwin
        self._left_name = "original"
        self._right_name = "modified"

        opts = compare_options()
        self.ignore_ws_chk = SwitchButton("Ignore whitespace", self)
        self.ignore_case_chk = SwitchButton("Ignore case", self)
        self.normalize_eol_chk = SwitchButton("Normalize line endings", self)
        self.inline_chk = SwitchButton("Highlight characters", self)
        self.view_combo = ComboBox(self)  # Side / Unified
        self.theme_combo = ComboBox(self)

        self.left_editor = QPlainTextEdit(self)
        self.right_editor = QPlainTextEdit(self)
        self.diff = DiffView(self)

        root = QVBoxLayout(self)
        root.setContentsMargins(16, 16, 16, 16)

        title = QLabel("Compare")
        title.setStyleSheet("font-size:20px; font-weight:600;")
        root.addWidget(title)

        # --- Editors
        editors = QHBoxLayout()
        self.left_editor.setPlaceholderText("Paste original text/code here or load a file…")
        self.right_editor.setPlaceholderText("Paste modified text/code here or load a file…")
        editors.addWidget(self.left_editor, 1)
        editors.addWidget(self.right_editor, 1)
        root.addLayout(editors, 1)

        # --- Buttons row
        btns = QHBoxLayout()
        load_left_btn = PushButton("Load Original…")
        load_right_btn = PushButton("Load Modified…")
        swap_btn = PushButton("Swap Sides")
        clear_btn = PushButton("Clear")
        compare_btn = PrimaryPushButton("Compare")
        btns.addWidget(load_left_btn)
        btns.addWidget(load_right_btn)
        btns.addStretch(1)
        btns.addWidget(swap_btn)
        btns.addWidget(clear_btn)
        btns.addWidget(compare_btn)
        root.addLayout(btns)

        # --- Options row
        row = QHBoxLayout()
        self.ignore_ws_chk.setChecked(opts["ignore_ws"])
        self.ignore_case_chk.setChecked(opts["ignore_case"])
        self.normalize_eol_chk.setChecked(opts["normalize_eol"])
        self.inline_chk.setChecked(opts["inline"])
        row.addWidget(self.ignore_ws_chk)
        row.addWidget(self.ignore_case_chk)
        row.addWidget(self.normalize_eol_chk)
        row.addWidget(self.inline_chk)

        row.addSpacing(20)
        row.addWidget(QLabel("View:"))
        self.view_combo.addItems(["Side-by-side", "Unified (git-style)"])
        row.addWidget(self.view_combo)
        row.addSpacing(20)
        row.addWidget(QLabel("Theme:"))
        self.theme_combo.addItems(AVAILABLE_THEMES)
        self.theme_combo.setCurrentText(theme_pref(load_prefs()))
        row.addWidget(self.theme_combo)
        row.addStretch(1)
        copy_patch_btn = PushButton("Copy unified diff")
        row.addWidget(copy_patch_btn)
        root.addLayout(row)

        # --- Diff area
        root.addWidget(self.diff, 2)

        load_left_btn.clicked.connect(lambda: self._load_file(self.left_editor, left=True))
        load_right_btn.clicked.connect(lambda: self._load_file(self.right_editor, left=False))
        swap_btn.clicked.connect(self._swap_sides)
        clear_btn.clicked.connect(self._clear)
        compare_btn.clicked.connect(lambda: self._compare())
        copy_patch_btn.clicked.connect(self._copy_patch)

        for chk in (self.ignore_ws_chk, self.ignore_case_chk, self.normalize_eol_chk, self.inline_chk):
            chk.checkedChanged.connect(lambda _on: self._on_options_changed())
        self.view_combo.currentTextChanged.connect(self._on_view_change)
        self.theme_combo.currentTextChanged.connect(self._on_theme_change)

    # ---------- Options & view

    def _options(self) -> dict:
        return dict(
            ignore_ws=self.ignore_ws_chk.isChecked(),
            ignore_case=self.ignore_case_chk.isChecked(),
            normalize_eol=self.normalize_eol_chk.isChecked(),
            inline=self.inline_chk.isChecked(),
        )

    def _on_options_changed(self):
        prefs = load_prefs()
        prefs.update(self._options())
        save_prefs(prefs)
        self._compare(silent=True)

    def _on_view_change(self, label: str):
        self.diff.set_mode("unified" if "Unified" in label else "side")

    def _on_theme_change(self, name: str):
        log.info("Theme changed to '%s'", name)
        apply_theme_by_name(name)
        prefs = load_prefs()
        prefs["theme_mode"] = name
        save_prefs(prefs)
        # diff colors follow the palette
        self._compare(silent=True)

    # ---------- Inputs

    def _load_file(self, editor: QPlainTextEdit, left: bool):
        base = load_prefs().get("last_dir") or os.path.expanduser("~")
        path, _ = QFileDialog.getOpenFileName(self, "Choose file", base, "All files (*.*)")
        if not path:
            return
        try:
            text = load_text(path)
        except TextLoadError as e:
            log.error("Load failed: %s", e)
            InfoBar.error("Read failed", f"{e.path}\n{e.reason}", parent=self.appwin,
                          position=InfoBarPosition.TOP_RIGHT)
            return
        editor.setPlainText(text)
        name = os.path.basename(path)
        if left:
            self._left_name = name
        else:
            self._right_name = name
        prefs = load_prefs()
        prefs["last_dir"] = os.path.dirname(path)
        save_prefs(prefs)
        InfoBar.success("File loaded", name, parent=self.appwin,
                        position=InfoBarPosition.TOP_RIGHT, duration=1500)

    def _clear(self):
        self.left_editor.clear()
        self.right_editor.clear()
        self._left_name, self._right_name = "original", "modified"
        self.diff.set_texts("", "", **self._options())

    def _swap_sides(self):
        l = self.left_editor.toPlainText()
        r = self.right_editor.toPlainText()
        self.left_editor.setPlainText(r)
        self.right_editor.setPlainText(l)
        self._left_name, self._right_name = self._right_name, self._left_name
        self._compare(silent=True)

    # ---------- Compare

    def _compare(self, silent: bool = False):
        left = self.left_editor.toPlainText()
        right = self.right_editor.toPlainText()
        if left == "" and right == "":
            self.diff.set_texts("", "", **self._options())
            if not silent:
                InfoBar.warning("Input missing", "Provide text in at least one of the panes.",
                                parent=self.appwin, position=InfoBarPosition.TOP_RIGHT)
            return
        self.diff.set_texts(left, right, **self._options())
        counts = summarize(self.diff.model)
        log.info("Compared %s <-> %s: %s", self._left_name, self._right_name, counts)
        if not silent:
            if has_differences(self.diff.model):
                msg = "+{added}  -{removed}  ~{modified}".format(**counts)
            else:
                msg = "Texts are identical."
            InfoBar.success("Comparison complete", msg, parent=self.appwin,
                            position=InfoBarPosition.TOP_RIGHT, duration=1500)

    def _copy_patch(self):
        QApplication.clipboard().setText(self.diff.unified_text(self._left_name, self._right_name))
        InfoBar.success("Copied", "Unified diff copied to clipboard.",
                        parent=self.appwin, position=InfoBarPosition.TOP_RIGHT)
