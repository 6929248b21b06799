# sidediff/ui_qt/widgets/diff_view.py
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QSyntaxHighlighter, QTextCharFormat, QColor, QFont, QPalette
from PySide6.QtWidgets import (
    QWidget, QTableWidget, QTableWidgetItem, QTextBrowser, QFrame,
    QStackedLayout, QPlainTextEdit, QLabel
)

from sidediff.config import EMPTY_MODEL_MESSAGE
from sidediff.core.diff_engine import compare, unified_patch
from sidediff.core.diff_types import RenderModel, Row, RowStyle
from sidediff.core.render import ORIGINAL, MODIFIED, line_label, row_to_html

# Monospace stack
MONO = 'Consolas, "Cascadia Mono", "Fira Code", ui-monospace, monospace'

_PAGE_SIDE, _PAGE_UNIFIED, _PAGE_EMPTY = 0, 1, 2


def _rgba(c: QColor) -> str:
    return f"rgba({c.red()},{c.green()},{c.blue()},{c.alpha()})"


def _theme_colors(pal: QPalette) -> dict:
    """Return a small palette that works in both dark and light themes."""
    # detect dark via window color lightness
    dark = pal.color(QPalette.Window).lightness() < 128

    if dark:
        add_bg_chip = QColor(46, 160, 67, int(255 * 0.28))   # green chip
        del_bg_chip = QColor(248, 81, 73, int(255 * 0.28))   # red chip
        gutter_add  = QColor(63, 185, 80)                    # green bar
        gutter_del  = QColor(255, 99, 86)                    # red bar
        gutter_chg  = QColor(246, 193, 0)                    # amber bar
        meta_fg     = QColor(120, 170, 255)
    else:
        add_bg_chip = QColor(198, 248, 207, 255)             # soft green
        del_bg_chip = QColor(255, 205, 205, 255)             # soft red
        gutter_add  = QColor(31, 136, 61)
        gutter_del  = QColor(207, 34, 46)
        gutter_chg  = QColor(157, 118, 0)
        meta_fg     = QColor(9, 105, 218)

    return dict(
        dark=dark,
        add_bg_chip=add_bg_chip,
        del_bg_chip=del_bg_chip,
        gutter_add=gutter_add,
        gutter_del=gutter_del,
        gutter_chg=gutter_chg,
        meta_fg=meta_fg,
    )


# ---- Unified (git-style) syntax highlighter ----------------------------------
class UnifiedDiffHighlighter(QSyntaxHighlighter):
    def __init__(self, doc, colors: dict):
        super().__init__(doc)
        self.c = colors

    def highlightBlock(self, text: str) -> None:
        fmt = QTextCharFormat()
        if text.startswith("@@"):
            fmt.setForeground(self.c["meta_fg"])
            fmt.setFontWeight(QFont.Bold)
            self.setFormat(0, len(text), fmt)
            return
        if text.startswith(("--- ", "+++ ")):
            fmt.setForeground(QColor("#6e7781"))
            self.setFormat(0, len(text), fmt)
            return
        if text.startswith("+"):
            fmt.setBackground(self.c["add_bg_chip"])
            self.setFormat(0, len(text), fmt)
            return
        if text.startswith("-"):
            fmt.setBackground(self.c["del_bg_chip"])
            self.setFormat(0, len(text), fmt)


class DiffView(QWidget):
    """
    Diff viewer with two modes:
      - 'side'    : two aligned panes, gutter accent per row style + inline chips for changed characters
      - 'unified' : git-style unified view with +/- prefixes
    """
    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._left_text = ""
        self._right_text = ""
        self._opts = dict(ignore_ws=False, ignore_case=False, normalize_eol=True, inline=True)
        self._mode = "side"
        self._model = RenderModel()

        self._stack = QStackedLayout(self)

        # --- side-by-side table
        self.table = QTableWidget(0, 4, self)
        self.table.setHorizontalHeaderLabels(["#", "Original", "#", "Modified"])
        self.table.verticalHeader().setVisible(False)
        self.table.setWordWrap(True)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)
        self.table.setSelectionMode(QTableWidget.NoSelection)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.setStyleSheet(f"QTableWidget {{ font-family: {MONO}; font-size: 13px; }}")
        self._stack.addWidget(self.table)

        # --- unified editor
        self.unified = QPlainTextEdit(self)
        self.unified.setReadOnly(True)
        self.unified.setLineWrapMode(QPlainTextEdit.NoWrap)
        self.unified.setStyleSheet(f"QPlainTextEdit {{ font-family: {MONO}; font-size: 13px; }}")
        self._highlighter = UnifiedDiffHighlighter(self.unified.document(), _theme_colors(self.palette()))
        self._stack.addWidget(self.unified)

        # --- nothing to show
        self.empty_label = QLabel(EMPTY_MODEL_MESSAGE, self)
        self.empty_label.setAlignment(Qt.AlignCenter)
        self._stack.addWidget(self.empty_label)

        self._stack.setCurrentIndex(_PAGE_SIDE)

    # -- public API -------------------------------------------------------------
    @property
    def model(self) -> RenderModel:
        return self._model

    def set_mode(self, mode: str):
        mode = (mode or "").lower()
        if mode not in ("side", "unified"):
            mode = "side"
        if mode != self._mode:
            self._mode = mode
            self._render_current()

    def set_texts(self, left_text: str, right_text: str, **opts):
        self._left_text = left_text or ""
        self._right_text = right_text or ""
        if opts:
            self._opts.update(opts)
        self._model = compare(self._left_text, self._right_text, **self._opts)
        self._render_current()

    def unified_text(self, left_name: str = "left", right_name: str = "right") -> str:
        return unified_patch(self._left_text, self._right_text, left_name, right_name)

    # -- internals --------------------------------------------------------------
    def _render_current(self):
        colors = _theme_colors(self.palette())
        # refresh unified highlighter with up-to-date palette
        self._highlighter = UnifiedDiffHighlighter(self.unified.document(), colors)

        if self._model.is_empty:
            self._stack.setCurrentIndex(_PAGE_EMPTY)
        elif self._mode == "unified":
            self._render_unified()
        else:
            self._render_side(colors)

    def _render_unified(self):
        self.unified.setPlainText(self.unified_text())
        self._stack.setCurrentIndex(_PAGE_UNIFIED)

    def _inline_css(self, colors: dict) -> str:
        """CSS injected into each QTextBrowser to style inline spans only."""
        add = _rgba(colors["add_bg_chip"])
        rem = _rgba(colors["del_bg_chip"])
        return (
            "<style>"
            "  pre{margin:0; white-space:pre-wrap; word-wrap:break-word;}"
            f"  .ins{{background:{add}; border-radius:3px; padding:0 2px; }}"
            f"  .del{{background:{rem}; border-radius:3px; padding:0 2px; text-decoration:none; }}"
            "</style>"
        )

    def _apply_gutter(self, w: QTextBrowser, style: RowStyle, colors: dict):
        """Color only the gutter (left border) per row style; keep background transparent."""
        col = {
            RowStyle.ADDED: colors["gutter_add"],
            RowStyle.REMOVED: colors["gutter_del"],
            RowStyle.MODIFIED: colors["gutter_chg"],
        }.get(style)

        base = f"font-family:{MONO}; font-size:13px; padding-left:8px; border-left: 4px solid transparent; background: transparent;"
        if col is not None:
            w.setStyleSheet(base + f" border-left-color: rgb({col.red()},{col.green()},{col.blue()});")
        else:
            w.setStyleSheet(base)

    def _cell(self, row: Row, side: str, css: str, colors: dict) -> QTextBrowser:
        w = QTextBrowser()
        w.setFrameShape(QFrame.NoFrame)
        w.setOpenExternalLinks(False)
        w.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        w.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        w.setHtml(f"{css}<pre>{row_to_html(row, side)}</pre>")
        self._apply_gutter(w, row.style, colors)
        return w

    def _render_side(self, colors: dict):
        self.table.setRowCount(0)
        css = self._inline_css(colors)

        for left, right in self._model.pairs():
            idx = self.table.rowCount()
            self.table.insertRow(idx)

            # Line numbers (placeholders have none)
            lno = QTableWidgetItem(line_label(left))
            rno = QTableWidgetItem(line_label(right))
            lno.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)
            rno.setTextAlignment(Qt.AlignRight | Qt.AlignVCenter)

            self.table.setItem(idx, 0, lno)
            self.table.setCellWidget(idx, 1, self._cell(left, ORIGINAL, css, colors))
            self.table.setItem(idx, 2, rno)
            self.table.setCellWidget(idx, 3, self._cell(right, MODIFIED, css, colors))

        self.table.resizeColumnsToContents()
        self.table.setColumnWidth(0, 68)
        self.table.setColumnWidth(2, 68)
        self._stack.setCurrentIndex(_PAGE_SIDE)
