"""Syntax highlighting for monkey source, driven by the monkey lexer."""

from __future__ import annotations

from PySide6 import QtGui

from .spans import (
    DELIMITER,
    IDENTIFIER,
    ILLEGAL,
    KEYWORD,
    NUMBER,
    OPERATOR,
    token_spans,
)

COLORS = {
    KEYWORD: "#0057b7",
    NUMBER: "#b71c1c",
    IDENTIFIER: "#000000",
    OPERATOR: "#6a1b9a",
    DELIMITER: "#616161",
    ILLEGAL: "#d50000",
}


class MonkeyHighlighter(QtGui.QSyntaxHighlighter):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.formats = {}
        for category, color in COLORS.items():
            fmt = QtGui.QTextCharFormat()
            fmt.setForeground(QtGui.QColor(color))
            self.formats[category] = fmt

        self.formats[KEYWORD].setFontWeight(QtGui.QFont.Bold)
        illegal = self.formats[ILLEGAL]
        illegal.setUnderlineStyle(QtGui.QTextCharFormat.WaveUnderline)
        illegal.setUnderlineColor(QtGui.QColor(COLORS[ILLEGAL]))

    def highlightBlock(self, text: str):
        # Tokens never span lines, so each block can be lexed on its own.
        for start, length, category in token_spans(text):
            self.setFormat(start, length, self.formats[category])
