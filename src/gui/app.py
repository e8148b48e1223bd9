"""Minimal PySide6 editor that previews how the monkey lexer sees a program."""

from __future__ import annotations

import sys
from pathlib import Path

from PySide6 import QtGui, QtWidgets

from monkey.lexer import Lexer
from monkey.token import TokenKind

from .highlighter import MonkeyHighlighter


def token_summary(text: str) -> str:
    total = 0
    illegal = 0
    for tok in Lexer(text):
        if tok.kind is TokenKind.EOF:
            break
        total += 1
        if tok.kind is TokenKind.ILLEGAL:
            illegal += 1
    return f"{total} tokens, {illegal} illegal"


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, path: Path | None = None):
        super().__init__()
        self.setWindowTitle("monkey lexer preview")

        self.editor = QtWidgets.QPlainTextEdit()
        self.editor.setPlaceholderText("let add = fn(x, y) { x + y; };")
        self.editor.setFont(QtGui.QFont("Consolas", 14))
        self.highlighter = MonkeyHighlighter(self.editor.document())
        self.setCentralWidget(self.editor)

        self.editor.textChanged.connect(self._update_status)
        if path is not None:
            self.editor.setPlainText(path.read_text(encoding="utf-8"))
            self.setWindowTitle(f"monkey lexer preview - {path.name}")
        self._update_status()

    def _update_status(self):
        self.statusBar().showMessage(token_summary(self.editor.toPlainText()))


def main():
    app = QtWidgets.QApplication(sys.argv)
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    window = MainWindow(path)
    window.resize(900, 700)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
