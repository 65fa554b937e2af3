#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""QtSlick — JSON 格式化工具  入口"""

import logging
import sys
from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QFont, QPalette, QColor
from PyQt5.QtCore import Qt


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s")

    # High-DPI 支持
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    # ── 全局字体: 中英文兼顾，11pt 舒适阅读 ──────────────
    font = QFont("Microsoft YaHei UI", 11)
    font.setStyleHint(QFont.SansSerif)
    app.setFont(font)

    # ── Fusion 调色板微调 ─────────────────────────────────
    palette = QPalette()
    palette.setColor(QPalette.Window,          QColor("#f0f2f5"))
    palette.setColor(QPalette.WindowText,      QColor("#1e2433"))
    palette.setColor(QPalette.Base,            QColor("#ffffff"))
    palette.setColor(QPalette.Text,            QColor("#1e2433"))
    palette.setColor(QPalette.Button,          QColor("#e8eaed"))
    palette.setColor(QPalette.ButtonText,      QColor("#1e2433"))
    palette.setColor(QPalette.Highlight,       QColor("#0078d4"))
    palette.setColor(QPalette.HighlightedText, QColor("#ffffff"))
    app.setPalette(palette)

    from ui.main_window import MainWindow
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == '__main__':
    main()
