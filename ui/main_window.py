# -*- coding: utf-8 -*-
"""主窗口 — JSON Slick 面板 + 状态栏

窗口比例 ≈ 黄金分割 (1000 × 618)
"""

from PyQt5.QtWidgets import QMainWindow, QLabel

from .panels.json_panel import JsonPanel
from core.slick_worker import WORKER_THREAD_NAME

APP_TITLE = "QtSlick — JSON 格式化工具"


class MainWindow(QMainWindow):

    def __init__(self):
        super().__init__()
        self._setup_window()
        self._build_ui()

    # ── 窗口属性 ─────────────────────────────────────────────
    def _setup_window(self):
        self.setWindowTitle(APP_TITLE)
        self.resize(1000, 618)
        self.setMinimumSize(720, 480)

    # ── 整体布局 ─────────────────────────────────────────────
    def _build_ui(self):
        self.panel = JsonPanel()
        self.panel.setObjectName("contentArea")
        self.panel.setStyleSheet("#contentArea{background:#f0f2f5;}")
        self.setCentralWidget(self.panel)

        hint = QLabel(f"后台线程: {WORKER_THREAD_NAME}  ·  Ctrl+Enter 执行")
        hint.setStyleSheet("color:#6b7a8d;font-size:11px;padding:0 6px")
        self.statusBar().addPermanentWidget(hint)
