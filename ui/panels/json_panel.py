# -*- coding: utf-8 -*-
"""JSON Slick 格式化面板"""

from PyQt5.QtWidgets import (
    QHBoxLayout, QVBoxLayout, QLabel, QGroupBox,
    QComboBox, QLineEdit, QSpinBox
)
from .base_panel import BasePanel
from core.json_slick import DEFAULT_CODES_LINE_LENGTH
from core.slick_worker import submit

# (显示名, 缩进单位)；None = 自定义
TAB_PRESETS = [
    ("1 空格", " "),
    ("2 空格", "  "),
    ("4 空格", "    "),
    ("Tab",    "\t"),
    ("自定义", None),
]

CODES_LINE_RANGE = (1, 999)


class JsonPanel(BasePanel):

    def _build_ui(self):
        """覆写以定制 placeholder"""
        super()._build_ui()
        self.input_area.setPlaceholderText(
            '粘贴紧凑 JSON 文本，例如:\n'
            '{"name":"test","value":123,"codes":[0,1,2,3,4,5,6,7]}'
        )

    def build_controls(self, layout):
        group = QGroupBox("JSON Slick 选项")
        g = QVBoxLayout(group)

        # 缩进
        r1 = QHBoxLayout()
        r1.addWidget(QLabel("缩进:"))
        self._tab_combo = QComboBox()
        for name, _tab in TAB_PRESETS:
            self._tab_combo.addItem(name)
        self._tab_combo.currentIndexChanged.connect(self._on_tab_changed)
        r1.addWidget(self._tab_combo)
        self._custom_tab = QLineEdit()
        self._custom_tab.setPlaceholderText("自定义缩进字符串")
        self._custom_tab.setFixedWidth(140)
        self._custom_tab.setEnabled(False)
        r1.addWidget(self._custom_tab)
        r1.addStretch()
        g.addLayout(r1)

        # 纯数字数组换行
        r2 = QHBoxLayout()
        r2.addWidget(QLabel("数字数组每行:"))
        self._codes_line = QSpinBox()
        self._codes_line.setRange(*CODES_LINE_RANGE)
        self._codes_line.setValue(DEFAULT_CODES_LINE_LENGTH)
        self._codes_line.setFixedWidth(70)
        r2.addWidget(self._codes_line)
        hint = QLabel("个元素（仅对只含数字的数组生效）")
        hint.setStyleSheet("color:#6b7a8d;font-size:11px")
        r2.addWidget(hint)
        r2.addStretch()
        g.addLayout(r2)

        layout.addWidget(group)

    def _on_tab_changed(self, index):
        self._custom_tab.setEnabled(TAB_PRESETS[index][1] is None)

    def current_tab(self) -> str:
        tab = TAB_PRESETS[self._tab_combo.currentIndex()][1]
        return self._custom_tab.text() if tab is None else tab

    def process(self, text):
        return submit(text, self.current_tab(), self._codes_line.value())
