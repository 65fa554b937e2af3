# -*- coding: utf-8 -*-
import os

# 无显示环境下运行 Qt 测试
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
