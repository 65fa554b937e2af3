# -*- coding: utf-8 -*-
"""JSON Slick 格式化引擎 — 纯函数，无 UI 依赖

不解析 JSON，只做单遍字符扫描：
    字符串内 / 纯数字数组内 / 结构字符  三态切换，按状态输出缩进、换行与间距。

注意:
    - 输入须为合法 JSON，非法输入的输出结果未定义
    - 预处理会删除全部空白字符（包括字符串值内的空白）
"""

import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_TAB = " "
DEFAULT_CODES_LINE_LENGTH = 1

# 出现任一字符即不是纯数字数组
NON_CODE_CHARS = frozenset('"[{')

_PAIRS = {'{': '}', '[': ']'}
_OPENERS = {v: k for k, v in _PAIRS.items()}

# 与 JavaScript 的 \s 一致：不含 \x1c-\x1f、\x85，含 BOM
_WHITESPACE_RE = re.compile(
    r'[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+')

_SIGNATURE = ("Error calling json_slick( json:str, tab:unset|str, "
              "codes_line_length:unset|(int>0) )\n")


class _Unset:
    """占位：参数未传入（区别于显式传入 None）"""

    def __repr__(self):
        return '<unset>'


UNSET = _Unset()


# ══════════════════════════════════════════════════════════════
#  参数校验
# ══════════════════════════════════════════════════════════════

class SlickTypeError(TypeError):
    """参数类型 / 取值不合法"""

    error = "Type Error"

    def __init__(self, result: str):
        super().__init__(result)
        self.result = result

    def to_message(self) -> dict:
        return {'result': self.result, 'error': self.error}


@dataclass(frozen=True)
class FormatRequest:
    json: str
    tab: str = DEFAULT_TAB
    codes_line_length: int = DEFAULT_CODES_LINE_LENGTH


def _type_name(value) -> str:
    if value is UNSET:
        return 'unset'
    return type(value).__name__


def validate_request(json=UNSET, tab=UNSET, codes_line_length=UNSET) -> FormatRequest:
    """校验三个原始参数，返回规范化后的 FormatRequest。

    未传入的 tab / codes_line_length 取默认值；显式传入 None 视为类型错误。
    """
    if not isinstance(json, str):
        raise SlickTypeError(
            _SIGNATURE
            + f"json:str was of type <{_type_name(json)}> "
            "but was expected to be of type <str>.")

    if tab is UNSET:
        tab = DEFAULT_TAB
    elif not isinstance(tab, str):
        raise SlickTypeError(
            _SIGNATURE
            + f"tab:unset|str was of type <{_type_name(tab)}> "
            "but was expected to be of type <unset> or of type <str>.")

    if codes_line_length is UNSET:
        codes_line_length = DEFAULT_CODES_LINE_LENGTH
    else:
        codes_line_length = _check_codes_line_length(codes_line_length)

    return FormatRequest(json, tab, codes_line_length)


def _check_codes_line_length(value) -> int:
    expected = "but was expected to be of type <unset> or of type <(int>0)>."
    # bool 是 int 子类，这里不算数字
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SlickTypeError(
            _SIGNATURE
            + f"codes_line_length:unset|(int>0) was of type "
            f"<{_type_name(value)}> {expected}")
    if isinstance(value, float):
        if not value.is_integer():      # 小数、NaN、inf
            raise SlickTypeError(
                _SIGNATURE
                + f"codes_line_length:unset|(int>0) was of type <float> {expected}")
        value = int(value)
    if value <= 0:
        raise SlickTypeError(
            _SIGNATURE
            + f"codes_line_length:unset|(int>0) was of type <(int<=0)> {expected}")
    return value


# ══════════════════════════════════════════════════════════════
#  扫描格式化
# ══════════════════════════════════════════════════════════════

def strip_whitespace(text: str) -> str:
    """删除全部空白（压缩），字符串内的空白同样删除"""
    return _WHITESPACE_RE.sub('', text)


def _is_code_array(text: str, open_index: int) -> bool:
    """从 '[' 之后扫到第一个 ']'，中间无字符串 / 嵌套容器即为纯数字数组"""
    end = text.find(']', open_index + 1)
    if end == -1:
        end = len(text)
    return NON_CODE_CHARS.isdisjoint(text[open_index + 1:end])


class _ScanState:
    """单次格式化调用的扫描状态，调用结束即丢弃"""

    def __init__(self, text: str, tab: str, codes_line_length: int):
        self.text = text
        self.tab = tab
        self.codes_line_length = codes_line_length
        self.cursor = 0
        self.output = []
        self.in_string = False
        self.escape_next = False
        self.in_code_array = False
        self.code_array_count = 0
        self.depth = 0

    @property
    def ledger(self) -> str:
        return self.tab * self.depth

    def peek(self) -> Optional[str]:
        i = self.cursor + 1
        return self.text[i] if i < len(self.text) else None

    def recall(self) -> Optional[str]:
        i = self.cursor - 1
        return self.text[i] if i >= 0 else None

    def emit(self, *parts: str):
        self.output.extend(parts)

    def newline(self):
        self.emit('\n', self.ledger)

    def indent(self):
        self.depth += 1

    def dedent(self):
        self.depth = max(self.depth - 1, 0)


def _scan_string_char(st: _ScanState, ch: str):
    # 只关心被转义的引号，转义窗口固定 1 个字符
    if st.escape_next:
        st.escape_next = False
    elif ch == '\\':
        st.escape_next = True
    elif ch == '"':
        st.in_string = False
    st.emit(ch)


def _scan_structural_char(st: _ScanState, ch: str):
    if ch == '"':
        st.in_string = True
        st.emit(ch)

    elif ch in _PAIRS:
        st.emit(ch)
        if st.peek() == _PAIRS[ch]:
            return
        st.indent()
        st.newline()
        if ch == '[' and _is_code_array(st.text, st.cursor):
            st.in_code_array = True
            st.code_array_count = 0

    elif ch == ',':
        st.emit(ch)
        if st.in_code_array:
            st.code_array_count += 1
            if st.code_array_count == st.codes_line_length:
                st.newline()
                st.code_array_count = 0
            else:
                st.emit(st.tab)
        else:
            st.newline()

    elif ch == ':':
        st.emit(ch, st.tab)

    elif ch in _OPENERS:
        if st.recall() == _OPENERS[ch]:
            st.emit(ch)
            return
        st.dedent()
        st.newline()
        st.emit(ch)
        if ch == ']' and st.in_code_array:
            st.in_code_array = False
            st.code_array_count = 0

    else:
        st.emit(ch)


def format_json(json: str, tab: str = DEFAULT_TAB,
                codes_line_length: int = DEFAULT_CODES_LINE_LENGTH) -> str:
    """格式化（美化）紧凑 JSON 文本。

    Args:
        json:              JSON 文本（已是合法 JSON）
        tab:               缩进单位，任意字符串均可
        codes_line_length: 纯数字数组每行元素数，1 = 每个元素一行

    参数需事先经过 validate_request()；本函数不会抛出异常。
    """
    st = _ScanState(strip_whitespace(json), tab, codes_line_length)
    while st.cursor < len(st.text):
        ch = st.text[st.cursor]
        if st.in_string:
            _scan_string_char(st, ch)
        else:
            _scan_structural_char(st, ch)
        st.cursor += 1
    return ''.join(st.output)


def slick(json=UNSET, tab=UNSET, codes_line_length=UNSET) -> str:
    """校验 + 格式化，同步版本（后台线程内调用）"""
    req = validate_request(json, tab, codes_line_length)
    return format_json(req.json, req.tab, req.codes_line_length)
