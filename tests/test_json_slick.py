# -*- coding: utf-8 -*-
import json
import math

import pytest

from core.json_slick import (
    UNSET, FormatRequest, SlickTypeError,
    format_json, slick, strip_whitespace, validate_request,
)


def _compact(obj):
    return json.dumps(obj, separators=(',', ':'))


# ══════════════════════════════════════════════════════════════
#  格式化
# ══════════════════════════════════════════════════════════════

def test_single_key_object_default_tab():
    assert format_json('{"a":1}') == '{\n "a": 1\n}'


def test_tab_character_indent():
    assert format_json('{"a":1}', '\t') == '{\n\t"a":\t1\n}'


def test_numeric_array_wraps_every_four():
    out = format_json('[0,1,2,3,4,5,6,7,8,9,10,11]', ' ', 4)
    assert out == (
        '[\n'
        ' 0, 1, 2, 3,\n'
        ' 4, 5, 6, 7,\n'
        ' 8, 9, 10, 11\n'
        ']'
    )


def test_nested_object_and_array_depths():
    out = format_json('{"a":1,"b":[1,2]}', ' ', 1)
    assert out == (
        '{\n'
        ' "a": 1,\n'
        ' "b": [\n'
        '  1,\n'
        '  2\n'
        ' ]\n'
        '}'
    )


def test_empty_containers_stay_inline():
    assert format_json('{"a":[],"b":{}}') == '{\n "a": [],\n "b": {}\n}'
    assert format_json('[]') == '[]'
    assert format_json('{}') == '{}'


def test_prior_formatting_is_removed():
    pretty = '{\n    "a" : [ 1 ,\n 2 ]\r\n}\t'
    assert format_json(pretty) == format_json('{"a":[1,2]}')


def test_whitespace_inside_strings_is_stripped():
    assert format_json('["a b", "c\td"]') == '[\n "ab",\n "cd"\n]'


def test_strip_whitespace_includes_bom_and_unicode_spaces():
    assert strip_whitespace('\ufeff{ "a":\u00a0 1 }\u2028\u3000') == '{"a":1}'


@pytest.mark.parametrize('ch', ['\x1c', '\x1d', '\x1e', '\x1f', '\x85'])
def test_non_javascript_whitespace_is_kept(ch):
    assert strip_whitespace('["a' + ch + 'b", 1]') == '["a' + ch + 'b",1]'


def test_structural_chars_inside_strings_are_copied():
    out = format_json('{"k":"{[a,b]:c}"}')
    assert out == '{\n "k": "{[a,b]:c}"\n}'


def test_escaped_quote_does_not_end_string():
    out = format_json(r'{"k":"a\"b,c"}')
    assert out == '{\n "k": "a\\"b,c"\n}'


def test_escaped_backslash_before_closing_quote():
    out = format_json(r'{"k":"\\","n":1}')
    assert out == '{\n "k": "\\\\",\n "n": 1\n}'


def test_escape_window_is_one_character():
    out = format_json(r'{"k":"a\n","n":[1]}')
    assert out == '{\n "k": "a\\n",\n "n": [\n  1\n ]\n}'


def test_code_array_with_float_and_exponent_entries():
    assert format_json('[1.5,-2,3e4]', ' ', 2) == '[\n 1.5, -2,\n 3e4\n]'


def test_nested_code_arrays_wrap_independently():
    out = format_json('[[1,2],[3,4,5]]', ' ', 2)
    assert out == (
        '[\n'
        ' [\n'
        '  1, 2\n'
        ' ],\n'
        ' [\n'
        '  3, 4,\n'
        '  5\n'
        ' ]\n'
        ']'
    )


@pytest.mark.parametrize('text', [
    '[1,"x",2,3]',
    '[1,[2],3,4]',
    '[1,{"a":2},3,4]',
    '[true,false,null,"s"]',
])
def test_arrays_with_non_numeric_entries_are_not_code_arrays(text):
    assert format_json(text, ' ', 10) == format_json(text, ' ', 1)


def test_boolean_and_null_array_counts_as_code_array():
    assert format_json('[true,false,null]', ' ', 3) == '[\n true, false, null\n]'


def test_arbitrary_tab_string():
    assert format_json('[1,2,3,4]', '--', 3) == '[\n--1,--2,--3,\n--4\n]'


def test_empty_tab_string():
    assert format_json('{"a":[1,2]}', '') == '{\n"a":[\n1,\n2\n]\n}'


def test_text_without_structure_passes_through():
    assert format_json('abc 123\n true') == 'abc123true'


def test_empty_input():
    assert format_json('') == ''
    assert format_json(' \n\t') == ''


def test_unbalanced_closers_never_dedent_below_zero():
    # 非法 JSON：结果未定义，但不应抛异常
    out = format_json('1]]')
    assert out == '1\n]\n]'


# ── 性质 ───────────────────────────────────────────────────

_SAMPLES = [
    {"a": 1},
    [1, 2, 3],
    {"name": "test", "value": 123, "list": [1, 2, 3], "nested": {"x": [], "y": {}}},
    [[1, [2, [3]]], {"k": ["v", {"deep": [0.5, -1e-3]}]}],
    {"esc": "quote\"back\\slash/é", "n": None, "t": True},
    [],
]


@pytest.mark.parametrize('obj', _SAMPLES)
def test_one_space_output_matches_stdlib_indent(obj):
    assert format_json(_compact(obj), ' ', 1) == json.dumps(obj, indent=1)


@pytest.mark.parametrize('obj', _SAMPLES)
@pytest.mark.parametrize('tab', [' ', '\t', '    '])
def test_output_is_still_the_same_json(obj, tab):
    assert json.loads(format_json(_compact(obj), tab, 3)) == obj


@pytest.mark.parametrize('obj', _SAMPLES)
@pytest.mark.parametrize('tab', [' ', '\t', '  '])
@pytest.mark.parametrize('width', [1, 3])
def test_reformatting_is_stable(obj, tab, width):
    once = format_json(_compact(obj), tab, width)
    assert format_json(once, tab, width) == once


def test_indent_units_equal_nesting_depth():
    obj = {"a": [1, {"b": [[], {"c": "d"}]}], "e": {}}
    out = format_json(_compact(obj), '\t', 1)
    depth = 0
    for line in out.split('\n'):
        stripped = line.lstrip('\t')
        if stripped[:1] in '}]':
            depth -= 1
        assert len(line) - len(stripped) == depth
        if stripped[-1:] in '{[':
            depth += 1
    assert depth == 0


@pytest.mark.parametrize('count', range(1, 11))
@pytest.mark.parametrize('width', [1, 2, 3, 4, 7])
def test_code_array_body_line_count(count, width):
    out = format_json(_compact(list(range(count))), ' ', width)
    body = out.split('\n')[1:-1]
    assert len(body) == math.ceil(count / width)


def test_width_one_equals_default():
    text = '{"a":[1,2,3],"b":[[4,5],[6]]}'
    assert format_json(text, ' ', 1) == format_json(text)


# ══════════════════════════════════════════════════════════════
#  参数校验
# ══════════════════════════════════════════════════════════════

def test_defaults_applied_when_omitted():
    assert validate_request('{}') == FormatRequest('{}', ' ', 1)


def test_explicit_values_kept():
    assert validate_request('[]', '\t', 8) == FormatRequest('[]', '\t', 8)


def test_whole_float_normalised_to_int():
    req = validate_request('[]', ' ', 4.0)
    assert req.codes_line_length == 4
    assert isinstance(req.codes_line_length, int)


def test_request_is_immutable():
    req = validate_request('{}')
    with pytest.raises(AttributeError):
        req.tab = '\t'


@pytest.mark.parametrize('kwargs, fragment', [
    ({}, 'json:str was of type <unset>'),
    ({'json': 5}, 'json:str was of type <int>'),
    ({'json': None}, 'json:str was of type <NoneType>'),
    ({'json': b'{}'}, 'json:str was of type <bytes>'),
    ({'json': '{}', 'tab': None}, 'tab:unset|str was of type <NoneType>'),
    ({'json': '{}', 'tab': 2}, 'tab:unset|str was of type <int>'),
    ({'json': '{}', 'codes_line_length': '4'}, 'was of type <str>'),
    ({'json': '{}', 'codes_line_length': None}, 'was of type <NoneType>'),
    ({'json': '{}', 'codes_line_length': True}, 'was of type <bool>'),
    ({'json': '{}', 'codes_line_length': 2.5}, 'was of type <float>'),
    ({'json': '{}', 'codes_line_length': float('nan')}, 'was of type <float>'),
    ({'json': '{}', 'codes_line_length': float('inf')}, 'was of type <float>'),
    ({'json': '{}', 'codes_line_length': 0}, 'was of type <(int<=0)>'),
    ({'json': '{}', 'codes_line_length': -3}, 'was of type <(int<=0)>'),
    ({'json': '{}', 'codes_line_length': -2.0}, 'was of type <(int<=0)>'),
])
def test_invalid_parameters_rejected(kwargs, fragment):
    with pytest.raises(SlickTypeError) as info:
        validate_request(**kwargs)
    err = info.value
    assert fragment in err.result
    assert err.result.startswith('Error calling json_slick(')
    assert err.error == 'Type Error'
    assert err.to_message() == {'result': err.result, 'error': 'Type Error'}


def test_codes_line_length_messages_are_distinct():
    messages = set()
    for bad in ('x', 1.5, 0):
        with pytest.raises(SlickTypeError) as info:
            validate_request('[]', ' ', bad)
        messages.add(info.value.result)
    assert len(messages) == 3


def test_slick_error_is_a_type_error():
    with pytest.raises(TypeError):
        slick(42)


def test_slick_validates_then_formats():
    assert slick('{"a":1}') == '{\n "a": 1\n}'
    assert slick('[1,2]', UNSET, 2) == '[\n 1, 2\n]'
