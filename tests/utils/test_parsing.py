# tests/utils/test_parsing.py
"""
Testes dos helpers de parsing compartilhados.
"""

import re

import pytest

from aoc2022.core.exceptions import InputParseError
from aoc2022.utils.parsing import blocks, common_items, lines, match_line, numbered_lines, parse_int, single


def test_lines_drops_blank_and_strips():
    assert lines("  a \n\n b\n   \n") == ["a", "b"]


def test_numbered_lines_keep_original_numbers():
    assert list(numbered_lines("a\n\nb\n")) == [(1, "a"), (3, "b")]


def test_blocks():
    text = "\n1\n2\n\n3\n \n\n4\n\n"
    assert blocks(text) == [["1", "2"], ["3"], ["4"]]
    assert blocks("") == []


def test_parse_int_error_carries_line():
    with pytest.raises(InputParseError) as info:
        parse_int("x1", line_no=7, line="x1 y")
    assert info.value.details == {"line_no": 7, "line": "x1 y"}
    assert "linha 7" in str(info.value)


def test_match_line():
    pattern = re.compile(r"(\d+)-(\d+)")
    assert match_line(pattern, "2-4").groups() == ("2", "4")
    with pytest.raises(InputParseError) as info:
        match_line(pattern, "2-4x", line_no=3, expected="a-b")
    assert "esperado: a-b" in info.value.message


def test_single():
    assert single([5]) == 5
    assert single([]) is None
    assert single([1, 2]) is None
    assert single([None]) is None
    assert single(["a"]) == "a"


def test_common_items():
    assert common_items(["vJrwpWtwJgWr", "hcsFMMfFFhFp"]) == ["p"]
    assert common_items(["abcab", "cab", "bc"]) == ["b", "c"]
    assert common_items([]) == []


@pytest.mark.parametrize("token", ["1_000", "+5", "١٢", " 7", "", "-"])
def test_parse_int_accepts_only_ascii_decimal(token):
    with pytest.raises(InputParseError):
        parse_int(token)


def test_parse_int_negative():
    assert parse_int("-12") == -12
