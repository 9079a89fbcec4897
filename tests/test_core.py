import random

import pytest

from clickpath.core import Color, CursorType, Key, log, random_int, random_percent


def test_color_composites():
    assert Color(int(Color.RED) + int(Color.GREEN) + int(Color.BLUE)) is Color.WHITE
    assert Color(int(Color.BLUE) + int(Color.WHITE)) is Color.GRAY
    assert Color(int(Color.GREEN) + int(Color.WHITE)) is Color.SKY


def test_color_lookup_round_trip():
    members = list(Color)
    assert [Color(member.value) for member in members] == members
    assert len({member.value for member in members}) == len(members)


def test_cursor_type_lookup_round_trip():
    members = list(CursorType)
    assert [CursorType(member.value) for member in members] == members
    assert len(members) == 3


def test_key_codes_from_source():
    assert Key(0x1B) is Key.ESCAPE
    assert Key(0x0D) is Key.RETURN
    assert Key(0x01) is Key.LBUTTON
    assert Key(0x02) is Key.RBUTTON


def test_key_aliases():
    assert Key(0x15) is Key.KANA
    assert Key(0x15) is Key.HANGUL
    assert Key(0x15) is Key.HANGEUL
    assert Key(0x19) is Key.KANJI


@pytest.mark.parametrize("low,high", [(0, 0), (0, 10), (-5, 5), (3, 4)])
def test_random_int_in_range(low, high):
    random.seed(1234)
    values = [random_int(low, high) for _ in range(500)]
    assert all(low <= v <= high for v in values)


def test_random_int_covers_range():
    random.seed(42)
    values = {random_int(1, 3) for _ in range(500)}
    assert values == {1, 2, 3}


def test_random_int_single_value():
    assert random_int(7, 7) == 7


def test_random_percent_in_range():
    random.seed(7)
    values = [random_percent(2.0, 5.0) for _ in range(500)]
    assert all(2.0 <= v <= 5.0 for v in values)


def test_log_formats_and_writes(capsys):
    text = log("%d-%s", 3, "a")
    assert text == "3-a"
    assert capsys.readouterr().out == text


def test_log_without_args_keeps_percent(capsys):
    text = log("100%")
    assert text == "100%"
    assert capsys.readouterr().out == "100%"


def test_log_truncates_long_output(capsys):
    text = log("%s", "x" * 5000)
    assert len(text) == 1023
    assert capsys.readouterr().out == text