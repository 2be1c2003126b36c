import string

import pytest

from kimchi.input import Mods, ctrl_mod, parse_input


def test_ctrl_c_is_three():
    assert ctrl_mod("c") == 3


@pytest.mark.parametrize("letter", list(string.ascii_lowercase))
def test_parse_input_matches_ctrl_mod(letter):
    assert parse_input(f"ctrl+{letter}") == ctrl_mod(letter)


def test_ctrl_mod_ignores_case():
    for letter in string.ascii_lowercase:
        assert ctrl_mod(letter) == ctrl_mod(letter.upper())


@pytest.mark.parametrize("text", ["", "ctrl+", "ctrl+ab", "alt+c", "c", "CTRL+c"])
def test_parse_input_rejects_other_forms(text):
    assert parse_input(text) == 0


def test_parse_input_result_is_a_byte():
    for char in string.printable:
        assert 0 <= parse_input(f"ctrl+{char}") <= 255


def test_mods_defaults():
    mods = Mods(key="x")
    assert (mods.ctrl, mods.alt, mods.shift, mods.key) == (False, False, False, "x")