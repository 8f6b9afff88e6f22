from unittest import mock

import pytest

from boggleht.mt19937 import MT19937
from boggleht.strhash import MyStringHash, main


@pytest.mark.parametrize(
    "key, expected",
    [
        ("abc", 9953503400),
        ("abc123", 473827885525100),
        ("antidisestablishmentarianism", 1137429692708383810),
        ("9999999999999999999999999999", 7116200424364995040),
        ("", 0),
        ("B", 261934300),
        ("gfedcba", 80987980279261566),
        ("abcdefghijkl", 99959782498362165),
        ("abcdefghijklm", 177508434398820306),
        ("usccs103landcs104l", 2322055531449905840),
    ],
)
def test_debug_hash_values(key, expected):
    assert MyStringHash(True)(key) == expected


def test_case_insensitive():
    lower = MyStringHash(True)("usccs103landcs104l")
    mixed = MyStringHash(True)("USCCS103LandCS104L")
    assert lower == mixed == 2322055531449905840


def test_mixed_case_long_word():
    assert MyStringHash(True)("AntidisEstablishmentAriaNism") == 1137429692708383810


def test_default_is_debug():
    assert MyStringHash()("abc") == 9953503400


@pytest.mark.parametrize(
    "letter, expected",
    [("a", 0), ("z", 25), ("A", 0), ("Z", 25), ("0", 26), ("9", 35)],
)
def test_letter_digit_to_number(letter, expected):
    assert MyStringHash().letter_digit_to_number(letter) == expected


def test_letter_digit_to_number_other_char():
    assert MyStringHash().letter_digit_to_number("!") == 2**64 - 1


def test_hash_fits_in_64_bits():
    h = MyStringHash()
    assert 0 <= h("!!!!!!zzzzzz999999") < 2**64


def test_generate_r_values_uses_clock_seed():
    with mock.patch("time.time_ns", return_value=5489):
        h = MyStringHash(False)
    gen = MT19937(5489)
    assert h.r_values == [gen() for _ in range(5)]


def test_random_r_values_change_hash():
    key = "AntidisEstablishmentAriaNism"
    values = [MyStringHash(True)(key)]
    for seed in range(1, 6):
        with mock.patch("time.time_ns", return_value=seed * 1_000_000_000):
            values.append(MyStringHash(False)(key))
    assert values[0] == 1137429692708383810
    assert len(set(values)) == len(values)


def test_main_prints_hash(capsys):
    assert main(["abc"]) == 0
    assert capsys.readouterr().out == "h(abc)=9953503400\n"


def test_main_without_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out == "Please provide a string to hash\n"