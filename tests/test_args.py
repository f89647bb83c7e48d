import pytest

from philosophers.args import Settings, atol, parse_settings, validate_args
from philosophers.errors import (
    INVALID_CHARACTER,
    INVALID_PHILO_NO,
    WRONG_USAGE,
    PhiloError,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  42", 42),
        ("\t\n\v\f\r 7", 7),
        ("-17", -17),
        ("+5", 5),
        ("12abc", 12),
    ],
)
def test_atol(text, expected):
    assert atol(text) == expected


def test_atol_without_digits_is_zero():
    assert atol("abc") == 0
    assert atol("") == 0
    assert atol("-") == 0


def test_parse_four_arguments():
    settings = parse_settings(["5", "800", "200", "100"])
    assert settings == Settings(5, 800, 200, 100, -1)


def test_parse_five_arguments():
    settings = parse_settings(["4", "410", "200", "200", "7"])
    assert settings.n_of_philos == 4
    assert settings.time_to_die == 410
    assert settings.times_each_eat == 7


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count(args):
    with pytest.raises(PhiloError) as info:
        validate_args(args)
    assert info.value.message == WRONG_USAGE


@pytest.mark.parametrize(
    "args",
    [
        ["5", "800", "-200", "200"],
        ["5", "80a", "200", "200"],
        ["5", "800", "200", "+200"],
        ["5", "800", "200", " 200"],
        ["5", "0", "200", "200"],
        ["5", "800", "200", ""],
        ["5", "800", "200", "200", "0"],
        ["5", "2147483648", "200", "200"],
    ],
)
def test_invalid_values(args):
    with pytest.raises(PhiloError) as info:
        validate_args(args)
    assert info.value.message == INVALID_CHARACTER


def test_int_max_is_accepted():
    settings = parse_settings(["1", "2147483647", "1", "1"])
    assert settings.time_to_die == 2147483647


def test_zero_philosophers():
    with pytest.raises(PhiloError) as info:
        validate_args(["0", "800", "200", "200"])
    assert info.value.message == INVALID_PHILO_NO


def test_bad_character_in_philosopher_count_reported_first():
    with pytest.raises(PhiloError) as info:
        validate_args(["x", "800", "200", "200"])
    assert info.value.message == INVALID_CHARACTER