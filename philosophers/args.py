"""Command-line argument parsing and validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import INVALID_CHARACTER, INVALID_PHILO_NO, WRONG_USAGE, PhiloError

INT_MAX = 2**31 - 1
_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    n_of_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    times_each_eat: int = -1


def atol(text: str) -> int:
    """Parse a leading integer: skip whitespace, optional sign, then digits."""
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def validate_args(args: Sequence[str]) -> None:
    """Check the arguments that follow the program name; raise PhiloError if bad."""
    if len(args) not in (4, 5):
        raise PhiloError(WRONG_USAGE)
    for position, arg in enumerate(args):
        if any(ch not in _DIGITS for ch in arg):
            raise PhiloError(INVALID_CHARACTER)
        num = atol(arg)
        if position == 0 and num <= 0:
            raise PhiloError(INVALID_PHILO_NO)
        if num <= 0 or num > INT_MAX:
            raise PhiloError(INVALID_CHARACTER)


def parse_settings(args: Sequence[str]) -> Settings:
    """Validate the arguments and turn them into Settings."""
    validate_args(args)
    values = [atol(arg) for arg in args]
    return Settings(
        n_of_philos=values[0],
        time_to_die=values[1],
        time_to_eat=values[2],
        time_to_sleep=values[3],
        times_each_eat=values[4] if len(values) == 5 else -1,
    )