"""The life cycle of a single philosopher thread."""

from __future__ import annotations

from .table import Action, Philosopher, Table
from .timing import now_ms, precise_sleep

_THINK_CAP = 600
_THINK_FALLBACK = 200


def think_time(table: Table, philo: Philosopher, silent: bool) -> int:
    """How long a philosopher should think, in milliseconds.

    Half of the slack left before starving once the next meal is accounted
    for, never negative, at least 1 when thinking silently, and cut down to
    200 when it would exceed 600.
    """
    settings = table.settings
    with philo.meal_lock:
        since_meal = now_ms() - philo.last_meal
    slack = settings.time_to_die - since_meal - settings.time_to_eat
    # Truncate toward zero like integer division of a signed value.
    duration = int(slack / 2)
    if duration < 0:
        duration = 0
    if duration == 0 and silent:
        duration = 1
    if duration > _THINK_CAP:
        duration = _THINK_FALLBACK
    return duration


def _think(table: Table, philo: Philosopher, silent: bool) -> None:
    duration = think_time(table, philo, silent)
    if not table.stop_simulation():
        if not silent:
            table.print_action(philo, Action.THINK)
        precise_sleep(duration)


def _sleep(table: Table, philo: Philosopher) -> None:
    if not table.stop_simulation():
        table.print_action(philo, Action.SLEEP)
        precise_sleep(table.settings.time_to_sleep)


def _eat(table: Table, philo: Philosopher) -> None:
    first, second = (table.fork_locks[index] for index in philo.forks)
    with first:
        table.print_action(philo, Action.TAKE_FORK)
        with second:
            table.print_action(philo, Action.TAKE_FORK)
            with philo.meal_lock:
                philo.last_meal = now_ms()
                philo.times_ate += 1
            if not table.stop_simulation():
                table.print_action(philo, Action.EAT)
                precise_sleep(table.settings.time_to_eat)


def _lone_philo(table: Table, philo: Philosopher) -> None:
    table.print_action(philo, Action.TAKE_FORK)
    precise_sleep(table.settings.time_to_die)
    table.print_action(philo, Action.DIE)


def routine(table: Table, philo: Philosopher) -> None:
    """Run one philosopher until the simulation is stopped."""
    table.wait_for_start()
    if table.n_of_philos == 1:
        _lone_philo(table, philo)
        return
    if philo.id % 2:
        precise_sleep(table.settings.time_to_eat)
    while not table.stop_simulation():
        _eat(table, philo)
        if table.stop_simulation():
            break
        _sleep(table, philo)
        if table.stop_simulation():
            break
        _think(table, philo, False)