"""The monitor thread that detects starvation and full bellies."""

from __future__ import annotations

import time

from .table import Action, Table
from .timing import now_ms


def starvation(table: Table) -> bool:
    """Report and stop on the first philosopher that has starved."""
    limit = table.settings.time_to_die + 1
    for philo in table.philosophers:
        if table.stop_simulation():
            break
        with philo.meal_lock:
            if now_ms() - philo.last_meal > limit:
                table.print_action(philo, Action.DIE)
                table.stop_simulation(True)
                return True
    return False


def all_full(table: Table) -> bool:
    """Whether every philosopher has eaten the required number of times."""
    required = table.settings.times_each_eat
    for philo in table.philosophers:
        if table.stop_simulation():
            break
        with philo.meal_lock:
            if philo.times_ate < required:
                return False
    return True


def manage_philos(table: Table) -> None:
    """Watch the table until the simulation stops."""
    table.wait_for_start()
    while not table.stop_simulation():
        if starvation(table):
            table.stop_simulation(True)
        if table.settings.times_each_eat > 0 and all_full(table):
            table.stop_simulation(True)
        time.sleep(0.0001)