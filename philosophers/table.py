"""The shared table: philosophers, forks, locks and action reporting."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from .args import Settings
from .timing import now_ms


class Action(Enum):
    """What a philosopher does, with the text printed for it."""

    TAKE_FORK = "has taken a fork"
    EAT = "is eating"
    SLEEP = "is sleeping"
    THINK = "is thinking"
    DIE = "died"


@dataclass
class Philosopher:
    """One diner; `forks` holds the indices of forks in the order taken."""

    id: int
    forks: tuple[int, int]
    times_ate: int = 0
    last_meal: int = 0
    meal_lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


def build_philosophers(count: int) -> list[Philosopher]:
    """Seat `count` philosophers; even seats take the right fork first."""
    philosophers = []
    for seat in range(count):
        right = (seat + 1) % count
        forks = (right, seat) if seat % 2 == 0 else (seat, right)
        philosophers.append(Philosopher(id=seat, forks=forks))
    return philosophers


class Table:
    """State shared by all philosopher threads and the manager."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.philosophers = build_philosophers(settings.n_of_philos)
        self.fork_locks = [threading.Lock() for _ in range(settings.n_of_philos)]
        self.start_time = 0
        self._stop_sim = False
        self._stop_lock = threading.Lock()
        self._print_lock = threading.Lock()
        self._started = threading.Event()

    @property
    def n_of_philos(self) -> int:
        return self.settings.n_of_philos

    @property
    def all_created(self) -> bool:
        return self._started.is_set()

    def stop_simulation(self, stop: bool = False) -> bool:
        """Optionally raise the stop flag; return whether it is raised."""
        with self._stop_lock:
            if stop:
                self._stop_sim = True
            return self._stop_sim

    def wait_for_start(self) -> None:
        """Block until mark_started has been called."""
        self._started.wait()

    def mark_started(self) -> None:
        """Record the start time, reset every last meal to it, release waiters."""
        self.start_time = now_ms()
        for philo in self.philosophers:
            with philo.meal_lock:
                philo.last_meal = self.start_time
        self._started.set()

    def print_action(self, philo: Philosopher, action: Action) -> None:
        """Report an action unless the simulation has stopped."""
        with self._print_lock:
            timestamp = now_ms() - self.start_time
            if not self.stop_simulation():
                self.out.write(f"{timestamp} {philo.id + 1} {action.value}\n")
                self.out.flush()