"""Command-line entry point that runs the dining philosophers simulation."""

from __future__ import annotations

import sys
import threading
from typing import Sequence, TextIO

from .args import Settings, parse_settings
from .errors import THREAD_ERROR, PhiloError
from .manager import manage_philos
from .routine import routine
from .table import Table


def _start(target, *args) -> threading.Thread:
    thread = threading.Thread(target=target, args=args, daemon=True)
    try:
        thread.start()
    except RuntimeError as exc:
        raise PhiloError(THREAD_ERROR) from exc
    return thread


def run_simulation(settings: Settings, out: TextIO | None = None) -> Table:
    """Run a full simulation and return the table once every thread is done."""
    table = Table(settings, out)
    threads = [_start(routine, table, philo) for philo in table.philosophers]
    if table.n_of_philos > 1:
        threads.append(_start(manage_philos, table))
    table.mark_started()
    for thread in threads:
        thread.join()
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the simulation and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
        run_simulation(settings)
    except PhiloError as exc:
        print(exc.message)
        return exc.exit_status
    return 0


if __name__ == "__main__":
    sys.exit(main())