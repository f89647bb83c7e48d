# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread and loops through eating, sleeping and thinking. A fork lies between
each pair of neighbours, and a lock guards each fork. Philosophers in
even-numbered seats (counting from 0) pick up their right-hand fork first. The
others pick up their own fork first.

When there is more than one philosopher, a separate manager thread watches the
table. It stops the run when a philosopher starves. It also stops the run once
everyone has eaten enough, if a meal count was given.

## Installation

```
pip install .
```

## Usage

```
philo <number_of_philosophers> <time_to_die> <time_to_eat> <time_to_sleep> [number_of_times_each_philosopher_must_eat]
```

The same entry point can also be run as `python -m philosophers.cli`.

All times are in milliseconds. Every argument must be a positive whole number,
written with digits only and no sign, and no larger than 2147483647.

Example:

```
philo 5 800 200 200 7
```

The program writes one line per event. Each line holds three things: the
milliseconds since the start, the philosopher's number (counting from 1), and
the event. The events are:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

A run might begin like this:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
...
```

The simulation ends in one of two ways:

- The manager finds a philosopher whose last meal began more than
  `time_to_die + 1` milliseconds ago. It prints `<time> <n> died` and stops
  the run.
- The meal count was given and every philosopher has eaten at least that many
  times.

Once the run has stopped, no further lines are printed.

With a single philosopher there is no manager. The philosopher takes the one
fork there is, waits `time_to_die` milliseconds and then prints `died`.

If the arguments are wrong, the program prints an error message and exits with
status 1. A wrong number of arguments prints the usage line.

## Using it from Python

```python
import sys

from philosophers.args import Settings, parse_settings
from philosophers.cli import run_simulation

settings = parse_settings(["4", "410", "200", "200", "3"])
table = run_simulation(settings, sys.stdout)
print([philo.times_ate for philo in table.philosophers])

# Settings can also be built directly; times_each_eat defaults to -1 (no limit).
run_simulation(Settings(n_of_philos=1, time_to_die=100, time_to_eat=50, time_to_sleep=50))
```

- `parse_settings` checks the arguments and raises
  `philosophers.errors.PhiloError` when they are not valid.
- `run_simulation` returns the `Table` once every thread has finished.
- When no output stream is given, `run_simulation` writes to standard output.

## Running the tests

```
pip install .[test]
pytest
```