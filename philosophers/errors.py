"""Error messages and the exception raised when the simulation cannot run."""

WRONG_USAGE = (
    "Error: Wrong format. Try: ./philo <number_of_philosophers> "
    "<time_to_die> <time_to_eat> <time_to_sleep> "
    "[number_of_times_each_philosopher_must_eat]"
)
INVALID_CHARACTER = "Error: invalid number or character."
INVALID_PHILO_NO = "Error: there must be at least 1 philosopher."
THREAD_ERROR = "Error: could not create thread."
MUTEX_ERROR = "Error: could not initialize mutex."
JOIN_ERROR = "Error: could not join thread."
MALLOC_ERROR = "Error: could not allocate memory."


class PhiloError(Exception):
    """A fatal error; its message is what the program prints before exiting."""

    exit_status = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message