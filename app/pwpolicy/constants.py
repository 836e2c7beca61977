"""Password policy constants file."""

from typing import Final

# width of the policy name column in the directory store
NAME_MAX: Final[int] = 40

# five years in seconds
MAX_AGE: Final[int] = 157_680_000

MAX_MIN_LENGTH: Final[int] = 20
MAX_FAILURE: Final[int] = 100
MAX_HISTORY: Final[int] = 100
MAX_GRACE_COUNT: Final[int] = 10
