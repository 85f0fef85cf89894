import math
from datetime import date, datetime, timezone
from enum import Enum
from typing import Callable, Optional, Tuple, Union

MINUTE = 60
HOUR = 3600
DAY = 86400

WEEK_DAYS = 7
MONTH_DAYS = 30
YEAR_DAYS = 365

WEEKS_LIMIT_DAYS = 31

Timestamp = Union[datetime, date, int, float, None]


class Bucket(Enum):
    NOT_YET = 'not_yet'
    JUST_NOW = 'just_now'
    MINUTE = 'minute'
    MINUTES = 'minutes'
    HOUR = 'hour'
    HOURS = 'hours'
    YESTERDAY = 'yesterday'
    DAY = 'day'
    DAYS = 'days'
    WEEK = 'week'
    WEEKS = 'weeks'
    MONTH = 'month'
    MONTHS = 'months'
    YEAR = 'year'
    YEARS = 'years'


Classification = Tuple[Bucket, int]


def counted(singular: Bucket, plural: Bucket, magnitude: int) -> Classification:
    return (singular if magnitude == 1 else plural), magnitude


def just_now(seconds: float, days: int) -> Optional[Classification]:
    if seconds < MINUTE:
        return Bucket.JUST_NOW, 0


def minutes(seconds: float, days: int) -> Optional[Classification]:
    if seconds < HOUR:
        return counted(Bucket.MINUTE, Bucket.MINUTES, int(seconds // MINUTE))


def hours(seconds: float, days: int) -> Optional[Classification]:
    if seconds < DAY:
        return counted(Bucket.HOUR, Bucket.HOURS, int(seconds // HOUR))


def yesterday(seconds: float, days: int) -> Optional[Classification]:
    if days == 1:
        return Bucket.YESTERDAY, 0


def days_ago(seconds: float, days: int) -> Optional[Classification]:
    if days < WEEK_DAYS:
        return counted(Bucket.DAY, Bucket.DAYS, days)


def weeks_ago(seconds: float, days: int) -> Optional[Classification]:
    if days >= WEEKS_LIMIT_DAYS:
        return None

    weeks = math.ceil(days / WEEK_DAYS)

    # a 4th week reads as a month
    if weeks < 4:
        return counted(Bucket.WEEK, Bucket.WEEKS, weeks)


def months_ago(seconds: float, days: int) -> Optional[Classification]:
    if days >= YEAR_DAYS:
        return None

    months = math.ceil(days / MONTH_DAYS)

    # a 12th month reads as a year
    if months < 12:
        return counted(Bucket.MONTH, Bucket.MONTHS, months)


def years_ago(seconds: float, days: int) -> Optional[Classification]:
    return counted(Bucket.YEAR, Bucket.YEARS, math.ceil(days / YEAR_DAYS))


# Evaluated top to bottom, a rule returning None falls through to the next one.
RULES: Tuple[Callable[[float, int], Optional[Classification]], ...] = (
    just_now,
    minutes,
    hours,
    yesterday,
    days_ago,
    weeks_ago,
    months_ago,
    years_ago,
)


def is_unset(value: Timestamp) -> bool:
    if value is None:
        return True

    if isinstance(value, datetime):
        return value.replace(tzinfo=None) == datetime.min

    if isinstance(value, date):
        return value == date.min

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0

    return False


def to_datetime(value: Union[datetime, date, int, float]) -> datetime:
    """Normalizes a timestamp to a datetime.

    Epoch seconds become aware UTC datetimes, plain dates become naive
    midnights and datetimes are returned untouched.
    """
    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not math.isfinite(value):
            raise ValueError(f'Epoch seconds out of range: {value!r}')

        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f'Epoch seconds out of range: {value!r}') from e

    raise TypeError(f'Unsupported timestamp type: {type(value).__name__}')


def normalize(value: Timestamp) -> Optional[datetime]:
    """Returns None for unset timestamps and epochs no datetime can hold."""
    if is_unset(value):
        return None

    try:
        return to_datetime(value)
    except ValueError:
        return None


def now_for(then: datetime) -> datetime:
    if then.tzinfo is None:
        return datetime.now()

    return datetime.now(timezone.utc)


def align(now: datetime, then: datetime) -> datetime:
    """Makes ``now`` comparable with ``then``.

    Naive values are taken as local time of the host clock.
    """
    if (now.tzinfo is None) == (then.tzinfo is None):
        return now

    if now.tzinfo is None:
        return now.astimezone()

    return now.astimezone().replace(tzinfo=None)


def classify(now: datetime, then: Timestamp) -> Classification:
    then = normalize(then)

    if then is None:
        return Bucket.NOT_YET, 0

    now = align(now, then)

    if then > now:
        return Bucket.NOT_YET, 0

    seconds = (now - then).total_seconds()
    days = int(seconds // DAY)

    # years_ago always matches
    return next(result for result in (rule(seconds, days) for rule in RULES) if result is not None)
