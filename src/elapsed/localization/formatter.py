import threading
from datetime import datetime
from typing import Callable, Mapping, Optional

from .languages import LocaleRegistry, create_registry
from .timeutils import Bucket, Classification, Timestamp, classify, normalize, now_for

Clock = Callable[[datetime], datetime]


class ElapsedFormatter:
    """Turns timestamps into "how long ago" phrases.

    The clock receives the normalized timestamp and returns the current
    time, so naive and aware timestamps each get a comparable reading.
    """

    def __init__(self, registry: Optional[LocaleRegistry] = None, clock: Optional[Clock] = None):
        self.registry = registry if registry is not None else create_registry()
        self.clock = clock or now_for

    def classify(self, timestamp: Timestamp, now: Optional[datetime] = None) -> Classification:
        then = normalize(timestamp)

        if then is None:
            return Bucket.NOT_YET, 0

        return classify(now or self.clock(then), then)

    def format(self, timestamp: Timestamp, locale: Optional[str] = None, now: Optional[datetime] = None) -> str:
        bucket, magnitude = self.classify(timestamp, now)

        return self.registry.resolve(bucket, magnitude, locale)

    def register(self, code: str, table: Mapping):
        self.registry.add(code, table)


_default: Optional[ElapsedFormatter] = None
_default_lock = threading.Lock()


def get_default() -> ElapsedFormatter:
    global _default

    if _default is None:
        with _default_lock:
            if _default is None:
                _default = ElapsedFormatter()

    return _default


def format_elapsed(timestamp: Timestamp) -> str:
    return get_default().format(timestamp)


def format_elapsed_localized(timestamp: Timestamp, locale: Optional[str]) -> str:
    return get_default().format(timestamp, locale)


def register_locale(locale: str, table: Mapping):
    """Adds a locale to the process-wide registry.

    Raises a RegistrationError subclass when the code is blank, already
    registered, or the table misses phrases the reference locale has.
    """
    get_default().register(locale, table)
