import datetime
import unicodedata
from hmac import compare_digest
from typing import Union

Timestamp = Union[int, float, datetime.datetime]


def to_seconds(for_time: Timestamp) -> int:
    """
    Whole unix seconds for a timestamp or a datetime.

    Naive datetimes are taken as local time, like datetime.timestamp() does.
    """
    if isinstance(for_time, datetime.datetime):
        for_time = for_time.timestamp()
    return int(for_time // 1)


def seconds_remaining(seconds: int, period: int) -> int:
    """
    Seconds until the window containing ``seconds`` closes, in [1, period].
    """
    return period - (seconds % period)
    # t=59, period=30 -> 1
    # t=60, period=30 -> 30


def strings_equal(s1: str, s2: str) -> bool:
    """
    Compares two codes without short-circuiting on the first mismatch.

    Both sides are NFKC normalized first, so fullwidth digits typed on some
    keyboards still match. Only the length leaks through timing.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
#   "４８２１９３" (fullwidth) -> "482193" after NFKC
