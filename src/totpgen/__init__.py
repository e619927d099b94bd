from typing import Any

from .exceptions import InvalidConfiguration as InvalidConfiguration
from .exceptions import InvalidSecret as InvalidSecret
from .exceptions import Interrupted as Interrupted
from .exceptions import TOTPError as TOTPError
from .hotp import HOTP as HOTP
from .otp import OTP as OTP
from .totp import DEFAULT_MIN_VALID_SECONDS, PERIOD
from .totp import TOTP as TOTP


def compute_code(secret: str) -> str:
    """
    Code for the current time window. Never blocks.

    :param secret: Base32 secret (case-insensitive, spaces and padding ignored)
    :returns: 6-digit code
    """
    return TOTP(secret).now()


def generate_code(secret: str, min_valid_seconds: int = DEFAULT_MIN_VALID_SECONDS, cancel: Any = None) -> str:
    """
    Code that stays valid for at least ``min_valid_seconds`` after it is
    returned. May block for up to one period (30 seconds).

    :param secret: Base32 secret
    :param min_valid_seconds: 1 to 30, defaults to 5
    :param cancel: optional threading.Event that aborts the wait with Interrupted
    :returns: 6-digit code
    """
    return TOTP(secret).fresh(min_valid_seconds, cancel=cancel)


def compute_code_for_counter(secret: str, counter: int) -> str:
    """
    Code for an explicit time-step (or HOTP) counter.
    """
    return HOTP(secret).at(counter)


def seconds_remaining() -> int:
    """
    Seconds until the current code expires, for callers that prefer to poll
    over blocking in generate_code().
    """
    return TOTP("").seconds_remaining()

# generate_code("JBSW Y3DP EHPK 3PXP")
#   now = ...:58 -> 2s left < 5 -> sleep(2) -> code for the next window
#   now = ...:10 -> 20s left    -> code for the current window

__all__ = [
    "DEFAULT_MIN_VALID_SECONDS",
    "PERIOD",
    "HOTP",
    "OTP",
    "TOTP",
    "TOTPError",
    "InvalidConfiguration",
    "InvalidSecret",
    "Interrupted",
    "compute_code",
    "compute_code_for_counter",
    "generate_code",
    "seconds_remaining",
]
