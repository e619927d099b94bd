import logging
import time
from typing import Any, Optional

from . import utils
from .exceptions import InvalidConfiguration, Interrupted
from .otp import OTP

log = logging.getLogger(__name__)

PERIOD = 30
DEFAULT_MIN_VALID_SECONDS = 5


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    interval = PERIOD

    def at(self, for_time: utils.Timestamp, counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def now(self) -> str:
        """
        Generate the current time OTP. Never blocks.

        :returns: OTP value
        """
        return self.at(time.time())

    def seconds_remaining(self, for_time: Optional[utils.Timestamp] = None) -> int:
        """
        Seconds left before the code for ``for_time`` (default: now) expires.
        """
        if for_time is None:
            for_time = time.time()
        return utils.seconds_remaining(utils.to_seconds(for_time), self.interval)

    def fresh(self, min_valid_seconds: int = DEFAULT_MIN_VALID_SECONDS, cancel: Any = None) -> str:
        """
        Generates a code that stays valid for at least ``min_valid_seconds``.

        When the current window closes sooner than that, this blocks until
        the next window opens (at most one interval) and returns its code.

        :param min_valid_seconds: required validity, 1 to the interval length
        :param cancel: optional threading.Event; setting it aborts the wait
        :returns: OTP value
        :raises InvalidConfiguration: if min_valid_seconds is out of range
        :raises InvalidSecret: if the secret is not valid Base32
        :raises Interrupted: if ``cancel`` is set while waiting
        """
        if not 1 <= min_valid_seconds <= self.interval:
            raise InvalidConfiguration("min_valid_seconds must be between 1 and {}".format(self.interval))
        # A bad secret should fail now, not after the wait.
        self.byte_secret()

        remaining = self.seconds_remaining()
        if remaining < min_valid_seconds:
            log.debug("%d seconds left in the current window, %d required; waiting", remaining, min_valid_seconds)
            self._wait(remaining, cancel)
        # The clock is read again: after a wait this is the next window.
        return self.now()

    @staticmethod
    def _wait(seconds: int, cancel: Any) -> None:
        if cancel is None:
            time.sleep(seconds)
        elif cancel.wait(seconds):
            log.info("Wait for the next TOTP window was cancelled")
            raise Interrupted()

    def verify(self, otp: str, for_time: Optional[utils.Timestamp] = None, valid_window: int = 0) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :param valid_window: extends the validity to this many counter ticks before and after the current one
        :returns: True if verification succeeded, False otherwise
        """
        if not otp:
            return False
        if for_time is None:
            for_time = time.time()

        counter = self.timecode(for_time)
        for candidate in range(counter - valid_window, counter + valid_window + 1):
            if candidate < 0:
                continue
            if utils.strings_equal(str(otp), self.generate_otp(candidate)):
                return True
        return False

    def timecode(self, for_time: utils.Timestamp) -> int:
        """
        Time-step counter for a timestamp: floor(unix seconds / interval).
        """
        return utils.to_seconds(for_time) // self.interval

# Ready --(remaining < min_valid_seconds)--> Waiting --> Computing --> Done
#   \_________________________________________________/^
#
# t = 1_000_000_048, interval 30: remaining = 2
#   fresh(5)  -> sleep(2) -> counter 33333335 instead of 33333334
#   fresh(2)  -> no wait  -> counter 33333334
