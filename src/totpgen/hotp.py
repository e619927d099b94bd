from . import utils
from .otp import OTP


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.

    Nothing is stored between calls; the caller owns the counter.
    """

    def at(self, count: int) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(count)
    # hotp = HOTP("GEZDGNBVGY3TQOJQGEZDGNBVGY3TQOJQ")
    # hotp.at(0) -> "755224"
    # hotp.at(1) -> "287082"

    def verify(self, otp: str, counter: int) -> bool:
        """
        Verifies the OTP passed in against the OTP for the given counter.

        :param otp: the OTP to check against
        :param counter: the OTP HMAC counter
        """
        return utils.strings_equal(str(otp), str(self.at(counter)))
