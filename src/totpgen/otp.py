import hashlib
import hmac
import struct

from . import base32

DIGITS = 6

MAX_COUNTER = 2**64 - 1

#OTP (base class)

class OTP(object):
    """
    Base class for OTP handlers.
    """

    digits = DIGITS

    def __init__(self, s: str) -> None:
        # The secret stays as text; it is decoded again on every call.
        self.secret = s

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        # Implements RFC 4226
        digest = self.hmac_digest(self.byte_secret(), self.int_to_bytestring(input))
        return self.format_code(self.truncate(digest))

    def byte_secret(self) -> bytes:
        # "JBSWY3DPEHPK3PXP" -> b"Hello!\xde\xad\xbe\xef"
        return base32.decode(self.secret)

    @staticmethod
    def int_to_bytestring(i: int) -> bytes:
        """
        Turns a counter into the 8 byte big-endian block that is fed to
        the HMAC along with the secret.
        """
        if i < 0:
            raise ValueError("input must be positive integer")
        if i > MAX_COUNTER:
            raise ValueError("input must fit in 64 bits")
        return struct.pack(">Q", i)

    @staticmethod
    def hmac_digest(key: bytes, message: bytes) -> bytes:
        """
        HMAC-SHA1 of the counter block, always 20 bytes.
        """
        return hmac.new(key, message, hashlib.sha1).digest()

    @staticmethod
    def truncate(digest: bytes) -> int:
        """
        Dynamic truncation (RFC 4226 section 5.3).

        :param digest: HMAC-SHA1 output
        :returns: 31-bit non-negative integer
        """
        offset = digest[-1] & 0xF
        return (
            (digest[offset] & 0x7F) << 24
            | (digest[offset + 1] & 0xFF) << 16
            | (digest[offset + 2] & 0xFF) << 8
            | (digest[offset + 3] & 0xFF)
        )

    def format_code(self, value: int) -> str:
        # 5924 -> "005924"
        return str(value % 10**self.digits).rjust(self.digits, "0")

# Input (counter or time)
#       int_to_bytestring() -> 8 bytes, most significant first
#           hmac_digest(secret, input) -> 20 bytes of hash
#               truncate():
#                       - low nibble of the last byte is the offset (0-15)
#                       - 4 bytes from offset, top bit cleared
#               format_code() -> value % 10^6, zero padded
#
# offset + 3 <= 18 always holds for a 20 byte digest.
