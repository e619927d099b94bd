from .exceptions import InvalidSecret

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

_VALUES = {char: value for value, char in enumerate(ALPHABET)}


def normalize(text: str) -> str:
    """
    Uppercases the secret and drops spaces and ``=`` padding, so
    "jbsw y3dp" and "JBSWY3DP====" both become "JBSWY3DP".
    """
    return text.upper().replace(" ", "").replace("=", "")


def decode(text: str) -> bytes:
    """
    Decodes an RFC 4648 Base32 secret into raw key bytes.

    Padding is optional and any length is accepted: bits left over after the
    last full byte are dropped, as b32decode does for padded input.

    :param text: the secret as shown by an authenticator app
    :returns: key bytes, empty for an empty secret
    :raises InvalidSecret: on a character outside A-Z and 2-7
    """
    output = bytearray()
    buffer = 0
    bits = 0
    for char in normalize(text):
        try:
            value = _VALUES[char]
        except KeyError:
            raise InvalidSecret(char) from None
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            output.append(buffer >> bits)
            # keep only the bits not emitted yet
            buffer &= (1 << bits) - 1
    return bytes(output)

# "JBSWY3DP" -> J=9 B=1 S=18 W=22 Y=24 3=27 D=3 P=15
# 8 chars * 5 bits = 40 bits -> 5 bytes -> b"Hello"
# "ME" -> 10 bits -> one byte b"a", the last 2 bits are dropped
