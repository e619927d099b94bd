from typing import Optional


class TOTPError(Exception):
    """
    Base class for errors raised while generating a code.
    """


class InvalidSecret(TOTPError, ValueError):
    """
    The secret contains a character outside the Base32 alphabet.
    """

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__("Invalid Base32 character: {!r}".format(character))


class InvalidConfiguration(TOTPError, ValueError):
    """
    A generation setting is out of its allowed range.
    """


class Interrupted(TOTPError):
    """
    The wait for the next time window was cancelled; no code was produced.
    """

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or "interrupted while waiting for the next time window")
