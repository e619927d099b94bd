"""Shared fixtures: a fake clock standing in for the time module."""

import pytest

import totpgen.totp


class FakeClock:
    """Replaces ``time`` inside totpgen.totp; sleeping advances the clock."""

    def __init__(self, now=0):
        self.now = now
        self.reads = 0
        self.sleeps = []

    def time(self):
        self.reads += 1
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr(totpgen.totp, "time", fake)
    return fake
