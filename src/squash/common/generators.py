"""Identifier, random string and timer helpers."""
from __future__ import annotations
import random
import secrets
import string
import time

ALPHABET = string.ascii_letters + string.digits


class Uuid4:
    """Version 4 UUID strings from a non-cryptographic source."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()

    def generate_uuid(self) -> str:
        r = self.rng.randint
        return "%04x%04x-%04x-%04x-%04x-%04x%04x%04x" % (
            r(0, 0xFFFF),
            r(0, 0xFFFF),
            r(0, 0xFFFF),
            r(0, 0x0FFF) | 0x4000,
            r(0, 0x3FFF) | 0x8000,
            r(0, 0xFFFF),
            r(0, 0xFFFF),
            r(0, 0xFFFF),
        )


class Crypto:
    """Random strings from the `secrets` CSPRNG."""

    def generate_string(self, length: int = 25) -> str:
        if length < 0:
            raise ValueError("length must be >= 0")
        return "".join(secrets.choice(ALPHABET) for _ in range(length))


class Milliseconds:
    def wait(self, period: int) -> None:
        if period < 0:
            raise ValueError("period must be >= 0")
        time.sleep(period / 1000)
