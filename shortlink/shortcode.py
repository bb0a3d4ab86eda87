"""Short code generation."""

import math
import random
import secrets
import string
import threading
from typing import Optional

from .errors import GenerationError


class ShortCodeGenerator:
    """Generate fixed-length, non-repeating short codes.

    A process-local counter is mapped through an affine permutation of the
    code space, ``(n * multiplier + offset) mod 62**length``. The multiplier
    is coprime with the space, so each counter value yields a distinct code
    until the space is used up. Multiplier and offset are derived from the
    seed, which is random per process unless given.

    Safe to share between concurrent callers.
    """

    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9

    def __init__(self, length: int = 7, seed: Optional[int] = None):
        """Initialize short code generator.

        Args:
            length: Length of every generated code
            seed: Optional seed for the permutation (random if not specified)

        Raises:
            GenerationError: If length is not a positive integer
        """
        if not isinstance(length, int) or length < 1:
            raise GenerationError(f"Invalid short code length: {length!r}")

        self.length = length
        self.space = len(self.BASE62_CHARS) ** length

        if seed is None:
            seed = secrets.randbits(64)
        rng = random.Random(seed)
        self._offset = rng.randrange(self.space)
        self._multiplier = self._pick_multiplier(rng)

        self._counter = 0
        self._lock = threading.Lock()

    def _pick_multiplier(self, rng: random.Random) -> int:
        while True:
            candidate = rng.randrange(1, self.space)
            if math.gcd(candidate, self.space) == 1:
                return candidate

    @property
    def issued(self) -> int:
        """Number of codes handed out so far."""
        with self._lock:
            return self._counter

    def generate(self) -> str:
        """Generate the next short code.

        Returns:
            Short code of ``self.length`` base62 characters

        Raises:
            GenerationError: If every code in the space has been issued
        """
        with self._lock:
            if self._counter >= self.space:
                raise GenerationError(
                    f"Short code space exhausted after {self._counter} codes "
                    f"(length={self.length})"
                )
            sequence_number = self._counter
            self._counter += 1

        value = (sequence_number * self._multiplier + self._offset) % self.space
        return self._int_to_base62(value).rjust(self.length, self.BASE62_CHARS[0])

    def _int_to_base62(self, num: int) -> str:
        """Convert integer to base62 string.

        Args:
            num: Integer to convert

        Returns:
            Base62 string
        """
        if num == 0:
            return self.BASE62_CHARS[0]

        result = []
        base = len(self.BASE62_CHARS)

        while num > 0:
            num, remainder = divmod(num, base)
            result.append(self.BASE62_CHARS[remainder])

        return ''.join(reversed(result))

    @staticmethod
    def is_valid_format(code: str) -> bool:
        """Check if code only uses the base62 alphabet.

        Args:
            code: Code to validate

        Returns:
            True if valid format
        """
        return bool(code) and all(c in ShortCodeGenerator.BASE62_CHARS for c in code)
