"""
Base class for synthetic data generators.

Provides seeded, deterministic hashing so the same input always produces
the same output for a given seed.
"""

import hashlib
from abc import ABC


class BaseSyntheticGenerator(ABC):
    """Base class for deterministic synthetic data generators.

    Attributes:
        seed: Seed mixed into every hash.
    """

    def __init__(self, *, seed: int = 42):
        self.seed = seed

    def _hash_string(self, s: str) -> int:
        """Compute a stable, non-negative hash of a string.

        MD5 is used for stability across processes, not for security.

        Args:
            s: String to hash.

        Returns:
            The hash as an integer.
        """
        combined = f"{self.seed}:{s}"
        return int(hashlib.md5(combined.encode()).hexdigest(), 16)
