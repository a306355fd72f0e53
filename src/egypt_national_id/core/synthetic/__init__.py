"""
Synthetic National ID generation.

Builds structurally valid National IDs for tests, demos and data masking.
Generated IDs carry no legal meaning.

Main components:
- BaseSyntheticGenerator: seeded deterministic hashing
- NationalIdGenerator: builds and imitates National IDs
"""

from egypt_national_id.core.synthetic.base import BaseSyntheticGenerator
from egypt_national_id.core.synthetic.national_id_generator import (
    NationalIdGenerationResult,
    NationalIdGenerator,
)

__all__ = [
    "BaseSyntheticGenerator",
    "NationalIdGenerationResult",
    "NationalIdGenerator",
]
