"""
Library-wide constants.

Formatting widths and the size at which cofactor expansion starts to
warn about its factorial cost.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormatSettings:
    """Fixed-width rendering used by describe_matrix/describe_vector."""
    width: int
    precision: int
    overflow_limit: float
    overflow_token: str


FORMAT = FormatSettings(
    width=6,
    precision=5,
    overflow_limit=10000.0,
    overflow_token='ovrflw',
)

# Cofactor expansion visits n! terms; 10x10 is already ~3.6 million.
COFACTOR_WARN_SIZE = 9
