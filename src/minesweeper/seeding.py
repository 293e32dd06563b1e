"""
Seeded pseudo-random numbers for reproducible mine layouts.

A seed string is folded into a 32-bit state and drives a Mulberry32
generator. The arithmetic reproduces the 32-bit wraparound of the
JavaScript reference exactly, so a given seed string yields the same
layout on every platform.
"""
import struct


# ============================================================================
# Constants
# ============================================================================

UINT32_MASK = 0xFFFFFFFF
MULBERRY32_INCREMENT = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """32-bit multiply keeping the low 32 bits."""
    return (a * b) & UINT32_MASK


def seed_to_state(seed: str) -> int:
    """
    Fold a seed string into a 32-bit integer.

    Uses ``state = state * 31 + code_unit`` over the UTF-16 code units of
    the string, with unsigned 32-bit wraparound.

    Args:
        seed: Any string, including the empty string.

    Returns:
        Integer in [0, 2**32).
    """
    encoded = seed.encode("utf-16-le", "surrogatepass")
    code_units = struct.unpack(f"<{len(encoded) // 2}H", encoded)
    state = 0
    for unit in code_units:
        state = (state * 31 + unit) & UINT32_MASK
    return state


# ============================================================================
# Mulberry32
# ============================================================================

class SeededRandom:
    """
    Mulberry32 generator seeded from a string.

    Mirrors the small part of the ``random.Random`` API that mine placement
    needs.
    """

    def __init__(self, seed: str) -> None:
        self.seed = seed
        self._state = seed_to_state(seed)

    @property
    def state(self) -> int:
        return self._state

    def next_uint32(self) -> int:
        """Advance the generator and return the raw 32-bit output."""
        self._state = (self._state + MULBERRY32_INCREMENT) & UINT32_MASK
        state = self._state
        t = _imul(state ^ (state >> 15), state | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & UINT32_MASK
        return (t ^ (t >> 14)) & UINT32_MASK

    def random(self) -> float:
        """Return the next float in [0, 1)."""
        return self.next_uint32() / _TWO_POW_32

    def randrange(self, stop: int) -> int:
        """Return ``floor(random() * stop)``."""
        return int(self.random() * stop)
