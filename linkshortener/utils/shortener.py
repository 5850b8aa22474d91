"""Shortcode generation utility

This module provides a helper function for generating random, fixed-length
Base62 shortcodes.

Functions:
    generate_shortcode(length=6, rng=None):
        Generate a random shortcode suitable for use as a URL slug.

Example:
    >>> import random
    >>> from linkshortener.utils import generate_shortcode
    >>> code = generate_shortcode(6, rng=random.Random(42))
    >>> len(code)
    6
"""

import random

from linkshortener.constants import Shortcode


ALPHABET = Shortcode.ALPHABET
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits

_default_rng = random.Random()


def generate_shortcode(length: int = Shortcode.DEFAULT_LENGTH, rng: random.Random | None = None) -> str:
    """Generate a random Base62 shortcode.

    The generator gives no uniqueness guarantee on its own. Callers which need
    unique codes (the code registry) must check for collisions and retry.
    Tests get deterministic output by injecting a seeded `random.Random`.

    Args:
        length (int, optional):
            Number of characters in the shortcode. Defaults to 6, giving
            62**6 (~5.7e10) possible codes.

        rng (random.Random, optional):
            Random source. Defaults to a module-level `random.Random` instance.

    Returns:
        str: A random alphanumeric shortcode of exactly `length` characters.

    Raises:
        TypeError: If length is not an integer.
        ValueError: If length is outside the allowed shortcode bounds (3-20).
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if not Shortcode.MIN_LENGTH <= length <= Shortcode.MAX_LENGTH:
        raise ValueError(
            f'Length must be between {Shortcode.MIN_LENGTH} and {Shortcode.MAX_LENGTH} (given value: {length}).'
        )

    rng = rng or _default_rng
    return ''.join(rng.choices(ALPHABET, k=length))
