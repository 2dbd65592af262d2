"""Short key generation utility

Functions:
    generate_shortcode(length=6, alphabet=Shortcode.ALPHABET):
        Generate a random string suitable for use as a URL slug.

Example:
    >>> from urlshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'aZ3kT9'
"""

import secrets

from urlshortener.constants import Shortcode


def generate_shortcode(length: int = Shortcode.LENGTH, alphabet: str = Shortcode.ALPHABET) -> str:
    """Generate a random short key.

    Every character is drawn uniformly and independently (with replacement)
    from the Base62 alphabet [a-zA-Z0-9], using the operating system's
    CSPRNG. 62^6 ≈ 5.68e10 possible keys at the default length.

    Args:
        length (int, optional):
            Number of characters. Defaults to 6.

        alphabet (str, optional):
            Characters to sample from. Defaults to the Base62 alphabet.

    Returns:
        str: A random alphanumeric key.

    NOTE:
        Uniqueness is not guaranteed. Callers do not check for collisions.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    if not alphabet:
        raise ValueError('Alphabet must be a non-empty string.')

    return ''.join(secrets.choice(alphabet) for _ in range(length))
