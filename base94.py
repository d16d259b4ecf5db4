#! /usr/bin/env python3

"""Convert binary data to text in any base from 2 to 94, and back.

The input bytes are read as one unsigned integer with the first byte
least significant, then written out as base-N digits, least significant
digit first.  Digit glyphs come from a fixed 94-symbol alphabet, so
bases up to 36 use only "0-9A-Z" and bases up to 62 stay alphanumeric.

Sharp edge: a buffer of only zero bytes (including the empty buffer)
is the integer zero, which encodes to the empty string and decodes to
the empty buffer.  Byte length is therefore not preserved for such
input, and trailing zero bytes of any input are lost likewise.

The base is not recorded in the encoded text.  Decoding with a base
other than the one used to encode yields wrong bytes without error.
"""

import string

__version__ = '0.1.0'

# '!' is left out; space takes its place at the end so that only
# base 94 output can contain it.
ALPHABET = (string.digits + string.ascii_uppercase + string.ascii_lowercase +
            string.punctuation.replace('!', '') + ' ')
LENGTH = len(ALPHABET)
INVERTED = {char: index for (index, char) in enumerate(ALPHABET)}

MIN_BASE = 2
MAX_BASE = LENGTH
DEFAULT_BASE = MAX_BASE


class DecodeError(ValueError):
    """Base class for failures while decoding text back to bytes."""


class InvalidCharacter(DecodeError):
    """Raised for the first character of encoded text that is not
    within ALPHABET.  Carries the character, its code point and its
    zero-based position."""

    def __init__(self, character, position):
        self.character = character
        self.code = ord(character)
        self.position = position
        super().__init__("Invalid character '{}' at position {}"
                         .format(character, position))

    def __reduce__(self):
        return (self.__class__, (self.character, self.position))


def symbol_for(index):
    """Returns glyph of digit value INDEX, which must be within 0..93"""
    return ALPHABET[index]


def index_of(character):
    """Returns digit value of CHARACTER, or None when not in ALPHABET"""
    return INVERTED.get(character)


def encode(data, base=DEFAULT_BASE):
    """Returns bytes-like DATA encoded as string of base BASE digits,
    least significant digit first.  BASE outside 2..94 is a programming
    error and fails the assertion rather than being clamped."""
    assert MIN_BASE <= base <= MAX_BASE, \
        'Base must be between {} and {} (inclusive)'.format(MIN_BASE, MAX_BASE)
    integer = int.from_bytes(data, 'little')
    digits = []
    while integer > 0:
        integer, remainder = divmod(integer, base)
        digits.append(ALPHABET[remainder])

    return ''.join(digits)


def decode(encoded_string, base=DEFAULT_BASE):
    """Returns ENCODED_STRING of base BASE digits as bytes.
    BASE must match the one given to encode(); it cannot be checked here.
    May raise InvalidCharacter"""
    integer = 0
    weight = 1
    for position, char in enumerate(encoded_string):
        value = INVERTED.get(char)
        if value is None:
            raise InvalidCharacter(char, position)
        integer += value * weight
        weight *= base

    return integer.to_bytes((integer.bit_length() + 7) // 8, 'little')
