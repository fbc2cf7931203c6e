""" Conversion between raw machine code and printable word tokens.

A raw image is split into tokens in a fixed order:

- full 32-bit little endian words,
- then one 16-bit little endian word, when 2 or 3 bytes remain,
- then the last remaining byte, printed in decimal.

For example:

    >>> from quickasm.utils.words import format_words
    >>> list(format_words(bytes([0x01, 0x02, 0x03])))
    ['0201', '[3]']

The reverse direction, :func:`pack_words`, only knows about full 32-bit
words. Encoding an image whose length is not a multiple of four and packing
the tokens again does not give back the same image.
"""

import re
import struct
from ..common import FormatError
from .chunk import chunks


class WordToken:
    """ Base class of a printable unit of machine code """
    size = 0

    def __eq__(self, other):
        return type(self) is type(other) and self.key() == other.key()

    def __hash__(self):
        return hash((type(self), self.key()))

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, str(self))

    def key(self):
        raise NotImplementedError()


class Word32(WordToken):
    """ A full 32-bit word """
    size = 4

    def __init__(self, value):
        self.value = value

    def key(self):
        return self.value

    def __str__(self):
        return '{:08x}'.format(self.value)


class Word16(WordToken):
    """ A 16-bit half word taken from the tail of an image """
    size = 2

    def __init__(self, value):
        self.value = value

    def key(self):
        return self.value

    def __str__(self):
        return '{:04x}'.format(self.value)


class TailBytes(WordToken):
    """ Remaining bytes that do not make up a half word """
    def __init__(self, data):
        self.data = bytes(data)

    @property
    def size(self):
        return len(self.data)

    def key(self):
        return self.data

    def __str__(self):
        return '[{}]'.format(' '.join(str(b) for b in self.data))


def split_words(data):
    """ Split the given bytes into word tokens.

    This is a generator; it makes a single pass over the data and every
    byte ends up in exactly one token.
    """
    for piece in chunks(data, size=4):
        if len(piece) == 4:
            yield Word32(struct.unpack('<I', piece)[0])
        else:
            if len(piece) >= 2:
                yield Word16(struct.unpack('<H', piece[:2])[0])
                piece = piece[2:]
            if piece:
                yield TailBytes(piece)


def format_words(data):
    """ Produce the printable tokens for the given bytes """
    for token in split_words(data):
        yield str(token)


HEX_WORD = re.compile(r'[0-9a-fA-F]+')


def parse_word(token):
    """ Parse a single hexadecimal token into a 32-bit value """
    if not HEX_WORD.fullmatch(token):
        raise FormatError(token)
    value = int(token, 16)
    if value > 0xffffffff:
        raise FormatError(token, 'value does not fit in 32 bits')
    return value


def pack_words(text):
    """ Pack newline separated hexadecimal words into little endian bytes.

        >>> pack_words('1\\n2')
        b'\\x01\\x00\\x00\\x00\\x02\\x00\\x00\\x00'
    """
    data = bytearray()
    for line in text.split('\n'):
        token = line.strip()
        if not token:
            continue
        data.extend(struct.pack('<I', parse_word(token)))
    return bytes(data)
