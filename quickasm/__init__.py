""" Turn assembly text into machine code words and back, using a GNU
binutils cross toolchain.

Example usage:

>>> from quickasm.utils.words import format_words
>>> list(format_words(bytes([1, 2, 3, 4, 5, 6])))
['04030201', '0605']

"""

import sys

# Define version here. Used in the setup script and the version output:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))


# Assert python version:
assert sys.version_info.major == 3, "Needs to be run in python version 3.x"
