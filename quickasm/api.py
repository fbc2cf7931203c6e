"""
This module contains the high level functions to go from assembly text to
machine code and back.

.. autofunction:: quickasm.api.encode

.. autofunction:: quickasm.api.decode

.. autofunction:: quickasm.api.assemble_words

"""

import logging
from .binutils.layout import link_layout
from .binutils.toolchain import Toolchain, ToolRole
from .binutils.workspace import acquire
from .utils.words import format_words, pack_words


__all__ = ('encode', 'decode', 'assemble_words', 'get_toolchain')

logger = logging.getLogger('api')

SOURCE_FILE = 'insts.s'
OBJECT_FILE = 'insts.o'
ELF_FILE = 'insts.elf'
BINARY_FILE = 'insts.bin'
LAYOUT_FILE = 'memmap.ld'


def get_toolchain(toolchain):
    """ Given a toolchain or a prefix string, return a toolchain """
    if isinstance(toolchain, Toolchain):
        return toolchain
    elif isinstance(toolchain, str):
        return Toolchain(prefix=toolchain)
    else:  # pragma: no cover
        raise ValueError('Invalid toolchain {}'.format(toolchain))


def encode(source, toolchain=None, layout=link_layout):
    """ Assemble and link the given source and return the raw image.

    Args:
        source: the assembly source text.
        toolchain: a :class:`Toolchain` or a toolchain prefix string.
        layout: a callable returning the linker script to link against.

    Returns:
        The bytes of the linked code, starting at address zero.

    Raises:
        ToolFailure: when one of the programs rejects its input. The later
            stages are not run in that case.
    """
    toolchain = get_toolchain(toolchain or Toolchain())
    with acquire() as area:
        source_file = area.write(SOURCE_FILE, source)
        layout_file = area.write(LAYOUT_FILE, layout())
        obj_file = area.path(OBJECT_FILE)
        elf_file = area.path(ELF_FILE)
        bin_file = area.path(BINARY_FILE)

        logger.debug('Assembling')
        toolchain.run(
            ToolRole.ASSEMBLER,
            ['--no-warn', source_file, '-o', obj_file] +
            list(toolchain.as_args))

        logger.debug('Linking')
        toolchain.run(
            ToolRole.LINKER,
            [obj_file, '-T', layout_file, '-o', elf_file] +
            list(toolchain.ld_args))

        logger.debug('Extracting binary')
        toolchain.run(
            ToolRole.EXTRACTOR, [elf_file, '-O', 'binary', bin_file])

        data = area.read(BINARY_FILE)
    logger.debug('Encoded into %s bytes', len(data))
    return data


def assemble_words(source, toolchain=None, layout=link_layout):
    """ Assemble source and return the list of printable word tokens """
    return list(format_words(encode(source, toolchain, layout=layout)))


def decode(words, toolchain=None):
    """ Disassemble newline separated hexadecimal words.

    Every word is taken as a 32-bit little endian value. The disassembler
    output is returned as is.

    Raises:
        FormatError: when a word is not valid hexadecimal or too large.
        ToolFailure: when the disassembler fails.
    """
    toolchain = get_toolchain(toolchain or Toolchain())
    data = pack_words(words)
    if not data:
        logger.debug('Nothing to disassemble')
        return ''

    with acquire() as area:
        bin_file = area.write(BINARY_FILE, data)
        return toolchain.run(
            ToolRole.DISASSEMBLER,
            ['-b', 'binary', '-m', toolchain.arch(), '-D', bin_file])
