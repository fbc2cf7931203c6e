""" Invocation of the external GNU binutils programs.

The four programs of a toolchain share a common prefix, for example
``arm-none-eabi-as`` and ``arm-none-eabi-objdump``.
"""

import enum
import logging
import subprocess
from ..common import ToolFailure


logger = logging.getLogger('toolchain')

DEFAULT_PREFIX = 'arm-none-eabi'


class ToolRole(enum.Enum):
    """ The part a program plays in a pipeline, with its name suffix """
    ASSEMBLER = 'as'
    LINKER = 'ld'
    EXTRACTOR = 'objcopy'
    DISASSEMBLER = 'objdump'


class Toolchain:
    """ A configured set of external programs.

    Args:
        prefix: the toolchain prefix, like 'arm-none-eabi'
        machine: architecture name for the disassembler. When not given,
            it is taken from the prefix.
        as_args: extra arguments appended to each assembler call
        ld_args: extra arguments appended to each linker call
    """
    def __init__(self, prefix=DEFAULT_PREFIX, machine=None, as_args=(),
                 ld_args=()):
        self.prefix = prefix
        self.machine = machine
        self.as_args = tuple(as_args)
        self.ld_args = tuple(ld_args)

    def __repr__(self):
        return 'Toolchain({})'.format(self.prefix)

    def program(self, role):
        """ Get the program name for the given role """
        return '{}-{}'.format(self.prefix, role.value)

    def arch(self):
        """ Determine the architecture name passed to the disassembler.

        Take the machine if one was given, otherwise use the part of the
        prefix before the first dash.
        """
        if self.machine:
            return self.machine
        return self.prefix.split('-', 1)[0]

    def run(self, role, args, cwd=None):
        """ Run one program and return its standard output as text.

        Raises ToolFailure when the program is missing or exits with a
        non-zero status.
        """
        program = self.program(role)
        command = [program] + list(args)
        logger.debug('%s', ' '.join(command))
        try:
            result = subprocess.run(
                command, cwd=cwd,
                stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        except FileNotFoundError:
            raise ToolFailure(
                program, '{}: program not found'.format(program))

        stderr = result.stderr.decode('utf8', errors='replace')
        if result.returncode != 0:
            raise ToolFailure(program, stderr, result.returncode)
        if stderr:
            logger.debug('%s: %s', program, stderr.rstrip())
        return result.stdout.decode('utf8', errors='replace')
