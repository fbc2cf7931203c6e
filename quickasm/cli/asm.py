""" Show the machine code words of assembly instructions.

The instruction text is taken from the command line, or read from standard
input when not given. Each 32-bit word of the result is printed on its own
line. With --disas, the input is instead a list of hexadecimal 32-bit words
(one per line) which are disassembled.

Examples:

    $ quickasm 'mov r0, r1'
    $ quickasm -p riscv64-unknown-elf 'addi a0, a0, 1'
    $ quickasm -d e1a00001
"""


import argparse
import sys
from .base import ArgumentParser, base_parser, toolchain_parser, LogSetup
from .base import get_toolchain_from_args
from .. import api
from ..utils.highlight import COLOR_CHOICES, use_color, highlight_disassembly
from ..utils.words import format_words


parser = ArgumentParser(
    prog='quickasm',
    usage='%(prog)s [OPTIONS] INSTRUCTION',
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    parents=[base_parser, toolchain_parser])
parser.add_argument(
    'instruction', nargs='?',
    help='instruction text, standard input is used when omitted')
parser.add_argument(
    '--disas', '-d', action='store_true', default=False,
    help='Disassemble')
parser.add_argument(
    '--interactive', '-i', action='store_true', default=False,
    help='Read instructions from an interactive prompt')
parser.add_argument(
    '--color', choices=COLOR_CHOICES, default='auto',
    help='Highlight disassembly output (default: auto)')


def emit_words(source, toolchain, file=None):
    """ Assemble source and print one word token per line """
    file = file or sys.stdout
    for token in format_words(api.encode(source, toolchain)):
        print(token, file=file)


def emit_disassembly(words, toolchain, color='never', file=None):
    """ Disassemble hexadecimal words and print the disassembler output """
    file = file or sys.stdout
    text = api.decode(words, toolchain)
    if text and use_color(color, file):
        text = highlight_disassembly(text)
    file.write(text)


def asm(args=None):
    """ Run quickasm from command line """
    args = parser.parse_args(args)
    with LogSetup(args):
        toolchain = get_toolchain_from_args(args)
        if args.interactive:
            from .interactive import InteractiveSession
            InteractiveSession(
                toolchain, disas=args.disas, color=args.color).run()
            return

        if args.instruction is None:
            text = sys.stdin.read()
        else:
            text = args.instruction

        if args.disas:
            emit_disassembly(text, toolchain, color=args.color)
        else:
            emit_words(text, toolchain)


main = asm


if __name__ == '__main__':
    asm()
