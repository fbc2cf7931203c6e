""" Terminal coloring of assembly and disassembly text """

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import ObjdumpLexer


COLOR_CHOICES = ('auto', 'always', 'never')


def use_color(mode, stream):
    """ Decide whether to color output written to stream """
    if mode == 'always':
        return True
    elif mode == 'never':
        return False
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())


def highlight_disassembly(text):
    return highlight(text, ObjdumpLexer(), TerminalFormatter())