""" Interactive prompt using prompt_toolkit.

Every line entered is assembled (or disassembled) on its own. A line that
fails is reported, and the session continues with the next one.
"""

import logging
import os
from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.lexers import PygmentsLexer
from pygments.lexers import GasLexer

from .. import __version__
from ..common import QuickAsmError
from .asm import emit_words, emit_disassembly


logger = logging.getLogger('interactive')

HISTORY_FILE = os.path.join(os.path.expanduser('~'), '.quickasm_history')
QUIT_COMMANDS = ('quit', 'exit')


class InteractiveSession:
    """ Read eval print loop around the encode and decode pipelines """
    def __init__(self, toolchain, disas=False, color='auto', session=None):
        self.toolchain = toolchain
        self.disas = disas
        self.color = color
        if session is None:
            lexer = None if disas else PygmentsLexer(GasLexer)
            session = PromptSession(
                history=FileHistory(HISTORY_FILE), lexer=lexer)
        self.session = session

    @property
    def prompt_text(self):
        return 'disas> ' if self.disas else 'asm> '

    def run(self):
        mode = 'disassembling' if self.disas else 'assembling'
        print('quickasm {}, {} with {}'.format(
            __version__, mode, self.toolchain.prefix))
        print('Type quit or press Ctrl-D to leave')
        while True:
            try:
                line = self.session.prompt(self.prompt_text)
            except KeyboardInterrupt:
                continue
            except EOFError:
                break

            line = line.strip()
            if line in QUIT_COMMANDS:
                break
            if line:
                self.handle(line)

    def handle(self, line):
        """ Process a single line of input """
        try:
            if self.disas:
                # Allow several words on one line:
                words = '\n'.join(line.split())
                emit_disassembly(words, self.toolchain, color=self.color)
            else:
                emit_words(line, self.toolchain)
        except QuickAsmError as ex:
            logger.error(ex.msg)
            details = ex.details()
            if details:
                print(details)
