"""
   Error handling routines
   Log formatting
"""


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class QuickAsmError(Exception):
    """ Base class for all errors that abort a pipeline run """
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def details(self):
        """ Extra diagnostic text shown below the message """
        return ''


class ResourceError(QuickAsmError):
    """ The staging area could not be created or written """
    pass


class ToolFailure(QuickAsmError):
    """ An external program exited with a non-zero status """
    def __init__(self, program, stderr, returncode=None):
        if returncode is None:
            msg = '{} failed'.format(program)
        else:
            msg = '{} failed with exit status {}'.format(program, returncode)
        super().__init__(msg)
        self.program = program
        self.stderr = stderr
        self.returncode = returncode

    def details(self):
        return self.stderr.rstrip('\n')


class FormatError(QuickAsmError):
    """ A token could not be parsed as a 32-bit hexadecimal word """
    def __init__(self, token, reason='not a 32-bit hexadecimal word'):
        super().__init__('Invalid token {!r}: {}'.format(token, reason))
        self.token = token
