import logging

from .errors import WavefrontError

logger = logging.getLogger(__name__)


def strip_comment(line: str):
    try:
        hash_index = line.index('#')
    except ValueError:
        hash_index = -1
    if hash_index >= 0:
        line = line[0:hash_index]
    return line.strip()


class CommandParser:
    """Line oriented reader shared by the OBJ and MTL formats.

    Subclasses map each keyword to the name of a method in ``commands``;
    the method receives the remaining tokens of the line. Keywords missing
    from the table go to ``unknown_command``.
    """

    commands = {}

    def __init__(self, source=None):
        self.source = source
        self.line_number = 0

    def parse(self, text: str):
        self.line_number = 0
        for line in text.split('\n'):
            self.line_number += 1
            line = strip_comment(line)
            if len(line) <= 0:
                continue
            # single space only: a double space leaves an empty token behind
            tokens = line.split(' ')
            try:
                method = self.commands.get(tokens[0])
                if method is None:
                    self.unknown_command(tokens[0], tokens[1:])
                else:
                    getattr(self, method)(tokens[1:])
            except WavefrontError as e:
                if e.line is None:
                    e.line = self.line_number
                    e.tokens = tokens
                if e.source is None:
                    e.source = self.source
                raise
        logger.debug('%s: read %d lines', self.source or '<text>', self.line_number)

    def unknown_command(self, keyword, args):
        raise NotImplementedError
