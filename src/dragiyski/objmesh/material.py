import logging

from .commands import CommandParser
from .errors import MalformedDirective, MalformedNumber, NoActiveMaterial
from .model import Material
from .tokens import parse_float_list

logger = logging.getLogger(__name__)


class MaterialLibrary(CommandParser):
    # Everything but the diffuse colour is skipped (Ns, Ka, Ks, Ni, d, illum, map_*, ...)
    commands = {
        'newmtl': 'parse_newmtl',
        'Kd': 'parse_diffuse',
    }

    def __init__(self, source=None):
        super().__init__(source)
        self.materials = {}
        self.__current = None
        self.__ignored = set()

    def parse(self, text: str):
        super().parse(text)
        if len(self.__ignored) > 0:
            logger.debug('%s: ignored material commands: %s', self.source or '<text>', ', '.join(sorted(self.__ignored)))
        logger.debug('%s: %d materials', self.source or '<text>', len(self.materials))
        return self.materials

    def parse_newmtl(self, args):
        if len(args) != 1:
            raise MalformedDirective('newmtl expects exactly one name, found %d arguments' % len(args))
        # a repeated name replaces the earlier declaration
        self.__current = self.materials[args[0]] = Material(args[0])

    def parse_diffuse(self, args):
        if self.__current is None:
            raise NoActiveMaterial('Kd appears before any newmtl')
        values = parse_float_list(args)
        if len(values) < 3:
            raise MalformedNumber('Kd expects 3 channels, found %d' % len(values), len(values))
        self.__current.diffuse[0:3] = values[0:3]

    def unknown_command(self, keyword, args):
        self.__ignored.add(keyword)


def parse_materials(text: str, source=None):
    """Parse MTL text into a ``{name: Material}`` mapping."""
    return MaterialLibrary(source).parse(text)
