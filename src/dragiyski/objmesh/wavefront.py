import logging

from .commands import CommandParser
from .errors import MalformedDirective, NoActiveSubMesh, UnknownDirective
from .face import parse_face
from .model import Mesh, SubMesh
from .tokens import parse_vec3

logger = logging.getLogger(__name__)

wavefront_commands = {
    'mtllib': 'parse_mtllib',
    'usemtl': 'parse_usemtl',
    'o': 'parse_object',
    's': 'parse_smoothing',
    'v': 'parse_position',
    'vn': 'parse_normal',
    'f': 'parse_face'
}


def _single_argument(command, args):
    if len(args) != 1:
        raise MalformedDirective('%s expects exactly one argument, found %d' % (command, len(args)))
    return args[0]


class WaveFront(CommandParser):
    commands = wavefront_commands

    def __init__(self, materials=None, source=None):
        super().__init__(source)
        self.materials = {} if materials is None else materials
        self.__name = ''
        self.__position = []
        self.__normal = []
        self.__sub_meshes = []
        self.__current = None

    def parse(self, text: str):
        super().parse(text)
        mesh = Mesh(self.__name, self.__position, self.__normal, self.__sub_meshes)
        logger.debug(
            '%s: %d vertices, %d normals, %d faces in %d sub-meshes',
            self.source or '<text>', len(mesh.vertices), len(mesh.normals), mesh.face_count, len(mesh.sub_meshes)
        )
        return mesh

    def parse_mtllib(self, args):
        # The material library is always handed in by the caller.
        pass

    def parse_usemtl(self, args):
        name = _single_argument('usemtl', args)
        material = self.materials.get(name)
        if material is None:
            logger.debug('%s:%d: material %r is not in the library', self.source or '<text>', self.line_number, name)
        self.__current = SubMesh(name, material)
        self.__sub_meshes.append(self.__current)

    def parse_object(self, args):
        self.__name = _single_argument('o', args)

    def parse_smoothing(self, args):
        pass

    def parse_position(self, args):
        self.__position.append(parse_vec3(args))

    def parse_normal(self, args):
        self.__normal.append(parse_vec3(args))

    def parse_face(self, args):
        if self.__current is None:
            raise NoActiveSubMesh('face before any usemtl')
        self.__current.faces.append(parse_face(args))

    def unknown_command(self, keyword, args):
        raise UnknownDirective('unknown command %r with arguments %r' % (keyword, args))


def parse_obj(text: str, materials=None, source=None):
    """Parse OBJ text into a Mesh.

    ``materials`` is the mapping returned by ``parse_materials``; ``usemtl``
    names missing from it give sub-meshes without a material.
    """
    return WaveFront(materials, source).parse(text)
