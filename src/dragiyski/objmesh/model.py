import numpy


def vec3(x=0.0, y=0.0, z=0.0):
    return numpy.array([x, y, z], dtype=numpy.float32)


def colour(r=0.0, g=0.0, b=0.0, a=0.0):
    return numpy.array([r, g, b, a], dtype=numpy.float32)


def _index_array(values):
    if values is None:
        return None
    return numpy.array(values, dtype=numpy.uint32).reshape(3)


def _optional_equal(x, y):
    if x is None or y is None:
        return x is None and y is None
    return numpy.array_equal(x, y)


class Face:
    """A triangle as three parallel zero-based index arrays.

    ``texcoord`` and ``normal`` are ``None`` when the source face did not
    carry those indices.
    """

    def __init__(self, vertex, texcoord=None, normal=None):
        self.vertex = _index_array(vertex)
        self.texcoord = _index_array(texcoord)
        self.normal = _index_array(normal)

    @property
    def has_texcoord(self):
        return self.texcoord is not None

    @property
    def has_normal(self):
        return self.normal is not None

    @property
    def layout(self):
        if self.has_texcoord and self.has_normal:
            return 'v/t/n'
        if self.has_texcoord:
            return 'v/t'
        if self.has_normal:
            return 'v//n'
        return 'v'

    def __eq__(self, other):
        if not isinstance(other, Face):
            return NotImplemented
        return (
            numpy.array_equal(self.vertex, other.vertex)
            and _optional_equal(self.texcoord, other.texcoord)
            and _optional_equal(self.normal, other.normal)
        )

    def __repr__(self):
        fields = ['vertex=%r' % self.vertex.tolist()]
        if self.has_texcoord:
            fields.append('texcoord=%r' % self.texcoord.tolist())
        if self.has_normal:
            fields.append('normal=%r' % self.normal.tolist())
        return 'Face(%s)' % ', '.join(fields)


class Material:
    # Only the diffuse channel (Kd) is kept; alpha is never written.
    def __init__(self, name: str, diffuse=None):
        self.name = name
        self.diffuse = colour() if diffuse is None else numpy.array(diffuse, dtype=numpy.float32).reshape(4)

    def __eq__(self, other):
        if not isinstance(other, Material):
            return NotImplemented
        return self.name == other.name and numpy.array_equal(self.diffuse, other.diffuse)

    def __repr__(self):
        return 'Material(%r, diffuse=%r)' % (self.name, self.diffuse.tolist())


class SubMesh:
    def __init__(self, material_name: str, material=None, faces=None):
        self.material_name = material_name
        self.material = material
        self.faces = [] if faces is None else list(faces)

    def __eq__(self, other):
        if not isinstance(other, SubMesh):
            return NotImplemented
        return (
            self.material_name == other.material_name
            and self.material == other.material
            and self.faces == other.faces
        )

    def __repr__(self):
        return 'SubMesh(%r, faces=%d)' % (self.material_name, len(self.faces))


class Mesh:
    def __init__(self, name='', vertices=None, normals=None, sub_meshes=None):
        self.name = name
        self.vertices = self._vector_array(vertices)
        self.normals = self._vector_array(normals)
        self.sub_meshes = [] if sub_meshes is None else list(sub_meshes)

    @staticmethod
    def _vector_array(values):
        if values is None:
            values = []
        return numpy.array(values, dtype=numpy.float32).reshape((-1, 3))

    @property
    def face_count(self):
        return sum(len(sub_mesh.faces) for sub_mesh in self.sub_meshes)

    def indices(self, material_name=None):
        """Vertex indices of every face as an ``(F, 3)`` uint32 array.

        With ``material_name`` only the sub-meshes using that material are
        included, in file order.
        """
        faces = [
            face.vertex
            for sub_mesh in self.sub_meshes
            if material_name is None or sub_mesh.material_name == material_name
            for face in sub_mesh.faces
        ]
        if len(faces) <= 0:
            return numpy.empty((0, 3), dtype=numpy.uint32)
        return numpy.array(faces, dtype=numpy.uint32)

    def __eq__(self, other):
        if not isinstance(other, Mesh):
            return NotImplemented
        return (
            self.name == other.name
            and numpy.array_equal(self.vertices, other.vertices)
            and numpy.array_equal(self.normals, other.normals)
            and self.sub_meshes == other.sub_meshes
        )

    def __repr__(self):
        return 'Mesh(%r, vertices=%d, normals=%d, sub_meshes=%r)' % (
            self.name, len(self.vertices), len(self.normals), self.sub_meshes
        )
