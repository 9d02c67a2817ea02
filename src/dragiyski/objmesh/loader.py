import logging
from pathlib import Path

from .errors import ReadFailure
from .material import parse_materials
from .wavefront import parse_obj

logger = logging.getLogger(__name__)


def read_bytes(path):
    return Path(path).read_bytes()


def _read_text(path, read_file):
    try:
        data = read_file(path)
    except OSError as e:
        raise ReadFailure('cannot read file: %s' % (e.strerror or e), path) from e
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise ReadFailure('file is not valid UTF-8: %s' % e.reason, path) from e


def load_obj(obj_path, mtl_path, read_file=read_bytes):
    """Load a mesh and its material library.

    ``read_file`` maps a path to the file's bytes. Any ``mtllib`` line in the
    OBJ file is ignored in favour of ``mtl_path``; the library is parsed first
    so that ``usemtl`` can resolve materials immediately.
    """
    obj_text = _read_text(obj_path, read_file)
    mtl_text = _read_text(mtl_path, read_file)
    materials = parse_materials(mtl_text, source=str(mtl_path))
    mesh = parse_obj(obj_text, materials, source=str(obj_path))
    logger.info(
        'Loaded %s: %d vertices, %d faces, %d materials',
        obj_path, len(mesh.vertices), mesh.face_count, len(materials)
    )
    return mesh
