import re

from .errors import MalformedFace
from .model import Face

# Indices are stored as uint32 but, as in most OBJ readers, parsed as int32.
_max_index = 2 ** 31 - 1
_index_pattern = re.compile(r'[+-]?[0-9]+')


def _parse_index(text: str, slot: str, token: str):
    # ASCII digits only: int() would also take '1_0' or non-Latin digits
    if _index_pattern.fullmatch(text) is None:
        raise MalformedFace('%s index of %r is not an integer' % (slot, token))
    index = int(text, 10)
    if index < 1 or index > _max_index:
        raise MalformedFace('%s index of %r is out of range: %d' % (slot, token, index))
    # OBJ indices are 1-based
    return index - 1


def parse_face_vertex(token: str):
    """Split one ``v``, ``v/t``, ``v/t/n`` or ``v//n`` token.

    Returns zero-based ``(vertex, texcoord, normal)``; absent slots are ``None``.
    A trailing empty slot (``v/`` or ``v/t/``) counts as absent.
    """
    segments = token.split('/')
    if len(segments) > 3:
        raise MalformedFace('face vertex %r has more than 3 components' % token)
    segments += [''] * (3 - len(segments))
    position = _parse_index(segments[0], 'vertex', token)
    texcoord = _parse_index(segments[1], 'texture', token) if len(segments[1]) > 0 else None
    normal = _parse_index(segments[2], 'normal', token) if len(segments[2]) > 0 else None
    return position, texcoord, normal


def parse_face(tokens):
    """Parse the three arguments of an ``f`` command into a Face.

    All three tokens must have the same shape; ``1 2/2 3`` is rejected
    instead of silently losing the texture index of the second vertex.
    """
    if len(tokens) != 3:
        raise MalformedFace('expected 3 face vertices, found %d: %r' % (len(tokens), list(tokens)))
    indices = [parse_face_vertex(token) for token in tokens]
    has_texcoord = indices[0][1] is not None
    has_normal = indices[0][2] is not None
    for _, texcoord, normal in indices:
        if (texcoord is not None) != has_texcoord:
            raise MalformedFace('inconsistent face format: texture indices present only in some of %r' % list(tokens))
        if (normal is not None) != has_normal:
            raise MalformedFace('inconsistent face format: normal indices present only in some of %r' % list(tokens))
    return Face(
        [index[0] for index in indices],
        texcoord=[index[1] for index in indices] if has_texcoord else None,
        normal=[index[2] for index in indices] if has_normal else None
    )
