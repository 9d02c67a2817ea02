import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

import numpy

from .errors import WavefrontError
from .loader import load_obj
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def index_dtype(vertex_count):
    if vertex_count < 256:
        return numpy.uint8
    elif vertex_count < 65536:
        return numpy.uint16
    return numpy.uint32


def describe(mesh):
    lines = [
        'object: %s' % (mesh.name if len(mesh.name) > 0 else '<unnamed>'),
        'vertices: %d' % len(mesh.vertices),
        'normals: %d' % len(mesh.normals),
        'faces: %d' % mesh.face_count,
    ]
    for sub_mesh in mesh.sub_meshes:
        if sub_mesh.material is None:
            material = 'missing'
        else:
            material = 'Kd %s' % ' '.join('%g' % x for x in sub_mesh.material.diffuse[0:3])
        lines.append('  usemtl %s (%s): %d faces' % (sub_mesh.material_name, material, len(sub_mesh.faces)))
    return '\n'.join(lines)


def write_buffers(mesh, output_vertices=None, output_indices=None, material_name=None):
    if output_vertices is not None:
        vertex = numpy.ascontiguousarray(mesh.vertices, dtype='<f4')
        with open(output_vertices, 'wb') as file:
            file.write(vertex.tobytes())
        logger.info('Wrote %d vertices to %s', len(vertex), output_vertices)
    if output_indices is not None:
        index = mesh.indices(material_name).astype(numpy.dtype(index_dtype(len(mesh.vertices))).newbyteorder('<'))
        with open(output_indices, 'wb') as file:
            file.write(index.tobytes())
        logger.info('Wrote %d triangles (%s) to %s', len(index), index.dtype.name, output_indices)


def main(argv=None):
    parser = ArgumentParser(
        description='Reads a WaveFront Object file with its material library and reports or exports its geometry.',
        add_help=True
    )
    parser.add_argument('input', type=Path, help='Wavefront Object file to parse')
    parser.add_argument('-m', '--mtl', required=True, type=Path, dest='mtl', help='Material library for the object')
    parser.add_argument('-ov', '--output-vertices', type=Path, dest='output_vertices', help='Output file for the vertex buffer')
    parser.add_argument('-oi', '--output-indices', type=Path, dest='output_indices', help='Output file for the index buffer')
    parser.add_argument('--material', dest='material_name', help='Only export faces using this material')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log parser details')
    parser.add_argument('--log-file', dest='log_file', help='Also write the log to this file')
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        mesh = load_obj(args.input, args.mtl)
    except WavefrontError as e:
        logger.error('%s', e)
        return 1

    print(describe(mesh))
    write_buffers(mesh, args.output_vertices, args.output_indices, args.material_name)
    return 0


if __name__ == '__main__':
    sys.exit(main())
