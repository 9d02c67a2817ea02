import logging

import numpy
import pytest

from dragiyski.objmesh.cli import index_dtype, main


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger('dragiyski.objmesh')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.mark.parametrize('count, dtype', [
    (0, numpy.uint8),
    (255, numpy.uint8),
    (256, numpy.uint16),
    (65535, numpy.uint16),
    (65536, numpy.uint32),
])
def test_index_dtype(count, dtype):
    assert index_dtype(count) is dtype


def test_summary(cube_files, capsys):
    obj_path, mtl_path = cube_files
    assert main([str(obj_path), '-m', str(mtl_path)]) == 0
    out = capsys.readouterr().out
    assert 'object: Cube' in out
    assert 'vertices: 8' in out
    assert 'faces: 12' in out
    assert 'usemtl Material (Kd 0.64 0.64 0.64): 12 faces' in out


def test_export_buffers(cube_files, tmp_path):
    obj_path, mtl_path = cube_files
    vertex_path = tmp_path / 'vertex.bin'
    index_path = tmp_path / 'index.bin'
    assert main([str(obj_path), '-m', str(mtl_path), '-ov', str(vertex_path), '-oi', str(index_path)]) == 0

    vertex = numpy.frombuffer(vertex_path.read_bytes(), dtype='<f4').reshape((-1, 3))
    assert vertex.shape == (8, 3)
    assert vertex[0].tolist() == [1.0, -1.0, -1.0]

    index = numpy.frombuffer(index_path.read_bytes(), dtype=numpy.uint8).reshape((-1, 3))
    assert index.shape == (12, 3)
    assert index[0].tolist() == [1, 2, 3]
    assert index.max() <= 7


def test_export_single_material(cube_files, tmp_path):
    obj_path, mtl_path = cube_files
    index_path = tmp_path / 'index.bin'
    assert main([str(obj_path), '-m', str(mtl_path), '-oi', str(index_path), '--material', 'Nothing']) == 0
    assert index_path.read_bytes() == b''


def test_parse_error_exit_code(tmp_path, cube_files, capsys):
    _, mtl_path = cube_files
    obj_path = tmp_path / 'broken.obj'
    obj_path.write_text('v 0 0 0\nxyz 1 2 3\n', encoding='utf-8')
    assert main([str(obj_path), '-m', str(mtl_path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'broken.obj:2' in captured.err


def test_missing_file_exit_code(tmp_path, cube_files):
    _, mtl_path = cube_files
    assert main([str(tmp_path / 'missing.obj'), '-m', str(mtl_path)]) == 1


def test_log_file(cube_files, tmp_path):
    obj_path, mtl_path = cube_files
    log_path = tmp_path / 'objmesh.log'
    assert main([str(obj_path), '-m', str(mtl_path), '-v', '--log-file', str(log_path)]) == 0
    logging.getLogger('dragiyski.objmesh').handlers[-1].flush()
    assert 'Loaded' in log_path.read_text(encoding='utf-8')


def test_setup_logging_replaces_handlers(tmp_path):
    from dragiyski.objmesh.logging_config import setup_logging

    setup_logging(logging.INFO)
    logger = setup_logging(logging.DEBUG, str(tmp_path / 'second.log'))
    assert logger.name == 'dragiyski.objmesh'
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2
    assert isinstance(logger.handlers[1], logging.FileHandler)
