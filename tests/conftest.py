import pytest

CUBE_OBJ = '''
# Blender v2.71 (sub 0) OBJ File: ''
# www.blender.org
mtllib cube.mtl
o Cube
v 1.000000 -1.000000 -1.000000
v 1.000000 -1.000000 1.000000
v -1.000000 -1.000000 1.000000
v -1.000000 -1.000000 -1.000000
v 1.000000 1.000000 -0.999999
v 0.999999 1.000000 1.000001
v -1.000000 1.000000 1.000000
v -1.000000 1.000000 -1.000000
usemtl Material
s off
f 2 3 4
f 8 7 6
f 1 5 6
f 2 6 7
f 7 8 4
f 1 4 8
f 1 2 4
f 5 8 6
f 2 1 6
f 3 2 7
f 3 7 4
f 5 1 8'''

CUBE_MTL = '''
# Blender MTL File: 'None'
# Material Count: 1

newmtl Material
Ns 96.078431
Ka 0.000000 0.000000 0.000000
Kd 0.640000 0.640000 0.640000
Ks 0.500000 0.500000 0.500000
Ni 1.000000
d 1.000000
illum 2'''


@pytest.fixture
def cube_obj():
    return CUBE_OBJ


@pytest.fixture
def cube_mtl():
    return CUBE_MTL


@pytest.fixture
def cube_files(tmp_path):
    obj_path = tmp_path / 'cube.obj'
    mtl_path = tmp_path / 'cube.mtl'
    obj_path.write_text(CUBE_OBJ, encoding='utf-8')
    mtl_path.write_text(CUBE_MTL, encoding='utf-8')
    return obj_path, mtl_path
