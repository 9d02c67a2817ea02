from setuptools import setup, find_namespace_packages

setup(
    name='dragiyski-objmesh',
    version='0.1.0',
    description='Wavefront OBJ/MTL reader producing triangle meshes with diffuse materials',
    package_dir={'': 'src'},
    packages=find_namespace_packages(where='src', include=['dragiyski.*']),
    python_requires='>=3.8',
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': [
            'pytest'
        ]
    },
    entry_points={
        'console_scripts': [
            'objmesh=dragiyski.objmesh.cli:main'
        ]
    }
)
