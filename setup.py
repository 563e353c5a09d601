# #!/usr/bin/env python

"""setup.py script for py_fixedvector library"""

from setuptools import setup

setup(
    name='py_fixedvector',
    version='1.1.0',
    description='Fixed-dimension numeric vectors for geometry and physics computations',
    packages=['py_fixedvector'],
    package_data={'py_fixedvector': ['.pyfv.toml']},
    python_requires='>=3.9',
    install_requires=[
        'typing_extensions>=4.12',
        'tomli>=2.0; python_version < "3.11"',
    ],
    extras_require={
        'test': ['pytest>=8.0'],
    },
)
