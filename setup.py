"""gf2prim setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

import re
from setuptools import setup

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

with open('gf2prim/__init__.py', 'r') as f:
    # NB: avoid importing gf2prim, which parses command line options upon import
    VERSION = re.search(r"__version__ = '(.*)'", f.read()).group(1)

setup(
    name='gf2prim',
    version=VERSION,
    description='gf2prim -- Primitive polynomials and binary fields over GF(2)',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['finite fields', 'Galois fields', 'GF(2)', 'binary fields',
              'primitive polynomials', 'polynomial arithmetic'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license='MIT License',
    packages=['gf2prim'],
    platforms=['any'],
    python_requires='>=3.9',
    extras_require={'test': ['pytest']}
)
