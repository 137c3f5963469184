"""
rdfnode setup script.

Proudly ripped from https://github.com/pypa/sampleproject/blob/master/setup.py
"""

import sys

# Always prefer setuptools over distutils
from setuptools import setup, find_packages
# To use a consistent encoding
from codecs import open
from os import path

import rdfnode


# ``pytest_runner`` is referenced in ``setup_requires``.
# See https://github.com/pytest-dev/pytest-runner#conditional-requirement
needs_pytest = {'pytest', 'test', 'ptr'}.intersection(sys.argv)
pytest_runner = ['pytest-runner'] if needs_pytest else []


# Get the long description from the README file
readme_fpath = path.join(path.dirname(rdfnode.basedir), 'README.rst')
with open(readme_fpath, encoding='utf-8') as f:
    long_description = f.read()


# Great reference read about dependency management:
# https://caremad.io/posts/2013/07/setup-vs-requirement/
install_requires = [
    'PyYAML',
    'rdflib>=6.2',
]

tests_require = [
    'pytest',
]


setup(
    name='rdfnode',
    version=rdfnode.release,

    description='A single RDF resource with multi-valued properties.',
    long_description=long_description,

    license='Apache License Version 2.0',

    zip_safe=False,

    # https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 3 - Alpha',

        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',

        'License :: OSI Approved :: Apache Software License',

        'Natural Language :: English',

        'Operating System :: MacOS',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: POSIX :: Linux',

        'Programming Language :: Python :: 3',

        'Topic :: Software Development :: Libraries',
    ],

    keywords='rdf linked-data',

    python_requires='>=3.8',

    packages=find_packages(exclude=['contrib', 'docs', 'tests']),

    install_requires=install_requires,

    setup_requires=[
        'setuptools>=18.0',
    ] + pytest_runner,
    tests_require=tests_require,
    extras_require={
        'test': tests_require,
    },

    include_package_data=True,
    package_data={
        'rdfnode': ['etc.defaults/*.yml'],
    },
)
