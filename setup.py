#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name='mdspell',
    version='0.1',
    description='Spellchecking of markdown documents for editor linters.',
    author='The xi-editor Authors',
    license='Apache',
    package_dir={'': 'python'},
    packages=find_packages('python', exclude=['tests']),
    install_requires=['regex', 'pyenchant'],
    extras_require={'test': ['pytest']},
    tests_require=['pytest'],
    python_requires='>=3.7',
    zip_safe=False)
