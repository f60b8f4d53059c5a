#!/usr/bin/env python
""" Declarative form validation: schema in, error messages out """

from setuptools import setup, find_packages

setup(
    # https://setuptools.pypa.io/en/latest/references/keywords.html
    name='formschema',
    version='0.1.0',
    author='formschema developers',

    license='BSD',
    description=__doc__,
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    keywords=['validation', 'forms'],

    packages=find_packages(exclude=['tests']),
    scripts=[],
    entry_points={},

    python_requires='>= 3.7',
    install_requires=[
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    include_package_data=True,

    platforms='any',
    classifiers=[
        # https://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
