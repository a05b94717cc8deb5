#!/usr/bin/env python

from setuptools import setup

with open('README.md') as readme_file:
    readme = readme_file.read()

with open('sqlddl/VERSION') as f:
    version = f.read().lstrip().rstrip()

setup(
    name='sqlddl',
    version=version,
    author='Netherlands Forensic Institute',
    description="Grammar based parser for SQL CREATE TABLE statements",
    long_description=readme+"\n\n",
    packages=['sqlddl'],
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Development Status :: 4 - Beta',
        'Programming Language :: Python :: 3 :: Only',
        'Intended Audience :: Developers',
        'Topic :: Database',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Environment :: Console'
        ],
    keywords='sql ddl parser grammar',
    entry_points={
        'console_scripts': ['sqlddl=sqlddl._cmdline:main'],
        },
    install_requires=[
        'modgrammar'
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.7',
    zip_safe=False,
    package_data={
        # include the VERSION file
        'sqlddl': ['VERSION'],
    }
)
