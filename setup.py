"""The script for building the picklist package."""

from pathlib import Path

from setuptools import find_packages, setup

DESCRIPTION = (
    'A dropdown (select box) state machine with ports for the state store '
    'and the scroll side effect, plus a Telegram inline keyboard adapter.'
)

with Path('requirements.txt').open(encoding='utf-8') as outfile:
    requirements = outfile.read().splitlines()

setup(
    name='picklist',
    version='0.1.0',
    description=DESCRIPTION,
    long_description=DESCRIPTION,
    license='Apache License, Version 2.0',
    packages=find_packages(exclude=('tests.*', 'tests')),
    include_package_data=True,
    data_files=[('', ['requirements.txt'])],
    install_requires=requirements,
    python_requires='>=3.10',
    keywords='python dropdown select widget state machine telegram',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Software Development :: User Interfaces',
    ],
)
