# This is free and unencumbered software released into the public domain.
# See https://unlicense.org/ for details.

import os
import pathlib
from setuptools import setup

# The directory containing this file
HERE = pathlib.Path(__file__).parent

# The text of the README file
README = (HERE / "README.md").read_text()

# Get values from the about file
plg_ns = {}
about_path = os.path.join('beetsplug', 'edabo', 'about.py')
with open(HERE / about_path) as about_file:
    exec(about_file.read(), plg_ns)

setup(
    name=plg_ns['__PACKAGE_NAME__'],
    version=plg_ns['__version__'],
    description=plg_ns['__PACKAGE_DESCRIPTION__'],
    author=plg_ns['__author__'],
    url=plg_ns['__PACKAGE_URL__'],
    license='Unlicense',
    long_description=README,
    long_description_content_type='text/markdown',
    platforms='ALL',

    include_package_data=True,
    package_data={'beetsplug.edabo': ['config_default.yml']},
    packages=['beetsplug.edabo'],

    python_requires='>=3.8',

    install_requires=[
        'beets>=1.6.0',
        'confuse>=1.5.0',
        'python-dateutil>=2.8.0',
        'python-mpd2>=3.0.0',
    ],

    extras_require={
        'test': ['pytest', 'coverage'],
    },

    classifiers=[
        'Topic :: Multimedia :: Sound/Audio',
        'License :: CC0 1.0 Universal (CC0 1.0) Public Domain Dedication',
        'Environment :: Console',
        'Programming Language :: Python :: 3',
    ],
)
