#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
    FlowCPM
    Copyright (C) 2025 anonimous

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    You should have received a copy of the GNU General Public License
    along with this program.  If not, see <http://www.gnu.org/licenses/>.

    Please contact with me by E-mail: shkolnick.kun@gmail.com
"""

#==============================================================================
from os.path import abspath, dirname, join
from setuptools import find_packages, setup

SETUP_DIR = abspath(dirname(__file__))

src_dir   = join(SETUP_DIR, "src")

with open(join(src_dir, "flow_cpm", "__init__.py"), encoding="utf-8") as f:
    VERSION = next(l.split("'")[1] for l in f if l.startswith("__version__"))

setup(
    name="flow-cpm",
    version=VERSION,
    description="Monte Carlo completion time estimation for activity flow graphs",
    license="GPL-3.0-or-later",
    #Nowadays setup needs relative paths
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "scipy",
        "pandas",
        "networkx",
        "graphviz",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["flow-cpm=flow_cpm.cli:main"],
    },
)
