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
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'src'))

from flow_cpm import FlowGraph


@pytest.fixture
def serial_graph():
    """START → input → Fixed(5) → Fixed(3) → Summary"""
    fg = FlowGraph('Serial', run_count=1000)
    fg.add_serial('Fixed(5)', 'Design')
    fg.add_serial('Fixed(3)', 'Build')
    return fg


@pytest.fixture
def definition():
    return {
        'name': 'Release',
        'runCount': 200,
        'seed': 7,
        'activities': {
            'steps': [
                {'type': 'Fixed(5)', 'name': 'Design'},
                {'type': 'Fixed(3)'},
            ],
            'review': {
                'legal'   : {'type': 'Fixed(4)'},
                'security': {'type': 'Fixed(10)', 'name': 'Audit'},
            },
        },
    }
