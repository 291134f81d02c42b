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
# Library wide defaults, may be overridden by FlowGraph arguments,
# activity definitions and command line options.

# Percentiles reported when a definition does not list its own
PERCENTILES = (50, 95)

# Seed of the single random stream used for an evaluation
RANDOM_SEED = 0

# Names of the implicit nodes
START_NAME    = 'START'
ROOT_NAME     = 'input'
JOIN_NAME     = 'Summary'
SERIAL_PREFIX = 'serial-'

# Estimated completion date format
ECD_TIME_FORMAT = '%a, %d %b %Y'

# Histogram bins of the completion time plot
HISTOGRAM_BINS = 100

# Diagram colors
CRITICAL_COLOR = '#ff0000'
DEFAULT_COLOR  = '#000000'
