#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FlowCPM - Monte Carlo completion time estimation for activity flow graphs
=========================================================================

Projects are trees of serial and parallel activities with probabilistic
durations. A flow graph is evaluated by a deterministic Monte Carlo
simulation that yields the completion time distribution and the
expected critical path.
"""
#==============================================================================
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

__version__ = '0.1.0'

from .errors import (ConfigError, FlowCPMError, ParseError, StructuralError,
                     UnknownDistributionError, ValidationError)
from .stats import AggregatedStatistics, stats_for_sequence
from .generators import ARITY, DurationGenerator, GenerationResults, parse_expression
from .flow_model import AggregationOptions, FlowGraph, Subgraph
from .workdays import BusinessCalendar
from .loader import load, load_definition, load_file, loads
