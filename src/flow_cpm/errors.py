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
class FlowCPMError(Exception):
    """Base class for all errors raised by the flow graph engine."""


class ParseError(FlowCPMError, ValueError):
    """Malformed distribution expression or activity definition value."""


class ValidationError(FlowCPMError, ValueError):
    """Distribution parameters out of their domain (e.g. min > mode)."""


class ConfigError(FlowCPMError, ValueError):
    """Invalid run configuration (run count, percentiles, definition layout)."""


class StructuralError(FlowCPMError, RuntimeError):
    """The graph can not be evaluated: cycles, missing or extra predecessors."""


class UnknownDistributionError(ParseError, StructuralError):
    """The distribution name is not registered."""
