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
import json
import logging

from . import config
from .errors import ConfigError, FlowCPMError
from .flow_model import FlowGraph

logger = logging.getLogger(__name__)

_TRUE  = ('1', 't', 'T', 'TRUE', 'true', 'True')
_FALSE = ('0', 'f', 'F', 'FALSE', 'false', 'False', '')

#==============================================================================
def _boolean(key, value):
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return 0 != value
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"Invalid boolean value for {key!r}: {value!r}")

#==============================================================================
def _percentiles(value):
    if value is None:
        return list(config.PERCENTILES)
    if not isinstance(value, list):
        raise ConfigError(f"Invalid percentiles specified: {value!r}. Only arrays of numbers are supported")
    for p in value:
        if isinstance(p, bool) or not isinstance(p, (int, float)):
            raise ConfigError(f"Invalid percentile specified: {p!r}. Only arrays of numbers are supported")
    return value

#==============================================================================
def _run_count(value):
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"Invalid runCount specified: {value!r}")
    return int(value)

#==============================================================================
def _seed(value):
    if value is None:
        return config.RANDOM_SEED
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Invalid seed specified: {value!r}")
    return value

#==============================================================================
def _create_node(fg, data, default_name):
    """Create a generator node from a leaf activity definition."""
    if not isinstance(data, dict):
        raise ConfigError(f"Activity {default_name!r} must be an object, got: {data!r}")
    if 'type' not in data:
        raise ConfigError(f"Activity {default_name!r} has no 'type'")

    name = data.get('name') or default_name
    try:
        return fg.create_node(data['type'], str(name))
    except FlowCPMError as e:
        logger.debug("Activity %r rejected: %s", name, e)
        raise

#==============================================================================
def _load_activities(fg, data, subgraph):
    activities = data.get('activities')
    if not isinstance(activities, dict):
        raise ConfigError(f"Failed to extract 'activities' object from {subgraph.name!r} definition")

    for key, val in activities.items():
        logger.debug("Loading definition %r of %r", key, subgraph.name)

        if isinstance(val, list):
            # Serial activities
            for i, item in enumerate(val):
                subgraph.add_serial_node(_create_node(fg, item, config.SERIAL_PREFIX + str(i)))

        elif isinstance(val, dict):
            title = val.get('name')
            if isinstance(title, str) and title and 'activities' in val:
                # Nested subgraph
                _load_activities(fg, val, subgraph.add_subgraph(title))
            else:
                # Parallel activities
                for k, item in val.items():
                    subgraph.add_parallel_node(_create_node(fg, item, k))

        else:
            raise ConfigError(f"Unsupported activities value type for {key!r}: {type(val).__name__}")

#==============================================================================
def load_definition(definition, seed=None):
    """
    Build a flow graph from an activity definition.

    Parameters
    ----------
    definition : dict
        Activity definition:

        - ``name``: project name
        - ``runCount``: number of Monte Carlo iterations
        - ``percentiles``: optional list, default ``[50, 95]``
        - ``workdays``: optional flag, estimate completion dates
        - ``seed``: optional random seed
        - ``activities``: object, every value is either

            - a list of serial activities,
            - an object with ``name`` and ``activities``: a nested subgraph,
            - an object of parallel activities.

        Leaf activities are objects with a ``type`` distribution
        expression and an optional ``name``.
    seed : int, optional
        Overrides the definition seed

    Returns
    -------
    FlowGraph
        Constructed, not evaluated flow graph

    Raises
    ------
    ConfigError
        If the definition layout is invalid
    ParseError, ValidationError
        If a distribution expression is invalid

    Examples
    --------
    >>> fg = load_definition({
    ...     'name': 'Release', 'runCount': 1000,
    ...     'activities': {
    ...         'steps': [{'type': 'Fixed(5)'}, {'type': 'PERT(1, 2, 4)', 'name': 'Build'}],
    ...     }})
    """
    if not isinstance(definition, dict):
        raise ConfigError(f"Activity definition must be an object, got: {type(definition).__name__}")

    if seed is None:
        seed = _seed(definition.get('seed'))

    fg = FlowGraph(name=definition.get('name') or config.START_NAME,
                   run_count=_run_count(definition.get('runCount')),
                   percentiles=_percentiles(definition.get('percentiles')),
                   workdays=_boolean('workdays', definition.get('workdays', False)),
                   seed=seed)

    _load_activities(fg, definition, fg.root)
    return fg

#==============================================================================
def loads(text, seed=None):
    """Build a flow graph from a JSON activity definition string."""
    try:
        definition = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON activity definition: {e}") from e
    return load_definition(definition, seed)

def load(stream, seed=None):
    """Build a flow graph from a JSON activity definition stream."""
    return loads(stream.read(), seed)

def load_file(path, seed=None):
    """Build a flow graph from a JSON activity definition file."""
    with open(path, 'r', encoding='utf-8') as f:
        return load(f, seed)
