#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
FlowCPM - Monte Carlo completion time estimation for activity flow graphs
=========================================================================

This module provides the flow graph model: a project is a tree of nested
subgraphs of serial and parallel activities, every activity duration is a
probability distribution. The graph is evaluated with a deterministic Monte
Carlo simulation, cumulative durations are propagated through serial chains
and combined by element-wise maximum at subgraph joins, then the expected
critical path is found with a shortest path search over negated mean
durations.

Classes
-------
- :class:`FlowGraph`: Root graph, evaluation and critical path analysis
- :class:`Subgraph`: View of a nested scope of the shared graph
- :class:`AggregationOptions`: Per node aggregation configuration
- :class:`_Node`: Graph node (internal)

Usage Example
-------------
>>> fg = FlowGraph('Release', run_count=1000)
>>> fg.add_serial('Fixed(5)', 'Design')
>>> fg.add_serial('Fixed(3)', 'Build')
>>> qa = fg.add_subgraph('QA')
>>> qa.add_parallel('Triangle(1, 2, 4)', 'Manual')
>>> qa.add_parallel('Normal(3, 0.5)', 'Automated')
>>> fg.evaluate()
>>> nodes_df, edges_df = fg.to_dataframe()
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

#==============================================================================
from datetime import datetime
import logging
import graphviz
import networkx as nx
import numpy as np
import pandas as pd

from . import config
from .workdays import BusinessCalendar
from .errors import ConfigError, StructuralError
from .generators import DurationGenerator, GenerationResults

logger = logging.getLogger(__name__)

# Node kinds
START     = 'start'
PASS      = 'pass'
GENERATOR = 'generator'
JOIN      = 'join'

#==============================================================================
class AggregationOptions:
    """
    Aggregation configuration shared by the nodes of a subgraph.

    Parameters
    ----------
    workdays : bool
        Translate cumulative mean durations into estimated
        completion dates counted in business days
    """

    def __init__(self, workdays=False):
        self.workdays = bool(workdays)

    def __repr__(self):
        return str({'workdays': self.workdays})

#==============================================================================
class _Node:
    """
    Flow graph node.

    Parameters
    ----------
    id : int
        Unique node identifier in the owning graph
    kind : str
        One of START, PASS, GENERATOR, JOIN
    name : str
        Display name
    path : tuple of int
        Input node ids of the enclosing subgraphs, from the root
    options : AggregationOptions, optional
        Aggregation configuration
    generator : DurationGenerator, optional
        Duration distribution, required for GENERATOR and JOIN nodes
    run_count : int
        Number of Monte Carlo iterations, START nodes only
    """

    def __init__(self, id, kind, name, path=(), options=None, generator=None, run_count=0):
        assert isinstance(id, int)
        assert kind in (START, PASS, GENERATOR, JOIN)
        assert generator is None or isinstance(generator, DurationGenerator)
        assert (generator is not None) == (kind in (GENERATOR, JOIN))

        self.id        = id
        self.kind      = kind
        self.name      = str(name)
        self.path      = tuple(path)
        self.options   = options
        self.generator = generator
        self.run_count = run_count

    @property
    def absolute_path(self):
        """Node path from the root including the node itself."""
        if self.path and self.path[-1] == self.id:
            return self.path
        return self.path + (self.id,)

    @property
    def type_label(self):
        if self.generator is not None:
            return self.generator.name
        return self.kind

    def __repr__(self):
        return str({'id': self.id, 'kind': self.kind, 'name': self.name,
                    'type': self.type_label, 'path': self.path})

#==============================================================================
class Subgraph:
    """
    Named scope of the flow graph.

    A subgraph owns no storage, it is a view of the graph shared by the
    root and every nested subgraph. It has exactly one input (pass-through)
    node and one output (join) node. Serial activities are chained between
    them in the order of addition, every parallel activity and every nested
    subgraph is linked to them directly.

    Parameters
    ----------
    model : FlowGraph
        Owning graph
    name : str
        Subgraph name, used as the input node name
    parent : Subgraph, optional
        Enclosing subgraph, None for the root
    options : AggregationOptions, optional
        Aggregation configuration, inherited from the parent by default
    """

    def __init__(self, model, name, parent=None, options=None):
        assert isinstance(model, FlowGraph)
        assert parent is None or isinstance(parent, Subgraph)

        self.model     = model
        self.name      = str(name)
        self.serial    = []
        self.parallel  = []
        self.subgraphs = []

        if options is None:
            options = parent.options if parent is not None else AggregationOptions()
        self.options = options

        parent_path = parent.path if parent is not None else ()

        inp = model._new_node(PASS, self.name, options=self.options)
        self.path = parent_path + (inp.id,)
        inp.path  = self.path

        out = model._new_node(JOIN, config.JOIN_NAME, path=self.path, options=self.options,
                              generator=DurationGenerator.upper_bound())

        self.input_id  = inp.id
        self.output_id = out.id

    @property
    def input_node(self):
        return self.model.node(self.input_id)

    @property
    def output_node(self):
        return self.model.node(self.output_id)

    #--------------------------------------------------------------------------
    def _adopt(self, node):
        assert isinstance(node, _Node)
        if GENERATOR != node.kind:
            raise StructuralError(f"Only generator nodes can be added to a subgraph, got {node!r}")
        node.path    = self.path
        node.options = self.options
        if node.id not in self.model.graph:
            self.model.graph.add_node(node.id, node=node)

    def add_serial_node(self, node):
        """
        Append a generator node to the serial chain.

        The previous chain tail (or the input node for an empty chain) is
        linked to the node, the node is linked to the join node and the
        previous tail to join link is removed.

        Parameters
        ----------
        node : _Node
            Generator node created by :meth:`FlowGraph.create_node`

        Returns
        -------
        _Node
            The added node
        """
        self._adopt(node)
        g = self.model.graph

        if self.serial:
            tail = self.serial[-1].id
            g.remove_edge(tail, self.output_id)
        else:
            tail = self.input_id

        self.serial.append(node)
        g.add_edge(tail, node.id)
        g.add_edge(node.id, self.output_id)
        return node

    def add_parallel_node(self, node):
        """
        Link a generator node between the input and the join nodes.

        Parameters
        ----------
        node : _Node
            Generator node created by :meth:`FlowGraph.create_node`

        Returns
        -------
        _Node
            The added node
        """
        self._adopt(node)
        self.parallel.append(node)
        self.model.graph.add_edge(self.input_id, node.id)
        self.model.graph.add_edge(node.id, self.output_id)
        return node

    def add_subgraph(self, name):
        """
        Create a nested subgraph.

        Parent input is linked to the child input, child join is
        linked to the parent join.

        Parameters
        ----------
        name : str
            Subgraph name

        Returns
        -------
        Subgraph
            The new subgraph
        """
        child = Subgraph(self.model, name, parent=self)
        self.subgraphs.append(child)
        self.model.graph.add_edge(self.input_id, child.input_id)
        self.model.graph.add_edge(child.output_id, self.output_id)
        return child

    def add_serial(self, expression, name=None):
        """Create a generator node from an expression and append it to the serial chain."""
        if name is None:
            name = config.SERIAL_PREFIX + str(len(self.serial))
        return self.add_serial_node(self.model.create_node(expression, name))

    def add_parallel(self, expression, name=None):
        """Create a generator node from an expression and add it as a parallel activity."""
        if name is None:
            name = expression
        return self.add_parallel_node(self.model.create_node(expression, name))

    def __repr__(self):
        return str({'name'     : self.name,
                    'input'    : self.input_id,
                    'output'   : self.output_id,
                    'serial'   : [n.id for n in self.serial],
                    'parallel' : [n.id for n in self.parallel],
                    'subgraphs': [s.name for s in self.subgraphs]})

#==============================================================================
class FlowGraph:
    """
    Root flow graph.

    Parameters
    ----------
    name : str
        Project name, also the START node name
    run_count : int
        Number of Monte Carlo iterations, must be positive at evaluation time
    percentiles : sequence of float, optional
        Percentiles to aggregate; fractions (<= 1) and percents (> 1)
        are both accepted. Defaults to ``config.PERCENTILES``
    workdays : bool, default=False
        Derive estimated completion dates in business days
    seed : int, default=config.RANDOM_SEED
        Seed of the evaluation random stream

    Raises
    ------
    ConfigError
        If run count or seed is not an integer or a percentile is out of [0, 100]

    Attributes
    ----------
    graph : networkx.DiGraph
        Node arena shared by all subgraphs, nodes are keyed by id and
        carry their :class:`_Node` as the ``node`` attribute
    start : _Node
        START node
    root : Subgraph
        Root subgraph, its composition methods are also available
        directly on the flow graph
    results : dict
        GenerationResults keyed by node id, filled by :meth:`evaluate`
    paths : dict
        Maximal expected duration paths from START keyed by target node id
    critical_path : list
        Node ids of the path from START to the root join
    critical_edges : set
        (src, dst) node id pairs of the critical path
    created : datetime or None
        Evaluation start time

    Notes
    -----
    The graph is evaluated once, a single random stream is consumed in
    topological order so that evaluations of identical definitions with
    the same seed are bit for bit reproducible.
    """

    def __init__(self, name=config.START_NAME, run_count=0, percentiles=None,
                 workdays=False, seed=config.RANDOM_SEED):
        try:
            run_count = int(run_count)
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid run count: {run_count!r}") from None

        if percentiles is None:
            percentiles = config.PERCENTILES
        try:
            percentiles = [float(p) for p in percentiles]
        except (TypeError, ValueError):
            raise ConfigError(f"Invalid percentiles: {percentiles!r}. Only sequences of numbers are supported") from None
        for p in percentiles:
            if not (0. <= p <= 100.):
                raise ConfigError(f"Percentile {p} is out of range [0, 100]")

        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, np.integer))):
            raise ConfigError(f"Invalid random seed: {seed!r}")

        self.name           = str(name)
        self.graph          = nx.DiGraph()
        self.next_id        = 1
        self.percentiles    = percentiles
        self.seed           = seed
        self.results        = {}
        self.paths          = {}
        self.distances      = {}
        self.critical_path  = []
        self.critical_edges = set()
        self.created        = None

        self.start = self._new_node(START, self.name, run_count=run_count)
        self.root  = Subgraph(self, config.ROOT_NAME, options=AggregationOptions(workdays))

        self.graph.add_edge(self.start.id, self.root.input_id)

    #--------------------------------------------------------------------------
    @property
    def run_count(self):
        return self.start.run_count

    @property
    def input_id(self):
        return self.root.input_id

    @property
    def output_id(self):
        return self.root.output_id

    def add_serial_node(self, node):
        return self.root.add_serial_node(node)

    def add_parallel_node(self, node):
        return self.root.add_parallel_node(node)

    def add_subgraph(self, name):
        return self.root.add_subgraph(name)

    def add_serial(self, expression, name=None):
        return self.root.add_serial(expression, name)

    def add_parallel(self, expression, name=None):
        return self.root.add_parallel(expression, name)

    #--------------------------------------------------------------------------
    def _new_node(self, kind, name, path=(), options=None, generator=None, run_count=0):
        node = _Node(self.next_id, kind, name, path, options, generator, run_count)
        self.next_id += 1
        self.graph.add_node(node.id, node=node)
        return node

    def create_node(self, expression, name):
        """
        Create a detached generator node.

        Parameters
        ----------
        expression : str or DurationGenerator
            Distribution expression ``Name(p1, p2, ...)`` or a generator
        name : str
            Node name

        Returns
        -------
        _Node
            Node to be added with :meth:`Subgraph.add_serial_node`
            or :meth:`Subgraph.add_parallel_node`
        """
        if isinstance(expression, DurationGenerator):
            generator = expression
        else:
            generator = DurationGenerator.from_expression(expression)
        node = _Node(self.next_id, GENERATOR, name, generator=generator)
        self.next_id += 1
        return node

    def node(self, node_id):
        """Get a node by its id."""
        try:
            return self.graph.nodes[node_id]['node']
        except KeyError:
            raise KeyError(f"No node with id {node_id}") from None

    @property
    def nodes(self):
        """All nodes in the order of creation."""
        return [d['node'] for _, d in self.graph.nodes(data=True)]

    def find_nodes(self, name):
        """Get all nodes with the given name."""
        return [n for n in self.nodes if n.name == name]

    #--------------------------------------------------------------------------
    def predecessor_results(self, node_id):
        """
        Gather the results of the direct predecessors of a node.

        Returns
        -------
        dict
            GenerationResults keyed by predecessor id

        Raises
        ------
        StructuralError
            If a predecessor has not been evaluated
        """
        ret = {}
        for p in self.graph.predecessors(node_id):
            if p not in self.results:
                raise StructuralError(f"No predecessor values of node {p} for node {node_id}")
            ret[p] = self.results[p]
        return ret

    def _generate(self, node, rng):
        """Compute the results of a node, predecessors must be evaluated."""
        if START == node.kind:
            if node.run_count <= 0:
                raise ConfigError(f"Invalid run count for START node {node.name!r}: {node.run_count}")
            zeros = np.zeros(node.run_count, dtype=float)
            return GenerationResults.from_samples(zeros, zeros, self.percentiles)

        prior = self.predecessor_results(node.id)

        if PASS == node.kind:
            if 1 != len(prior):
                raise StructuralError(f"Invalid number of predecessors for pass-through "
                                      f"node {node.id} ({node.name!r}): {len(prior)}")
            (ret,) = prior.values()
            return ret

        elif GENERATOR == node.kind:
            try:
                return node.generator.generate(prior, self.percentiles, rng)
            except StructuralError as e:
                raise StructuralError(f"Node {node.id} ({node.name!r}): {e}") from e

        elif JOIN == node.kind:
            # Join works on cumulative values, present them as raw ones
            promoted = {k: v.promoted() for k, v in prior.items()}
            try:
                return node.generator.generate(promoted, self.percentiles, rng)
            except StructuralError as e:
                raise StructuralError(f"Join node {node.id} of {self._scope_name(node)!r}: {e}") from e

        else:
            raise ValueError(f"Unknown node kind {node.kind!r}!!!")

    def _scope_name(self, node):
        return self.node(node.path[-1]).name if node.path else node.name

    def evaluate(self):
        """
        Run the Monte Carlo simulation and the critical path search.

        Returns
        -------
        FlowGraph
            self

        Raises
        ------
        StructuralError
            If the graph has a cycle, a node has a wrong number of
            predecessors or the graph has already been evaluated
        ConfigError
            If the run count is not positive
        """
        if self.results:
            raise StructuralError(f"Flow graph {self.name!r} has already been evaluated!")

        try:
            order = list(nx.topological_sort(self.graph))
        except nx.NetworkXUnfeasible as e:
            raise StructuralError(f"Flow graph {self.name!r} has a cycle: {e}") from e

        self.created = datetime.now()
        rng = np.random.default_rng(self.seed)

        logger.debug("Evaluating %d nodes of %r, %d runs, seed %s",
                     len(order), self.name, self.run_count, self.seed)

        results = {}
        self.results = results
        try:
            for i in order:
                node = self.node(i)
                res = self._generate(node, rng)
                assert i not in results
                results[i] = res
                logger.debug("Node %d (%s, %s): %s", i, node.name, node.kind, res.cumulative_stats.label())
        except Exception:
            self.results = {}
            raise

        self.find_critical_path()
        return self

    @property
    def is_evaluated(self):
        return bool(self.results)

    #--------------------------------------------------------------------------
    def _weight(self, u, v, data):
        """Critical path edge weight: negated generator mean of the source node."""
        if GENERATOR == self.node(u).kind:
            return -self.results[u].generator_stats.mean
        return 0.

    def find_critical_path(self):
        """
        Find maximal expected duration paths from START.

        Uses Bellman-Ford shortest path search with negated generator
        means as edge weights, so the shortest path is the longest
        expected one.

        Returns
        -------
        list
            Node ids of the critical path from START to the root join

        Raises
        ------
        StructuralError
            If the graph is not evaluated, a negative cycle is found
            or the root join is unreachable
        """
        if not self.results:
            raise StructuralError(f"Flow graph {self.name!r} must be evaluated before the critical path search!")

        missing = [n for n in self.graph if n not in self.results]
        if missing:
            raise StructuralError(f"Nodes {missing} have no results")

        try:
            dist, paths = nx.single_source_bellman_ford(self.graph, self.start.id, weight=self._weight)
        except nx.NetworkXUnbounded as e:
            raise StructuralError(f"Negative cycle in flow graph {self.name!r}: {e}") from e

        for k in paths:
            logger.debug("Shortest path from %d to %d: weight %g, path %s",
                         self.start.id, k, dist[k], paths[k])

        if self.output_id not in paths:
            raise StructuralError(f"Root join node {self.output_id} is unreachable from START")

        self.distances      = dist
        self.paths          = paths
        self.critical_path  = list(paths[self.output_id])
        self.critical_edges = set(zip(self.critical_path[:-1], self.critical_path[1:]))
        return self.critical_path

    #--------------------------------------------------------------------------
    def _require_results(self):
        if not self.results:
            raise StructuralError(f"Flow graph {self.name!r} is not evaluated!")

    def start_info(self):
        """START node metadata."""
        return {
            'name'   : self.start.name,
            'runs'   : self.start.run_count,
            'created': self.created,
        }

    def completion_samples(self):
        """Cumulative samples of the root join: the project completion time."""
        self._require_results()
        return self.results[self.output_id].cumulative

    def completion_stats(self):
        """Statistics of the project completion time."""
        self._require_results()
        return self.results[self.output_id].cumulative_stats

    def estimated_completion(self, node_id, calendar=None):
        """
        Estimated completion date of a node.

        Parameters
        ----------
        node_id : int
            Node id
        calendar : BusinessCalendar, optional
            Business days calendar, default one if None

        Returns
        -------
        pandas.Timestamp or None
            START time plus cumulative mean business days,
            None if workdays aggregation is disabled for the node
        """
        self._require_results()
        node = self.node(node_id)
        if node.options is None or not node.options.workdays:
            return None
        if calendar is None:
            calendar = BusinessCalendar()
        return calendar.workday_with_offset(self.results[node_id].cumulative_stats.mean, self.created)

    def _node_dict(self, node, calendar):
        ret = {
            'id'  : node.id,
            'kind': node.kind,
            'name': node.name,
            'path': node.path,
            'type': node.type_label,
        }
        if GENERATOR == node.kind:
            ret['expected'] = node.generator.mean()
        if node.id in self.results:
            res = self.results[node.id]
            ret['generator'] = res.generator_stats.to_dict()
            ret['cumulative'] = res.cumulative_stats.to_dict()
            ecd = self.estimated_completion(node.id, calendar)
            if ecd is not None:
                ret['ecd'] = ecd
        return ret

    def to_dict(self, calendar=None):
        """
        Convert the flow graph to dictionary representation.

        Parameters
        ----------
        calendar : BusinessCalendar, optional
            Calendar for estimated completion dates

        Returns
        -------
        dict
            Dictionary with structure:

            .. code-block:: python

                {
                    'start': {name, runs, created},
                    'nodes': [{node1_data}, ...],
                    'edges': [{'src', 'dst', 'weight', 'critical'}, ...],
                    'critical_path': [node ids]
                }
        """
        if calendar is None and self.results:
            calendar = BusinessCalendar()

        edges = []
        for u, v in self.graph.edges():
            edges.append({
                'src'     : u,
                'dst'     : v,
                'weight'  : self._weight(u, v, None) if u in self.results else 0.,
                'critical': (u, v) in self.critical_edges,
            })

        return {
            'start'        : self.start_info(),
            'nodes'        : [self._node_dict(n, calendar) for n in self.nodes],
            'edges'        : edges,
            'critical_path': list(self.critical_path),
        }

    def to_dataframe(self, calendar=None):
        """
        Convert the flow graph to pandas DataFrames.

        Returns
        -------
        tuple
            (nodes_df, edges_df), statistics are expanded into
            ``gen_*`` and ``cum_*`` columns
        """
        model_dict = self.to_dict(calendar)

        expanded = []
        for node in model_dict['nodes']:
            node_data = {k: v for k, v in node.items() if k not in ('generator', 'cumulative')}
            node_data['path'] = '.'.join(str(i) for i in node['path'])
            for prefix in ('generator', 'cumulative'):
                for k, v in node.get(prefix, {}).items():
                    node_data[prefix[:3] + '_' + k] = v
            node_data['critical'] = node['id'] in self.critical_path
            expanded.append(node_data)

        nodes_df = pd.DataFrame(expanded).set_index('id')
        edges_df = pd.DataFrame(model_dict['edges'], columns=['src', 'dst', 'weight', 'critical'])
        return nodes_df, edges_df

    def export_graph(self):
        """
        Export the topology as a plain networkx graph.

        Returns
        -------
        networkx.DiGraph
            Nodes keyed by id with ``name``, ``kind``, ``type`` and
            ``path`` attributes, edges with a ``critical`` attribute
        """
        ret = nx.DiGraph(name=self.name)
        for n in self.nodes:
            ret.add_node(n.id, name=n.name, kind=n.kind, type=n.type_label, path=n.path)
        for u, v in self.graph.edges():
            ret.add_edge(u, v, critical=(u, v) in self.critical_edges)
        return ret

    #--------------------------------------------------------------------------
    def viz(self, output_path=None, calendar=None):
        """
        Create Graphviz visualization of the flow graph.

        Parameters
        ----------
        output_path : str, optional
            Path for saving a png rendering, nothing is rendered if None
        calendar : BusinessCalendar, optional
            Calendar for estimated completion dates

        Returns
        -------
        graphviz.Digraph
            Graphviz object for rendering or saving

        Notes
        -----
        Subgraphs are drawn as nested clusters, critical path
        edges are red, structural (zero weight) edges are dashed.
        """
        if calendar is None and self.results:
            calendar = BusinessCalendar()

        dot = graphviz.Digraph(name=self.name, node_attr={'shape': 'record', 'style': 'rounded'})
        dot.graph_attr['rankdir'] = 'LR'

        def _esc(s):
            for c in '\\{}|<>':
                s = s.replace(c, '\\' + c)
            return s

        def _label(node):
            fields = [node.name]
            if START == node.kind:
                fields.append('Runs: %d' % node.run_count)
                if self.created is not None:
                    fields.append('Created: ' + self.created.strftime('%c'))
            elif GENERATOR == node.kind:
                fields.append(node.generator.name)
            if node.id in self.results and node.kind in (GENERATOR, JOIN):
                res = self.results[node.id]
                if GENERATOR == node.kind:
                    fields.append('+ ' + res.generator_stats.label())
                fields.append('∑ ' + res.cumulative_stats.label())
                ecd = self.estimated_completion(node.id, calendar)
                if ecd is not None:
                    fields.append('ECD: ' + ecd.strftime(config.ECD_TIME_FORMAT))
            return '{' + '|'.join(_esc(f) for f in fields) + '}'

        def _cl(critical):
            """Choose color, red for the critical path"""
            return config.CRITICAL_COLOR if critical else config.DEFAULT_COLOR

        def _add(g, node):
            g.node(str(node.id), _label(node), color=_cl(node.id in self.critical_path))

        def _cluster(parent, sg):
            with parent.subgraph(name='cluster_%d' % sg.input_id) as c:
                c.attr(label=sg.name)
                _add(c, sg.input_node)
                for n in sg.serial + sg.parallel:
                    _add(c, n)
                for s in sg.subgraphs:
                    _cluster(c, s)
                _add(c, sg.output_node)

        _add(dot, self.start)
        _cluster(dot, self.root)

        for u, v in self.graph.edges():
            dot.edge(str(u), str(v),
                     color=_cl((u, v) in self.critical_edges),
                     style='solid' if GENERATOR == self.node(u).kind else 'dashed')

        if output_path is not None:
            dot.render(output_path, format='png', cleanup=True)

        return dot

    #--------------------------------------------------------------------------
    def __repr__(self):
        """String representation of the flow graph."""
        _repr = 'Nodes:{\n'
        for n in self.nodes:
            _repr += '        ' + str(n) + '\n'
        _repr += '}\n'

        _repr += 'Critical path:{\n'
        _repr += '        ' + ' -> '.join(str(i) for i in self.critical_path) + '\n'
        _repr += '}\n'

        return _repr

#==============================================================================
if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)

    fg = FlowGraph('Demo', run_count=10000, percentiles=[50, 0.9, 95], workdays=True)
    fg.add_serial('Fixed(5)', 'Specification')
    fg.add_serial('PERT(3, 5, 10)', 'Prototype')

    qa = fg.add_subgraph('QA')
    qa.add_parallel('Triangle(1, 2, 4)', 'Manual')
    qa.add_parallel('Normal(3, 0.5)', 'Automated')

    fg.add_serial('Pareto(1, 2, 50)', 'Release')
    fg.evaluate()

    print(fg)
    print("Completion:", fg.completion_stats().label())
    print("Critical path:", [fg.node(i).name for i in fg.critical_path])

    nodes_df, edges_df = fg.to_dataframe()
    print(nodes_df[['name', 'type', 'gen_mean', 'cum_mean', 'critical']])
