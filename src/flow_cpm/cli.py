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
import argparse
import logging
import os
import graphviz

from . import __version__
from .errors import FlowCPMError
from .loader import load_file
from .plot import plot_distribution
from .workdays import BusinessCalendar

logger = logging.getLogger(__name__)

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info' : logging.INFO,
    'warn' : logging.WARNING,
    'error': logging.ERROR,
}

#==============================================================================
def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='flow-cpm',
                                     description='Monte Carlo completion time estimation of activity flow graphs')
    parser.add_argument('--input', '-i', required=True,
                        help='Full filepath to definition to be evaluated.')
    parser.add_argument('--output', '-o', default='',
                        help='Path to output directory for created files. Defaults to input file parent directory.')
    parser.add_argument('--level', default='INFO', type=str.lower, choices=sorted(LOG_LEVELS),
                        help='Logging verbosity level.')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed, overrides the definition one.')
    parser.add_argument('--no-plot', action='store_true',
                        help='Do not create the completion time histogram.')
    parser.add_argument('--no-dot', action='store_true',
                        help='Do not create the Graphviz diagram.')

    args = parser.parse_args(argv)
    args.input = os.path.abspath(args.input)
    if not args.output:
        args.output = os.path.dirname(args.input)
    return args

#==============================================================================
def run(args):
    """
    Evaluate a definition file and write the outputs.

    Returns
    -------
    dict
        Created file paths keyed by output kind
    """
    fg = load_file(args.input, seed=args.seed)
    fg.evaluate()

    stats = fg.completion_stats()
    logger.info("Completion time of %r: %s", fg.name, stats.label())
    logger.info("Critical path: %s", ' -> '.join(fg.node(i).name for i in fg.critical_path))

    os.makedirs(args.output, exist_ok=True)
    base = os.path.join(args.output, os.path.splitext(os.path.basename(args.input))[0])
    calendar = BusinessCalendar()
    created = {}

    nodes_df, _ = fg.to_dataframe(calendar)
    created['csv'] = base + '.csv'
    nodes_df.to_csv(created['csv'])
    logger.info("Created csv output file: %s", created['csv'])

    if not args.no_dot:
        dot = fg.viz(calendar=calendar)
        created['dot'] = dot.save(base + '.gv')
        logger.info("Created dot output file: %s", created['dot'])
        try:
            created['diagram'] = dot.render(base, format='png', cleanup=True)
            logger.info("Created diagram: %s", created['diagram'])
        except graphviz.ExecutableNotFound as e:
            logger.warning("Diagram was not rendered: %s", e)

    if not args.no_plot:
        created['histogram'] = plot_distribution(fg.completion_samples(), base + '_hist.png',
                                                 title=f'{fg.name}: Cumulative Estimate')
        logger.info("Created histogram: %s", created['histogram'])

    return created

#==============================================================================
def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=LOG_LEVELS[args.level],
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logger.info("Welcome to flow-cpm %s", __version__)

    try:
        run(args)
    except (FlowCPMError, OSError) as e:
        logger.error("Failed to evaluate %s: %s", args.input, e)
        return 1

    logger.info("flow-cpm done")
    return 0
