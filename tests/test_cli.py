#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
End to end tests for the command line interface.
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

import json
import logging

import pandas as pd
import pytest

from flow_cpm.cli import main, parse_args


@pytest.fixture
def definition_file(tmp_path, definition):
    path = tmp_path / 'release.json'
    path.write_text(json.dumps(definition), encoding='utf-8')
    return path


def test_parse_args_defaults(definition_file):
    args = parse_args(['--input', str(definition_file)])
    assert args.output == str(definition_file.parent)
    assert args.level == 'info'
    assert args.seed is None
    assert not args.no_plot
    assert not args.no_dot


def test_level_is_case_insensitive(definition_file):
    assert parse_args(['-i', str(definition_file), '--level', 'WARN']).level == 'warn'


def test_outputs(definition_file, tmp_path):
    assert 0 == main(['--input', str(definition_file), '--level', 'DEBUG'])
    assert (tmp_path / 'release.gv').is_file()
    assert (tmp_path / 'release_hist.png').is_file()

    nodes_df = pd.read_csv(tmp_path / 'release.csv', index_col=0)
    assert len(nodes_df) == 7
    assert nodes_df['cum_mean'].max() == 10.


def test_output_directory(definition_file, tmp_path):
    out = tmp_path / 'out'
    assert 0 == main(['-i', str(definition_file), '-o', str(out), '--no-dot', '--no-plot'])
    assert (out / 'release.csv').is_file()
    assert not (out / 'release.gv').exists()
    assert not (out / 'release_hist.png').exists()


def test_seed_override(definition_file, tmp_path, caplog):
    with caplog.at_level(logging.INFO):
        assert 0 == main(['-i', str(definition_file), '--seed', '11', '--no-dot', '--no-plot'])
    assert 'Completion time' in caplog.text
    assert 'Audit' in caplog.text


def test_invalid_definition(tmp_path, caplog):
    path = tmp_path / 'bad.json'
    path.write_text(json.dumps({'runCount': 0, 'activities': {'steps': [{'type': 'Fixed(1)'}]}}),
                    encoding='utf-8')
    with caplog.at_level(logging.ERROR):
        assert 1 == main(['-i', str(path), '--no-dot', '--no-plot'])
    assert 'Failed to evaluate' in caplog.text
    assert not (tmp_path / 'bad.csv').exists()


def test_missing_file(tmp_path):
    assert 1 == main(['-i', str(tmp_path / 'missing.json')])


@pytest.mark.parametrize('seed', ['abc', 1.5])
def test_invalid_seed(tmp_path, definition, seed, caplog):
    definition['seed'] = seed
    path = tmp_path / 'seeded.json'
    path.write_text(json.dumps(definition), encoding='utf-8')
    with caplog.at_level(logging.ERROR):
        assert 1 == main(['-i', str(path), '--no-dot', '--no-plot'])
    assert 'Invalid seed' in caplog.text
