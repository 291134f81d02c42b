#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for the completion time plot.
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

import numpy as np

from flow_cpm.plot import cdf_points, plot_distribution


def test_cdf_points():
    x, y = cdf_points([1., 2., 3., 4.], bins=4)
    assert len(x) == len(y) == 4
    assert x[-1] == 4.
    assert list(y) == [0.25, 0.5, 0.75, 1.]


def test_cdf_is_monotonic():
    samples = np.random.default_rng(0).normal(10., 2., 1000)
    _, y = cdf_points(samples)
    assert np.all(np.diff(y) >= 0.)
    assert y[-1] == 1.


def test_plot_distribution(tmp_path):
    path = str(tmp_path / 'hist.png')
    samples = np.random.default_rng(0).normal(10., 2., 1000)
    assert plot_distribution(samples, path, bins=20, title='Test') == path
    assert (tmp_path / 'hist.png').stat().st_size > 0
