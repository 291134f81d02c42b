#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Tests for sample sequence statistics.
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
import pytest

from flow_cpm import AggregatedStatistics, stats_for_sequence


class TestStatsForSequence:
    """Mean, median, population stddev and linear percentiles."""

    def test_basic_values(self):
        s = stats_for_sequence([4., 1., 3., 2.], [50])
        assert s.mean == pytest.approx(2.5)
        assert s.median == pytest.approx(2.5)
        assert s.stddev == pytest.approx(np.sqrt(1.25))
        assert s.percentile(50) == pytest.approx(2.5)

    def test_linear_interpolation(self):
        s = stats_for_sequence([1., 2., 3., 4.], [95])
        assert s.percentile(95) == pytest.approx(3.85)

    def test_fraction_and_percent_are_equivalent(self):
        samples = np.linspace(0., 10., 101)
        a = stats_for_sequence(samples, [95])
        b = stats_for_sequence(samples, [0.95])
        assert a.percentiles == b.percentiles
        assert a.percentiles[0][0] == pytest.approx(95.)

    def test_percentile_order_is_kept(self):
        s = stats_for_sequence(np.arange(10.), [95, 0.1, 50])
        assert [k for k, _ in s.percentiles] == pytest.approx([95., 10., 50.])

    def test_constant_sequence(self):
        s = stats_for_sequence(np.full(1000, 8.), [50, 95])
        assert s.mean == 8.
        assert s.stddev == 0.
        assert s.percentile(95) == 8.

    def test_input_is_not_modified(self):
        samples = np.array([3., 1., 2.])
        stats_for_sequence(samples, [50])
        assert list(samples) == [3., 1., 2.]

    def test_empty_sequence(self):
        with pytest.raises(ValueError):
            stats_for_sequence([], [50])

    @pytest.mark.parametrize('p', [-1, 150])
    def test_out_of_range_percentile(self, p):
        with pytest.raises(ValueError):
            stats_for_sequence([1., 2.], [p])


class TestAggregatedStatistics:
    """Accessors and representations."""

    def test_missing_percentile(self):
        s = stats_for_sequence([1., 2.], [50])
        with pytest.raises(KeyError):
            s.percentile(95)

    def test_to_dict(self):
        s = stats_for_sequence([1., 2., 3., 4.], [50, 0.95])
        d = s.to_dict()
        assert set(d) == {'mean', 'median', 'stddev', 'p50', 'p95'}
        assert d['p95'] == pytest.approx(3.85)

    def test_label(self):
        s = AggregatedStatistics(8., 8., 0., [(50., 8.)])
        assert s.label() == 'μ=8.00, σ=0.00 (p50=8.00)'

    def test_equality(self):
        assert stats_for_sequence([1., 2.], [50]) == stats_for_sequence([2., 1.], [0.5])
        assert stats_for_sequence([1., 2.]) != stats_for_sequence([1., 3.])
