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
import numpy as np

#==============================================================================
def _normalize_percentile(p):
    """Return the percentile as a fraction, values above 1 are percents."""
    return p / 100. if p > 1. else p

#==============================================================================
def _percent_label(p):
    """Return the percentile notated as a percentage."""
    return float(p) if p > 1. else float(p) * 100.

#==============================================================================
class AggregatedStatistics:
    """
    Aggregated statistics of a sample sequence.

    Parameters
    ----------
    mean : float
        Population mean
    median : float
        Empirical 0.5 quantile
    stddev : float
        Population standard deviation
    percentiles : list
        Ordered list of (percentile, value) pairs, the percentile is
        notated as a percentage regardless of how it was requested
    """

    def __init__(self, mean, median, stddev, percentiles=None):
        self.mean        = float(mean)
        self.median      = float(median)
        self.stddev      = float(stddev)
        self.percentiles = list(percentiles) if percentiles else []

    def percentile(self, p):
        """
        Get the value computed for a requested percentile.

        Parameters
        ----------
        p : float
            Percentile either as a fraction (<= 1) or a percentage (> 1)

        Returns
        -------
        float
            Percentile value

        Raises
        ------
        KeyError
            If the percentile was not requested
        """
        label = _percent_label(p)
        for k, v in self.percentiles:
            if np.isclose(k, label):
                return v
        raise KeyError(f'Percentile {p} was not computed')

    def __repr__(self):
        return str(self.to_dict())

    def __eq__(self, other):
        if not isinstance(other, AggregatedStatistics):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self):
        ret = {
            'mean'  : self.mean,
            'median': self.median,
            'stddev': self.stddev,
        }
        for k, v in self.percentiles:
            ret['p%g' % k] = v
        return ret

    def label(self):
        """Short text used by diagrams, e.g. 'μ=8.00, σ=0.00 (p50=8.00)'."""
        ret = 'μ=%.2f, σ=%.2f' % (self.mean, self.stddev)
        if self.percentiles:
            ret += ' (' + ', '.join('p%g=%.2f' % (k, v) for k, v in self.percentiles) + ')'
        return ret

#==============================================================================
def stats_for_sequence(samples, percentiles=()):
    """
    Compute aggregated statistics of a sample sequence.

    Parameters
    ----------
    samples : array-like
        Sample sequence, it is not modified
    percentiles : iterable of float
        Requested percentiles, values greater than 1 are percents
        and are divided by 100 before the quantile computation

    Returns
    -------
    AggregatedStatistics

    Raises
    ------
    ValueError
        If the sample sequence is empty or a percentile is out of [0, 100]

    Notes
    -----
    Mean and standard deviation are population ones (ddof=0),
    quantiles use linear interpolation between order statistics.
    """
    srt = np.sort(np.asarray(samples, dtype=float))
    if 0 == srt.size:
        raise ValueError("Can not aggregate an empty sample sequence!")

    pct = []
    for p in percentiles:
        q = _normalize_percentile(p)
        if not (0. <= q <= 1.):
            raise ValueError(f"Percentile {p} is out of range!")
        pct.append((_percent_label(p), float(np.quantile(srt, q, method='linear'))))

    return AggregatedStatistics(mean=np.mean(srt),
                                median=np.quantile(srt, 0.5, method='linear'),
                                stddev=np.std(srt),
                                percentiles=pct)
