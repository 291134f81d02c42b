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
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from . import config

#==============================================================================
def cdf_points(samples, bins=config.HISTOGRAM_BINS):
    """
    Empirical CDF of the samples evaluated at histogram bin right edges.

    Returns
    -------
    tuple
        (x, y) numpy arrays, y grows from 1/len(samples) up to 1
    """
    samples = np.sort(np.asarray(samples, dtype=float))
    counts, edges = np.histogram(samples, bins=bins)
    return edges[1:], np.cumsum(counts) / len(samples)

#==============================================================================
def plot_distribution(samples, output_path, bins=config.HISTOGRAM_BINS, title='Cumulative Estimate'):
    """
    Plot the completion time distribution: normalized histogram and CDF.

    Parameters
    ----------
    samples : array-like
        Completion time samples, usually ``FlowGraph.completion_samples()``
    output_path : str
        Image file path, the format is taken from the extension
    bins : int
        Number of histogram bins
    title : str
        Plot title

    Returns
    -------
    str
        output_path
    """
    samples = np.asarray(samples, dtype=float)

    fig, ax = plt.subplots(figsize=(12, 12))
    try:
        ax.hist(samples, bins=bins, density=True, color='#4060c0', alpha=0.7)
        ax.set_xlabel('Total Duration')
        ax.set_ylabel('Probability')
        ax.set_title(title, color='#0000ff')

        x, y = cdf_points(samples, bins)
        cdf_ax = ax.twinx()
        cdf_ax.plot(x, y, color='#ff9000', linewidth=2, linestyle='--')
        cdf_ax.set_ylim(0., 1.05)
        cdf_ax.set_ylabel('Cumulative probability')

        fig.savefig(output_path)
    finally:
        plt.close(fig)

    return output_path
