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
import logging
import numpy as np
import scipy.stats as st

from .errors import ParseError, StructuralError, UnknownDistributionError, ValidationError
from .stats import stats_for_sequence

logger = logging.getLogger(__name__)

# Supported distributions and their admissible parameter counts.
# The upper bound generator takes no parameters and is created
# implicitly by the graph for every join node.
ARITY = {
    'Fixed'    : (1,),
    'Normal'   : (2,),
    'Beta'     : (2,),
    'Bernoulli': (1,),
    'Pareto'   : (2, 3),
    'PERT'     : (1, 3),
    'Triangle' : (1, 3),
    'Uniform'  : (2,),
}

UPPER_BOUND = 'UpperBound'

#==============================================================================
def _freeze(values):
    ret = np.array(values, dtype=float)
    ret.setflags(write=False)
    return ret

#==============================================================================
class GenerationResults:
    """
    Results of a node generation step.

    Parameters
    ----------
    raw : array-like
        Samples of the node's own duration
    generator_stats : AggregatedStatistics
        Statistics of ``raw``
    cumulative : array-like
        Total elapsed duration through the node, per sample index
    cumulative_stats : AggregatedStatistics
        Statistics of ``cumulative``

    Notes
    -----
    Sample arrays are read-only, results are never modified after creation.
    """

    def __init__(self, raw, generator_stats, cumulative, cumulative_stats):
        self.raw              = _freeze(raw)
        self.generator_stats  = generator_stats
        self.cumulative       = _freeze(cumulative)
        self.cumulative_stats = cumulative_stats
        assert self.raw.shape == self.cumulative.shape

    @classmethod
    def from_samples(cls, raw, cumulative, percentiles):
        """Build results computing statistics for both sequences."""
        return cls(raw, stats_for_sequence(raw, percentiles),
                   cumulative, stats_for_sequence(cumulative, percentiles))

    def promoted(self):
        """Results with cumulative samples presented as raw ones."""
        return GenerationResults(self.cumulative, self.cumulative_stats,
                                 self.cumulative, self.cumulative_stats)

    def __len__(self):
        return len(self.raw)

    def __repr__(self):
        return str({'runs'      : len(self),
                    'generator' : self.generator_stats,
                    'cumulative': self.cumulative_stats})

#==============================================================================
def _tokenize(expression):
    """
    Split a distribution expression into (kind, text, position) tokens.

    Kinds are '(', ')', ',' and 'word', words are stripped of
    surrounding whitespace.
    """
    tokens = []
    i = 0
    n = len(expression)
    while i < n:
        c = expression[i]
        if c.isspace():
            i += 1
        elif c in '(),':
            tokens.append((c, c, i))
            i += 1
        else:
            j = i
            while j < n and expression[j] not in '(),':
                j += 1
            tokens.append(('word', expression[i:j].strip(), i))
            i = j
    return tokens

#==============================================================================
def parse_expression(expression):
    """
    Parse a distribution expression of the form ``Name(p1, p2, ...)``.

    Parameters
    ----------
    expression : str
        Distribution expression

    Returns
    -------
    tuple
        (name, params) where params is a list of floats

    Raises
    ------
    ParseError
        If the expression is malformed or a parameter is not a number
    """
    if not isinstance(expression, str):
        raise ParseError(f"Distribution expression must be a string, got: {expression!r}")

    tokens = _tokenize(expression)

    def _fail(msg, pos):
        raise ParseError(f"Invalid distribution expression {expression!r}: {msg} at position {pos}")

    if not tokens or 'word' != tokens[0][0]:
        _fail("expected a distribution name", tokens[0][2] if tokens else 0)

    name = tokens[0][1]
    if not name.isidentifier():
        _fail(f"bad distribution name {name!r}", tokens[0][2])

    if len(tokens) < 2 or '(' != tokens[1][0]:
        _fail("expected '('", tokens[1][2] if len(tokens) > 1 else len(expression))

    params = []
    i = 2
    if i < len(tokens) and ')' == tokens[i][0]:
        i += 1
    else:
        while True:
            if i >= len(tokens):
                _fail("unbalanced parentheses", len(expression))
            kind, text, pos = tokens[i]
            if 'word' != kind:
                _fail(f"expected a parameter, got {text!r}", pos)
            try:
                params.append(float(text))
            except ValueError:
                _fail(f"parameter {text!r} is not a number", pos)
            i += 1

            if i >= len(tokens):
                _fail("unbalanced parentheses", len(expression))
            kind, text, pos = tokens[i]
            i += 1
            if ')' == kind:
                break
            if ',' != kind:
                _fail(f"expected ',' or ')', got {text!r}", pos)

    if i < len(tokens):
        _fail(f"unexpected trailing text {tokens[i][1]!r}", tokens[i][2])

    return name, params

#==============================================================================
class DurationGenerator:
    """
    Duration distribution of an activity.

    Parameters
    ----------
    kind : str
        Distribution name, one of ``ARITY`` keys or ``UPPER_BOUND``
    params : sequence of float
        Distribution parameters, see the table below
    expression : str, optional
        Source expression, used in error messages

    Notes
    -----
    ========= ===================== =======================================
    Kind      Parameters            Notes
    ========= ===================== =======================================
    Fixed     value                 always returns value
    Normal    mean, stddev
    Beta      alpha, beta
    Bernoulli probability           0/1 outcomes
    Pareto    xmin, alpha[, max]    samples are clamped to max (default inf)
    PERT      mode | min, mode, max sampled as a triangular distribution
    Triangle  mode | min, mode, max
    Uniform   lower, upper
    ========= ===================== =======================================

    Single argument PERT and Triangle are equivalent to (mode, mode, mode).
    """

    def __init__(self, kind, params=(), expression=None):
        params = [float(p) for p in params]
        self.kind       = kind
        self.expression = expression if expression is not None else \
                          '%s(%s)' % (kind, ', '.join('%g' % p for p in params))

        if UPPER_BOUND == kind:
            if params:
                raise ParseError(f"{UPPER_BOUND} generator takes no parameters: {self.expression!r}")
        elif kind not in ARITY:
            raise UnknownDistributionError(f"Unsupported distribution name {kind!r} in {self.expression!r}. "
                                           f"Supported types: {sorted(ARITY)}")
        elif len(params) not in ARITY[kind]:
            raise ParseError(f"Invalid {kind} generator expression {self.expression!r}: "
                             f"expected {' or '.join(map(str, ARITY[kind]))} parameters, got {len(params)}")

        if kind in ('PERT', 'Triangle') and 1 == len(params):
            params = params * 3

        if 'Pareto' == kind and 2 == len(params):
            params.append(np.inf)

        self.params = tuple(params)
        self._validate()

    #--------------------------------------------------------------------------
    @classmethod
    def from_expression(cls, expression):
        """Create a generator from a ``Name(p1, p2, ...)`` expression."""
        name, params = parse_expression(expression)
        if name not in ARITY:
            raise UnknownDistributionError(f"Unsupported distribution name {name!r} in {expression!r}. "
                                           f"Supported types: {sorted(ARITY)}")
        return cls(name, params, expression)

    @classmethod
    def upper_bound(cls):
        """Create the element-wise maximum generator used by join nodes."""
        return cls(UPPER_BOUND)

    #--------------------------------------------------------------------------
    def _validate(self):
        k = self.kind
        p = self.params

        if k in ('PERT', 'Triangle'):
            lo, mode, hi = p
            if not (lo <= mode <= hi):
                raise ValidationError(f"Invalid {k} distribution {self.expression!r}: "
                                      f"(lower={lo:.2f}, upper={hi:.2f}, mode={mode:.2f}). "
                                      "Distribution must satisfy: lower <= mode <= upper")
        elif 'Normal' == k:
            if p[1] < 0.:
                raise ValidationError(f"Invalid Normal distribution {self.expression!r}: stddev must be non-negative")
        elif 'Beta' == k:
            if p[0] <= 0. or p[1] <= 0.:
                raise ValidationError(f"Invalid Beta distribution {self.expression!r}: alpha and beta must be positive")
        elif 'Bernoulli' == k:
            if not (0. <= p[0] <= 1.):
                raise ValidationError(f"Invalid Bernoulli distribution {self.expression!r}: probability must be in [0, 1]")
        elif 'Pareto' == k:
            if p[0] <= 0. or p[1] <= 0.:
                raise ValidationError(f"Invalid Pareto distribution {self.expression!r}: xmin and alpha must be positive")
        elif 'Uniform' == k:
            if p[0] > p[1]:
                raise ValidationError(f"Invalid Uniform distribution {self.expression!r}: lower must be <= upper")
        elif k in ('Fixed', UPPER_BOUND):
            pass
        else:
            raise ValueError(f"Unknown generator kind {k!r}!!!")

    #--------------------------------------------------------------------------
    @property
    def name(self):
        """Human readable generator label."""
        k = self.kind
        p = self.params

        if 'Fixed' == k:
            return 'Fixed(v = %.2f)' % p
        elif 'Normal' == k:
            return 'Normal(μ = %.2f, σ = %.2f)' % p
        elif 'Beta' == k:
            return 'Beta(α = %.2f, β = %.2f)' % p
        elif 'Bernoulli' == k:
            return 'Bernoulli(%.2f)' % p
        elif 'Pareto' == k:
            cap = ', max: %.2f' % p[2] if np.isfinite(p[2]) else ''
            return 'Pareto(Xmin = %.2f, α = %.2f%s)' % (p[0], p[1], cap)
        elif k in ('PERT', 'Triangle', 'Uniform'):
            return '%s(%s)' % (k, ', '.join('%.2f' % v for v in p))
        elif UPPER_BOUND == k:
            return UPPER_BOUND
        else:
            raise ValueError(f"Unknown generator kind {k!r}!!!")

    def __repr__(self):
        return self.name

    #--------------------------------------------------------------------------
    def _distribution(self):
        """
        Get the frozen scipy distribution.

        Returns
        -------
        scipy.stats frozen distribution or float
            A float is returned for degenerate distributions,
            they are sampled without consuming the random stream
        """
        k = self.kind
        p = self.params

        if 'Fixed' == k:
            return p[0]
        elif 'Normal' == k:
            return st.norm(loc=p[0], scale=p[1]) if p[1] > 0. else p[0]
        elif 'Beta' == k:
            return st.beta(p[0], p[1])
        elif 'Bernoulli' == k:
            return st.bernoulli(p[0])
        elif 'Pareto' == k:
            return st.pareto(p[1], scale=p[0])
        elif k in ('PERT', 'Triangle'):
            lo, mode, hi = p
            if hi == lo:
                return mode
            return st.triang((mode - lo) / (hi - lo), loc=lo, scale=hi - lo)
        elif 'Uniform' == k:
            return st.uniform(loc=p[0], scale=p[1] - p[0]) if p[1] > p[0] else p[0]
        else:
            raise ValueError(f"Generator kind {k!r} has no distribution!!!")

    def _filter(self, samples):
        """Post sample filter."""
        if 'Pareto' == self.kind:
            return np.minimum(samples, self.params[2])
        return samples

    def sample(self, size, rng):
        """
        Draw samples from the distribution.

        Parameters
        ----------
        size : int
            Number of samples
        rng : numpy.random.Generator
            Random stream

        Returns
        -------
        numpy.ndarray
            Filtered samples
        """
        dist = self._distribution()
        if isinstance(dist, float):
            return np.full(size, dist, dtype=float)
        return self._filter(np.asarray(dist.rvs(size=size, random_state=rng), dtype=float))

    def mean(self):
        """Theoretical mean of the (filtered) distribution."""
        if UPPER_BOUND == self.kind:
            return np.nan

        if 'Pareto' == self.kind:
            xmin, alpha, cap = self.params
            if cap <= xmin:
                return cap
            if not np.isfinite(cap):
                return st.pareto(alpha, scale=xmin).mean()
            if 1. == alpha:
                return xmin + xmin * np.log(cap / xmin)
            return xmin + xmin ** alpha * (cap ** (1. - alpha) - xmin ** (1. - alpha)) / (1. - alpha)

        dist = self._distribution()
        if isinstance(dist, float):
            return dist
        return float(dist.mean())

    #--------------------------------------------------------------------------
    def generate(self, prior, percentiles, rng):
        """
        Generate node results from its predecessors' results.

        Parameters
        ----------
        prior : dict
            Predecessor results keyed by node id
        percentiles : sequence of float
            Percentiles to aggregate
        rng : numpy.random.Generator
            Shared random stream

        Returns
        -------
        GenerationResults

        Raises
        ------
        StructuralError
            If a distribution node has not exactly one predecessor or
            an upper bound node has none
        """
        if UPPER_BOUND == self.kind:
            return self._generate_upper_bound(prior, percentiles)

        if 1 != len(prior):
            raise StructuralError(f"Invalid number of predecessors for {self.name}: {len(prior)}")

        (base,) = prior.values()
        raw = self.sample(len(base.raw), rng)
        logger.debug("Generated %d samples of %s", len(raw), self.name)
        return GenerationResults.from_samples(raw, base.cumulative + raw, percentiles)

    def _generate_upper_bound(self, prior, percentiles):
        if not prior:
            raise StructuralError("No predecessors provided to the upper bound generator")

        cumulative = np.max(np.vstack([r.raw for r in prior.values()]), axis=0)
        return GenerationResults.from_samples(np.zeros_like(cumulative), cumulative, percentiles)
