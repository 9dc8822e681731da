# -*- coding: utf-8 -*-
# ==============================================================================
#
# Authors: Jie Gao <j.gao@sheffield.ac.uk>
#
# Copyright (c) 2017 JIE GAO . All Rights Reserved.
#
# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation
# files (the "Software"), to deal in the Software without
# restriction, including without limitation the rights to use,
# copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following
# conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES
# OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY,
# WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.
#
# ==============================================================================
"""
TextRank ranking of the words of a single document, seeded with prior weights.

TextRank algorithm look into the structure of word co-occurrence networks, where nodes are word types
and edges are word co-occurrences within a context window. Words that are most important, viz. keywords,
emerge as the most central words in the resulting network.

This implementation runs a damped power iteration (a PageRank with a personalization vector) on the
directed co-occurrence graph. Every word w gets a prior p(w), typically its TF-IDF score in the document
(see :class:`tfidfrank.tfidf.TfIdf`), normalised so that all priors sum to 1. Each pass computes,
from the scores of the previous pass only::

    S(w) = (1 - d) * p(w) + d * sum(weight(u, w) / out_weight(u) * S(u) for u in predecessors(w))

The iteration stops as soon as the largest per-word change of a pass is below `min_diff`, or after
`max_iter` passes.

Mihalcea, R., & Tarau, P. (2004, July). TextRank: Bringing order into texts. Association for Computational Linguistics.

A :class:`TextRank` instance keeps the graph and the scores of its last :meth:`TextRank.run` only. It is not
safe to share one instance between threads; use one instance per document (or per worker) instead.
"""

import enum
import logging
import math
import numbers
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from tfidfrank.exceptions import ConfigurationError
from tfidfrank.graph import WeightedGraph
from tfidfrank.utility import get_top_n_from_dict, is_positive_int

__author__ = 'Jie Gao <j.gao@sheffield.ac.uk>'

__all__ = ["TextRankConfig", "RankState", "TextRank", "DEFAULT_INITIAL_WEIGHT"]

_logger = logging.getLogger("tfidfrank.textrank")

# prior weight of a word that has no entry in the supplied initial weights
DEFAULT_INITIAL_WEIGHT = 1.0


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


class TextRankConfig(object):
    """
    Validated TextRank options. Values outside of their range are rejected with a
    :exc:`tfidfrank.exceptions.ConfigurationError`, they are never clamped.

    :type damping: float
    :param damping: damping factor d, 0 < d < 1. Default 0.85
    :type max_iter: int
    :param max_iter: maximum number of passes, >= 1. Default 200
    :type min_diff: float
    :param min_diff: convergence threshold on the largest per-word change of a pass, >= 0.
            0 disables the early stop, i.e., exactly `max_iter` passes are run. Default 0.0001
    :type window_size: int
    :param window_size: forward and backward co-occurrence window, >= 0.
            0 builds a graph without any edge. Default 5
    """

    __slots__ = ("_damping", "_max_iter", "_min_diff", "_window_size")

    def __init__(self, damping: float = 0.85, max_iter: int = 200, min_diff: float = 0.0001,
                 window_size: int = 5):
        if not _is_real(damping) or not 0 < damping < 1:
            raise ConfigurationError("`damping` must be a number in the open interval (0, 1), got %r" % (damping,))
        if not is_positive_int(max_iter):
            raise ConfigurationError("`max_iter` must be a positive integer, got %r" % (max_iter,))
        if not _is_real(min_diff) or not min_diff >= 0:
            raise ConfigurationError("`min_diff` must be a non-negative number, got %r" % (min_diff,))
        if not isinstance(window_size, int) or isinstance(window_size, bool) or window_size < 0:
            raise ConfigurationError("`window_size` must be a non-negative integer, got %r" % (window_size,))

        self._damping = float(damping)
        self._max_iter = max_iter
        self._min_diff = float(min_diff)
        self._window_size = window_size

    @property
    def damping(self) -> float:
        return self._damping

    @property
    def max_iter(self) -> int:
        return self._max_iter

    @property
    def min_diff(self) -> float:
        return self._min_diff

    @property
    def window_size(self) -> int:
        return self._window_size

    def __eq__(self, other):
        if not isinstance(other, TextRankConfig):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __hash__(self):
        return hash(self._astuple())

    def __repr__(self):
        return "TextRankConfig(damping=%r, max_iter=%r, min_diff=%r, window_size=%r)" % self._astuple()

    def __reduce__(self):
        return self.__class__, self._astuple()

    def _astuple(self):
        return self._damping, self._max_iter, self._min_diff, self._window_size


class RankState(enum.Enum):
    # no graph built
    IDLE = "idle"
    # graph built for the current document, no ranking yet
    BUILT = "built"
    # iteration terminated, by convergence or by reaching max_iter
    STABLE = "stable"


class TextRank(object):

    def __init__(self, config: Optional[TextRankConfig] = None, **options):
        """
        :type config: TextRankConfig, optional
        :param config: validated options. Mutually exclusive with keyword options
        :param options: keyword options of :class:`TextRankConfig`, i.e.,
                damping, max_iter, min_diff, window_size
        :raise: ConfigurationError
        """
        if config is not None and options:
            raise ConfigurationError("Pass either a TextRankConfig or keyword options, not both.")
        if config is not None and not isinstance(config, TextRankConfig):
            raise ConfigurationError("`config` must be a TextRankConfig, got %r" % (config,))
        if config is None:
            try:
                config = TextRankConfig(**options)
            except TypeError as err:
                raise ConfigurationError(str(err)) from err

        self._config = config
        self._graph = WeightedGraph()
        self._scores = dict()  # type: Dict[str, float]
        self._priors = dict()  # type: Dict[str, float]
        self._state = RankState.IDLE
        self._iterations = 0
        self._converged = False

    @property
    def config(self) -> TextRankConfig:
        return self._config

    @property
    def graph(self) -> WeightedGraph:
        return self._graph

    @property
    def scores(self) -> Dict[str, float]:
        return dict(self._scores)

    @property
    def priors(self) -> Dict[str, float]:
        return dict(self._priors)

    @property
    def state(self) -> RankState:
        return self._state

    @property
    def iterations(self) -> int:
        """number of passes run by the last :meth:`run`"""
        return self._iterations

    @property
    def converged(self) -> bool:
        """True if the last :meth:`run` stopped because the largest change fell below `min_diff`"""
        return self._converged

    def _reset(self):
        self._graph.clear()
        self._scores = dict()
        self._priors = dict()
        self._iterations = 0
        self._converged = False
        self._state = RankState.IDLE

    def build_graph(self, words: Iterable[str]) -> WeightedGraph:
        """
        reset the engine and build the co-occurrence graph of a token sequence

        Every distinct word is a node. For each position i, an edge words[i] -> words[j] of weight 1 is
        added for every other position j in [i - window_size, i + window_size], clipped to the sequence
        bounds. Weights accumulate when the same ordered pair co-occurs more than once.

        :type words: list [of string]
        :param words: tokenised (and filtered) document
        :rtype: WeightedGraph
        :return: the co-occurrence graph of this engine
        """
        self._reset()
        words = list(words)
        window_size = self._config.window_size

        _logger.debug("building co-occurrence graph from %s tokens (window=%s) ...", len(words), window_size)
        for word in words:
            self._graph.add_node(word)

        for i, word in enumerate(words):
            start = max(0, i - window_size)
            end = min(len(words), i + window_size + 1)
            for j in range(start, end):
                if j != i:
                    self._graph.add_edge(word, words[j], 1)

        self._state = RankState.BUILT
        _logger.debug("done. %s", self._graph)
        return self._graph

    def _compute_priors(self, initial_weights: Optional[Mapping[str, float]]) -> Dict[str, float]:
        if initial_weights is None:
            initial_weights = {}

        priors = {word: initial_weights.get(word, DEFAULT_INITIAL_WEIGHT) for word in self._graph.nodes()}
        total_weight = sum(priors.values())

        if total_weight > 0:
            priors = {word: weight / total_weight for word, weight in priors.items()}
        elif priors:
            _logger.warning("Total prior weight is %s. Priors are not normalised.", total_weight)
        return priors

    def run(self, words: Iterable[str], initial_weights: Optional[Mapping[str, float]] = None):
        """
        rank the words of a document

        :type words: list [of string]
        :param words: tokenised (and filtered) document
        :type initial_weights: dict [of word:weight], optional
        :param initial_weights: prior weights, typically TF-IDF scores of the document.
                Words without an entry (or every word when no mapping is given) get a weight of 1.0.
                Priors are normalised to sum to 1 when their total is positive.
        """
        self.build_graph(words)

        nodes = self._graph.nodes()
        self._priors = self._compute_priors(initial_weights)
        self._scores = dict(self._priors)

        # the graph is fixed during the iteration
        out_weights = {node: self._graph.total_out_weight(node) for node in nodes}
        in_neighbors = {node: self._graph.in_neighbors(node) for node in nodes}

        damping = self._config.damping
        min_diff = self._config.min_diff

        _logger.debug("ranking %s words ...", len(nodes))
        for iteration in range(self._config.max_iter):
            new_scores = dict()
            max_diff = 0.0

            for word in nodes:
                inbound_weight_sum = 0.0
                for neighbor, weight in in_neighbors[word].items():
                    neighbor_total_out_weight = out_weights[neighbor]
                    if neighbor_total_out_weight > 0:
                        inbound_weight_sum += (weight / neighbor_total_out_weight) * self._scores[neighbor]

                new_scores[word] = (1 - damping) * self._priors[word] + damping * inbound_weight_sum
                diff = abs(new_scores[word] - self._scores[word])
                # a NaN change never counts as converged
                max_diff = math.inf if math.isnan(diff) else max(max_diff, diff)

            self._scores = new_scores
            self._iterations = iteration + 1

            if max_diff < min_diff:
                self._converged = True
                break

        self._state = RankState.STABLE
        _logger.debug("done after %s iterations (converged: %s).", self._iterations, self._converged)

    def get_top_keywords(self, top_n: int = 5) -> List[Tuple[str, float]]:
        """
        :type top_n: int
        :param top_n: maximum number of keywords, >= 1
        :rtype: list [of tuple [string, float]]
        :return: (word, score) pairs sorted in descending order of score. Ties keep the first-seen order
                of the words in the document. Empty before the first run or for an empty document
        :raise: ConfigurationError
        """
        if not is_positive_int(top_n):
            raise ConfigurationError("`top_n` must be a positive integer, got %r" % (top_n,))

        return get_top_n_from_dict(self._scores, top_n)
