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
A small directed graph with accumulating edge weights, used as the co-occurrence network of TextRank.

The graph is stored in a networkx :class:`DiGraph`. Nodes are opaque hashable keys (word types in practice)
kept in insertion order and edge weights live on the 'weight' edge attribute. Edges are directed: an
undirected co-occurrence is represented by two directed edges that accumulate independently.

Predecessor lookups use the reverse adjacency (``DiGraph.pred``) that networkx keeps alongside every edge,
so they do not scan all the edges of the graph.
"""

import logging
from typing import Dict, Hashable, Iterator, List, Tuple

import networkx as nx

__author__ = 'Jie Gao <j.gao@sheffield.ac.uk>'

__all__ = ["WeightedGraph"]

_logger = logging.getLogger("tfidfrank.graph")


class WeightedGraph(object):

    def __init__(self):
        self._graph = nx.DiGraph()

    def __len__(self):
        return self._graph.number_of_nodes()

    def __contains__(self, node):
        return node in self._graph

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._graph)

    def __repr__(self):
        return "WeightedGraph(nodes=%s, edges=%s)" % (len(self), self.number_of_edges())

    def add_node(self, node: Hashable):
        """
        add a node with an empty adjacency mapping. Adding a known node is a no-op.
        """
        if node not in self._graph:
            self._graph.add_node(node)

    def add_edge(self, from_node: Hashable, to_node: Hashable, weight: float = 1.0):
        """
        add `weight` to the directed edge from_node -> to_node (created with weight 0 if absent)

        Both nodes are added if unknown. The reverse edge is not touched.

        :type weight: float
        :param weight: non-negative weight accumulated on the edge
        """
        if self._graph.has_edge(from_node, to_node):
            self._graph[from_node][to_node]['weight'] += weight
        else:
            self._graph.add_edge(from_node, to_node, weight=weight)

    def has_node(self, node: Hashable) -> bool:
        return node in self._graph

    def nodes(self) -> List[Hashable]:
        """
        :rtype: list
        :return: all nodes in insertion order
        """
        return list(self._graph.nodes())

    def edges(self) -> List[Tuple[Hashable, Hashable, float]]:
        """
        :rtype: list [of tuple (from, to, weight)]
        """
        return list(self._graph.edges(data='weight'))

    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def out_neighbors(self, node: Hashable) -> Dict[Hashable, float]:
        """
        :return: successor -> edge weight of `node`, or an empty mapping if the node is unknown
        """
        if node not in self._graph:
            return {}
        return {successor: data['weight'] for successor, data in self._graph.succ[node].items()}

    def in_neighbors(self, node: Hashable) -> Dict[Hashable, float]:
        """
        :return: predecessor -> edge weight of `node`, or an empty mapping if the node is unknown
        """
        if node not in self._graph:
            return {}
        return {predecessor: data['weight'] for predecessor, data in self._graph.pred[node].items()}

    def total_out_weight(self, node: Hashable) -> float:
        """
        sum of the outgoing edge weights of `node` (0 when it has no outgoing edge or is unknown)
        """
        if node not in self._graph:
            return 0
        return self._graph.out_degree(node, weight='weight')

    def clear(self):
        """
        remove every node and edge, so that a reused instance starts from an empty graph
        """
        self._graph.clear()

    def to_networkx(self) -> nx.DiGraph:
        """
        a copy of the underlying networkx directed graph, with the accumulated weights on the 'weight'
        edge attribute. Node insertion order is preserved.

        :rtype: networkx.DiGraph
        """
        _logger.debug("exporting %s", self)
        return self._graph.copy()
