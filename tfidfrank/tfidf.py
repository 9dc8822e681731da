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
TF-IDF (term frequency - inverse document frequency) weighting over a fixed corpus of tokenised documents.

The corpus is fixed when the model is created. The document frequency of every term is counted once and the
inverse document frequency (IDF) of every term is cached at construction::

    idf(t) = ln(N / (df(t) + 1)) + 1

where N is the number of documents and df(t) is the number of documents containing t at least once. The
"+1" in the denominator avoids a division by zero and the "+1" outside the logarithm keeps a positive
baseline weight for common terms.

Term frequency is the relative frequency of a term in a single document::

    tf(t, d) = count(t in d) / |d|      (0 for an empty document)

and the combined score is tf(t, d) * idf(t). A term never seen in the corpus has an IDF of 0.

All queries degrade instead of raising: an empty corpus or an unknown document index yields zero/empty
results and records a diagnostic (see :attr:`TfIdf.diagnostics`, which keeps the most recent ones only).
Only an invalid `top_n` option is rejected with a :exc:`tfidfrank.exceptions.ConfigurationError`.

    >>> from tfidfrank.tfidf import TfIdf
    >>> tfidf = TfIdf([["cat", "dog", "cat"], ["dog", "bird"]])
    >>> [(term, round(score, 4)) for term, score in tfidf.top_terms(0)]
    [('cat', 0.6667), ('dog', 0.1982)]
"""

import logging
import math
from collections import Counter, deque
from types import MappingProxyType
from typing import Deque, Dict, Iterable, List, Mapping, Sequence, Tuple

from tfidfrank.exceptions import ConfigurationError
from tfidfrank.utility import get_top_n_from_dict, is_positive_int

__author__ = 'Jie Gao <j.gao@sheffield.ac.uk>'

__all__ = ["TfIdf"]

_logger = logging.getLogger("tfidfrank.tfidf")

# number of most recent diagnostics kept by a model
MAX_DIAGNOSTICS = 100


class TfIdf(object):

    def __init__(self, documents: Iterable[Sequence[str]]):
        """
        :type documents: list [of list [of string]]
        :param documents: tokenised corpus, e.g., [['term1', 'term2'], ['term3']].
                The position of a document in the corpus is used as its index in every query.
        """
        self._documents = tuple(tuple(document) for document in documents) if documents else tuple()
        self._term_counts = [Counter(document) for document in self._documents]
        self._idf_cache = dict()  # type: Dict[str, float]
        self.diagnostics = deque(maxlen=MAX_DIAGNOSTICS)  # type: Deque[str]

        if not self._documents:
            self._record(logging.WARNING, "TfIdf: documents are empty or invalid. All scores will be 0.")
            return

        self._compute_all_idf()

    @property
    def documents(self) -> Tuple[Tuple[str, ...], ...]:
        return self._documents

    @property
    def num_docs(self) -> int:
        return len(self._documents)

    def __len__(self):
        return self.num_docs

    @property
    def idf_cache(self) -> Mapping[str, float]:
        """
        read-only view of the cached term -> IDF mapping
        """
        return MappingProxyType(self._idf_cache)

    def _record(self, level, message, *args):
        _logger.log(level, message, *args)
        self.diagnostics.append(message % args if args else message)

    def _compute_all_idf(self):
        _logger.info("computing idf for %s documents ...", self.num_docs)
        total_docs = self.num_docs
        doc_frequency = Counter()
        for term_counts in self._term_counts:
            doc_frequency.update(term_counts.keys())

        for term, freq in doc_frequency.items():
            self._idf_cache[term] = math.log(total_docs / (freq + 1)) + 1

        _logger.info("done. %s distinct terms.", len(self._idf_cache))

    def _is_valid_index(self, doc_index) -> bool:
        return isinstance(doc_index, int) and not isinstance(doc_index, bool) \
               and 0 <= doc_index < self.num_docs

    def idf(self, term: str) -> float:
        """
        :return: cached IDF of the term, 0 for a term not seen in the corpus
        """
        return self._idf_cache.get(term, 0.0)

    def tf(self, term: str, doc_index: int) -> float:
        """
        term frequency of a term in the document at `doc_index`

        :return: relative frequency, 0 for an empty document. An unknown index records a diagnostic and returns 0
        """
        if not self._is_valid_index(doc_index):
            self._record(logging.ERROR, "Document with index %s not found.", doc_index)
            return 0.0

        total_terms_in_doc = len(self._documents[doc_index])
        if total_terms_in_doc == 0:
            return 0.0

        return self._term_counts[doc_index][term] / total_terms_in_doc

    def tf_idf(self, term: str, doc_index: int) -> float:
        """
        TF-IDF score of a single term in the document at `doc_index`

        Returns 0 if the term is not in the corpus or the document index is unknown.
        """
        return self.tf(term, doc_index) * self.idf(term)

    def document_scores(self, doc_index: int) -> Dict[str, float]:
        """
        TF-IDF scores of all the distinct terms of a document

        :type doc_index: int
        :param doc_index: position of the document in the corpus
        :rtype: dict [of term:score]
        :return: term -> score in first-seen order of the document, empty dict for an unknown index
        """
        if not self._is_valid_index(doc_index):
            self._record(logging.ERROR, "Document with index %s not found.", doc_index)
            return {}

        # Counter keeps the first-seen order of the document
        return {term: self.tf_idf(term, doc_index) for term in self._term_counts[doc_index]}

    def top_terms(self, doc_index: int, top_n: int = 5) -> List[Tuple[str, float]]:
        """
        top N terms of a document by TF-IDF score

        :type top_n: int
        :param top_n: maximum number of terms, >= 1
        :rtype: list [of tuple [string, float]]
        :return: (term, score) pairs sorted in descending order of score. Ties keep the first-seen order
        :raise: ConfigurationError
        """
        if not is_positive_int(top_n):
            raise ConfigurationError("`top_n` must be a positive integer, got %r" % (top_n,))

        return get_top_n_from_dict(self.document_scores(doc_index), top_n)

    def all_scores(self) -> List[Dict[str, float]]:
        """
        :return: document scores of every document, in corpus order
        """
        return [self.document_scores(doc_index) for doc_index in range(self.num_docs)]
