"""
tfidfrank: TF-IDF weighted TextRank keywords extraction
==================================

tfidfrank is a Python package for extracting the most salient terms of one or more documents. Corpus-level
TF-IDF weights are used as the prior (personalization) weights of a TextRank ranking over the word
co-occurrence graph of every document.


Simple example
--------------
Extract weighted keywords from two documents::

    >>> from tfidfrank import keywords_extraction
    >>> docs = ["Compatibility of systems of linear constraints over the set of natural numbers.",
    ...         "Upper bounds for components of a minimal set of solutions and algorithms of construction."]
    >>> keywords_extraction(docs, top_n=5, window_size=2)  # doctest: +SKIP

Pre-tokenised documents can be ranked directly with :class:`TfIdf` and :class:`TextRank`::

    >>> from tfidfrank import TfIdf, TextRank
    >>> corpus = [["cat", "dog", "cat"], ["dog", "bird"]]
    >>> text_rank = TextRank(window_size=2)
    >>> text_rank.run(corpus[0], TfIdf(corpus).document_scores(0))
    >>> text_rank.get_top_keywords(1)[0][0]
    'cat'


License
-------

Released under the MIT License::

Copyright (C) 2017, JIE GAO <j.gao@sheffield.ac.uk>

"""

from tfidfrank.core import KeywordExtractor, keywords_extraction
from tfidfrank.exceptions import ConfigurationError, MissingCorpusError
from tfidfrank.graph import WeightedGraph
from tfidfrank.textrank import TextRank, TextRankConfig, RankState
from tfidfrank.tfidf import TfIdf

__all__ = ["KeywordExtractor", "keywords_extraction", "ConfigurationError", "MissingCorpusError",
           "WeightedGraph", "TextRank", "TextRankConfig", "RankState", "TfIdf"]

__version__ = '0.1.0'
