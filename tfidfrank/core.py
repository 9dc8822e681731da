#!/usr/bin/env python
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
Keywords extraction from one or more documents, combining corpus-level TF-IDF weights with TextRank.

Pipeline: raw documents -> tokenisation -> stopword removal -> [more than one document: TF-IDF model built
once over the whole corpus] -> per document: TextRank seeded with the TF-IDF scores of that document ->
top N (keyword, score) pairs.

Note: with a single document no TF-IDF model is built (there is no corpus to compare against) and TextRank
runs with uniform priors. Results for a document can therefore differ depending on whether it is ranked
alone or together with other documents.

Simple example
--------------

    >>> from tfidfrank import keywords_extraction
    >>> keywords_extraction(["the cat sat on the mat with another cat", "the dog sat on the log"],
    ...                     top_n=3, stopwords={"the", "on", "with"})  # doctest: +SKIP
"""

import logging
from itertools import repeat
from multiprocessing import Pool
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from tfidfrank.exceptions import ConfigurationError
from tfidfrank.preprocessing.segmentation import default_stopwords, remove_stopwords, word_tokenize
from tfidfrank.textrank import TextRank, TextRankConfig
from tfidfrank.tfidf import TfIdf
from tfidfrank.utility import is_positive_int

__author__ = 'Jie Gao <j.gao@sheffield.ac.uk>'

__all__ = ["KeywordExtractor", "keywords_extraction"]

_logger = logging.getLogger("tfidfrank.core")

Tokenizer = Callable[[str], List[str]]


def _rank_document(tokens: Sequence[str], initial_weights: Optional[Dict[str, float]],
                   config: TextRankConfig, top_n: int) -> List[Tuple[str, float]]:
    """
    rank a single document with a fresh TextRank engine
    """
    text_rank = TextRank(config)
    text_rank.run(tokens, initial_weights)
    return text_rank.get_top_keywords(top_n)


class KeywordExtractor(object):

    def __init__(self, documents: Union[str, Iterable[str]],
                 tokenizer: Optional[Tokenizer] = None,
                 stopwords: Optional[Iterable[str]] = None,
                 use_stopwords: bool = True):
        """
        tokenise and filter every document once. A TF-IDF model is built over all the documents
        if more than one document is given.

        :type documents: string or list [of string]
        :param documents: a single text or a list of texts
        :type tokenizer: callable, optional
        :param tokenizer: text -> ordered list of lowercase terms. Default with :func:`word_tokenize`
        :type stopwords: set [of string], optional
        :param stopwords: custom stopwords, override the default NLTK stopwords
        :type use_stopwords: bool
        :param use_stopwords: remove stopwords from the tokenised documents. Default as True
        :raise: MissingCorpusError if default stopwords are used and the NLTK stopwords corpus is not installed
        """
        if isinstance(documents, str):
            documents = [documents]
        if tokenizer is None:
            tokenizer = word_tokenize
        if not callable(tokenizer):
            raise ConfigurationError("`tokenizer` must be callable, got %r" % (tokenizer,))

        final_stopwords = None
        if use_stopwords:
            final_stopwords = set(stopwords) if stopwords is not None else default_stopwords()

        _logger.info("tokenising documents (stopwords removal: %s) ...", use_stopwords)
        tokenized_docs = []
        for document in documents:
            tokens = list(tokenizer(document))
            if final_stopwords is not None:
                tokens = remove_stopwords(tokens, final_stopwords)
            tokenized_docs.append(tuple(tokens))
        self._tokenized_docs = tuple(tokenized_docs)
        _logger.info("done. %s documents.", len(self._tokenized_docs))

        self._tfidf_model = TfIdf(self._tokenized_docs) if len(self._tokenized_docs) > 1 else None

    @property
    def tokenized_docs(self) -> Tuple[Tuple[str, ...], ...]:
        return self._tokenized_docs

    @property
    def tfidf_model(self) -> Optional[TfIdf]:
        """TF-IDF model of the corpus, None when a single document is given"""
        return self._tfidf_model

    def _initial_weights(self, doc_index: int) -> Optional[Dict[str, float]]:
        if self._tfidf_model is None:
            return None
        return self._tfidf_model.document_scores(doc_index)

    def get_keywords(self, top_n: int = 10, config: Optional[TextRankConfig] = None,
                     workers: int = 1) -> List[List[Tuple[str, float]]]:
        """
        :type top_n: int
        :param top_n: maximum number of keywords per document, >= 1. Default 10
        :type config: TextRankConfig, optional
        :param config: TextRank options. Default with TextRankConfig()
        :type workers: int
        :param workers: number of processes ranking documents in parallel. Default 1
        :rtype: list [of list [of tuple [string, float]]]
        :return: for each document, in input order, (keyword, score) pairs sorted in descending order of score
        :raise: ConfigurationError
        """
        if not is_positive_int(top_n):
            raise ConfigurationError("`top_n` must be a positive integer, got %r" % (top_n,))
        if not is_positive_int(workers):
            raise ConfigurationError("`workers` must be a positive integer, got %r" % (workers,))
        if config is None:
            config = TextRankConfig()
        elif not isinstance(config, TextRankConfig):
            raise ConfigurationError("`config` must be a TextRankConfig, got %r" % (config,))

        all_initial_weights = [self._initial_weights(doc_index) for doc_index in range(len(self._tokenized_docs))]

        _logger.info("ranking %s documents with %s ...", len(self._tokenized_docs), config)
        if workers > 1 and len(self._tokenized_docs) > 1:
            with Pool(processes=workers) as pool:
                results = pool.starmap(_rank_document, zip(self._tokenized_docs, all_initial_weights,
                                                           repeat(config), repeat(top_n)))
        else:
            results = [_rank_document(tokens, initial_weights, config, top_n)
                       for tokens, initial_weights in zip(self._tokenized_docs, all_initial_weights)]
        _logger.info("done.")
        return results


def keywords_extraction(documents: Union[str, Iterable[str]], top_n: int = 10,
                        tokenizer: Optional[Tokenizer] = None,
                        stopwords: Optional[Iterable[str]] = None,
                        use_stopwords: bool = True,
                        workers: int = 1,
                        **text_rank_options) -> List[List[Tuple[str, float]]]:
    """
    TF-IDF weighted TextRank keywords extraction for one or more documents

    :type documents: string or list [of string]
    :param documents: a single text or a list of texts
    :type top_n: int
    :param top_n: maximum number of keywords per document. Default 10
    :type tokenizer: callable, optional
    :param tokenizer: text -> ordered list of lowercase terms
    :type stopwords: set [of string], optional
    :param stopwords: custom stopwords, override the default NLTK stopwords
    :type use_stopwords: bool
    :param use_stopwords: remove stopwords. Default as True
    :type workers: int
    :param workers: number of processes ranking documents in parallel
    :param text_rank_options: damping, max_iter, min_diff, window_size (see :class:`TextRankConfig`)
    :rtype: list [of list [of tuple [string, float]]]
    :return: keywords with scores for each document, in input order
    :raise: ConfigurationError
    """
    try:
        config = TextRankConfig(**text_rank_options)
    except TypeError as err:
        raise ConfigurationError(str(err)) from err

    extractor = KeywordExtractor(documents, tokenizer=tokenizer, stopwords=stopwords, use_stopwords=use_stopwords)
    return extractor.get_keywords(top_n=top_n, config=config, workers=workers)
