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
Text segmentation and stopword utilities that turn raw text into the token sequences ranked by TextRank.

Both are pluggable collaborators of :class:`tfidfrank.core.KeywordExtractor`: any callable mapping a text to
an ordered list of lowercase terms can replace :func:`word_tokenize`, and any set of strings can replace
:func:`default_stopwords`.

The default tokenizer keeps word-like runs of characters only (Unicode aware), so punctuation and whitespace
never become terms. It relies on NLTK's :class:`RegexpTokenizer` and needs no NLTK data. The default stopwords
come from the NLTK stopwords corpus, which can be downloaded via

        >>> import nltk
        >>> nltk.download('stopwords')
"""
import functools
import logging
from abc import abstractmethod
from typing import FrozenSet, Iterable, List, Set, Tuple

from nltk.corpus import stopwords
from nltk.tokenize import RegexpTokenizer
from nltk.tokenize.api import TokenizerI

from tfidfrank.decorators import requires_nltk_corpus

__author__ = 'Jie Gao <j.gao@sheffield.ac.uk>'

__all__ = ["BaseTokenizer", "WordTokenizer", "word_tokenize", "default_stopwords", "remove_stopwords",
           "DEFAULT_STOPWORD_LANGUAGES"]

_logger = logging.getLogger("tfidfrank.preprocessing.segmentation")

WORD_PATTERN = r"\w+"

# stopword lists of the NLTK corpus merged into the default stopword set.
# \w+ keeps a run of CJK characters as one token, so lists such as "chinese" only match with a
# segmenting tokenizer and are not loaded by default
DEFAULT_STOPWORD_LANGUAGES = ("english",)


class BaseTokenizer(TokenizerI):
    """
    Abstract base class from which all Tokenizer classes inherit.
    Descendant classes must implement a ``tokenize(text)`` method
    that returns a list of tokens as strings.
    """
    @abstractmethod
    def tokenize(self, text):
        """Return a list of tokens (strings) for a body of text.

        :rtype: list
        """
        return

    def itokenize(self, text, *args, **kwargs):
        """Return a generator that generates tokens "on-demand" for lower memory usage.

        :rtype: generator
        """
        return (t for t in self.tokenize(text, *args, **kwargs))

    def __call__(self, text):
        return self.tokenize(text)


class WordTokenizer(BaseTokenizer):
    """
    Word tokenizer keeping word-like tokens only.

    e.g., "Linear Diophantine equations, strict inequations." -> ['linear', 'diophantine', 'equations', 'strict',
    'inequations']
    """

    def __init__(self, lowercase: bool = True):
        self.lowercase = lowercase
        self._tokenizer = RegexpTokenizer(WORD_PATTERN)

    def tokenize(self, text: str) -> List[str]:
        """Return a list of word tokens.

        :param text: string of text.
        """
        if not text:
            return []
        tokens = self._tokenizer.tokenize(text)
        if self.lowercase:
            return [token.lower() for token in tokens]
        return tokens


_word_tokenizer = WordTokenizer()  # Singleton word tokenizer


def word_tokenize(text: str) -> List[str]:
    """Convenience function for tokenizing text into lowercase words.

    :rtype: list [of string]
    :return tokens
    """
    return _word_tokenizer.tokenize(text)


@requires_nltk_corpus
def _load_stopwords(languages: Tuple[str, ...]) -> FrozenSet[str]:
    available = set(stopwords.fileids())
    stop_words = set()
    for language in languages:
        if language not in available:
            _logger.warning("NLTK stopwords corpus has no '%s' list. Skipped.", language)
            continue
        stop_words.update(stopwords.words(language))
    return frozenset(stop_words)


@functools.lru_cache(maxsize=None)
def default_stopwords(languages: Tuple[str, ...] = DEFAULT_STOPWORD_LANGUAGES) -> FrozenSet[str]:
    """
    default stopword set, loaded once from the NLTK stopwords corpus

    :type languages: tuple [of string]
    :param languages: NLTK stopword lists to merge. Lists missing from the installed corpus are skipped
    :rtype: frozenset
    :raise: MissingCorpusError if the NLTK stopwords corpus is not installed
    """
    _logger.info("loading stopwords for %s ...", languages)
    return _load_stopwords(tuple(languages))


def remove_stopwords(tokens: Iterable[str], stop_words: Set[str]) -> List[str]:
    """
    remove stopwords from a token sequence, preserving the order of the remaining tokens
    """
    return [token for token in tokens if token not in stop_words]
