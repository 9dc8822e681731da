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
Exceptions raised by the tfidfrank package.

The scoring core degrades to empty or zero results on data problems (empty corpus, empty document,
unknown document index). Only invalid configuration and a missing NLTK corpus are reported as errors.
"""

__author__ = 'Jie Gao <j.gao@sheffield.ac.uk>'

__all__ = ["ConfigurationError", "MissingCorpusError"]


class ConfigurationError(ValueError):
    """Raised at construction time when an option is outside its documented range."""
    pass


class MissingCorpusError(LookupError):
    """Exception thrown when a user tries to use a feature that requires an NLTK corpus
    that has not been downloaded.
    """

    MESSAGE = """
Looks like you are missing some required data for this feature.

To download the necessary data, simply run

    python -m nltk.downloader stopwords

or use the NLTK downloader to download the missing data: http://nltk.org/data.html
"""

    def __init__(self, message=MESSAGE, *args, **kwargs):
        super(MissingCorpusError, self).__init__(message, *args, **kwargs)
