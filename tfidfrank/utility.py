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
import operator
from collections import OrderedDict
from typing import Dict, Hashable, List, Tuple

__author__ = 'Jie Gao <j.gao@sheffield.ac.uk>'

__all__ = ["sort_dict_by_value", "get_top_n_from_dict", "is_positive_int"]


def sort_dict_by_value(dictionary: Dict, reverse=True) -> OrderedDict:
    """
    sort a dictionary by its values (descending by default)

    the sort is stable: entries with equal values keep the insertion order of the dictionary,
    i.e., ties are broken by first-seen order
    """
    return OrderedDict(sorted(dictionary.items(), key=operator.itemgetter(1), reverse=reverse))


def get_top_n_from_dict(dictionary: Dict, top_n: int) -> List[Tuple[Hashable, float]]:
    return list(sort_dict_by_value(dictionary).items())[:top_n]


def is_positive_int(value) -> bool:
    # bool is a subclass of int and is not accepted as a count
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
