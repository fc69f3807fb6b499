"""
Path functions that always use the posix dialect.

Use this module instead of passing ``platform=Platform.POSIX`` around::

    >>> from lexpath import posix
    >>> posix.render(Path.parse(r'usr\\local'))
    'usr/local'
"""
from functools import partial

from lexpath import utils
from lexpath.platforms import Platform

platform = Platform.POSIX
sep = platform.sep
pathsep = platform.pathsep


def render(p):
    return p.render(platform)


def is_absolute(p):
    return p.is_absolute(platform)


def is_relative(p):
    return p.is_relative(platform)


def append(a, b):
    return a.append(b, platform=platform)


split_search_path = partial(utils.split_search_path, platform=platform)
join_search_path = partial(utils.join_search_path, platform=platform)
