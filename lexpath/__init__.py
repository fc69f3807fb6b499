"""
lexpath
=======

Lexpath is a library for working with filesystem paths as values, without
ever touching a filesystem. A path string is parsed into a structured
:class:`lexpath.Path` (an optional windows volume, a root flag, a list of
components and a trailing separator flag), manipulated lexically and
rendered back for either the posix or the windows dialect::

    >>> import lexpath
    >>> lexpath.render(lexpath.append(lexpath.parse('/usr'), lexpath.parse('local/etc')))
    '/usr/local/etc'
    >>> lexpath.extension(lexpath.parse('archive.tar.gz'))
    'gz'

Nothing is ever canonicalized: ``a/../b`` keeps all three components.
Operations that have no result (parsing garbage, the parent of ``/``, the
file name of ``..``) return ``None``.

Functions that depend on the platform take an optional ``platform``
argument. When it is omitted, the platform configured in
``lexpath.settings`` is used, which defaults to the running interpreter's.
"""
from importlib import metadata

from lexpath.base import CUR_DIR
from lexpath.base import CurDir
from lexpath.base import Disk
from lexpath.base import EMPTY
from lexpath.base import Normal
from lexpath.base import PARENT_DIR
from lexpath.base import ParentDir
from lexpath.base import Path
from lexpath.base import split_file_name
from lexpath.base import UNC
from lexpath.platforms import Platform
from lexpath.utils import join_search_path
from lexpath.utils import split_search_path
from lexpath import settings


try:
    __version__ = metadata.version('lexpath')
except metadata.PackageNotFoundError:  # pragma: no cover
    # we are not pip installed in environment
    __version__ = None


settings._initialize()


def _delegate_to_path(name):
    def wrapper(path, *args, **kwargs):
        f = getattr(path, name)
        return f(*args, **kwargs)
    wrapper.__doc__ = getattr(Path, name).__doc__
    wrapper.__name__ = name
    return wrapper


def _delegate_to_property(name):
    def wrapper(path):
        return getattr(path, name)
    wrapper.__doc__ = getattr(Path, name).__doc__
    wrapper.__name__ = name
    return wrapper


parse = Path.parse
parse_parts = Path.from_parts
render = _delegate_to_path('render')
append = _delegate_to_path('append')
is_absolute = _delegate_to_path('is_absolute')
is_relative = _delegate_to_path('is_relative')
drop_extension = _delegate_to_path('drop_extension')
fnmatch = _delegate_to_path('fnmatch')
parent = _delegate_to_property('parent')
parents = _delegate_to_property('parents')
file_name = _delegate_to_property('file_name')
file_stem = _delegate_to_property('file_stem')
extension = _delegate_to_property('extension')


def starts_with(base, path):
    """Whether ``path`` is ``base`` or one of its descendants."""
    return path.starts_with(base)


def drop_base(base, path):
    """The relative path from ``base`` to ``path``, or ``None``."""
    return path.drop_base(base)


def set_file_name(name, path):
    """See :meth:`Path.with_file_name`"""
    return path.with_file_name(name)


def set_extension(ext, path):
    """See :meth:`Path.with_extension`"""
    return path.with_extension(ext)


__all__ = [
    'Path',
    'Platform',
    'UNC',
    'Disk',
    'CurDir',
    'ParentDir',
    'Normal',
    'CUR_DIR',
    'PARENT_DIR',
    'EMPTY',
    'parse',
    'parse_parts',
    'render',
    'append',
    'is_absolute',
    'is_relative',
    'parent',
    'parents',
    'starts_with',
    'drop_base',
    'file_name',
    'split_file_name',
    'file_stem',
    'extension',
    'set_file_name',
    'set_extension',
    'drop_extension',
    'fnmatch',
    'split_search_path',
    'join_search_path',
]
