"""
Settings for the platform-dependent defaults of lexpath.

There is a single setting, ``platform``, the dialect used when a function
such as :meth:`lexpath.Path.render` is called without one. Its value is
``auto`` (the running interpreter's platform), ``posix``, ``windows`` or any
host-family identifier such as ``mingw32`` or ``linux``.

It is looked up, last one wins, in:

1. the ``[lexpath]`` section of ``default.cfg`` shipped with the package,
2. the ``[lexpath]`` section of ``~/.lexpath.cfg``,
3. the ``LEXPATH_PLATFORM`` environment variable.

Example::

    >>> import lexpath
    >>> from lexpath import settings
    >>> with settings.use({'platform': 'windows'}):
    ...     str(lexpath.Path.parse('a/b'))
    'a\\\\b'
"""
import os
import re
import threading

from configparser import ConfigParser

CONFIG_FILE = 'default.cfg'
USER_CONFIG_FILE = '~/.lexpath.cfg'
SECTION = 'lexpath'
PLATFORM_ENV_VAR = 'LEXPATH_PLATFORM'

# auto, posix, windows and host families all look like identifiers
_PLATFORM_RE = re.compile(r'^[a-z][a-z0-9_]*$')

_global_settings = {}
thread_local = threading.local()


def validate_platform(value):
    """Returns the normalized (lowercase) ``platform`` value.

    Raises:
        ValueError: If ``value`` can't name a platform.
    """
    normalized = value.strip().lower() if isinstance(value, str) else None
    if not normalized or not _PLATFORM_RE.match(normalized):
        raise ValueError('%r is not a valid platform, expected auto, posix, windows'
                         ' or a host family' % (value,))
    return normalized


_VALIDATORS = {
    'platform': validate_platform,
}


def _validate(settings):
    validated = {}
    for key, value in settings.items():
        if key not in _VALIDATORS:
            raise ValueError('\'%s\' is not a valid setting' % key)
        validated[key] = _VALIDATORS[key](value)
    return validated


def parse_config_file(filename):
    """
    Reads the ``[lexpath]`` section of a configuration file.

    Other sections are ignored, so lexpath can share a file with other tools.

    Args:
        filename (str): File to read configuration settings from.

    Returns:
        dict: The validated settings found in the file.

    Raises:
        ValueError: If the section has an unknown option or a bad value.
    """
    parser = ConfigParser(default_section='__unused__')
    with open(filename) as fp:
        parser.read_file(fp)

    if not parser.has_section(SECTION):
        return {}
    return _validate(dict(parser.items(SECTION)))


def _initialize():
    """
    Resets global settings from ``default.cfg``, ``~/.lexpath.cfg`` and the
    environment, in that order.
    """
    _global_settings.clear()
    default_cfg = os.path.join(os.path.dirname(__file__), CONFIG_FILE)
    _global_settings.update(parse_config_file(default_cfg))
    user_cfg = os.path.expanduser(USER_CONFIG_FILE)
    if os.path.exists(user_cfg):
        update(parse_config_file(user_cfg))
    if os.environ.get(PLATFORM_ENV_VAR):
        update({'platform': os.environ[PLATFORM_ENV_VAR]})


def get():
    """Returns a copy of the settings in effect for the current thread."""
    return dict(getattr(thread_local, 'settings', _global_settings))


def update(settings):
    """
    Validates ``settings`` and applies them globally.

    Raises:
        ValueError: For unknown settings or invalid values.
        RuntimeError: If called within :func:`use`.
    """
    if hasattr(thread_local, 'settings'):
        raise RuntimeError('update() cannot be called from within a settings context manager')
    _global_settings.update(_validate(settings))


class _Use(object):
    """
    Context manager that overrides settings for the current thread only.

    The overrides are validated when the context manager is created, so an
    invalid value raises before anything is changed.
    """
    def __init__(self, settings=None):
        self.temp_settings = get()
        self.temp_settings.update(_validate(settings or {}))
        self.old_settings = None

    def __enter__(self):
        self.old_settings = getattr(thread_local, 'settings', None)
        thread_local.settings = self.temp_settings
        return dict(self.temp_settings)

    def __exit__(self, type, value, traceback):
        if self.old_settings is None:
            del thread_local.settings
        else:
            thread_local.settings = self.old_settings


#: Context manager for temporarily modifying settings.
#:
#: Arguments:
#:   settings (dict): Settings to override, e.g. ``{'platform': 'windows'}``.
use = _Use
