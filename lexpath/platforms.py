"""
Classifies host families into the two path dialects lexpath understands.

A host-family identifier is the name an operating system reports for itself
(``windows``, ``mingw32``, ``linux``, ``darwin``...). The three Windows
families share the backslash dialect; everything else is posix.
"""
import enum
import sys

WINDOWS_FAMILIES = frozenset(['windows', 'mingw32', 'cygwin32'])

# sys.platform names that don't match their family identifier
_SYS_PLATFORM_FAMILIES = {
    'win32': 'windows',
    'cygwin': 'cygwin32',
    'msys': 'mingw32',
}


def is_windows_family(family):
    """True if ``family`` names a Windows host family (case-insensitive)."""
    return family.lower() in WINDOWS_FAMILIES


class Platform(enum.Enum):
    """The path dialect used for rendering and absoluteness checks.

    Examples::

        >>> Platform.from_family('mingw32')
        <Platform.WINDOWS: 'windows'>
        >>> Platform.POSIX.sep, Platform.POSIX.pathsep
        ('/', ':')
    """
    POSIX = 'posix'
    WINDOWS = 'windows'

    @property
    def is_windows(self):
        return self is Platform.WINDOWS

    @property
    def sep(self):
        """The directory separator."""
        return '\\' if self.is_windows else '/'

    @property
    def pathsep(self):
        """The separator between entries of a path list such as ``PATH``."""
        return ';' if self.is_windows else ':'

    @classmethod
    def from_family(cls, family):
        if is_windows_family(family):
            return cls.WINDOWS
        return cls.POSIX

    @classmethod
    def current(cls):
        """The platform of the running interpreter."""
        return cls.from_family(_SYS_PLATFORM_FAMILIES.get(sys.platform, sys.platform))

    @classmethod
    def default(cls):
        """The platform configured in ``lexpath.settings``.

        ``auto`` resolves to :meth:`current`. Anything else has already been
        validated and lowercased by ``lexpath.settings`` and is classified
        as a host-family identifier (``posix`` and ``windows`` included).
        """
        from lexpath import settings

        configured = settings.get().get('platform', 'auto')
        if configured == 'auto':
            return cls.current()
        return cls.from_family(configured)


def resolve(platform=None):
    """Returns ``platform`` as a :class:`Platform`, or the configured default.

    Strings are accepted and classified like host-family identifiers.
    """
    if platform is None:
        return Platform.default()
    if isinstance(platform, Platform):
        return platform
    return Platform.from_family(platform)
