from collections import namedtuple
import fnmatch

from lexpath import exceptions
from lexpath import platforms


class _Variant(object):
    """Equality and hashing for the tagged variants below.

    Two variants are equal only if they are the same variant with equal
    fields, so ``Disk('C') != Normal('C')`` even though both are 1-tuples.
    """
    __slots__ = ()

    def __eq__(self, other):
        if not isinstance(other, tuple):
            return NotImplemented
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self))


#
# --- Volumes

class UNC(_Variant, namedtuple('UNC', ['server', 'share'])):
    """A network share prefix, ``\\\\server\\share``."""
    __slots__ = ()

    def __str__(self):
        # UNC syntax is backslash-only regardless of the body separator
        return '\\\\%s\\%s' % (self.server, self.share)


class Disk(_Variant, namedtuple('Disk', ['letter'])):
    """A drive letter prefix. The letter is always stored uppercase."""
    __slots__ = ()

    def __new__(cls, letter):
        if len(letter) != 1:
            raise ValueError('drive letter must be a single character, got %r' % (letter,))
        # some characters uppercase to more than one, e.g. 'ß'
        if len(letter.upper()) == 1:
            letter = letter.upper()
        return super(Disk, cls).__new__(cls, letter)

    @classmethod
    def _make(cls, iterable):
        # _replace goes through _make, keep the letter normalized
        return cls(*iterable)

    def __str__(self):
        return '%s:' % self.letter


#
# --- Body components

class CurDir(_Variant, namedtuple('CurDir', [])):
    __slots__ = ()

    def __str__(self):
        return '.'


class ParentDir(_Variant, namedtuple('ParentDir', [])):
    __slots__ = ()

    def __str__(self):
        return '..'


class Normal(_Variant, namedtuple('Normal', ['name'])):
    """A named path component."""
    __slots__ = ()

    def __str__(self):
        return self.name


CUR_DIR = CurDir()
PARENT_DIR = ParentDir()


def body_from_text(text):
    """Maps a text component to ``CUR_DIR``, ``PARENT_DIR`` or a ``Normal``."""
    if text == '..':
        return PARENT_DIR
    if text == '.':
        return CUR_DIR
    return Normal(text)


def split_file_name(name):
    """Splits a file name into ``(stem, extension)`` at its last dot.

    A name without a dot, or whose only dot is its first character, has
    no extension::

        >>> split_file_name('archive.tar.gz')
        ('archive.tar', 'gz')
        >>> split_file_name('.bashrc')
        ('.bashrc', '')
        >>> split_file_name('notes.')
        ('notes', '')
    """
    index = name.rfind('.')
    if index <= 0:
        return name, ''
    return name[:index], name[index + 1:]


class Path(object):
    """
    An I/O-free, structured path.

    A path is an optional volume (a ``Disk`` or ``UNC`` share), a root flag,
    a sequence of body components and a trailing separator flag. Paths are
    parsed from strings, manipulated lexically and rendered back for a
    :class:`lexpath.platforms.Platform`. Nothing here touches a filesystem.

    Paths are immutable. Every "modifying" operation returns a new path, and
    operations that have no result return ``None``.

    Examples::

        >>> from lexpath import Path
        >>> p = Path.parse('C:\\\\Windows\\\\System32')
        >>> p.volume, p.has_root, p.body
        (Disk(letter='C'), True, (Normal(name='Windows'), Normal(name='System32')))
        >>> Path.parse('/usr') / 'local/etc'
        Path(volume=None, has_root=True, body=('usr', 'local', 'etc'))

    The trailing separator flag only affects rendering, it is ignored by
    equality and hashing.
    """
    __slots__ = ('_volume', '_has_root', '_body', '_has_trailing_separator')

    def __init__(self, volume=None, has_root=False, body=(), has_trailing_separator=False):
        object.__setattr__(self, '_volume', volume)
        object.__setattr__(self, '_has_root', bool(has_root))
        object.__setattr__(self, '_body', tuple(body))
        object.__setattr__(self, '_has_trailing_separator', bool(has_trailing_separator))

    def __setattr__(self, name, value):
        raise AttributeError('%s is immutable' % type(self).__name__)

    def __delattr__(self, name):
        raise AttributeError('%s is immutable' % type(self).__name__)

    @classmethod
    def parse(cls, raw):
        """Parses ``raw``. Returns ``None`` if it is not a valid path.

        Both ``/`` and ``\\`` are accepted as separators on every platform,
        and components are not checked against any filename rules.
        """
        from lexpath import grammar

        return grammar.parse(raw)

    @classmethod
    def from_string(cls, raw):
        """Like :meth:`parse`, but raises on failure.

        Raises:
            InvalidPathError: If ``raw`` cannot be parsed.
        """
        p = cls.parse(raw)
        if p is None:
            raise exceptions.InvalidPathError('invalid path: %r' % (raw,), raw=raw)
        return p

    @classmethod
    def from_parts(cls, parts, platform=None):
        """Parses every part and appends them left to right.

        Returns the empty path for no parts, or ``None`` if any part fails
        to parse.
        """
        result = EMPTY
        for part in parts:
            p = cls.parse(part)
            if p is None:
                return None
            result = result.append(p, platform=platform)
        return result

    volume = property(lambda self: self._volume,
                      doc="""The ``Disk`` or ``UNC`` volume, if any""")

    has_root = property(lambda self: self._has_root,
                        doc="""Whether the path starts at the root of its volume""")

    body = property(lambda self: self._body,
                    doc="""The components as a tuple of ``CurDir``/``ParentDir``/``Normal``""")

    has_trailing_separator = property(lambda self: self._has_trailing_separator,
                                      doc="""Whether a separator follows the last component""")

    def _replace(self, **changes):
        fields = {
            'volume': self._volume,
            'has_root': self._has_root,
            'body': self._body,
            'has_trailing_separator': self._has_trailing_separator,
        }
        for key in changes:
            if key not in fields:
                raise TypeError('unexpected field %r' % key)
        fields.update(changes)
        return type(self)(**fields)

    def _key(self):
        return (self._volume, self._has_root, self._body)

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return '%s(volume=%r, has_root=%r, body=%r)' % (
            type(self).__name__, self._volume, self._has_root,
            tuple(str(b) for b in self._body))

    def __str__(self):
        return self.render()

    def _coerce(self, other):
        if isinstance(other, Path):
            return other
        if isinstance(other, str):
            return type(self).from_string(other)
        return None

    def __truediv__(self, other):
        """Append a path or path string (self / other)."""
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.append(other)

    def __rtruediv__(self, other):
        """Append this path to a path string (other / self)."""
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.append(self)

    #
    # --- Operations on Paths.

    def append(self, other, platform=None):
        """Returns ``other`` appended to this path.

        If ``other`` is absolute or has a volume, it replaces this path. If it
        only has a root, it keeps this path's volume. Otherwise its components
        are added to the end of this path's body, and its trailing separator
        flag carries over.
        """
        if other.is_absolute(platform) or other.volume is not None:
            return other
        if other.has_root:
            return other._replace(volume=self._volume)
        return self._replace(body=self._body + other.body,
                             has_trailing_separator=other.has_trailing_separator)

    def is_absolute(self, platform=None):
        """Whether the path is absolute on ``platform``.

        On windows a path is absolute if it is on a UNC share, or if it has
        both a drive and a root. Elsewhere, having a root is enough.
        """
        if platforms.resolve(platform).is_windows:
            if isinstance(self._volume, UNC):
                return True
            return isinstance(self._volume, Disk) and self._has_root
        return self._has_root

    def is_relative(self, platform=None):
        return not self.is_absolute(platform)

    @property
    def parent(self):
        """The path with its last component removed.

        ``None`` if there are no components left to remove.
        """
        if not self._body:
            return None
        return self._replace(body=self._body[:-1], has_trailing_separator=False)

    @property
    def parents(self):
        """The ancestors of this path, longest first, excluding the path itself."""
        result = []
        p = self.parent
        while p is not None:
            result.append(p)
            p = p.parent
        return result

    def starts_with(self, base):
        """Whether this path is ``base`` or one of its descendants."""
        return base == self or base in self.parents

    def drop_base(self, base):
        """The relative path leading from ``base`` to this path.

        ``None`` if this path does not start with ``base``.
        """
        if not self.starts_with(base):
            return None
        return Path(body=self._body[len(base.body):],
                    has_trailing_separator=self._has_trailing_separator)

    @property
    def file_name(self):
        """The last component, if it is a ``Normal`` one."""
        if self._body and isinstance(self._body[-1], Normal):
            return self._body[-1].name
        return None

    @property
    def file_stem(self):
        """The file name without its extension.

        For example, ``Path.parse('/home/guido/python.tar.gz').file_stem``
        is ``'python.tar'``.
        """
        name = self.file_name
        if name is None:
            return None
        return split_file_name(name)[0]

    @property
    def extension(self):
        """The file extension without the dot, for example ``'py'``."""
        name = self.file_name
        if name is None:
            return None
        return split_file_name(name)[1]

    def with_file_name(self, name):
        """Returns the path with its file name set to ``name``.

        A ``Normal`` last component is replaced. If there are no components,
        or the last one is ``.`` or ``..``, ``name`` is added after it.
        An empty ``name`` leaves the path unchanged.
        """
        if not name:
            return self
        body = self._body
        if body and isinstance(body[-1], Normal):
            body = body[:-1]
        return self._replace(body=body + (Normal(name),))

    def with_extension(self, ext):
        """Returns the path with the extension of its file name set to ``ext``.

        ``None`` if the path has no file name.
        """
        name = self.file_name
        if name is None:
            return None
        stem = split_file_name(name)[0]
        return self.with_file_name('%s.%s' % (stem, ext))

    def drop_extension(self):
        """Returns the path with the extension of its file name removed.

        ``None`` if the path has no file name.
        """
        stem = self.file_stem
        if stem is None:
            return None
        return self.with_file_name(stem)

    def fnmatch(self, pattern):
        """Return ``True`` if :attr:`file_name` matches the given ``pattern``.

        .. seealso:: :func:`fnmatch.fnmatchcase`

        Args:
            pattern (str): A filename pattern with wildcards,
                for example ``'*.py'``.
        """
        name = self.file_name
        if name is None:
            return False
        return fnmatch.fnmatchcase(name, pattern)

    def render(self, platform=None):
        """Renders the path as a string for ``platform``.

        Body components are joined with the platform separator. UNC volumes
        always render with backslashes.
        """
        sep = platforms.resolve(platform).sep
        return ''.join([
            str(self._volume) if self._volume is not None else '',
            sep if self._has_root else '',
            sep.join(str(b) for b in self._body),
            sep if self._has_trailing_separator else '',
        ])


#: The empty path. Renders as ``''``.
EMPTY = Path()
Path.EMPTY = EMPTY
