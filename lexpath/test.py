"""
Test helpers for code that works with lexpath paths.

``LexpathTestCase`` pins the configured platform for the duration of a test
so that ``str(path)`` and the other platform-dependent defaults don't depend
on the machine running the tests.
"""
import unittest

from lexpath import settings
from lexpath.base import Path
from lexpath.platforms import Platform


class LexpathTestCase(unittest.TestCase):
    """A TestCase that runs with a fixed default platform.

    Set ``platform`` on subclasses to change it. Use :meth:`use_platform` to
    switch platforms within a single test.
    """
    platform = Platform.POSIX

    def setUp(self):
        super(LexpathTestCase, self).setUp()
        self.use_platform(self.platform)

    def use_platform(self, platform):
        """Makes ``platform`` the configured default until the test ends."""
        patcher = settings.use({'platform': Platform(platform).value})
        patcher.__enter__()
        self.addCleanup(patcher.__exit__, None, None, None)

    def parse(self, raw):
        """Parses ``raw``, failing the test if it is not a valid path."""
        p = Path.parse(raw)
        self.assertIsNotNone(p, 'could not parse %r' % (raw,))
        return p

    def assertParsesTo(self, raw, volume=None, has_root=False, body=(),
                       has_trailing_separator=False):
        p = self.parse(raw)
        self.assertEqual(p.volume, volume)
        self.assertEqual(p.has_root, has_root)
        self.assertEqual(p.body, tuple(body))
        self.assertEqual(p.has_trailing_separator, has_trailing_separator)
        return p

    def assertDoesNotParse(self, raw):
        self.assertIsNone(Path.parse(raw), '%r should not parse' % (raw,))

    def assertRendersAs(self, p, expected, platform=None):
        self.assertEqual(p.render(platform), expected)
