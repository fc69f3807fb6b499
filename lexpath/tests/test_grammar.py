import logging

from testfixtures import LogCapture

from lexpath import grammar
from lexpath.base import CUR_DIR
from lexpath.base import Disk
from lexpath.base import Normal
from lexpath.base import PARENT_DIR
from lexpath.base import UNC
from lexpath.test import LexpathTestCase


class TestVolume(LexpathTestCase):
    def test_disk(self):
        self.assertParsesTo('C:\\Windows\\System32',
                            volume=Disk('C'),
                            has_root=True,
                            body=[Normal('Windows'), Normal('System32')])

    def test_disk_is_uppercased(self):
        self.assertParsesTo('c:', volume=Disk('C'))

    def test_disk_uses_first_character(self):
        self.assertParsesTo('foo:bar', volume=Disk('F'), body=[Normal('bar')])

    def test_disk_relative(self):
        self.assertParsesTo('D:notes.txt', volume=Disk('D'), body=[Normal('notes.txt')])

    def test_disk_with_forward_slashes(self):
        self.assertParsesTo('c:/Users/', volume=Disk('C'), has_root=True,
                            body=[Normal('Users')], has_trailing_separator=True)

    def test_unc(self):
        self.assertParsesTo('\\\\server\\share\\dir',
                            volume=UNC('server', 'share'),
                            has_root=True,
                            body=[Normal('dir')])

    def test_unc_share_only(self):
        self.assertParsesTo('\\\\server/share', volume=UNC('server', 'share'))

    def test_unc_requires_backslashes(self):
        # two forward slashes are a root and a trailing separator, not a UNC prefix
        self.assertDoesNotParse('//server/share')

    def test_unc_without_share(self):
        self.assertDoesNotParse('\\\\server')

    def test_verbatim_unc(self):
        self.assertParsesTo('\\\\?\\server\\share\\dir',
                            volume=UNC('server', 'share'),
                            has_root=True,
                            body=[Normal('dir')])

    def test_verbatim_disk(self):
        self.assertParsesTo('\\\\?\\c:\\Windows',
                            volume=Disk('C'),
                            has_root=True,
                            body=[Normal('Windows')])

    def test_verbatim_prefix_alone(self):
        self.assertDoesNotParse('\\\\?\\')

    def test_question_mark_outside_prefix(self):
        self.assertDoesNotParse('a?b')


class TestRootAndBody(LexpathTestCase):
    def test_empty(self):
        self.assertParsesTo('')

    def test_root(self):
        self.assertParsesTo('/', has_root=True)

    def test_posix_glob(self):
        self.assertParsesTo('/usr/local/etc/*',
                            has_root=True,
                            body=[Normal('usr'), Normal('local'), Normal('etc'), Normal('*')])

    def test_relative(self):
        self.assertParsesTo('a/b', body=[Normal('a'), Normal('b')])

    def test_dots(self):
        self.assertParsesTo('./../.../x',
                            body=[CUR_DIR, PARENT_DIR, Normal('...'), Normal('x')])

    def test_not_canonicalized(self):
        self.assertParsesTo('a/../b', body=[Normal('a'), PARENT_DIR, Normal('b')])

    def test_mixed_separators(self):
        self.assertParsesTo('a\\b/c', body=[Normal('a'), Normal('b'), Normal('c')])

    def test_trailing_separator(self):
        self.assertParsesTo('a/b/', body=[Normal('a'), Normal('b')],
                            has_trailing_separator=True)

    def test_root_and_trailing_separator(self):
        self.assertParsesTo('//', has_root=True, has_trailing_separator=True)

    def test_double_separator_in_body(self):
        self.assertDoesNotParse('a//b')

    def test_two_trailing_separators(self):
        self.assertDoesNotParse('a//')

    def test_colon_in_body(self):
        self.assertDoesNotParse('/a:b')


class TestLogging(LexpathTestCase):
    def test_leftover_tokens_logged(self):
        with LogCapture('lexpath', level=logging.DEBUG) as log:
            self.assertIsNone(grammar.parse('a//b'))
        self.assertEqual(len(log.records), 1)
        self.assertIn("'a//b'", log.records[0].getMessage())

    def test_success_not_logged(self):
        with LogCapture('lexpath', level=logging.DEBUG) as log:
            grammar.parse('/a/b')
        log.check()


class TestUnicode(LexpathTestCase):
    def test_unicode_components(self):
        self.assertParsesTo('/données/日本', has_root=True,
                            body=[Normal('données'), Normal('日本')])

    def test_letter_without_single_uppercase(self):
        self.assertParsesTo('ß:x', volume=Disk('ß'), body=[Normal('x')])
