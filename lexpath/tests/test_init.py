import lexpath
from lexpath import Disk
from lexpath import Normal
from lexpath import Platform
from lexpath.test import LexpathTestCase


class TestFunctionalApi(LexpathTestCase):
    def test_parse_windows_path(self):
        p = lexpath.parse('C:\\Windows\\System32')
        self.assertEqual(p.volume, Disk('C'))
        self.assertTrue(p.has_root)
        self.assertEqual(p.body, (Normal('Windows'), Normal('System32')))

    def test_parse_posix_glob(self):
        p = lexpath.parse('/usr/local/etc/*')
        self.assertIsNone(p.volume)
        self.assertTrue(p.has_root)
        self.assertEqual(p.body, (Normal('usr'), Normal('local'), Normal('etc'), Normal('*')))

    def test_parse_failure(self):
        self.assertIsNone(lexpath.parse('a//b'))

    def test_parse_parts(self):
        self.assertEqual(lexpath.parse_parts([]), lexpath.EMPTY)
        self.assertEqual(lexpath.parse_parts(['/usr', 'local']), lexpath.parse('/usr/local'))
        self.assertIsNone(lexpath.parse_parts(['/usr', '?']))

    def test_append_and_render(self):
        p = lexpath.append(lexpath.parse('/usr'), lexpath.parse('local/etc'))
        self.assertEqual(lexpath.render(p, Platform.POSIX), '/usr/local/etc')
        self.assertEqual(lexpath.render(p), '/usr/local/etc')

    def test_append_absolute(self):
        b = lexpath.parse('\\\\srv\\share')
        for a in ('', '/x', 'C:\\y', 'rel'):
            self.assertEqual(lexpath.append(lexpath.parse(a), b, platform=Platform.WINDOWS), b)

    def test_is_absolute(self):
        self.assertTrue(lexpath.is_absolute(lexpath.parse('/a')))
        self.assertFalse(lexpath.is_absolute(lexpath.parse('/a'), Platform.WINDOWS))
        self.assertTrue(lexpath.is_relative(lexpath.parse('a')))

    def test_parent(self):
        self.assertEqual(lexpath.parent(lexpath.parse('/a/b')), lexpath.parse('/a'))
        self.assertIsNone(lexpath.parent(lexpath.parse('/')))

    def test_parents(self):
        parents = lexpath.parents(lexpath.parse('a/b/c'))
        self.assertEqual(parents, [lexpath.parse('a/b'), lexpath.parse('a'), lexpath.EMPTY])

    def test_starts_with(self):
        self.assertTrue(lexpath.starts_with(lexpath.parse('/a'), lexpath.parse('/a/b')))
        self.assertFalse(lexpath.starts_with(lexpath.parse('/a/b'), lexpath.parse('/a')))

    def test_drop_base(self):
        self.assertEqual(lexpath.drop_base(lexpath.parse('/a'), lexpath.parse('/a/b')),
                         lexpath.parse('b'))

    def test_file_name(self):
        self.assertEqual(lexpath.file_name(lexpath.parse('/a/b.txt')), 'b.txt')
        self.assertIsNone(lexpath.file_name(lexpath.parse('..')))

    def test_stem_and_extension(self):
        p = lexpath.parse('archive.tar.gz')
        self.assertEqual(lexpath.file_stem(p), 'archive.tar')
        self.assertEqual(lexpath.extension(p), 'gz')
        self.assertEqual(lexpath.split_file_name('archive.tar.gz'), ('archive.tar', 'gz'))

    def test_set_file_name(self):
        self.assertEqual(lexpath.set_file_name('c', lexpath.parse('a/b')), lexpath.parse('a/c'))

    def test_set_extension(self):
        self.assertEqual(lexpath.set_extension('json', lexpath.parse('a.txt')),
                         lexpath.parse('a.json'))
        self.assertIsNone(lexpath.set_extension('json', lexpath.parse('..')))

    def test_drop_extension(self):
        self.assertEqual(lexpath.drop_extension(lexpath.parse('a.txt')), lexpath.parse('a'))

    def test_fnmatch(self):
        self.assertTrue(lexpath.fnmatch(lexpath.parse('a/b.py'), '*.py'))

    def test_search_path(self):
        paths = lexpath.split_search_path('/a:/b')
        self.assertEqual(lexpath.join_search_path(paths), '/a:/b')

    def test_delegate_docs(self):
        self.assertEqual(lexpath.render.__name__, 'render')
        self.assertEqual(lexpath.render.__doc__, lexpath.Path.render.__doc__)
        self.assertEqual(lexpath.parent.__doc__, lexpath.Path.parent.__doc__)

    def test_all_exported(self):
        for name in lexpath.__all__:
            self.assertTrue(hasattr(lexpath, name), name)
