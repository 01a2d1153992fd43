"""
figtext test suite
storage tests
"""

import os
import shutil
import unittest
from unittest.mock import patch

import figtext
from figtext import NotFoundError, FormatError
from .base import BaseTester, make_flf


class TestFindFiles(BaseTester):
    """Test font and control file lookup."""

    def setUp(self):
        super().setUp()
        shutil.copy(self.font_path / 'test.flf', self.temp_path / 'test.flf')
        shutil.copy(self.control_path / 'upper.flc', self.temp_path / 'upper.flc')

    def test_find_by_name(self):
        path = figtext.find_file('test', '.flf', dirs=[self.temp_path])
        self.assertEqual(path, (self.temp_path / 'test.flf').resolve())

    def test_find_with_suffix(self):
        path = figtext.find_file('test.flf', '.flf', dirs=[str(self.temp_path)])
        self.assertEqual(path, (self.temp_path / 'test.flf').resolve())

    def test_find_by_path(self):
        path = figtext.find_file(self.temp_path / 'test', '.flf')
        self.assertEqual(path, (self.temp_path / 'test.flf').resolve())

    def test_path_not_on_search_path(self):
        # a name with a directory component is only looked for there
        with self.assertRaises(NotFoundError):
            figtext.find_file('nowhere/test', '.flf', dirs=[self.temp_path])

    def test_environment(self):
        with patch.dict(os.environ, {'FIGLET_FONTDIR': str(self.temp_path)}):
            path = figtext.find_file('test', '.flf')
        self.assertEqual(path, (self.temp_path / 'test.flf').resolve())

    def test_dirs_before_environment(self):
        other = self.temp_path / 'other'
        other.mkdir()
        (other / 'test.flf').write_text(make_flf())
        with patch.dict(os.environ, {'FIGLET_FONTDIR': str(self.temp_path)}):
            path = figtext.find_file('test', '.flf', dirs=[other])
        self.assertEqual(path, (other / 'test.flf').resolve())

    def test_not_found(self):
        with self.assertRaises(NotFoundError):
            figtext.find_file('nonexistent', '.flf', dirs=[self.temp_path])

    @patch.dict(os.environ, {'FIGLET_FONTDIR': ''})
    def test_list(self):
        (self.temp_path / 'second.flf').write_text(make_flf())
        self.assertEqual(figtext.list_fonts([self.temp_path]), ['second', 'test'])
        self.assertEqual(figtext.list_controls([self.temp_path]), ['upper'])

    @patch.dict(os.environ, {'FIGLET_FONTDIR': ''})
    def test_list_missing_dir(self):
        self.assertEqual(figtext.list_fonts([self.temp_path / 'missing']), [])


class TestLoad(BaseTester):
    """Test loading by name."""

    def setUp(self):
        super().setUp()
        self.dirs = [self.font_path, self.control_path]

    def test_load_font(self):
        font = figtext.load_font('test', self.dirs)
        self.assertEqual(font, self.testfont)

    def test_load_font_cached(self):
        font1 = figtext.load_font('test', self.dirs)
        font2 = figtext.load_font(self.font_path / 'test.flf')
        self.assertIs(font1, font2)

    def test_cache_keyed_on_path(self):
        # same name, different directories
        for name, glyph in (('one', 'A'), ('two', 'B')):
            (self.temp_path / name).mkdir()
            (self.temp_path / name / 'font.flf').write_text(make_flf({'A': (glyph,)}))
        font1 = figtext.load_font('font', [self.temp_path / 'one'])
        font2 = figtext.load_font('font', [self.temp_path / 'two'])
        self.assertEqual(font1.glyphs[65], ('A',))
        self.assertEqual(font2.glyphs[65], ('B',))

    def test_load_font_not_found(self):
        with self.assertRaises(NotFoundError):
            figtext.load_font('nonexistent', self.dirs)

    def test_load_font_bad(self):
        (self.temp_path / 'bad.flf').write_text('not a font\n')
        with self.assertRaises(FormatError):
            figtext.load_font('bad', [self.temp_path])

    def test_load_controls(self):
        stages = figtext.load_controls('stages', self.dirs)
        self.assertEqual(stages, ({65: 66}, {66: 67}))

    def test_load_controls_not_found(self):
        with self.assertRaises(NotFoundError):
            figtext.load_controls('nonexistent', self.dirs)

    def test_load_control_chain(self):
        stages = figtext.load_control_chain(['upper', 'stages'], self.dirs)
        self.assertEqual(len(stages), 3)
        # a -> A -> B -> C and b -> B -> C
        row = next(figtext.render('ab', self.testfont, stages))
        self.assertEqual(row, 'C C')

    def test_load_control_chain_empty(self):
        self.assertEqual(figtext.load_control_chain([], self.dirs), ())


if __name__ == '__main__':
    unittest.main()
