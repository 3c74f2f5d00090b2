"""Tests for reading and normalizing word lists."""
import pytest

from word_lists import normalize_word, normalize_words, read_word_file, write_word_file


class TestNormalize:
    def test_lowercases_and_strips(self):
        assert normalize_words(['  Bee\n', 'ANT', '\tcat ']) == ['ant', 'bee', 'cat']

    def test_removes_inner_whitespace(self):
        assert normalize_word('ho ney\n') == 'honey'

    def test_drops_blank_lines(self):
        assert normalize_words(['ant', '', '   ', '\n', 'bee']) == ['ant', 'bee']

    def test_keeps_duplicates(self):
        assert normalize_words(['bee', 'Bee']) == ['bee', 'bee']

    def test_idempotent(self):
        raw = ['Zebra ', 'apple', '', 'Mango\n', 'apple']
        once = normalize_words(raw)
        assert normalize_words(once) == once

    def test_empty(self):
        assert normalize_words([]) == []


class TestWordFiles:
    def test_missing_file_returns_empty_list(self, tmp_path):
        assert read_word_file(tmp_path / 'nope.txt') == []

    def test_read_file(self, tmp_path):
        path = tmp_path / 'words.txt'
        path.write_text('Toot\n\nonto\n  TOOTH \n')
        assert read_word_file(path) == ['onto', 'toot', 'tooth']

    def test_write_then_read(self, tmp_path):
        path = write_word_file(tmp_path / 'lib' / 'answers.txt', ['ant', 'bee'])
        assert path.read_text() == 'ant\nbee\n'
        assert read_word_file(path) == ['ant', 'bee']

    def test_failed_write_leaves_no_file(self, tmp_path):
        def words():
            yield 'ant'
            yield 'bee'
            raise OSError('disk full')

        path = tmp_path / 'answers.txt'
        with pytest.raises(OSError):
            write_word_file(path, words())

        assert not path.exists()
        assert list(tmp_path.iterdir()) == []

    def test_failed_write_keeps_previous_file(self, tmp_path):
        path = write_word_file(tmp_path / 'answers.txt', ['ant', 'bee', 'cat'])

        def words():
            yield 'dog'
            raise OSError('disk full')

        with pytest.raises(OSError):
            write_word_file(path, words())

        assert read_word_file(path) == ['ant', 'bee', 'cat']
