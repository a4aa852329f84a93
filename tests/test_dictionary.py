import os
import random

import pytest

from termwordle.dictionary import Dictionary, WORDS_CAPACITY, make_rng
from termwordle.errors import DictionaryError, EmptyDictionaryError


def test_load(dictfile):
    dictionary = Dictionary.load(dictfile)
    assert len(dictionary) == 9
    assert "crane" in dictionary
    assert "zzzzz" not in dictionary


def test_load_keeps_only_five_letter_lines_in_order(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"crane\nab\ncrates\r\ntrace\r\n\nslate")

    dictionary = Dictionary.load(path)
    assert dictionary.words == ("crane", "trace", "slate")


def test_load_does_not_filter_case(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Crane\nCRANE\n")

    assert Dictionary.load(path).words == ("Crane", "CRANE")


def test_load_capacity(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("crane\ntrace\nslate\n")

    assert Dictionary.load(path, capacity=2).words == ("crane", "trace")
    assert Dictionary.load(path, capacity=None).words == ("crane", "trace", "slate")


def test_default_capacity(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(f"w{i:04d}" for i in range(WORDS_CAPACITY + 10)))

    assert len(Dictionary.load(path)) == WORDS_CAPACITY


def test_load_missing_file(tmp_path):
    with pytest.raises(DictionaryError):
        Dictionary.load(tmp_path / "nope.txt")


def test_load_no_five_letter_words(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("a\nab\nabcdef\n")

    with pytest.raises(EmptyDictionaryError):
        Dictionary.load(path)


def test_pick_word(dictionary):
    word = dictionary.pick_word(random.Random(1))
    assert word in dictionary
    assert dictionary.pick_word(random.Random(1)) == word


def test_pick_word_empty():
    with pytest.raises(EmptyDictionaryError):
        Dictionary([]).pick_word(random.Random(1))


def test_make_rng_defaults_to_pid(monkeypatch):
    monkeypatch.setattr(os, "getpid", lambda: 42)
    assert make_rng().random() == random.Random(42).random()
    assert make_rng(7).random() == random.Random(7).random()
