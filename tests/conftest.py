import matplotlib
matplotlib.use('Agg')

import json

import numpy as np
import pytest

from wdata import Word, WordList

SOLUTIONS = ['witch', 'think', 'weary', 'those', 'there']
OTHERS = ['pills', 'vague', 'geese', 'eerie', 'aaaaa', 'bbbbb', 'ccccc',
          'ddddd', 'eeeee', 'fffff']


@pytest.fixture
def wlist():
    words = [Word(w, True) for w in SOLUTIONS]
    words += [Word(w, False) for w in OTHERS]
    return WordList(words)


@pytest.fixture
def rng():
    return np.random.default_rng(1)


@pytest.fixture
def words_json(tmp_path):
    """Write JSON word list with one solution ('think'); return path."""
    path = tmp_path / 'words.json'
    entries = [{'word': 'think', 'solution': True}]
    entries += [{'word': w, 'solution': False} for w in OTHERS + ['witch']]
    path.write_text(json.dumps(entries))
    return path
