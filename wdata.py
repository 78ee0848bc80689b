#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Word data: the list of recognized words and which of them can be solutions.

Word lists come in two flavors:

- JSON: a list of ``{"word": "witch", "solution": true}`` entries.
- Text: one word per line. The 'a' list holds the possible solutions, the
  optional 'b' list holds additional recognized words.

Use ``WordList.load()`` to pick the loader from the file name.
"""
import json
import logging
import re
from collections import namedtuple
from pathlib import Path

logger = logging.getLogger(__name__)

WSIZE = 5
ALPHABET = 'abcdefghijklmnopqrstuvwxyz'
DEFAULT_WORDS_PATH = Path(__file__).resolve().parent / 'data' / 'words.json'

_WORD_EXP = re.compile(f'[a-z]{{{WSIZE}}}$')

Word = namedtuple('Word', ['text', 'solution'])
Word.__doc__ = """Recognized word; solution=True if it can be a hidden word."""


def normalize(text):
    """Return word as used for lookups: stripped, lowercase."""
    return text.strip().lower()


def _load_wlist(fname):
    """Load word list (list of str) from text file, one word per line."""
    with open(fname, encoding='utf-8') as f:
        return [normalize(w) for w in f if w.strip()]


class WordList:
    """Static word repository.

    Attributes:

    - words: frozenset of all recognized words (valid guesses).
    - solutions: tuple of solution-eligible words, in input order.
    """

    def __init__(self, words):
        """Initialize from iterable of Word (or (text, solution) tuples).

        Entries that are not 5 ASCII letters are dropped. Duplicates are
        merged; a word is a solution if any of its entries says so.
        """
        flags = {}
        ndropped = 0
        for text, solution in words:
            text = normalize(text)
            if not _WORD_EXP.match(text):
                ndropped += 1
                continue
            flags[text] = flags.get(text, False) or bool(solution)
        if ndropped:
            logger.warning('Dropped %d entries that are not %d-letter words',
                           ndropped, WSIZE)
        self.words = frozenset(flags)
        self.solutions = tuple(w for w, sol in flags.items() if sol)
        if not self.solutions:
            raise ValueError('Word list contains no solution words.')

    def __contains__(self, text):
        return isinstance(text, str) and normalize(text) in self.words

    def __len__(self):
        return len(self.words)

    def __iter__(self):
        sols = set(self.solutions)
        for w in sorted(self.words):
            yield Word(w, w in sols)

    def __repr__(self):
        cn = self.__class__.__name__
        na, nb = len(self.solutions), len(self.words)
        return f'<{cn}: num_solutions={na}, num_words={nb}>'

    @classmethod
    def from_json(cls, path):
        """Load from JSON file with list of {"word": str, "solution": bool}."""
        path = Path(path)
        try:
            entries = json.loads(path.read_text(encoding='utf-8'))
        except json.JSONDecodeError as e:
            raise ValueError(f'{path}: not a valid JSON word list ({e})') from e
        if not isinstance(entries, list):
            raise ValueError(f'{path}: expected a list of word entries')
        words = []
        for i, ent in enumerate(entries):
            if not isinstance(ent, dict) or not isinstance(ent.get('word'), str):
                raise ValueError(f'{path}: bad entry #{i}: {ent!r}')
            solution = ent.get('solution', False)
            if not isinstance(solution, bool):
                raise ValueError(f'{path}: bad solution flag in entry #{i}: {ent!r}')
            words.append(Word(ent['word'], solution))
        wlist = cls(words)
        logger.info('Loaded %r from %s', wlist, path)
        return wlist

    @classmethod
    def from_txt(cls, fname_a, fname_b=None):
        """Load from text files.

        Parameters:

        - fname_a: file with solution words (also recognized as guesses).
        - fname_b: optional file with additionally recognized words.
        """
        words = [Word(w, True) for w in _load_wlist(fname_a)]
        if fname_b is not None:
            words += [Word(w, False) for w in _load_wlist(fname_b)]
        wlist = cls(words)
        logger.info('Loaded %r from %s', wlist, fname_a)
        return wlist

    @classmethod
    def load(cls, path, solutions_path=None):
        """Load word list, JSON or text depending on file suffix.

        For text files, solutions_path is the 'a' list and path the 'b'
        list. Without solutions_path, every word in a text file is a
        possible solution.
        """
        path = Path(path)
        if path.suffix.lower() == '.json':
            if solutions_path is not None:
                raise ValueError('solutions file only applies to text word lists')
            return cls.from_json(path)
        if solutions_path is None:
            return cls.from_txt(path)
        return cls.from_txt(solutions_path, path)

    @classmethod
    def default(cls):
        """Return the bundled word list."""
        return cls.from_json(DEFAULT_WORDS_PATH)
