#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Persisted history of played rounds (JSON file).

File format: list of {"solution": str, "guesses": [str, ...], "won": bool}.
"""
import json
import logging
import shutil
from pathlib import Path

from wround import RoundRecord

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_PATH = Path.home() / '.wordle-practice-history.json'


class HistoryError(Exception):
    """History file could not be read (strict mode) or written."""


def record_from_dict(d):
    """Return RoundRecord from dict; raise ValueError if malformed."""
    if not isinstance(d, dict):
        raise ValueError(f'expected dict, got {type(d).__name__}')
    solution, guesses, won = d.get('solution'), d.get('guesses'), d.get('won')
    if not isinstance(solution, str) or not isinstance(won, bool):
        raise ValueError(f'bad solution/won in {d!r}')
    if not isinstance(guesses, list) or not all(isinstance(g, str) for g in guesses):
        raise ValueError(f'bad guesses in {d!r}')
    return RoundRecord(solution, tuple(guesses), won)


def record_to_dict(rec):
    return {
        'solution': rec.solution,
        'guesses': list(rec.guesses),
        'won': bool(rec.won),
        }


class HistoryStore:
    """Load and save round history.

    Attributes:

    - path: Path of the JSON file.
    - strict: True to raise HistoryError on a corrupt file rather than
      treating it as empty.
    """

    def __init__(self, path=DEFAULT_HISTORY_PATH, strict=False):
        self.path = Path(path)
        self.strict = strict

    def __repr__(self):
        return f'<{self.__class__.__name__}: {str(self.path)!r}>'

    @property
    def corrupt_path(self):
        """Where an ignored corrupt history file is kept."""
        return Path(f'{self.path}.corrupt')

    def _corrupt(self, msg):
        """Raise HistoryError (strict) or keep a copy of the file and go on."""
        if self.strict:
            raise HistoryError(msg)
        try:
            shutil.copyfile(self.path, self.corrupt_path)
        except OSError as e:
            raise HistoryError(f'Cannot copy {self.path} to {self.corrupt_path}: {e}') from e
        logger.warning('%s; ignoring it (copy kept as %s).', msg, self.corrupt_path)

    def load(self):
        """Return list of RoundRecord; empty if there is no history yet."""
        try:
            text = self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            logger.info('No history file %s', self.path)
            return []
        except UnicodeDecodeError as e:
            self._corrupt(f'{self.path}: not UTF-8 text ({e})')
            return []
        except OSError as e:
            raise HistoryError(f'Cannot read {self.path}: {e}') from e

        if text.strip() == '':
            return []
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            self._corrupt(f'{self.path}: invalid JSON ({e})')
            return []
        if not isinstance(data, list):
            self._corrupt(f'{self.path}: expected a list of rounds')
            return []

        records = []
        for i, d in enumerate(data):
            try:
                records.append(record_from_dict(d))
            except ValueError as e:
                self._corrupt(f'{self.path}: entry #{i}: {e}')
        logger.info('Loaded %d rounds from %s', len(records), self.path)
        return records

    def save(self, records):
        """Overwrite history with records (full sequence).

        The previous file is kept as <path>.bak. Raise HistoryError on
        failure.
        """
        data = [record_to_dict(r) for r in records]
        tmp_path = Path(f'{self.path}.tmp')
        bak_path = Path(f'{self.path}.bak')
        try:
            with tmp_path.open('w', encoding='utf-8') as f:
                json.dump(data, f, indent=1)
                f.write('\n')
            if self.path.exists():
                self.path.replace(bak_path)
            tmp_path.replace(self.path)
        except OSError as e:
            raise HistoryError(f'Cannot write {self.path}: {e}') from e
        logger.info('Wrote %d rounds to %s', len(data), self.path)
