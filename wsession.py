#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Game session: the rounds of one program run, plus the loaded history.

Use as a context manager; the combined history is saved exactly once when
the block is left, also on Ctrl-C or end of input::

    with Session(wlist, HistoryStore(path)) as session:
        rnd = session.new_round()
        ...
        session.finish_round(rnd)
"""
import logging

from wround import MAX_GUESSES, Round, pick_solution
from wstats import compute_stats

logger = logging.getLogger(__name__)


class Session:
    """Rounds played in this run, and history from previous runs.

    Attributes:

    - wlist: WordList.
    - store: HistoryStore or None (no persistence).
    - max_guesses: guess limit per round.
    - rng: numpy random Generator or None.
    - history: list of RoundRecord loaded at start.
    - rounds: list of RoundRecord finished in this session.
    """

    def __init__(self, wlist, store=None, max_guesses=MAX_GUESSES, rng=None):
        self.wlist = wlist
        self.store = store
        self.max_guesses = max_guesses
        self.rng = rng
        self.history = []
        self.rounds = []
        self._closed = False

    def __enter__(self):
        if self.store is not None:
            self.history = self.store.load()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self):
        cn = self.__class__.__name__
        return f'<{cn}: rounds={len(self.rounds)}, history={len(self.history)}>'

    @property
    def all_rounds(self):
        """History followed by this session's rounds."""
        return self.history + self.rounds

    @property
    def used_solutions(self):
        return {r.solution for r in self.rounds}

    def new_round(self):
        """Return new Round with a solution not yet played in this session."""
        if self._closed:
            raise RuntimeError('Session is closed.')
        solution = pick_solution(self.wlist, self.used_solutions, self.rng)
        return Round(solution, self.wlist, self.max_guesses)

    def finish_round(self, rnd):
        """Add finished Round to the session; return its RoundRecord."""
        rec = rnd.record()
        self.rounds.append(rec)
        return rec

    def session_stats(self):
        return compute_stats(self.rounds, self.max_guesses)

    def all_time_stats(self):
        return compute_stats(self.all_rounds, self.max_guesses)

    def close(self):
        """Save history + session rounds. Only the first call saves."""
        if self._closed:
            return
        self._closed = True
        if self.store is None:
            return
        logger.debug('Saving %d session rounds to %r', len(self.rounds), self.store)
        self.store.save(self.all_rounds)
