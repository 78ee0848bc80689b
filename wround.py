#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""One round of the game: a hidden solution and up to max_guesses guesses.

A round is in progress until the solution is guessed (won) or the guess
limit is reached (lost). Finished rounds don't accept guesses; their
outcome is available as an immutable RoundRecord.
"""
import logging
from collections import namedtuple
from enum import Enum

import numpy as np

from wdata import WSIZE, normalize
from wscore import evaluate, unused_letters

logger = logging.getLogger(__name__)

MAX_GUESSES = 6

RoundRecord = namedtuple('RoundRecord', ['solution', 'guesses', 'won'])
RoundRecord.__doc__ = """Outcome of a finished round (also the history format)."""


class GuessRejected(ValueError):
    """Guess is not acceptable; the round is unchanged."""


class RoundOver(RuntimeError):
    """Guess submitted to a round that is already won or lost."""


class NoSolutionsLeft(RuntimeError):
    """All solution words have been used."""


class RoundState(Enum):
    IN_PROGRESS = 'in progress'
    WON = 'won'
    LOST = 'lost'


def pick_solution(wlist, used=(), rng=None):
    """Return random solution word from wlist, excluding the used ones.

    Parameters:

    - wlist: WordList.
    - used: collection of words that must not be picked.
    - rng: numpy random Generator; default: a fresh unseeded one.
    """
    used = set(used)
    candidates = [w for w in wlist.solutions if w not in used]
    if not candidates:
        raise NoSolutionsLeft(
            f'All {len(wlist.solutions)} solution words have been played.')
    if rng is None:
        rng = np.random.default_rng()
    return candidates[rng.integers(len(candidates))]


class Round:
    """Round controller.

    Attributes:

    - solution: hidden word (str).
    - guesses: list of accepted guesses (str), oldest first.
    - feedback: list of LetterFeedback lists, one per guess.
    - max_guesses: guess limit.
    - state: RoundState.
    """

    def __init__(self, solution, wlist, max_guesses=MAX_GUESSES):
        if max_guesses < 1:
            raise ValueError(f'max_guesses={max_guesses!r}')
        self.solution = normalize(solution)
        self.wlist = wlist
        self.max_guesses = int(max_guesses)
        self.guesses = []
        self.feedback = []
        self.state = RoundState.IN_PROGRESS

    def __repr__(self):
        cn = self.__class__.__name__
        return (f'<{cn}: {self.state.value}, '
                f'{len(self.guesses)}/{self.max_guesses} guesses>')

    @property
    def is_over(self):
        return self.state is not RoundState.IN_PROGRESS

    @property
    def won(self):
        return self.state is RoundState.WON

    @property
    def unused_letters(self):
        return unused_letters(self.guesses)

    def check_guess(self, guess):
        """Return normalized guess; raise GuessRejected if not acceptable."""
        guess = normalize(guess)
        if len(guess) != WSIZE:
            raise GuessRejected(f'Wrong length, expected {WSIZE} letters.')
        if guess not in self.wlist:
            raise GuessRejected(f'{guess!r} is not in the word list.')
        return guess

    def submit(self, guess):
        """Play a guess; return its list of LetterFeedback.

        Raises GuessRejected for invalid words (no turn used) and
        RoundOver if the round has already finished.
        """
        if self.is_over:
            raise RoundOver(f'Round is already {self.state.value}.')
        guess = self.check_guess(guess)
        fb = evaluate(guess, self.solution)
        self.guesses.append(guess)
        self.feedback.append(fb)

        if guess == self.solution:
            self.state = RoundState.WON
        elif len(self.guesses) >= self.max_guesses:
            self.state = RoundState.LOST
        if self.is_over:
            logger.debug('Round %s after %d guesses (solution %r)',
                         self.state.value, len(self.guesses), self.solution)
        return fb

    def record(self):
        """Return RoundRecord for the finished round."""
        if not self.is_over:
            raise RuntimeError('Round still in progress.')
        return RoundRecord(self.solution, tuple(self.guesses), self.won)
