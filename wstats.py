#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Statistics over finished rounds.

Everything is computed from scratch from a sequence of RoundRecord, so the
same rounds always give the same numbers.
"""
from collections import namedtuple

import numpy as np
import matplotlib.pyplot as plt

from wround import MAX_GUESSES


class Stats(namedtuple('Stats', ['played', 'won', 'distribution'])):
    """Round statistics.

    - played: number of rounds.
    - won: number of rounds won.
    - distribution: dict, number of guesses (1..max_guesses) -> rounds won
      with that many guesses.
    """
    __slots__ = ()

    @property
    def win_ratio(self):
        """Fraction of rounds won; 0.0 if nothing was played."""
        return self.won / self.played if self.played else 0.0


def compute_stats(records, max_guesses=MAX_GUESSES):
    """Return Stats for sequence of RoundRecord.

    Lost rounds don't count in the distribution. Won rounds that took more
    than max_guesses (from history with a larger limit) count as won, but
    are not in the distribution.
    """
    records = list(records)
    nguesses = np.array(
        [len(r.guesses) for r in records if r.won], dtype=int)
    counts = np.bincount(nguesses, minlength=max_guesses+1)
    distribution = {
        n: int(counts[n])
        for n in range(1, max_guesses+1)
        }
    return Stats(len(records), len(nguesses), distribution)


def format_stats(title, stats):
    """Return multi-line str with win ratio and guess distribution."""
    pct = np.around(stats.win_ratio*100)
    lines = [
        title,
        f'{stats.won} / {stats.played} rounds won ({pct:.0f}%)',
        '',
        'Guess distribution:',
        ]
    for n, count in stats.distribution.items():
        lines.append(f'{n:2d}: {"#" * count} {count}')
    return '\n'.join(lines)


def plot_distribution(stats, ax=None, title=None):
    """Plot guess distribution as horizontal bars; return Axes.

    Parameters:

    - stats: Stats instance.
    - ax: optional matplotlib Axes to draw in; default: new figure.
    - title: optional title.
    """
    if ax is None:
        _, ax = plt.subplots()
    nums = np.array(list(stats.distribution.keys()))
    counts = np.array(list(stats.distribution.values()))
    ax.barh(nums, counts, color='#427646')
    ax.set_yticks(nums)
    ax.invert_yaxis()
    ax.set_ylabel('Number of guesses')
    ax.set_xlabel('Rounds won')
    pct = np.around(stats.win_ratio*100)
    ax.set_title(title or f'{stats.won} / {stats.played} rounds won ({pct:.0f}%)')
    return ax
