#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Score a guess against the solution, and render the result.

Recurring letters are tricky. A letter that occurs k times in the solution
gets at most k correct/present marks in the guess, exact matches first::

    guess  solution  feedback
    geese  those     ...SE   (one 'e' in solution: the exact hit takes it)
    eerie  there     e.r.E   (two 'e': one exact hit, one at wrong position)
"""
from collections import Counter
from enum import IntEnum

from wdata import ALPHABET


class LetterFeedback(IntEnum):
    """Feedback for one letter position."""
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


def evaluate(guess, solution):
    """Return list of LetterFeedback, one per letter of guess.

    Parameters:

    - guess: lowercase word.
    - solution: lowercase word, same length as guess.
    """
    if len(guess) != len(solution):
        raise ValueError(
            f'Length mismatch: guess {guess!r}, solution {solution!r}')

    result = [LetterFeedback.ABSENT] * len(guess)
    remaining = Counter(solution)

    # First pass: exact matches use up their letter.
    for i, (gl, sl) in enumerate(zip(guess, solution)):
        if gl == sl:
            result[i] = LetterFeedback.CORRECT
            remaining[gl] -= 1

    # Second pass: letters at wrong positions, while unconsumed ones remain.
    for i, gl in enumerate(guess):
        if result[i] == LetterFeedback.CORRECT:
            continue
        if remaining[gl] > 0:
            result[i] = LetterFeedback.PRESENT
            remaining[gl] -= 1

    return result


# Tile backgrounds as r;g;b
_TILE_COLORS = {
    LetterFeedback.CORRECT: '66;118;70',
    LetterFeedback.PRESENT: '139;128;0',
    LetterFeedback.ABSENT: '128;128;128',
}


def color_str_guess(guess, feedback, color=True):
    """Return string representation of a scored guess.

    Parameters:

    - guess: the guessed word.
    - feedback: sequence of LetterFeedback for guess.
    - color: True for ANSI escape sequences (colored tiles); False for
      plain hint notation: 'W.t..' means W correct, t at wrong position.
    """
    if not color:
        out = []
        for let, fb in zip(guess, feedback):
            if fb == LetterFeedback.CORRECT:
                out.append(let.upper())
            elif fb == LetterFeedback.PRESENT:
                out.append(let.lower())
            else:
                out.append('.')
        return ''.join(out)

    esc = lambda c, x: f'\033[{c}m{x}'
    out = [esc('38;2;255;255;255', '')]  # white foreground
    for let, fb in zip(guess, feedback):
        out.append(esc(f'48;2;{_TILE_COLORS[fb]}', f' {let.upper()} '))
    out.append(esc('0', ''))  # reset
    return ''.join(out)


def unused_letters(guesses):
    """Return str of alphabet letters that occur in none of the guesses."""
    used = set(''.join(guesses))
    return ''.join(let for let in ALPHABET if let not in used)
