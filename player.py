#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Wordle practice in the terminal.

Guess the hidden 5-letter word; after each guess you see which letters are
correct, present at another position, or absent. Rounds and statistics are
kept in a history file across sessions.

Ctrl-D/Ctrl-Z to end input; Ctrl-C to quit. History is saved on exit.
"""
import argparse
import logging
import shutil
import sys

import numpy as np
import matplotlib.pyplot as plt

from wdata import WSIZE, WordList
from whistory import DEFAULT_HISTORY_PATH, HistoryError, HistoryStore
from wround import MAX_GUESSES, GuessRejected, NoSolutionsLeft
from wscore import color_str_guess, evaluate
from wsession import Session
from wstats import format_stats, plot_distribution

logger = logging.getLogger(__name__)

_EXAMPLES = [
    ('weary', 'witch', 'The letter W is in the word and in the correct spot.'),
    ('pills', 'think', 'The letter I is in the word but in the wrong spot.'),
    ('vague', 'think', 'None of the letters are in the word in any spot.'),
]


def _esc(code, text, color=True):
    return f'\033[{code}m{text}\033[0m' if color else text


def print_header(title, color=True):
    divider = _esc('34', '-' * shutil.get_terminal_size().columns, color)
    print(divider)
    print(title)
    print(divider)


def print_instructions(max_guesses=MAX_GUESSES, color=True):
    print_header('WORDLE PRACTICE', color)
    print(f'\nGuess the word in {max_guesses} tries.\n\n'
          f'Each guess must be a valid {WSIZE} letter word. Hit Enter to submit.\n\n'
          'After each guess, you will see how close your guess was to the word.\n')
    print(_esc('4', 'Examples:', color) + '\n')
    for guess, solution, explanation in _EXAMPLES:
        print(color_str_guess(guess, evaluate(guess, solution), color))
        print(f'{explanation}\n')


def play_round(rnd, color=True):
    """Prompt for guesses until the round is won or lost."""
    while not rnd.is_over:
        r = input(f'Guess {len(rnd.guesses) + 1}/{rnd.max_guesses} > ')
        try:
            fb = rnd.submit(r)
        except GuessRejected as e:
            print(f'  {e} Try again.')
            continue
        print(color_str_guess(rnd.guesses[-1], fb, color))
        print(_esc('90', f'unused letters: {" ".join(rnd.unused_letters)}', color))
        print()

    if rnd.won:
        print('Congrats! You win!')
    else:
        print(f'Sorry, you lost. The correct answer was {_esc("1", rnd.solution, color)}.')


def print_statistics(session, color=True):
    print_header('STATISTICS', color)
    print(format_stats('This session', session.session_stats()))
    if session.history:
        print()
        print(format_stats('All time', session.all_time_stats()))
    print()


def ask_continue():
    """Return True if the player wants another round."""
    return input('Play again (y/N)? ').strip().lower().startswith('y')


def run_session(session, endless=False, color=True):
    """Play rounds until the player stops or the solutions run out.

    Raises EOFError or KeyboardInterrupt if input ends or is interrupted.
    """
    while True:
        try:
            rnd = session.new_round()
        except NoSolutionsLeft as e:
            print(f'{e} Nothing left to play.')
            break
        print_header(f'ROUND {len(session.rounds) + 1}', color)
        play_round(rnd, color)
        session.finish_round(rnd)
        print_statistics(session, color)
        if not endless and not ask_continue():
            break


def _positive_int(s):
    n = int(s)
    if n < 1:
        raise argparse.ArgumentTypeError(f'must be at least 1, got {n}')
    return n


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        )
    parser.add_argument(
        '--words', metavar='FILE',
        help='word list: .json with {"word", "solution"} entries, or text '
        'file with one word per line (default: bundled list)')
    parser.add_argument(
        '--solutions', metavar='FILE',
        help='text file with solution words; --words is then the list of '
        'additional recognized words')
    hgroup = parser.add_mutually_exclusive_group()
    hgroup.add_argument(
        '--history', metavar='FILE', default=str(DEFAULT_HISTORY_PATH),
        help='history file (default: %(default)s)')
    hgroup.add_argument(
        '--no-history', action='store_true',
        help="don't load or save history")
    parser.add_argument(
        '--max-guesses', type=_positive_int, default=MAX_GUESSES, metavar='N',
        help='guesses per round (default: %(default)s)')
    parser.add_argument(
        '--seed', type=int, default=None,
        help='random seed for picking solutions')
    parser.add_argument(
        '--endless', action='store_true',
        help="keep playing rounds without asking (until Ctrl-D/Ctrl-C)")
    parser.add_argument(
        '--no-color', action='store_true', help='plain text output')
    parser.add_argument(
        '--plot', action='store_true',
        help='plot the all-time guess distribution at exit')
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='show debug messages')
    args = parser.parse_args(argv)
    if args.solutions and not args.words:
        parser.error('--solutions requires --words')
    return args


def main(argv=None):
    """Run the game; return exit status."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        )
    try:
        return play(args)
    except KeyboardInterrupt:
        print('\n  Aborted.')
        return 0


def play(args):
    """Load words, play the session, save history; return exit status."""
    color = not args.no_color and sys.stdout.isatty()

    try:
        if args.words:
            wlist = WordList.load(args.words, args.solutions)
        else:
            wlist = WordList.default()
    except (OSError, ValueError) as e:
        print(f'Error: cannot load word list: {e}', file=sys.stderr)
        return 1
    logger.debug('Word list: %r', wlist)

    store = None if args.no_history else HistoryStore(args.history)
    rng = np.random.default_rng(args.seed)

    print_instructions(args.max_guesses, color)
    try:
        with Session(wlist, store, args.max_guesses, rng) as session:
            try:
                run_session(session, endless=args.endless, color=color)
            except (EOFError, KeyboardInterrupt):
                print('\n  Aborted.')
    except HistoryError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if args.plot and session.all_rounds:
        plot_distribution(session.all_time_stats())
        plt.show()
    print('Thanks for playing!')
    return 0


if __name__ == '__main__':
    sys.exit(main())
