import numpy as np
import pytest

from wround import (GuessRejected, NoSolutionsLeft, Round, RoundOver,
                    RoundRecord, RoundState, pick_solution)
from wscore import LetterFeedback


def test_lost_after_max_guesses(wlist):
    rnd = Round('think', wlist)
    for g in ['aaaaa', 'bbbbb', 'ccccc', 'ddddd', 'eeeee']:
        rnd.submit(g)
        assert rnd.state is RoundState.IN_PROGRESS
    rnd.submit('fffff')
    assert rnd.state is RoundState.LOST
    assert not rnd.won
    assert rnd.record() == RoundRecord(
        'think', ('aaaaa', 'bbbbb', 'ccccc', 'ddddd', 'eeeee', 'fffff'), False)


def test_won(wlist):
    rnd = Round('think', wlist)
    fb = rnd.submit('pills')
    assert fb[1] == LetterFeedback.PRESENT
    fb = rnd.submit('THINK')
    assert fb == [LetterFeedback.CORRECT] * 5
    assert rnd.won and rnd.is_over
    assert rnd.record() == RoundRecord('think', ('pills', 'think'), True)


def test_win_on_last_guess(wlist):
    rnd = Round('think', wlist, max_guesses=2)
    rnd.submit('witch')
    rnd.submit('think')
    assert rnd.state is RoundState.WON


def test_finished_round_is_frozen(wlist):
    rnd = Round('think', wlist, max_guesses=1)
    rnd.submit('witch')
    assert rnd.state is RoundState.LOST
    with pytest.raises(RoundOver):
        rnd.submit('think')
    assert rnd.guesses == ['witch']
    assert rnd.state is RoundState.LOST


@pytest.mark.parametrize('guess', ['thin', 'thinks', '', 'zzzzz', 'th1nk'])
def test_rejected_guess_uses_no_turn(wlist, guess):
    rnd = Round('think', wlist)
    with pytest.raises(GuessRejected):
        rnd.submit(guess)
    assert rnd.guesses == []
    assert rnd.feedback == []
    assert rnd.state is RoundState.IN_PROGRESS


def test_record_in_progress(wlist):
    rnd = Round('think', wlist)
    with pytest.raises(RuntimeError):
        rnd.record()


def test_bad_max_guesses(wlist):
    with pytest.raises(ValueError):
        Round('think', wlist, max_guesses=0)


def test_unused_letters(wlist):
    rnd = Round('think', wlist)
    rnd.submit('witch')
    assert 'w' not in rnd.unused_letters
    assert 'a' in rnd.unused_letters


def test_pick_solution_excludes_used(wlist, rng):
    used = {'witch', 'think', 'weary', 'those'}
    for _ in range(10):
        assert pick_solution(wlist, used, rng) == 'there'


def test_pick_solution_only_solutions(wlist, rng):
    picked = {pick_solution(wlist, rng=rng) for _ in range(50)}
    assert picked <= set(wlist.solutions)


def test_pick_solution_seeded(wlist):
    a = [pick_solution(wlist, rng=np.random.default_rng(7)) for _ in range(3)]
    assert len(set(a)) == 1


def test_pick_solution_exhausted(wlist, rng):
    with pytest.raises(NoSolutionsLeft):
        pick_solution(wlist, wlist.solutions, rng)
