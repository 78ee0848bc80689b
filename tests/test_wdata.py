import json

import pytest

from wdata import Word, WordList


def test_membership_case_insensitive(wlist):
    assert 'witch' in wlist
    assert 'WiTcH' in wlist
    assert ' think\n' in wlist
    assert 'zzzzz' not in wlist
    assert 12345 not in wlist


def test_solutions(wlist):
    assert wlist.solutions == ('witch', 'think', 'weary', 'those', 'there')
    assert 'pills' in wlist.words
    assert 'pills' not in wlist.solutions


def test_drops_bad_entries_and_merges():
    wl = WordList([('Think', False), ('think', True), ('toolong', True),
                   ('abc', True), ('ab1de', True)])
    assert wl.words == frozenset({'think'})
    assert wl.solutions == ('think',)
    assert list(wl) == [Word('think', True)]


def test_no_solutions():
    with pytest.raises(ValueError):
        WordList([Word('think', False)])


def test_repr(wlist):
    assert repr(wlist) == '<WordList: num_solutions=5, num_words=15>'


def test_from_json(words_json):
    wl = WordList.load(words_json)
    assert wl.solutions == ('think',)
    assert 'witch' in wl


def test_from_json_missing_flag(tmp_path):
    path = tmp_path / 'w.json'
    path.write_text(json.dumps([{'word': 'think', 'solution': True}, {'word': 'witch'}]))
    wl = WordList.from_json(path)
    assert wl.solutions == ('think',)
    assert len(wl) == 2


@pytest.mark.parametrize('content', [
    'not json',
    '{"word": "think"}',
    '[{"w": 1}]',
    '[{"word": "think", "solution": true}, {"word": "witch", "solution": "false"}]',
    '[{"word": "think", "solution": 1}]',
    ])
def test_from_json_malformed(tmp_path, content):
    path = tmp_path / 'w.json'
    path.write_text(content)
    with pytest.raises(ValueError):
        WordList.from_json(path)


def test_from_txt(tmp_path):
    fa = tmp_path / 'a.txt'
    fb = tmp_path / 'b.txt'
    fa.write_text('think\nWITCH\n\n')
    fb.write_text('pills\nvague\n')
    wl = WordList.load(fb, solutions_path=fa)
    assert wl.solutions == ('think', 'witch')
    assert len(wl) == 4
    wl = WordList.load(fa)
    assert wl.solutions == ('think', 'witch')


def test_json_with_solutions_file(words_json, tmp_path):
    with pytest.raises(ValueError):
        WordList.load(words_json, solutions_path=tmp_path / 'a.txt')


def test_default():
    wl = WordList.default()
    assert len(wl.solutions) > 100
    for w in ['witch', 'think', 'weary', 'pills', 'vague']:
        assert w in wl
