import pytest

from multispell.speller.data.aff import RepPattern
from multispell.speller.algo import permutations as pmt
from multispell.speller.algo.capitalization import Type, guess, sentence


def test_replchars():
    table = [RepPattern('f', 'ph'), RepPattern('^alot$', 'a lot')]

    assert list(pmt.replchars('fofa', table)) == ['phofa', 'fopha']
    assert list(pmt.replchars('alot', table)) == ['a lot']
    assert list(pmt.replchars('alotf', table)) == ['alotph']
    assert list(pmt.replchars('f', table)) == ['ph']
    assert list(pmt.replchars('fone', [])) == []


def test_replchars_literal():
    table = [RepPattern('a.', 'x'), RepPattern('(', ''), RepPattern('ee', 'i'), RepPattern('on$', 'un')]

    assert list(pmt.replchars('a.b', table)) == ['xb']
    assert list(pmt.replchars('abb', table)) == []
    assert list(pmt.replchars('a(b', table)) == ['ab']
    assert list(pmt.replchars('eee', table)) == ['ie', 'ei']
    assert list(pmt.replchars('onion', table)) == ['oniun']


def test_empty_rep_pattern():
    with pytest.raises(ValueError):
        RepPattern('^$', 'x')


def test_badcharkey():
    assert list(pmt.badcharkey('vat', ['vcx'])) == ['cat', 'xat']
    assert list(pmt.badcharkey('Vat', ['vc'])) == ['Cat']
    assert list(pmt.badcharkey('dog', ['vc'])) == []


def test_badcharkey_char_in_several_groups():
    assert list(pmt.badcharkey('e', ['qwerty', 'wsde'])) == ['q', 'w', 'r', 't', 'y', 's', 'd']
    assert list(pmt.badcharkey('E', ['we', 'ew'])) == ['W']


def test_doubledchars():
    assert pmt.doubledchars('ab') == ['ab', 'aab', 'abb', 'aabb']
    assert 'accommodate' in pmt.doubledchars('acomodate')
    assert 'ab' in pmt.doubledchars('aab')


def test_casevariants():
    assert pmt.casevariants('hello') == ['hello', 'Hello', 'HELLO']
    assert pmt.casevariants('Hello') == ['Hello', 'hello', 'HELLO']
    assert pmt.casevariants('HELLO') == ['HELLO', 'hello']


def test_single_edits():
    assert list(pmt.single_edits('ab', 'x')) == [
        'b', 'ba', 'xab', 'xb',
        'a', 'axb', 'ax',
        'ab', 'abx', 'abx'
    ]


def test_single_edits_uppercase():
    assert list(pmt.single_edits('Ab', 'x')) == [
        'b', 'bA', 'xAb', 'xb', 'XAb', 'Xb',
        'A', 'Axb', 'Ax',
        'Ab', 'Abx', 'Abx'
    ]
    # no uppercase for chars without case
    assert list(pmt.single_edits('A', "'")) == ['', "'A", "'", 'A', "A'", "A'"]


@pytest.mark.parametrize('word,captype', [
    ('foo', Type.NO),
    ('42nd', Type.NO),
    ('a', Type.NO),
    ('Foo', Type.INIT),
    ('FOO', Type.ALL),
    ('A', Type.ALL),
    ('fooBar', Type.HUH),
    ('FooBar', Type.HUH),
])
def test_guess(word, captype):
    assert guess(word) == captype


def test_sentence():
    assert sentence('USA') == 'Usa'
    assert sentence('paris') == 'paris'
    assert sentence('') == ''
