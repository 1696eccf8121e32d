from pathlib import Path

import pytest

from multispell.speller import Dictionary


FIXTURES = Path(__file__).parent.parent.parent / 'fixtures'


@pytest.fixture
def en_au():
    return Dictionary.from_files(str(FIXTURES / 'en-au'))


@pytest.mark.parametrize('word,correct', [
    ('colour', True),
    ('colours', True),
    ('colourful', True),
    ('Colourful', True),
    ('colourfuls', False),
    ('color', False),
    ('flies', True),
    ('unlock', True),
    ('unlocks', True),
    ('locks', True),
    ('undo', True),
    ('Paris', True),
    ('PARIS', True),
    ('paris', False),
    ('shizzleflaps', False),
])
def test_from_files(en_au, word, correct):
    assert en_au.correct(word) == correct


def test_from_files_meta(en_au):
    assert en_au.aff.LANG == 'en_AU'
    assert en_au.word_characters() == "0123456789'"
    assert repr(en_au).startswith('Dictionary(')


def test_suggest(en_au):
    assert 'colourful' in en_au.suggest('colorful')
    assert en_au.suggest('colourful') == []


def test_from_strings():
    dictionary = Dictionary.from_strings(
        """
        SFX S Y 1
        SFX S 0 s .
        """,
        """
        1
        spell/S
        """
    )

    assert dictionary.correct('spells')
    assert dictionary.word_characters() is None


def test_from_strings_without_words():
    dictionary = Dictionary.from_strings('KEEPCASE k')

    assert len(dictionary.dic) == 0
    assert not dictionary.correct('cat')

    dictionary.dictionary('cat')

    assert dictionary.correct('cat')


def test_from_system(monkeypatch):
    monkeypatch.setattr(Dictionary, 'PATHES', ['/nonexistent', str(FIXTURES)])

    dictionary = Dictionary.from_system('de-de')

    assert dictionary.correct('Zeiten')

    with pytest.raises(LookupError):
        Dictionary.from_system('xx-xx')


def test_add(en_au):
    assert en_au.add('kablam') is en_au
    assert en_au.correct('kablam')
    assert not en_au.correct('kablams')

    en_au.add('wombat', 'ball')
    assert en_au.correct('wombat')
    assert en_au.correct('wombats')

    en_au.add('numbat', 'unknownword')
    assert en_au.correct('numbat')
    assert not en_au.correct('numbats')


def test_remove(en_au):
    assert en_au.remove('colour') is en_au

    assert not en_au.correct('colour')
    assert not en_au.correct('Colour')
    assert en_au.correct('colours')


def test_dictionary(en_au):
    en_au.dictionary("""
        2
        wombat/S
        *hello
        """)

    assert en_au.correct('wombats')
    assert not en_au.correct('hello')
    assert en_au.spell('hello').forbidden


def test_personal(en_au):
    en_au.personal("""
        kablam
        numbat/ball
        *world
        """)

    assert en_au.correct('kablam')
    assert en_au.correct('numbats')
    assert not en_au.correct('world')
    assert en_au.correct('worlds')
