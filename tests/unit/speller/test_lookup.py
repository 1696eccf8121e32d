import pytest

from multispell.speller import Dictionary
from multispell.speller.algo.lookup import SpellResult


@pytest.fixture
def dictionary():
    return Dictionary.from_strings(
        """
        KEEPCASE K
        WARN W
        ONLYINCOMPOUND c
        ICONV 1
        ICONV ’ '

        SFX S Y 1
        SFX S 0 s .
        """,
        """
        hello/S
        Paris
        OpenOffice/K
        foo/K
        don't
        *colour
        rarely/W
        pre/c
        """
    )


@pytest.mark.parametrize('word,correct', [
    ('hello', True),
    ('hellos', True),
    ('Hello', True),
    ('HELLO', True),
    ('  hello ', True),
    ('helo', False),
    ('Paris', True),
    ('PARIS', True),
    ('paris', False),
    ('OpenOffice', True),
    ('OPENOFFICE', False),
    ('foo', True),
    ('Foo', False),
    ('FOO', False),
    ("don't", True),
    ('don’t', True),
    ('colour', False),
    ('Colour', False),
    ('COLOUR', False),
    ('pre', False),
    ('', False),
    ('   ', False),
    ('kablam', False),
])
def test_correct(dictionary, word, correct):
    assert dictionary.correct(word) == correct


def test_form(dictionary):
    lookup = dictionary.lookuper

    assert lookup.form('HELLO') == 'hello'
    assert lookup.form('PARIS') == 'Paris'
    assert lookup.form('don’t') == "don't"
    assert lookup.form('colour') is None
    assert lookup.form('colour', allow_forbidden=True) == 'colour'


def test_spell(dictionary):
    assert dictionary.spell('hello') == SpellResult(correct=True, forbidden=False, warn=False)
    assert dictionary.spell('Colour') == SpellResult(correct=False, forbidden=True, warn=False)
    assert dictionary.spell('rarely') == SpellResult(correct=True, forbidden=False, warn=True)
    assert dictionary.spell('kablam') == SpellResult(correct=False, forbidden=False, warn=False)
    assert dictionary.spell('FOO') == SpellResult(correct=False, forbidden=False, warn=False)


def test_removed(dictionary):
    dictionary.remove('hello')

    assert not dictionary.correct('hello')
    assert not dictionary.correct('HELLO')
    assert dictionary.correct('hellos')

    dictionary.add('hello')
    assert dictionary.correct('hello')


@pytest.fixture
def compounds():
    return Dictionary.from_strings(
        """
        COMPOUNDMIN 1
        ONLYINCOMPOUND c
        COMPOUNDRULE 2
        COMPOUNDRULE n*1t
        COMPOUNDRULE n*mp
        """,
        """
        0/nm
        1/n1
        2/nm
        1th/tc
        2nd/pc
        """
    )


@pytest.mark.parametrize('word,correct', [
    ('1', True),
    ('11th', True),
    ('1011th', True),
    ('1th', False),
    ('122nd', True),
    ('12nd', False),
    ('22nd', True),
    ('2nd', False),
    ('11TH', True),
])
def test_compounds(compounds, word, correct):
    assert compounds.correct(word) == correct


def test_compounds_regenerate(compounds):
    assert not compounds.correct('311th')

    compounds.dictionary('3/n')

    assert compounds.correct('311th')


def test_compound_min_length():
    dictionary = Dictionary.from_strings(
        """
        COMPOUNDMIN 3
        COMPOUNDRULE 1
        COMPOUNDRULE ab
        """,
        """
        x/a
        y/b
        xx/a
        """
    )

    assert not dictionary.correct('xy')
    assert dictionary.correct('xxy')


def test_removed_compound():
    dictionary = Dictionary.from_strings(
        """
        COMPOUNDMIN 1
        COMPOUNDRULE 1
        COMPOUNDRULE ab
        """,
        """
        x/a
        y/b
        """
    )

    assert dictionary.correct('xy')

    dictionary.add('xy').remove('xy')

    assert not dictionary.correct('xy')
    assert not dictionary.correct('XY')
    assert dictionary.correct('x')

    dictionary.add('xy')
    assert dictionary.correct('xy')
