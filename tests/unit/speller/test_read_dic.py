from multispell.speller.data import aff as a
from multispell.speller.readers.file_reader import StringReader
from multispell.speller.readers import read_aff, read_dic, read_personal
from multispell.speller.readers.dic import parse_line
from multispell.speller.readers.aff import Context


def read(aff_text, dic_text):
    aff, context = read_aff(StringReader(aff_text))
    dic = read_dic(StringReader(dic_text), aff=aff, context=context)
    return aff, dic


def test_load():
    _, dic = read('', """
        2
        cat
        dog/SM
        """)

    assert dic.entries == {'cat': [], 'dog': ['S', 'M']}


def test_first_line_not_a_count():
    _, dic = read('', """
        cat
        2
        """)

    assert 'cat' in dic
    assert '2' in dic


def test_parse_line():
    context = Context()

    assert parse_line('cat', context=context) == ('cat', [], [])
    assert parse_line('dog/SM', context=context) == ('dog', ['S', 'M'], [])
    assert parse_line('and\\/or/S', context=context) == ('and/or', ['S'], [])
    assert parse_line('word # comment', context=context) == ('word', [], [])
    assert parse_line('word/A# comment', context=context) == ('word', ['A', '#'], [])
    assert parse_line('a lot', context=context) == ('a lot', [], [])
    assert parse_line('which/S ph:wich po:pronoun', context=context) == ('which', ['S'], ['wich'])
    assert parse_line('# just a comment', context=context) is None


def test_long_flags():
    _, dic = read('FLAG long', """
        1
        dog/SoMx
        """)

    assert dic.entries == {'dog': ['So', 'Mx']}


def test_malformed_lines_are_skipped():
    _, dic = read("""
        AF 1
        AF SM
        """, """
        3
        dog/1
        cat/7
        mouse
        """)

    assert dic.flags('dog') == ['S', 'M']
    assert 'cat' not in dic
    assert 'mouse' in dic


def test_expansion():
    _, dic = read("""
        SFX S Y 1
        SFX S 0 s .
        """, """
        1
        dog/S
        """)

    assert 'dog' in dic
    assert 'dogs' in dic


def test_forbidden_without_flag_declared():
    aff, dic = read('', """
        2
        good
        *bad
        """)

    assert aff.FORBIDDENWORD == a.FORBIDDEN
    assert dic.has_flag('bad', a.FORBIDDEN)
    assert not dic.has_flag('good', a.FORBIDDEN)


def test_forbidden_with_flag_declared():
    aff, dic = read('FORBIDDENWORD !', """
        1
        *bad
        """)

    assert aff.FORBIDDENWORD == '!'
    assert dic.flags('bad') == ['!']


def test_compound_words():
    aff, _ = read("""
        COMPOUNDRULE 1
        COMPOUNDRULE n*1t
        """, """
        3
        1/n1
        2/n
        1th/t
        """)

    assert aff.compound_words == {'n': ['1', '2'], '1': ['1'], 't': ['1th']}


def test_alt_spellings():
    aff, _ = read('', """
        3
        which ph:wich
        pretty ph:prity*
        happy ph:hepi->happi
        """)

    assert [(rep.pattern, rep.replacement) for rep in aff.REP] == [
        ('wich', 'which'),
        ('prit', 'prett'),
        ('hepi', 'happi')
    ]


def test_into_existing_index():
    aff, dic = read('', """
        1
        cat
        """)
    read_dic(StringReader('dog'), aff=aff, context=Context(), dic=dic)

    assert 'cat' in dic
    assert 'dog' in dic


def test_personal():
    aff, dic = read("""
        SFX S Y 1
        SFX S 0 s .
        """, """
        2
        dog/S
        cat
        """)

    read_personal(StringReader("""
        kablam
        wolf/dog
        *cat
        yeti/unknown
        """), aff=aff, dic=dic)

    assert 'kablam' in dic
    assert 'wolf' in dic
    assert 'wolfs' in dic
    assert dic.has_flag('cat', a.FORBIDDEN)
    assert 'yeti' in dic
    assert 'yetis' not in dic
