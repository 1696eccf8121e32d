from multispell.speller.data import aff as a
from multispell.speller.readers.file_reader import StringReader
from multispell.speller.readers import aff


def read(text):
    return aff.read_aff(StringReader(text))


def directive(line, next_lines='', **kwarg):
    source = StringReader(next_lines)
    context = aff.Context(**kwarg)
    return aff.read_directive(source, line, context=context)


def test_directives():
    name, value = directive('REP 3',
        """
        REP ^alot$ a_lot
        REP f ph
        REP shun$ tion
        """)

    assert name == 'REP'
    assert [(rep.pattern, rep.replacement) for rep in value] == [
        ('^alot$', 'a lot'),
        ('f', 'ph'),
        ('shun$', 'tion')
    ]

    name, value = directive('PFX A Y 1', 'PFX A 0 re .')
    assert name == 'PFX'
    assert value.flag == 'A'
    assert value.kind == a.RuleType.PREFIX
    assert value.combineable
    assert value.entries[0].add == 're'
    assert value.entries[0].strip == ''

    assert directive('KEEPCASE K') == ('KEEPCASE', 'K')
    assert directive('lowercase words are not directives') is None


def test_defaults():
    data, context = read('')

    assert data.TRY == a.ALPHABET
    assert data.KEY == a.DEFAULT_KEY
    assert data.COMPOUNDMIN == 3
    assert data.KEEPCASE is None
    assert data.FLAG == 'short'
    assert data.rules == {}
    assert context.encoding == 'UTF-8'


def test_comments_and_blank_lines():
    data, _ = read("""
        # KEEPCASE A

        # REP 1
        KEEPCASE B
        """)

    assert data.KEEPCASE == 'B'
    assert data.REP == []


def test_try():
    data, _ = read("TRY esianrtolcdugmphbyfvkwzESIANRTOLCDUGMPHBYFVKWZ'")

    assert data.TRY == "esianrtolcdugmphbyfvkwz'jxq"


def test_key():
    data, _ = read("""
        KEY qwertyuiop|asdfghjkl
        KEY zxcvbnm
        """)

    assert data.KEY == ['qwertyuiop', 'asdfghjkl', 'zxcvbnm']


def test_compoundmin():
    assert read('COMPOUNDMIN 1')[0].COMPOUNDMIN == 1
    assert read('COMPOUNDMIN many')[0].COMPOUNDMIN == 3


def test_rules():
    data, _ = read("""
        SFX S Y 2
        SFX S 0 s [^sy]
        SFX S y ies [^aeiou]y

        PFX U N 1
        PFX U 0 un .
        """)

    suffix = data.rules['S']
    assert suffix.kind == a.RuleType.SUFFIX
    assert suffix.combineable
    assert [(entry.strip, entry.add, entry.condition) for entry in suffix.entries] == [
        ('', 's', '[^sy]'),
        ('y', 'ies', '[^aeiou]y')
    ]

    prefix = data.rules['U']
    assert prefix.kind == a.RuleType.PREFIX
    assert not prefix.combineable


def test_malformed_rule_entries_are_dropped():
    data, _ = read("""
        SFX A Y 3
        SFX A 0 s [^
        SFX A 0
        SFX A 0 es .
        KEEPCASE K
        """)

    assert [entry.add for entry in data.rules['A'].entries] == ['es']
    assert data.KEEPCASE == 'K'


def test_malformed_table_size():
    data, _ = read("""
        REP many
        REP f ph
        """)

    assert data.REP == []


def test_continuation():
    data, _ = read("""
        SFX A Y 1
        SFX A 0 ful/S .
        """)

    assert data.rules['A'].entries[0].continuation == ['S']


def test_long_flags():
    data, context = read("""
        FLAG long

        SFX zx Y 1
        SFX zx 0 s/g?1G09 .

        NOSUGGEST 1G
        """)

    assert context.flag_format == 'long'
    assert data.rules['zx'].entries[0].continuation == ['g?', '1G', '09']
    assert data.NOSUGGEST == '1G'


def test_num_flags():
    data, _ = read("""
        FLAG num

        SFX 999 Y 1
        SFX 999 0 s/1,23 .
        """)

    assert data.rules['999'].entries[0].continuation == ['1', '23']


def test_flag_aliases():
    data, context = read("""
        AF 2
        AF AB
        AF BC

        SFX A Y 1
        SFX A 0 s/2 .
        """)

    assert data.AF == {'1': ['A', 'B'], '2': ['B', 'C']}
    assert context.flag_synonyms == data.AF
    assert data.rules['A'].entries[0].continuation == ['B', 'C']


def test_utf8_flags():
    data, context = read("""
        FLAG UTF-8

        SFX Ü Y 1
        SFX Ü 0 en/Ö .
        """)

    assert context.encoding == 'UTF-8'
    assert data.rules['Ü'].entries[0].continuation == ['Ö']


def test_conversions():
    data, _ = read("""
        ICONV 2
        ICONV ’ '
        ICONV [ 'x

        OCONV 1
        OCONV ' ’
        """)

    assert len(data.ICONV) == 1
    assert data.ICONV('don’t') == "don't"
    assert data.OCONV("don't") == 'don’t'


def test_compound_rules():
    data, _ = read("""
        ONLYINCOMPOUND c
        COMPOUNDRULE 2
        COMPOUNDRULE n*1t
        COMPOUNDRULE (aa)?(bb)
        """)

    assert [rule.text for rule in data.COMPOUNDRULE] == ['n*1t', '(aa)?(bb)']
    assert data.COMPOUNDRULE[1].parts == [('aa', '?'), ('bb', '')]
    assert set(data.compound_words) == {'n', '1', 't', 'aa', 'bb', 'c'}
    assert all(words == [] for words in data.compound_words.values())


def test_flags_and_synonyms():
    data, _ = read("""
        FORBIDDENWORD !
        NOSUGGEST ?
        PSEUDOROOT X
        WARN W
        WORDCHARS 0123456789
        """)

    assert data.FORBIDDENWORD == '!'
    assert data.NOSUGGEST == '?'
    assert data.NEEDAFFIX == 'X'
    assert data.WARN == 'W'
    assert data.WORDCHARS == '0123456789'


def test_extra_directives():
    data, _ = read("""
        LANG en_AU
        COMPLEXPREFIXES
        MAXNGRAMSUGS 4
        BREAK 2 and more
        """)

    assert data.LANG == 'en_AU'
    assert data.extra == {'COMPLEXPREFIXES': None, 'MAXNGRAMSUGS': '4'}
