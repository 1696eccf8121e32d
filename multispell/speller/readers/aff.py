"""

.. autofunction:: read_aff

.. autoclass:: Context
    :members:

Internal methods
^^^^^^^^^^^^^^^^

.. autofunction:: read_directive
.. autofunction:: read_value
.. autofunction:: make_entry
.. autofunction:: make_try

"""

import re
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Any

from multispell.speller.data import aff

from multispell.speller.readers.file_reader import BaseReader


LOGGER = logging.getLogger(__name__)

# Outdated directive names
SYNONYMS = {'PSEUDOROOT': 'NEEDAFFIX'}

FLAG_LONG_REGEXP = re.compile(r'..')
FLAG_NUM_REGEXP = re.compile(r'\d+(?=,|$)')

FLAG_DIRECTIVES = ['KEEPCASE', 'FORBIDDENWORD', 'NOSUGGEST', 'ONLYINCOMPOUND', 'NEEDAFFIX', 'WARN']

# Several tables of these may be present, and they are concatenated
LIST_DIRECTIVES = ['REP', 'KEY', 'COMPOUNDRULE']

KNOWN_DIRECTIVES = [
    *FLAG_DIRECTIVES, *LIST_DIRECTIVES,
    'SET', 'FLAG', 'WORDCHARS', 'LANG', 'TRY', 'COMPOUNDMIN', 'ICONV', 'OCONV', 'SFX', 'PFX', 'AF'
]


@dataclass
class Context:
    """
    Class containing reading-time context necessary for reading both .aff and .dic file:
    encoding, flag format and flag aliases.

    It is created in :meth:`read_aff` and then reused in :meth:`read_dic <multispell.speller.readers.dic.read_dic>`
    (and whenever more words are read into the dictionary later).
    """

    #: Encoding of dictionary (see :attr:`Aff.SET <multispell.speller.data.aff.Aff.SET>`)
    encoding: str = 'UTF-8'

    #: Flag format of dictionary (see :attr:`Aff.FLAG <multispell.speller.data.aff.Aff.FLAG>`)
    flag_format: str = 'short'

    #: List of flag synonyms (like ``1 => ['A', 'B', 'C']``),
    #: see :attr:`Aff.AF <multispell.speller.data.aff.Aff.AF>`
    flag_synonyms: Dict[str, List[str]] = field(default_factory=dict)

    def parse_flags(self, string: Optional[str]) -> List[str]:
        """
        Parse list of flags, considering attr:`flag_format`. Unknown alias raises ``KeyError``,
        unknown flag format raises ``ValueError``.
        """

        if not string:
            return []

        if self.flag_synonyms and string.isdigit():
            return list(self.flag_synonyms[string])

        if self.flag_format in ('short', 'UTF-8'):
            return list(string)
        if self.flag_format == 'long':
            return FLAG_LONG_REGEXP.findall(string)
        if self.flag_format == 'num':
            return FLAG_NUM_REGEXP.findall(string)

        raise ValueError(f"Unknown flag format {self.flag_format}")


def read_aff(source: BaseReader) -> Tuple[aff.Aff, Context]:
    """
    Reads .aff file and creates an :class:`Aff <multispell.speller.data.aff.Aff>`.

    For each line calls :meth:`read_directive` (which either returns pair of ``(directive, value)``,
    or just skips the line).

    Args:
         source: "Reader" (thin wrapper around opened file or string, targeting line-by-line reading)

    Returns:
        Aff itself and a :class:`Context` which then will be reused in
        :meth:`read_dic <multispell.speller.readers.dic.read_dic>`
    """

    data: Dict[str, Any] = {'rules': {}, 'extra': {}}
    context = Context()

    for (_, line) in source:
        if line.startswith('#'):
            continue

        dir_value = read_directive(source, line, context=context)
        if not dir_value:
            continue

        directive, value = dir_value

        if directive in ['SFX', 'PFX']:
            data['rules'][value.flag] = value
        elif directive in LIST_DIRECTIVES:
            data.setdefault(directive, []).extend(value)
        elif directive in ['ICONV', 'OCONV']:
            data.setdefault(directive, aff.ConvTable()).patterns.extend(value.patterns)
        elif directive == 'EXTRA':
            name, extra = value
            data['extra'][name] = extra
        else:
            data[directive] = value

        # directives which change how the rest is read
        if directive == 'FLAG':
            context.flag_format = value
        elif directive == 'AF':
            context.flag_synonyms = value
        elif directive == 'SET':
            context.encoding = value
            source.reset_encoding(value)

        if directive == 'FLAG' and value == 'UTF-8':
            # flag format UTF-8 also means the file encoding is UTF-8
            context.encoding = 'UTF-8'
            data['SET'] = 'UTF-8'
            source.reset_encoding('UTF-8')

    result = aff.Aff(**data)
    LOGGER.debug('Read %r', result)

    return (result, context)


def read_directive(source: BaseReader, line: str, *, context: Context) -> Optional[Tuple[str, Any]]:
    """
    Try to read directive from the next line, delegating value parsing (directive-dependent) to
    :meth:`read_value`.

    If it is not a directive, just ignore. .aff file can contain literally anything: pseudo-directives
    (lines looking like ``UPCASED_WORD some data`` but not a known directive name), free form text, etc.
    Unknown directives with a name and at most one value are preserved in
    :attr:`Aff.extra <multispell.speller.data.aff.Aff.extra>`.

    Args:
        source: passed from :meth:`read_aff` (because reading of one directive may require reading of
                more lines from source)
        line: current line read from source
        context: current reading context
    """

    name, *arguments = re.split(r'\s+', line)

    # Directive names are upper-case words, anything else is free text
    if not re.match(r'^[A-Z]+$', name):
        return None

    name = SYNONYMS.get(name, name)

    value = read_value(source, name, *arguments, context=context)

    if value is None:
        if name not in KNOWN_DIRECTIVES and len(arguments) <= 1:
            return ('EXTRA', (name, arguments[0] if arguments else None))
        return None

    return (name, value)


def read_value(source: BaseReader, directive: str, *values, context: Context) -> Any:
    """
    Reads one value.

    Note that for a table-alike directives "one value" might span several lines (and that's why
    this method has ``source`` as its argument, and can read more lines from it on demand).

    For example, if current directive is ``REP``, it means the file below looks like this:

    .. code-block:: text

        REP 3     # we are on this line currently
        REP f ph
        REP ^alot$ a_lot
        REP shun$ tion

    The method would read value 3, understand that there are 3 more lines to read, read them and
    return list of three :class:`RepPattern <multispell.speller.data.aff.RepPattern>`.

    Table rows which can't be parsed (malformed regexp, not enough columns, unknown flag alias) are
    dropped one by one, the rest of the table is still read.

    Args:
        source: Can be changed inside method
        directive: Name of current directive
        values: Values already read from the line where directive was
        context: Reading context
    """

    value = values[0] if values else None

    def _read_array(count=None):
        if count is None:
            count = int(value)

        rows = []
        if count <= 0:
            return rows

        for _, ln in source:
            if ln.startswith('#'):
                continue
            rows.append(re.split(r'\s+', ln)[1:])
            if len(rows) == count:
                break

        return rows

    def _read_table(make, count=None):
        try:
            rows = _read_array(count)
        except (TypeError, ValueError):
            LOGGER.debug('Skipping %s: bad table size %r', directive, value)
            return None

        result = []
        for row in rows:
            try:
                result.append(make(*row))
            except (re.error, TypeError, ValueError, KeyError) as e:
                LOGGER.debug('Skipping %s row %r: %s', directive, row, e)
        return result

    if directive in ['SET', 'FLAG', 'WORDCHARS', 'LANG']:
        return value
    if directive in FLAG_DIRECTIVES:
        return value
    if directive == 'TRY':
        return make_try(value or '')
    if directive == 'KEY':
        return (value or '').split('|')
    if directive == 'COMPOUNDMIN':
        if value is None or not value.isdigit():
            LOGGER.debug('Ignoring non-numeric COMPOUNDMIN %r', value)
            return None
        return int(value)
    if directive == 'COMPOUNDRULE':
        return _read_table(lambda first, *_: aff.CompoundRule(first))
    if directive in ['ICONV', 'OCONV']:
        patterns = _read_table(lambda pat1, pat2, *_: aff.ConvPattern(pat1, pat2))
        return None if patterns is None else aff.ConvTable(patterns)
    if directive == 'REP':
        return _read_table(lambda pat1, pat2, *_: aff.RepPattern(pat1, pat2.replace('_', ' ')))
    if directive in ['SFX', 'PFX']:
        try:
            flag, crossproduct, count, *_ = values
            count = int(count)
        except ValueError:
            LOGGER.debug('Skipping %s with malformed header %r', directive, values)
            return None
        kind = aff.RuleType(directive)
        entries = _read_table(
            lambda *row: make_entry(kind, *row, context=context),
            count
        )
        return aff.Rule(flag=flag, kind=kind, combineable=(crossproduct == 'Y'), entries=entries)
    if directive == 'AF':
        aliases = _read_table(lambda first, *_: context.parse_flags(first))
        if aliases is None:
            return None
        return {str(i + 1): flags for i, flags in enumerate(aliases)}

    # unknown directive
    return None


def make_entry(kind, _flag, strip, add, *rest, context):
    """
    Produces :class:`RuleEntry <multispell.speller.data.aff.RuleEntry>` from raw data
    """

    cond = rest[0] if rest else '.'
    add, _, flags = add.partition('/')

    return aff.RuleEntry(
        kind=kind,
        strip=('' if strip == '0' else strip),
        add=('' if add == '0' else add),
        condition=cond,
        continuation=context.parse_flags(flags)
    )


def make_try(chars: str) -> str:
    """
    Lowercases and dedupes ``TRY`` characters, and appends the frequent letters which the
    dictionary forgot to mention.
    """
    result = ''.join(dict.fromkeys(chars.lower()))
    return result + ''.join(char for char in aff.ALPHABET if char not in result)
