"""
The module represents data from the affix (``*.aff``) file: the rules of how word forms are produced
from the stems, and the settings of checking and suggestion algorithms.

This text file has the following format:

.. code-block:: text

    # comment
    DIRECTIVE_NAME value

    # directives with large array of values
    DIRECTIVE_NAME <num_of_values>
    DIRECTIVE_NAME value1_1 value1_2 value1_3
    DIRECTIVE_NAME value2_1 value2_2 value2_3
    # ...

Lines starting with ``#`` are skipped, but ``#`` anywhere else is meaningful: some dictionaries
use it as a flag (``COMPOUNDRULE #*0{`` in ``en_GB``).

The :class:`Aff` class stores all data from the file, it is read by
:meth:`read_aff <multispell.speller.readers.aff.read_aff>`.

``Aff``
-------

.. autoclass:: Aff

Rules
-----

.. autoclass:: RuleType
.. autoclass:: Rule
.. autoclass:: RuleEntry
    :members:

Helper pattern-alike classes
----------------------------

.. autoclass:: RepPattern
.. autoclass:: ConvPattern
.. autoclass:: ConvTable
.. autoclass:: CompoundRule
    :members:
"""

import re
from enum import Enum
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Pattern

#: Relative frequencies of letters in English, most frequent first. Used as :attr:`Aff.TRY` when
#: the affix file doesn't declare it, and to complete declared ``TRY`` (dictionaries tend to forget
#: rare letters, ``en_US`` forgets ``j``, ``x`` and ``y``)
ALPHABET = 'etaoinshrdlcumwfgypbvkjxqz'

#: Keyboard adjacency groups used as :attr:`Aff.KEY` when the affix file doesn't declare any
DEFAULT_KEY = [
    'qwertzuop',
    'yxcvbnm',
    'qaw',
    'say',
    'wse',
    'dsx',
    'sy',
    'edr',
    'fdc',
    'dx',
    'rft',
    'gfv',
    'fc',
    'tgz',
    'hgb',
    'gv',
    'zhu',
    'jhn',
    'hb',
    'uji',
    'kjm',
    'jn',
    'iko',
    'lkm'
]


class RuleType(Enum):
    """
    Kind of the rule, named after the directive it is declared by.
    """
    PREFIX = 'PFX'
    SUFFIX = 'SFX'


@dataclass
class RuleEntry:
    """
    One row of the prefix or suffix table. Rules are stored in table looking this way:

    .. code-block:: text

        SFX N Y 3
        SFX N   e     ion/S      e
        SFX N   y     ication    y
        SFX N   0     en         [^ey]

    Meaning of the first row (``e ion/S e``):

    * when applies, removes "e" at the end of the word (``0`` would mean "removes nothing")
    * ...then adds "ion" (``0`` would mean "adds nothing")
    * ...and the produced form is then passed through the rule ``S`` (:attr:`continuation`)
    * ...condition of application is "word ends with e" (``.`` means any word)

    So, if the word list has ``animate/N``, "animation" (and "animations", by continuation) are
    valid words.

    Suffix :attr:`strip` and :attr:`condition` are anchored at the end of the word, prefix ones at
    the start. Both are treated as regular expressions, so constructing the entry with malformed
    pattern raises ``re.error`` (and the reader drops such entries).
    """

    kind: RuleType
    #: What is removed from the word when the entry applies
    strip: str
    #: What is added when the entry applies
    add: str
    #: Condition the word should match for the entry to apply
    condition: str = '.'
    #: Rule codes to apply to the produced form
    continuation: List[str] = field(default_factory=list)

    def __post_init__(self):
        # "-" does NOT have a special regex-meaning, while might happen as a regular word char
        condition = self.condition.replace('-', '\\-')

        self.remove_regexp: Optional[Pattern] = None
        self.cond_regexp: Optional[Pattern] = None

        if self.kind == RuleType.SUFFIX:
            if self.strip:
                self.remove_regexp = re.compile(self.strip + '$')
            if condition and condition != '.':
                self.cond_regexp = re.compile(condition + '$')
        else:
            if self.strip:
                self.remove_regexp = re.compile('^' + self.strip)
            if condition and condition != '.':
                self.cond_regexp = re.compile('^' + condition)

    def apply(self, word: str) -> Optional[str]:
        """
        Produces the form of the word with this entry applied, or ``None`` if the word doesn't match
        the entry's condition.
        """
        if self.cond_regexp and not self.cond_regexp.search(word):
            return None

        stem = self.remove_regexp.sub('', word, count=1) if self.remove_regexp else word

        if self.kind == RuleType.SUFFIX:
            return stem + self.add
        return self.add + stem

    def __repr__(self):
        sign = '-' if self.kind == RuleType.PREFIX else ''
        return (
            f"RuleEntry({sign}{self.add}{'' if sign else '-'}" +
            (f"/{','.join(self.continuation)}" if self.continuation else '') +
            f", on {self.condition}, strip {self.strip or '0'})"
        )


@dataclass
class Rule:
    """
    All the entries of one prefix or suffix table, stored in :attr:`Aff.rules` by the table's code.
    """

    #: Code of the rule, as referenced by word list entries
    flag: str
    #: Prefix or suffix
    kind: RuleType
    #: Whether the forms produced by this rule can be combined with the rule of the opposite kind
    #: (``Y`` in the table header)
    combineable: bool
    entries: List[RuleEntry] = field(default_factory=list)

    def __repr__(self):
        return f"Rule({self.kind.value} {self.flag}{'×' if self.combineable else ''}, {len(self.entries)} entries)"


@dataclass
class RepPattern:
    """
    Contents of the :attr:`Aff.REP` directive, pair of ``(frequent typo, its replacement)``. Typo is
    matched literally (``.`` is just a dot), but might be anchored to the start or the end of the word:

    .. code-block:: text

        REP 3
        REP f ph
        REP tion$ shun
        REP ^alot$ a_lot

    ``_`` in replacement stands for space.
    """
    pattern: str
    replacement: str

    def __post_init__(self):
        start = '^' if self.pattern.startswith('^') else ''
        text = self.pattern[len(start):]
        end = '$' if text.endswith('$') else ''

        #: The typo itself, without anchors
        self.text = text[:len(text) - len(end)]
        if not self.text:
            raise ValueError(f'Empty REP pattern {self.pattern!r}')

        # lookahead, so overlapping occurrences are all found
        self.regexp = re.compile(start + '(?=' + re.escape(self.text) + end + ')')


@dataclass
class ConvPattern:
    """
    One row of :attr:`Aff.ICONV` or :attr:`Aff.OCONV`: regular expression and the text to replace
    all of its matches with.
    """
    pattern: str
    replacement: str

    def __post_init__(self):
        self.regexp = re.compile(self.pattern)

    def __call__(self, word: str) -> str:
        return self.regexp.sub(lambda _: self.replacement, word)


@dataclass
class ConvTable:
    """
    Table of conversions applied on the word before checking (:attr:`Aff.ICONV`), or on the
    suggestion before returning it (:attr:`Aff.OCONV`). Typically used for typographic apostrophes
    and ligatures:

    .. code-block:: text

        ICONV 1
        ICONV ’ '

    Patterns are applied in order of declaration, each to the result of the previous one.
    """

    patterns: List[ConvPattern] = field(default_factory=list)

    def __call__(self, word: str) -> str:
        for pattern in self.patterns:
            word = pattern(word)
        return word

    def __len__(self):
        return len(self.patterns)


@dataclass
class CompoundRule:
    """
    Regexp-alike rule for accepting compound words, content of :attr:`Aff.COMPOUNDRULE` directive.
    Rules look this way:

    .. code-block:: text

        COMPOUNDRULE 2
        COMPOUNDRULE n*1t
        COMPOUNDRULE n*mp

    ...reading: compound word might consist of any number of words with flag ``n``, then word with
    flag ``1``, then word with flag ``t``. In the word list, it goes along with

    .. code-block:: text

        1/n1
        1th/tc
        2/nm

    The rule can't be compiled on reading: it should know all the words having its flags. So the
    words are gathered in :attr:`Aff.compound_words` while reading the word list, and then the rule
    is :meth:`compiled <compile>` into regexp, where each flag is replaced with the alternation of
    its words (and flags without words stay literal).
    """

    text: str

    def __post_init__(self):
        # Long and numeric flags are enclosed in brackets: (aa)(bb)*(cc)
        if '(' in self.text:
            self.parts = re.findall(r'\((.+?)\)([*?]?)', self.text)
        else:
            self.parts = re.findall(r'([^*?])([*?]?)', self.text)
        self.flags = [flag for flag, _ in self.parts]

    def compile(self, words: Dict[str, List[str]]) -> Pattern:
        """
        Produces regexp matching compound words.

        Args:
            words: Words known for each flag
        """
        source = ''
        for flag, quantifier in self.parts:
            known = words.get(flag)
            if known:
                source += '(?:' + '|'.join(re.escape(word) for word in known) + ')'
            else:
                source += '(?:' + re.escape(flag) + ')'
            source += quantifier

        return re.compile(source, re.IGNORECASE)


@dataclass
class Aff:
    """
    The class contains all directives from .aff file in its attributes.

    Attribute **names** for directives are exactly the same as directives they've read from
    (they are upper-case, which is un-Pythonic, but allows to unambiguously relate directives to attrs
    and grep them in code). Derived data (:attr:`rules`, :attr:`compound_words`, :attr:`extra`) are
    lowercase.

    Note that **all** directives are optional, empty .aff file is a valid one.

    **General**

    .. autoattribute:: SET
    .. autoattribute:: FLAG
    .. autoattribute:: LANG
    .. autoattribute:: WORDCHARS
    .. autoattribute:: AF

    **Flags**

    .. autoattribute:: FORBIDDENWORD
    .. autoattribute:: KEEPCASE
    .. autoattribute:: NOSUGGEST
    .. autoattribute:: NEEDAFFIX
    .. autoattribute:: ONLYINCOMPOUND
    .. autoattribute:: WARN

    **Suggestions**

    .. autoattribute:: KEY
    .. autoattribute:: TRY
    .. autoattribute:: REP

    **Rules**

    .. autoattribute:: rules

    **Compounding**

    .. autoattribute:: COMPOUNDRULE
    .. autoattribute:: COMPOUNDMIN
    .. autoattribute:: compound_words

    **Pre/post-processing**

    .. autoattribute:: ICONV
    .. autoattribute:: OCONV

    **Other**

    .. autoattribute:: extra
    """

    #: Encoding of .aff and .dic, switches the encoding the rest of files are read with.
    SET: str = 'UTF-8'

    #: Flag format: ``short`` (default, one character per flag), ``long`` (two characters per flag),
    #: ``num`` (comma-separated numbers) or ``UTF-8`` (same as ``short``).
    FLAG: str = 'short'

    #: Language code. Not used by the algorithms.
    LANG: Optional[str] = None

    #: Extra characters considered part of the word, used by the tokenizers outside of the engine
    #: (see :meth:`Dictionary.word_characters <multispell.speller.dictionary.Dictionary.word_characters>`).
    WORDCHARS: Optional[str] = None

    #: Table of flag set aliases: in the word list, ``foo/1`` then means ``foo`` with all the flags
    #: of the first ``AF`` row.
    AF: Dict[str, List[str]] = field(default_factory=dict)

    #: Flag marking the words (and affixed forms) which should be considered misspelled, even if
    #: they could be produced by the rules. Also assigned for ``*word`` entries of word lists, in
    #: this case, if the affix file does not declare it, private :data:`FORBIDDEN` is used.
    FORBIDDENWORD: Optional[str] = None

    #: Flag marking words which case should be kept exactly as it is in the dictionary:
    #: no "OPENOFFICE.ORG" for "OpenOffice.org" entry.
    KEEPCASE: Optional[str] = None

    #: Flag marking words which should never be suggested.
    NOSUGGEST: Optional[str] = None

    #: Flag marking words which are correct only with some affix applied.
    NEEDAFFIX: Optional[str] = None

    #: Flag marking words which are correct only as a part of the compound.
    ONLYINCOMPOUND: Optional[str] = None

    #: Flag marking rare words which are also often spelling mistakes, reported by
    #: :meth:`Lookup.spell <multispell.speller.algo.lookup.Lookup.spell>`.
    WARN: Optional[str] = None

    #: Keyboard adjacency groups (``KEY qwertyuiop|asdfghjkl|zxcvbnm``, each of the ``|``-separated
    #: parts is a separate group), for suggesting "this letter was mistyped by the neighbouring one".
    KEY: List[str] = field(default_factory=lambda: list(DEFAULT_KEY))

    #: Characters to try inserting and replacing with when generating suggestions, in the order
    #: of their frequency.
    TRY: str = ALPHABET

    #: Typical misspellings table, see :class:`RepPattern`.
    REP: List[RepPattern] = field(default_factory=list)

    #: Input conversion table, applied to the word before checking it.
    ICONV: ConvTable = field(default_factory=ConvTable)

    #: Output conversion table, applied to the suggestions before returning them.
    OCONV: ConvTable = field(default_factory=ConvTable)

    #: Compound rules, see :class:`CompoundRule`.
    COMPOUNDRULE: List[CompoundRule] = field(default_factory=list)

    #: Minimum length of the word to be checked against compound rules.
    COMPOUNDMIN: int = 3

    #: All ``PFX`` and ``SFX`` tables by their codes. If prefix and suffix share the code, the
    #: latest declared wins.
    rules: Dict[str, Rule] = field(default_factory=dict)

    #: Words gathered for each of the compound rule flags (and for :attr:`ONLYINCOMPOUND` flag), while
    #: reading the word list.
    compound_words: Dict[str, List[str]] = field(default_factory=dict)

    #: All the directives Aff doesn't know, with their (first) value.
    extra: Dict[str, Optional[str]] = field(default_factory=dict)

    def __post_init__(self):
        for rule in self.COMPOUNDRULE:
            for flag in rule.flags:
                self.compound_words.setdefault(flag, [])

        if self.ONLYINCOMPOUND:
            self.compound_words.setdefault(self.ONLYINCOMPOUND, [])

        self._compound_regexps: Optional[List[Pattern]] = None

    def add_compound_word(self, flag: str, word: str):
        """
        Registers the word as a possible part of compounds with the flag. Compound regexps are
        regenerated on the next :meth:`compound_regexps` call.
        """
        self.compound_words[flag].append(word)
        self._compound_regexps = None

    def compound_regexps(self) -> List[Pattern]:
        """
        Regexps compiled from :attr:`COMPOUNDRULE` with the words currently known.
        """
        if self._compound_regexps is None:
            self._compound_regexps = [rule.compile(self.compound_words) for rule in self.COMPOUNDRULE]
        return self._compound_regexps

    def __repr__(self):
        return (
            f'Aff(FLAG={self.FLAG!r}, {len(self.rules)} rules, {len(self.COMPOUNDRULE)} compound rules, '
            f'{len(self.REP)} replacements)'
        )


#: Forbidden-word flag used when the affix file doesn't declare ``FORBIDDENWORD``, but the
#: word list has ``*word`` entries. Can't be produced by flag parsing.
FORBIDDEN = '\x00FORBIDDEN'
