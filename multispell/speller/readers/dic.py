"""

.. autofunction:: read_dic
.. autofunction:: read_personal

Internal methods
^^^^^^^^^^^^^^^^

.. autofunction:: parse_line
.. autofunction:: add_alt_spelling
.. autofunction:: forbidden_flag

"""

import re
import logging

from typing import List, Optional, Tuple

from multispell.speller.data import aff as aff_, dic as dic_
from multispell.speller.data.aff import RepPattern

from multispell.speller.readers.file_reader import BaseReader
from multispell.speller.readers.aff import Context

from multispell.speller.algo import expand


LOGGER = logging.getLogger(__name__)

COUNT_REGEXP = re.compile(r'^\d+(\s+|$)')   # should start with digits, but can have whatever further
SPACES_REGEXP = re.compile(r"\s+")
SLASH_REGEXP = re.compile(r'(?<!\\)/')
TAG_REGEXP = re.compile(r'[ \t]\w{2}:')


def read_dic(source: BaseReader, *, aff: aff_.Aff, context: Context, dic: Optional[dic_.Dic] = None) -> dic_.Dic:
    """
    Reads source (file or string) and fills :class:`Dic <multispell.speller.data.dic.Dic>` with it.
    Every word is expanded into all of its forms with :meth:`expand.add_word <multispell.speller.algo.expand.add_word>`.

    Lines which can't be parsed (unknown flag alias, for example) are skipped.

    Args:
        source: "Reader" (thin wrapper around opened file or string, targeting line-by-line reading)
        aff: Contents of corresponding .aff file. Note that this method *mutates* passed
             ``aff``: it gathers words for compound rules, may declare forbidden flag (see
             :meth:`forbidden_flag`), and updates its :attr:`REP <multispell.speller.data.aff.Aff.REP>`
             table with contents of dictionary's ``ph:`` data tag
        context: Context created while reading .aff file and defining common reading settings:
                 encoding and format of flags.
        dic: Existing index to add words to (new one is created if not passed)
    """
    result = dic_.Dic() if dic is None else dic
    count = 0
    first = True

    for num, line in source:
        # the first line is usually the approximate number of words
        if first:
            first = False
            if COUNT_REGEXP.match(line):
                continue

        try:
            parsed = parse_line(line, context=context)
        except (KeyError, ValueError) as e:
            LOGGER.debug('Skipping line %d %r: %s', num, line, e)
            continue

        if parsed is None:
            continue

        word, flags, alt_spellings = parsed

        if word.startswith('*'):
            word = word[1:]
            flags.append(forbidden_flag(aff))

        for pattern in alt_spellings:
            add_alt_spelling(aff, word, pattern)

        expand.add_word(aff, result, word, flags)
        count += 1

    LOGGER.debug('Read %d words, %d forms in index', count, len(result))

    return result


def read_personal(source: BaseReader, *, aff: aff_.Aff, dic: dic_.Dic):
    """
    Reads personal dictionary into existing index. Personal dictionary has no flags, each line is
    either ``word``, or ``word/model``: the word which should get all the flags (and therefore forms)
    of the model. ``*word`` marks the word as forbidden.

    .. code-block:: text

        foo
        Heisenberg/Einstein
        *colour
    """
    for _, line in source:
        word, _, model = line.partition('/')

        forbidden = word.startswith('*')
        if forbidden:
            word = word[1:]

        if not word:
            continue

        flags = list(dic.flags(model) or []) if model else []
        if forbidden:
            flags.append(forbidden_flag(aff))

        expand.add_word(aff, dic, word, flags)


def parse_line(line: str, *, context: Context) -> Optional[Tuple[str, List[str], List[str]]]:
    """
    Each line is ``<stem>/<flags> <data tags>``. Stem can have spaces, so the indication of
    "here the data tags start" is:

    * either space character, followed by text in format "xy:something" (exactly two-letter tag, colon, data)
    * or _tab_ (and exactly tab) character, and then some data

    If the stem should contain "/", it is screened as ``\\/``. Anything after ``#`` which is not part of
    flags is a comment.

    Returns:
        ``(word, flags, alternative spellings)`` (the latter are values of ``ph:`` tags), or ``None``
        if there is no word on the line
    """

    tags_match = TAG_REGEXP.search(line)
    tags_start: Optional[int] = tags_match.start() if tags_match else None

    old_tags_start = line.find("\t")
    if old_tags_start != -1 and (tags_start is None or tags_start > old_tags_start):
        tags_start = old_tags_start

    if tags_start is not None:
        word = line[:tags_start]
        tags = SPACES_REGEXP.split(line[tags_start:].strip())
    else:
        word = line
        tags = []

    slash = SLASH_REGEXP.search(word)
    comment = word.find('#')

    if slash and (comment == -1 or slash.start() < comment):
        word, flags = word[:slash.start()], word[slash.end():]
        flags = SPACES_REGEXP.split(flags.strip())[0]
    else:
        if comment != -1:
            word = word[:comment]
        flags = ''

    word = word.strip().replace(r'\/', '/')

    if not word:
        return None

    alt_spellings = [tag[3:] for tag in tags if tag.startswith('ph:') and len(tag) > 3]

    return (word, context.parse_flags(flags), alt_spellings)


def add_alt_spelling(aff: aff_.Aff, word: str, pattern: str):
    """
    ``ph:`` data tag specifies how the word is frequently misspelled, the pairs of misspelling and
    correct spelling are added to :attr:`REP <multispell.speller.data.aff.Aff.REP>` table:

    * ``which ph:wich``: ``(wich, which)``
    * ``pretty ph:prity*``: ``(prit, prett)``, the misspelling of the stem
    * ``happy ph:hepi->happi``: ``(hepi, happi)``
    """
    try:
        if pattern.endswith('*'):
            aff.REP.append(RepPattern(pattern[:-2], word[:-1]))
        elif '->' in pattern:
            fro, _, to = pattern.partition('->')
            aff.REP.append(RepPattern(fro, to))
        else:
            aff.REP.append(RepPattern(pattern, word))
    except ValueError as e:
        LOGGER.debug('Skipping alternative spelling %r of %r: %s', pattern, word, e)


def forbidden_flag(aff: aff_.Aff) -> str:
    """
    Flag to mark ``*word`` entries with. If the affix file doesn't declare ``FORBIDDENWORD``, private
    :data:`FORBIDDEN <multispell.speller.data.aff.FORBIDDEN>` flag is declared.
    """
    if aff.FORBIDDENWORD is None:
        aff.FORBIDDENWORD = aff_.FORBIDDEN
    return aff.FORBIDDENWORD
