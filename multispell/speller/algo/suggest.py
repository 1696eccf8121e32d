"""
The main "suggest correction for this misspelling" module.

On a bird-eye view level, suggest does:

* produces the "edits" of the misspelling which are known to be typical mistakes: replacements from
  :attr:`REP <multispell.speller.data.aff.Aff.REP>` table, neighbouring keys on keyboard, doubled
  or undoubled letters;
* for each case variant of the misspelling ("hello", "Hello", "HELLO"), produces all the variants at
  edit distance 1 (letter removed, letters swapped, letter inserted or replaced);
* checks all of them with :mod:`lookup <multispell.speller.algo.lookup>`; typical mistakes weigh more
  than other edits, and each time the same candidate is produced again, it weighs more;
* if nothing was found, repeats the same for all the variants produced on the first step (which gives
  edit distance 2), in batches, and only while the time budget allows.

To follow algorithm details, start reading from :meth:`Suggest.__call__`

.. autoclass:: Suggest
    :members:

.. autoclass:: Memory

.. autofunction:: rank
"""

import time
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List

from multispell.speller import data
from multispell.speller.algo import capitalization as cap, permutations as pmt
from multispell.speller.algo.lookup import Lookup


LOGGER = logging.getLogger(__name__)

#: Weight of the candidate produced by typical mistake edit (while other candidates start from 0)
EDIT_WEIGHT = 10

#: Time budget of looking for edit distance 2 suggestions, in milliseconds per char of the word...
TIME_PER_CHAR = 30
#: ...but not more than this
MAX_TIME = 200

#: Number of first level candidates checked on the second level is ``max(MAX_POOL_BASE - len, MIN_POOL_ROOT) ** 3``
MAX_POOL_BASE = 15
MIN_POOL_ROOT = 3

#: Second level candidates are checked in batches of ``max((BATCH_BASE - len) ** 3, 1)``
BATCH_BASE = 10


@dataclass
class Memory:
    """
    State shared between first and second level of candidates generation.
    """

    #: Every candidate ever checked, with the result of the check
    state: Dict[str, bool] = field(default_factory=dict)
    #: Weight of each found suggestion
    weighted: Dict[str, int] = field(default_factory=dict)
    #: Found suggestions, in order of finding
    suggestions: List[str] = field(default_factory=list)


class Suggest:
    """
    ``Suggest`` object is created on :class:`Dictionary <multispell.speller.dictionary.Dictionary>`
    creation.

    Usage:

    .. code-block:: python

        from multispell.speller import Dictionary

        dictionary = Dictionary.from_files('dictionaries/en_US')

        suggest = dictionary.suggester
        suggest('spels')
        # => ['spells', 'spills']

    Args:
        aff: Affix data
        dic: Word index
        lookup: Lookup to check candidates with
        clock: Source of current time (in seconds), for time budget
    """

    def __init__(self, aff: data.aff.Aff, dic: data.dic.Dic, lookup: Lookup, *,
                 clock: Callable[[], float] = time.monotonic):
        self.aff = aff
        self.dic = dic
        self.lookup = lookup
        self.clock = clock

    def __call__(self, word: str) -> List[str]:
        """
        Outer "public" interface: returns list of all valid suggestions, best first, converted with
        :attr:`OCONV <multispell.speller.data.aff.Aff.OCONV>`. Empty list for correct (and empty)
        words.

        Args:
            word: Word to check
        """
        started = self.clock()

        value = self.aff.ICONV(word.strip())

        if not value or self.lookup(value):
            return []

        captype = cap.guess(value)

        edits = [
            *pmt.replchars(value, self.aff.REP),
            *pmt.badcharkey(value, self.aff.KEY),
            *pmt.doubledchars(value)
        ]

        memory = Memory()

        first_level = self.generate(memory, pmt.casevariants(value), edits)

        # Edit distance 2 is expensive, so it is checked in batches, and only until something is found
        pool = min(len(first_level), max(MAX_POOL_BASE - len(value), MIN_POOL_ROOT) ** 3)
        size = max((BATCH_BASE - len(value)) ** 3, 1)
        deadline = started + min(TIME_PER_CHAR * len(value), MAX_TIME) / 1000

        start = 0
        while not memory.suggestions and start < pool:
            self.generate(memory, first_level[start:start + size])
            start += size

            if self.clock() > deadline:
                LOGGER.debug('Out of time for %r after %d of %d candidates', value, start, pool)
                break

        result = []
        seen = set()
        for suggestion in rank(memory.suggestions, memory.weighted, captype):
            suggestion = self.aff.OCONV(suggestion)
            if suggestion.lower() in seen:
                continue
            seen.add(suggestion.lower())
            result.append(suggestion)

        return result

    def generate(self, memory: Memory, words: Iterable[str], edits: Iterable[str] = ()) -> List[str]:
        """
        Checks all the edits, and all variants at edit distance 1 from the words, storing the valid
        ones in ``memory``.

        Returns:
            All candidates that were checked the first time (for the next level of generation)
        """
        result = []

        def check(value, edit=False):
            state = memory.state.get(value)

            if state is None:
                result.append(value)

                form = self.lookup.form(value)
                state = form is not None and not self.dic.has_flag(form, self.aff.NOSUGGEST)
                memory.state[value] = state

                if state:
                    memory.weighted[value] = EDIT_WEIGHT if edit else 0
                    memory.suggestions.append(value)

            if state:
                memory.weighted[value] += 1

        for edit in edits:
            check(edit, edit=True)

        for word in words:
            for candidate in pmt.single_edits(word, self.aff.TRY):
                check(candidate)

        return result


def rank(suggestions: List[str], weighted: Dict[str, int], captype: cap.Type) -> List[str]:
    """
    Orders suggestions: heavier first, then those having the same capitalization as the misspelling,
    then alphabetically.
    """
    return sorted(
        suggestions,
        key=lambda suggestion: (-weighted[suggestion], cap.guess(suggestion) != captype, suggestion)
    )
