"""
The main "is this word correct?" algorithm implementation.

All the word forms are produced ahead of time (see :mod:`expand <multispell.speller.algo.expand>`),
so on a bird-eye view level, the word is correct if:

* it is in the index exactly as it is, or
* it is fully UPPERCASE, and its sentence-case or lowercase variant is in the index ("PARIS" for "Paris"), or
* it is not lowercase, and its lowercase variant is in the index ("Hello" for "hello"), or
* it matches one of the compound rules.

...with the dictionary flags modifying the process: ``KEEPCASE`` words are not accepted in other
casing, ``FORBIDDENWORD`` ones are never accepted, ``ONLYINCOMPOUND`` ones are accepted only as
parts of compounds.

To follow algorithm details, start reading from :meth:`Lookup.form`

.. autoclass:: Lookup
    :members:

.. autoclass:: SpellResult
"""

from dataclasses import dataclass
from typing import Optional

from multispell.speller import data
from multispell.speller.algo.capitalization import sentence


@dataclass
class SpellResult:
    """
    Detailed result of the word check, see :meth:`Lookup.spell`.
    """

    #: Whether the word is correct
    correct: bool
    #: Whether the word is explicitly forbidden by the dictionary
    forbidden: bool
    #: Whether the word is marked with ``WARN`` flag: it is correct but rare, and probably
    #: a misspelling
    warn: bool


class Lookup:
    """
    ``Lookup`` object is created on :class:`Dictionary <multispell.speller.dictionary.Dictionary>`
    creation, and (unlike Hunspell, where lookup and suggest share a lot) it is also used by
    :class:`Suggest <multispell.speller.algo.suggest.Suggest>` to check the candidates.

    Usage:

    .. code-block:: python

        from multispell.speller import Dictionary

        dictionary = Dictionary.from_files('dictionaries/en_US')

        lookup = dictionary.lookuper
        lookup('spels')
        # => False
        lookup('spells')
        # => True
        lookup.form('SPELLS')
        # => 'spells'

    Args:
        aff: Affix data
        dic: Word index
    """

    def __init__(self, aff: data.aff.Aff, dic: data.dic.Dic):
        self.aff = aff
        self.dic = dic

    def __call__(self, word: str) -> bool:
        """
        The outermost word correctness check.
        """
        return self.form(word) is not None

    def form(self, word: str, *, allow_forbidden: bool = False) -> Optional[str]:
        """
        The form of the word as it is stored in the index, or ``None`` if the word is not correct.

        Args:
            word: Word to check, surrounding whitespace is ignored
            allow_forbidden: If ``True``, forbidden words are found as any other (this is used to tell
                             "forbidden" and "unknown" words apart)
        """
        value = word.strip()
        if not value:
            return None

        value = self.aff.ICONV(value)

        if self.exact(value):
            if not allow_forbidden and self.dic.has_flag(value, self.aff.FORBIDDENWORD):
                return None
            return value

        # "HELLO" may be a check of "Hello" in the title
        if value.upper() == value:
            alternative = sentence(value)

            if self._denied(alternative, allow_forbidden=allow_forbidden):
                return None

            if self.exact(alternative):
                return alternative

        # ...or of "hello" in the beginning of the sentence
        alternative = value.lower()

        if alternative != value:
            if self._denied(alternative, allow_forbidden=allow_forbidden):
                return None

            if self.exact(alternative):
                return alternative

        return None

    def exact(self, value: str) -> bool:
        """
        Checks the word as it is, without case variations.
        """
        flags = self.dic.flags(value)

        if flags is not None:
            return not (self.aff.ONLYINCOMPOUND and self.aff.ONLYINCOMPOUND in flags)

        # removed word stays removed even if some compound rule matches it
        if value in self.dic.entries:
            return False

        if len(value) >= self.aff.COMPOUNDMIN:
            return any(regexp.fullmatch(value) for regexp in self.aff.compound_regexps())

        return False

    def spell(self, word: str) -> SpellResult:
        """
        Detailed check: besides correctness, tells whether the word is forbidden or should be warned
        about.
        """
        value = self.form(word, allow_forbidden=True)

        forbidden = value is not None and self.dic.has_flag(value, self.aff.FORBIDDENWORD)

        return SpellResult(
            correct=value is not None and not forbidden,
            forbidden=forbidden,
            warn=value is not None and self.dic.has_flag(value, self.aff.WARN)
        )

    def _denied(self, alternative: str, *, allow_forbidden: bool) -> bool:
        # Case-changed form is not acceptable for words which should keep their case, and the
        # forbidden word should not become acceptable by changing its case
        if self.dic.has_flag(alternative, self.aff.KEEPCASE):
            return True
        return not allow_forbidden and self.dic.has_flag(alternative, self.aff.FORBIDDENWORD)
