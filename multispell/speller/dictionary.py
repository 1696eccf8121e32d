from __future__ import annotations

import glob

from typing import List, Optional

from multispell.speller import data, readers
from multispell.speller.readers.aff import Context
from multispell.speller.readers.file_reader import FileReader, StringReader
from multispell.speller.algo import expand, lookup, suggest


class Dictionary:
    """
    The main interface to ``multispell.speller`` as a library: the speller of one language.

    Usage::

        from multispell.speller import Dictionary

        # from folder where en_US.aff and en_US.dic are present
        dictionary = Dictionary.from_files('/path/to/dictionary/en_US')
        # or, from the text already read from somewhere
        dictionary = Dictionary.from_strings(aff_text, dic_text)
        # or, from system folders (on Linux)
        dictionary = Dictionary.from_system('en_US')

        print(dictionary.correct('spels'))
        # False
        for suggestion in dictionary.suggest('spels'):
            print(suggestion)
        # spells
        # spills

    Unlike read-only Hunspell dictionaries, words can be added and removed at runtime::

        dictionary.add('kablam').correct('kablam')
        # True

    The lookup and suggestion algorithms are available as :attr:`lookuper` and :attr:`suggester`,
    so they can be called directly::

        dictionary.lookuper.form('SPELLS')
        # 'spells'

    **Dictionary creation**

    .. automethod:: from_files
    .. automethod:: from_strings
    .. automethod:: from_system

    **Dictionary usage**

    .. automethod:: correct
    .. automethod:: spell
    .. automethod:: suggest
    .. automethod:: word_characters

    **Dictionary changing**

    .. automethod:: add
    .. automethod:: remove
    .. automethod:: dictionary
    .. automethod:: personal

    **Data objects**

    .. autoattribute:: aff
    .. autoattribute:: dic

    **Algorithms**

    .. autoattribute:: lookuper
    .. autoattribute:: suggester
    """

    #: Contents of ``*.aff``
    aff: data.aff.Aff
    #: All the word forms of ``*.dic`` (and the words added later)
    dic: data.dic.Dic

    #: Instance of ``Lookup``, can be used for experimenting, see :mod:`algo.lookup <multispell.speller.algo.lookup>`.
    lookuper: lookup.Lookup
    #: Instance of ``Suggest``, can be used for experimenting, see :mod:`algo.suggest <multispell.speller.algo.suggest>`.
    suggester: suggest.Suggest

    PATHES = [
        # lib
        "/usr/share/hunspell",
        "/usr/share/myspell",
        "/usr/share/myspell/dicts",
        "/Library/Spelling",
    ]

    @classmethod
    def from_files(cls, path: str) -> Dictionary:
        """
        Reads the dictionary from the two files sharing one base name, ``<path>.aff`` and ``<path>.dic``.

        Args:
            path: Base path without extension, like ``/usr/share/hunspell/en_AU``.
        """

        aff_reader = FileReader(path + '.aff')
        try:
            aff, context = readers.read_aff(aff_reader)
        finally:
            aff_reader.close()

        dic_reader = FileReader(path + '.dic', encoding=context.encoding)
        try:
            dic = readers.read_dic(dic_reader, aff=aff, context=context)
        finally:
            dic_reader.close()

        return cls(aff, dic, context)

    @classmethod
    def from_strings(cls, aff: str, dic: Optional[str] = None) -> Dictionary:
        """
        Read dictionary from the texts of ``*.aff`` and ``*.dic`` (for example, fetched from the
        network). Without ``dic``, the dictionary is empty and should be filled with :meth:`dictionary`
        or :meth:`add`.
        """

        aff_data, context = readers.read_aff(StringReader(aff))
        dic_data = data.dic.Dic()
        if dic is not None:
            readers.read_dic(StringReader(dic), aff=aff_data, context=context, dic=dic_data)

        return cls(aff_data, dic_data, context)

    @classmethod
    def from_system(cls, name: str) -> Dictionary:
        """
        Looks for ``<name>.aff`` (and ``<name>.dic`` beside it) in the folders of :attr:`PATHES`, which are
        where Linux and macOS packages install Hunspell dictionaries.

        Args:
            name: Dictionary file name without extension, like ``en_AU``
        """

        for folder in cls.PATHES:
            pathes = glob.glob(f'{folder}/{name}.aff')
            if pathes:
                return cls.from_files(pathes[0][:-len('.aff')])

        raise LookupError(f'{name}.aff not found (search pathes are {cls.PATHES!r})')

    def __init__(self, aff: data.aff.Aff, dic: data.dic.Dic, context: Optional[Context] = None):
        self.aff = aff
        self.dic = dic
        self.context = context or Context(flag_format=aff.FLAG, flag_synonyms=aff.AF)

        self.lookuper = lookup.Lookup(self.aff, self.dic)
        self.suggester = suggest.Suggest(self.aff, self.dic, self.lookuper)

    def correct(self, word: str) -> bool:
        """
        Tells whether the word (in any of its capitalizations allowed by the dictionary) is correct.

        ::

            >>> dictionary.correct('spels')
            False
            >>> dictionary.correct('spells')
            True

        Args:
            word: Word to check
        """

        return self.lookuper(word)

    def spell(self, word: str) -> lookup.SpellResult:
        """
        Checks the word, also telling if it is forbidden or rare::

            >>> dictionary.spell('colour')
            SpellResult(correct=False, forbidden=True, warn=False)

        Args:
            word: Word to check
        """

        return self.lookuper.spell(word)

    def suggest(self, word: str) -> List[str]:
        """
        Returns corrections for the misspelled word, closest ones first. Correct word has no suggestions.

        ::

            >>> dictionary.suggest('spels')
            ['spells', 'spills']

        Args:
            word: Word to find corrections for
        """

        return self.suggester(word)

    def add(self, word: str, model: Optional[str] = None) -> Dictionary:
        """
        Adds word to the dictionary. If ``model`` is a known word, the new word gets all its flags,
        and therefore all the same forms: ``add('kablam', 'spell')`` makes "kablams" correct too.

        Returns the dictionary itself, so calls can be chained.
        """

        flags = list(self.dic.flags(model) or []) if model else []
        expand.add_word(self.aff, self.dic, word, flags)

        return self

    def remove(self, word: str) -> Dictionary:
        """
        Removes the word (just this form, not the forms produced from it).

        Returns the dictionary itself, so calls can be chained.
        """

        self.dic.remove(word)

        return self

    def dictionary(self, text: str) -> Dictionary:
        """
        Adds all the words of ``*.dic``-formatted text (with the flags meaning defined by the
        dictionary's ``*.aff``).
        """

        readers.read_dic(StringReader(text), aff=self.aff, context=self.context, dic=self.dic)

        return self

    def personal(self, text: str) -> Dictionary:
        """
        Adds all the words of personal dictionary, see :meth:`read_personal <multispell.speller.readers.dic.read_personal>`
        for the format.
        """

        readers.read_personal(StringReader(text), aff=self.aff, dic=self.dic)

        return self

    def word_characters(self) -> Optional[str]:
        """
        Characters which, besides letters, should be considered part of the word by tokenizers
        (``WORDCHARS`` directive of ``*.aff``).
        """

        return self.aff.WORDCHARS

    def __repr__(self):
        return f'Dictionary({self.aff!r}, {self.dic!r})'
