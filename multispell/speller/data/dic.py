"""
The module represents the word index: all the words of ``*.dic`` file, expanded by the affix rules,
plus the words added at runtime.

Source file has the following format:

.. code-block:: text

    124 # first line: number of entries

    # Each entry has form:

    cat/ABC ph:kat

Where ``cat`` is the stem, and ``ABC`` are its flags (flags meaning and format is defined by
:class:`Aff <multispell.speller.data.aff.Aff>`). Unlike the source file, :class:`Dic` stores each
*form* produced from the stem (``cat``, ``cats``, ``cat's``...) as a separate entry, so checking
the word is just looking it up.

``Dic`` is filled by :meth:`read_dic <multispell.speller.readers.dic.read_dic>`.

.. autoclass:: Dic
    :members:
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Iterable


@dataclass
class Dic:
    """
    Mapping of word forms to their flags. Entry with ``None`` instead of flags is the word that was
    explicitly removed: it stays in the index, but is not considered known.
    """

    #: All word forms with their flags
    entries: Dict[str, Optional[List[str]]] = field(default_factory=dict)

    def push(self, word: str, flags: Iterable[str] = ()):
        """
        Adds word with flags; if the word is already known, flags are appended to existing ones.
        Pushing the removed word revives it.
        """
        existing = self.entries.get(word) or []
        self.entries[word] = [*existing, *flags]

    def remove(self, word: str):
        self.entries[word] = None

    def flags(self, word: str) -> Optional[List[str]]:
        """
        Flags of the word, or ``None`` if the word is unknown (or removed).
        """
        return self.entries.get(word)

    def has_flag(self, word: str, flag: Optional[str]) -> bool:
        """
        Whether the known word has the flag. Always ``False`` for undeclared (``None``) flags.
        """
        if flag is None:
            return False
        flags = self.entries.get(word)
        return flags is not None and flag in flags

    def __contains__(self, word: str) -> bool:
        return self.entries.get(word) is not None

    def __len__(self):
        return sum(1 for flags in self.entries.values() if flags is not None)

    def __repr__(self):
        return f'Dic({len(self)} words)'
