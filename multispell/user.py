"""
The user: several languages with their spellers, and the custom words shared between them.

.. autoclass:: User
    :members:

.. autoclass:: CustomWordList
    :members:
"""

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Set, Union

from multispell.speller import Dictionary
from multispell.spelling import Spelling
from multispell.languages import DictionarySource

LOGGER = logging.getLogger(__name__)


class CustomWordList:
    """
    Words the user has added, each with the set of languages it was added to. The language set is
    empty when the word is already correct in all the user's languages: it is tracked, but doesn't
    change any of the spellers.

    Can be created from the persisted form, which is either the mapping of words to languages, or
    the plain list of words (the older format, where each word is upgraded to an empty set of
    languages)::

        CustomWordList(['kablam', 'shizzle'])
        CustomWordList({'kablam': ['de-de'], 'shizzle': ['fr-fr', 'en-au']})
    """

    def __init__(self, words: Union[Iterable[str], Mapping[str, Iterable[str]], None] = None):
        self.word_list: Dict[str, Set[str]] = {}

        if words is None:
            return

        if isinstance(words, Mapping):
            for word, languages in words.items():
                self.add(word, languages or ())
        else:
            for word in words:
                self.add(word)

    def add(self, word: str, languages: Iterable[str] = ()):
        """
        Adds the word, or adds languages to the word if it is already in the list.
        """
        self.word_list.setdefault(word, set()).update(languages)

    def remove(self, word: str):
        self.word_list.pop(word, None)

    def languages(self, word: str) -> Set[str]:
        return set(self.word_list.get(word, ()))

    @property
    def words(self) -> List[str]:
        return list(self.word_list)

    def sort(self):
        """
        Orders words alphabetically, case-insensitive.
        """
        self.word_list = dict(sorted(self.word_list.items(), key=lambda item: item[0].casefold()))

    def to_dict(self) -> Dict[str, List[str]]:
        """
        The form to persist the list in.
        """
        return {word: sorted(languages) for word, languages in self.word_list.items()}

    def __contains__(self, word: str) -> bool:
        return word in self.word_list

    def __len__(self):
        return len(self.word_list)

    def __iter__(self) -> Iterator[str]:
        return iter(self.word_list)

    def __repr__(self):
        return f'CustomWordList({self.to_dict()!r})'


class User:
    """
    Owns one speller per installed language, and the custom words.

    Usage::

        from multispell.languages import load_dictionaries
        from multispell.user import User

        loaded = load_dictionaries(['en-au', 'de-de'], 'dictionaries/')
        user = User(loaded.dicts, loaded.prefs, {'kablam': []})

        user.get_preferred_language('de')
        # => 'de-de'
        user.check('Dies ist ein Tesst', 'de').misspelt_strings
        # => ['Tesst']

    Args:
        dictionaries: Sources (or already created spellers) of the dictionaries, in the same order as
                      languages. Plain mappings with ``dic`` and ``aff`` keys are accepted as sources
        languages: Installed language tags, in order of preference
        custom_words: Persisted custom word list, see :class:`CustomWordList`

    Raises:
        ValueError: if the numbers of dictionaries and languages differ, or languages repeat
        TypeError: if a dictionary is neither a source nor a speller
    """

    def __init__(self, dictionaries: List[Union[DictionarySource, Dictionary, Mapping[str, str]]], languages: List[str],
                 custom_words: Union[CustomWordList, Iterable[str], Mapping[str, Iterable[str]], None] = None):
        if len(dictionaries) != len(languages):
            LOGGER.error('%d dictionaries for %d languages (%s)', len(dictionaries), len(languages), ', '.join(languages))
            raise ValueError(
                f'Number of dictionaries ({len(dictionaries)}) and languages ({len(languages)}) is not equal'
            )

        if len(set(languages)) != len(languages):
            LOGGER.error('Duplicate languages (%s)', ', '.join(languages))
            raise ValueError(f'Languages should be unique, got {languages!r}')

        self.dicts = list(dictionaries)
        self.languages = list(languages)
        self.spellers: Dict[str, Dictionary] = {
            language: _make_speller(source)
            for language, source in zip(self.languages, self.dicts)
        }

        if not isinstance(custom_words, CustomWordList):
            custom_words = CustomWordList(custom_words)

        self.custom_words = CustomWordList()

        for persisted in custom_words:
            word = persisted.strip()
            if not word:
                continue
            # The word might have been added for the languages the user doesn't have anymore (or yet)
            self.custom_words.add(word, custom_words.languages(persisted) - set(self.languages))
            self.add_word(word)

    def speller(self, language: str) -> Dictionary:
        return self.spellers[language]

    def get_preferred_language(self, content_language: Optional[str]) -> Optional[str]:
        """
        The installed language to check content with: the exact tag match, or the first one with
        the same language component (``en`` => ``en-au``), or the first installed language.

        Args:
            content_language: Detected language of the content, possibly :data:`UNRELIABLE <multispell.languages.UNRELIABLE>`
        """
        if not self.languages:
            return None

        wanted = (content_language or '').lower()

        if wanted in self.languages:
            return wanted

        component = wanted.split('-')[0]
        for language in self.languages:
            if language.split('-')[0] == component:
                return language

        return self.languages[0]

    def set_preferred_language_order(self, order: Iterable[str]):
        """
        Reorders installed languages. Tags which are not installed are ignored, installed languages
        not mentioned stay after the mentioned ones.
        """
        ordered = [language for language in dict.fromkeys(order) if language in self.spellers]
        self.languages = ordered + [language for language in self.languages if language not in ordered]

    def add_word(self, word: str):
        """
        Adds the word to all the languages where it is not correct yet, and remembers those languages.
        """
        word = word.strip()
        if not word:
            return

        added = set()

        for language, speller in self.spellers.items():
            if speller.correct(word):
                continue

            speller.add(word)

            # Freshly added word may still be reported incorrect; re-adding it fixes that
            if not speller.correct(word):
                speller.remove(word).add(word)
                if not speller.correct(word):
                    LOGGER.warning('%r is still incorrect in %s after adding', word, language)

            added.add(language)

        self.custom_words.add(word, added)
        LOGGER.info('Added %r to %s', word, ', '.join(sorted(added)) or 'no languages')

    def remove_word(self, word: str):
        """
        Removes the word from all the languages it was added to, and forgets it.
        """
        if word not in self.custom_words:
            return

        languages = self.custom_words.languages(word)

        for language in languages:
            speller = self.spellers.get(language)
            if speller is not None:
                speller.remove(word)

        self.custom_words.remove(word)
        LOGGER.info('Removed %r from %s', word, ', '.join(sorted(languages)) or 'no languages')

    def check(self, content: str, content_language: Optional[str]) -> Spelling:
        """
        Spellchecks the content with the speller of :meth:`preferred <get_preferred_language>` language.

        Raises:
            LookupError: if the user has no languages
        """
        language = self.get_preferred_language(content_language)
        if language is None:
            raise LookupError('No languages to check the content with')

        return Spelling(self.spellers[language], content)


def _make_speller(source: Union[DictionarySource, Dictionary, Mapping[str, str]]) -> Dictionary:
    if isinstance(source, Dictionary):
        return source
    if isinstance(source, DictionarySource):
        return Dictionary.from_strings(source.aff, source.dic)
    if isinstance(source, Mapping):
        return Dictionary.from_strings(source['aff'], source['dic'])

    raise TypeError(f'Expected dictionary source or speller, got {source!r}')
