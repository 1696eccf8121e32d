"""
Spellchecking of the piece of content with one language's speller.

.. autoclass:: Spelling
.. autoclass:: Word
    :members:
.. autoclass:: SuggestionTracker
    :members:
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from multispell.speller import Dictionary
from multispell.text import clean_text, get_relative_bounds, is_whole_word


@dataclass
class Word:
    """
    Misspelled word and where it is in the content. Iterable as ``(text, start, end)``.
    """

    text: str
    start: int
    end: int
    length: int = field(init=False)

    def __post_init__(self):
        self.length = len(self.text)

    def is_valid(self) -> bool:
        return self.length > 0

    def __iter__(self):
        return iter((self.text, self.start, self.end))


class Spelling:
    """
    Checks the content and keeps the results.

    Usage::

        spelling = Spelling(dictionary, 'Hello wrold, hello wrold!')
        spelling.misspelt_strings
        # ['wrold', 'wrold']
        spelling.misspelt_words
        # [Word(text='wrold', start=6, end=11, length=5), Word(text='wrold', start=19, end=24, length=5)]
        spelling.suggestions
        # {'wrold': {'suggested_words': ['world'], 'count': 2}}

    Attributes:
        content: The text checked
        speller: The dictionary it was checked with
        cleaned_text: All the words of the content worth checking
        misspelt_strings: Words that are not correct, in order of appearance
        misspelt_words: The same, with their positions in content
        suggestions: Suggestions for each misspelt word which has any, and how many times the word
                     appears
    """

    def __init__(self, speller: Dictionary, content: str):
        self.content = content
        self.speller = speller
        self.cleaned_text: List[str] = clean_text(content)
        self.misspelt_strings: List[str] = [word for word in self.cleaned_text if not speller.correct(word)]
        self.misspelt_words: List[Word] = self._find_words()
        self.suggestions: Dict[str, dict] = self._suggest()

    def _find_words(self) -> List[Word]:
        words = []
        position = 0

        for text in self.misspelt_strings:
            bounds = self._whole_word_bounds(text, position) or get_relative_bounds(text, self.content, position)
            if bounds is None:
                continue
            words.append(Word(text, *bounds))
            position = bounds[1]

        return words

    def _whole_word_bounds(self, text, position):
        bounds = get_relative_bounds(text, self.content, position)
        while bounds is not None and not is_whole_word(text, self.content, bounds[0]):
            bounds = get_relative_bounds(text, self.content, bounds[0] + 1)
        return bounds

    def _suggest(self) -> Dict[str, dict]:
        counts = Counter(word.text for word in self.misspelt_words)
        suggestions = {}

        for text in counts:
            suggested = self.speller.suggest(text)
            if suggested:
                suggestions[text] = {'suggested_words': suggested, 'count': counts[text]}

        return suggestions


class SuggestionTracker:
    """
    Keeps track of which of the suggestions is currently shown to the user, who scrolls through them.
    """

    def __init__(self, suggestions: List[str]):
        self.suggestions = suggestions
        self.index = 0

    @property
    def current_suggestion(self) -> Optional[str]:
        if not self.suggestions:
            return None
        return self.suggestions[self.index]

    def rotate(self, direction: str):
        """
        Shows next suggestion for ``'up'``, previous for any other direction, wrapping around at both
        ends.
        """
        if not self.suggestions:
            return

        step = 1 if direction == 'up' else -1
        self.index = (self.index + step) % len(self.suggestions)
