"""
Splitting the content into words which are worth spellchecking, and finding where they are.

The words are separated by whitespace and punctuation (except for ``'`` and ``-``, which can be part
of the word: "y'all", "cherry-pudding"). URLs, emails and numbers are never spellchecked.

.. autofunction:: clean_text
.. autofunction:: clean_word
.. autofunction:: get_relative_bounds
.. autofunction:: is_whole_word
.. autofunction:: get_matching_mark_index
.. autofunction:: word_at
.. autofunction:: replace_in_text
"""

import re
import logging
from typing import List, Optional, Tuple

LOGGER = logging.getLogger(__name__)

URL_REGEXP = re.compile(r'(http://|https://|ftp://|www\.)')
SEPARATORS_REGEXP = re.compile(r'[.,:;!?¿_<>{}()\[\]"`´^$°§½¼³%&¬+=*~#|/\\]')
BOUNDARY_REGEXP = re.compile(r'[\s.,:;!?¿_<>{}()\[\]"`´^$°§½¼³%&¬+=*~#|/\\]')
QUOTES_REGEXP = re.compile(r"^'+|'+$")
NUMBER_REGEXP = re.compile(r'^[-+]?(\d+(\.\d*)?|\.\d+)([eE][-+]?\d+)?$')


def clean_text(content: str, filter_chars: bool = True) -> List[str]:
    """
    Splits the content into words, dropping everything that shouldn't be spellchecked.

    >>> clean_text("I am test content y'all! test@email.de 'available' at www.youdaman.io +49 (030)")
    ['am', 'test', 'content', "y'all", 'available', 'at']

    Args:
        content: Text to split
        filter_chars: Whether to drop single-character words
    """
    if not content or not isinstance(content, str):
        LOGGER.debug('Cannot clean empty or non-string content %r', content)
        return []

    result = []

    for chunk in content.split():
        if URL_REGEXP.search(chunk) or '@' in chunk:
            continue

        for token in SEPARATORS_REGEXP.split(chunk):
            token = QUOTES_REGEXP.sub('', token)

            if not token:
                continue
            if len(token) == 1 and filter_chars:
                continue
            if NUMBER_REGEXP.match(token):
                continue

            result.append(token)

    return result


def clean_word(content: str) -> str:
    """
    The first word of the content, even if it is one character long; empty string if there is none.
    """
    words = clean_text(content, False)
    return words[0] if words else ''


def get_relative_bounds(word: str, content: str, start: int = 0) -> Optional[Tuple[int, int]]:
    """
    ``(start, end)`` of the first occurrence of the word in content, as of ``start``, or ``None``
    if there is no such occurrence.
    """
    if not word or not content:
        return None

    found = content.find(word, start)
    if found == -1:
        return None

    return (found, found + len(word))


def is_whole_word(word: str, content: str, start: Optional[int] = None) -> bool:
    """
    Whether the word is found in content at ``start`` not as a part of another word ("cherry" is
    a whole word in "cherry pudding", but not in "cherry-pudding"). Without ``start``, the first
    occurrence of the word is checked.
    """
    if start is None:
        start = content.find(word)
        if start == -1:
            return False

    prev_char = content[start - 1] if start > 0 else ''
    next_char = content[start + len(word):start + len(word) + 1]

    # quotes around the word are stripped by clean_text, so they bound it too
    return _is_word_boundary(prev_char, quotes=True) and _is_word_boundary(next_char, quotes=True)


def get_matching_mark_index(content: str, word) -> int:
    """
    Which of the whole-word occurrences of the :class:`Word <multispell.spelling.Word>` text in the
    content the word is. ``-1`` if it is not found at all.

    >>> content = 'lemony-snicket? lemony! lemony.'
    >>> get_matching_mark_index(content, Word('lemony', 24, 30))
    1
    """
    if not content or not word.is_valid():
        return -1

    search = 0
    index = 0

    while True:
        search = content.find(word.text, search)
        if search == -1:
            return -1

        if search == word.start and search + word.length == word.end:
            return index

        # only whole words are marked
        if is_whole_word(word.text, content, search):
            index += 1

        search += word.length


def word_at(text: str, position: int) -> Tuple[str, int, int]:
    """
    The word under the caret, with its bounds.

    >>> word_at('The [] cherry-pudding text', 10)
    ('cherry-pudding', 7, 21)

    Returns:
        ``(word, start, end)``; the word is empty if the caret is between word boundaries, or outside
        of the text
    """
    if not text or position < 0 or position > len(text):
        return ('', 0, 0)

    start = end = position

    while start > 0 and not _is_word_boundary(text[start - 1]):
        start -= 1
    while end < len(text) and not _is_word_boundary(text[end]):
        end += 1

    if start == end:
        return ('', start, end)

    word = clean_word(text[start:end])
    bounds = get_relative_bounds(word, text, start)
    if bounds is None:
        return ('', start, end)

    return (word, *bounds)


def replace_in_text(content: str, word, replacement: str) -> str:
    """
    Replaces :class:`Word <multispell.spelling.Word>` in content, by its bounds.

    Raises:
        TypeError: if content or word are absent, or replacement is not a non-empty string
    """
    if not replacement or not isinstance(replacement, str):
        raise TypeError('replacement must be a non-empty string')
    if content is None or word is None:
        raise TypeError('content and word are required')

    return content[:word.start] + replacement + content[word.end:]


def _is_word_boundary(char: str, quotes: bool = False) -> bool:
    return not char or (quotes and char == "'") or bool(BOUNDARY_REGEXP.match(char))
