"""
.. autoclass:: Type

.. autofunction:: guess
.. autofunction:: sentence
"""

from enum import Enum


Type = Enum('Type', 'NO INIT ALL HUH')
"""
Type of capitalization, detected by :meth:`guess`:

* ``NO``: all lowercase ("foo"), also words without letters at all ("42")
* ``INIT``: titlecase, only initial letter is capitalized ("Foo")
* ``ALL``: all uppercase ("FOO")
* ``HUH``: mixed capitalization ("fooBar", "FooBar")
"""


def _simple(text: str):
    if text.lower() == text:
        return Type.NO
    if text.upper() == text:
        return Type.ALL
    return None


def guess(word: str) -> Type:
    """
    Guess word's capitalization. Unlike ``str.islower``/``str.isupper``, caseless characters
    count as lowercase ones, so "42nd" is ``NO``.
    """
    head = _simple(word[:1])
    rest = _simple(word[1:])

    if not word[1:]:
        return head or Type.HUH
    if head == rest and head is not None:
        return head
    if head == Type.ALL and rest == Type.NO:
        return Type.INIT
    return Type.HUH


def sentence(word: str) -> str:
    """
    "Sentence case" of the word: first letter as it was, the rest lowercased ("USA" => "Usa").
    """
    return word[:1] + word[1:].lower()
