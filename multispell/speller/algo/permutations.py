"""
Producing the hypotheses of "what the user meant" from the misspelled word. Each function yields
candidate strings, which are then checked by :class:`Suggest <multispell.speller.algo.suggest.Suggest>`.

.. autofunction:: replchars
.. autofunction:: badcharkey
.. autofunction:: doubledchars
.. autofunction:: casevariants
.. autofunction:: single_edits
"""

from typing import Iterator, List

from multispell.speller.data import aff


def replchars(word: str, reptable: List[aff.RepPattern]) -> Iterator[str]:
    """
    Uses :attr:`aff.REP <multispell.speller.data.aff.Aff.REP>` table (typical misspellings) to replace
    in the word provided, every occurrence of the pattern separately (overlapping ones too: "aa" in "aaa"
    is replaced twice).
    """

    for pattern in reptable:
        for match in pattern.regexp.finditer(word):
            yield word[:match.start()] + pattern.replacement + word[match.start() + len(pattern.text):]


def badcharkey(word: str, groups: List[str]) -> Iterator[str]:
    """
    Produces permutations with chars replaced by chars of the same keyboard group ("vat -> cat").
    Uppercase chars are replaced by uppercase ones. A char present in several groups is tried once per
    position.

    Uses :attr:`aff.KEY <multispell.speller.data.aff.Aff.KEY>`
    """

    for i, c in enumerate(word):
        before = word[:i]
        after = word[i+1:]
        lower = c.lower()
        upper = lower != c
        tried = {lower}

        for group in groups:
            if lower not in group:
                continue

            for other in group:
                if other in tried:
                    continue
                tried.add(other)
                yield before + (other.upper() if upper else other) + after


def doubledchars(word: str) -> List[str]:
    """
    Produces variants with doubled letters undoubled, and single letters doubled, in all
    combinations for the first two letters, and then a bounded number of combinations for the
    rest of the word ("acomodate" => "accommodate").
    """

    variants = ['']
    limit = 1

    for i, c in enumerate(word):
        replacement = '' if c == word[i+1:i+2] else c + c

        for idx in range(len(variants)):
            if idx <= limit:
                variants.append(variants[idx] + replacement)
            variants[idx] += c

        if i + 1 < 3:
            limit = len(variants)

    return variants


def casevariants(word: str) -> List[str]:
    """
    The word itself, then its lowercase variant (or, if the word is lowercase, capitalized one), then
    its uppercase variant (if it differs).
    """

    result = [word]

    lower = word.lower()
    if lower == word:
        result.append(word[:1].upper() + lower[1:])
    else:
        result.append(lower)

    upper = word.upper()
    if upper != word:
        result.append(upper)

    return result


def single_edits(word: str, trystring: str) -> Iterator[str]:
    """
    All the variants of the word at edit distance 1: for each position (including the end of the word),
    char removed, swapped with the next one, and each of ``trystring`` chars inserted and replacing it.
    If the char at the position is uppercase, uppercase versions of the inserted chars (those having
    one) are tried too.

    Uses :attr:`aff.TRY <multispell.speller.data.aff.Aff.TRY>`
    """

    for i in range(len(word) + 1):
        before = word[:i]
        after = word[i:]
        c = word[i:i+1]
        upper = c.lower() != c

        # remove
        yield before + after[1:]

        # swap
        if after[1:]:
            yield before + after[1] + c + after[2:]

        for inject in trystring:
            yield before + inject + after
            yield before + inject + after[1:]

            if upper and inject.upper() != inject:
                yield before + inject.upper() + after
                yield before + inject.upper() + after[1:]
