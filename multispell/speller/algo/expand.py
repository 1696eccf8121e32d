"""
Producing all the word forms from the stem and its flags. Unlike Hunspell, which analyzes the word
being checked into stem and affixes, here all the forms are produced ahead of time when the word is
added, and checking is just looking the word up in :class:`Dic <multispell.speller.data.dic.Dic>`.

.. autofunction:: add_word
.. autofunction:: apply_rule
"""

from collections import deque
from typing import List, Dict, Iterable

from multispell.speller.data import aff as aff_, dic as dic_


def add_word(aff: aff_.Aff, dic: dic_.Dic, word: str, flags: Iterable[str]):
    """
    Adds the word and all its forms to the index.

    * the word itself is added with all its flags, unless it has :attr:`NEEDAFFIX <multispell.speller.data.aff.Aff.NEEDAFFIX>`
    * for each flag that is used by compound rules, the word is registered as a possible compound part
    * for each flag that is a rule, the rule is applied (recursively, by continuation flags) and all
      the produced forms are added; if the rule is combineable, every later combineable rule of the
      opposite kind is applied to each of the forms, too

    So, with ``SFX S Y`` (adds "s") and ``PFX U Y`` (adds "un"), ``do/US`` produces "do", "undo", "dos"
    and "undos" (but with ``SFX S N``, no "undos").
    """
    flags = list(flags)

    if not aff.NEEDAFFIX or aff.NEEDAFFIX not in flags:
        dic.push(word, flags)

    for idx, flag in enumerate(flags):
        if flag in aff.compound_words:
            aff.add_compound_word(flag, word)

        rule = aff.rules.get(flag)
        if rule is None:
            continue

        for form in apply_rule(word, rule, aff.rules):
            dic.push(form)

            if not rule.combineable:
                continue

            for other_flag in flags[idx + 1:]:
                other = aff.rules.get(other_flag)
                if other is None or not other.combineable or other.kind == rule.kind:
                    continue

                for combined in apply_rule(form, other, aff.rules):
                    dic.push(combined)


def apply_rule(word: str, rule: aff_.Rule, rules: Dict[str, aff_.Rule]) -> List[str]:
    """
    All the forms produced by applying rule to the word, and then, recursively, the rules from entries'
    continuation flags to the produced forms. The rule which was already applied in the chain is not
    applied again, so cyclic continuations (``SFX A`` continued by ``B``, continued by ``A``) stop.

    Args:
        word: Word to produce forms of
        rule: Rule to apply
        rules: All the known rules, to look up continuations
    """
    result = []
    queue = deque([(word, rule, (rule.flag,))])

    while queue:
        current, current_rule, chain = queue.popleft()
        for entry in current_rule.entries:
            form = entry.apply(current)
            if form is None:
                continue

            result.append(form)

            for flag in entry.continuation:
                continued = rules.get(flag)
                if continued is None or flag in chain:
                    continue
                queue.append((form, continued, (*chain, flag)))

    return result
