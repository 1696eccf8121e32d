"""
Language tags, routing of the content to the language it is written in, and loading of the
dictionaries for the languages user has.

Language tags are lowercase ``language-region`` strings: ``en-au``, ``de-de``. The content language
comes from the language detector (which is not a part of this library) and is just the language
component (``en``), or :data:`UNRELIABLE` when the detector is not sure.

.. autofunction:: prepare_languages
.. autofunction:: routing_language
.. autofunction:: load_dictionaries

.. autoclass:: Detection
.. autoclass:: DetectedLanguage
.. autoclass:: DictionarySource
.. autoclass:: LoadedDictionaries
"""

import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Iterable, List, Union

LOGGER = logging.getLogger(__name__)

#: Content language for the text which language the detector could not reliably tell. Such text is
#: checked with the user's first language.
UNRELIABLE = 'unreliable'


def prepare_languages(codes: Iterable[str]) -> List[str]:
    """
    Normalizes language codes into tags: two-letter codes get the same region (``fr`` => ``fr-fr``),
    everything is lowercased, duplicates are dropped.

    >>> prepare_languages(['de-DE', 'en-AU', 'en', 'fr', 'de-de'])
    ['de-de', 'en-au', 'en-en', 'fr-fr']
    """
    result = []
    for code in codes:
        tag = code.lower()
        if len(tag) == 2:
            tag = f'{tag}-{tag}'
        if tag not in result:
            result.append(tag)
    return result


@dataclass
class DetectedLanguage:
    language: str
    confidence: float = 0.0


@dataclass
class Detection:
    """
    Result of the language detection: whether the detector is sure, and the candidate languages,
    most probable first.
    """

    is_reliable: bool
    languages: List[DetectedLanguage] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> 'Detection':
        """
        Builds detection from the detector's raw result::

            {'isReliable': True, 'languages': [{'language': 'en', 'percentage': 97}]}
        """
        return cls(
            is_reliable=bool(data.get('isReliable')),
            languages=[
                DetectedLanguage(
                    language=language['language'],
                    confidence=language.get('percentage', language.get('confidence', 0.0))
                )
                for language in data.get('languages', [])
            ]
        )


def routing_language(detection: Detection) -> str:
    """
    The content language to pass to :meth:`User.check <multispell.user.User.check>`: the most probable
    language, or :data:`UNRELIABLE`.
    """
    if not detection.is_reliable or not detection.languages:
        return UNRELIABLE
    return detection.languages[0].language


@dataclass
class DictionarySource:
    """
    Texts of one language's dictionary files. Iterable as ``(language, dic, aff)``.
    """

    language: str
    dic: str
    aff: str

    def __iter__(self):
        return iter((self.language, self.dic, self.aff))


@dataclass
class LoadedDictionaries:
    #: Sources of all the dictionaries loaded
    dicts: List[DictionarySource]
    #: Languages which were loaded, in the requested order
    prefs: List[str]


def load_dictionaries(languages: Iterable[str], folder: Union[str, Path]) -> LoadedDictionaries:
    """
    Reads ``<language>.dic`` and ``<language>.aff`` for each of the languages from the folder.
    Languages which files are absent or unreadable are skipped, the order of the rest is preserved.
    """
    folder = Path(folder)
    dicts = []

    for language in languages:
        try:
            dic = (folder / f'{language}.dic').read_text(encoding='utf-8')
            aff = (folder / f'{language}.aff').read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            LOGGER.warning('Dictionary for %s is not loaded: %s', language, e)
            continue

        dicts.append(DictionarySource(language=language, dic=dic, aff=aff))

    prefs = [source.language for source in dicts]
    LOGGER.info('Loaded dictionaries: %s', ', '.join(prefs) or 'none')

    return LoadedDictionaries(dicts=dicts, prefs=prefs)
