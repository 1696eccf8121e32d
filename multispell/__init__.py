from .speller import Dictionary
from .spelling import Spelling, SuggestionTracker, Word
from .user import CustomWordList, User

__all__ = [
    "Dictionary",
    "Spelling",
    "SuggestionTracker",
    "Word",
    "CustomWordList",
    "User"
]
