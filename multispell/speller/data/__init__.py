from . import aff, dic
from .aff import Aff
from .dic import Dic

__all__ = [
    "aff",
    "dic",
    "Aff",
    "Dic"
]
