from .file_reader import FileReader, StringReader
from .aff import read_aff
from .dic import read_dic, read_personal

__all__ = [
    "FileReader",
    "StringReader",
    "read_aff",
    "read_dic",
    "read_personal"
]
