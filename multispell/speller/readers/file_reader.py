"""
.. autoclass:: BaseReader
    :members:

.. autoclass:: FileReader
.. autoclass:: StringReader
"""

import io
from typing import IO, Iterator, Tuple

BOM = '\ufeff'


class BaseReader:
    """
    Line source for :meth:`read_aff <multispell.speller.readers.aff.read_aff>` and
    :meth:`read_dic <multispell.speller.readers.dic.read_dic>`. Iterating over it produces
    ``(line_no, line)`` pairs, where the line is stripped, line numbers are 1-based and count the
    empty lines too (which are not produced), and the BOM at the start of the text is dropped.

    The affix file can change its own encoding in the middle (``SET`` directive), so the reader can
    switch to another encoding and continue from the same line::

        for num, line in reader:
            if line.startswith('SET '):
                reader.reset_encoding(line[4:])
    """

    def __init__(self, stream: IO[str]):
        self.line_no = 0
        self._switch(stream)

    def reset_encoding(self, encoding: str):
        raise NotImplementedError

    def close(self):
        self.stream.close()

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return self

    def __next__(self) -> Tuple[int, str]:
        while True:
            raw = self.stream.readline()
            if raw == '':
                raise StopIteration

            self.line_no += 1
            if self.line_no == 1:
                raw = raw.lstrip(BOM)

            line = raw.strip()
            if line:
                return (self.line_no, line)

    def _switch(self, stream: IO[str]):
        # new stream continues after the lines already read from the old one
        self.stream = stream
        for _ in range(self.line_no):
            stream.readline()


class FileReader(BaseReader):
    """
    Reader implementation for simple filesystem file. Word lists and affix files are expected to be
    UTF-8, unless affix file says otherwise with ``SET`` directive.
    """

    def __init__(self, path: str, encoding: str = 'UTF-8'):
        self.path = path
        super().__init__(self._open(encoding))

    def reset_encoding(self, encoding: str):
        self.stream.close()
        self._switch(self._open(encoding))

    def _open(self, encoding):
        # Some dictionaries use bytes which are invalid in their declared encoding as flags
        return open(self.path, 'r', encoding=encoding, errors='surrogateescape')


class StringReader(BaseReader):
    """
    Reader implementation for in-memory buffers (dictionaries fetched from somewhere else, or test
    fixtures). The text is already decoded, so encoding changes are ignored.
    """

    def __init__(self, text: str):
        super().__init__(io.StringIO(text))

    def reset_encoding(self, encoding: str):
        pass
