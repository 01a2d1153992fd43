"""
figtext.containers - transparent unwrapping of zip-compressed font files

(c) 2021--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
import zipfile
from pathlib import Path, PurePosixPath
from contextlib import contextmanager

from .streams import Stream
from .magic import FormatError, identify


class ZipContainer:
    """Read-only zip-file wrapper holding a single font file."""

    def __init__(self, file):
        """Create wrapper."""
        self.name = file.name
        try:
            self._zip = zipfile.ZipFile(file, 'r')
        except zipfile.BadZipFile as exc:
            raise FormatError(exc) from exc

    def __iter__(self):
        """List contents."""
        return (
            _name for _name in self._zip.namelist()
            # exclude directories
            if not _name.endswith('/')
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        """Close the zip file, ignoring errors."""
        try:
            self._zip.close()
        except EnvironmentError as e:
            logging.debug(e)

    def _find_member(self):
        """Find the font member: named like the archive, or the only file in it."""
        names = list(self)
        if not names:
            raise FormatError(f'Zip archive `{self.name}` is empty.')
        if len(names) == 1:
            return names[0]
        # FIGlet convention: the entry carries the same name as the compressed file
        stem = Path(self.name).name.lower()
        for name in names:
            if PurePosixPath(name).name.lower() == stem:
                return name
        raise FormatError(
            f'Zip archive `{self.name}` holds {len(names)} files; '
            'expected a single font file.'
        )

    def open(self):
        """Open a stream on the font member."""
        member = self._find_member()
        logging.debug('Opening file `%s` on zip container `%s`.', member, self.name)
        try:
            with self._zip.open(member, 'r') as file:
                data = file.read()
        except (zipfile.BadZipFile, NotImplementedError) as exc:
            raise FormatError(exc) from exc
        return Stream.from_data(data, name=member)


@contextmanager
def open_font_stream(file):
    """
    Open a plain font stream, unwrapping a zip archive if needed.
    Raises FormatError if the signature is neither FIGfont nor zip.
    """
    with Stream(file) as stream:
        if identify(stream) == 'flf':
            yield stream
            return
        with ZipContainer(stream) as container:
            with container.open() as member:
                # nested archives are not allowed, only plain fonts
                if identify(member) != 'flf':
                    raise FormatError(
                        f'Zip archive `{stream.name}` does not hold a FIGlet font.'
                    )
                yield member
