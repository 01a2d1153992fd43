"""
figtext.magic - file type recognition and errors

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging


class FormatError(Exception):
    """Incorrect file format."""


class NotFoundError(KeyError):
    """Font or control file not found."""


class Magic:
    """Match file contents against a leading byte sequence."""

    def __init__(self, value, offset=0):
        """Initialise mask from bytes."""
        if not isinstance(value, bytes):
            raise TypeError(
                f'Initialiser must be bytes, not {type(value).__name__}'
            )
        self._offset = offset
        self._value = value

    def __len__(self):
        """Mask length."""
        return self._offset + len(self._value)

    def __repr__(self):
        return f'{type(self).__name__}({self._value!r})'

    def matches(self, target):
        """Target bytes match the mask."""
        if len(target) < len(self):
            return False
        return target[self._offset:len(self)] == self._value

    def fits(self, instream):
        """Binary stream matches the signature, without consuming it."""
        return self.matches(instream.peek(len(self)))


# 4-byte signatures distinguishing plain and archived font files
FLF_MAGIC = Magic(b'flf2')
ZIP_MAGIC = Magic(b'PK\x03\x04')


def identify(instream):
    """Identify font file stream as 'flf' or 'zip'. Raise FormatError if neither."""
    if FLF_MAGIC.fits(instream):
        logging.debug('Stream matches signature for format `flf`.')
        return 'flf'
    if ZIP_MAGIC.fits(instream):
        logging.debug('Stream matches signature for format `zip`.')
        return 'zip'
    raise FormatError(
        'Not a FIGlet font file: '
        f'unrecognised signature {bytes(instream.peek(4)[:4])!r}.'
    )
