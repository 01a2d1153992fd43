"""
figtext.chars - character tokens in FIGlet control files

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re

from .magic import FormatError


# > \a  bell, \b  backspace, \e  escape, \f  form feed,
# > \n  newline, \r  carriage return, \t  tab, \v  vertical tab
_ESCAPES = {
    'a': 7,
    'b': 8,
    'e': 27,
    'f': 12,
    'n': 10,
    'r': 13,
    't': 9,
    'v': 11,
    ' ': 32,
    '\\': 92,
}

# some files mark every byte, as in \0x00\0x41
_HEX_TOKEN = re.compile(r'\\0[xX](?:[0-9a-fA-F]|\\0[xX])+')
_DEC_TOKEN = re.compile(r'\\[-+]?[0-9]+')


def decode_char(token):
    """Convert a control file character token to an integer codepoint."""
    if _HEX_TOKEN.fullmatch(token):
        digits = re.sub(r'\\0[xX]', '', token)
        if not digits:
            raise FormatError(f'No hex digits in character token `{token}`.')
        return int(digits, 16)
    if _DEC_TOKEN.fullmatch(token):
        return int(token[1:], 10)
    if len(token) == 2 and token[0] == '\\':
        try:
            return _ESCAPES[token[1]]
        except KeyError:
            raise FormatError(f'Unknown escape sequence `{token}`.') from None
    if len(token) == 1:
        return ord(token)
    raise FormatError(f'Could not parse character token `{token}`.')
