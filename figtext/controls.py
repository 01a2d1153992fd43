"""
figtext.controls - FIGlet .flc control files

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging

from .chars import decode_char
from .magic import FormatError
from .streams import Stream


# http://www.jave.de/docs/figfont.txt
#
# > Control files are text files which may contain commands, comments and
# > blank lines.  Each command takes up exactly one line.  The first
# > character of a command line determines the command.
# >
# >   t inchar outchar    translate inchar to outchar
# >   number number       translate the first number to the second
# >   f                   freeze: start a new translation stage
# >   h, j, b, g, u       input interpretation modes

_SIGNATURE = 'flc2'

# a single character token, see figtext.chars
_CHAR = r'\\0[xX](?:[0-9a-fA-F]|\\0[xX])+|\\[-+]?[0-9]+|\\.|[^\s\\]'
# a token on a command line: backslash escapes the next char, including space
_TOKEN = re.compile(r'(?:\\.|[^\s\\])+')
_RANGE = re.compile(rf'({_CHAR})-({_CHAR})')
_NUMBER = re.compile(r'[-+]?(?:0[xX][0-9a-fA-F]+|[0-9]+)')
_NUMERIC_PAIR = re.compile(r'[-+]?(?:0[xX][0-9a-fA-F]+|[0-9]+)\s+[-+]?(?:0[xX][0-9a-fA-F]+|[0-9]+)')

# input-mode directives of the C implementation that we don't support
_UNSUPPORTED = {
    'h': 'HZ mode',
    'j': 'Shift-JIS mode',
    'b': 'DBCS mode',
    'g': 'ISO 2022 mode',
}


def load_flc(file):
    """Load transformation stages from a FIGlet .flc file, path or stream."""
    with Stream(file) as stream:
        logging.debug('Reading control file `%s`.', stream.name)
        return parse_flc(stream.text)


def parse_flc(lines):
    """
    Parse control file lines into a tuple of transformation stages.
    Each stage is a dict from input to output codepoint; stages apply in order.
    """
    stages = []
    stage = {}
    for count, line in enumerate(lines):
        # keep trailing whitespace, which may be an escaped space
        line = line.rstrip('\r\n').lstrip()
        if not line.strip() or line.startswith('#'):
            continue
        if count == 0 and line.startswith(_SIGNATURE):
            continue
        command, *args = line.split(maxsplit=1)
        args = args[0] if args else ''
        if command == 't':
            _parse_translation(stage, args, line)
        elif _NUMERIC_PAIR.fullmatch(line.strip()):
            _parse_translation(stage, line, line, numeric=True)
        elif command == 'f':
            stages.append(stage)
            stage = {}
        elif command in _UNSUPPORTED:
            logging.warning(
                'Unsupported control file directive `%s` (%s) ignored.',
                command, _UNSUPPORTED[command]
            )
        elif command == 'u':
            # input is always unicode
            pass
        else:
            logging.warning('Unrecognised control file line `%s` ignored.', line)
    stages.append(stage)
    logging.debug('Control file stage sizes: %s', [len(_s) for _s in stages])
    return tuple(stages)


def _parse_translation(stage, args, line, numeric=False):
    """Add single or ranged translation to stage."""
    tokens = _TOKEN.findall(args)
    try:
        source, target, *_ = (_decode_range(_t, numeric) for _t in tokens[:2])
    except (ValueError, FormatError) as e:
        # too few tokens or tokens we can't read
        logging.warning('Unrecognised control file line `%s` ignored: %s', line, e)
        return
    if len(source) != len(target):
        raise FormatError(
            f'Translation range lengths do not match in `{line}`: '
            f'{len(source)} != {len(target)}.'
        )
    stage.update(zip(source, target))


def _decode_range(token, numeric=False):
    """Convert a character or character range token to a range of codepoints."""
    match = None if numeric else _RANGE.fullmatch(token)
    if match:
        first, last = (_decode_token(_t) for _t in match.groups())
        step = 1 if last >= first else -1
        return range(first, last + step, step)
    value = _decode_token(token, numeric)
    return range(value, value + 1)


def _decode_token(token, numeric=False):
    """Decode a single character token, or a plain number."""
    if (numeric or len(token) > 1) and _NUMBER.fullmatch(token):
        if 'x' in token.lower():
            return int(token, 16)
        return int(token, 10)
    return decode_char(token)
