"""
figtext.font - FIGlet .flf font files

(c) 2021--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from typing import NamedTuple

from .magic import FormatError
from .containers import open_font_stream


##############################################################################
# structure definitions

# required characters, always present in this order
_CODEPOINTS = list(range(32, 127)) + [196, 214, 220, 228, 246, 252, 223]

_SIGNATURE = 'flf2'

# http://www.jave.de/docs/figfont.txt
#
# >          flf2a$ 6 5 20 15 3 0 143 229    NOTE: The first five characters in
# >            |  | | | |  |  | |  |   |     the entire file must be "flf2a".
# >           /  /  | | |  |  | |  |   \
# >  Signature  /  /  | |  |  | |   \   Codetag_Count
# >    Hardblank  /  /  |  |  |  \   Full_Layout*
# >         Height  /   |  |   \  Print_Direction
# >         Baseline   /    \   Comment_Lines
# >          Max_Length      Old_Layout*

class _FLF_HEADER(NamedTuple):
    signature_hardblank: str
    height: int
    baseline: int
    max_length: int
    old_layout: int
    comment_lines: int
    print_direction: int
    full_layout: int
    codetag_count: int


class FontInfo(NamedTuple):
    """Parsed FIGfont."""
    hardblank: str
    height: int
    baseline: int
    max_length: int
    old_layout: int
    comment_lines: int
    print_direction: int
    full_layout: int
    codetag_count: int
    # free text following the header
    comment: str
    # codepoint -> tuple of `height` rows, in file order
    glyphs: dict

    def __str__(self):
        """Header properties, one per line."""
        return '\n'.join(
            f'{_k}: {_v!r}'
            for _k, _v in self._asdict().items()
            if _k not in ('comment', 'glyphs')
        )

    # > If a FIGcharacter with code 0 is present, it is treated
    # > specially.  It is a FIGfont's "missing character".  Whenever
    # > the FIGdriver is told to print a character which doesn't exist
    # > in the current FIGfont, it will print FIGcharacter 0.  If there
    # > is no FIGcharacter 0, nothing will be printed.
    def get_glyph(self, codepoint):
        """Get glyph rows for codepoint, or the missing character glyph, or None."""
        try:
            return self.glyphs[codepoint]
        except KeyError:
            return self.glyphs.get(0, None)


##############################################################################
# interface

def load_flf(file):
    """Load font from a FIGlet .flf file, path or stream; plain or zipped."""
    with open_font_stream(file) as stream:
        logging.debug('Reading font file `%s`.', stream.name)
        font = _read_flf(stream.text)
    logging.info('figlet properties:')
    for line in str(font).splitlines():
        logging.info('    ' + line)
    return font


##############################################################################
# loader

def _read_flf(instream):
    """Read font from a FIGlet .flf text stream."""
    header = _read_header(instream)
    comment = _read_comments(instream, header)
    glyphs = _read_glyphs(instream, header)
    signature_hardblank, *fields = header
    return FontInfo(signature_hardblank[-1], *fields, comment, glyphs)


def _read_header(instream):
    """Read .flf property header."""
    signature_hardblank, *fields = instream.readline().split() or ('',)
    if not signature_hardblank.startswith(_SIGNATURE):
        raise FormatError('Not a FIGlet .flf file: does not start with `flf2` signature.')
    # ignore any fields beyond those defined
    n_fields = len(_FLF_HEADER._fields) - 1
    if len(fields) < n_fields:
        raise FormatError(
            f'Malformed header: expected {n_fields+1} fields, found {len(fields)+1}.'
        )
    fields = fields[:n_fields]
    try:
        fields = (int(_f) for _f in fields)
        header = _FLF_HEADER(signature_hardblank, *fields)
    except ValueError as e:
        raise FormatError(f'Malformed header: non-numeric field: {e}') from e
    if header.height <= 0:
        raise FormatError(f'Malformed header: invalid height {header.height}.')
    return header


def _read_comments(instream, header):
    """Read comments following header."""
    return '\n'.join(
        _line.rstrip() for _line in _read_lines(instream, header.comment_lines)
    )


def _read_glyphs(instream, header):
    """Parse glyphs."""
    hardblank = header.signature_hardblank[-1]
    # glyphs in default repertoire
    glyphs = {
        _cp: _read_glyph(instream, header.height, hardblank)
        for _cp in _CODEPOINTS
    }
    # code-tagged glyphs
    for line in instream:
        # codepoint, unicode name label
        codepoint, *_ = line.split() or ('',)
        if not codepoint:
            continue
        codepoint = _parse_code(codepoint)
        glyph = _read_glyph(instream, header.height, hardblank)
        if codepoint < 0:
            # codepoints below zero are used for things like "KATAMAP"
            logging.debug('Discarding glyph with negative code %d.', codepoint)
        else:
            glyphs[codepoint] = glyph
    logging.debug('Read %d glyphs.', len(glyphs))
    return glyphs


def _parse_code(code):
    """Convert a decimal or hex code tag to int; leading zeros are decimal."""
    digits = code.lstrip('+-')
    if digits[:2].lower() == '0x':
        base = 16
    else:
        base = 10
    try:
        return int(code, base)
    except ValueError as e:
        raise FormatError(f'Malformed code tag `{code}`.') from e


def _read_lines(instream, count):
    """Read exactly `count` lines; raise FormatError at end of file."""
    lines = []
    for _ in range(count):
        line = instream.readline()
        if not line:
            raise FormatError(
                f'Unexpected end of file: expected {count} lines, found {len(lines)}.'
            )
        lines.append(line.rstrip('\r\n'))
    return lines


def _read_glyph(instream, height, hardblank):
    """Read a single figlet glyph."""
    glyph_lines = _read_lines(instream, height)
    # > In most FIGfonts, the endmark character is either "@" or "#".
    # > By convention, the last line of a FIGcharacter has two endmarks, while
    # > all the rest have one.
    # the terminator is the last character; it is removed wherever it occurs
    glyph_lines = (_line.rstrip() for _line in glyph_lines)
    glyph_lines = (
        (_line.replace(_line[-1], '') if _line else '')
        for _line in glyph_lines
    )
    # apply hardblanks
    return tuple(_line.replace(hardblank, ' ') for _line in glyph_lines)
