"""
figtext.renderer - render text to FIGlet banners

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging

from uniseg.graphemecluster import grapheme_clusters


###############################################################################
# text rendering

def render(text, font, stages=()):
    """
    Render a single line of text, yielding one output row per glyph row.

    text: string to render; combining sequences are rendered by their base character
    font: FontInfo
    stages: sequence of transformation stages (dicts), applied in order
    """
    glyphs = tuple(_get_text_glyphs(text, font, stages))
    # most glyphs have a one-column left margin, drop it if the first glyph has it
    trim = bool(glyphs) and _starts_with_space(glyphs[0])
    for row in range(font.height):
        line = ''.join(_glyph[row] for _glyph in glyphs if _glyph is not None)
        if trim:
            line = line[1:]
        yield line


def render_text(text, font, stages=()):
    """Render multiline text to a string, one banner per line."""
    return '\n'.join(
        _row
        for _line in text.splitlines()
        for _row in render(_line, font, stages)
    )


def transform(codepoint, stages):
    """Pass codepoint through transformation stages in order."""
    for stage in stages:
        codepoint = stage.get(codepoint, codepoint)
    return codepoint


def _get_text_glyphs(text, font, stages):
    """Get glyph for each grapheme cluster; None where nothing is to be printed."""
    for cluster in grapheme_clusters(text):
        codepoint = transform(ord(cluster[0]), stages)
        glyph = font.get_glyph(codepoint)
        if glyph is None:
            logging.debug(
                'No glyph for codepoint %d and no missing character glyph.', codepoint
            )
        yield glyph


def _starts_with_space(glyph):
    """All rows of the glyph start with a space."""
    if not glyph:
        return False
    return all(_row.startswith(' ') for _row in glyph)
