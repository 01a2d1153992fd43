"""
Print a banner using a FIGlet font
(c) 2019--2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse
import logging

import figtext
from figtext.scripting import wrap_main, unescape
from figtext.storage import DEFAULT_FONT


def main():
    # parse command line
    parser = argparse.ArgumentParser(prog='figtext')
    parser.add_argument(
        'text', nargs='*', type=str,
        help=(
            'text to be printed. '
            'multiple text arguments are joined by spaces. '
            'if not given, read from standard input'
        )
    )
    parser.add_argument(
        '--font', '-f', type=str, default=DEFAULT_FONT,
        help=f'font name or file to use when printing text (default: {DEFAULT_FONT})'
    )
    parser.add_argument(
        '--control', '-C', type=str, action='append', default=[],
        help=(
            'control file name or path to apply to the text. '
            'may be repeated; control files apply in the order given'
        )
    )
    parser.add_argument(
        '--dir', '-d', type=str, action='append', default=[],
        help=(
            'directory to search for fonts and control files. '
            f'may be repeated; searched before ${figtext.storage.FONTDIR_VARIABLE}'
        )
    )
    parser.add_argument(
        '--list-fonts', action='store_true',
        help='list available fonts and exit'
    )
    parser.add_argument(
        '--list-controls', action='store_true',
        help='list available control files and exit'
    )
    parser.add_argument(
        '--info', action='store_true',
        help='show font properties and exit'
    )
    parser.add_argument(
        '--debug', action='store_true',
        help='show debugging output'
    )
    args = parser.parse_args()

    with wrap_main(args.debug):
        if args.list_fonts:
            for name in figtext.list_fonts(args.dir):
                print(name)
            return
        if args.list_controls:
            for name in figtext.list_controls(args.dir):
                print(name)
            return
        font = figtext.load_font(args.font, args.dir)
        if args.info:
            print(font)
            return
        stages = figtext.load_control_chain(args.control, args.dir)
        # read text from stdin if not supplied
        if not args.text:
            text = sys.stdin.read()
        else:
            text = ' '.join(args.text)
        text = unescape(text)
        logging.debug('Rendering %r with %d transformation stages.', text, len(stages))
        for line in text.splitlines():
            for row in figtext.render(line, font, stages):
                sys.stdout.write(row + '\n')


if __name__ == '__main__':
    main()
