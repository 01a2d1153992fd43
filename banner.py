#!/usr/bin/env python3
"""
Print a banner using a FIGlet font
(c) 2019--2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

from figtext.scripts.banner import main


if __name__ == '__main__':
    main()
