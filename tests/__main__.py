"""
figtext test suite
"""

import unittest

from tests.test_font import *
from tests.test_controls import *
from tests.test_render import *
from tests.test_storage import *
from tests.test_scripts import *


if __name__ == '__main__':
    unittest.main()
