"""
sflfont test suite
"""

import unittest

from tests.test_sfl import *
from tests.test_streams import *
from tests.test_metrics import *


if __name__ == '__main__':
    unittest.main()
