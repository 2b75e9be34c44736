"""Functions used to indicate and check for supported Python versions"""

import os
import sys
import warnings

DOCRUN = os.environ.get('READTHEDOCS') == 'True' or 'sphinx' in sys.modules

# We support 3.6 and above
PY3_MIN_VERSION = (3, 6)

# Check for valid versions
VERSION = sys.version_info
PY3_CHECK = VERSION.major == PY3_MIN_VERSION[0] and VERSION.minor >= PY3_MIN_VERSION[1]

# Warnings texts
WARNING3 = ('\n'
    '========================================================================\n'
    '# The module: \'{filepath}\'\n'
    '# only supports Python {0}.{1} or above in the Python {0} series.\n'
    '# Your milages may vary!!!\n'
    '========================================================================\n'
)


def python3_only(filepath):
    """Print out a warning if the Python version is not in the supported range of Python 3
    versions (>=3.6)
    """
    if PY3_CHECK:
        return
    if not DOCRUN:
        warnings.warn(WARNING3.format(*PY3_MIN_VERSION, filepath=filepath))


# Mark this file as being Python 3 compatible
python3_only(__file__)
