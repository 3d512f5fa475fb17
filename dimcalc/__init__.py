"""
.. This module acts as the top-level API documentation.

.. module: dimcalc

Dimensioned quantities for calculators: dimensional algebra, a fixed
unit catalog, unit conversion, free-text quantity parsing and an RPN
stack machine.

.. autosummary::
    :toctree: generated/

    units
    rpn
    util
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 12)
