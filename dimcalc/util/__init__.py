"""
===============================
Utilities (:mod:`dimcalc.util`)
===============================

.. currentmodule:: dimcalc.util

Small helpers used in various contexts.

Type Operations
---------------

.. autosummary::
    :toctree:

    coax_type
"""

from .type_ops import coax_type
