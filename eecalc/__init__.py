"""
eecalc - heat pump installation cost estimates.

Sizes a heat pump package for a building submission from its heat loss and
the degree-days of its design region, and prices the installation.
"""

__version__ = "1.0.0"
