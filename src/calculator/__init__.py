"""Command-line calculator.

Four arithmetic operations over floating-point operands, with the most
recent result retained on the calculator instance.
"""

__version__ = "0.1.0"
