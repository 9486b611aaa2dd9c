"""
Core domain models, checked arithmetic, and error types.

This module contains the building blocks shared by the parser and the
formatter: the number system value object, the digit alphabet, and the
fixed-width integer safeguards.
"""
