"""
Detects and removes partially downloaded page images.

The checker runs once per installation; see ``checker.PartialPageChecker``.
"""

__version__ = "0.1.0"
