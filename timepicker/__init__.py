"""
timepicker - Time-of-day parsing, formatting and availability checks.
"""

__version__ = "1.0.0"
