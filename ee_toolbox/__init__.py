"""
EE Toolbox - interactive electrical-engineering calculators.
"""

__version__ = "1.0.0"
