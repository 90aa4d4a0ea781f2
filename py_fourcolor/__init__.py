"""
py_fourcolor - procedurally generated four-color map puzzles.
"""

__version__ = "0.1.0"
