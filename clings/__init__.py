"""Runner for graded C exercises, with hint lookup and worked solutions as Python functions."""

__version__ = "0.1.0"