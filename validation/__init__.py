"""
Input validation module
Field parsers and interactive prompt loops
"""

from .prompts import Prompter

__all__ = ['Prompter']
