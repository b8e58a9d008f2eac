"""
Core types for run-length tokenization.
"""

from typing import TypeAlias

# one run of a single repeated character, e.g. "aaa"
DToken: TypeAlias = str
# encoded form of one run, e.g. "3a", "#10a", "31#", "3##"
EToken: TypeAlias = str
