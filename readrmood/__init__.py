"""ReadrMood achievements: unlock rules evaluated over reading activity"""

__version__ = "0.1.0"
