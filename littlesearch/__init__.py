"""Little Search Engine - keyword frequency index with top-5 two-keyword search"""

__version__ = "0.1.0"
