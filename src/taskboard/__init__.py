"""
taskboard: async REST client and task board for a Users / Projects / Tasks backend.
"""

__version__ = "0.1.0"
