"""
cube-tui - terminal speedcube timer with scrambles, statistics and solve history
"""

__version__ = "0.3.0"
