"""
flappy_grid: a side-scrolling flap-through-the-gap game on an 80x50 character grid.
"""

__version__ = "0.1.0"
