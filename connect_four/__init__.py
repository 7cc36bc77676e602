"""
connect_four - Two-player Connect Four for the text console

This package provides the board, four-in-a-row detection, the turn loop and
a console interface with a replay prompt.
"""

# Version number
__version__ = '1.0.0'
