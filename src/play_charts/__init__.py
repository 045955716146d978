"""
Play Charts - play history storage and year/month chart reports for DJ sessions
"""

__version__ = "0.1.0"
