"""
duolayout.ui - Dialog surface contract and predefined session messages.
"""

from duolayout.ui.messages import DialogSurface, LogDialogSurface, SessionError

__all__ = ["DialogSurface", "LogDialogSurface", "SessionError"]
