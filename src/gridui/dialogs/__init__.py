"""
Dialogs: root panels shown by a host.
"""

from .dialog import Dialog
from .progress import ProgressDialog
from .message import MessageDialog, ExceptionDialog

__all__ = [
    "Dialog",
    "ProgressDialog",
    "MessageDialog",
    "ExceptionDialog",
]
