"""
Client modules for the rendering host
"""

from .protocol import Host
from .http import HttpHost
from .scripted import ScriptedHost

__all__ = ["Host", "HttpHost", "ScriptedHost"]
