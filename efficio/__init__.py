"""Efficio task manager: priority suggestion core.

Authentication, storage and rendering live in the hosted backend and the web
client; this package holds the domain logic they share.
"""

__version__ = "0.1.0"
