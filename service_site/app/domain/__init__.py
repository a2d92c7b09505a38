"""
Domain helpers for the Site Service: webhook revalidation and the contact relay.
"""

from .contact import ContactRelay
from .revalidation import RevalidationService

__all__ = ["ContactRelay", "RevalidationService"]
