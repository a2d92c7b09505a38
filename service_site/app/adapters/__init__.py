"""
Adapters package for the Site Service.

Contains HTTP client wrappers for the external WordPress dependencies
(WPGraphQL and Contact Form 7). These adapters encapsulate:

- Base URLs and request shapes
- Error handling that maps to shared errors

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .cms_client import CMSClient
from .contact_form_client import ContactFormClient

__all__ = [
    "CMSClient",
    "ContactFormClient",
]
