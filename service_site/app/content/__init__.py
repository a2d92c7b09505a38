"""
Content package for the Site Service.

- models: flattened CMS entities
- queries: WPGraphQL documents
- placeholders: bundled fallback content
- service: page payload assembly with fetch-with-fallback
"""

from .service import ContentService

__all__ = ["ContentService"]
