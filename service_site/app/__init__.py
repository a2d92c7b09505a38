"""
Site Service package for the club website.

The service backs every page of the site with CMS content and hosts the two
server-side integration points:
- Content: WPGraphQL queries with a time-bounded cache and placeholder fallback
- Revalidation: authenticated webhook that invalidates cached pages by content type
- Contact: proxy that relays contact-form submissions to Contact Form 7

Structure:
- app.main: FastAPI app, routes, and wiring.
- app.adapters: HTTP clients for the CMS and the form plugin.
- app.caching: Query and page caches.
- app.content: Entity models, GraphQL documents, placeholders, page assembly.
- app.domain: Revalidation and contact relay rules.
"""
