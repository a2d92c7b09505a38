"""
Contact Form 7 REST client for the site.
"""

from typing import Any, Dict
import httpx

from shared.logging import get_logger
from shared.errors import ExternalServiceError


class ContactFormClient:
    """Client for the Contact Form 7 feedback endpoint."""

    def __init__(self, wordpress_url: str, *, timeout: float = 10.0):
        self.base_url = wordpress_url.rstrip('/')
        self.timeout = timeout
        self.logger = get_logger("site.contact_form_client")

    def feedback_url(self, form_id: str) -> str:
        """Build the feedback endpoint for a form."""
        return f"{self.base_url}/wp-json/contact-form-7/v1/contact-forms/{form_id}/feedback"

    async def submit(self, form_id: str, fields: Dict[str, str]) -> Dict[str, Any]:
        """
        Post fields as multipart/form-data and return the decoded reply.

        Raises ExternalServiceError when the plugin is unreachable or its
        reply is not a JSON object.
        """
        url = self.feedback_url(form_id)
        # (None, value) parts force multipart encoding without filenames
        parts = {name: (None, value.encode("utf-8")) for name, value in fields.items()}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(url, files=parts)
            result = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            self.logger.error("Contact form submission error", url=url, error=str(exc))
            raise ExternalServiceError(
                service="contact_form",
                message="Failed to send message. Please try again.",
                details={"error": str(exc)}
            ) from exc

        if not isinstance(result, dict):
            self.logger.error("Unexpected contact form reply", url=url, reply=result)
            raise ExternalServiceError(
                service="contact_form",
                message="Failed to send message. Please try again.",
                details={"reply": result}
            )

        self.logger.debug("Contact form replied", url=url, status=result.get("status"))
        return result
