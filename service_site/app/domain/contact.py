"""
Contact form relay for the Site Service.

The site posts {name, email, message} as JSON. Contact Form 7 expects
multipart form data whose field names match the form template, plus a unit
tag identifying the form instance, so the relay reshapes the payload before
forwarding it.
"""

from typing import Any, Dict, Optional, TYPE_CHECKING

from shared.errors import ConfigurationError, ExternalServiceError, ValidationError
from shared.logging import get_logger

from ..adapters.contact_form_client import ContactFormClient

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


FIELD_NAMES = {
    "name": "your-name",
    "email": "your-email",
    "subject": "your-subject",
    "message": "your-message",
}
UNIT_TAG_FIELD = "_wpcf7_unit_tag"
DEFAULT_SUBJECT = "Website Contact Form"

MAIL_SENT = "mail_sent"
# Plugin statuses caused by the service rather than the submitted content
SERVER_FAILURE_STATUSES = {"mail_failed", "aborted"}

SUCCESS_MESSAGE = "Message sent successfully"
FAILURE_MESSAGE = "Failed to send message"


def unit_tag(form_id: str) -> str:
    return f"wpcf7-f{form_id}-o1"


def build_form_fields(form_id: str, name: str, email: str, message: Optional[str]) -> Dict[str, str]:
    """Map the logical contact payload onto Contact Form 7 field names."""
    return {
        UNIT_TAG_FIELD: unit_tag(form_id),
        FIELD_NAMES["name"]: name,
        FIELD_NAMES["email"]: email,
        FIELD_NAMES["subject"]: DEFAULT_SUBJECT,
        FIELD_NAMES["message"]: message or "",
    }


class ContactRelay:
    """Validates contact submissions and forwards them to Contact Form 7."""

    def __init__(
        self,
        client: ContactFormClient,
        form_id: str,
        *,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self.client = client
        self.form_id = form_id
        self.metrics = metrics
        self.logger = get_logger("site.contact")

    @staticmethod
    def validate(body: Any) -> Dict[str, str]:
        """Return the cleaned payload or raise ValidationError."""
        if not isinstance(body, dict):
            raise ValidationError("Invalid request body")

        name = body.get("name")
        email = body.get("email")
        if not isinstance(name, str) or not name.strip() or not isinstance(email, str) or not email.strip():
            raise ValidationError("Name and email are required")

        message = body.get("message")
        if message is not None and not isinstance(message, str):
            message = str(message)

        return {"name": name, "email": email, "message": message or ""}

    async def submit(self, body: Any) -> Dict[str, str]:
        """Relay a decoded JSON body and return the caller-facing success payload."""
        try:
            payload = self.validate(body)
        except ValidationError:
            self._record("invalid")
            raise

        if not self.form_id:
            self.logger.error("CF7_FORM_ID environment variable is not set")
            self._record("unconfigured")
            raise ConfigurationError("Contact form is not configured")

        fields = build_form_fields(self.form_id, payload["name"], payload["email"], payload["message"])

        try:
            result = await self.client.submit(self.form_id, fields)
        except ExternalServiceError:
            self._record("error")
            raise

        status = result.get("status")
        if status == MAIL_SENT:
            self._record("sent")
            return {"message": SUCCESS_MESSAGE}

        self.logger.error("Contact form rejected submission", status=status, reply=result)
        self._record("rejected")
        raise ExternalServiceError(
            service="contact_form",
            message=result.get("message") or FAILURE_MESSAGE,
            details={"status": status},
            status_code=500 if status in SERVER_FAILURE_STATUSES else 400,
        )

    def _record(self, outcome: str) -> None:
        if self.metrics:
            self.metrics.increment_counter("contact_submissions_total", outcome=outcome)
