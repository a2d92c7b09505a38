"""
Unit tests for the shared logging, metrics and error helpers.
"""

import logging

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from service_site.app.main import SiteService, create_app
from shared.config import get_config
from shared.errors import ContentQueryError, ExternalServiceError, NotFoundError
from shared.logging import REDACTED, clear_context, get_request_id, redact_sensitive, set_request_id
from shared.metrics import MetricsCollector


class TestLogging:
    """Test cases for the logging helpers."""

    def test_secrets_and_contact_details_redacted(self):
        event = redact_sensitive(None, "info", {
            "event": "Webhook",
            "secret": "s3cret",
            "email": "jo@x.com",
            "your-message": "hello",
            "tag": "stories",
        })

        assert event["secret"] == REDACTED
        assert event["email"] == REDACTED
        assert event["your-message"] == REDACTED
        assert event["tag"] == "stories"

    def test_error_message_kept(self):
        event = redact_sensitive(None, "warning", {"event": "Request failed", "message": "Invalid secret"})
        assert event["message"] == "Invalid secret"

    def test_request_id_bound_and_cleared(self):
        assert set_request_id("req-1") == "req-1"
        assert get_request_id() == "req-1"

        clear_context()
        assert get_request_id() is None

    def test_request_id_generated_when_blank(self):
        request_id = set_request_id("")
        assert request_id
        clear_context()


class TestMetrics:
    """Test cases for MetricsCollector."""

    def test_collectors_do_not_share_registries(self):
        first = MetricsCollector("site")
        second = MetricsCollector("site")

        first.increment_counter("revalidations_total", tag="stories")

        assert first.registry.get_sample_value("revalidations_total", {"tag": "stories"}) == 1.0
        assert second.registry.get_sample_value("revalidations_total", {"tag": "stories"}) is None

    def test_unknown_counter_ignored(self):
        MetricsCollector("site").increment_counter("no_such_metric", tag="x")

    def test_time_operation_observes(self):
        collector = MetricsCollector("site")
        with collector.time_operation("content_query_duration_seconds"):
            pass
        assert collector.registry.get_sample_value("content_query_duration_seconds_count") == 1.0

    def test_http_metrics_use_route_template(self):
        client = TestClient(create_app(get_config("site", 8000)))
        client.get("/pages/stories/some-story")

        registry = client.app.state.site_service.metrics.registry
        value = registry.get_sample_value(
            "http_requests_total",
            {"method": "GET", "route": "/pages/stories/{slug}", "status_code": "404"},
        )
        assert value == 1.0


class TestErrors:
    """Test cases for the error hierarchy."""

    def test_error_body_is_message_only(self):
        error = NotFoundError("Story not found", details={"slug": "x"})
        assert error.to_response().model_dump() == {"message": "Story not found"}

    def test_external_status_override(self):
        error = ExternalServiceError(service="contact_form", message="Bad input", status_code=400)
        assert error.status_code == 400
        assert str(error) == "contact_form: Bad input"

    def test_content_query_error_defaults(self):
        error = ContentQueryError("GraphQL request failed: 502")
        assert error.status_code == 500
        assert error.service == "content_api"

    @pytest.mark.parametrize("status_code", [400, 500])
    def test_status_override_does_not_leak_to_class(self, status_code):
        ExternalServiceError(service="x", status_code=status_code)
        assert ExternalServiceError.status_code == 500


class TestServiceLogging:
    """Test cases for what the service writes to its logs."""

    def test_error_log_carries_message(self, caplog):
        caplog.set_level(logging.INFO)
        client = TestClient(create_app(get_config("site", 8000, revalidation_secret="right-secret")))

        response = client.post("/api/revalidate?secret=WRONG&tag=stories")

        site_logs = "\n".join(record.getMessage() for record in caplog.records if record.name == "site")
        assert response.status_code == 401
        assert "Invalid secret" in site_logs
        assert "WRONG" not in site_logs

    def test_run_disables_uvicorn_access_log(self):
        service = SiteService(get_config("site", 8000))

        with patch("uvicorn.run") as mock_run:
            service.run()

        assert mock_run.call_args.kwargs["access_log"] is False
        assert mock_run.call_args.args[0] is service.app
