"""Tests for the domain error hierarchy."""

import pytest

from memento.domain.errors import (
    DomainError,
    EmptyCorpusError,
    NotificationCenterError,
    QuoteCorpusLoadError,
)


class TestErrorHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            EmptyCorpusError("quotes.yaml"),
            QuoteCorpusLoadError("/tmp/q.yaml", "file not found"),
            NotificationCenterError("add"),
        ],
    )
    def test_all_are_domain_errors(self, error):
        assert isinstance(error, DomainError)
        assert isinstance(error, Exception)

    def test_empty_corpus_message(self):
        error = EmptyCorpusError("quotes.yaml")
        assert error.source == "quotes.yaml"
        assert "quotes.yaml" in str(error)

    def test_load_error_fields(self):
        error = QuoteCorpusLoadError("/tmp/q.yaml", "file not found")
        assert error.path == "/tmp/q.yaml"
        assert error.reason == "file not found"
        assert str(error) == "Failed to load quotes from /tmp/q.yaml: file not found"

    def test_notification_error_without_detail(self):
        assert str(NotificationCenterError("add")) == "Notification center failed during add"

    def test_notification_error_with_detail(self):
        error = NotificationCenterError("remove_pending", "daemon unavailable")
        assert error.detail == "daemon unavailable"
        assert str(error).endswith(": daemon unavailable")
