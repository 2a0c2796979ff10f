"""Test settings loading, logging setup and exception serialisation."""

import logging

import structlog

from credit_taxonomy.config import Settings
from credit_taxonomy.infrastructure.logging import (
    TAXONOMY_LOGGER,
    TAXONOMY_STANDARD,
    get_logger,
    setup_logging,
    setup_logging_from_settings,
    tag_taxonomy_events,
)
from credit_taxonomy.shared.exceptions import (
    InvalidArgumentError,
    RoleNotFoundError,
    TaxonomyError,
)


# --- Settings ---


def test_settings_defaults(monkeypatch):
    for name in (
        "CREDIT_TAXONOMY_LOG_LEVEL",
        "CREDIT_TAXONOMY_LOG_JSON",
        "CREDIT_TAXONOMY_LIBRARY_LOG_LEVEL",
        "CREDIT_TAXONOMY_STRICT_CATALOG",
    ):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.log_level == "info"
    assert s.log_json is False
    assert s.strict_catalog is False
    assert s.library_log_level is None


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CREDIT_TAXONOMY_LOG_LEVEL", "debug")
    monkeypatch.setenv("CREDIT_TAXONOMY_LOG_JSON", "true")
    monkeypatch.setenv("CREDIT_TAXONOMY_STRICT_CATALOG", "1")
    s = Settings(_env_file=None)
    assert s.log_level == "debug"
    assert s.log_json is True
    assert s.strict_catalog is True


# --- Logging ---


def test_setup_logging_configures_root_logger():
    root = logging.getLogger()
    library = logging.getLogger(TAXONOMY_LOGGER)
    saved_handlers, saved_level, saved_library = root.handlers[:], root.level, library.level
    try:
        setup_logging(level="debug", json_output=True, library_level="warning")
        assert root.level == logging.DEBUG
        assert library.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        library.setLevel(saved_library)
        structlog.reset_defaults()


def test_library_level_defaults_to_root_level():
    root = logging.getLogger()
    library = logging.getLogger(TAXONOMY_LOGGER)
    saved_handlers, saved_level, saved_library = root.handlers[:], root.level, library.level
    try:
        setup_logging(level="error")
        assert library.level == logging.ERROR
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        library.setLevel(saved_library)
        structlog.reset_defaults()


def test_taxonomy_events_are_tagged():
    tagged = tag_taxonomy_events(None, "debug", {"logger": "credit_taxonomy.registry", "event": "x"})
    assert tagged["taxonomy_standard"] == TAXONOMY_STANDARD
    other = tag_taxonomy_events(None, "info", {"logger": "credit_taxonomy_extras", "event": "x"})
    assert "taxonomy_standard" not in other
    assert "taxonomy_standard" not in tag_taxonomy_events(None, "info", {"event": "x"})


def test_get_logger_returns_bindable_logger():
    logger = get_logger("credit_taxonomy.test")
    assert hasattr(logger, "bind")


# --- Exceptions ---


def test_exception_to_dict():
    err = RoleNotFoundError("Unknown credit role 'x'", context={"role_id": "x"})
    assert err.to_dict() == {
        "error_code": "CREDIT_ROLE_NOT_FOUND",
        "message": "Unknown credit role 'x'",
        "context": {"role_id": "x"},
    }
    assert isinstance(err, LookupError)
    assert isinstance(err, TaxonomyError)


def test_exception_error_code_override_and_repr():
    err = InvalidArgumentError("bad", error_code="CUSTOM")
    assert err.error_code == "CUSTOM"
    assert repr(err) == "InvalidArgumentError(error_code='CUSTOM', message='bad')"


def test_setup_logging_from_settings(monkeypatch):
    captured = {}
    monkeypatch.setattr(
        "credit_taxonomy.infrastructure.logging.setup_logging",
        lambda **kwargs: captured.update(kwargs),
    )
    setup_logging_from_settings()
    assert set(captured) == {"level", "json_output", "library_level"}
