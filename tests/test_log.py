"""
Tests for logging setup: the library leaves structlog configuration to its host.
"""

from __future__ import annotations

import importlib
import logging

import structlog

import soltxview.log


def test_import_does_not_configure_structlog():
    structlog.reset_defaults()
    importlib.reload(soltxview.log)
    importlib.import_module("soltxview")
    assert not structlog.is_configured()


def test_configure_structlog_is_explicit(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "console")
    try:
        soltxview.log.configure_structlog(level=logging.DEBUG)
        assert structlog.is_configured()
        soltxview.log.get_logger("soltxview.test").debug("configured", ok=True)
    finally:
        structlog.reset_defaults()
