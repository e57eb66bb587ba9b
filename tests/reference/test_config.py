"""Tests for src/reference/config.py."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from src.reference.config import Settings, load_settings, parse_log_level


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("REFGEN_LOG_LEVEL", "REFGEN_OUTPUT", "REFGEN_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    assert load_settings() == Settings()


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("REFGEN_LOG_LEVEL", "debug")
    monkeypatch.setenv("REFGEN_OUTPUT", "out/ref.json")
    monkeypatch.setenv("REFGEN_JSON_INDENT", "4")
    s = load_settings()
    assert s.log_level == logging.DEBUG
    assert s.output_path == Path("out/ref.json")
    assert s.json_indent == 4


def test_indent_clamped(monkeypatch):
    monkeypatch.setenv("REFGEN_JSON_INDENT", "99")
    assert load_settings().json_indent == 8


def test_indent_garbage_falls_back(monkeypatch):
    monkeypatch.setenv("REFGEN_JSON_INDENT", "wide")
    assert load_settings().json_indent == 2


def test_blank_output_means_stdout(monkeypatch):
    monkeypatch.setenv("REFGEN_OUTPUT", "   ")
    assert load_settings().output_path is None


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("REFGEN_LOG_LEVEL", "chatty")
    assert load_settings().log_level == logging.WARNING


@pytest.mark.parametrize("name, level", [("info", logging.INFO), (" Error ", logging.ERROR), ("chatty", None), ("", None)])
def test_parse_log_level(name, level):
    assert parse_log_level(name) == level
