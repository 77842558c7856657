# tests/core/test_config.py
"""
Tests for the Config class.
"""

import pytest

from kubepulse.core.config import Config


@pytest.fixture
def cfg():
    return Config()


def test_interval_defaults_to_ten_seconds(cfg):
    assert cfg.INTERVAL == 10


@pytest.mark.parametrize("value", ["not-a-number", "", "  ", "1.5", "-3"])
def test_invalid_interval_falls_back_to_default(monkeypatch, cfg, value):
    monkeypatch.setenv("INTERVAL", value)
    assert cfg.INTERVAL == 10


def test_interval_from_env(monkeypatch, cfg):
    monkeypatch.setenv("INTERVAL", "30")
    assert cfg.INTERVAL == 30


def test_job_mode(monkeypatch, cfg):
    assert cfg.JOB_MODE == "daemon"
    monkeypatch.setenv("JOB_MODE", "task")
    assert cfg.JOB_MODE == "task"
    monkeypatch.setenv("JOB_MODE", "something-else")
    assert cfg.JOB_MODE == "daemon"


def test_page_size(monkeypatch, cfg):
    assert cfg.PAGE_SIZE == 100
    monkeypatch.setenv("PAGE_SIZE", "25")
    assert cfg.PAGE_SIZE == 25
    monkeypatch.setenv("PAGE_SIZE", "0")
    assert cfg.PAGE_SIZE == 100


def test_namespace_file(monkeypatch, cfg):
    assert cfg.NAMESPACE_FILE == "/var/run/secrets/kubernetes.io/serviceaccount/namespace"
    monkeypatch.setenv("NAMESPACE_FILE", "/tmp/ns")
    assert cfg.NAMESPACE_FILE == "/tmp/ns"
