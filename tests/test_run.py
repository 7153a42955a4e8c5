"""Tests for the entry point wiring."""
import sys

import pytest
from loguru import logger

from vedic_clock.web import run


def test_configure_logging_adds_file_sink(tmp_path):
    log_file = tmp_path / 'clock.log'
    try:
        run.configure_logging({'logging': {'level': 'INFO', 'file': str(log_file), 'rotation': '1 MB'}})
        logger.info('clock api starting')
        logger.remove()
        assert 'clock api starting' in log_file.read_text()
    finally:
        logger.remove()
        logger.add(sys.stderr)


@pytest.mark.parametrize('level,expected', [
    ('INFO', 'info'),
    ('DEBUG', 'debug'),
    ('TRACE', 'trace'),
    ('WARNING', 'warning'),
    ('SUCCESS', 'info'),
    ('bogus', 'info'),
])
def test_uvicorn_log_level(level, expected):
    assert run.uvicorn_log_level(level) == expected


def test_main_maps_loguru_only_level_for_uvicorn(monkeypatch, tmp_path):
    calls = {}
    monkeypatch.setattr(run.uvicorn, 'run', lambda app, **kwargs: calls.update(kwargs))
    monkeypatch.setenv('VEDIC_CLOCK_CONFIG', str(tmp_path / 'missing.yaml'))
    monkeypatch.setenv('LOG_LEVEL', 'SUCCESS')
    monkeypatch.delenv('LOG_FILE', raising=False)
    try:
        run.main()
    finally:
        logger.remove()
        logger.add(sys.stderr)

    assert calls['log_level'] == 'info'


def test_main_runs_uvicorn_with_configured_port(monkeypatch, tmp_path):
    calls = {}

    def fake_run(app, host, port, log_level):
        calls.update(app=app, host=host, port=port, log_level=log_level)

    monkeypatch.setattr(run.uvicorn, 'run', fake_run)
    monkeypatch.setenv('VEDIC_CLOCK_CONFIG', str(tmp_path / 'missing.yaml'))
    monkeypatch.setenv('PORT', '4321')
    monkeypatch.delenv('LOG_FILE', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    monkeypatch.delenv('HOST', raising=False)
    try:
        run.main()
    finally:
        logger.remove()
        logger.add(sys.stderr)

    assert calls['host'] == '0.0.0.0'
    assert calls['port'] == 4321
    assert calls['log_level'] == 'info'
    assert calls['app'].state.clock_service is not None
