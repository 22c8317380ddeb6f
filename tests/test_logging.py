"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging

import pytest

from bounded_rand import BoundedSampler, SequenceSource, configure_logging, get_logger

pytestmark = pytest.mark.usefixtures('reset_state')


def json_lines(text: str) -> list[dict]:
    return [json.loads(line) for line in text.splitlines() if line.startswith('{')]


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('INFO', json_output=True)
        get_logger('bounded_rand.test').info('hello', answer=42)

        entries = json_lines(capsys.readouterr().err)
        assert len(entries) == 1
        assert entries[0]['event'] == 'hello'
        assert entries[0]['answer'] == 42
        assert entries[0]['level'] == 'info'
        assert entries[0]['logger'] == 'bounded_rand.test'
        assert 'timestamp' in entries[0]

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('WARNING')
        logger = get_logger('bounded_rand.test')
        logger.info('quiet')
        logger.warning('loud')

        events = [e['event'] for e in json_lines(capsys.readouterr().err)]
        assert events == ['loud']

    def test_stdlib_records_share_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('INFO')
        logging.getLogger('third.party').warning('plain %s', 'record')

        entries = json_lines(capsys.readouterr().err)
        assert entries[0]['event'] == 'plain record'
        assert entries[0]['logger'] == 'third.party'

    def test_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('INFO', json_output=False)
        get_logger('bounded_rand.test').info('console line')
        assert 'console line' in capsys.readouterr().err

    def test_unknown_level_defaults_to_info(self) -> None:
        configure_logging('chatty')
        assert logging.getLogger().level == logging.INFO

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging('INFO')
        configure_logging('DEBUG')
        assert len(logging.getLogger().handlers) == 1


class TestSamplerLogging:
    """Tests for what the sampler emits."""

    def test_rejections_at_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('DEBUG')
        BoundedSampler(SequenceSource([0, 0, 1])).sample(10)

        rejected = [e for e in json_lines(capsys.readouterr().err) if e['event'] == 'sample_rejected']
        assert len(rejected) == 2
        assert rejected[0]['logger'] == 'bounded_rand.sampler'

    def test_fast_path_silent(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('DEBUG')
        BoundedSampler(SequenceSource([1])).sample(10)
        assert json_lines(capsys.readouterr().err) == []

    def test_silent_below_level(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging('INFO')
        BoundedSampler(SequenceSource([0, 1])).sample(10)
        assert json_lines(capsys.readouterr().err) == []
