import json

import pytest

from issueparser.logging import StructuredLogger, configure_logging, get_logger


def _entries(err: str) -> list[dict]:
    return [json.loads(line) for line in err.strip().split('\n') if line]


def test_structured_logger_json_format(capsys):
    """JSON mode emits one object per record with extras inlined."""
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')
    logger.log_operation('test_operation', param1='value1', param2=42)

    captured = capsys.readouterr()
    assert captured.out == ''
    (log_data,) = _entries(captured.err)
    assert log_data['level'] == 'INFO'
    assert log_data['operation'] == 'test_operation'
    assert log_data['param1'] == 'value1'
    assert log_data['param2'] == 42
    assert 'timestamp' in log_data


def test_structured_logger_regular_format(capsys):
    logger = StructuredLogger(name='test', json_logging=False, level='INFO')
    logger.log_operation('test_operation', param1='value1')

    captured = capsys.readouterr()
    assert 'Operation: test_operation' in captured.err
    assert 'INFO' in captured.err


def test_json_messages_are_redacted(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')
    logger.info('read from carol@example.com')
    logger.log_error('failed', error='token ghp_ABCDEFGHIJKLMNOPQRSTUVWX rejected')

    first, second = _entries(capsys.readouterr().err)
    assert 'carol@example.com' not in first['message']
    assert 'ghp_' not in second['error']


def test_level_filters_debug(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')
    logger.debug('hidden')
    logger.warning('shown')
    (entry,) = _entries(capsys.readouterr().err)
    assert entry['message'] == 'shown'


def test_timed_operation_merges_results(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')

    with logger.timed_operation('extract', source='stdin') as result:
        result['issue_count'] = 3

    start_log, perf_log = _entries(capsys.readouterr().err)
    assert start_log['operation'] == 'extract_start'
    assert start_log['source'] == 'stdin'
    assert perf_log['operation'] == 'extract'
    assert perf_log['issue_count'] == 3
    assert 'duration_ms' in perf_log


def test_timed_operation_logs_failure(capsys):
    logger = StructuredLogger(name='test', json_logging=True, level='INFO')

    with pytest.raises(RuntimeError):
        with logger.timed_operation('extract'):
            raise RuntimeError('boom')

    entries = _entries(capsys.readouterr().err)
    assert entries[-1]['level'] == 'ERROR'
    assert entries[-1]['error'] == 'boom'


def test_configure_logging_replaces_global():
    configured = configure_logging(json_logging=True, level='DEBUG')
    assert get_logger() is configured
    assert configured.logger.level == 10
