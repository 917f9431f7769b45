import io
import logging

from core.cloud.reporter import (
    compose_message,
    get_default_reporter,
    GREEN_LIGHT,
    LoggingReporter,
    RED_LIGHT,
    StdoutReporter
)


def test_compose_message():
    assert compose_message('Opened %s on %s', '100/TCP', 'GCP') == \
        'Opened 100/TCP on GCP'
    assert compose_message('100% done') == '100% done'


def test_stdout_reporter():
    stream = io.StringIO()
    reporter = StdoutReporter(stream)
    reporter.started('Opening ports %s', '100/TCP')
    reporter.succeeded('Opened ports %s', '100/TCP')
    reporter.warning('Rule %s is stale', 'test')
    reporter.failed(Exception('fake error'), ValueError())

    lines = stream.getvalue().splitlines()
    assert len(lines) == 5
    assert lines[0].endswith('Opening ports 100/TCP')
    assert lines[1] == f'{GREEN_LIGHT} Opened ports 100/TCP'
    assert lines[2].endswith('Rule test is stale')
    assert lines[3] == f'{RED_LIGHT} fake error'
    assert lines[4] == f'{RED_LIGHT} ValueError'


def test_default_reporter_writes_to_stdout(capsys):
    reporter = get_default_reporter()
    reporter.succeeded('Deleted firewall rule %s', 'test')
    assert 'Deleted firewall rule test' in capsys.readouterr().out


def test_logging_reporter(caplog):
    caplog.set_level(logging.INFO)
    reporter = LoggingReporter()
    reporter.started('Deleting firewall rule %s', 'test')
    reporter.failed(Exception('fake delete error'))
    reporter.warning('Rule %s is stale', 'test')

    assert 'Deleting firewall rule test' in caplog.text
    assert 'fake delete error' in caplog.text
    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.INFO, logging.ERROR, logging.WARNING]
