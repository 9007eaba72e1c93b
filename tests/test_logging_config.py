"""Tests for logging setup and home directory masking."""

import logging
from pathlib import Path

from common.logging_config import HomeDirectoryFilter, get_logger, setup_logging


def make_record(msg, args=()):
    return logging.LogRecord('test', logging.INFO, __file__, 1, msg, args, None)


def test_filter_masks_home_in_message():
    record = make_record('Splitting /home/alice/data.img')

    assert HomeDirectoryFilter(home='/home/alice').filter(record) is True
    assert record.msg == 'Splitting ~/data.img'


def test_filter_masks_tuple_and_path_args():
    record = make_record('%s -> %s', ('/home/alice/a.bin', Path('/home/alice/out')))

    HomeDirectoryFilter(home='/home/alice').filter(record)

    assert record.args == ('~/a.bin', '~/out')
    assert record.getMessage() == '~/a.bin -> ~/out'


def test_filter_only_masks_whole_home_component():
    record = make_record('%s %s %s', ('/rootfs/x', '/srv/root/y', '/root'))

    HomeDirectoryFilter(home='/root').filter(record)

    assert record.args == ('/rootfs/x', '/srv/root/y', '~')


def test_filter_masks_home_inside_message_text():
    record = make_record('Splitting /root/a.bin [output_dir=/root/out, prefix=chunk_] from /rootfs')

    HomeDirectoryFilter(home='/root').filter(record)

    assert record.msg == 'Splitting ~/a.bin [output_dir=~/out, prefix=chunk_] from /rootfs'


def test_filter_leaves_other_values_alone():
    record = make_record('%d chunks in %s', (3, '/srv/data'))

    HomeDirectoryFilter(home='/home/alice').filter(record)

    assert record.args == (3, '/srv/data')


def test_filter_ignores_root_home():
    record = make_record('/tmp/file')

    HomeDirectoryFilter(home='/').filter(record)

    assert record.msg == '/tmp/file'


def test_setup_logging_is_idempotent():
    logger = setup_logging('binsplit-test-idempotent', log_level='debug')
    again = setup_logging('binsplit-test-idempotent', log_level='ERROR')

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.ERROR
    assert logger.handlers[0].level == logging.ERROR
    assert logger.propagate is False
    assert any(isinstance(f, HomeDirectoryFilter) for f in logger.handlers[0].filters)


def test_setup_logging_reads_env(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'warning')

    logger = setup_logging('binsplit-test-env')

    assert logger.level == logging.WARNING


def test_setup_logging_unknown_level_falls_back_to_info():
    logger = setup_logging('binsplit-test-unknown', log_level='chatty')

    assert logger.level == logging.INFO


def test_get_logger_returns_named_logger():
    assert get_logger('splitter.chunk_writer').name == 'splitter.chunk_writer'
