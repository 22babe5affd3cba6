# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Scipp contributors (https://github.com/scipp)
import json
import logging

import pytest
import structlog

from lar.coreobj.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


def test_level_by_name():
    configure_logging(level='debug', disable_stdout=True)
    assert logging.getLogger().level == logging.DEBUG


def test_unknown_level_name_raises():
    with pytest.raises(ValueError, match="loud"):
        configure_logging(level='loud', disable_stdout=True)


def test_disable_stdout_leaves_no_handlers():
    configure_logging(disable_stdout=True)
    assert logging.getLogger().handlers == []


def test_console_handler():
    configure_logging(colors=False)
    (handler,) = logging.getLogger().handlers
    assert isinstance(handler, logging.StreamHandler)


def test_json_file(tmp_path):
    path = tmp_path / 'log.json'
    configure_logging(level=logging.INFO, json_file=str(path), disable_stdout=True)
    logger = structlog.get_logger('lar.test')
    logger.info('Loaded %s tables', 3, source='test')
    logger.debug('Not written')
    logging.getLogger('foreign').warning('From stdlib')

    records = [json.loads(line) for line in path.read_text().splitlines()]
    assert len(records) == 2
    assert records[0]['event'] == 'Loaded 3 tables'
    assert records[0]['source'] == 'test'
    assert records[0]['level'] == 'info'
    assert records[0]['logger'] == 'lar.test'
    assert records[1]['event'] == 'From stdlib'
    assert records[1]['level'] == 'warning'
