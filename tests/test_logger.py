import logging

from rolltoken.utils import logger as rt_logger


def test_console_only_by_default():
    log = rt_logger.setup_logger()
    assert rt_logger.get_log_file_path() is None
    assert len(log.handlers) == 1
    assert log.handlers[0].level == logging.WARNING
    assert log.propagate is False


def test_debug_environment_lowers_console_level(monkeypatch):
    monkeypatch.setenv('ROLLTOKEN_DEBUG', '1')
    log = rt_logger.setup_logger()
    assert log.handlers[0].level == logging.DEBUG


def test_file_logging(tmp_path):
    log = rt_logger.setup_logger(log_to_file=True, log_dir=str(tmp_path))
    path = rt_logger.get_log_file_path()
    assert path is not None and path.startswith(str(tmp_path))

    logging.getLogger('rolltoken.rolling.manager').debug("child message")
    for handler in log.handlers:
        handler.flush()
    with open(path, encoding='utf-8') as f:
        assert "child message" in f.read()

    rt_logger.setup_logger()


def test_set_console_level():
    rt_logger.setup_logger()
    rt_logger.set_console_level(logging.INFO)
    assert rt_logger.get_logger().handlers[0].level == logging.INFO
