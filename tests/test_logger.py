from py_fixedvector.logger import logger, disable_file_logging, enable_file_logging


class TestLogger:

    def test_disable_file_logging_is_idempotent(self):
        disable_file_logging()
        disable_file_logging()

    def test_file_logger(self, tmp_path):
        logfile = tmp_path / "vectors_debug.log"
        enable_file_logging(str(logfile))
        logger.debug("hello file")
        disable_file_logging()
        assert logfile.exists() and "hello file" in logfile.read_text()

    def test_file_logger_replaced(self, tmp_path):
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"
        enable_file_logging(str(first))
        enable_file_logging(str(second))
        logger.debug("to second only")
        disable_file_logging()
        assert "to second only" not in first.read_text()
        assert "to second only" in second.read_text()
