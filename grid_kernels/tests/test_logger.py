import logging

from grid_kernels.src.utils.logger import get_logger


def test_file_handler_receives_records(tmp_path):
    log_file = tmp_path / "logs" / "solver.log"
    logger = get_logger("grid_kernels.test_file_logger", file_path=str(log_file))
    logger.error("Grid is empty")
    for handler in logger.handlers:
        handler.flush()
    assert "ERROR - Grid is empty" in log_file.read_text(encoding="utf-8")


def test_handlers_attached_once_and_level_updated():
    logger = get_logger("grid_kernels.test_level_logger")
    again = get_logger("grid_kernels.test_level_logger", level="DEBUG")
    assert again is logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
