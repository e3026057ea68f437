import logging
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path
from tempfile import TemporaryDirectory

from openai_tools.config.logging_config import LOG_FILE_NAME, configure_logging


class TestLoggingConfig(unittest.TestCase):
    def test_configure_logging(self):
        # Test that the function returns a logger
        logger = configure_logging()
        self.assertIsInstance(logger, logging.Logger)

        # Test that the logger has the correct name
        self.assertEqual(logger.name, "openai_tools")

        # Test that the logger has the correct level
        self.assertEqual(logger.level, logging.INFO)

        # Console handler only, with the shared format
        self.assertEqual(len(logger.handlers), 1)
        handler = logger.handlers[0]
        self.assertIsInstance(handler, logging.StreamHandler)
        formatter = handler.formatter
        self.assertEqual(formatter._fmt, "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        self.assertFalse(logger.propagate)

    def test_configure_logging_with_log_dir(self):
        with TemporaryDirectory() as tmp:
            logger = configure_logging(log_dir=tmp)
            try:
                file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
                self.assertEqual(len(file_handlers), 1)
                self.assertTrue((Path(tmp) / LOG_FILE_NAME).exists())
            finally:
                for handler in logger.handlers[:]:
                    handler.close()
                    logger.removeHandler(handler)

    def test_reconfigure_does_not_duplicate_handlers(self):
        configure_logging()
        logger = configure_logging()
        self.assertEqual(len(logger.handlers), 1)


if __name__ == "__main__":
    unittest.main()
