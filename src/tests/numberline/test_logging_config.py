import logging
import os
import tempfile
import unittest

from numberline.logging_config import setup_logging


class TestSetupLogging(unittest.TestCase):
    def tearDown(self):
        logger = logging.getLogger("numberline")
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)

    def test_console_handler(self):
        logger = setup_logging(logging.DEBUG)
        self.assertEqual(logger.name, "numberline")
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging()
        logger = setup_logging()
        self.assertEqual(len(logger.handlers), 1)

    def test_file_handler(self):
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "numberline.log")
            logger = setup_logging(logging.INFO, log_file=path)
            self.assertEqual(len(logger.handlers), 2)
            logging.getLogger("numberline.scale.number_line").info("panned")
            for handler in logger.handlers:
                handler.flush()
                handler.close()
            with open(path, encoding="utf-8") as f:
                content = f.read()
        self.assertIn("Logging initialized.", content)
        self.assertIn("numberline.scale.number_line - INFO - panned", content)


if __name__ == '__main__':
    unittest.main()
