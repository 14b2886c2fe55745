import logging
import unittest

from moodjournal import logger as journal_logger
from moodjournal.config import LOG_CONSOLE_LEVEL


class TestLogger(unittest.TestCase):

    def test_unknown_level_name_falls_back(self):
        self.assertEqual(journal_logger._level("LOUD", logging.WARNING), logging.WARNING)
        self.assertEqual(journal_logger._level("DEBUG", logging.WARNING), logging.DEBUG)

    def test_console_threshold_comes_from_config(self):
        consoles = [h for h in journal_logger.logger.handlers
                    if type(h) is logging.StreamHandler]
        self.assertEqual(len(consoles), 1)
        self.assertEqual(consoles[0].level, journal_logger._level(LOG_CONSOLE_LEVEL, logging.WARNING))

    def test_module_loggers_share_the_root(self):
        self.assertEqual(journal_logger.get_logger("remote").name, "moodjournal.remote")
        self.assertIs(journal_logger.get_logger("remote").parent, journal_logger.logger)


if __name__ == "__main__":
    unittest.main()
