import logging
import os
import tempfile
import unittest

from ffnet.core import logger as ffnet_logger


class TestSetupLogging(unittest.TestCase):

    def setUp(self):
        self.level = logging.getLogger().level

    def tearDown(self):
        ffnet_logger.teardown_logging()
        logging.getLogger().setLevel(self.level)

    def test_writes_to_file(self):

        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = os.path.join(tmp_dir, 'log.txt')

            ffnet_logger.setup_logging(filename=filename, stdout=False)
            logging.getLogger('neural_network').info("hello from a test")
            ffnet_logger.teardown_logging()

            with open(filename) as f:
                contents = f.read()

        self.assertIn("hello from a test", contents)
        self.assertIn("[neural_network:", contents)
        self.assertIn("INFO", contents)

    def test_repeated_setup_does_not_duplicate_handlers(self):

        with tempfile.TemporaryDirectory() as tmp_dir:
            filename = os.path.join(tmp_dir, 'log.txt')

            ffnet_logger.setup_logging(filename=filename, stdout=True)
            n_handlers = len(logging.getLogger().handlers)

            ffnet_logger.setup_logging(filename=filename, stdout=True)

            self.assertEqual(len(logging.getLogger().handlers), n_handlers)
            self.assertEqual(len(ffnet_logger._handlers), 2)

            ffnet_logger.teardown_logging()
