import logging
import unittest

from labyrinth.utils.logger import PACKAGE_LOGGER, configure_logging, get_logger


class LoggerSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        self.package = logging.getLogger(PACKAGE_LOGGER)
        self.root = logging.getLogger()
        self._saved = (list(self.package.handlers), self.package.level, self.package.propagate)
        self._root_handlers = list(self.root.handlers)

    def tearDown(self) -> None:
        handlers, level, propagate = self._saved
        self.package.handlers[:] = handlers
        self.package.setLevel(level)
        self.package.propagate = propagate
        self.root.handlers[:] = self._root_handlers

    def test_root_handlers_are_left_alone(self) -> None:
        sentinel = logging.NullHandler()
        self.root.addHandler(sentinel)
        configure_logging(logging.DEBUG)
        self.assertIn(sentinel, self.root.handlers)
        self.assertEqual(self.package.level, logging.DEBUG)

    def test_reconfiguring_replaces_own_handler_only(self) -> None:
        foreign = logging.NullHandler()
        self.package.addHandler(foreign)
        configure_logging(logging.INFO)
        configure_logging(logging.WARNING)
        own = [h for h in self.package.handlers if h is not foreign]
        self.assertEqual(len(own), 1)
        self.assertIn(foreign, self.package.handlers)
        self.assertEqual(self.package.level, logging.WARNING)

    def test_get_logger_names_children_of_package(self) -> None:
        self.package.handlers.clear()
        logger = get_logger("labyrinth.io.codec")
        self.assertEqual(logger.name, "labyrinth.io.codec")
        self.assertEqual(len(self.package.handlers), 1)
        self.assertIs(get_logger(), self.package)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
