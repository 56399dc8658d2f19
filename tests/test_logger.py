import io
import logging
import unittest
from contextlib import redirect_stdout

from wordfind.cli import main
from wordfind.utils.logger import ENGINE_LOGGER, PACKAGE_LOGGER, configure_logging, get_logger


class LoggerTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        engine = logging.getLogger(ENGINE_LOGGER)
        saved = (list(root.handlers), root.level, engine.level)

        def restore() -> None:
            root.handlers[:] = saved[0]
            root.setLevel(saved[1])
            engine.setLevel(saved[2])

        self.addCleanup(restore)

    def test_engine_level_is_tuned_apart_from_root(self) -> None:
        configure_logging(logging.WARNING, engine_level=logging.DEBUG)
        builder_logger = logging.getLogger("wordfind.engine.builder")
        cli_logger = logging.getLogger("wordfind.cli")
        self.assertEqual(builder_logger.getEffectiveLevel(), logging.DEBUG)
        self.assertEqual(cli_logger.getEffectiveLevel(), logging.WARNING)

    def test_reconfiguring_without_engine_level_resets_it(self) -> None:
        configure_logging(logging.INFO, engine_level=logging.ERROR)
        configure_logging(logging.INFO)
        self.assertEqual(logging.getLogger(ENGINE_LOGGER).level, logging.NOTSET)
        self.assertEqual(
            logging.getLogger("wordfind.engine.placement").getEffectiveLevel(), logging.INFO
        )

    def test_loggers_live_in_package_namespace(self) -> None:
        self.assertEqual(get_logger().name, PACKAGE_LOGGER)
        self.assertEqual(get_logger("reports").name, "wordfind.reports")
        self.assertEqual(get_logger("wordfind.engine.builder").name, "wordfind.engine.builder")
        self.assertEqual(get_logger("wordfindish").name, "wordfind.wordfindish")

    def test_cli_engine_log_level_flag(self) -> None:
        with redirect_stdout(io.StringIO()):
            code = main([
                "--words", "cat",
                "--seed", "1",
                "--log-level", "ERROR",
                "--engine-log-level", "debug",
            ])
        self.assertEqual(code, 0)
        self.assertEqual(logging.getLogger(ENGINE_LOGGER).level, logging.DEBUG)
        self.assertEqual(logging.getLogger().level, logging.ERROR)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
