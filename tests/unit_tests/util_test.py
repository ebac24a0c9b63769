import logging
import os
import tempfile
import unittest

from lvm2cmd import util


class RunProgramTestCase(unittest.TestCase):

    def test_capture(self):
        rc, out, err = util.run_program_and_capture_output_binary(["sh", "-c", "echo out; echo err >&2; exit 3"])
        self.assertEqual(rc, 3)
        self.assertEqual(out, b"out\n")
        self.assertEqual(err, b"err\n")

    def test_locale(self):
        _rc, out, _err = util.run_program_and_capture_output_binary(["sh", "-c", "echo $LC_ALL"])
        self.assertEqual(out, b"C\n")

    def test_env_prune(self):
        _rc, out, _err = util.run_program_and_capture_output_binary(["sh", "-c", "echo ${HOME:-unset}"],
                                                                    env_prune=["HOME"])
        self.assertEqual(out, b"unset\n")

    def test_missing_program(self):
        with self.assertRaises(OSError):
            util.run_program_and_capture_output_binary(["/nonexistent/lvm2cmd-test-binary"])


class SetUpLoggingTestCase(unittest.TestCase):

    def test_log_file(self):
        log = logging.getLogger("lvm2cmd")
        program_log = logging.getLogger("program")
        handlers = (list(log.handlers), list(program_log.handlers))
        levels = (log.level, program_log.level)

        with tempfile.TemporaryDirectory() as log_dir:
            try:
                log_file = util.set_up_logging(log_dir=log_dir, log_prefix="test")
                self.assertEqual(log_file, os.path.realpath(os.path.join(log_dir, "test.log")))

                util.run_program_and_capture_output_binary(["sh", "-c", "echo hello"])
                for handler in log.handlers:
                    handler.flush()

                with open(log_file) as f:
                    content = f.read()
                self.assertIn("sys.argv", content)
                self.assertIn("Running... sh -c echo hello", content)
                self.assertIn("hello", content)
            finally:
                for handler in set(log.handlers + program_log.handlers):
                    if handler not in handlers[0] + handlers[1]:
                        handler.close()
                log.handlers, program_log.handlers = handlers
                log.setLevel(levels[0])
                program_log.setLevel(levels[1])
