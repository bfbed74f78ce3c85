"""
test_reporter.py - Labeled step runner
"""

import io
import os
import sys
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.errors import EfiNotMountedError
from ui.reporter import StepReporter, is_success

class TestStepReporter(unittest.TestCase):

    def setUp(self):
        self.reporter = StepReporter()

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_label_then_ok_on_one_line(self, mock_stdout):
        self.assertTrue(self.reporter.run("Checking things...", lambda: 0))

        output = mock_stdout.getvalue()
        self.assertTrue(output.startswith("Checking things..."))
        self.assertIn("[  OK  ]", output)
        self.assertEqual(output.count("\n"), 1)

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_failed_marker(self, mock_stdout):
        self.assertFalse(self.reporter.run("Validating...", lambda: 1))
        self.assertIn("[FAILED]", mock_stdout.getvalue())

    def test_outcome_normalisation(self):
        self.assertTrue(is_success(None))
        self.assertTrue(is_success(True))
        self.assertTrue(is_success(0))
        self.assertFalse(is_success(False))
        self.assertFalse(is_success(1))
        self.assertFalse(is_success(127))

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_missing_label_exits(self, mock_stdout):
        with self.assertRaises(SystemExit) as ctx:
            self.reporter.run("", lambda: 0)

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("requires two arguments", mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_missing_step_exits(self, mock_stdout):
        with self.assertRaises(SystemExit) as ctx:
            self.reporter.run("Checking...", None)
        self.assertEqual(ctx.exception.code, 1)

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_os_error_reported_as_failure(self, mock_stdout):
        def step():
            raise PermissionError("denied")

        self.assertFalse(self.reporter.run("Creating repo...", step))
        self.assertIn("[FAILED]", mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_abort_reported_then_raised(self, mock_stdout):
        def step():
            raise EfiNotMountedError("/Volumes/EFI")

        with self.assertRaises(EfiNotMountedError):
            self.reporter.run("Checking for mounted EFI partition...", step)

        self.assertIn("[FAILED]", mock_stdout.getvalue())
        self.assertEqual(self.reporter.exit_code(), 1)

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_failures_fold_into_exit_code(self, mock_stdout):
        self.reporter.run("First...", lambda: 1)
        self.reporter.run("Last...", lambda: 0)

        self.assertEqual(self.reporter.exit_code(), 1)
        self.assertEqual([r.label for r in self.reporter.failures], ["First..."])

    @patch('sys.stdout', new_callable=io.StringIO)
    def test_summary(self, mock_stdout):
        self.reporter.run("Checking prerequisites...", lambda: 0)
        self.reporter.run("Validating XML...", lambda: 1)
        self.reporter.summary()

        output = mock_stdout.getvalue()
        self.assertIn("1/2 checks passed", output)
        self.assertIn("Validating XML", output)

    def test_all_passed_exit_code(self):
        self.assertEqual(self.reporter.exit_code(), 0)

if __name__ == '__main__':
    unittest.main()
