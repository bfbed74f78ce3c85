"""
reporter.py - Labeled step execution with OK/FAILED markers
ONE RESPONSIBILITY: Run steps, print their outcome, keep a tally
"""

import subprocess
import sys

from core.errors import StepAborted
from ui import display
from utils import logger


class StepResult:
    def __init__(self, label, ok):
        self.label = label
        self.ok = ok


def is_success(outcome):
    """Steps may return an exit status, a bool, or nothing at all."""
    if outcome is None or outcome is True:
        return True
    if outcome is False:
        return False
    return outcome == 0


class StepReporter:
    def __init__(self):
        self.results = []

    def run(self, label, step):
        """
        Print label, run step, then print [  OK  ] or [FAILED].

        Args:
            label: Message shown before the marker
            step: Callable taking no arguments

        Returns:
            bool: True if the step succeeded
        """
        if not label or not callable(step):
            print('run() requires two arguments: 1) message 2) function to call')
            sys.exit(1)

        display.print_label(label)
        try:
            ok = is_success(step())
        except StepAborted:
            self._record(label, False)
            raise
        except (OSError, subprocess.SubprocessError) as e:
            logger.log_error(f"{label} raised {e!r}")
            ok = False

        self._record(label, ok)
        return ok

    def _record(self, label, ok):
        if ok:
            display.print_ok()
        else:
            display.print_failed()
        logger.log_info(f"{label} {'OK' if ok else 'FAILED'}")
        self.results.append(StepResult(label, ok))

    @property
    def failures(self):
        return [r for r in self.results if not r.ok]

    def exit_code(self):
        return 1 if self.failures else 0

    def summary(self):
        """Print how many steps passed and list the failed ones."""
        passed = len(self.results) - len(self.failures)
        print(f"\n{passed}/{len(self.results)} checks passed")
        for result in self.failures:
            display.print_error(result.label.rstrip('.'))
