"""
errors.py - Exceptions that stop the step sequence
"""


class StepAborted(Exception):
    """A step failed badly enough that nothing after it should run."""


class EfiNotMountedError(StepAborted):
    def __init__(self, efi_path):
        super().__init__(f"No EFI partition mounted at {efi_path}")
        self.efi_path = efi_path
