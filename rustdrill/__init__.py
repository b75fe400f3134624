"""Build, run and verify compiler-checked exercises, with worked lessons."""

__version__ = "4.6.0"