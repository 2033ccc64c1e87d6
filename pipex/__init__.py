"""Run two commands joined by a pipe between an input file and an output file,
with the command lookup, string, printf and line-reading helpers it uses."""

__version__ = "1.0.0"