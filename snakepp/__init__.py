"""Snakepp toolchain.

Provides CLI for preprocessing C-like sources with macros written in Python.
"""
