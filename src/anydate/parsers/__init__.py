"""Parsers — catalogue matchers and the public parse entry points.

Every entry point is a pure function of its input string and the frozen
settings object. Final construction and calendar validation is delegated
to :mod:`datetime`.
"""
