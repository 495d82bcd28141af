"""factum - execution engine for single test cases."""

from .config import FactumSettings
from .testing import (
    BeforeAfterTest,
    Char,
    CollectingMessageSink,
    TestCase,
    TestCaseRunner,
    TestStatus,
    collect,
    fact,
    inline_data,
    trait,
)
from .version import __version__


__all__ = [
    "BeforeAfterTest",
    "Char",
    "CollectingMessageSink",
    "FactumSettings",
    "TestCase",
    "TestCaseRunner",
    "TestStatus",
    "__version__",
    "collect",
    "fact",
    "inline_data",
    "trait",
]
