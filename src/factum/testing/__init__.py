"""Single test case execution.

Provides test identity, lifecycle messages and the engine that runs one
test case with fixture construction, before/after hooks and disposal.
"""

from .aggregator import CapturedFailure, ExceptionAggregator, Phase
from .attributes import BeforeAfterTest, FactAttribute, TraitAttribute, fact, inline_data, trait
from .discovery import collect
from .display import INVARIANT_FORMAT, Char, DisplayFormat
from .engine import RunSummary, TestCaseRunner, TestStatus
from .hooks import AttributeHookProvider, HookProvider
from .reflection import AssemblyInfo, InvocationError, MethodInfo, ParameterInfo, TypeInfo
from .sinks import CollectingMessageSink, DelegatingMessageSink, MessageSink
from .testcase import TestCase
from .tracer import TestCaseTracer


__all__ = [
    "INVARIANT_FORMAT",
    "AssemblyInfo",
    "AttributeHookProvider",
    "BeforeAfterTest",
    "CapturedFailure",
    "Char",
    "CollectingMessageSink",
    "DelegatingMessageSink",
    "DisplayFormat",
    "ExceptionAggregator",
    "FactAttribute",
    "HookProvider",
    "InvocationError",
    "MessageSink",
    "MethodInfo",
    "ParameterInfo",
    "Phase",
    "RunSummary",
    "TestCase",
    "TestCaseRunner",
    "TestCaseTracer",
    "TestStatus",
    "TraitAttribute",
    "TypeInfo",
    "collect",
    "fact",
    "inline_data",
    "trait",
]
