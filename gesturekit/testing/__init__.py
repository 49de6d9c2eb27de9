from .assertions import AssertionKind, AssertionRule, AssertionValidator
from .automation import (
    AutomationResult,
    ResultSlot,
    RunStats,
    SuiteSummary,
    TestAutomation,
    aggregate,
    compute_stats,
    publish_result,
    wait_for_page_completion,
    wait_for_test_completion,
)
from .models import (
    TestCase,
    TestCaseType,
    TestResult,
    TestState,
    TestSuite,
    VisualizationOptions,
    World,
)
from .registry import CallbackRegistry, callbacks
from .runner import TestRunner, click_test, describe, drag_test, hover_test
from .spec_loader import (
    SpecRunner,
    TestFileSpec,
    TestSpecLoader,
    convert_to_test_case,
    convert_to_test_suite,
    run_tests_from_file,
    run_tests_from_object,
)

__all__ = [
    "AssertionKind",
    "AssertionRule",
    "AssertionValidator",
    "AutomationResult",
    "CallbackRegistry",
    "ResultSlot",
    "RunStats",
    "SpecRunner",
    "SuiteSummary",
    "TestAutomation",
    "TestCase",
    "TestCaseType",
    "TestFileSpec",
    "TestResult",
    "TestRunner",
    "TestSpecLoader",
    "TestState",
    "TestSuite",
    "VisualizationOptions",
    "World",
    "aggregate",
    "callbacks",
    "click_test",
    "compute_stats",
    "convert_to_test_case",
    "convert_to_test_suite",
    "describe",
    "drag_test",
    "hover_test",
    "publish_result",
    "run_tests_from_file",
    "run_tests_from_object",
    "wait_for_page_completion",
    "wait_for_test_completion",
]
