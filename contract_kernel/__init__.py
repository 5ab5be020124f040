"""
Contract Kernel

Runtime condition checks with a single overridable failure handler:
- One parametrized ConditionChecker
- Assert / Require / Expect facades with configurable failure policy
- Diagnostics formatted as ``<file>[<line>]: <message>``
- Structured JSON logging for report-and-continue failures
"""

__version__ = "0.1.0"
