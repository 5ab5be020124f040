"""
Source locations and diagnostic formatting.

Responsibility:
    Describes *where* a check was made (file, line, function) and renders
    the diagnostic text that failure handlers emit.

Architecture position:
    Kernel > Domain -- pure functional core.  ``SourceLocation.capture``
    reads the interpreter call stack; nothing else here touches runtime
    state.

Diagnostic formats:
    BRACKET  ->  ``checks.py[42]: expected true``
    COLON    ->  ``checks.py:42: expected true``
    No location  ->  the bare message.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

_KERNEL_PACKAGE = "contract_kernel"


class LocationStyle(str, Enum):
    """How a source location prefixes a diagnostic message."""

    BRACKET = "bracket"
    COLON = "colon"


@dataclass(frozen=True)
class SourceLocation:
    """File name + line number attached to a diagnostic."""

    file: str
    line: int
    function: str | None = None

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"

    @classmethod
    def capture(cls) -> SourceLocation | None:
        """Locate the first caller frame outside the contract_kernel package.

        Returns None when the stack cannot be inspected (some embedded
        interpreters do not expose frames).
        """
        frame = inspect.currentframe()
        try:
            while frame is not None:
                module = frame.f_globals.get("__name__", "")
                if module != _KERNEL_PACKAGE and not module.startswith(
                    f"{_KERNEL_PACKAGE}."
                ):
                    return cls(
                        file=Path(frame.f_code.co_filename).name,
                        line=frame.f_lineno,
                        function=frame.f_code.co_name,
                    )
                frame = frame.f_back
            return None
        finally:
            del frame


def format_diagnostic(
    message: str,
    location: SourceLocation | None,
    style: LocationStyle = LocationStyle.BRACKET,
) -> str:
    """Render ``message`` prefixed by ``location`` in the given style."""
    if location is None:
        return message
    if style is LocationStyle.COLON:
        return f"{location.file}:{location.line}: {message}"
    return f"{location.file}[{location.line}]: {message}"
