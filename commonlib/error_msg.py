"""
commonlib Error Message module
"""

from typing import List, Tuple, Optional


class CommonLibException(Exception):
    """commonlib specific exception with stack trace support"""

    def __init__(self, msg: str, stack_trace: Optional[List[Tuple[str, str]]] = None):
        self.msg = msg
        self.stack_trace = stack_trace or []
        super().__init__(self.format_message())

    def format_message(self) -> str:
        if not self.stack_trace:
            return self.msg

        trace_str = ""
        for identifier, position in self.stack_trace:
            trace_str += f"\n{identifier} at {position}"

        return f"{self.msg}{trace_str}"


class PrimitiveTypeError(CommonLibException, TypeError):
    """An argument lies outside the value domain of a primitive"""


# Type alias for stack trace
Stack = List[Tuple[str, str]]


def fail_with_stacktrace(msg: str, stack_trace: Stack) -> None:
    """Raise a commonlib exception with a message and stack trace"""
    raise CommonLibException(msg, stack_trace)
