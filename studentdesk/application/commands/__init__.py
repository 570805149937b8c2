"""Student commands.

Usage:
    from studentdesk.application.commands import EnrollStudent
"""

from studentdesk.application.commands.student_commands import (
    DisenrollStudent,
    EditPersonalInfo,
    EnrollStudent,
    RegisterStudent,
    TransferStudent,
    UnregisterStudent,
)

__all__ = [
    "DisenrollStudent",
    "EditPersonalInfo",
    "EnrollStudent",
    "RegisterStudent",
    "TransferStudent",
    "UnregisterStudent",
]
