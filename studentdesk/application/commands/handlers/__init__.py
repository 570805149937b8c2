"""Command handlers."""

from studentdesk.application.commands.handlers.disenroll_student_handler import (
    DisenrollStudentHandler,
)
from studentdesk.application.commands.handlers.edit_personal_info_handler import (
    EditPersonalInfoHandler,
)
from studentdesk.application.commands.handlers.enroll_student_handler import (
    EnrollStudentHandler,
)
from studentdesk.application.commands.handlers.register_student_handler import (
    RegisterStudentHandler,
)
from studentdesk.application.commands.handlers.transfer_student_handler import (
    TransferStudentHandler,
)
from studentdesk.application.commands.handlers.unregister_student_handler import (
    UnregisterStudentHandler,
)

__all__ = [
    "DisenrollStudentHandler",
    "EditPersonalInfoHandler",
    "EnrollStudentHandler",
    "RegisterStudentHandler",
    "TransferStudentHandler",
    "UnregisterStudentHandler",
]
