"""Handler Registry - Single Source of Truth for handled messages.

Catalogs every handler of the application with its decorator declaration.
The container feeds this list to a ``HandlerRegistry`` at startup; message
types are read from each handler's contract, so a message/handler pair is
declared exactly once.

Used for:
- Dispatcher construction (``build_dispatcher``)
- Validation tests (every message has a handler, no drift)
- Statistics and documentation (``computed_views``)

Adding new commands/queries:
1. Define the message dataclass in *_commands.py/*_queries.py (subclass
   ``Command``, ``ResultCommand[T]`` or ``Query[T]``)
2. Create the handler in handlers/ (subclass the matching handler contract)
3. Add a HandlerMetadata entry below
4. Startup (build_dispatcher) and the registry compliance tests report
   any message left without a handler

Decorator convention:
- Commands: (AUDIT_LOG, RETRY) - one audit entry per dispatch, retries inside
- Queries: (RETRY,) - reads are not audited
"""

from studentdesk.application.commands import student_commands
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
from studentdesk.application.cqrs.contracts import messages_declared_in
from studentdesk.application.cqrs.metadata import DecoratorKind, HandlerMetadata
from studentdesk.application.queries import student_queries
from studentdesk.application.queries.handlers.get_student_list_handler import (
    GetStudentListHandler,
)
from studentdesk.application.queries.handlers.list_students_needing_attention_handler import (
    ListStudentsNeedingAttentionHandler,
)

COMMAND_DECORATORS = (DecoratorKind.AUDIT_LOG, DecoratorKind.RETRY)
QUERY_DECORATORS = (DecoratorKind.RETRY,)

# Closed message set: build_dispatcher refuses to start unless every one of
# these has a handler below.
APPLICATION_MESSAGES: tuple[type, ...] = messages_declared_in(
    student_commands, student_queries
)


# ═══════════════════════════════════════════════════════════════════════════
# Handler Registry
# ═══════════════════════════════════════════════════════════════════════════

HANDLER_REGISTRY: list[HandlerMetadata] = [
    # ───────────────────────────────────────────────────────────────────────
    # Student Commands
    # ───────────────────────────────────────────────────────────────────────
    HandlerMetadata(
        handler_class=RegisterStudentHandler,
        decorators=COMMAND_DECORATORS,
        description="Register a new student and return its id",
    ),
    HandlerMetadata(
        handler_class=EditPersonalInfoHandler,
        decorators=COMMAND_DECORATORS,
        description="Change a student's name and email",
    ),
    HandlerMetadata(
        handler_class=EnrollStudentHandler,
        decorators=COMMAND_DECORATORS,
        description="Enroll a student in a course",
    ),
    HandlerMetadata(
        handler_class=TransferStudentHandler,
        decorators=COMMAND_DECORATORS,
        description="Move an enrollment to another course",
    ),
    HandlerMetadata(
        handler_class=DisenrollStudentHandler,
        decorators=COMMAND_DECORATORS,
        description="Remove one of a student's enrollments",
    ),
    HandlerMetadata(
        handler_class=UnregisterStudentHandler,
        decorators=COMMAND_DECORATORS,
        description="Remove a student and all enrollments",
    ),
    # ───────────────────────────────────────────────────────────────────────
    # Student Queries
    # ───────────────────────────────────────────────────────────────────────
    HandlerMetadata(
        handler_class=GetStudentListHandler,
        decorators=QUERY_DECORATORS,
        description="List students filtered by course and enrollment count",
    ),
    HandlerMetadata(
        handler_class=ListStudentsNeedingAttentionHandler,
        decorators=QUERY_DECORATORS,
        description="List students with a failing grade or no enrollment",
    ),
]
