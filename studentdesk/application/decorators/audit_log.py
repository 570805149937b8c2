"""Audit log decorator.

Logs every message that reaches it, with its payload serialized to a
JSON-compatible dict, before handing the message on. The entry is written
whether or not the inner handler then succeeds.

The payload schema of the audited message type is built when the pipeline
is built, so a message type pydantic cannot describe stops the application
at startup. A value that still fails to serialize at dispatch time (bytes
that are not UTF-8, for instance) is audited by its ``repr`` instead; the
message always reaches the inner handler.
"""

import dataclasses
from functools import lru_cache
from typing import Any

from pydantic import (
    PydanticSchemaGenerationError,
    PydanticUndefinedAnnotation,
    TypeAdapter,
)
from pydantic_core import PydanticSerializationError

from studentdesk.application.cqrs.contracts import Handler, HandlerDecorator
from studentdesk.application.cqrs.errors import UnauditableMessageError
from studentdesk.application.decorators.policies import AuditPolicy
from studentdesk.domain.protocols.logger_protocol import LoggerProtocol

SCHEMA_ERRORS = (PydanticSchemaGenerationError, PydanticUndefinedAnnotation)
SERIALIZATION_ERRORS = (PydanticSerializationError, UnicodeDecodeError)


@lru_cache(maxsize=None)
def _adapter_for(message_type: type) -> TypeAdapter[Any]:
    return TypeAdapter(message_type)


def prepare_audit_schema(message_type: type) -> None:
    """Build and cache the payload schema of a message type.

    Raises:
        UnauditableMessageError: If pydantic cannot generate the schema.
    """
    try:
        _adapter_for(message_type)
    except SCHEMA_ERRORS as e:
        raise UnauditableMessageError(message_type, str(e)) from e


def serialize_message(message: Any) -> dict[str, Any]:
    """Serialize a message dataclass to JSON-compatible primitives.

    UUIDs, enums and dates become strings.

    Args:
        message: Message instance.

    Returns:
        dict: Field name to JSON-compatible value.
    """
    return _adapter_for(type(message)).dump_python(message, mode="json")


def describe_message(message: Any) -> dict[str, Any]:
    """Field name to ``repr`` of the value; never fails."""
    if dataclasses.is_dataclass(message):
        return {
            field.name: repr(getattr(message, field.name))
            for field in dataclasses.fields(message)
        }
    return {"repr": repr(message)}


class AuditLogDecorator(HandlerDecorator):
    """Writes an audit entry for each message, then delegates.

    Args:
        inner: Next element of the pipeline.
        logger: Audit sink.
        policy: Audit switch (enabled by default).
        message_type: Message type of the pipeline. Given by the pipeline
            builder; its payload schema is prepared immediately.

    Raises:
        UnauditableMessageError: If ``message_type`` has no payload schema.
    """

    def __init__(
        self,
        inner: Handler,
        logger: LoggerProtocol,
        policy: AuditPolicy | None = None,
        message_type: type | None = None,
    ) -> None:
        super().__init__(inner)
        self._logger = logger
        self._policy = policy or AuditPolicy()
        if message_type is not None:
            prepare_audit_schema(message_type)

    async def handle(self, message: Any) -> Any:
        if self._policy.enabled:
            self._logger.info(
                "message_audited",
                message_type=type(message).__name__,
                payload=self._payload(message),
            )
        return await self.inner.handle(message)

    def _payload(self, message: Any) -> dict[str, Any]:
        try:
            return serialize_message(message)
        except SCHEMA_ERRORS + SERIALIZATION_ERRORS as e:
            self._logger.warning(
                "audit_payload_unserializable",
                message_type=type(message).__name__,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return describe_message(message)
