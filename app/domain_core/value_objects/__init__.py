from app.domain_core.value_objects.field_update import (
    CLEAR,
    UNSET,
    FieldUpdate,
    Set,
    from_payload,
    resolve,
)

__all__ = ["CLEAR", "UNSET", "FieldUpdate", "Set", "from_payload", "resolve"]
