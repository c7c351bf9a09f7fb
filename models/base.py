from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Shared base: camelCase on the wire, snake_case attributes in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def changed_fields(self) -> Dict[str, Any]:
        """Fields the client actually sent, keeping nested models intact."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class ApiInput(ApiModel):
    model_config = ConfigDict(extra="forbid")


class ApiUpdate(ApiInput):
    """Partial update body. Omitted fields are left alone; only
    `nullable_fields` may be cleared with an explicit null."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        nulled = sorted(
            name for name in self.model_fields_set
            if getattr(self, name) is None and name not in self.nullable_fields
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self


def ensure_aware(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive timestamps as UTC so they compare with server clocks."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
