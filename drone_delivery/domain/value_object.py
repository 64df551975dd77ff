"""Base class for immutable, self-validating value objects."""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable domain object defined solely by its attribute values.

    Subclasses declare their fields as a regular pydantic model and add
    field validators for their invariants. Instances:

    - are frozen: assigning to a field raises
    - compare and hash by value
    - reject unknown fields and non-finite floats

    pydantic offers two constructors that skip validation
    (``model_construct`` and ``model_copy(update=...)``). Both are routed
    back through ``__init__`` here so an invalid instance can never be
    produced.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        allow_inf_nan=False,
    )

    @classmethod
    def model_construct(cls, _fields_set: Optional[set] = None, **values: Any):
        return cls(**values)

    def model_copy(self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False):
        if not update:
            return self
        return type(self)(**{**self.model_dump(), **update})
