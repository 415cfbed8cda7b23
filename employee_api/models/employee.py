from typing import Any, Optional

from bson.objectid import ObjectId
from pydantic import BaseModel, ConfigDict, Field

EMPLOYEE_FIELDS = ("name", "age", "salary")


class EmployeeIn(BaseModel):
    """Inbound employee payload.

    Unknown fields are rejected. `id` is accepted so clients can send back a
    record they received, but it is never written: the database assigns it on
    create and the URL carries it on edit.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    id: Optional[Any] = None
    name: str
    # BSON stores ints as at most 8 bytes
    age: int = Field(ge=-2**63, le=2**63 - 1)
    salary: float

    def to_document(self) -> dict:
        """Fields to persist, without the id."""
        return self.model_dump(include=set(EMPLOYEE_FIELDS))


def to_json(doc):
    """Convert a stored employee document into its API representation.

    - `_id` -> `id`, ObjectId -> str
    - only the employee fields are exposed; anything else stored on the
      document is dropped
    """
    if doc is None:
        return None

    out = {}
    if doc.get("_id") is not None:
        _id = doc["_id"]
        out["id"] = str(_id) if isinstance(_id, ObjectId) else _id
    for field in EMPLOYEE_FIELDS:
        if field in doc:
            out[field] = doc[field]
    return out
