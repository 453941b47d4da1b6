"""WordPress Payload Schemas — decode upstream bodies at the system boundary.

Invariants:
    - decode_entity_list() returns list[dict] or None, never raises
    - CategoryRef requires id/name/slug; every other upstream field is kept
    - Decoded entities are the same dict objects the client received (no copies)

Design Decisions:
    - TypeAdapter over isinstance checks: one declared shape, pydantic does the work
    - None instead of raising: "not a sequence" means not-found for slug lookups
      but a shape failure for listings — the resolver decides (ADR: optional sequence)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

_ENTITY_LIST = TypeAdapter(list[dict[str, Any]])


def decode_entity_list(data: Any) -> list[dict[str, Any]] | None:
    """Upstream body -> list of entity dicts, or None when it isn't one."""
    if not isinstance(data, list):
        # TypeAdapter would coerce tuples/sets; upstream JSON only yields lists
        return None
    try:
        _ENTITY_LIST.validate_python(data, strict=True)
    except ValidationError:
        return None
    return data


class CategoryRef(BaseModel):
    """Fields of a category the archive resolver relies on."""
    model_config = ConfigDict(extra="allow", frozen=True)

    id: int
    name: str
    slug: str
