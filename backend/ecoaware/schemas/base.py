"""Schema Base: camelCase wire format shared by every schema."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for all request/response bodies."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def strip_required(v: str) -> str:
    """Strip whitespace; reject blank strings."""
    v = v.strip()
    if not v:
        raise ValueError("must not be empty or whitespace")
    return v
