"""Base Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with ORM support.

    ``populate_by_name`` lets camelCase wire aliases and snake_case attribute
    names be used interchangeably when building instances in code.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
    )
