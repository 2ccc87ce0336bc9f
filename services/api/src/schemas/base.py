"""Schema base classes."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema exchanged with camelCase keys (userId, projectId, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
