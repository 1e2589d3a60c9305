"""Common model base used across the engine."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys.

    Field names stay snake_case in Python; ``model_dump(by_alias=True)``
    produces the camelCase wire shape consumed by the frontend.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
