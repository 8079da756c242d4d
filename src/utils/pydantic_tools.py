from typing import Any

from pydantic.main import BaseModel


class BaseModelWithMethods(BaseModel):
    """Base model with the JSON helpers the handlers serialize through."""

    def to_json(self, **kwargs: Any) -> str:
        """Serialize using field aliases, the wire names of every payload."""
        kwargs.setdefault("by_alias", True)
        return self.model_dump_json(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
