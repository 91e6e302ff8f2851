from pydantic import BaseModel, ConfigDict


class EdgarModel(BaseModel):
    """Base for SEC payloads: camelCase aliases, unknown fields ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
