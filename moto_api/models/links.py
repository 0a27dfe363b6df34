from pydantic import BaseModel, ConfigDict, Field


class Link(BaseModel):
    """Link HATEOAS no formato ``{"rel": ..., "href": ...}``."""
    rel: str
    href: str


class ManutencaoLinks(BaseModel):
    """Links de uma manutenção: ela mesma e a moto associada."""
    model_config = ConfigDict(populate_by_name=True)

    self_href: str = Field(..., alias="self")
    moto: str
