from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from moto_api.models.links import Link


class UsuarioBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    nome: str
    email: str


class UsuarioCreate(UsuarioBase):
    pass


class UsuarioUpdate(UsuarioBase):
    id: Optional[int] = Field(None, description="ID do usuário sendo atualizado.")


class UsuarioRead(UsuarioBase):
    id: int


class UsuarioComLinks(UsuarioRead):
    links: List[Link] = []
