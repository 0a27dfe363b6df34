from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from moto_api.models.links import Link


class MotoBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    placa: str = Field(..., description="Placa da moto (ex: ABC1234).")
    modelo: str = Field(..., description="Modelo da moto (ex: CB500).")


class MotoCreate(MotoBase):
    pass


class MotoUpdate(MotoBase):
    # Precisa ser igual ao ID da rota
    id: Optional[int] = Field(None, description="ID da moto sendo atualizada.")


class MotoRead(MotoBase):
    id: int


class MotoComLinks(MotoRead):
    links: List[Link] = []
