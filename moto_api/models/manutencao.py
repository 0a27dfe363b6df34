from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from moto_api.models.links import ManutencaoLinks
from moto_api.models.moto import MotoRead

# ----------------------------------------------------
# Status convencionais de uma manutenção.
# São apenas sugestões: o campo aceita qualquer texto.
# ----------------------------------------------------
STATUS_PENDENTE = "Pendente"
STATUS_EM_ANDAMENTO = "Em andamento"
STATUS_CONCLUIDO = "Concluído"


class ManutencaoBase(BaseModel):
    """
    Campos de um serviço de manutenção realizado em uma moto.
    No JSON os nomes seguem camelCase (motoId, tipoServico, dataServico).
    """
    model_config = ConfigDict(populate_by_name=True)

    # Chave Estrangeira: ID da moto relacionada
    moto_id: int = Field(..., alias="motoId", description="ID da moto que recebeu o serviço.")

    tipo_servico: str = Field(..., alias="tipoServico", description="Tipo de serviço (ex: Troca de óleo).")

    data_servico: datetime = Field(..., alias="dataServico", description="Data e hora do serviço.")

    status: str = Field(..., description="Pendente, Em andamento, Concluído...")

    descricao: Optional[str] = Field(None, description="Observações sobre o serviço.")

    @field_validator("data_servico")
    @classmethod
    def data_em_utc(cls, value: datetime) -> datetime:
        # O banco guarda a data sem fuso: horários com offset viram UTC
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class ManutencaoCreate(ManutencaoBase):
    # Aceito no corpo mas ignorado: a moto é sempre resolvida pelo motoId
    moto: Optional[dict] = None


class ManutencaoUpdate(ManutencaoBase):
    id: Optional[int] = Field(None, description="ID da manutenção sendo atualizada.")


class ManutencaoRead(ManutencaoBase):
    """Manutenção como foi gravada, com a moto associada (quando carregada)."""
    id: int
    moto: Optional[MotoRead] = None


class ManutencaoDetalhe(ManutencaoBase):
    """Formato usado na listagem e no detalhe: dados da moto achatados + links."""
    id: int
    moto_modelo: Optional[str] = Field(None, alias="motoModelo")
    moto_placa: Optional[str] = Field(None, alias="motoPlaca")
    links: ManutencaoLinks
