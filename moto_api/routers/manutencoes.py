from typing import List

from fastapi import APIRouter, Depends, Query, Request, Response
from starlette import status

from moto_api.deps import get_manutencao_service
from moto_api.hateoas import links_manutencao, location
from moto_api.models.manutencao import (
    ManutencaoCreate,
    ManutencaoDetalhe,
    ManutencaoRead,
    ManutencaoUpdate,
)
from moto_api.models.moto import MotoRead
from moto_api.services import ManutencaoService

router = APIRouter(
    prefix="/api/manutencao",
    tags=["manutencao"],
    responses={404: {"description": "Manutenção não encontrada"}},
)


def _detalhe(request: Request, m) -> ManutencaoDetalhe:
    """Achata os dados da moto associada e acrescenta os links."""
    moto = m.moto
    return ManutencaoDetalhe(
        id=m.id,
        moto_id=m.moto_id,
        moto_modelo=moto.modelo if moto else None,
        moto_placa=moto.placa if moto else None,
        tipo_servico=m.tipo_servico,
        data_servico=m.data_servico,
        status=m.status,
        descricao=m.descricao,
        links=links_manutencao(request, m.id, m.moto_id),
    )


@router.get("", response_model=List[ManutencaoDetalhe], name="list_manutencoes")
def list_manutencoes(
    request: Request,
    page_number: int = Query(1, alias="pageNumber", description="Número da página (padrão 1)."),
    page_size: int = Query(10, alias="pageSize", description="Itens por página (padrão 10)."),
    service: ManutencaoService = Depends(get_manutencao_service),
):
    """Lista paginada de manutenções, cada uma com modelo e placa da moto."""
    return [_detalhe(request, m) for m in service.list(page_number, page_size)]


@router.get("/{id}", response_model=ManutencaoDetalhe, name="get_manutencao")
def get_manutencao(request: Request, id: int, service: ManutencaoService = Depends(get_manutencao_service)):
    return _detalhe(request, service.get(id))


@router.post("", response_model=ManutencaoRead, status_code=status.HTTP_201_CREATED, name="create_manutencao")
def create_manutencao(
    request: Request,
    response: Response,
    manutencao: ManutencaoCreate,
    service: ManutencaoService = Depends(get_manutencao_service),
):
    # 400 se o motoId não apontar para uma moto existente
    nova = service.create(manutencao)
    response.headers["Location"] = location(request, "manutencao", nova.id)
    return ManutencaoRead(
        id=nova.id,
        moto_id=nova.moto_id,
        tipo_servico=nova.tipo_servico,
        data_servico=nova.data_servico,
        status=nova.status,
        descricao=nova.descricao,
        moto=MotoRead.model_validate(nova.moto) if nova.moto else None,
    )


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT, name="update_manutencao")
def update_manutencao(
    id: int,
    manutencao: ManutencaoUpdate,
    service: ManutencaoService = Depends(get_manutencao_service),
):
    service.update(id, manutencao)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, name="delete_manutencao")
def delete_manutencao(id: int, service: ManutencaoService = Depends(get_manutencao_service)):
    service.delete(id)
