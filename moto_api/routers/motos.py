from typing import List

from fastapi import APIRouter, Depends, Query, Request, Response
from starlette import status

from moto_api.deps import get_moto_service
from moto_api.hateoas import criar_links, location
from moto_api.models.moto import MotoComLinks, MotoCreate, MotoRead, MotoUpdate
from moto_api.services import MotoService

router = APIRouter(
    prefix="/api/moto",
    tags=["moto"],
    responses={404: {"description": "Moto não encontrada"}},
)


def _com_links(request: Request, moto) -> MotoComLinks:
    return MotoComLinks(
        id=moto.id,
        placa=moto.placa,
        modelo=moto.modelo,
        links=criar_links(request, "moto", moto.id),
    )


@router.get("", response_model=List[MotoComLinks], name="list_motos")
def list_motos(
    request: Request,
    page_number: int = Query(1, alias="pageNumber", description="Número da página (padrão 1)."),
    page_size: int = Query(10, alias="pageSize", description="Itens por página (padrão 10)."),
    service: MotoService = Depends(get_moto_service),
):
    """Lista paginada de motos com links HATEOAS."""
    return [_com_links(request, m) for m in service.list(page_number, page_size)]


@router.get("/placa/{placa}", response_model=MotoComLinks, name="get_moto_by_placa")
def get_moto_by_placa(request: Request, placa: str, service: MotoService = Depends(get_moto_service)):
    return _com_links(request, service.get_by_placa(placa))


@router.get("/{id}", response_model=MotoComLinks, name="get_moto")
def get_moto(request: Request, id: int, service: MotoService = Depends(get_moto_service)):
    return _com_links(request, service.get(id))


@router.post("", response_model=MotoRead, status_code=status.HTTP_201_CREATED, name="create_moto")
def create_moto(
    request: Request,
    response: Response,
    moto: MotoCreate,
    service: MotoService = Depends(get_moto_service),
):
    nova_moto = service.create(moto)
    response.headers["Location"] = location(request, "moto", nova_moto.id)
    return nova_moto


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT, name="update_moto")
def update_moto(id: int, moto: MotoUpdate, service: MotoService = Depends(get_moto_service)):
    # O ID do corpo precisa ser igual ao da rota
    service.update(id, moto)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, name="delete_moto")
def delete_moto(id: int, service: MotoService = Depends(get_moto_service)):
    # As manutenções da moto são removidas em cascata pelo banco
    service.delete(id)
