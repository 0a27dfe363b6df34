from typing import List

from fastapi import APIRouter, Depends, Query, Request, Response
from starlette import status

from moto_api.deps import get_usuario_service
from moto_api.hateoas import criar_links, location
from moto_api.models.usuario import UsuarioComLinks, UsuarioCreate, UsuarioRead, UsuarioUpdate
from moto_api.services import UsuarioService

router = APIRouter(
    prefix="/api/usuario",
    tags=["usuario"],
    responses={404: {"description": "Usuário não encontrado"}},
)


def _com_links(request: Request, usuario) -> UsuarioComLinks:
    return UsuarioComLinks(
        id=usuario.id,
        nome=usuario.nome,
        email=usuario.email,
        links=criar_links(request, "usuario", usuario.id),
    )


@router.get("", response_model=List[UsuarioComLinks], name="list_usuarios")
def list_usuarios(
    request: Request,
    page_number: int = Query(1, alias="pageNumber"),
    page_size: int = Query(10, alias="pageSize"),
    service: UsuarioService = Depends(get_usuario_service),
):
    return [_com_links(request, u) for u in service.list(page_number, page_size)]


@router.get("/{id}", response_model=UsuarioComLinks, name="get_usuario")
def get_usuario(request: Request, id: int, service: UsuarioService = Depends(get_usuario_service)):
    return _com_links(request, service.get(id))


@router.post("", response_model=UsuarioRead, status_code=status.HTTP_201_CREATED, name="create_usuario")
def create_usuario(
    request: Request,
    response: Response,
    usuario: UsuarioCreate,
    service: UsuarioService = Depends(get_usuario_service),
):
    novo_usuario = service.create(usuario)
    response.headers["Location"] = location(request, "usuario", novo_usuario.id)
    return novo_usuario


@router.put("/{id}", status_code=status.HTTP_204_NO_CONTENT, name="update_usuario")
def update_usuario(id: int, usuario: UsuarioUpdate, service: UsuarioService = Depends(get_usuario_service)):
    service.update(id, usuario)


@router.delete("/{id}", status_code=status.HTTP_204_NO_CONTENT, name="delete_usuario")
def delete_usuario(id: int, service: UsuarioService = Depends(get_usuario_service)):
    service.delete(id)
