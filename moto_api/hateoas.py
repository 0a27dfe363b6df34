"""Montagem dos links HATEOAS embutidos nas respostas."""

from typing import List

from fastapi import Request

from moto_api.models.links import Link, ManutencaoLinks


def criar_links(request: Request, entidade: str, id: int) -> List[Link]:
    """Links self/update/delete de um recurso.

    Usa as rotas nomeadas ``get_<entidade>``, ``update_<entidade>`` e
    ``delete_<entidade>`` registradas nos roteadores.
    """
    return [
        Link(rel="self", href=str(request.app.url_path_for(f"get_{entidade}", id=str(id)))),
        Link(rel="update", href=str(request.app.url_path_for(f"update_{entidade}", id=str(id)))),
        Link(rel="delete", href=str(request.app.url_path_for(f"delete_{entidade}", id=str(id)))),
    ]


def links_manutencao(request: Request, id: int, moto_id: int) -> ManutencaoLinks:
    return ManutencaoLinks(
        self_href=str(request.app.url_path_for("get_manutencao", id=str(id))),
        moto=str(request.app.url_path_for("get_moto", id=str(moto_id))),
    )


def location(request: Request, entidade: str, id: int) -> str:
    """URL absoluta do recurso recém-criado (cabeçalho Location)."""
    return str(request.url_for(f"get_{entidade}", id=str(id)))
