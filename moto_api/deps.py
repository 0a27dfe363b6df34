# Dependências do FastAPI: um serviço novo por requisição, sobre a sessão da requisição
from fastapi import Depends
from sqlalchemy.orm import Session

from moto_api.database import get_db
from moto_api.services import ManutencaoService, MotoService, UsuarioService


def get_moto_service(db: Session = Depends(get_db)) -> MotoService:
    return MotoService(db)


def get_usuario_service(db: Session = Depends(get_db)) -> UsuarioService:
    return UsuarioService(db)


def get_manutencao_service(db: Session = Depends(get_db)) -> ManutencaoService:
    return ManutencaoService(db)
