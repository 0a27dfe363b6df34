from moto_api.services.manutencao_service import ManutencaoService
from moto_api.services.moto_service import MotoService
from moto_api.services.usuario_service import UsuarioService

__all__ = ["ManutencaoService", "MotoService", "UsuarioService"]
