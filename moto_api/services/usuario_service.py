from moto_api.database_models import Usuario
from moto_api.models.usuario import UsuarioCreate, UsuarioUpdate
from moto_api.services.base import BaseService


class UsuarioService(BaseService):
    model = Usuario
    nome = "Usuário"

    def create(self, data: UsuarioCreate) -> Usuario:
        return self._add(Usuario(nome=data.nome, email=data.email))

    def update(self, id: int, data: UsuarioUpdate) -> None:
        self._check_ids(id, data.id)
        self._replace(id, {"nome": data.nome, "email": data.email})
