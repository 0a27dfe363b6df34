from moto_api.database_models import Moto
from moto_api.exceptions import NaoEncontradoError
from moto_api.models.moto import MotoCreate, MotoUpdate
from moto_api.services.base import BaseService


class MotoService(BaseService):
    model = Moto
    nome = "Moto"

    def get_by_placa(self, placa: str) -> Moto:
        """Primeira moto com a placa exatamente igual à informada."""
        moto = self._query().filter(Moto.placa == placa).order_by(Moto.id).first()
        if moto is None:
            raise NaoEncontradoError(f"Nenhuma moto com a placa '{placa}'.")
        return moto

    def create(self, data: MotoCreate) -> Moto:
        return self._add(Moto(placa=data.placa, modelo=data.modelo))

    def update(self, id: int, data: MotoUpdate) -> None:
        self._check_ids(id, data.id)
        self._replace(id, {"placa": data.placa, "modelo": data.modelo})
