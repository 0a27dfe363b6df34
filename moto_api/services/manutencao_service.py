"""
Serviço de manutenções.

Toda manutenção pertence a uma moto. A existência da moto é conferida
antes do INSERT, e a chave estrangeira do banco cobre o intervalo entre a
conferência e a gravação: uma violação de FK vira ``ValidacaoError`` com a
mesma mensagem.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import joinedload

from moto_api.database_models import Manutencao, Moto
from moto_api.exceptions import ValidacaoError
from moto_api.models.manutencao import ManutencaoCreate, ManutencaoUpdate
from moto_api.services.base import BaseService

logger = logging.getLogger(__name__)


def _moto_inexistente(moto_id: int) -> ValidacaoError:
    return ValidacaoError(f"Moto com Id {moto_id} não existe.")


class ManutencaoService(BaseService):
    model = Manutencao
    nome = "Manutenção"

    def _query(self):
        # A moto vem junto (JOIN) para expor modelo e placa
        return self.db.query(Manutencao).options(joinedload(Manutencao.moto))

    def create(self, data: ManutencaoCreate) -> Manutencao:
        if self.db.query(Moto.id).filter(Moto.id == data.moto_id).first() is None:
            logger.warning("Manutenção recusada: moto %s não existe", data.moto_id)
            raise _moto_inexistente(data.moto_id)

        # O objeto 'moto' eventualmente enviado no corpo é ignorado
        manutencao = Manutencao(
            moto_id=data.moto_id,
            tipo_servico=data.tipo_servico,
            data_servico=data.data_servico,
            status=data.status,
            descricao=data.descricao,
        )
        try:
            return self._add(manutencao)
        except IntegrityError:
            raise _moto_inexistente(data.moto_id)

    def update(self, id: int, data: ManutencaoUpdate) -> None:
        self._check_ids(id, data.id)
        values = {
            "moto_id": data.moto_id,
            "tipo_servico": data.tipo_servico,
            "data_servico": data.data_servico,
            "status": data.status,
            "descricao": data.descricao,
        }
        try:
            self._replace(id, values)
        except IntegrityError:
            raise _moto_inexistente(data.moto_id)
