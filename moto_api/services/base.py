"""
Comportamento comum aos serviços de recurso.

Cada serviço é criado por requisição em volta de uma ``Session`` do
SQLAlchemy e não guarda nenhum outro estado. As subclasses definem o
modelo de tabela (``model``) e o nome usado nas mensagens (``nome``).
"""

import logging
from typing import Any, List

from sqlalchemy.orm import Query, Session
from sqlalchemy.orm.exc import StaleDataError

from moto_api.exceptions import NaoEncontradoError, ValidacaoError

logger = logging.getLogger(__name__)

# Maior inteiro aceito pelo banco em OFFSET/LIMIT (INTEGER de 64 bits)
MAX_SQL_INT = 2**63 - 1


def paginar(query: Query, page_number: int = 1, page_size: int = 10) -> List[Any]:
    """Aplica OFFSET/LIMIT na query.

    ``page_number`` menor que 1 é tratado como 1. ``page_size`` menor que 1
    resulta numa página vazia. Valores além do limite do banco são
    limitados: uma página fora do alcance vem vazia e um ``page_size``
    enorme devolve todos os registros.
    """
    if page_size < 1:
        return []
    offset = (max(page_number, 1) - 1) * page_size
    if offset > MAX_SQL_INT:
        return []
    return query.offset(offset).limit(min(page_size, MAX_SQL_INT)).all()


class BaseService:
    model = None
    nome = "Registro"

    def __init__(self, db: Session):
        self.db = db

    def _query(self) -> Query:
        return self.db.query(self.model)

    def list(self, page_number: int = 1, page_size: int = 10) -> List[Any]:
        # Sem ordenação explícita no contrato; o ID preserva a ordem de inserção
        return paginar(self._query().order_by(self.model.id), page_number, page_size)

    def get(self, id: int):
        obj = self._query().filter(self.model.id == id).first()
        if obj is None:
            logger.debug("%s %s não encontrado(a)", self.nome, id)
            raise NaoEncontradoError(f"{self.nome} não encontrado(a).")
        return obj

    def exists(self, id: int) -> bool:
        return self.db.query(self.model.id).filter(self.model.id == id).first() is not None

    def delete(self, id: int) -> None:
        obj = self.get(id)
        self.db.delete(obj)
        self._commit()
        logger.info("%s %s removido(a)", self.nome, id)

    # --- Helpers de escrita ---

    def _commit(self) -> None:
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _add(self, obj):
        self.db.add(obj)
        self._commit()
        self.db.refresh(obj)
        logger.info("%s %s criado(a)", self.nome, obj.id)
        return obj

    def _check_ids(self, id: int, body_id) -> None:
        if body_id != id:
            logger.warning("%s: ID da rota (%s) difere do ID do corpo (%s)", self.nome, id, body_id)
            raise ValidacaoError(f"O ID da rota ({id}) difere do ID informado no corpo ({body_id}).")

    def _replace(self, id: int, values: dict) -> None:
        """Substitui todos os campos do registro ``id``.

        Se o registro sumir entre a leitura e a gravação, o flush falha com
        ``StaleDataError``; nesse caso confirma a ausência e responde como
        não encontrado.
        """
        obj = self.get(id)
        for field, value in values.items():
            setattr(obj, field, value)
        try:
            self._commit()
        except StaleDataError:
            if not self.exists(id):
                logger.warning("%s %s removido(a) durante a atualização", self.nome, id)
                raise NaoEncontradoError(f"{self.nome} não encontrado(a).")
            raise
        logger.info("%s %s atualizado(a)", self.nome, id)
