from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, TEXT
from sqlalchemy.orm import relationship

from moto_api.database import Base


# 1. Tabela de Motos
class Moto(Base):
    __tablename__ = "Motos"
    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    placa = Column("Placa", String(20), nullable=False)
    modelo = Column("Modelo", String(100), nullable=False)

    # Relacionamento: uma Moto tem muitas Manutenções.
    # O banco apaga as manutenções em cascata (ON DELETE CASCADE).
    manutencoes = relationship(
        "Manutencao",
        back_populates="moto",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Moto {self.modelo} ({self.placa})>"


# 2. Tabela de Usuários
class Usuario(Base):
    __tablename__ = "Usuarios"
    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    nome = Column("Nome", String(255), nullable=False)
    email = Column("Email", String(255), nullable=False)


# 3. Tabela de Manutenções
class Manutencao(Base):
    __tablename__ = "Manutencoes"
    __table_args__ = (Index("IX_Manutencoes_MotoId", "MotoId"),)

    id = Column("Id", Integer, primary_key=True, autoincrement=True)
    tipo_servico = Column("TipoServico", String(255), nullable=False)
    data_servico = Column("DataServico", DateTime, nullable=False)
    status = Column("Status", String(50), nullable=False)  # (Ex: "Pendente", "Concluído")
    descricao = Column("Descricao", TEXT)

    # Chave Estrangeira
    moto_id = Column("MotoId", Integer, ForeignKey("Motos.Id", ondelete="CASCADE"), nullable=False)

    # Relacionamento
    moto = relationship("Moto", back_populates="manutencoes")
