"""
Configuração da aplicação.

Os valores são lidos de variáveis de ambiente (um arquivo ``.env`` na raiz
é carregado antes, se existir). A instância ``settings`` é criada uma única
vez na importação do módulo, então as variáveis precisam estar definidas
antes de importar qualquer coisa de ``moto_api``.
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Carrega o .env (se existir) antes de ler as variáveis
load_dotenv()

# --- LÓGICA DE CAMINHO ---
# (Suporte ao PyInstaller: o banco padrão fica ao lado do executável)
if getattr(sys, 'frozen', False):
    BASE_DIR = Path(sys._MEIPASS)
else:
    BASE_DIR = Path(".")

DB_FILE = BASE_DIR / "moto_api.db"
# -------------------------


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Configurações carregadas das variáveis de ambiente."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Moto API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "v1"))
    description: str = "API RESTful para gerenciar Motos, Manutenções e Usuários"

    # String de conexão do banco relacional (qualquer URL aceita pelo SQLAlchemy)
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", f"sqlite:///{DB_FILE}"))
    sql_echo: bool = field(default_factory=lambda: _env_bool("SQL_ECHO"))

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))

    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


settings = Settings()
