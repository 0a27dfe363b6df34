"""
Configuração básica de logging.

``setup_logging`` prepara o logger raiz com um handler de console e,
opcionalmente, um handler de arquivo. Chamadas repetidas (por exemplo nos
testes) não duplicam handlers.
"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configura o logger raiz.

    ``level`` é o nome do nível (``"DEBUG"``, ``"INFO"``...), sem
    diferenciar maiúsculas. Se ``logfile`` for informado, as mensagens
    também são gravadas nesse arquivo.
    """
    logger = logging.getLogger()
    if logger.handlers:
        return

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
