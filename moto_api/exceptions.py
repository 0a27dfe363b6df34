"""Erros de domínio levantados pelos serviços.

Os handlers registrados em ``main.py`` convertem cada um no status HTTP
correspondente. Qualquer outra exceção vira um 500.
"""


class MotoApiError(Exception):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class NaoEncontradoError(MotoApiError):
    """Registro inexistente (ou removido entre a leitura e a gravação)."""
    status_code = 404


class ValidacaoError(MotoApiError):
    """IDs inconsistentes ou chave estrangeira apontando para nada."""
    status_code = 400
