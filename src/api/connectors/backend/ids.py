"""Geração de identificadores atribuídos pelo cliente.

O backend aceita o id enviado na criação do registro como chave primária,
então evitar colisão é responsabilidade do cliente: 15 símbolos de um
alfabeto de 64 dão 90 bits de entropia. Não há verificação de unicidade.
"""

from __future__ import annotations

import secrets
import string

RECORD_ID_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"
RECORD_ID_LENGTH = 15

RECOVERY_CODE_LENGTH = 6


def generate_record_id(length: int = RECORD_ID_LENGTH) -> str:
    """Gera token opaco com fonte criptograficamente forte."""
    if length <= 0:
        raise ValueError("length deve ser > 0")
    return "".join(secrets.choice(RECORD_ID_ALPHABET) for _ in range(length))


def generate_recovery_code(length: int = RECOVERY_CODE_LENGTH) -> str:
    """Gera código numérico de recuperação de conta."""
    if length <= 0:
        raise ValueError("length deve ser > 0")
    return "".join(secrets.choice(string.digits) for _ in range(length))
