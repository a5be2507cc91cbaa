from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Usuario:
    id: Optional[str] = None
    campus: Optional[str] = None
    nome: Optional[str] = None
    cpf: Optional[str] = None
    email: Optional[str] = None
    cargo: Optional[str] = None
    status: bool = True
    criado_em: Optional[datetime] = None
    atualizado_em: Optional[datetime] = None
    # o hash da senha nunca sai do repositório
