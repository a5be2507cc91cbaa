from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Campus:
    id: Optional[str] = None
    nome: Optional[str] = None
    cidade: Optional[str] = None
    telefone: Optional[str] = None
    bairro: Optional[str] = None
    rua: Optional[str] = None
    numero_residencia: Optional[str] = None
    status: bool = True
    criado_em: Optional[datetime] = None
    atualizado_em: Optional[datetime] = None
