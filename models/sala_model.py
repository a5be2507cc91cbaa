from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Sala:
    id: Optional[str] = None
    campus: Optional[str] = None
    nome: Optional[str] = None
    bloco: Optional[str] = None
    criado_em: Optional[datetime] = None
    atualizado_em: Optional[datetime] = None
