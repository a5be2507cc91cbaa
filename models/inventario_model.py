from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Inventario:
    id: Optional[str] = None
    campus: Optional[str] = None
    nome: Optional[str] = None
    data: Optional[datetime] = None
    status: bool = True
    criado_em: Optional[datetime] = None
    atualizado_em: Optional[datetime] = None
