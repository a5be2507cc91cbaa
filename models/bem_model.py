from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Bem:
    id: Optional[str] = None
    sala: Optional[str] = None
    nome: Optional[str] = None
    tombo: Optional[str] = None
    # {"nome": ..., "cpf": ...}
    responsavel: Optional[dict] = None
    descricao: Optional[str] = None
    valor: Optional[float] = None
    auditado: bool = False
    ocioso: bool = False
    criado_em: Optional[datetime] = None
    atualizado_em: Optional[datetime] = None
