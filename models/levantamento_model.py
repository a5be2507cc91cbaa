from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Levantamento:
    id: Optional[str] = None
    inventario: Optional[str] = None
    # cópia do bem no momento do levantamento: id, sala_id, nome, tombo, descricao, responsavel
    bem: Optional[dict] = None
    sala_nova: Optional[str] = None
    usuario: Optional[str] = None
    imagem: Optional[str] = None
    estado: Optional[str] = None
    ocioso: bool = False
    criado_em: Optional[datetime] = None
    atualizado_em: Optional[datetime] = None
