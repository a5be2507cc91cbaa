from dataclasses import dataclass
from typing import Optional


@dataclass
class Rota:
    id: Optional[str] = None
    rota: Optional[str] = None
    dominio: Optional[str] = None
    ativo: bool = True
    buscar: bool = False
    enviar: bool = False
    substituir: bool = False
    modificar: bool = False
    excluir: bool = False
