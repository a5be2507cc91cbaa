from fastapi import APIRouter, Depends, Request, Response

from dtos.relatorio_dto import RelatorioQueryDTO
from repositories.inventario_repo import InventarioRepo
from repositories.sala_repo import SalaRepo
from services.relatorio_service import RelatorioService
from util.auth import checar_autorizacao
from util.http import obter_ou_404


router = APIRouter(prefix="/relatorios", tags=["relatorios"], dependencies=[Depends(checar_autorizacao)])


@router.get("")
def gerar_relatorio(request: Request):
    query = RelatorioQueryDTO.model_validate(dict(request.query_params))
    obter_ou_404(InventarioRepo, query.inventario_id, "Inventário")
    if query.sala:
        obter_ou_404(SalaRepo, query.sala, "Sala")
    conteudo = RelatorioService.gerar_pdf(query.inventario_id, query.tipo_relatorio, query.sala)
    nome_arquivo = f"relatorio_{query.tipo_relatorio}_{query.inventario_id}.pdf"
    return Response(
        content=conteudo,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{nome_arquivo}"'},
    )
