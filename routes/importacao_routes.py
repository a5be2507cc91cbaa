from fastapi import APIRouter, Depends, UploadFile

from dtos.importacao_dto import ArquivoCsvDTO
from repositories.campus_repo import CampusRepo
from services.importacao_service import ImportacaoService
from util.auth import checar_autorizacao
from util.http import obter_ou_404


router = APIRouter(prefix="/importacao", tags=["importacao"], dependencies=[Depends(checar_autorizacao)])


@router.post("/csv/{campus_id}")
def importar_csv(campus_id: str, arquivo: UploadFile):
    obter_ou_404(CampusRepo, campus_id, "Campus")
    conteudo = arquivo.file.read()
    dto = ArquivoCsvDTO(
        campo="arquivo",
        nome_arquivo=arquivo.filename,
        tipo_conteudo=arquivo.content_type or "",
        conteudo=conteudo,
        tamanho=len(conteudo),
    )
    resumo = ImportacaoService.importar_csv(dto.conteudo, campus_id)
    return {"mensagem": "Importação concluída", **resumo.para_dict()}
