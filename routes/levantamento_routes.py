import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Request, UploadFile, status

from dtos.foto_dto import FotoDTO
from dtos.levantamento_dto import AlterarLevantamentoDTO, LevantamentoQueryDTO, NovoLevantamentoDTO
from repositories.bem_repo import BemRepo
from repositories.filtros.levantamento_filtro_builder import LevantamentoFiltroBuilder
from repositories.inventario_repo import InventarioRepo
from repositories.levantamento_repo import LevantamentoRepo
from repositories.sala_repo import SalaRepo
from util.armazenamento import ErroArmazenamento, enviar_foto
from util.auth import checar_autorizacao
from util.http import conflito, obter_ou_404


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/levantamentos", tags=["levantamentos"], dependencies=[Depends(checar_autorizacao)])


@router.get("")
def listar_levantamentos(request: Request):
    query = LevantamentoQueryDTO.model_validate(dict(request.query_params))
    filtros = (
        LevantamentoFiltroBuilder()
        .com_inventario(query.inventario)
        .com_usuario(query.usuario)
        .com_sala(query.sala)
        .com_estado(query.estado)
        .com_ocioso(query.ocioso)
        .com_tombo(query.tombo)
        .com_nome_bem(query.nome)
        .build()
    )
    return LevantamentoRepo.obter_todos(filtros, query.page, query.limite)


@router.get("/{id}")
def obter_levantamento(id: str):
    return obter_ou_404(LevantamentoRepo, id, "Levantamento")


@router.post("", status_code=status.HTTP_201_CREATED)
def inserir_levantamento(levantamento: NovoLevantamentoDTO, request: Request):
    obter_ou_404(InventarioRepo, levantamento.inventario, "Inventário")
    if LevantamentoRepo.obter_por_inventario_bem(levantamento.inventario, levantamento.bem_id):
        raise conflito("Já existe um levantamento para este bem neste inventário.")
    bem = obter_ou_404(BemRepo, levantamento.bem_id, "Bem")
    if levantamento.sala_nova:
        obter_ou_404(SalaRepo, levantamento.sala_nova, "Sala")
    dados = levantamento.model_dump(exclude={"bem_id"})
    dados["bem"] = {
        "id": bem.id,
        "sala_id": bem.sala,
        "nome": bem.nome,
        "tombo": bem.tombo,
        "descricao": bem.descricao,
        "responsavel": bem.responsavel or {},
    }
    dados["usuario"] = request.state.usuario["id"]
    novo = LevantamentoRepo.inserir(dados)
    logger.info("Levantamento %s registrado para o bem %s", novo.id, bem.tombo)
    return novo


@router.patch("/{id}")
@router.put("/{id}")
def alterar_levantamento(id: str, levantamento: AlterarLevantamentoDTO):
    obter_ou_404(LevantamentoRepo, id, "Levantamento")
    if levantamento.sala_nova:
        obter_ou_404(SalaRepo, levantamento.sala_nova, "Sala")
    dados = levantamento.model_dump(exclude_none=True, exclude={"bem_id", "inventario"})
    return LevantamentoRepo.alterar(id, dados)


@router.delete("/{id}")
def excluir_levantamento(id: str):
    obter_ou_404(LevantamentoRepo, id, "Levantamento")
    LevantamentoRepo.excluir(id)
    logger.info("Levantamento %s excluído", id)
    return {"mensagem": "Levantamento excluído com sucesso"}


@router.post("/{id}/foto")
def adicionar_foto(id: str, foto: UploadFile):
    obter_ou_404(LevantamentoRepo, id, "Levantamento")
    conteudo = foto.file.read()
    dto = FotoDTO(
        nome_arquivo=foto.filename,
        tipo_conteudo=foto.content_type or "",
        conteudo=conteudo,
        tamanho=len(conteudo),
    )
    chave = f"levantamentos/{id}/{uuid.uuid4().hex}.{dto.extensao}"
    try:
        url = enviar_foto(chave, dto.conteudo, dto.tipo_conteudo)
    except ErroArmazenamento as erro:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(erro))
    logger.info("Foto %s anexada ao levantamento %s", chave, id)
    return LevantamentoRepo.alterar(id, {"imagem": url})
