from fastapi import HTTPException, status

from dtos.campos import validar_id


def obter_ou_404(repo, id: str, recurso: str):
    validar_id(id)
    registro = repo.obter_por_id(id)
    if registro is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{recurso} não encontrado(a)")
    return registro


def conflito(mensagem: str):
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=mensagem)


def requisicao_invalida(mensagem: str):
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=mensagem)
