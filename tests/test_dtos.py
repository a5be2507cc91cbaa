from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from dtos.bem_dto import AlterarBemDTO, BemQueryDTO, NovoBemDTO
from dtos.campos import PaginacaoDTO, validar_id
from dtos.campus_dto import AlterarCampusDTO, CampusQueryDTO, NovoCampusDTO
from dtos.foto_dto import TAMANHO_MAXIMO_FOTO, TAMANHO_MAXIMO_FOTO_MB, FotoDTO
from dtos.importacao_dto import TAMANHO_MAXIMO_CSV, TAMANHO_MAXIMO_MB, ArquivoCsvDTO
from dtos.inventario_dto import InventarioQueryDTO, NovoInventarioDTO
from dtos.levantamento_dto import LevantamentoQueryDTO, MENSAGEM_ESTADO, NovoLevantamentoDTO
from dtos.login_dto import LoginDTO
from dtos.relatorio_dto import RelatorioQueryDTO
from dtos.rota_dto import AlterarRotaDTO, NovaRotaDTO
from dtos.sala_dto import AlterarSalaDTO, NovaSalaDTO, SalaQueryDTO
from dtos.usuario_dto import AlterarUsuarioDTO, NovaSenhaDTO, NovoUsuarioDTO, UsuarioQueryDTO
from util.erros import listar_erros


ID = "65f0c0ffee0000000000abcd"
CPF_VALIDO = "52998224725"


def _erros(dto, dados):
    with pytest.raises(ValidationError) as excinfo:
        dto.model_validate(dados)
    return listar_erros(excinfo.value)


def _mensagens(dto, dados):
    return {erro["path"]: erro["message"] for erro in _erros(dto, dados)}


# campus

def test_campus_valido_normaliza():
    campus = NovoCampusDTO.model_validate({"nome": "  Campus Vilhena ", "cidade": "Vilhena"})
    assert campus.model_dump() == {
        "nome": "Campus Vilhena",
        "cidade": "Vilhena",
        "telefone": None,
        "bairro": None,
        "rua": None,
        "numero_residencia": None,
        "status": True,
    }


def test_campus_idempotente():
    dados = NovoCampusDTO.model_validate(
        {"nome": "Campus Vilhena", "cidade": "Vilhena", "telefone": "(69) 3322-1100", "status": False}
    ).model_dump()
    assert NovoCampusDTO.model_validate(dados).model_dump() == dados


def test_campus_sem_campos_obrigatorios_relata_todos():
    erros = _erros(NovoCampusDTO, {})
    assert len(erros) == 2
    assert {erro["path"] for erro in erros} == {"nome", "cidade"}
    assert all(erro["message"] == "Required" for erro in erros)


def test_campus_campos_vazios():
    assert _mensagens(NovoCampusDTO, {"nome": "   ", "cidade": ""}) == {
        "nome": "Este campo é obrigatório",
        "cidade": "Este campo é obrigatório",
    }


def test_campus_nulo_e_telefone_invalido():
    mensagens = _mensagens(NovoCampusDTO, {"nome": None, "cidade": "Vilhena", "telefone": "123"})
    assert mensagens["nome"] == "Expected string, received null"
    assert mensagens["telefone"].startswith("Telefone inválido")


def test_campus_status_estrito_e_nulo_vira_true():
    assert _mensagens(NovoCampusDTO, {"nome": "A", "cidade": "B", "status": "sim"}) == {
        "status": "Expected boolean, received string",
    }
    assert NovoCampusDTO.model_validate({"nome": "A", "cidade": "B", "status": None}).status is True


def test_alterar_campus_parcial():
    campus = AlterarCampusDTO.model_validate({"telefone": "69999999999"})
    assert campus.model_dump(exclude_none=True) == {"telefone": "69999999999", "status": True}
    assert _mensagens(AlterarCampusDTO, {"nome": " "}) == {"nome": "Este campo é obrigatório"}


def test_alterar_campus_nulo_explicito():
    assert _mensagens(AlterarCampusDTO, {"nome": None}) == {"nome": "Expected string, received null"}
    assert _mensagens(AlterarCampusDTO, {"cidade": None}) == {"cidade": "Expected string, received null"}


def test_campus_query():
    query = CampusQueryDTO.model_validate({"nome": "vil", "ativo": "true", "page": "2", "limit": "5"})
    assert (query.nome, query.ativo, query.page, query.limite) == ("vil", "true", 2, 5)
    mensagens = _mensagens(CampusQueryDTO, {"nome": " ", "cidade": "", "ativo": "sim"})
    assert mensagens == {
        "nome": "Nome não pode ser vazio",
        "cidade": "Localidade não pode ser vazio",
        "ativo": "Ativo deve ser 'true' ou 'false'",
    }


# paginação

def test_paginacao_padrao():
    query = PaginacaoDTO.model_validate({})
    assert (query.page, query.limite) == (1, 10)


@pytest.mark.parametrize("page, esperado", [("1", 1), ("2.5", 2), (" 3 ", 3), ("", 1)])
def test_paginacao_page_como_parseint(page, esperado):
    assert PaginacaoDTO.model_validate({"page": page}).page == esperado


@pytest.mark.parametrize("page", ["0", "-1", "abc"])
def test_paginacao_page_invalida(page):
    assert _mensagens(PaginacaoDTO, {"page": page}) == {"page": "Page deve ser um número inteiro maior que 0"}


@pytest.mark.parametrize("limite", ["0", "101", "x"])
def test_paginacao_limite_invalido(limite):
    erros = _erros(PaginacaoDTO, {"limite": limite})
    assert [erro["message"] for erro in erros] == ["Limite deve ser um número inteiro entre 1 e 100"]


def test_paginacao_aceita_limit():
    assert PaginacaoDTO.model_validate({"limit": "100"}).limite == 100


# sala

def test_sala_valida():
    sala = NovaSalaDTO.model_validate({"campus": ID, "nome": "Lab 1", "bloco": "A"})
    assert sala.model_dump() == {"campus": ID, "nome": "Lab 1", "bloco": "A"}


def test_sala_id_invalido_e_ausente():
    assert _mensagens(NovaSalaDTO, {"campus": "123", "nome": "Lab 1"}) == {
        "campus": "ID inválido",
        "bloco": "Required",
    }
    assert _mensagens(NovaSalaDTO, {"campus": None, "nome": "Lab 1", "bloco": "A"}) == {
        "campus": "Expected string, received null",
    }


def test_alterar_sala_valida_campos_informados():
    assert AlterarSalaDTO.model_validate({}).model_dump(exclude_none=True) == {}
    assert _mensagens(AlterarSalaDTO, {"campus": "x"}) == {"campus": "ID inválido"}


def test_alterar_sala_nulo_explicito():
    assert _mensagens(AlterarSalaDTO, {"campus": None}) == {"campus": "Expected string, received null"}
    assert _mensagens(AlterarSalaDTO, {"nome": None, "bloco": None}) == {
        "nome": "Expected string, received null",
        "bloco": "Expected string, received null",
    }


def test_sala_query():
    assert _mensagens(SalaQueryDTO, {"campus": " ", "bloco": ""}) == {
        "campus": "Campus não pode ser vazio",
        "bloco": "Bloco não pode ser vazio",
    }


# usuário

def _usuario(**extra):
    dados = {
        "campus": ID,
        "nome": "Maria Silva",
        "cpf": "529.982.247-25",
        "email": "maria@ifro.edu.br",
        "senha": "Senha@123",
        "cargo": "Comissionado",
    }
    dados.update(extra)
    return dados


def test_usuario_valido_limpa_cpf():
    usuario = NovoUsuarioDTO.model_validate(_usuario())
    assert usuario.cpf == CPF_VALIDO
    assert usuario.status is True


def test_usuario_idempotente():
    dados = NovoUsuarioDTO.model_validate(_usuario()).model_dump()
    assert NovoUsuarioDTO.model_validate(dados).model_dump() == dados


def test_usuario_sem_senha():
    dados = _usuario()
    del dados["senha"]
    assert NovoUsuarioDTO.model_validate(dados).senha is None


def test_usuario_erros_de_formato():
    mensagens = _mensagens(
        NovoUsuarioDTO,
        _usuario(cpf="529.982.247-26", email="maria@", senha="fraca", cargo="Chefe"),
    )
    assert mensagens == {
        "cpf": "CPF inválido (dígitos verificadores não conferem).",
        "email": "Formato de email inválido.",
        "senha": (
            "A senha deve ter pelo menos 8 caracteres, com 1 letra maiúscula, "
            "1 minúscula, 1 número e 1 caractere especial."
        ),
        "cargo": 'O cargo deve ser "Comissionado" ou "Funcionario Cpalm".',
    }


def test_usuario_cpf_curto_e_vazio():
    assert _mensagens(NovoUsuarioDTO, _usuario(cpf="123.456"))["cpf"] == "CPF deve conter 11 dígitos numéricos."
    assert _mensagens(NovoUsuarioDTO, _usuario(cpf=" "))["cpf"] == "Campo CPF é obrigatório."


def test_alterar_usuario():
    usuario = AlterarUsuarioDTO.model_validate({"email": "novo@ifro.edu.br"})
    assert usuario.model_dump(exclude_none=True) == {"email": "novo@ifro.edu.br", "status": True}
    assert _mensagens(AlterarUsuarioDTO, {"cargo": "Reitor"}) == {
        "cargo": 'O cargo deve ser "Comissionado" ou "Funcionario Cpalm".',
    }


def test_nova_senha():
    assert NovaSenhaDTO.model_validate({"senha": "Senha1234"}).senha == "Senha1234"
    assert "senha" in _mensagens(NovaSenhaDTO, {"senha": "senha1234"})


def test_usuario_query():
    assert _mensagens(UsuarioQueryDTO, {"campus": " "}) == {"campus": "campus não pode ser vazio"}


# inventário

def test_inventario_converte_data():
    inventario = NovoInventarioDTO.model_validate({"campus": ID, "nome": "Inventário 2024", "data": "15/03/2024"})
    assert inventario.data == datetime(2024, 3, 15, tzinfo=timezone.utc)
    dados = inventario.model_dump()
    assert NovoInventarioDTO.model_validate(dados).model_dump() == dados


def test_inventario_datas_invalidas():
    base = {"campus": ID, "nome": "Inventário"}
    assert _mensagens(NovoInventarioDTO, {**base, "data": "2024-03-15"}) == {
        "data": "Data deve estar no formato dd/mm/aaaa",
    }
    assert _mensagens(NovoInventarioDTO, {**base, "data": "30/02/2024"}) == {
        "data": "Por favor, insira uma data válida no formato dd/mm/aaaa",
    }


def test_inventario_query():
    assert _mensagens(InventarioQueryDTO, {"data": " ", "ativo": "1"}) == {
        "data": "Data não pode ser vazia",
        "ativo": "Ativo deve ser 'true' ou 'false'",
    }


# bem

def _bem(**extra):
    dados = {
        "sala": ID,
        "nome": "Cadeira",
        "tombo": "123456",
        "responsavel": {"nome": "João", "cpf": "529.982.247-25"},
        "valor": 150.0,
    }
    dados.update(extra)
    return dados


def test_bem_valido():
    bem = NovoBemDTO.model_validate(_bem())
    assert bem.responsavel.cpf == CPF_VALIDO
    assert (bem.auditado, bem.ocioso) == (False, False)
    dados = bem.model_dump()
    assert NovoBemDTO.model_validate(dados).model_dump() == dados


def test_bem_erros():
    mensagens = _mensagens(NovoBemDTO, _bem(valor=-1, auditado="true", responsavel={"nome": " "}))
    assert mensagens == {
        "valor": "Valor deve ser maior ou igual a 0",
        "auditado": "Expected boolean, received string",
        "responsavel.nome": "Nome do responsável é obrigatório.",
    }


def test_bem_sem_responsavel():
    dados = _bem()
    del dados["responsavel"]
    assert _mensagens(NovoBemDTO, dados) == {"responsavel": "Required"}


def test_alterar_bem():
    assert AlterarBemDTO.model_validate({"ocioso": True}).model_dump(exclude_none=True) == {"ocioso": True}
    assert _mensagens(AlterarBemDTO, {"valor": -10}) == {"valor": "Valor deve ser maior ou igual a 0"}


def test_alterar_bem_nulo_explicito():
    assert _mensagens(AlterarBemDTO, {"valor": None, "auditado": None, "responsavel": None}) == {
        "valor": "Expected number, received null",
        "auditado": "Expected boolean, received null",
        "responsavel": "Expected object, received null",
    }


def test_bem_query():
    assert _mensagens(BemQueryDTO, {"sala": "", "auditado": "talvez"}) == {
        "sala": "Sala não pode ser vazio",
        "auditado": "Auditado deve ser 'true' ou 'false'",
    }


# rota

def test_rota_padroes():
    rota = NovaRotaDTO.model_validate({"rota": "campus", "dominio": "localhost"})
    assert rota.model_dump() == {
        "rota": "campus",
        "dominio": "localhost",
        "ativo": True,
        "buscar": False,
        "enviar": False,
        "substituir": False,
        "modificar": False,
        "excluir": False,
    }


def test_alterar_rota_sem_padroes():
    assert all(valor is None for valor in AlterarRotaDTO.model_validate({}).model_dump().values())


def test_rota_em_minusculas():
    assert NovaRotaDTO.model_validate({"rota": " Campus ", "dominio": "localhost"}).rota == "campus"
    assert AlterarRotaDTO.model_validate({"rota": "BENS"}).rota == "bens"
    assert _mensagens(AlterarRotaDTO, {"buscar": None}) == {"buscar": "Expected boolean, received null"}


def test_rota_vazia():
    assert _mensagens(NovaRotaDTO, {"rota": " ", "dominio": ""}) == {
        "rota": "Campo rota é obrigatório.",
        "dominio": "Campo domínio é obrigatório.",
    }


# levantamento

def test_levantamento_valido():
    levantamento = NovoLevantamentoDTO.model_validate(
        {"inventario": ID, "bem_id": ID, "estado": "Danificado", "imagem": "https://fotos.ifro.edu.br/1.jpg"}
    )
    assert levantamento.ocioso is False
    assert levantamento.sala_nova is None


def test_levantamento_erros():
    mensagens = _mensagens(
        NovoLevantamentoDTO,
        {"inventario": ID, "bem_id": "123", "estado": "Quebrado", "imagem": "foto.jpg", "ocioso": 1},
    )
    assert mensagens == {
        "bem_id": "ID inválido",
        "estado": MENSAGEM_ESTADO,
        "imagem": "A URL da imagem é inválida.",
        "ocioso": "Expected boolean, received number",
    }


def test_levantamento_query_mensagens_proprias():
    assert _mensagens(LevantamentoQueryDTO, {"page": "0"}) == {
        "page": "O parâmetro 'page' deve ser um número inteiro maior que 0.",
    }
    mensagens = _mensagens(LevantamentoQueryDTO, {"sala": "abc", "inventario": "x", "ocioso": "sim"})
    assert mensagens == {
        "sala": "O ID da sala é inválido.",
        "inventario": "O ID do inventário é inválido.",
        "ocioso": "O valor para 'ocioso' deve ser 'true' ou 'false'.",
    }


# login, upload e relatório

def test_login():
    assert LoginDTO.model_validate({"email": " maria@ifro.edu.br ", "senha": "x"}).email == "maria@ifro.edu.br"
    assert _mensagens(LoginDTO, {"email": "maria", "senha": ""}) == {
        "email": "Formato de email inválido.",
        "senha": "Campo senha é obrigatório.",
    }


def _arquivo(**extra):
    dados = {
        "nome_arquivo": "bens.csv",
        "tipo_conteudo": "text/csv",
        "conteudo": b"D\xc2\xa5\xc2\xa5",
        "tamanho": 4,
    }
    dados.update(extra)
    return dados


def test_arquivo_csv_valido():
    assert ArquivoCsvDTO.model_validate(_arquivo(nome_arquivo="BENS.CSV")).tamanho == 4


def test_arquivo_csv_invalido():
    mensagens = _mensagens(
        ArquivoCsvDTO,
        _arquivo(nome_arquivo="bens.txt", tipo_conteudo="application/json", conteudo=b"", tamanho=TAMANHO_MAXIMO_CSV + 1),
    )
    assert mensagens == {
        "nome_arquivo": "O arquivo deve ter a extensão .csv",
        "tipo_conteudo": (
            "O arquivo enviado não é um CSV válido. Por favor, envie um arquivo com tipo válido como text/csv."
        ),
        "conteudo": "O arquivo CSV não pode estar vazio.",
        "tamanho": f"O arquivo não pode ser maior que {TAMANHO_MAXIMO_MB}MB.",
    }


def test_arquivo_csv_buffer_e_tamanho_zero():
    assert _mensagens(ArquivoCsvDTO, _arquivo(conteudo="texto", tamanho=0)) == {
        "conteudo": "O buffer do arquivo é inválido.",
        "tamanho": "O tamanho do arquivo deve ser maior que zero.",
    }


def test_relatorio_query():
    query = RelatorioQueryDTO.model_validate({"inventario_id": ID, "tipo_relatorio": "geral"})
    assert query.sala is None
    assert _mensagens(RelatorioQueryDTO, {"inventario_id": ID, "tipo_relatorio": "geral", "formato": "pdf"}) == {
        "formato": "Unrecognized key(s) in object: 'formato'",
    }
    mensagens = _mensagens(RelatorioQueryDTO, {"inventario_id": "1", "tipo_relatorio": "todos", "sala": "2"})
    assert mensagens["inventario_id"] == "inventario_id deve ser um ObjectId válido"
    assert mensagens["tipo_relatorio"].startswith("Tipo de relatório inválido")
    assert mensagens["sala"] == "sala deve ser um ObjectId válido"


def test_validar_id():
    assert validar_id(ID) == ID
    with pytest.raises(ValidationError):
        validar_id("123")


def test_foto_valida():
    foto = FotoDTO.model_validate({"nome_arquivo": "mesa.jpg", "tipo_conteudo": "image/jpeg", "conteudo": b"jpg", "tamanho": 3})
    assert foto.extensao == "jpg"


def test_foto_invalida():
    dados = {"tipo_conteudo": "image/gif", "conteudo": b"", "tamanho": TAMANHO_MAXIMO_FOTO + 1}
    assert _mensagens(FotoDTO, dados) == {
        "tipo_conteudo": "A foto deve ser uma imagem JPEG, PNG ou WEBP.",
        "conteudo": "A foto não pode estar vazia.",
        "tamanho": f"A foto não pode ser maior que {TAMANHO_MAXIMO_FOTO_MB}MB.",
    }
