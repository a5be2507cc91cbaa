from datetime import datetime, timezone

import pytest

from util.validators import (
    converter_data,
    converter_inteiro,
    is_booleano_texto,
    is_cpf,
    is_email,
    is_object_id,
    is_senha,
    is_senha_forte,
    is_telefone,
    is_url,
)


@pytest.mark.parametrize(
    "valor, esperado",
    [
        (None, 1),
        ("", 1),
        ("3", 3),
        ("2.5", 2),
        (" 7", 7),
        ("12abc", 12),
        ("abc", None),
        ("-4", -4),
        (5, 5),
        (True, None),
    ],
)
def test_converter_inteiro(valor, esperado):
    assert converter_inteiro(valor, 1) == esperado


def test_converter_data_meia_noite_utc():
    assert converter_data("15/03/2024") == datetime(2024, 3, 15, tzinfo=timezone.utc)


def test_converter_data_aceita_datetime():
    data = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert converter_data(data) is data


@pytest.mark.parametrize("valor", ["2024-03-15", "15/3/2024", "", 20240315])
def test_converter_data_formato_errado(valor):
    with pytest.raises(ValueError, match="Data deve estar no formato dd/mm/aaaa"):
        converter_data(valor)


def test_converter_data_inexistente():
    with pytest.raises(ValueError, match="Por favor, insira uma data válida"):
        converter_data("31/02/2024")


@pytest.mark.parametrize("telefone", ["69999999999", "6932221111", "(69) 99999-9999", "(69)3222-1111"])
def test_telefone_valido(telefone):
    assert is_telefone(telefone) is None


@pytest.mark.parametrize("telefone", ["123", "(69) 9999", "abcdefghijk"])
def test_telefone_invalido(telefone):
    assert is_telefone(telefone) == "Telefone inválido. Use formato (XX) XXXXX-XXXX ou apenas números"


def test_object_id():
    assert is_object_id("65f0c0ffee0000000000abcd") is None
    assert is_object_id("65F0C0FFEE0000000000ABCD") is None
    assert is_object_id("65f0c0ffee0000000000abc") == "ID inválido"
    assert is_object_id("zzzzzzzzzzzzzzzzzzzzzzzz", "outro") == "outro"
    assert is_object_id(None) == "ID inválido"


def test_email():
    assert is_email("maria@ifro.edu.br") is None
    assert is_email("maria@") == "Formato de email inválido."
    assert is_email("maria.ifro.edu.br") == "Formato de email inválido."


def test_url():
    assert is_url("https://fotos.ifro.edu.br/bem.jpg", "erro") is None
    assert is_url(None, "erro") is None
    assert is_url("ftp://fotos/bem.jpg", "erro") == "erro"


def test_senhas():
    assert is_senha_forte("Senha@123") is None
    assert is_senha_forte("Senha1234") is not None
    assert is_senha_forte(None) is None
    assert is_senha("Senha1234") is None
    assert is_senha("senha1234") is not None
    assert is_senha("Sen1") is not None


def test_cpf_mensagens():
    assert is_cpf("52998224725") is None
    assert is_cpf("5299822472") == "CPF deve conter 11 dígitos numéricos."
    assert is_cpf("52998224726") == "CPF inválido (dígitos verificadores não conferem)."


def test_booleano_texto():
    assert is_booleano_texto("true", "Ativo") is None
    assert is_booleano_texto("false", "Ativo") is None
    assert is_booleano_texto(None, "Ativo") is None
    assert is_booleano_texto("sim", "Ativo") == "Ativo deve ser 'true' ou 'false'"

