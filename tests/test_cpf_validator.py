import pytest

from util.cpf_validator import is_valid_cpf, limpar_cpf


@pytest.mark.parametrize("cpf", ["52998224725", "529.982.247-25", "111.444.777-35"])
def test_cpf_valido(cpf):
    assert is_valid_cpf(cpf) is True


@pytest.mark.parametrize(
    "cpf",
    [
        "52998224724",
        "52998224715",
        "11111111111",
        "00000000000",
        "1234567890",
        "123456789012",
        "",
        "abc",
    ],
)
def test_cpf_invalido(cpf):
    assert is_valid_cpf(cpf) is False


@pytest.mark.parametrize("valor", [None, 52998224725, ["52998224725"]])
def test_cpf_que_nao_e_texto(valor):
    assert is_valid_cpf(valor) is False


def test_limpar_cpf_remove_pontos_e_hifen():
    assert limpar_cpf("529.982.247-25") == "52998224725"
    assert limpar_cpf("529 982") == "529 982"
