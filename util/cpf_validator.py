import re


def limpar_cpf(cpf: str) -> str:
    return re.sub(r"[.-]", "", cpf)


def _digito_verificador(numeros: str, peso_inicial: int) -> int:
    soma = sum(int(digito) * (peso_inicial - i) for i, digito in enumerate(numeros))
    resto = soma % 11
    return 0 if resto < 2 else 11 - resto


def is_valid_cpf(cpf) -> bool:
    """Valida um CPF pelos dois dígitos verificadores (módulo 11).

    Aceita o número com ou sem pontuação; qualquer valor que não seja
    str devolve False.
    """
    if not isinstance(cpf, str):
        return False
    numeros = re.sub(r"\D", "", cpf)
    if len(numeros) != 11 or numeros == numeros[0] * 11:
        return False
    if _digito_verificador(numeros[:9], 10) != int(numeros[9]):
        return False
    return _digito_verificador(numeros[:10], 11) == int(numeros[10])
