"""Brazilian taxpayer document helpers (CPF for people, CNPJ for companies)"""
import re
from typing import Optional

_CNPJ_WEIGHTS_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
_CNPJ_WEIGHTS_2 = [6] + _CNPJ_WEIGHTS_1


def only_digits(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return re.sub(r"\D", "", value)


def is_valid_cpf(value: str) -> bool:
    cpf = only_digits(value) or ""
    if len(cpf) != 11 or cpf == cpf[0] * 11:
        return False

    digits = [int(d) for d in cpf]
    for position in (9, 10):
        total = sum(digits[i] * (position + 1 - i) for i in range(position))
        check = (total * 10) % 11
        if check == 10:
            check = 0
        if check != digits[position]:
            return False
    return True


def is_valid_cnpj(value: str) -> bool:
    cnpj = only_digits(value) or ""
    if len(cnpj) != 14 or cnpj == cnpj[0] * 14:
        return False

    digits = [int(d) for d in cnpj]
    for position, weights in ((12, _CNPJ_WEIGHTS_1), (13, _CNPJ_WEIGHTS_2)):
        remainder = sum(d * w for d, w in zip(digits[:position], weights)) % 11
        check = 0 if remainder < 2 else 11 - remainder
        if check != digits[position]:
            return False
    return True
