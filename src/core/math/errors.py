"""
Integer Errors — Таксономия ошибок целочисленной арифметики

Все ошибки наследуются от IntegerArithmeticError и одновременно от
соответствующего встроенного исключения Python, чтобы вызывающий код мог
ловить их как ValueError / ZeroDivisionError / RuntimeError.

КЛАССЫ ОШИБОК:
1. MalformedIntegerError — невалидный вход парсинга (caller error)
2. IntegerDivisionByZero — нулевой делитель в div/mod/quot/rem (caller error)
3. BackendUnavailableError — выбранный backend недоступен (fatal, только при старте)
4. BackendAlreadySelectedError — попытка сменить backend после выбора
"""


class IntegerArithmeticError(Exception):
    """Базовый класс всех ошибок библиотеки."""


class MalformedIntegerError(IntegerArithmeticError, ValueError):
    """
    Невалидный вход конструктора целого.

    Возникает при:
    - hex-строке с символами вне [0-9a-fA-F] (кроме ведущего '-')
    - пустой строке или строке из одного '-'
    - float, который не является конечным целым числом
    - невалидном interchange payload
    """


class IntegerDivisionByZero(IntegerArithmeticError, ZeroDivisionError):
    """
    Деление или взятие остатка по нулевому делителю.

    Проверяется ДО входа в алгоритм деления (нормализация при нулевом
    старшем limb не определена).
    """


class BackendUnavailableError(IntegerArithmeticError, RuntimeError):
    """Запрошенный backend не поддерживается текущим runtime. Неустранимо."""


class BackendAlreadySelectedError(IntegerArithmeticError, RuntimeError):
    """Backend уже выбран для процесса и не может быть заменён другим."""
