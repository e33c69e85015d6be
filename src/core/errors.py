"""
Errors — Иерархия исключений восстановления секрета

Все ошибки ядра и коллабораторов наследуются от SecretRecoveryError, чтобы
внешний вызывающий код (CLI) мог перехватывать их одной веткой.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибка прерывает текущее вычисление целиком (никаких частичных результатов)
2. Нет подстановки значений по умолчанию вместо ошибочных данных
3. Повторов нет: арифметическая ошибка означает некорректный вход
"""


class SecretRecoveryError(Exception):
    """Базовая ошибка восстановления секрета."""

    pass


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class DivisionByZero(SecretRecoveryError, ZeroDivisionError):
    """
    Деление на ноль в рациональной арифметике.

    Возникает при:
    - создании Rational с нулевым знаменателем
    - делении на нулевой Rational
    - совпадающих x-координатах в рекуррентности разделённых разностей
    """

    pass


# =============================================================================
# РАЗБОР ЧИСЕЛ В ПРОИЗВОЛЬНОЙ СИСТЕМЕ СЧИСЛЕНИЯ
# =============================================================================


class InvalidBase(SecretRecoveryError, ValueError):
    """Основание системы счисления вне диапазона [2, 36]."""

    pass


class InvalidDigit(SecretRecoveryError, ValueError):
    """Символ не является цифрой или латинской буквой."""

    pass


class DigitOutOfRange(SecretRecoveryError, ValueError):
    """Значение цифры >= основания системы счисления."""

    pass


# =============================================================================
# КОЛЛАБОРАТОРЫ
# =============================================================================


class InsufficientPoints(SecretRecoveryError):
    """Доступно меньше точек, чем порог k."""

    pass


class ShareFileError(SecretRecoveryError):
    """Файл с долями не читается или не соответствует JSON Schema."""

    pass
