"""
Prompts — чтение параметров преобразований с fallback на значения по умолчанию

Одна строка ввода на один запрос. Если строка не разбирается в модель
параметров (мало токенов, нечисловые значения) или ввод исчерпан (EOF),
возвращаются значения по умолчанию. Ошибка ввода никогда не прерывает сессию.
"""

import logging
from dataclasses import dataclass
from typing import Generic, TextIO, Type, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ParamsT = TypeVar("ParamsT", bound=BaseModel)


@dataclass(frozen=True)
class PromptResult(Generic[ParamsT]):
    """Результат запроса параметров."""

    params: ParamsT
    used_default: bool


def prompt_params(
    stdin: TextIO,
    stdout: TextIO,
    prompt: str,
    model: Type[ParamsT],
    default: ParamsT,
) -> PromptResult[ParamsT]:
    """
    Запрос параметров у пользователя.

    Токены строки сопоставляются полям модели в порядке их объявления;
    лишние токены игнорируются.

    Args:
        stdin: Источник ввода
        stdout: Куда выводится приглашение
        prompt: Текст приглашения (без перевода строки)
        model: Pydantic модель параметров
        default: Значение при невалидном вводе

    Returns:
        PromptResult с разобранными или дефолтными параметрами
    """
    stdout.write(prompt)
    stdout.flush()

    line = stdin.readline()
    if not line:
        logger.debug("EOF on prompt, using defaults %s", default)
        return PromptResult(params=default, used_default=True)

    fields = list(model.model_fields)
    tokens = line.split()
    if len(tokens) < len(fields):
        logger.debug("Expected %d values, got %r", len(fields), line.strip())
        return PromptResult(params=default, used_default=True)

    try:
        params = model.model_validate(dict(zip(fields, tokens)))
    except ValidationError as e:
        logger.debug("Rejected input %r: %s", line.strip(), e)
        return PromptResult(params=default, used_default=True)

    return PromptResult(params=params, used_default=False)


def prompt_filename(stdin: TextIO, stdout: TextIO, prompt: str = "Enter input filename: ") -> str:
    """Имя входного файла (первый токен строки, пустая строка при EOF)."""
    stdout.write(prompt)
    stdout.flush()
    tokens = stdin.readline().split()
    return tokens[0] if tokens else ""
