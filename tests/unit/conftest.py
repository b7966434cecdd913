"""Общие фикстуры: изолированный контекст потока на каждый тест."""

import pytest

from bignum.context import LongMathConfig, MathContext, get_context, set_context


@pytest.fixture(autouse=True)
def fresh_context():
    """Каждый тест получает новый контекст потока с конфигурацией по умолчанию."""
    previous = get_context()
    context = MathContext(LongMathConfig())
    set_context(context)
    yield context
    set_context(previous)
