import re

import pytest

from talentfolio.domain.services.token_generator import TOKEN_BYTES, TokenGenerator


def test_generate_returns_64_hex_characters():
    token = TokenGenerator().generate()

    assert re.fullmatch(r"[0-9a-f]{64}", token)


def test_generated_tokens_are_unique():
    generator = TokenGenerator()

    tokens = {generator.generate() for _ in range(1000)}

    assert len(tokens) == 1000


def test_rejects_less_than_32_bytes():
    with pytest.raises(ValueError):
        TokenGenerator(nbytes=TOKEN_BYTES - 1)


def test_longer_tokens_allowed():
    assert len(TokenGenerator(nbytes=48).generate()) == 96
