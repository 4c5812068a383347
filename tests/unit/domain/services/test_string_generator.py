"""Unit tests for the random string generator."""

import base64

import pytest

from moviebase.domain.services.string_generator import (
    CryptoStringGenerator,
    StringGenerator,
    string_generator,
)


class TestCryptoStringGenerator:
    """Tests for CryptoStringGenerator."""

    def test_is_a_string_generator(self):
        assert isinstance(string_generator, StringGenerator)

    @pytest.mark.parametrize("n", [8, 15, 32])
    def test_decodes_to_n_bytes(self, n):
        value = CryptoStringGenerator().crypto_string(n)

        padded = value + "=" * (-len(value) % 4)
        assert len(base64.urlsafe_b64decode(padded)) == n

    def test_output_is_url_safe_without_padding(self):
        value = CryptoStringGenerator().crypto_string(15)

        assert len(value) == 20
        assert "=" not in value
        assert "+" not in value
        assert "/" not in value

    def test_values_differ(self):
        generator = CryptoStringGenerator()

        values = {generator.crypto_string(15) for _ in range(50)}

        assert len(values) == 50

    @pytest.mark.parametrize("n", [0, -1])
    def test_non_positive_length_is_rejected(self, n):
        with pytest.raises(ValueError):
            CryptoStringGenerator().crypto_string(n)


def test_static_generator_substitutes(static_generator):
    """Test doubles implement the same contract."""
    assert isinstance(static_generator, StringGenerator)
    assert static_generator.crypto_string(15) == "superRandomString"
