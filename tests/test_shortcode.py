"""Tests for short code generation."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from shortlink.errors import GenerationError
from shortlink.shortcode import ShortCodeGenerator


class TestShortCodeGenerator:
    """Test short code generation."""

    def test_generate_default_length(self):
        """Codes have the configured length and base62 alphabet."""
        generator = ShortCodeGenerator()

        code = generator.generate()
        assert len(code) == 7
        assert generator.is_valid_format(code)

    def test_generate_custom_length(self):
        """Test code with custom length."""
        generator = ShortCodeGenerator(length=10)

        code = generator.generate()
        assert len(code) == 10
        assert generator.is_valid_format(code)

    def test_codes_do_not_repeat(self):
        """Successive codes from one generator are distinct."""
        generator = ShortCodeGenerator(length=4, seed=1)

        codes = [generator.generate() for _ in range(20000)]
        assert len(set(codes)) == len(codes)
        assert generator.issued == 20000

    def test_same_seed_same_sequence(self):
        """Seeded generators are reproducible."""
        first = ShortCodeGenerator(seed=42)
        second = ShortCodeGenerator(seed=42)

        assert [first.generate() for _ in range(5)] == [second.generate() for _ in range(5)]

    def test_different_seeds_differ(self):
        """Different seeds give different sequences."""
        first = ShortCodeGenerator(seed=1)
        second = ShortCodeGenerator(seed=2)

        assert [first.generate() for _ in range(5)] != [second.generate() for _ in range(5)]

    def test_exhaustion_raises(self):
        """Every code in a tiny space is issued once, then generation fails."""
        generator = ShortCodeGenerator(length=1, seed=3)

        codes = {generator.generate() for _ in range(62)}
        assert codes == set(ShortCodeGenerator.BASE62_CHARS)

        with pytest.raises(GenerationError, match="exhausted"):
            generator.generate()

    @pytest.mark.parametrize("length", [0, -1, None])
    def test_invalid_length(self, length):
        """Misconfiguration surfaces as GenerationError."""
        with pytest.raises(GenerationError):
            ShortCodeGenerator(length=length)

    def test_thread_safe_generation(self):
        """Concurrent callers never receive the same code."""
        generator = ShortCodeGenerator(seed=99)

        def batch(_):
            return [generator.generate() for _ in range(500)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(batch, range(8)))

        codes = [code for chunk in results for code in chunk]
        assert len(codes) == 4000
        assert len(set(codes)) == 4000
        assert generator.issued == 4000

    def test_is_valid_format(self):
        """Test format validation."""
        assert ShortCodeGenerator.is_valid_format("abc123")
        assert ShortCodeGenerator.is_valid_format("ABCxyz9")

        # Invalid formats
        assert not ShortCodeGenerator.is_valid_format("")
        assert not ShortCodeGenerator.is_valid_format("abc 123")
        assert not ShortCodeGenerator.is_valid_format("abc-123")
        assert not ShortCodeGenerator.is_valid_format("abc@123")
