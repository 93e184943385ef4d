"""Unit tests for SetOptions."""

from __future__ import annotations

import pytest

from esl.cache import SetOptions
from esl.cache.options import validate_ttl
from esl.kernel.errors import ValidationError


class TestTtlPresets:
    def test_values(self) -> None:
        assert SetOptions.TTL_FOREVER == 0
        assert SetOptions.TTL_MINUTE == 60
        assert SetOptions.TTL_HOUR == 3600
        assert SetOptions.TTL_DAY == 86400
        assert SetOptions.TTL_WEEK == 604800


class TestSetOptions:
    def test_defaults(self) -> None:
        options = SetOptions.create()
        assert options.ttl is None
        assert options.tags == []

    def test_chaining(self) -> None:
        options = SetOptions.create().set_ttl(60).add_tag("price").add_tags(["stock", "brand"])
        assert options.ttl == 60
        assert options.tags == ["price", "stock", "brand"]

    def test_tags_keep_insertion_order(self) -> None:
        options = SetOptions.create().add_tags(["b", "a"])
        assert options.tags == ["b", "a"]

    def test_duplicate_tag_rejected(self) -> None:
        options = SetOptions.create().add_tag("price")
        with pytest.raises(ValidationError, match="already set"):
            options.add_tag("price")

    def test_duplicate_in_add_tags_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SetOptions.create().add_tags(["a", "b", "a"])

    def test_tags_property_is_a_copy(self) -> None:
        options = SetOptions.create().add_tag("a")
        options.tags.append("b")
        assert options.tags == ["a"]

    def test_forever(self) -> None:
        assert SetOptions.create().set_ttl(SetOptions.TTL_FOREVER).ttl == 0


class TestValidateTtl:
    @pytest.mark.parametrize(("raw", "expected"), [(0, 0), (60, 60), (2.9, 2), ("120", 120), ("1.5", 1)])
    def test_accepts_numeric(self, raw: object, expected: int) -> None:
        assert validate_ttl(raw) == expected

    @pytest.mark.parametrize("raw", [-1, -0.5, "-10", "abc", None, True, [60], float("nan")])
    def test_rejects_invalid(self, raw: object) -> None:
        with pytest.raises(ValidationError, match="Invalid TTL"):
            validate_ttl(raw)

    @pytest.mark.parametrize("raw", [0.5, "0.9", 1e-9])
    def test_rejects_positive_below_one_second(self, raw: object) -> None:
        with pytest.raises(ValidationError, match="at least 1 second"):
            validate_ttl(raw)

    def test_zero_float_is_forever(self) -> None:
        assert validate_ttl(0.0) == SetOptions.TTL_FOREVER

    def test_set_ttl_rejects_negative(self) -> None:
        with pytest.raises(ValidationError):
            SetOptions.create().set_ttl(-1)
