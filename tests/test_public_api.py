"""Tests for the package-level operations."""

import pytest

import idcn
from idcn.idcard import get_default_generator


class TestPublicApi:
    """End-to-end checks through the idcn namespace."""

    def test_is_valid(self):
        assert idcn.is_valid("110101199003077758") is True
        assert idcn.is_valid("12345") is False

    def test_validate_raises_kinds(self):
        with pytest.raises(idcn.InvalidLengthError):
            idcn.validate("12345")
        with pytest.raises(idcn.InvalidFormatError):
            idcn.validate("a10101199003077758")

    def test_validate_safe(self):
        assert idcn.validate_safe("110101199003077750") == (False, idcn.ErrorKind.INVALID_CHECKSUM)

    def test_resolve_area(self):
        assert idcn.resolve_area("110101") == idcn.Area("北京市", "北京市", "东城区")
        assert idcn.resolve_area("310000") == idcn.Area("上海市", "", "")
        assert idcn.resolve_area("110103") == idcn.Area("北京市", "北京市", "崇文区")

        with pytest.raises(idcn.UnknownRegionError):
            idcn.resolve_area("999999")

    def test_upgrade_round_trip(self):
        upgraded = idcn.upgrade_to_18("110101900307775")
        assert len(upgraded) == 18
        assert idcn.is_valid(upgraded)
        assert idcn.upgrade_to_18(upgraded) == upgraded

    def test_generate_and_extract(self):
        number = idcn.generate(idcn.GenerationConstraints(eighteen=True, birthday="19900815", sex=1))
        info = idcn.extract_info(number)

        assert info.birthday == "1990-08-15"
        assert info.sex == 1

    def test_fake_id(self):
        for _ in range(20):
            number = idcn.fake_id()
            assert len(number) == 18
            assert idcn.is_valid(number)

    def test_default_generator_seed(self, monkeypatch):
        monkeypatch.setenv("IDCN_GENERATOR_SEED", "99")
        get_default_generator.cache_clear()
        try:
            assert get_default_generator().seed == 99
        finally:
            get_default_generator.cache_clear()

    def test_version(self):
        assert idcn.__version__
