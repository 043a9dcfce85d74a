from __future__ import annotations

import pytest

from common.base_registry import BaseRegistry


def test_register_and_get_with_normalization() -> None:
    reg = BaseRegistry()

    @reg.register(None)
    def HourTick():  # noqa: N802 (テスト用)
        return 1

    assert reg.is_registered("hour_tick")
    assert reg.get("HourTick") is HourTick
    assert "hour_tick" in reg.list_all()


def test_duplicate_registration_rules() -> None:
    reg = BaseRegistry()

    @reg.register(None)
    def sample():  # noqa: ANN001 - テスト用
        return 1

    with pytest.raises(ValueError):
        reg.register("sample")(lambda: 2)

    # 同一オブジェクトの再登録は許容
    reg.register("Sample")(sample)
    assert reg.list_all() == ["sample"]


def test_key_normalization_hyphen_to_snake() -> None:
    reg = BaseRegistry()

    @reg.register("minute-tick")
    def fn():  # noqa: ANN001 - テスト用
        return 0

    assert reg.get("minute_tick") is fn
    # ハイフン→アンダースコア + キャメル→スネークの合成で二重 '_' になる
    assert BaseRegistry.normalize_key("My-Mark") == "my__mark"


def test_invalid_keys_and_missing_lookup() -> None:
    reg = BaseRegistry()
    with pytest.raises(ValueError):
        reg.normalize_key("  ")
    with pytest.raises(TypeError):
        reg.normalize_key(3)  # type: ignore[arg-type]
    with pytest.raises(KeyError):
        reg.get("missing")

