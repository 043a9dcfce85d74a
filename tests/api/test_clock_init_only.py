from __future__ import annotations

import pytest

from clockface import AnalogClock, FixedTimeSource, MissingAssetError, parse_time_of_day


@pytest.mark.io
# run_clock(init_only=True) は重依存（pyglet/moderngl）の import とウィンドウ生成の前に戻る。
def test_run_clock_init_only_headless() -> None:
    """`init_only=True` なら初期化済みの時計を返し、ウィンドウは作らない。"""
    from api import run_clock

    clock = run_clock(
        time_source=FixedTimeSource(parse_time_of_day("03:00:00")),
        init_only=True,
        config={},
    )
    assert isinstance(clock, AnalogClock)
    assert clock.is_ready
    assert clock.angles is not None
    assert clock.angles.hours == pytest.approx(90.0)


def test_run_alias_and_start_time() -> None:
    from api import run

    clock = run(start_time=6 * 3600, init_only=True, config={})
    assert clock.angles is not None
    assert clock.angles.hours == pytest.approx(180.0)


def test_run_clock_missing_asset_fails_before_window() -> None:
    from api import run_clock

    with pytest.raises(MissingAssetError):
        run_clock(init_only=False, config={"clock": {"assets": {"seconds_hand": "nope"}}})


def test_cli_init_only_prints_angles(capsys: pytest.CaptureFixture[str]) -> None:
    from api.__main__ import main

    rc = main(["--init-only", "--at", "03:00:30"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "hours=90.250" in out
    assert "minutes=1083.000" in out
    assert "seconds=64980.000" in out


def test_cli_rejects_bad_time() -> None:
    from api.__main__ import main

    with pytest.raises(SystemExit):
        main(["--init-only", "--at", "25:00"])


def test_cli_returns_2_on_clock_error(monkeypatch: pytest.MonkeyPatch) -> None:
    import api.clock as clock_mod
    from api.__main__ import main

    def _boom(**_kwargs):  # noqa: ANN003
        raise MissingAssetError(["hours_hand"])

    monkeypatch.setattr(clock_mod, "run_clock", _boom)
    assert main(["--init-only"]) == 2
