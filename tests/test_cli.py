import pytest

from duolayout import __main__ as cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch) -> None:
    monkeypatch.setattr(cli, "setup_logging", lambda verbose=False: None)


def test_prints_side_by_side_layout(capsys) -> None:
    assert cli.main(["800", "240", "--layout", "side", "--swap"]) == 0

    out = capsys.readouterr().out
    assert "SideBySide" in out
    assert "Rect(400x240+360+0)" in out
    assert "Rect(320x240+40+0)" in out


def test_custom_layout_from_arguments(capsys) -> None:
    cli.main(["800", "480", "--layout", "custom", "--custom-top", "0,0,10,10"])

    out = capsys.readouterr().out
    assert "Custom" in out
    assert "Rect(10x10+0+0)" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["800", "480", "--layout", "diagonal"],
        ["0", "480"],
        ["800", "abc"],
        ["800", "480", "--custom-top", "1,2"],
    ],
)
def test_bad_arguments_exit(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.main(argv)
    assert exc.value.code == 2
