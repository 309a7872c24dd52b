import pytest

from micemen import Action, ScriptedInputHandler
from scripts import play


def test_build_config_applies_cli_overrides(tmp_path) -> None:
    cfg_path = tmp_path / "game.yaml"
    cfg_path.write_text("mice_per_player: 6\n")
    args = play.build_parser().parse_args(["--config", str(cfg_path), "--width", "21"])

    config = play.build_config(args)

    assert config.width == 21
    assert config.mice_per_player == 6


def test_main_reports_invalid_config(tmp_path, capsys) -> None:
    cfg_path = tmp_path / "game.yaml"
    cfg_path.write_text("min_walls: 9\nmax_walls: 2\n")

    assert play.main(["--config", str(cfg_path)]) == 2
    assert "Error:" in capsys.readouterr().err


def test_main_runs_game_until_quit(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        play, "KeyboardHandler", lambda: ScriptedInputHandler([Action.MOVE_RIGHT, Action.QUIT])
    )
    log_file = tmp_path / "logs" / "play.log"

    status = play.main(
        ["--config", str(tmp_path / "none.yaml"), "--seed", "4", "--no-color", "--log-file", str(log_file)]
    )

    assert status == 0
    assert "Thanks for playing Micemen!" in capsys.readouterr().out


@pytest.mark.parametrize("flag", ["--log-level", "--seed"])
def test_parser_rejects_bad_values(flag) -> None:
    with pytest.raises(SystemExit):
        play.build_parser().parse_args([flag, "loud"])
