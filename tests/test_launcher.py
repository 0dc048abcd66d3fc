import pytest

from pickle_launcher.constants import Step
from pickle_launcher.errors import (
    ConfigNotFound,
    MissingVideoFile,
    NoVideosEnabled,
    PlayerLaunchFailed,
)
from pickle_launcher.launcher import Launcher


@pytest.fixture
def mock_exec(mocker):
    mocker.patch("pickle_launcher.launcher.CAN_REPLACE_PROCESS", True)
    return mocker.patch("pickle_launcher.launcher.os.execvp")


def test_debug_prints_config_and_command(write_config, make_launcher, video_dir, capsys, mock_exec):
    config = write_config("video1=yes\nvideo2=no\nvideo3=yes\n")
    launcher = make_launcher(config)

    assert launcher.run(debug=True) == 0

    out = capsys.readouterr().out
    assert out.splitlines()[:6] == [
        f"=== Contents of {config} ===",
        "video1=yes",
        "video2=no",
        "video3=yes",
        "==========================",
        "",
    ]
    assert "DEBUG MODE: Pickle would start with:" in out
    assert f"  -l  --hw  {video_dir / 'video1.mp4'}  {video_dir / 'video3.mp4'}" in out
    assert launcher.step == Step.DONE
    mock_exec.assert_not_called()


def test_debug_adds_newline_after_unterminated_config(write_config, make_launcher, capsys, mock_exec):
    launcher = make_launcher(write_config("video1=yes"))

    launcher.run(debug=True)

    assert "video1=yes\n==========================" in capsys.readouterr().out


def test_debug_never_checks_video_files(write_config, make_launcher, mocker, mock_exec):
    validate = mocker.patch("pickle_launcher.launcher.Launcher._validate_files")
    launcher = make_launcher(write_config("video1=yes\nvideo2=yes\n"))

    assert launcher.run(debug=True) == 0
    validate.assert_not_called()


@pytest.mark.parametrize("debug", [True, False])
def test_no_enabled_videos_fails_in_both_modes(write_config, make_launcher, capsys, mock_exec, debug):
    launcher = make_launcher(write_config("video1=no\nvolume=yes\n"))

    with pytest.raises(NoVideosEnabled):
        launcher.run(debug=debug)

    assert launcher.step == Step.FAILED
    assert capsys.readouterr().out == ""
    mock_exec.assert_not_called()


def test_missing_config(tmp_path, make_launcher, capsys, mock_exec):
    launcher = make_launcher(tmp_path / "pickle.conf")

    with pytest.raises(ConfigNotFound):
        launcher.run()

    assert capsys.readouterr().out == ""
    mock_exec.assert_not_called()


def test_missing_video_file_names_first_missing(write_config, make_launcher, video_dir, mock_exec):
    (video_dir / "video1.mp4").write_bytes(b"")
    launcher = make_launcher(write_config("video1=yes\nvideo2=yes\nvideo3=yes\n"))

    with pytest.raises(MissingVideoFile) as excinfo:
        launcher.run()

    assert excinfo.value.path == video_dir / "video2.mp4"
    assert excinfo.value.message == f"Missing video file: {video_dir / 'video2.mp4'}"
    mock_exec.assert_not_called()


def test_run_execs_player(write_config, make_launcher, tmp_path, video_dir, capsys, mock_exec):
    for name in ("video1.mp4", "video3.mp4"):
        (video_dir / name).write_bytes(b"")
    launcher = make_launcher(write_config("video1=yes\nvideo2=no\nvideo3=yes\n"))

    launcher.run()

    player = str(tmp_path / "pickle")
    mock_exec.assert_called_once_with(player, [
        player,
        "-l",
        "--hw",
        str(video_dir / "video1.mp4"),
        str(video_dir / "video3.mp4"),
    ])
    assert capsys.readouterr().out.startswith("Starting Pickle with:\n")


def test_run_single_video_has_no_hw_flag(write_config, make_launcher, video_dir, mock_exec):
    (video_dir / "video7.mp4").write_bytes(b"")
    launcher = make_launcher(write_config("video7=yes\n"))

    launcher.run()

    argv = mock_exec.call_args[0][1]
    assert argv[1:] == ["-l", str(video_dir / "video7.mp4")]


def test_bare_player_name_is_looked_up_on_path(write_config, video_dir, mock_exec):
    (video_dir / "video1.mp4").write_bytes(b"")
    launcher = Launcher(write_config("video1=yes\n"), video_dir, "pickle")

    launcher.run()

    mock_exec.assert_called_once_with("pickle", ["pickle", "-l", str(video_dir / "video1.mp4")])


def test_exec_failure_raises_player_launch_failed(write_config, make_launcher, video_dir, mock_exec):
    (video_dir / "video1.mp4").write_bytes(b"")
    mock_exec.side_effect = FileNotFoundError(2, "No such file or directory")
    launcher = make_launcher(write_config("video1=yes\n"))

    with pytest.raises(PlayerLaunchFailed) as excinfo:
        launcher.run()

    assert excinfo.value.exit_code == 127
    assert "No such file or directory" in excinfo.value.message


def test_without_exec_spawns_and_returns_exit_code(write_config, make_launcher, video_dir, mocker):
    (video_dir / "video1.mp4").write_bytes(b"")
    mocker.patch("pickle_launcher.launcher.CAN_REPLACE_PROCESS", False)
    execvp = mocker.patch("pickle_launcher.launcher.os.execvp")
    call = mocker.patch("pickle_launcher.launcher.subprocess.call", return_value=3)
    launcher = make_launcher(write_config("video1=yes\n"))

    assert launcher.run() == 3
    execvp.assert_not_called()
    call.assert_called_once()
    assert launcher.step == Step.DONE
