import os
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from rustdrill.exercise import (
    CLIPPY_CARGO_TOML_PATH,
    CompileError,
    ContextLine,
    Exercise,
    ExerciseOutput,
    Mode,
    RunError,
    clean,
    load_exercises,
    temp_file,
)

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"
PENDING_TEST = "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NO_EMOJI", raising=False)
    return tmp_path


def _exercise(directory, name, text, mode=Mode.COMPILE):
    path = directory / f"{name}.rs"
    path.write_text(text)
    return Exercise(name=name, path=path, mode=mode, hint="")


def _completed(args, returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(args, returncode, stdout, stderr)


def test_clean(workdir):
    Path(temp_file()).touch()
    exercise = _exercise(workdir, "example", PENDING)
    with mock.patch("subprocess.run", return_value=_completed([])):
        compiled = exercise.compile()
    assert Path(temp_file()).exists()
    compiled.close()
    assert not Path(temp_file()).exists()


def test_clean_without_file_is_silent(workdir):
    clean()
    assert not Path(temp_file()).exists()


def test_pending_state(workdir):
    exercise = _exercise(workdir, "pending_exercise", PENDING)
    expected = [
        ContextLine("// fake_exercise", 1, False),
        ContextLine("", 2, False),
        ContextLine("// I AM NOT DONE", 3, True),
        ContextLine("", 4, False),
        ContextLine("fn main() {", 5, False),
    ]
    assert exercise.state() == expected
    assert exercise.looks_done() is False


def test_pending_marker_on_first_line(workdir):
    exercise = _exercise(workdir, "pending_test_exercise", PENDING_TEST, Mode.TEST)
    state = exercise.state()
    assert [line.number for line in state] == [1, 2, 3]
    assert [line.important for line in state] == [True, False, False]


def test_finished_exercise(workdir):
    exercise = _exercise(workdir, "finished_exercise", FINISHED)
    assert exercise.state() == []
    assert exercise.looks_done() is True


def test_exercise_with_output(workdir):
    exercise = _exercise(workdir, "exercise_with_output", "#[test]\nfn passing() {}\n", Mode.TEST)

    def fake(args, **kwargs):
        if args[0] == "rustc":
            return _completed(args)
        return _completed(args, stdout=b"THIS TEST TOO SHALL PASS\n")

    with mock.patch("subprocess.run", side_effect=fake) as run:
        with exercise.compile() as compiled:
            out = compiled.run()
    assert "THIS TEST TOO SHALL PASS" in out.stdout
    assert run.call_args_list[0].args[0][:2] == ["rustc", "--test"]
    assert run.call_args_list[1].args[0] == [temp_file(), "--show-output"]


def test_compile_mode_arguments(workdir):
    exercise = _exercise(workdir, "comp", FINISHED)
    with mock.patch("subprocess.run", return_value=_completed([])) as run:
        exercise.compile().close()
    assert run.call_args.args[0] == [
        "rustc",
        str(exercise.path),
        "-o",
        temp_file(),
        "--color",
        "always",
    ]


def test_compile_failure_raises_and_cleans(workdir):
    Path(temp_file()).touch()
    exercise = _exercise(workdir, "compFailure", "fn main() {\n    let\n}\n")
    failing = _completed([], returncode=1, stdout=b"", stderr=b"expected pattern")
    with mock.patch("subprocess.run", return_value=failing):
        with pytest.raises(CompileError) as excinfo:
            exercise.compile()
    assert excinfo.value.output == ExerciseOutput(stdout="", stderr="expected pattern")
    assert not Path(temp_file()).exists()


def test_run_failure_raises(workdir):
    exercise = _exercise(workdir, "testNotPassed", FINISHED)

    def fake(args, **kwargs):
        if args[0] == "rustc":
            return _completed(args)
        return _completed(args, returncode=101, stdout=b"failed", stderr=b"panic")

    with mock.patch("subprocess.run", side_effect=fake) as run:
        with exercise.compile() as compiled:
            with pytest.raises(RunError) as excinfo:
                compiled.run()
    assert excinfo.value.output.stdout == "failed"
    assert excinfo.value.output.stderr == "panic"
    assert run.call_args.args[0] == [temp_file(), ""]


def test_clippy_writes_manifest(workdir):
    (workdir / "exercises" / "clippy").mkdir(parents=True)
    exercise = _exercise(workdir, "clippy1", FINISHED, Mode.CLIPPY)
    with mock.patch("subprocess.run", return_value=_completed([])) as run:
        exercise.compile().close()
    manifest = Path(CLIPPY_CARGO_TOML_PATH).read_text()
    assert 'name = "clippy1"' in manifest
    assert 'path = "clippy1.rs"' in manifest
    commands = [call.args[0][:2] for call in run.call_args_list]
    assert commands == [["rustc", str(exercise.path)], ["cargo", "clean"], ["cargo", "clippy"]]
    assert run.call_args.args[0][-4:] == ["-D", "warnings", "-D", "clippy::float_cmp"]


def test_clippy_manifest_write_failure(workdir):
    exercise = _exercise(workdir, "clippy1", FINISHED, Mode.CLIPPY)
    with mock.patch("subprocess.run", return_value=_completed([])):
        with pytest.raises(RuntimeError, match="Cargo.toml"):
            exercise.compile()


def test_load_exercises(workdir):
    (workdir / "info.toml").write_text(
        '[[exercises]]\nname = "testSuccess"\npath = "testSuccess.rs"\n'
        'mode = "test"\nhint = """"""\n\n'
        '[[exercises]]\nname = "testFailure"\npath = "testFailure.rs"\n'
        'mode = "compile"\nhint = "Hello!"\n'
    )
    exercises = load_exercises(workdir / "info.toml")
    assert [e.name for e in exercises] == ["testSuccess", "testFailure"]
    assert exercises[0].mode is Mode.TEST
    assert exercises[1].hint == "Hello!"
    assert str(exercises[1]) == "testFailure.rs"


def test_from_dict_rejects_unknown_mode():
    with pytest.raises(ValueError):
        Exercise.from_dict({"name": "x", "path": "x.rs", "mode": "build", "hint": ""})


def test_temp_file_is_process_specific():
    name = temp_file()
    assert name.startswith("./temp_")
    assert f"_{os.getpid()}_" in name