import sys

import pytest

from composekit.cmd import CommandError, get_cmd_output, run_command


def test_get_cmd_output_returns_stdout():
    out = get_cmd_output([sys.executable, "-c", "print('hello')"], "say hello")
    assert out.strip() == "hello"


def test_get_cmd_output_uses_cwd(tmp_path):
    out = get_cmd_output(
        [sys.executable, "-c", "import os; print(os.getcwd())"], "print cwd", cwd=tmp_path
    )
    assert out.strip() == str(tmp_path.resolve()) or out.strip() == str(tmp_path)


def test_get_cmd_output_failure_raises():
    with pytest.raises(CommandError) as info:
        get_cmd_output([sys.executable, "-c", "import sys; sys.exit(3)"], "exit badly")
    assert info.value.returncode == 3
    assert info.value.desc == "exit badly"
    assert str(info.value).startswith("exit badly failed")


def test_run_command_success_writes_file(tmp_path):
    target = tmp_path / "marker.txt"
    run_command(
        [sys.executable, "-c", f"open({str(target)!r}, 'w').write('x')"], "write marker"
    )
    assert target.read_text() == "x"


def test_run_command_failure_raises():
    with pytest.raises(CommandError) as info:
        run_command([sys.executable, "-c", "import sys; sys.exit(5)"], "fail")
    assert info.value.returncode == 5


def test_desc_is_stringified():
    with pytest.raises(CommandError) as info:
        run_command([sys.executable, "-c", "import sys; sys.exit(1)"], 42)
    assert info.value.desc == "42"