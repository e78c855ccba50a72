import io
import os

import pytest

from minibash.shell import Shell, UserInfo, get_user_info, main


def _user(path):
    password = "password"
    return UserInfo(username="alice", password=password, hostname="host", current_path=str(path))


@pytest.fixture
def shell(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return Shell(_user(os.getcwd()), io.StringIO(), io.StringIO(), io.StringIO())


def test_get_user_info_reads_name_and_password():
    out = io.StringIO()
    info = get_user_info(io.StringIO("bob\npassword\n"), out)
    assert info.username == "bob"
    assert info.password == "password"
    assert info.current_path == os.getcwd()
    assert out.getvalue().startswith("Welcome to my Bash Shell!\n")
    assert "Enter username: " in out.getvalue()


def test_user_info_repr_hides_password():
    assert "password" not in repr(_user("/"))


def test_prompt_abbreviates_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    sh = Shell(_user(tmp_path / "sub"), io.StringIO(), io.StringIO(), io.StringIO())
    assert sh.prompt() == f"alice@host:~{os.sep}sub$ "


def test_prompt_outside_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    sh = Shell(_user(tmp_path), io.StringIO(), io.StringIO(), io.StringIO())
    assert sh.prompt() == f"alice@host:{tmp_path}$ "


def test_empty_line_continues(shell):
    assert shell.run_line("\n") is True
    assert shell.out.getvalue() == ""


def test_exit_ends_session(shell):
    assert shell.run_line("exit\n") is False
    assert shell.out.getvalue() == "logout\n"


def test_pwd_builtin(shell):
    shell.run_line("pwd")
    assert shell.out.getvalue() == os.getcwd() + "\n"


def test_cd_builtin_updates_path(shell, tmp_path):
    (tmp_path / "sub").mkdir()
    assert shell.run_line("cd sub") is True
    assert shell.current_path == os.getcwd()
    assert os.path.basename(shell.current_path) == "sub"


def test_ls_builtin(shell, tmp_path):
    (tmp_path / "visible").write_text("x")
    (tmp_path / ".secret_file").write_text("x")
    shell.run_line("ls")
    assert shell.out.getvalue().splitlines() == ["visible"]


def test_ls_all_builtin(shell, tmp_path):
    (tmp_path / ".dotfile").write_text("x")
    shell.run_line("ls -a")
    assert sorted(shell.out.getvalue().splitlines()) == sorted([".", "..", ".dotfile"])


def test_cat_builtin(shell, tmp_path):
    (tmp_path / "f.txt").write_text("content")
    shell.run_line("cat f.txt")
    assert shell.out.getvalue() == "content\n"


def test_external_command(shell):
    shell.run_line("echo from shell")
    assert shell.out.getvalue() == "from shell\n"


def test_exit_inside_sequence_ends_session(shell):
    assert shell.run_line("echo a ; exit") is False
    assert shell.out.getvalue().endswith("logout\n")


def test_run_stops_at_exit(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    sh = Shell(_user(os.getcwd()), io.StringIO("echo hi\nexit\nnot reached\n"), out, io.StringIO())
    assert sh.run() == 0
    assert "hi\n" in out.getvalue()
    assert out.getvalue().endswith("logout\n")
    assert "not reached" not in out.getvalue()


def test_run_stops_at_end_of_input(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    sh = Shell(_user(os.getcwd()), io.StringIO(""), out, io.StringIO())
    assert sh.run() == 0
    assert out.getvalue() == sh.prompt() + "\n"


def test_main_runs_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("carol\npassword\nexit\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured.startswith("Welcome to my Bash Shell!")
    assert "carol@" in captured
    assert captured.endswith("logout\n")