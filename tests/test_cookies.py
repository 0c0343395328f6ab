import pytest

from aocrun.cookies import get_session
from aocrun.cookies import prompt_for_session
from aocrun.exceptions import CredentialError


def test_session_from_env(monkeypatch, test_token):
    monkeypatch.setenv("AOC_SESSION", "fromenv\n")
    assert get_session(prompt=pytest.fail) == "fromenv"


def test_session_from_file(test_token):
    assert get_session(prompt=pytest.fail) == "thetesttoken"


def test_session_file_first_token_only(session_file):
    session_file.write_text("  abc123 \n# my aoc cookie\n")
    assert get_session(prompt=pytest.fail) == "abc123"


def test_empty_session_file(session_file):
    session_file.write_text("\n")
    with pytest.raises(CredentialError(f"session file {session_file} is empty")):
        get_session(prompt=pytest.fail)


def test_unreadable_session_file(session_file):
    session_file.mkdir()
    with pytest.raises(CredentialError):
        get_session(prompt=pytest.fail)


def test_prompted_session_is_persisted(mocker, session_file):
    prompt = mocker.Mock(return_value="newtoken\n")
    assert get_session(prompt=prompt) == "newtoken"
    prompt.assert_called_once_with()
    assert session_file.read_text() == "newtoken"
    # now that it's saved, nobody gets asked again
    assert get_session(prompt=pytest.fail) == "newtoken"


def test_explicit_path(tmp_path):
    path = tmp_path / "elsewhere" / "cookie"
    assert get_session(path=path, prompt=lambda: "tok") == "tok"
    assert path.read_text() == "tok"


def test_blank_prompt_is_not_persisted(session_file):
    with pytest.raises(CredentialError("Missing session ID")):
        get_session(prompt=lambda: "   ")
    assert not session_file.exists()


def test_prompt_for_session(mocker, capsys):
    mocker.patch("builtins.input", return_value="pasted")
    assert prompt_for_session() == "pasted"
    out, err = capsys.readouterr()
    assert "value of the 'session' cookie" in err


def test_prompt_for_session_eof(mocker, capsys):
    mocker.patch("builtins.input", side_effect=EOFError)
    assert prompt_for_session() == ""


def test_default_prompt_used(mocker, session_file):
    mocker.patch("aocrun.cookies.prompt_for_session", return_value="interactive")
    assert get_session() == "interactive"
    assert session_file.read_text() == "interactive"


def test_undecodable_session_file(session_file):
    session_file.write_bytes(b"\xff\xfe")
    with pytest.raises(CredentialError):
        get_session(prompt=pytest.fail)


@pytest.mark.parametrize("value", ["", "   ", "\n"])
def test_blank_env_session_falls_through_to_file(monkeypatch, test_token, value):
    monkeypatch.setenv("AOC_SESSION", value)
    assert get_session(prompt=pytest.fail) == "thetesttoken"
