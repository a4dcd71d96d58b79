from constants import DEFAULT_BASE_URL, DEFAULT_CARD_ID
from state import CLIState


def test_environment_values_win():
    state = CLIState.from_environment(
        {"BASE_URL": "http://localhost:9000", "AUTH_TOKEN": "tok", "CARD_ID": "123"}
    )
    assert state.base_url == "http://localhost:9000"
    assert state.token == "tok"
    assert state.card_id == "123"
    assert state.quiet is False


def test_empty_values_fall_back_to_defaults(capsys):
    state = CLIState.from_environment({"BASE_URL": "", "CARD_ID": ""}, quiet=True)
    assert state.base_url == DEFAULT_BASE_URL
    assert state.card_id == DEFAULT_CARD_ID
    assert state.token == ""
    assert state.quiet is True
    assert "AUTH_TOKEN not set" in capsys.readouterr().err


def test_no_warning_when_token_present(capsys):
    CLIState.from_environment({"AUTH_TOKEN": "tok"})
    assert capsys.readouterr().err == ""


def test_list_variables_masks_token(capsys):
    CLIState(token="super-secret-value").list_variables()
    out = capsys.readouterr().out
    assert "super-secret-value" not in out
    assert "alue" in out
