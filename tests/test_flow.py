import pytest

from commands.flow import run_all
from utils.errors import HTTPStatusError, StepError

VERIFY_OK = {"response": {"success": True, "percentage": "99", "status": 1, "id_Log": "L"}}


def test_run_all_happy_path(fake_api, state, jpg_image, capsys):
    fake_api.queue(404).queue(201, {"ok": True}).queue(200, VERIFY_OK).queue(200)

    steps = run_all(state, jpg_image, "7", "Ana", "{'guia':'654321'}")

    assert steps == ["preclean", "create", "verify", "delete"]
    assert fake_api.methods == ["DELETE", "POST", "POST", "DELETE"]
    assert fake_api.calls[1]["json"]["consentTermSigned"] is True
    assert fake_api.calls[2]["url"].endswith("/api/card/integration/verify")
    assert "✅ full flow complete: preclean → create → verify → delete" in capsys.readouterr().out


def test_run_all_without_preclean(fake_api, state, jpg_image, capsys):
    fake_api.queue(201).queue(200, VERIFY_OK).queue(204)

    steps = run_all(state, jpg_image, "7", "Ana", "", preclean=False)

    assert steps == ["create", "verify", "delete"]
    assert fake_api.methods == ["POST", "POST", "DELETE"]
    assert "✅ full flow complete: create → verify → delete" in capsys.readouterr().out


def test_run_all_stops_at_verify_failure(fake_api, state, jpg_image, capsys):
    fake_api.queue(200).queue(201).queue(500, b"verify exploded")

    with pytest.raises(StepError) as excinfo:
        run_all(state, jpg_image, "7", "Ana", "")

    assert excinfo.value.step == "verify"
    assert isinstance(excinfo.value.cause, HTTPStatusError)
    # preclean and create ran, the final delete did not
    assert fake_api.methods == ["DELETE", "POST", "POST"]
    assert "full flow complete" not in capsys.readouterr().out


def test_run_all_preclean_failure_is_fatal(fake_api, state, jpg_image):
    fake_api.queue(503)
    with pytest.raises(StepError, match="preclean failed"):
        run_all(state, jpg_image, "7", "Ana", "")
    assert fake_api.methods == ["DELETE"]


def test_run_all_reports_missing_image_at_create(fake_api, state, tmp_path):
    fake_api.queue(404)
    with pytest.raises(StepError) as excinfo:
        run_all(state, tmp_path / "missing.jpg", "7", "Ana", "")
    assert excinfo.value.step == "create"
    assert fake_api.methods == ["DELETE"]
