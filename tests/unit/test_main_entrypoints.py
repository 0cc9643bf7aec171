from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest
import typer
from typer.testing import CliRunner

from commonlib import main as main_mod
from commonlib.features import OperationResult
from commonlib.version import __version__

runner = CliRunner()


@pytest.mark.unit
def test_feature_or_exit_unknown():
    with pytest.raises(typer.Exit):
        main_mod._feature_or_exit("does-not-exist")


@pytest.mark.unit
def test_handle_cli_result_failure_raises_exit():
    with pytest.raises(typer.Exit):
        main_mod._handle_cli_result("run", OperationResult.fail("boom"))


@pytest.mark.unit
def test_setup_logging_levels():
    main_mod.setup_logging(debug=False, verbose=True)
    root = logging.getLogger()
    assert root.level == main_mod.VERBOSE_LEVEL
    assert isinstance(root.handlers[0].formatter, main_mod.ElapsedMsFormatter)
    assert logging.getLevelName(main_mod.VERBOSE_LEVEL) == "VERBOSE"
    main_mod.setup_logging(debug=True)
    assert root.level == logging.DEBUG
    main_mod.setup_logging()
    assert root.level == logging.INFO
    assert logging.getLogger("uvicorn").level == logging.WARNING


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("3", 3.0),
        ("-Infinity", float("-inf")),
        ("true", True),
        ('"quoted"', "quoted"),
        ('["a", "b"]', ["a", "b"]),
        ("plain", "plain"),
        ("two words", "two words"),
        ("", ""),
    ],
)
def test_parse_cli_argument(text, expected):
    assert main_mod.parse_cli_argument(text) == expected


@pytest.mark.unit
def test_cli_invoke():
    result = runner.invoke(main_mod.app, ["invoke", "arithmetic.modulo", "--", "-10", "3"])
    assert result.exit_code == 0
    assert result.stdout.strip().endswith("-1.0")

    result = runner.invoke(main_mod.app, ["invoke", "string.split", "a,,b", ","])
    assert result.exit_code == 0
    assert '["a", "", "b"]' in result.stdout

    result = runner.invoke(main_mod.app, ["invoke", "divide", "0", "0"])
    assert result.exit_code == 0
    assert "NaN" in result.stdout


@pytest.mark.unit
def test_cli_invoke_failures():
    assert runner.invoke(main_mod.app, ["invoke", "string.reverse", "abc"]).exit_code == 1
    assert runner.invoke(main_mod.app, ["invoke", "logical.not", "1"]).exit_code == 1


@pytest.mark.unit
def test_cli_run(tmp_path: Path):
    src = tmp_path / "program.cl"
    src.write_text(
        'let s = "Hello"\nprint "slice" string.substring(s, 1, 3)\nprint "inf" arithmetic.divide(1, 0)\n',
        encoding="utf-8",
    )
    result = runner.invoke(main_mod.app, ["run", str(src)])
    assert result.exit_code == 0
    assert 'slice="ell"' in result.stdout
    assert "inf=Infinity" in result.stdout

    assert runner.invoke(main_mod.app, ["run", str(tmp_path / "missing.cl")]).exit_code == 1

    broken = tmp_path / "broken.cl"
    broken.write_text("let = 1", encoding="utf-8")
    assert runner.invoke(main_mod.app, ["run", str(broken)]).exit_code == 1


@pytest.mark.unit
def test_cli_list_primitives_and_version():
    result = runner.invoke(main_mod.app, ["list-primitives"])
    assert result.exit_code == 0
    assert "All available primitives" in result.stdout
    assert "string.indexOf" in result.stdout
    assert "Available namespaces: arithmetic, comparison, logical, string" in result.stdout

    result = runner.invoke(main_mod.app, ["list-primitives", "comparison"])
    assert "Primitives in namespace 'comparison'" in result.stdout
    assert "lessThan" in result.stdout

    assert runner.invoke(main_mod.app, ["version"]).exit_code == 0


@pytest.mark.unit
def test_cli_conformance():
    result = runner.invoke(main_mod.app, ["conformance"])
    assert result.exit_code == 0
    assert "conformance cases passed" in result.stdout
    assert "FAIL" not in result.stdout

    result = runner.invoke(main_mod.app, ["conformance", "--namespace", "string", "--tolerance", "0.01"])
    assert result.exit_code == 0

    assert runner.invoke(main_mod.app, ["conformance", "--namespace", "geometry"]).exit_code == 1


@pytest.mark.unit
def test_cli_conformance_exits_nonzero_on_mismatch(monkeypatch: pytest.MonkeyPatch):
    def fake_handler(**kwargs):
        return OperationResult.ok(
            {
                "total": 2,
                "passed": 1,
                "failed": 1,
                "failures": [{"case": "arithmetic.add(1.0, 1.0)", "reason": "expected 3.0, got 2.0"}],
            }
        )

    monkeypatch.setattr(
        main_mod,
        "_feature_or_exit",
        lambda _name: SimpleNamespace(handler=fake_handler),
    )
    result = runner.invoke(main_mod.app, ["conformance"])
    assert result.exit_code == 1
    assert "FAIL arithmetic.add(1.0, 1.0): expected 3.0, got 2.0" in result.stdout
    assert "1/2 conformance cases passed" in result.stdout


@pytest.mark.unit
def test_serve_runs_uvicorn(monkeypatch: pytest.MonkeyPatch):
    captured: dict[str, object] = {}
    monkeypatch.setattr(main_mod.uvicorn, "run", lambda app, host, port: captured.update(app=app, host=host, port=port))
    result = runner.invoke(main_mod.app, ["serve", "--port", "9001"])
    assert result.exit_code == 0
    assert captured == {"app": main_mod.api_app, "host": "127.0.0.1", "port": 9001}


@pytest.mark.unit
def test_api_version_and_primitives(api_client):
    version_resp = api_client.get("/api/v1/version")
    assert version_resp.status_code == 200
    assert version_resp.json() == {"version": __version__}

    primitives_resp = api_client.get("/api/v1/primitives", params={"namespace": "logical"})
    assert primitives_resp.status_code == 200
    assert sorted(primitives_resp.json()["primitives"]) == ["and", "not", "or"]

    assert api_client.get("/api/v1/primitives", params={"namespace": "geometry"}).status_code == 400


@pytest.mark.unit
def test_api_invoke_encodes_special_floats(api_client):
    resp = api_client.post("/api/v1/invoke", json={"primitive": "arithmetic.divide", "arguments": [-1, 0]})
    assert resp.status_code == 200
    assert resp.json() == {
        "primitive": "arithmetic.divide",
        "result_type": "number",
        "result": {"$float": "-Infinity"},
    }

    resp = api_client.post(
        "/api/v1/invoke",
        json={"primitive": "comparison.equal", "arguments": [{"$float": "NaN"}, {"$float": "NaN"}]},
    )
    assert resp.json()["result"] is False

    resp = api_client.post(
        "/api/v1/invoke",
        json={"primitive": "arithmetic.multiply", "arguments": [{"$float": "-0.0"}, 1]},
    )
    assert resp.json()["result"] == {"$float": "-0.0"}


@pytest.mark.unit
def test_api_invoke_errors(api_client):
    bad_type = api_client.post("/api/v1/invoke", json={"primitive": "string.length", "arguments": [5]})
    assert bad_type.status_code == 400
    assert "must be text" in bad_type.json()["detail"]

    bad_tag = api_client.post("/api/v1/invoke", json={"primitive": "arithmetic.add", "arguments": [{"$float": "Huge"}, 1]})
    assert bad_tag.status_code == 400
    assert "Unknown special float tag" in bad_tag.json()["detail"]

    unknown = api_client.post("/api/v1/invoke", json={"primitive": "nope", "arguments": []})
    assert unknown.status_code == 400


@pytest.mark.unit
def test_api_run_and_conformance(api_client):
    run_resp = api_client.post(
        "/api/v1/run",
        json={"program": 'let parts = string.split("a,,b", ",")\nprint "parts" parts\nprint "z" arithmetic.modulo(5, 0)'},
    )
    assert run_resp.status_code == 200
    assert run_resp.json()["printed"] == [
        {"label": "parts", "value": ["a", "", "b"]},
        {"label": "z", "value": {"$float": "NaN"}},
    ]

    bad_run = api_client.post("/api/v1/run", json={"program": "print"})
    assert bad_run.status_code == 400
    assert bad_run.json()["detail"].startswith("Syntax error")

    conformance_resp = api_client.get("/api/v1/conformance", params={"namespace": "arithmetic"})
    assert conformance_resp.status_code == 200
    body = conformance_resp.json()
    assert body["failed"] == 0
    assert body["namespace_filter"] == "arithmetic"


@pytest.mark.unit
def test_api_invoke_with_oversized_integer(api_client):
    resp = api_client.post("/api/v1/invoke", json={"primitive": "arithmetic.add", "arguments": [10**400, 1]})
    assert resp.status_code == 200
    assert resp.json()["result"] == {"$float": "Infinity"}
