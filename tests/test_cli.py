"""CLI tests — commands, output and the exit-code contract.

Code  Meaning
----  -------
  0   Success — schema correct / instance valid
  1   Violation — schema incorrect / instance invalid
  2   Error — usage error, missing file, depth limit exceeded
"""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from jsl.__main__ import main
from jsl.utils.exit_codes import ExitCode

REPO_ROOT = Path(__file__).resolve().parents[1]

PERSON = {
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "number"},
        "phones": {"elements": {"type": "string"}},
    }
}


def _write(tmp_path: Path, name: str, data: object) -> Path:
    p = tmp_path / name
    p.write_text(json.dumps(data), encoding="utf-8")
    return p


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("JSL_MAX_ERRORS", "JSL_MAX_DEPTH", "JSL_STRICT"):
        monkeypatch.delenv(name, raising=False)


class TestVerifyCommand:
    def test_correct_schema(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        schema = _write(tmp_path, "s.json", PERSON)
        assert main(["verify", str(schema)]) == ExitCode.SUCCESS
        assert capsys.readouterr().out.strip() == "OK"

    def test_incorrect_schema(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        schema = _write(tmp_path, "s.json", {"enum": ["a", "a"]})
        assert main(["verify", str(schema)]) == ExitCode.VIOLATION
        assert "repeated enum value: a" in capsys.readouterr().err

    def test_malformed_schema_is_error(self, tmp_path: Path) -> None:
        schema = _write(tmp_path, "s.json", {"type": 3})
        assert main(["verify", str(schema)]) == ExitCode.ERROR

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["verify", str(tmp_path / "nope.json")]) == ExitCode.ERROR
        assert "ERROR" in capsys.readouterr().err

    def test_yaml_schema(self, tmp_path: Path) -> None:
        p = tmp_path / "s.yaml"
        p.write_text("values:\n  type: timestamp\n", encoding="utf-8")
        assert main(["verify", str(p)]) == ExitCode.SUCCESS


class TestValidateCommand:
    def test_valid_instance(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        schema = _write(tmp_path, "s.json", PERSON)
        inst = _write(tmp_path, "i.json", {"name": "J", "age": 1, "phones": []})
        assert main(["validate", str(schema), str(inst)]) == ExitCode.SUCCESS
        assert capsys.readouterr().out.strip() == "OK"

    def test_invalid_instance_lines(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        schema = _write(tmp_path, "s.json", PERSON)
        inst = _write(tmp_path, "i.json", {"age": "43", "phones": ["+44", 44]})
        assert main(["validate", str(schema), str(inst), "--sort"]) == ExitCode.VIOLATION
        out = capsys.readouterr()
        assert out.out.splitlines() == [
            "/age\t/properties/age/type",
            "/\t/properties/name",
            "/phones/1\t/properties/phones/elements/type",
        ]
        assert "3 validation error(s)" in out.err

    def test_json_output(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        schema = _write(tmp_path, "s.json", {"elements": {"type": "boolean"}})
        inst = _write(tmp_path, "i.json", [None] * 5)
        rc = main(["validate", str(schema), str(inst), "--json", "--max-errors", "3"])
        assert rc == ExitCode.VIOLATION
        obj = json.loads(capsys.readouterr().out)
        assert obj["valid"] is False
        assert [e["instancePath"] for e in obj["errors"]] == ["/0", "/1", "/2"]

    def test_strict_flag(self, tmp_path: Path) -> None:
        schema = _write(tmp_path, "s.json", {"properties": {}})
        inst = _write(tmp_path, "i.json", {"extra": True})
        assert main(["validate", str(schema), str(inst)]) == ExitCode.SUCCESS
        assert main(["validate", str(schema), str(inst), "--strict"]) == ExitCode.VIOLATION

    def test_strict_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JSL_STRICT", "1")
        schema = _write(tmp_path, "s.json", {"properties": {}})
        inst = _write(tmp_path, "i.json", {"extra": True})
        assert main(["validate", str(schema), str(inst)]) == ExitCode.VIOLATION

    def test_max_depth_exceeded_is_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        schema = _write(tmp_path, "s.json", {"definitions": {"": {"ref": ""}}, "ref": ""})
        inst = _write(tmp_path, "i.json", None)
        assert main(["validate", str(schema), str(inst), "--max-depth", "3"]) == ExitCode.ERROR
        assert "maximum evaluation depth exceeded" in capsys.readouterr().err

    def test_unbounded_cycle_is_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        schema = _write(tmp_path, "s.json", {"definitions": {"": {"ref": ""}}, "ref": ""})
        inst = _write(tmp_path, "i.json", None)
        assert main(["validate", str(schema), str(inst)]) == ExitCode.ERROR
        assert "--max-depth" in capsys.readouterr().err

    def test_yaml_instance_with_integer_keys_is_error(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        schema = _write(tmp_path, "s.json", {"values": {"type": "string"}})
        inst = tmp_path / "i.yaml"
        inst.write_text("1: true\n", encoding="utf-8")
        assert main(["validate", str(schema), str(inst)]) == ExitCode.ERROR
        assert "non-string key" in capsys.readouterr().err

    def test_incorrect_schema_is_violation(self, tmp_path: Path) -> None:
        schema = _write(tmp_path, "s.json", {"ref": "missing"})
        inst = _write(tmp_path, "i.json", {})
        assert main(["validate", str(schema), str(inst)]) == ExitCode.VIOLATION

    def test_bad_env_config_is_error(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JSL_MAX_ERRORS", "many")
        schema = _write(tmp_path, "s.json", {})
        inst = _write(tmp_path, "i.json", {})
        assert main(["validate", str(schema), str(inst)]) == ExitCode.ERROR


class TestFormCommand:
    def test_prints_form(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        schema = _write(tmp_path, "s.json", {"discriminator": {"tag": "t", "mapping": {}}})
        assert main(["form", str(schema)]) == ExitCode.SUCCESS
        assert capsys.readouterr().out.strip() == "discriminator"


class TestUsage:
    def test_no_command(self) -> None:
        assert main([]) == ExitCode.ERROR

    def test_unknown_command(self) -> None:
        assert main(["frobnicate"]) == ExitCode.ERROR

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--version"]) == ExitCode.SUCCESS
        assert "0.1.0" in capsys.readouterr().out


def test_python_dash_m_entrypoint(tmp_path: Path) -> None:
    """``python -m jsl`` runs the same CLI in a subprocess."""
    schema = _write(tmp_path, "s.json", {"type": "uint8"})
    inst = _write(tmp_path, "i.json", 256)

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO_ROOT / "src") + (
        os.pathsep + env["PYTHONPATH"] if env.get("PYTHONPATH") else ""
    )
    r = subprocess.run(
        [sys.executable, "-m", "jsl", "validate", str(schema), str(inst), "--json"],
        capture_output=True,
        text=True,
        env=env,
    )
    assert r.returncode == ExitCode.VIOLATION, r.stderr
    assert json.loads(r.stdout)["errors"] == [{"instancePath": "", "schemaPath": "/type"}]
