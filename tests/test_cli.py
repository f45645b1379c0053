"""Tests for the command-line interface."""

import json

import pytest

from conftest import make_document
from processor_codegen.cli import main


@pytest.fixture
def document_file(tmp_path, onvopay_document):
    path = tmp_path / "onvopay.json"
    path.write_text(json.dumps(onvopay_document), encoding="utf-8")
    return path


class TestGenerateCommand:
    def test_json_envelope(self, document_file, output_root, capsys):
        exit_code = main(
            ["generate", str(document_file), "--output-root", str(output_root), "--json"]
        )
        envelope = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert envelope["success"] is True
        assert envelope["generatedFiles"] == ["OnvoPayPayIn.java", "dto/CreateCustomer.java"]
        assert (output_root / "onvopay" / "OnvoPayPayIn.java").is_file()

    def test_rich_output(self, document_file, output_root, capsys):
        exit_code = main(["generate", str(document_file), "--output-root", str(output_root)])
        out = capsys.readouterr().out
        assert exit_code == 0
        assert "OnvoPayPayIn.java" in out

    def test_base_package(self, document_file, output_root, capsys):
        main(
            [
                "generate",
                str(document_file),
                "--output-root",
                str(output_root),
                "--base-package",
                "com.acme",
                "--json",
            ]
        )
        assert json.loads(capsys.readouterr().out)["packageName"] == "com.acme.onvopay"

    def test_failure_exit_code(self, tmp_path, output_root, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(make_document(name="3Pay")), encoding="utf-8")
        exit_code = main(["generate", str(path), "--output-root", str(output_root), "--json"])
        envelope = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert envelope["error"] == "InvalidIdentifier"

    def test_missing_input_file(self, tmp_path, capsys):
        exit_code = main(["generate", str(tmp_path / "absent.json"), "--json"])
        envelope = json.loads(capsys.readouterr().out)
        assert exit_code == 1
        assert envelope["error"] == "FileNotFoundError"

    def test_config_file(self, document_file, tmp_path, capsys):
        config_path = tmp_path / "codegen.json"
        out_dir = tmp_path / "from-config"
        config_path.write_text(json.dumps({"output_root": str(out_dir)}), encoding="utf-8")
        exit_code = main(["generate", str(document_file), "--config", str(config_path), "--json"])
        assert exit_code == 0
        assert (out_dir / "onvopay" / "OnvoPayPayIn.java").is_file()

    def test_input_required(self):
        with pytest.raises(SystemExit):
            main(["generate"])


class TestContractCommand:
    def test_builtin_contract(self, capsys):
        assert main(["contract"]) == 0
        out = capsys.readouterr().out
        assert "createPayload" in out
        assert "threeDSVerify" in out

    def test_missing_contract_file(self, tmp_path, capsys):
        assert main(["contract", "--contract", str(tmp_path / "absent.json")]) == 1

    def test_malformed_contract_file(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"name": "X", "operations": ["createPayload"]}), encoding="utf-8")
        assert main(["contract", "--contract", str(path)]) == 1


def test_no_command(capsys):
    assert main([]) == 1
