import json

from click.testing import CliRunner

from namecraft import cli as cli_module
from namecraft.models import DomainAvailabilityResult


def test_score_command(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli_module.cli, ["--config", str(tmp_path / "none.yaml"), "score", "Zephyr"])
    assert result.exit_code == 0
    assert "10.0/10" in result.output


def test_check_command_writes_json(tmp_path, monkeypatch):
    async def fake_batch(self, names):
        return [DomainAvailabilityResult(primary_domain=f"{n}.com", base_name=n, available={".com": True})
                for n in names]

    monkeypatch.setattr(cli_module.AvailabilityService, "batch_check", fake_batch)
    output = tmp_path / "out.json"

    runner = CliRunner()
    result = runner.invoke(cli_module.cli, [
        "--config", str(tmp_path / "none.yaml"), "check", "zephyr", "lumina", "-o", str(output)
    ])

    assert result.exit_code == 0, result.output
    data = json.loads(output.read_text())
    assert [d["base_name"] for d in data] == ["zephyr", "lumina"]


def test_check_without_names(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli_module.cli, ["--config", str(tmp_path / "none.yaml"), "check"])
    assert result.exit_code == 0
    assert "No names provided" in result.output


def test_generate_rejects_bad_count(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli_module.cli, [
        "--config", str(tmp_path / "none.yaml"), "generate", "wind", "--count", "3"
    ])
    assert result.exit_code != 0
