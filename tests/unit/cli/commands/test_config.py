"""Tests for the config command."""

import pytest
from click.testing import CliRunner

from tfslint.cli.main import cli


@pytest.fixture
def runner(restore_root_logger):
    return CliRunner()


@pytest.mark.unit
class TestConfigCommand:

    def test_init_writes_default_file(self, runner, in_temp_dir, clean_environment):
        result = runner.invoke(cli, ["config", "--init"], obj={})

        assert result.exit_code == 0
        assert (in_temp_dir / "tfslint.toml").is_file()

    def test_init_refuses_existing_file(self, runner, in_temp_dir, clean_environment):
        (in_temp_dir / "tfslint.toml").write_text("")

        result = runner.invoke(cli, ["config", "--init"], obj={})

        assert result.exit_code == 3
        assert runner.invoke(cli, ["config", "--init", "--force"], obj={}).exit_code == 0

    def test_show(self, runner, in_temp_dir, clean_environment):
        (in_temp_dir / "tfslint.toml").write_text('[analyzer]\nsrc_root = "code"\n')

        result = runner.invoke(cli, ["config", "--show"], obj={})

        assert result.exit_code == 0
        assert "analyzer" in result.output
        assert "code" in result.output

    def test_export_uses_global_config_option(self, runner, temp_dir, in_temp_dir, clean_environment):
        config_file = temp_dir / "custom.toml"
        config_file.write_text('[analyzer]\nfile_extension = ".vb"\n')
        export_file = temp_dir / "exported.toml"

        result = runner.invoke(
            cli, ["--config", str(config_file), "config", "--export", str(export_file)], obj={}
        )

        assert result.exit_code == 0
        assert 'file_extension = ".vb"' in export_file.read_text()
