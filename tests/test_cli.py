"""End-to-end tests of the tasklist command."""

import json

from click.testing import CliRunner

from tasklist.cli import main
from tasklist.version import VERSION


def invoke(*lines, env=None):
    runner = CliRunner()
    return runner.invoke(main, [], input="".join(f"{line}\n" for line in lines), env=env)


class TestCli:
    """Test the tasklist command."""

    def test_version(self):
        """Test --version."""
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert VERSION in result.output

    def test_session_persists_on_end(self, tmp_path):
        """Test tasks added in one run are loaded by the next."""
        result = invoke("add", "C", "2030-1-2", "3:4", "Ship it", "", "end")
        assert result.exit_code == 0, result.output
        assert "Tasklist exiting!" in result.output

        data = json.loads((tmp_path / "tasklist.json").read_text(encoding="utf-8"))
        assert data == [{"description": "Ship it", "dueDate": "2030-01-02", "dueTime": "03:04", "priority": "C"}]

        result = invoke("print", "end")
        assert result.exit_code == 0, result.output
        assert "| 1  | 2030-01-02 | 03:04 | C | I |" + "Ship it".ljust(44) + "|" in result.output

    def test_interrupt_discards_changes(self, tmp_path):
        """Test running out of input before end saves nothing."""
        result = invoke("add", "C", "2030-1-2", "3:4", "Ship it", "")
        assert result.exit_code == 1
        assert "unsaved changes were discarded" in result.output
        assert not (tmp_path / "tasklist.json").exists()

    def test_corrupt_file(self, tmp_path):
        """Test a corrupt task file stops the program with a diagnostic."""
        path = tmp_path / "tasklist.json"
        path.write_text("[{", encoding="utf-8")
        result = invoke("end")
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "tasklist.json" in result.output
        assert path.read_text(encoding="utf-8") == "[{"

    def test_custom_file(self, tmp_path):
        """Test TASKLIST_FILE selects the task file."""
        target = tmp_path / "other.json"
        result = invoke("add", "l", "2030-01-01", "10:00", "Elsewhere", "", "end",
                        env={"TASKLIST_FILE": str(target)})
        assert result.exit_code == 0, result.output
        assert json.loads(target.read_text(encoding="utf-8"))[0]["description"] == "Elsewhere"
        assert not (tmp_path / "tasklist.json").exists()

    def test_unwritable_log_dir(self, tmp_path):
        """Test the session still runs when the log directory cannot be created."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        result = invoke("print", "end", env={"TASKLIST_LOG_DIR": str(blocker / "logs")})
        assert result.exit_code == 0, result.output
        assert "No tasks have been input" in result.output
        assert "Tasklist exiting!" in result.output

    def test_forced_color(self):
        """Test TASKLIST_COLOR=always draws coloured cells."""
        result = invoke("add", "H", "2030-1-1", "10:00", "Bright", "", "print", "end",
                        env={"TASKLIST_COLOR": "always"})
        assert result.exit_code == 0, result.output
        assert "\u001b[103m \u001b[0m" in result.output

    def test_save_failure(self, tmp_path):
        """Test an unwritable destination is reported on end."""
        result = invoke("end", env={"TASKLIST_FILE": str(tmp_path / "missing" / "tasklist.json")})
        assert result.exit_code == 1
        assert "Error:" in result.output
