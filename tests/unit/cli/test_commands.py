"""Tests for CLI commands against a temporary data directory."""

import json

import pytest
from typer.testing import CliRunner

from project_dashboard.cli.main import app

runner = CliRunner()

SEED_IDS = ["1", "2", "3", "4", "5"]
CSV_HEADER = "id,name,description,type,status,tags"


@pytest.fixture(autouse=True)
def dashboard_env(monkeypatch, tmp_path):
    """Point the CLI at an empty data directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DASHBOARD_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("DASHBOARD_EXPORT_DIR", str(tmp_path / "out"))
    monkeypatch.setenv("DASHBOARD_LOG_LEVEL", "CRITICAL")
    monkeypatch.setenv("COLUMNS", "200")
    return tmp_path


def list_ids(*args):
    result = runner.invoke(app, ["project", "list", "--json", *args])
    assert result.exit_code == 0, result.output
    return [record["id"] for record in json.loads(result.stdout)]


def show_json(project_id):
    result = runner.invoke(app, ["project", "show", project_id, "--json"])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


class TestProjectCommands:
    """Tests for project commands."""

    def test_list_starts_from_sample_projects(self, dashboard_env):
        """An empty data directory shows the sample projects without saving them."""
        result = runner.invoke(app, ["project", "list", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [record["id"] for record in data] == SEED_IDS
        assert data[0]["isMonetized"] is False
        assert not (dashboard_env / "data").exists()

    def test_list_table(self):
        """project list without --json renders a table."""
        result = runner.invoke(app, ["project", "list"])

        assert result.exit_code == 0
        assert "Projects" in result.stdout
        assert "in_progress" in result.stdout

    def test_list_filters(self):
        """Filters and tags narrow the listing."""
        assert list_ids("--status", "live") == ["2"]
        assert list_ids("--type", "sell", "--usefulness", "5") == ["4"]
        assert list_ids("--search", "BUDGET") == ["3"]
        assert list_ids("--tag", "React", "--tag", "Food") == ["2"]
        assert list_ids("--monetized") == ["2"]

    def test_list_no_matches(self):
        result = runner.invoke(app, ["project", "list", "--status", "live", "--tag", "Finance"])

        assert result.exit_code == 0
        assert "No projects match the current filters." in result.stdout

    def test_list_rejects_unknown_status(self):
        result = runner.invoke(app, ["project", "list", "--status", "paused"])

        assert result.exit_code == 1
        assert "✗ status" in result.stderr

    def test_add_project(self):
        """project add stores a project under a generated ID."""
        result = runner.invoke(
            app,
            [
                "project", "add",
                "--name", "Newsletter",
                "--description", "Weekly digest",
                "--type", "sell",
                "--tag", "email",
                "--progress", "140",
                "--json",
            ],
        )  # fmt: skip

        assert result.exit_code == 0, result.output
        added = json.loads(result.stdout)
        assert added["name"] == "Newsletter"
        assert added["progress"] == 100  # noqa: PLR2004
        assert added["usefulness"] == 3  # noqa: PLR2004
        assert "Project added successfully" in result.stderr
        assert list_ids() == [*SEED_IDS, added["id"]]

    def test_add_rejects_out_of_range_usefulness(self):
        result = runner.invoke(
            app, ["project", "add", "-n", "X", "-d", "Y", "--usefulness", "7"]
        )

        assert result.exit_code == 1
        assert "usefulness" in result.stderr

    def test_show_unknown_project(self):
        result = runner.invoke(app, ["project", "show", "missing"])

        assert result.exit_code == 1
        assert "Project not found" in result.stderr

    def test_show_details(self):
        result = runner.invoke(app, ["project", "show", "2"])

        assert result.exit_code == 0
        assert "Recipe Manager" in result.stdout
        assert "Monetized: Yes" in result.stdout

    def test_update_project(self):
        result = runner.invoke(
            app, ["project", "update", "3", "--status", "live", "--monetized", "--json"]
        )

        assert result.exit_code == 0, result.output
        updated = json.loads(result.stdout)
        assert updated["status"] == "live"
        assert updated["isMonetized"] is True
        assert updated["name"] == "Budget Tracker"
        assert show_json("3")["status"] == "live"

    def test_update_rejects_blank_name(self):
        result = runner.invoke(app, ["project", "update", "3", "--name", "   "])

        assert result.exit_code == 1
        assert "✗ name" in result.stderr
        assert show_json("3")["name"] == "Budget Tracker"

    def test_delete_with_yes(self):
        result = runner.invoke(app, ["project", "delete", "4", "--yes"])

        assert result.exit_code == 0
        assert list_ids() == ["1", "2", "3", "5"]

    def test_delete_declined(self):
        result = runner.invoke(app, ["project", "delete", "4"], input="n\n")

        assert result.exit_code == 1
        assert "4" in list_ids()

    def test_sort_persists_order(self):
        result = runner.invoke(app, ["project", "sort", "usefulness", "--json"])

        assert result.exit_code == 0
        assert [record["id"] for record in json.loads(result.stdout)] == ["1", "4", "2", "3", "5"]
        assert list_ids() == ["1", "4", "2", "3", "5"]

    def test_sort_reports_unwritable_store(self, dashboard_env):
        """A failed save ends with an error line, not a traceback."""
        (dashboard_env / "data").write_text("not a directory")

        result = runner.invoke(app, ["project", "sort", "name"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.stderr
        assert "Failed to write" in result.stderr

    def test_progress_is_clamped(self):
        result = runner.invoke(app, ["project", "progress", "1", "150"])

        assert result.exit_code == 0
        assert "Project Dashboard: 100%" in result.stdout
        assert show_json("1")["progress"] == 100  # noqa: PLR2004

    def test_log_activity(self):
        result = runner.invoke(app, ["project", "log", "5", "Added charts"])

        assert result.exit_code == 0
        assert show_json("5")["activityLog"][0].endswith(": Added charts")


class TestTagCommands:
    """Tests for tag commands."""

    def test_list_tags(self):
        result = runner.invoke(app, ["tag", "list", "--json"])

        assert result.exit_code == 0
        tags = json.loads(result.stdout)
        assert tags[:3] == ["React", "Personal", "Commercial"]
        assert len(tags) == len(set(tags))

    def test_add_and_remove_tag(self):
        assert runner.invoke(app, ["tag", "add", "3", "Money"]).exit_code == 0
        assert show_json("3")["tags"] == ["Finance", "Money"]

        assert runner.invoke(app, ["tag", "remove", "3", "Finance"]).exit_code == 0
        assert show_json("3")["tags"] == ["Money"]

    def test_add_duplicate_tag(self):
        result = runner.invoke(app, ["tag", "add", "3", "Finance"])

        assert result.exit_code == 1
        assert "Tag already exists" in result.stderr

    def test_add_blank_tag(self):
        result = runner.invoke(app, ["tag", "add", "3", "  "])

        assert result.exit_code == 1
        assert "✗ tag" in result.stderr


class TestImportCommand:
    """Tests for CSV import."""

    @pytest.fixture
    def csv_file(self, tmp_path):
        path = tmp_path / "projects.csv"
        path.write_text(
            f"{CSV_HEADER}\n"
            "1,Clash,Same id as a sample,personal,idea,\n"
            ",Fresh,\"Multi, part\",sell,live,a; b\n"
            ",Broken,,personal,idea,\n"
        )
        return path

    def test_import_with_yes(self, csv_file):
        result = runner.invoke(app, ["import", str(csv_file), "--yes"])

        assert result.exit_code == 0, result.output
        assert "This will import 2 projects. 1 rows could not be imported." in result.stdout
        assert "Successfully imported 2 projects" in result.stderr
        assert "Failed to import 1 projects" in result.stderr

        ids = list_ids()
        assert ids[:5] == SEED_IDS
        assert len(set(ids)) == 7  # noqa: PLR2004

    def test_import_confirmed_interactively(self, csv_file):
        result = runner.invoke(app, ["import", str(csv_file)], input="y\n")

        assert result.exit_code == 0
        assert len(list_ids()) == 7  # noqa: PLR2004

    def test_import_declined(self, csv_file, dashboard_env):
        result = runner.invoke(app, ["import", str(csv_file)], input="n\n")

        assert result.exit_code == 1
        assert list_ids() == SEED_IDS
        assert not (dashboard_env / "data").exists()

    def test_import_rejects_non_csv(self, tmp_path):
        path = tmp_path / "projects.txt"
        path.write_text(f"{CSV_HEADER}\n")

        result = runner.invoke(app, ["import", str(path), "--yes"])

        assert result.exit_code == 1
        assert "Please upload a CSV file" in result.stderr

    def test_import_from_stdin(self):
        csv_text = f"{CSV_HEADER}\n,Piped,From a shell pipe,personal,idea,cli\n"

        result = runner.invoke(app, ["import", "-", "--yes"], input=csv_text)

        assert result.exit_code == 0, result.output
        assert "Successfully imported 1 projects" in result.stderr
        assert len(list_ids()) == 6  # noqa: PLR2004
        assert len(list_ids("--tag", "cli")) == 1

    def test_import_from_stdin_requires_yes(self, dashboard_env):
        result = runner.invoke(app, ["import", "-"], input=f"{CSV_HEADER}\n")

        assert result.exit_code == 1
        assert "requires --yes" in result.stderr
        assert not (dashboard_env / "data").exists()

    def test_import_without_valid_rows(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text(f"{CSV_HEADER}\n")

        result = runner.invoke(app, ["import", str(path), "--yes"])

        assert result.exit_code == 1
        assert "Import failed: CSV file has no data rows" in result.stderr


class TestExportCommands:
    """Tests for export and template commands."""

    def test_export_json_filtered(self, tmp_path):
        target = tmp_path / "exports"

        result = runner.invoke(
            app, ["export", "--output", str(target), "--status", "in_progress"]
        )

        assert result.exit_code == 0, result.output
        assert "Projects exported as JSON" in result.stderr
        (path,) = target.glob("projects-*.json")
        assert [record["id"] for record in json.loads(path.read_text())] == ["1", "5"]

    def test_export_csv_to_configured_dir(self, dashboard_env):
        result = runner.invoke(app, ["export", "--format", "csv"])

        assert result.exit_code == 0, result.output
        (path,) = (dashboard_env / "out").glob("projects-*.csv")
        lines = path.read_text().splitlines()
        assert lines[0].startswith("id,name,description")
        assert len(lines) == 6  # noqa: PLR2004

    def test_template(self, dashboard_env):
        result = runner.invoke(app, ["template"])

        assert result.exit_code == 0
        assert "Template downloaded successfully!" in result.stdout
        assert (dashboard_env / "out" / "projects-template.csv").exists()


class TestInsightsCommand:
    def test_insights_json(self):
        result = runner.invoke(app, ["insights", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["stages"] == [
            {"name": "Build", "value": 2},
            {"name": "Market", "value": 1},
            {"name": "Launch", "value": 1},
            {"name": "Idea", "value": 1},
        ]
        assert all(set(entry) == {"month", "progress"} for entry in data["progress"])

    def test_insights_tables(self):
        result = runner.invoke(app, ["insights"])

        assert result.exit_code == 0
        assert "Project Stages" in result.stdout
        assert "Average Progress" in result.stdout
