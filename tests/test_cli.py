"""
End-to-end runs of the petdb command with scripted console input.
"""
import json
import pytest
from typer.testing import CliRunner
from petdb.cli import app

runner = CliRunner()


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "pets.json"


def test_new_file_exit(data_file):
    result = runner.invoke(app, [str(data_file)], input="7\n")
    assert result.exit_code == 0
    assert result.output.startswith("Welcome to Pet Database.\n")
    assert "1) View all pets" in result.output
    assert "Goodbye!" in result.output
    assert json.loads(data_file.read_text()) == {"max_size": None, "pets": []}


def test_add_and_save(data_file):
    result = runner.invoke(
        app, [str(data_file)], input="2\nRex 4\nbad\nFido 2\ndone\n1\n7\n"
    )
    assert result.exit_code == 0
    assert "2 pets added." in result.output
    assert "2 rows in set." in result.output
    assert json.loads(data_file.read_text())["pets"] == [
        {"name": "Rex", "age": 4},
        {"name": "Fido", "age": 2},
    ]


def test_saves_on_end_of_input(data_file):
    result = runner.invoke(app, [str(data_file)], input="2\nRex 4\n")
    assert result.exit_code == 0
    assert len(json.loads(data_file.read_text())["pets"]) == 1


def test_max_size(data_file):
    result = runner.invoke(
        app, [str(data_file), "--max-size", "1"], input="2\nRex 4\nFido 2\ndone\n7\n"
    )
    assert result.exit_code == 0
    assert "Database is full." in result.output
    assert json.loads(data_file.read_text()) == {
        "max_size": 1,
        "pets": [{"name": "Rex", "age": 4}],
    }


def test_max_size_below_current(data_file):
    data_file.write_text('{"pets": [{"name": "Rex", "age": 4}, {"name": "Fido", "age": 2}]}')
    result = runner.invoke(app, [str(data_file), "--max-size", "1"], input="7\n")
    assert result.exit_code == 0
    assert "Ignoring max size" in result.output
    assert json.loads(data_file.read_text())["max_size"] is None


def test_permissive(data_file):
    result = runner.invoke(
        app, [str(data_file), "--permissive"], input="2\nTortoise 150\ndone\n7\n"
    )
    assert "1 pets added." in result.output
    assert json.loads(data_file.read_text())["pets"][0]["age"] == 150


def test_bad_data_file(data_file):
    data_file.write_text("this is not json")
    result = runner.invoke(app, [str(data_file)], input="7\n")
    assert result.exit_code == 1
    assert f"Unable to load {data_file}" in result.output
    assert "1) View all pets" not in result.output
    assert data_file.read_text() == "this is not json"


def test_default_data_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, [], input="7\n")
    assert result.exit_code == 0
    assert (tmp_path / "pets.json").exists()


def test_env_data_file(tmp_path, monkeypatch):
    monkeypatch.setenv("PETDB_DATA_FILE", str(tmp_path / "env.json"))
    result = runner.invoke(app, [], input="7\n")
    assert result.exit_code == 0
    assert (tmp_path / "env.json").exists()


def test_binary_data_file(tmp_path):
    data_file = tmp_path / "pets.dat"
    data_file.write_bytes(b"\xac\xed\x00\x05sr\x00\x0bPetRegistry")
    result = runner.invoke(app, [str(data_file)], input="7\n")
    assert result.exit_code == 1
    assert f"Unable to load {data_file}" in result.output
    assert "1) View all pets" not in result.output


def test_permissive_file_needs_flag(data_file):
    data_file.write_text('{"pets": [{"name": "Tortoise", "age": 150}]}')
    result = runner.invoke(app, [str(data_file)], input="7\n")
    assert result.exit_code == 1
    assert "run again with --permissive" in result.output

    result = runner.invoke(app, [str(data_file), "--permissive"], input="7\n")
    assert result.exit_code == 0


def test_bad_log_level(data_file, monkeypatch):
    monkeypatch.setenv("PETDB_LOG_LEVEL", "verbose")
    result = runner.invoke(app, [str(data_file)], input="7\n")
    assert result.exit_code == 1
    assert "log_level" in result.output
