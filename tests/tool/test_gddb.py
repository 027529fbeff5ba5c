"""Tests for the gddb command line tool."""

import json
from pathlib import Path

import pytest
import yaml

from gddb.record import Record
from gddb.store import InMemoryStore, dump, load
from gddb.tool.gddb import main


@pytest.fixture
def db(tmp_path: Path) -> Path:
    """Path of a database file that does not exist yet."""
    return tmp_path / "game.gddb"


def run(capsys: pytest.CaptureFixture[str], args: list[str]) -> str:
    """Run the command line tool and return stdout."""
    main(args)
    return capsys.readouterr().out


def test_create(db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test creating a record writes the database file."""
    uuid = run(
        capsys, ["create", "Player", "--attributes", '{"hp": 10}', "--db", str(db)]
    ).strip()

    store = load(db)
    assert store.label == "game"
    assert store.find(lambda r: r.uuid, uuid) == Record(
        uuid=uuid, model="Player", attributes='{"hp": 10}'
    )


def test_get(db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test printing a single record."""
    uuid = run(capsys, ["create", "Player", "-a", '{"hp": 10}', "--db", str(db)])
    uuid = uuid.strip()

    result = run(capsys, ["get", uuid, "--db", str(db)])
    assert list(yaml.safe_load_all(result)) == [
        {"uuid": uuid, "model": "Player", "attributes": {"hp": 10}}
    ]

    result = run(capsys, ["get", uuid, "-o", "json", "--db", str(db)])
    assert json.loads(result) == [
        {"uuid": uuid, "model": "Player", "attributes": {"hp": 10}}
    ]


def test_update(db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test updating keeps values that are not specified."""
    uuid = run(capsys, ["create", "Player", "-a", '{"hp": 10}', "--db", str(db)])
    uuid = uuid.strip()

    run(capsys, ["update", uuid, "--model", "Enemy", "--db", str(db)])
    assert load(db).find(lambda r: r.uuid, uuid).attributes == '{"hp": 10}'

    run(capsys, ["update", uuid, "-a", '{"hp": 3}', "--db", str(db)])
    record = load(db).find(lambda r: r.uuid, uuid)
    assert record.model == "Enemy"
    assert record.attributes == '{"hp": 3}'


def test_destroy(db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test removing a record."""
    uuid = run(capsys, ["create", "Player", "--db", str(db)]).strip()
    run(capsys, ["destroy", uuid, "--db", str(db)])
    assert len(load(db)) == 0


def test_query(db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test listing records filtered by model."""
    store: InMemoryStore[Record] = InMemoryStore("game", save_path=db)
    store.create(Record(uuid="a", model="Testing", attributes=""))
    store.create(Record(uuid="b", model="Testing", attributes=""))
    store.create(Record(uuid="c", model="Staging", attributes=""))
    dump(store)

    result = run(capsys, ["query", "--model", "Testing", "--db", str(db)])
    lines = [line.split() for line in result.splitlines()]
    assert lines == [
        ["UUID", "MODEL", "ATTRIBUTES"],
        ["a", "Testing"],
        ["b", "Testing"],
    ]

    result = run(capsys, ["query", "-o", "json", "--db", str(db)])
    assert [r["uuid"] for r in json.loads(result)] == ["c", "a", "b"]


def test_query_not_found(db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test a query without matches prints a message instead of failing."""
    run(capsys, ["create", "Player", "--db", str(db)])
    result = run(capsys, ["query", "--model", "Enemy", "--db", str(db)])
    assert result == "No records found with model 'Enemy'\n"


def test_info(db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test describing a new database does not create the file."""
    result = run(capsys, ["info", "--strict", "--db", str(db)])
    lines = [line.split() for line in result.splitlines()]
    assert lines == [
        ["LABEL", "PATH", "STRICT", "RECORDS"],
        ["game", str(db), "True", "0"],
    ]
    assert not db.exists()


def test_missing_record(db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test library errors exit with a message."""
    with pytest.raises(SystemExit) as exc_info:
        main(["get", "missing", "--db", str(db)])
    assert exc_info.value.code == 1
    assert capsys.readouterr().err.startswith(
        "gddb error: No item in store game matches 'missing'"
    )


def test_invalid_attributes(db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test attributes must be a JSON object."""
    with pytest.raises(SystemExit):
        main(["create", "Player", "-a", "[1, 2]", "--db", str(db)])
    assert "must be a JSON object" in capsys.readouterr().err
    assert not db.exists()


def test_corrupt_database(db: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test a corrupt database file is reported."""
    db.write_bytes(b"garbage")
    with pytest.raises(SystemExit):
        main(["query", "--db", str(db)])
    assert "Unable to decode" in capsys.readouterr().err
