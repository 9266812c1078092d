import csv
import sys
from pathlib import Path

import pytest

# Add the parent and scripts directories to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

import generate_greetings  # noqa: E402

FIELDNAMES = ["first_name", "last_name", "language", "greeting", "greeting_auto_generated"]


@pytest.fixture
def guest_csv(tmp_path):
    path = tmp_path / "guests.csv"
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerow({"first_name": "Jan", "last_name": "Novák", "language": "czech"})
        writer.writerow({"first_name": "Mary", "last_name": "Smith", "language": "english"})
        writer.writerow(
            {
                "first_name": "Eva",
                "last_name": "Nová",
                "language": "czech",
                "greeting": "Milá Evo",
                "greeting_auto_generated": "false",
            }
        )
        writer.writerow({"first_name": "", "last_name": "", "language": ""})
    return path


def read_rows(path):
    with path.open(encoding="utf-8", newline="") as f:
        return list(csv.DictReader(f))


def test_generates_greetings(guest_csv, tmp_path):
    output = tmp_path / "out.csv"
    assert generate_greetings.main([str(guest_csv), "--output", str(output)]) == 0

    rows = read_rows(output)
    assert [row["greeting"] for row in rows] == ["Vážený pane Nováku", "Dear Ms. Smith", "Milá Evo", "Dear Guest"]
    assert rows[0]["greeting_confidence"] == "high"
    assert rows[0]["greeting_method"] == "czech_formal"
    assert rows[0]["detected_gender"] == "male"
    assert rows[0]["greeting_auto_generated"] == "true"
    # User-edited greeting is left alone
    assert rows[2]["greeting_auto_generated"] == "false"
    assert rows[2]["greeting_method"] == ""


def test_informal_with_trailing_comma(guest_csv, tmp_path):
    output = tmp_path / "out.csv"
    assert generate_greetings.main([str(guest_csv), "--output", str(output), "--informal", "--trailing-comma"]) == 0

    rows = read_rows(output)
    assert rows[0]["greeting"] == "Vážený Jan,"
    assert rows[1]["greeting"] == "Dear Mary,"


def test_missing_required_column(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("name,language\nJan Novák,czech\n", encoding="utf-8")
    assert generate_greetings.main([str(path), "--output", str(tmp_path / "out.csv")]) == 2


def test_writes_to_stdout(guest_csv, capsys):
    assert generate_greetings.main([str(guest_csv)]) == 0
    out = capsys.readouterr().out
    assert "Vážený pane Nováku" in out
