import csv
from datetime import date, datetime

import pytest
from openpyxl import Workbook

from nouasseur_app.importer.adapters import ImportFileError, SpreadsheetHeaderError, SpreadsheetReader
from nouasseur_app.importer.contracts import EVENT_FIELDS, MEMBER_FIELDS, normalize_integer, normalize_text
from nouasseur_app.importer.pipeline import (
    ImportLoadError,
    build_full_name,
    build_school_history,
    infer_category,
    is_active_status,
    normalize_date,
    replace_collection,
    transform_directory_row,
    transform_event_row,
)
from nouasseur_app.importer.service import import_collection
from nouasseur_app.models import DirectoryEntry, Event, Member, db


def _write_csv(path, rows):
    with path.open("w", encoding="utf-8", newline="") as handle:
        csv.writer(handle).writerows(rows)
    return path


def _write_xlsx(path, rows):
    workbook = Workbook()
    sheet = workbook.active
    for row in rows:
        sheet.append(row)
    workbook.save(path)
    return path


@pytest.mark.unit
class TestNormalizers:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (date(2024, 3, 15), date(2024, 3, 15)),
            (datetime(2024, 3, 15, 18, 30), date(2024, 3, 15)),
            (45292, date(2024, 1, 1)),
            (45292.75, date(2024, 1, 1)),
            ("2024-03-15", date(2024, 3, 15)),
            ("2024-03-15T10:00:00", date(2024, 3, 15)),
            ("03/15/2024", date(2024, 3, 15)),
            ("02/30/2024", None),
            ("next spring", None),
            ("", None),
            (None, None),
            (True, None),
        ],
    )
    def test_normalize_date(self, value, expected):
        assert normalize_date(value) == expected

    def test_normalize_text(self):
        assert normalize_text("  Rabat ") == "Rabat"
        assert normalize_text("   ") is None
        assert normalize_text(33601.0) == "33601"
        assert normalize_text(datetime(1985, 6, 1, 9, 0)) == "1985-06-01"

    def test_normalize_integer(self):
        assert normalize_integer(12.0) == 12
        assert normalize_integer(" 7 ") == 7
        assert normalize_integer(7.5) is None
        assert normalize_integer("seven") is None
        assert normalize_integer(True) is None


@pytest.mark.unit
class TestTransforms:
    @pytest.mark.parametrize(
        "member_type, expected",
        [
            ("FACULTY-EMERITUS", "Faculty"),
            ("student", "Student"),
            ("Support STAFF", "Staff"),
            ("DEPENDENT", "Dependent"),
            (" VOLUNTEER ", "VOLUNTEER"),
            ("", "Unknown"),
            (None, "Unknown"),
        ],
    )
    def test_infer_category(self, member_type, expected):
        assert infer_category(member_type) == expected

    def test_build_full_name(self):
        assert build_full_name("Ann", "B", "Cole") == "Ann B Cole"
        assert build_full_name("Ann", None, None, "(Diaz)") == "Ann Diaz"
        assert build_full_name(None, None, None) == "Unknown"

    def test_school_history(self):
        text = build_school_history(
            {
                "graduation_year": "1968",
                "grades_attended": "9-12",
                "other_school1": "Wheelus HS",
                "dates_grades1": "1964-65",
            }
        )
        assert text.startswith("Graduation Year: 1968")
        assert "Dates Attended: Unknown" in text
        assert text.endswith("Dates/Grades: 1964-65")
        assert build_school_history({}) is None

    def test_is_active_status(self):
        assert is_active_status("Located")
        assert is_active_status(None)
        assert not is_active_status("not located")
        assert not is_active_status("DECEASED 1999")

    def test_event_defaults(self):
        values = transform_event_row({"event_name": "Reunion"})
        assert values["event_status"] == "active"
        assert values["event_sortcode"] == 100
        assert values["event_moduser"] == "import_script"

    def test_event_keeps_explicit_values(self):
        values = transform_event_row({"event_name": "Reunion", "event_status": "cancelled", "event_sortcode": 0})
        assert values["event_status"] == "cancelled"
        assert values["event_sortcode"] == 0

    def test_event_without_name_is_skipped(self):
        assert transform_event_row({"event_loc": "Hangar"}) is None

    def test_directory_row(self):
        values = transform_directory_row(
            {
                "member_id": 42,
                "status": "Deceased",
                "first_name": "Ann",
                "last_name": "Cole",
                "member_type": "FACULTY",
                "address1": "1 Main St",
                "address2": "Apt 2",
                "work_phone": "555-0101",
                "email2": "ann@example.org",
            }
        )
        assert values["name"] == "Ann Cole"
        assert values["organization"] == "Nouasseur"
        assert values["category"] == "Faculty"
        assert values["sub_category"] == "FACULTY"
        assert values["address"] == "1 Main St\nApt 2"
        assert values["phone"] == "555-0101"
        assert values["email"] == "ann@example.org"
        assert values["sort_order"] == 42
        assert values["is_active"] is False


@pytest.mark.unit
class TestSpreadsheetReader:
    def test_csv_aliases_and_blank_rows(self, tmp_path):
        path = _write_csv(
            tmp_path / "events.csv",
            [
                ["EventName", "Location", "StartDate", "Notes"],
                ["Reunion", " Hangar 3 ", "06/01/2024", "ignored"],
                ["", "", "", ""],
                ["Picnic", "", "2024-07-04", ""],
            ],
        )
        reader = SpreadsheetReader(path, EVENT_FIELDS)
        rows = list(reader.iter_rows())

        assert [row.values["event_name"] for row in rows] == ["Reunion", "Picnic"]
        assert rows[0].values["event_loc"] == "Hangar 3"
        assert rows[0].values["event_datebeg"] == date(2024, 6, 1)
        assert rows[1].values["event_loc"] is None
        assert reader.statistics.rows_processed == 2
        assert reader.statistics.rows_skipped_blank == 1
        assert reader.statistics.unrecognised_headers == ["Notes"]

    def test_canonical_header_wins_over_alias(self, tmp_path):
        path = _write_csv(
            tmp_path / "events.csv",
            [["Name", "event_name"], ["From alias", "From column"], ["Only alias", ""]],
        )
        rows = list(SpreadsheetReader(path, EVENT_FIELDS).iter_rows())
        assert [row.values["event_name"] for row in rows] == ["From column", "Only alias"]

    def test_xlsx_first_sheet(self, tmp_path):
        path = _write_xlsx(
            tmp_path / "memdata.xlsx",
            [
                ["ID", "fname", "lmname", "type", "zip", "locdate"],
                [7, "Ann", "Cole", "STUDENT", 33601, datetime(2001, 5, 4)],
            ],
        )
        (row,) = SpreadsheetReader(path, MEMBER_FIELDS).iter_rows()
        assert row.values["member_id"] == 7
        assert row.values["first_name"] == "Ann"
        assert row.values["zip_code"] == "33601"
        assert row.values["located_date"] == date(2001, 5, 4)

    def test_missing_required_header(self, tmp_path):
        path = _write_csv(tmp_path / "events.csv", [["Location"], ["Hangar"]])
        with pytest.raises(SpreadsheetHeaderError) as excinfo:
            list(SpreadsheetReader(path, EVENT_FIELDS).iter_rows())
        assert excinfo.value.missing == ("event_name",)

    def test_no_recognised_headers(self, tmp_path):
        path = _write_csv(tmp_path / "members.csv", [["foo", "bar"], ["1", "2"]])
        with pytest.raises(SpreadsheetHeaderError):
            list(SpreadsheetReader(path, MEMBER_FIELDS).iter_rows())

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "events.xls"
        path.write_bytes(b"legacy")
        with pytest.raises(ImportFileError, match="Unsupported file type"):
            SpreadsheetReader(path, EVENT_FIELDS)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImportFileError, match="File not found"):
            SpreadsheetReader(tmp_path / "nope.csv", EVENT_FIELDS)

    def test_corrupt_workbook(self, tmp_path):
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"not a zip file")
        with pytest.raises(ImportFileError):
            list(SpreadsheetReader(path, EVENT_FIELDS).iter_rows())


@pytest.mark.integration
class TestImportCollection:
    def test_replaces_existing_rows(self, app_ctx, tmp_path):
        db.session.add(Event(event_name="Stale"))
        db.session.commit()
        path = _write_csv(
            tmp_path / "events.csv",
            [["event_name", "event_datebeg"], ["Reunion", "2024-06-01"], ["", "2024-07-01"], ["Picnic", ""]],
        )

        summary = import_collection("events", path)

        assert summary.rows_read == 3
        assert summary.rows_skipped == 1
        assert summary.rows_deleted == 1
        assert summary.rows_inserted == 2
        assert sorted(event.event_name for event in Event.query.all()) == ["Picnic", "Reunion"]
        assert {event.event_moduser for event in Event.query.all()} == {"import_script"}

    def test_dry_run_writes_nothing(self, app_ctx, tmp_path):
        db.session.add(Event(event_name="Keep me"))
        db.session.commit()
        path = _write_csv(tmp_path / "events.csv", [["event_name"], ["Reunion"]])

        summary = import_collection("events", path, dry_run=True)

        assert summary.dry_run is True
        assert summary.rows_read == 1
        assert summary.rows_inserted == 0
        assert [event.event_name for event in Event.query.all()] == ["Keep me"]

    def test_members_and_directories_from_same_workbook(self, app_ctx, tmp_path):
        path = _write_xlsx(
            tmp_path / "memdata.xlsx",
            [
                ["ID", "fname", "lmname", "type", "memssn"],
                [1, "Ann", "Cole", "FACULTY", "123-45-6789"],
                [2, "Bo", "Diaz", "STUDENT", None],
            ],
        )

        assert import_collection("members", path).rows_inserted == 2
        assert import_collection("directories", path, batch_size=1).rows_inserted == 2

        assert Member.query.filter_by(member_id=1).one().member_ssn == "123-45-6789"
        assert [entry.name for entry in DirectoryEntry.query.order_by(DirectoryEntry.sort_order)] == [
            "Ann Cole",
            "Bo Diaz",
        ]

    def test_unknown_collection(self, app_ctx, tmp_path):
        with pytest.raises(ValueError):
            import_collection("users", tmp_path / "users.csv")

    def test_failed_load_keeps_previous_rows(self, app_ctx):
        db.session.add(Event(event_name="Survivor"))
        db.session.commit()

        with pytest.raises(ImportLoadError):
            replace_collection(Event, [{"event_name": "Fine"}, {"event_name": None}], batch_size=1)

        assert [event.event_name for event in Event.query.all()] == ["Survivor"]

    def test_batch_size_must_be_positive(self, app_ctx):
        with pytest.raises(ValueError):
            replace_collection(Event, [], batch_size=0)


@pytest.mark.integration
class TestImporterCli:
    def test_events_command(self, app, runner, tmp_path):
        path = _write_csv(tmp_path / "events.csv", [["EventName"], ["Reunion"], ["Picnic"]])

        result = runner.invoke(args=["importer", "events", str(path)])

        assert result.exit_code == 0, result.output
        assert "Rows inserted: 2" in result.output
        with app.app_context():
            assert Event.query.count() == 2

    def test_dry_run_flag(self, app, runner, tmp_path):
        path = _write_csv(tmp_path / "events.csv", [["EventName"], ["Reunion"]])

        result = runner.invoke(args=["importer", "events", str(path), "--dry-run"])

        assert result.exit_code == 0
        assert "Dry run complete" in result.output
        with app.app_context():
            assert Event.query.count() == 0

    def test_bad_header_is_reported(self, runner, tmp_path):
        path = _write_csv(tmp_path / "events.csv", [["Location"], ["Hangar"]])

        result = runner.invoke(args=["importer", "events", str(path)])

        assert result.exit_code == 1
        assert "Missing required columns: event_name" in result.output
