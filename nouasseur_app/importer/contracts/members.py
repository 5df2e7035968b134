"""Member spreadsheet contract.

The association's member workbook uses short column names (``fname``,
``lmname``, ``addr1`` ...). Both the member and the directory importers read
it; the canonical names are the ``members`` table columns.
"""

from __future__ import annotations

from typing import Tuple

from nouasseur_app.importer.pipeline.dates import normalize_date

from .fields import FieldSpec, normalize_integer


def _column(name: str, source_header: str | None = None, **kwargs) -> FieldSpec:
    aliases = (source_header,) if source_header else ()
    return FieldSpec(name=name, aliases=aliases, **kwargs)


MEMBER_FIELDS: Tuple[FieldSpec, ...] = (
    _column("member_id", "ID", description="Spreadsheet row identifier.", normalizer=normalize_integer),
    _column("status"),
    _column("first_name", "fname"),
    _column("middle_initial", "mdinit"),
    _column("school"),
    _column("nickname1", "nicname1"),
    _column("nickname2", "nicname2"),
    _column("last_name", "lmname", description="Last name at time of attendance."),
    _column("married_name", "marrname"),
    _column("spouse_name", "spname"),
    _column("member_type", "type", description="Free-text affiliation (FACULTY, STUDENT ...)."),
    _column("address1", "addr1"),
    _column("address2", "addr2"),
    _column("address3", "addr3"),
    _column("city"),
    _column("state"),
    _column("zip_code", "zip"),
    _column("country"),
    _column("home_phone", "hphone"),
    _column("work_phone", "wphone"),
    _column("fax"),
    _column("mailing_option", "namsento"),
    _column("email1", "emailaddr1"),
    _column("email2", "emailaddr2"),
    _column("member_license", "memlic"),
    _column("spouse_license", "spolic"),
    _column("member_ssn", "memssn"),
    _column("spouse_ssn", "spossn"),
    _column("located_date", "locdate", normalizer=normalize_date),
    _column("source"),
    _column("location_cost", "loccost"),
    _column("graduation_year", "gradyr"),
    _column("ncb_graduate", "ncbgrd"),
    _column("grades_attended", "grattend"),
    _column("dates_attended", "datesattend"),
    _column("other_school1", "oschool1"),
    _column("dates_grades1", "datesgrade1"),
    _column("other_school2", "oschool2"),
    _column("dates_grades2", "datesgrade2"),
    _column("other_school3", "oschool3"),
    _column("dates_grades3", "datesgrade3"),
    _column("parent_father", "parfather"),
    _column("parent_mother", "parmother"),
    _column("parent_address", "paraddr"),
    _column("sent_mra", "sentmra"),
    _column("questionnaire_date", "quesent", normalizer=normalize_date),
    _column("questionnaire_return", "queret"),
    _column("date_returned", "dateret", normalizer=normalize_date),
    _column("directory_requested", "dirreq"),
    _column("amount_received", "amtrec"),
    _column("directory_sent", "dirsent", normalizer=normalize_date),
    _column("member_bio", "abiodat"),
    _column("spouse_bio", "sbiodat"),
    _column("new_bio", "nbionew"),
    _column("comments"),
    _column("reunion_attended", "reuattend"),
)
