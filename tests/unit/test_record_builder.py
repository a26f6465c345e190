from __future__ import annotations

import pytest

from exceptions_maker.models.approval import ApacheWaiver, NotWhitelisted, Whitelisted
from exceptions_maker.models.license_entry import NOASSERTION, LicenseEntry
from exceptions_maker.services.record_builder import (
    InconsistentApprovalError,
    make_entry_from_row,
    make_license_entry,
    package_spdx_id,
    prepare_comment,
    resolve_approval,
)
from exceptions_maker.services.row_parser import MalformedRowError, RowConversionError, parse_row


def _details(comments: str = "", whitelisted: str = "Yes", mechanism: str = "", reason: str = "",
             name: str = "libfoo"):
    return parse_row([name, "github.com/x/libfoo", comments, "MIT", "MIT", "Yes", whitelisted, mechanism, reason])


def test_end_to_end_example_row():
    entry = make_entry_from_row(["libfoo", "github.com/x/libfoo", "", "MIT", "MIT", "Yes", "Yes", "", ""], 2)
    assert entry == LicenseEntry(
        name="libfoo",
        spdx_id="SPDXRef-Package2",
        download_location="NOASSERTION",
        license_concluded="MIT",
        license_declared="NOASSERTION",
        copyright_text="NOASSERTION",
        files_analyzed=False,
        comment="whitelisted",
    )


def test_resolve_approval_variants():
    assert resolve_approval(_details(whitelisted="Yes")) == Whitelisted()
    assert resolve_approval(_details(whitelisted="N/A", mechanism="Apache-2.0 license")) == ApacheWaiver()
    assert resolve_approval(_details(whitelisted="No", mechanism="GB", reason="copyleft")) == NotWhitelisted(
        reason="copyleft", mechanism="GB"
    )


@pytest.mark.parametrize("comments", ["", "bundled in installer"])
def test_whitelisted_comment_contains_segment(comments: str):
    comment = prepare_comment(_details(comments=comments, whitelisted="Yes"))
    assert "whitelisted" in comment.split("; ")
    assert comment.endswith("whitelisted")


def test_apache_waiver_without_comment():
    assert prepare_comment(_details(whitelisted="N/A", mechanism="Apache-2.0 license")) == (
        "Apache-2.0, no approval needed"
    )


def test_apache_waiver_with_comment():
    assert prepare_comment(_details(comments="vendored", whitelisted="N/A", mechanism="Apache-2.0 license")) == (
        "vendored; Apache-2.0, no approval needed"
    )


@pytest.mark.parametrize("mechanism", ["", "GB vote 2019-08-20", "apache-2.0 license", "Apache-2.0"])
def test_na_with_other_mechanism_is_inconsistent(mechanism: str):
    details = _details(whitelisted="N/A", mechanism=mechanism)
    with pytest.raises(InconsistentApprovalError) as e:
        make_license_entry(details, 9)
    assert e.value.row_number == 9
    assert e.value.mechanism == mechanism
    assert isinstance(e.value, RowConversionError)


@pytest.mark.parametrize("whitelisted", ["No", "", "yes", "n/a", "Pending"])
def test_not_whitelisted_comment(whitelisted: str):
    comment = prepare_comment(
        _details(comments="note", whitelisted=whitelisted, mechanism="GB vote", reason="weak copyleft")
    )
    assert comment == "note; not whitelisted because: weak copyleft; approved by GB vote"


def test_not_whitelisted_with_empty_reason_and_mechanism():
    assert prepare_comment(_details(whitelisted="No")) == "not whitelisted because: ; approved by "


def test_download_location_uses_url_name():
    entry = make_license_entry(_details(name="https://github.com/foo/bar"), 3)
    assert entry.download_location == "https://github.com/foo/bar"
    assert entry.name == "https://github.com/foo/bar"


def test_download_location_noassertion_for_plain_name():
    entry = make_license_entry(_details(name="foo-library"), 3)
    assert entry.download_location == NOASSERTION


def test_identifier_uses_caller_ordinal():
    assert make_license_entry(_details(), 41).spdx_id == "SPDXRef-Package41"
    assert package_spdx_id(2) == "SPDXRef-Package2"


def test_concluded_license_not_validated():
    details = parse_row(["x", "", "", "", "not a (valid expression", "", "Yes", "", ""])
    assert make_license_entry(details, 2).license_concluded == "not a (valid expression"


def test_make_entry_from_row_propagates_malformed():
    with pytest.raises(MalformedRowError):
        make_entry_from_row(["libfoo"] * 8, 2)
