"""Behavioural tests for printing a user's recent activity."""

from __future__ import annotations

import io
import typing as typ

import pytest
from pytest_bdd import given, parsers, scenario, then, when

from github_activity import print_recent_activity
from tests.helpers.github_api import FakeEventsAPI, event_json, events_body


class ReportContext(typ.TypedDict, total=False):
    """Shared state used by activity report steps."""

    api: FakeEventsAPI
    out: io.StringIO
    err: io.StringIO
    exit_code: int | str | None


@pytest.fixture
def report_context() -> ReportContext:
    """Provide fresh shared state for each scenario."""
    return {"api": FakeEventsAPI(), "out": io.StringIO(), "err": io.StringIO()}


@scenario("../activity_report.feature", "Printing a user's recent push")
def test_printing_recent_push() -> None:
    """Behavioural test: a single event renders as one report line."""


@scenario("../activity_report.feature", "Printing a user with no activity")
def test_printing_empty_activity() -> None:
    """Behavioural test: an empty feed prints only the header."""


@scenario("../activity_report.feature", "Unknown user terminates the report")
def test_unknown_user_terminates() -> None:
    """Behavioural test: a 404 exits with status 1 and no report."""


@given(
    parsers.parse('the events API returns a push to "{repo}" at "{created_at}"')
)
def given_push_event(report_context: ReportContext, repo: str, created_at: str) -> None:
    """Serve a single PushEvent."""
    report_context["api"].body = events_body(event_json("PushEvent", created_at, repo))


@given("the events API returns no events")
def given_no_events(report_context: ReportContext) -> None:
    """Serve an empty JSON array."""
    report_context["api"].body = b"[]"


@given(parsers.parse("the events API responds with status {status:d}"))
def given_status(report_context: ReportContext, status: int) -> None:
    """Serve a non-success status."""
    report_context["api"].status_code = status
    report_context["api"].body = b"{}"


@when(parsers.parse('I print the recent activity for "{username}"'))
def when_print_activity(report_context: ReportContext, username: str) -> None:
    """Run the printer against the fake API."""
    try:
        print_recent_activity(
            username,
            report_context["api"].fetcher(),
            out=report_context["out"],
            err=report_context["err"],
        )
    except SystemExit as exc:
        report_context["exit_code"] = exc.code
    else:
        report_context["exit_code"] = 0


@then("the report is")
def then_report_is(report_context: ReportContext, docstring: str) -> None:
    """Compare the printed report line by line."""
    assert report_context["exit_code"] == 0
    assert report_context["out"].getvalue() == f"{docstring}\n"


@then(parsers.parse("the command exits with status {status:d}"))
def then_exit_status(report_context: ReportContext, status: int) -> None:
    """Check the printer's exit status."""
    assert report_context["exit_code"] == status


@then(parsers.parse('the error output mentions "{text}"'))
def then_error_mentions(report_context: ReportContext, text: str) -> None:
    """Check the diagnostic written to the error stream."""
    assert text in report_context["err"].getvalue()


@then("nothing is printed")
def then_nothing_printed(report_context: ReportContext) -> None:
    """Check that no partial report was written."""
    assert report_context["out"].getvalue() == ""
