#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import io

import pytest
from rich.console import Console

from contactbook.apps.contacts import Contact, ContactDraft
from contactbook.exceptions import ContactNotFoundError
from contactbook.interactive.console_messages import (
    REMOVE_CONFIRMATION,
    VALIDATION_ERROR,
)
from contactbook.interactive.display import (
    ContactRow,
    ContactRows,
    display_add_dialog,
    display_contacts,
    display_edit_dialog,
    display_removal_confirmation,
)
from contactbook.state import Adding, ConfirmingRemoval, ViewingContact


def render(renderable) -> str:
    console = Console(file=io.StringIO(), width=60)
    console.print(renderable)
    return console.file.getvalue()


@pytest.fixture
def contacts(ann: ContactDraft, bob: ContactDraft) -> tuple[Contact, ...]:
    return (Contact.from_draft(4, ann), Contact.from_draft(9, bob))


def test_rows_follow_list_order(contacts: tuple[Contact, ...]):
    rows = list(ContactRows(contacts))
    assert rows == [
        ContactRow(number=1, contact_id=4, primary="Ann", secondary="123-456-7890"),
        ContactRow(number=2, contact_id=9, primary="Bob", secondary="555-000-1111"),
    ]


def test_rows_are_restartable(contacts: tuple[Contact, ...]):
    rows = ContactRows(contacts)
    assert list(rows) == list(rows)
    assert len(rows) == 2


def test_select_row_invokes_callback(contacts: tuple[Contact, ...]):
    selected = []
    ContactRows(contacts, on_select=selected.append).select(2)
    assert selected == [contacts[1]]


@pytest.mark.parametrize("number", [0, 3, -1])
def test_select_missing_row(contacts: tuple[Contact, ...], number: int):
    selected = []
    with pytest.raises(ContactNotFoundError):
        ContactRows(contacts, on_select=selected.append).select(number)
    assert not selected


def test_display_contacts(contacts: tuple[Contact, ...]):
    output = render(display_contacts(ContactRows(contacts)))
    assert output.index("Ann") < output.index("123-456-7890") < output.index("Bob")


def test_display_empty_list():
    assert "No contacts yet" in render(display_contacts(ContactRows(())))


def test_display_add_dialog_error(bob: ContactDraft):
    assert VALIDATION_ERROR not in render(display_add_dialog(Adding(draft=bob)))
    output = render(display_add_dialog(Adding(draft=bob, show_error=True)))
    assert VALIDATION_ERROR in output
    assert "bob@x.com" in output


def test_display_edit_dialog_prefilled(ann: ContactDraft):
    output = render(display_edit_dialog(ViewingContact(contact_id=1, draft=ann)))
    assert "Edit Contact" in output
    assert "123-456-7890" in output


def test_display_markup_in_values_is_literal():
    draft = ContactDraft(name="[/bold] Ann", phone="1", email="[red]")
    output = render(display_edit_dialog(ViewingContact(contact_id=1, draft=draft)))
    assert "[/bold] Ann" in output


def test_display_removal_confirmation(ann: ContactDraft):
    output = render(
        display_removal_confirmation(ConfirmingRemoval(contact_id=1, draft=ann))
    )
    assert REMOVE_CONFIRMATION in output
