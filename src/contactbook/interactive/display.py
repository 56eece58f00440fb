#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging
from typing import Any, Callable, Iterator

from pydantic import BaseModel
from rich.console import Group
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from contactbook.aliases import ContactId, RowNumber
from contactbook.apps.contacts import Contact, ContactDraft
from contactbook.constants import CONTACT_FIELDS
from contactbook.exceptions import ContactNotFoundError
from contactbook.interactive.console_messages import (
    ADD_DIALOG_TITLE,
    EDIT_DIALOG_TITLE,
    EMPTY_LIST,
    FIELD_LABELS,
    REMOVE_CONFIRMATION,
    REMOVE_DIALOG_TITLE,
    VALIDATION_ERROR,
)
from contactbook.state import Adding, ConfirmingRemoval, ViewingContact

logger = logging.getLogger(__name__)


class ContactRow(BaseModel, frozen=True):

    number: RowNumber
    contact_id: ContactId
    primary: str
    secondary: str


class ContactRows:
    """A lazy view over the contact list with one row per contact, in
    list order. Iterating again starts from the first row.

    Parameters
    ----------
    contacts
        The contacts to render.
    on_select
        Called with the contact whose row was selected.
    """

    def __init__(
        self,
        contacts: tuple[Contact, ...],
        on_select: Callable[[Contact], Any] | None = None,
    ):
        self._contacts = contacts
        self._on_select = on_select

    def __iter__(self) -> Iterator[ContactRow]:
        for number, contact in enumerate(self._contacts, start=1):
            yield ContactRow(
                number=number,
                contact_id=contact.contact_id,
                primary=contact.name,
                secondary=contact.phone,
            )

    def __len__(self) -> int:
        return len(self._contacts)

    def select(self, number: RowNumber):
        if not 1 <= number <= len(self._contacts):
            raise ContactNotFoundError(f"There is no contact at row {number}")
        contact = self._contacts[number - 1]
        logger.debug(f"Row {number} selected: {contact}")
        if self._on_select is not None:
            self._on_select(contact)


def display_title(title: str) -> Rule:
    return Rule(Text(title, style="bold"))


def display_contacts(rows: ContactRows) -> Table | Text:
    """Display the contact list as a `rich` table in the format

    ┏━━━━━┳━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
    ┃ No. ┃ Contact                                  ┃
    ┡━━━━━╇━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┩
    │   1 │ Ann                                      │
    │     │ 123-456-7890                             │
    """  # noqa
    if not len(rows):
        return Text.from_markup(EMPTY_LIST)
    table = Table(show_header=True, header_style="bold magenta", expand=True)
    table.add_column("No.", justify="right", style="cyan", no_wrap=True, width=5)
    table.add_column("Contact")
    for row in rows:
        entry = Text(row.primary, style="bold")
        entry.append("\n")
        entry.append(row.secondary, style="dim")
        table.add_row(str(row.number), entry)
    return table


def _display_fields(draft: ContactDraft) -> Table:
    fields = Table.grid(padding=(0, 2))
    fields.add_column(style="cyan", no_wrap=True)
    fields.add_column()
    for field in CONTACT_FIELDS:
        fields.add_row(FIELD_LABELS[field], Text(getattr(draft, field)))
    return fields


def display_add_dialog(dialog: Adding) -> Panel:
    body = _display_fields(dialog.draft)
    if dialog.show_error:
        return Panel(
            Group(body, Text(VALIDATION_ERROR, style="red")), title=ADD_DIALOG_TITLE
        )
    return Panel(body, title=ADD_DIALOG_TITLE)


def display_edit_dialog(dialog: ViewingContact) -> Panel:
    return Panel(_display_fields(dialog.draft), title=EDIT_DIALOG_TITLE)


def display_removal_confirmation(dialog: ConfirmingRemoval) -> Panel:
    """The confirmation step shown before a contact is removed. The
    name in the edit form is shown as the subtitle."""
    return Panel(
        Text(REMOVE_CONFIRMATION),
        title=REMOVE_DIALOG_TITLE,
        subtitle=Text(dialog.draft.name),
        border_style="red",
    )
