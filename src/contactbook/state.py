#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""State of the contact list screen and the transitions between its dialogs.

The screen holds the contact list and exactly one dialog variant:

    Closed -> Adding -> Closed
    Closed -> ViewingContact <-> ConfirmingRemoval
                    |                   |
                    +----> Closed <-----+

Every transition is a pure function returning a new `ScreenState`, the
controller renders from the state and dispatches user input back through
these functions.
"""

import logging
from typing import Annotated, Iterable, Literal, TypeVar

from pydantic import BaseModel, Field

from contactbook.aliases import ContactId, FieldName
from contactbook.apps.contacts import (
    Contact,
    ContactDraft,
    append_contact,
    find_contact,
    remove_contact,
    replace_contact,
)
from contactbook.constants import FIRST_CONTACT_ID
from contactbook.exceptions import DialogStateError
from contactbook.validation import is_valid_contact

logger = logging.getLogger(__name__)


class Closed(BaseModel, frozen=True):
    kind: Literal["closed"] = "closed"


class Adding(BaseModel, frozen=True):
    """The add contact form is open.

    Parameters
    ----------
    show_error
        Set once a confirm attempt failed validation. The form stays
        open with the draft intact until it is confirmed or cancelled.
    """

    kind: Literal["adding"] = "adding"
    draft: ContactDraft = ContactDraft()
    show_error: bool = False


class ViewingContact(BaseModel, frozen=True):
    kind: Literal["viewing"] = "viewing"
    contact_id: ContactId
    draft: ContactDraft


class ConfirmingRemoval(BaseModel, frozen=True):
    """Removal of `contact_id` awaits confirmation. The edit draft is
    carried along so cancelling returns to the fields as they were."""

    kind: Literal["confirming_removal"] = "confirming_removal"
    contact_id: ContactId
    draft: ContactDraft


DialogState = Annotated[
    Closed | Adding | ViewingContact | ConfirmingRemoval,
    Field(discriminator="kind"),
]

_Dialog = TypeVar("_Dialog", Closed, Adding, ViewingContact, ConfirmingRemoval)


class ScreenState(BaseModel, frozen=True):

    contacts: tuple[Contact, ...] = ()
    dialog: DialogState = Closed()
    next_id: ContactId = FIRST_CONTACT_ID


def initial_state(drafts: Iterable[ContactDraft] = ()) -> ScreenState:
    """The state at screen mount: no dialog open and the list holding
    `drafts` (empty unless seeded from config), in order."""
    state = ScreenState()
    for draft in drafts:
        state = _add(state, draft)
    return state


def _expect(state: ScreenState, dialog_type: type[_Dialog], transition: str) -> _Dialog:
    if not isinstance(state.dialog, dialog_type):
        raise DialogStateError(
            f"Cannot {transition} while the dialog is {state.dialog.kind!r}"
        )
    return state.dialog


def _add(state: ScreenState, draft: ContactDraft) -> ScreenState:
    contact = Contact.from_draft(state.next_id, draft)
    return state.model_copy(
        update={
            "contacts": append_contact(state.contacts, contact),
            "next_id": state.next_id + 1,
        }
    )


def open_add_dialog(state: ScreenState) -> ScreenState:
    _expect(state, Closed, "open the add dialog")
    return state.model_copy(update={"dialog": Adding()})


def update_draft(state: ScreenState, field: FieldName, value: str) -> ScreenState:
    """Replace one text input of the open add or edit form."""
    match state.dialog:
        case Adding() | ViewingContact():
            dialog = state.dialog.model_copy(
                update={"draft": state.dialog.draft.with_field(field, value)}
            )
            return state.model_copy(update={"dialog": dialog})
        case _:
            raise DialogStateError(
                f"No form is open to edit, the dialog is {state.dialog.kind!r}"
            )


def confirm_add(state: ScreenState) -> ScreenState:
    """Append the draft as a new contact and close the form if it
    passes validation, otherwise keep the form open with the error
    flag set."""
    dialog = _expect(state, Adding, "confirm a new contact")
    draft = dialog.draft
    if not is_valid_contact(draft.name, draft.phone, draft.email):
        logger.info("New contact rejected by validation.")
        return state.model_copy(
            update={"dialog": dialog.model_copy(update={"show_error": True})}
        )
    state = _add(state, draft)
    return state.model_copy(update={"dialog": Closed()})


def cancel_add(state: ScreenState) -> ScreenState:
    _expect(state, Adding, "cancel adding a contact")
    return state.model_copy(update={"dialog": Closed()})


def select_contact(state: ScreenState, contact_id: ContactId) -> ScreenState:
    _expect(state, Closed, "select a contact")
    contact = find_contact(state.contacts, contact_id)
    dialog = ViewingContact(contact_id=contact_id, draft=contact.to_draft())
    return state.model_copy(update={"dialog": dialog})


def save_edit(state: ScreenState) -> ScreenState:
    """Write the edit form back to the selected contact. Edits are not
    validated, any text entered is saved."""
    dialog = _expect(state, ViewingContact, "save changes")
    contacts = replace_contact(state.contacts, dialog.contact_id, dialog.draft)
    return state.model_copy(update={"contacts": contacts, "dialog": Closed()})


def request_removal(state: ScreenState) -> ScreenState:
    dialog = _expect(state, ViewingContact, "request removal")
    return state.model_copy(
        update={
            "dialog": ConfirmingRemoval(
                contact_id=dialog.contact_id, draft=dialog.draft
            )
        }
    )


def cancel_removal(state: ScreenState) -> ScreenState:
    dialog = _expect(state, ConfirmingRemoval, "cancel removal")
    return state.model_copy(
        update={
            "dialog": ViewingContact(contact_id=dialog.contact_id, draft=dialog.draft)
        }
    )


def confirm_removal(state: ScreenState) -> ScreenState:
    dialog = _expect(state, ConfirmingRemoval, "confirm removal")
    contacts = remove_contact(state.contacts, dialog.contact_id)
    return state.model_copy(update={"contacts": contacts, "dialog": Closed()})


def dismiss(state: ScreenState) -> ScreenState:
    """Close the edit dialog without touching the list."""
    _expect(state, ViewingContact, "dismiss the contact dialog")
    return state.model_copy(update={"dialog": Closed()})
