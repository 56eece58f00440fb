#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""The in-memory contact book shown on the contact list screen."""

from pydantic import BaseModel

from contactbook.aliases import ContactId, FieldName
from contactbook.constants import CONTACT_FIELDS
from contactbook.exceptions import ContactNotFoundError


class ContactDraft(BaseModel, frozen=True):
    """The in-progress text of a contact form. Values are kept
    exactly as typed, they are only checked when the add form
    is confirmed."""

    name: str = ""
    phone: str = ""
    email: str = ""

    def with_field(self, field: FieldName, value: str) -> "ContactDraft":
        if field not in CONTACT_FIELDS:
            raise ValueError(
                f"Unknown contact field {field!r}, expected one of {CONTACT_FIELDS}"
            )
        return self.model_copy(update={field: value})


class Contact(BaseModel, frozen=True):
    """A contact stored in the list.

    Parameters
    ----------
    contact_id
        Assigned when the contact is added and never changed by
        edits. Edit and removal match on this identifier, so two
        contacts with identical details remain distinct.
    """

    contact_id: ContactId
    name: str
    phone: str
    email: str

    @classmethod
    def from_draft(cls, contact_id: ContactId, draft: ContactDraft) -> "Contact":
        return cls(contact_id=contact_id, **draft.model_dump())

    def to_draft(self) -> ContactDraft:
        return ContactDraft(name=self.name, phone=self.phone, email=self.email)

    def __str__(self) -> str:
        return f"{self.name} ({self.contact_id})"


def find_contact(contacts: tuple[Contact, ...], contact_id: ContactId) -> Contact:
    for contact in contacts:
        if contact.contact_id == contact_id:
            return contact
    raise ContactNotFoundError(f"No contact with id {contact_id}")


def append_contact(
    contacts: tuple[Contact, ...], contact: Contact
) -> tuple[Contact, ...]:
    return contacts + (contact,)


def replace_contact(
    contacts: tuple[Contact, ...], contact_id: ContactId, draft: ContactDraft
) -> tuple[Contact, ...]:
    """Replace the details of the contact with contact_id in place,
    keeping its position in the list and its identifier."""
    find_contact(contacts, contact_id)
    return tuple(
        Contact.from_draft(contact_id, draft) if c.contact_id == contact_id else c
        for c in contacts
    )


def remove_contact(
    contacts: tuple[Contact, ...], contact_id: ContactId
) -> tuple[Contact, ...]:
    find_contact(contacts, contact_id)
    return tuple(c for c in contacts if c.contact_id != contact_id)
