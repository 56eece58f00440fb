#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging
from typing import Callable, TextIO

from omegaconf import DictConfig, OmegaConf
from rich.console import Console
from rich.prompt import Prompt
from rich.theme import Theme

from contactbook.apps.contacts import ContactDraft, find_contact
from contactbook.constants import CLEAR_FIELD, CONTACT_FIELDS
from contactbook.exceptions import ContactNotFoundError, SessionEndException
from contactbook.interactive.console_messages import (
    ADD_DIALOG_ACTIONS,
    EDIT_DIALOG_ACTIONS,
    FIELD_LABELS,
    FORM_HINT,
    INVALID_INPUT,
    MAIN_MENU,
    REMOVE_DIALOG_ACTIONS,
)
from contactbook.interactive.display import (
    ContactRows,
    display_add_dialog,
    display_contacts,
    display_edit_dialog,
    display_removal_confirmation,
    display_title,
)
from contactbook.state import (
    Adding,
    Closed,
    ConfirmingRemoval,
    ScreenState,
    ViewingContact,
    cancel_add,
    cancel_removal,
    confirm_add,
    confirm_removal,
    dismiss,
    initial_state,
    open_add_dialog,
    request_removal,
    save_edit,
    select_contact,
    update_draft,
)

logger = logging.getLogger(__name__)


class LineReader:
    """Reads answers from a text stream the way `input` reads them from
    stdin: without the trailing newline, and raising `EOFError` once the
    stream is exhausted."""

    def __init__(self, stream: TextIO):
        self._stream = stream

    def readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")


class ContactScreenSession:
    """The contact list screen. Owns the screen state, renders the list
    and the open dialog from it and feeds user input back through the
    state transitions.

    Parameters
    ----------
    config
        The screen config, see `configs/contact_manager.yaml`.
    stream
        Where user input is read from, one answer per line. Defaults to
        stdin. The session ends when the input is exhausted.
    file
        Where the screen is drawn, defaults to stdout.
    """

    def __init__(
        self,
        config: DictConfig,
        stream: TextIO | None = None,
        file: TextIO | None = None,
    ):
        self.config = config
        self._title = config.title
        self._stream = LineReader(stream) if stream is not None else None
        custom_theme = Theme(dict(config.theme))
        self._console = Console(theme=custom_theme, file=file)
        self.state = initial_state(
            ContactDraft(**contact)
            for contact in OmegaConf.to_container(config.contacts)
        )
        logger.info(f"Contact screen mounted with {len(self.state.contacts)} contacts")

    def rows(self) -> ContactRows:
        return ContactRows(
            self.state.contacts,
            on_select=lambda contact: self._dispatch(
                select_contact, contact.contact_id
            ),
        )

    def render(self):
        self._console.print(display_title(self._title))
        self._console.print(display_contacts(self.rows()))

    def run(self):
        while True:
            try:
                self.step()
            except SessionEndException:
                logger.info("Closing contact screen.")
                return

    def step(self):
        """Handle one round of user input for whichever dialog is open."""
        match self.state.dialog:
            case Closed():
                self._main_menu()
            case Adding():
                self._add_dialog()
            case ViewingContact():
                self._edit_dialog()
            case ConfirmingRemoval():
                self._removal_dialog()

    def _ask(self, prompt: str, **kwargs) -> str:
        try:
            return Prompt.ask(
                prompt, console=self._console, stream=self._stream, **kwargs
            )
        except EOFError:
            logger.info("End of input reached.")
            raise SessionEndException

    def _dispatch(self, transition: Callable[..., ScreenState], *args):
        previous = self.state.dialog.kind
        self.state = transition(self.state, *args)
        logger.debug(
            f"{transition.__name__}: {previous} -> {self.state.dialog.kind}"
        )

    def _main_menu(self):
        self.render()
        choice = self._ask(MAIN_MENU).lower()
        match choice:
            case "q":
                raise SessionEndException
            case "a":
                self._dispatch(open_add_dialog)
            case _:
                try:
                    self.rows().select(int(choice))
                except (ValueError, ContactNotFoundError):
                    self._console.print(INVALID_INPUT, style="danger")

    def _read_form(self, draft: ContactDraft):
        # a blank answer keeps the current text, CLEAR_FIELD empties the field
        self._console.print(FORM_HINT)
        for field in CONTACT_FIELDS:
            current = getattr(draft, field)
            value = self._ask(
                FIELD_LABELS[field], default=current, show_default=bool(current)
            )
            value = value or current
            if value == CLEAR_FIELD:
                value = ""
            self._dispatch(update_draft, field, value)

    def _add_dialog(self):
        self._console.print(display_add_dialog(self.state.dialog))
        self._read_form(self.state.dialog.draft)
        action = self._ask(
            ADD_DIALOG_ACTIONS, choices=["confirm", "cancel"], default="confirm"
        )
        match action:
            case "confirm":
                n_contacts = len(self.state.contacts)
                self._dispatch(confirm_add)
                if len(self.state.contacts) > n_contacts:
                    logger.info(f"Contact added: {self.state.contacts[-1]}")
            case "cancel":
                self._dispatch(cancel_add)

    def _edit_dialog(self):
        self._console.print(display_edit_dialog(self.state.dialog))
        self._read_form(self.state.dialog.draft)
        action = self._ask(
            EDIT_DIALOG_ACTIONS, choices=["save", "remove", "dismiss"], default="save"
        )
        match action:
            case "save":
                contact_id = self.state.dialog.contact_id
                self._dispatch(save_edit)
                logger.info(
                    f"Contact updated: {find_contact(self.state.contacts, contact_id)}"
                )
            case "remove":
                self._dispatch(request_removal)
            case "dismiss":
                self._dispatch(dismiss)

    def _removal_dialog(self):
        self._console.print(display_removal_confirmation(self.state.dialog))
        action = self._ask(
            REMOVE_DIALOG_ACTIONS, choices=["confirm", "cancel"], default="cancel"
        )
        match action:
            case "confirm":
                contact_id = self.state.dialog.contact_id
                self._dispatch(confirm_removal)
                logger.info(f"Contact {contact_id} removed")
            case "cancel":
                self._dispatch(cancel_removal)
