#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
EMPTY_LIST = "[dim]No contacts yet. Press [bold]a[/bold] to add one.[/dim]"
MAIN_MENU = "[bold green]Enter a contact number to edit it, [bold]a[/bold] to add a contact or [bold]q[/bold] to quit[/bold green]"  # noqa
INVALID_INPUT = "Invalid input. Please try again."

ADD_DIALOG_TITLE = "Add New Contact"
ADD_DIALOG_ACTIONS = "[bold green]Confirm or cancel?[/bold green]"
VALIDATION_ERROR = "Please fill out all fields correctly"

EDIT_DIALOG_TITLE = "Edit Contact"
EDIT_DIALOG_ACTIONS = "[bold green]Save changes, remove the contact or dismiss?[/bold green]"  # noqa

REMOVE_DIALOG_TITLE = "Remove Contact"
REMOVE_CONFIRMATION = "Are you sure you want to remove this contact?"
REMOVE_DIALOG_ACTIONS = "[bold red]Confirm or cancel?[/bold red]"

FIELD_LABELS = {"name": "Name", "phone": "Phone", "email": "Email"}
FORM_HINT = "[dim]Press Enter to keep a value, enter [bold]-[/bold] to clear it.[/dim]"  # noqa
