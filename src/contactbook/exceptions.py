#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
class DialogStateError(Exception):
    """Raised when a screen transition is requested from a dialog
    in which that transition does not exist (eg saving edits while
    the add dialog is open)."""


class ContactNotFoundError(Exception):
    """No contact in the list carries the requested id or row."""


class SessionEndException(Exception):
    """The user quit the screen or the input was exhausted."""
