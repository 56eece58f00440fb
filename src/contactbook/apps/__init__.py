#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from contactbook.apps.contacts import Contact, ContactDraft

__all__ = ["Contact", "ContactDraft"]
