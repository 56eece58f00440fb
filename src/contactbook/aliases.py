#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
# a stable identifier assigned to a contact when it is added to
# the list, never reused within a session
ContactId = int
# one of the three text inputs of a contact form
FieldName = str
# the 1-based position of a contact in the rendered list
RowNumber = int
