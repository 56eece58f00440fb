#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
PACKAGE_NAME = "contactbook"
CONFIG_PACKAGE = f"{PACKAGE_NAME}.configs"
DEFAULT_CONFIG_NAME = "contact_manager"
CONTACT_FIELDS = ("name", "phone", "email")
FIRST_CONTACT_ID = 1
CLEAR_FIELD = "-"
