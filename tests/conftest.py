#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
from copy import deepcopy
from importlib import resources

import pytest
from omegaconf import DictConfig, OmegaConf

from contactbook.apps.contacts import ContactDraft
from contactbook.state import ScreenState, initial_state

ANN = {"name": "Ann", "phone": "123-456-7890", "email": "ann@x.com"}
BOB = {"name": "Bob", "phone": "555-000-1111", "email": "bob@x.com"}


@pytest.fixture
def ann() -> ContactDraft:
    return ContactDraft(**ANN)


@pytest.fixture
def bob() -> ContactDraft:
    return ContactDraft(**BOB)


@pytest.fixture
def state_with_ann(ann: ContactDraft) -> ScreenState:
    return initial_state([ann])


@pytest.fixture
def screen_config() -> DictConfig:
    """The packaged screen config, without the hydra settings."""
    config_file = resources.files("contactbook.configs") / "contact_manager.yaml"
    config = OmegaConf.create(config_file.read_text())
    config.pop("hydra")
    return config


@pytest.fixture
def config_with_ann(screen_config: DictConfig) -> DictConfig:
    config = deepcopy(screen_config)
    config.contacts = [ANN]
    return config
