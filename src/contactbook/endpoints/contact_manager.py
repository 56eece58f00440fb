#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import logging
from importlib import resources

import hydra
from omegaconf import DictConfig, OmegaConf

from contactbook.constants import CONFIG_PACKAGE, DEFAULT_CONFIG_NAME
from contactbook.interactive.session import ContactScreenSession

logger = logging.getLogger(__name__)


def get_config_path() -> str:
    return str(resources.files(CONFIG_PACKAGE) / ".")


def main(config: DictConfig):
    if config.debug:
        logger.info(OmegaConf.to_yaml(config, resolve=True))
    session = ContactScreenSession(config)
    session.run()


@hydra.main(
    version_base=None,
    config_name=DEFAULT_CONFIG_NAME,
    config_path=get_config_path(),
)
def manage_contacts(config: DictConfig):
    main(config)
