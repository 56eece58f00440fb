#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
import io

from hydra import compose, initialize_config_module

from contactbook.constants import CONFIG_PACKAGE, DEFAULT_CONFIG_NAME
from contactbook.endpoints.contact_manager import main


def test_compose_config():
    with initialize_config_module(config_module=CONFIG_PACKAGE, version_base=None):
        config = compose(config_name=DEFAULT_CONFIG_NAME, overrides=["title=People"])
    assert config.title == "People"
    assert list(config.contacts) == []
    assert set(config.theme) == {"info", "warning", "danger"}


def test_main_quits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    with initialize_config_module(config_module=CONFIG_PACKAGE, version_base=None):
        config = compose(config_name=DEFAULT_CONFIG_NAME, overrides=["debug=true"])
    main(config)
    assert "Contact List" in capsys.readouterr().out
