# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

import pytest

from preferheader import Prefer


@pytest.fixture
def prefer():
    return Prefer([
        'respond-async, wait=100',
        'outlook.timezone="Europe/Berlin"',
        'handling=lenient; abort-early',
    ])


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
    logging.captureWarnings(False)
