import logging
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from cbct_preset_selector.cli.logging_config import ROOT_LOGGER_NAME
from cbct_preset_selector.cli.terminal import Terminal


SAMPLE_CSV = (
    "machine,pathology,preset\n"
    "LinacB,Pelvis,Pelvis M20\n"
    "LinacA,Lung,Thorax M20\n"
    "\n"
    "LinacA,Brain,Head S20\n"
    "LinacB,Brain,Head S20 fast\n"
    "LinacA,Abdomen,Pelvis M15\n"
)


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers installed by setup_logging so runs don't leak into each other"""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_csv(tmp_path) -> Path:
    path = tmp_path / "data.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def make_terminal():
    """Factory for terminals reading canned answers and writing to memory"""
    def factory(answers: str) -> Terminal:
        console = Console(file=StringIO(), force_terminal=False, width=120)
        return Terminal(console=console, stream=StringIO(answers))

    return factory
