"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from edu_records.domain.events import ErrorNotifier, PrefixedErrorNotifier
from edu_records.infrastructure.persistence.json_institute_repository import (
    JsonInstituteRepository,
)

DATA_DIR_ENV = "EDU_RECORDS_DATA_DIR"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def institute_repository() -> JsonInstituteRepository:
    return JsonInstituteRepository(data_dir() / "institutes.json")


def shared_notifier(plain: bool = False) -> ErrorNotifier:
    """Process-wide notifier for cross-cutting fault reports."""
    return ErrorNotifier() if plain else PrefixedErrorNotifier()


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
