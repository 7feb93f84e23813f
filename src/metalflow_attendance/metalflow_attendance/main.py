from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.datetime_utils import parse_time_of_day
from .container import Container, build_container
from .core.enums import WindowBy
from .database.bootstrap import apply_schema
from .database.connection import DBConfig
from .reports.controller import register as register_reports
from .shifts.model import LunchConfig, ShiftConfig

logger = logging.getLogger(__name__)


def shift_config_from(settings) -> ShiftConfig:
    return ShiftConfig(
        morning_cutoff=parse_time_of_day(getattr(settings, "SHIFT_MORNING_CUTOFF", "06:40")),
        afternoon_cutoff=parse_time_of_day(getattr(settings, "SHIFT_AFTERNOON_CUTOFF", "13:10")),
        split_hour=int(getattr(settings, "SHIFT_SPLIT_HOUR", 12)),
    )


def lunch_config_from(settings) -> LunchConfig:
    return LunchConfig(
        lunch_start=parse_time_of_day(getattr(settings, "LUNCH_START", "12:00")),
        lunch_end=parse_time_of_day(getattr(settings, "LUNCH_END", "13:00")),
    )


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(DBConfig.from_dict(db_config))

        container = build_container(
            db_config=db_config,
            shift=shift_config_from(settings),
            lunch=lunch_config_from(settings),
            stats_window=int(getattr(settings, "STATS_WINDOW", 30)),
            window_by=WindowBy(getattr(settings, "STATS_WINDOW_BY", WindowBy.RECORD_COUNT.value)),
        )

    register_attendance(app, container)
    register_reports(app, container)
    logger.info("metalflow-attendance started (settings=%s)", settings_module)
    return app
