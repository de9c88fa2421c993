import atexit
import logging
import os

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from config import Config
from tiers.catalog import PuzzleCatalog
from tiers.clock import system_clock
from tiers.data import DAILY_PUZZLES
from tiers.rollover import DayRollover

from .models import db
from .utils import DailyBoard

logger = logging.getLogger(__name__)


def create_app(overrides=None, catalog=None, clock=system_clock):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    app.logger.setLevel(app.config["LOG_LEVEL"])
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_prefix=1)

    # ensure instance folder exists
    os.makedirs(os.path.join(app.instance_path), exist_ok=True)

    db.init_app(app)

    if catalog is None:
        catalog = PuzzleCatalog(
            DAILY_PUZZLES, strict=app.config["TIERS_CATALOG_STRICT"], clock=clock
        )
    app.extensions["dailytiers"] = DailyBoard(catalog, clock)

    from .routes import tiers_bp

    app.register_blueprint(tiers_bp)

    @app.route("/healthz")
    def healthz():
        return {"status": "ok"}

    with app.app_context():
        db.create_all()

    return app


def start_rollover(app, scheduler, clock=system_clock):
    """Refresh today's board at local midnight until the process exits."""
    board = app.extensions["dailytiers"]
    rollover = DayRollover(scheduler, on_rollover=board.refresh, clock=clock)
    rollover.start()
    app.extensions["dailytiers_rollover"] = rollover
    atexit.register(rollover.cancel)
    logger.info("Day rollover armed for %s", rollover.armed_for)
    return rollover
