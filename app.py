import logging
import os

from apscheduler.schedulers.background import BackgroundScheduler

from config import Config
from dailytiers import create_app, start_rollover

# -----------------------------------------------------------------------------
# App setup
# -----------------------------------------------------------------------------
logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
app = create_app()

# -----------------------------------------------------------------------------
# Main
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    scheduler = None
    if app.config["TIERS_ENABLE_ROLLOVER"]:
        scheduler = BackgroundScheduler()
        scheduler.start()
        start_rollover(app, scheduler)
    try:
        app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)), debug=False)
    finally:
        if scheduler is not None:
            scheduler.shutdown(wait=False)
