from flask import Blueprint, current_app, request

from tiers.session import GameSession
from tiers.storage import PersistenceAdapter

from .models import SqlStore
from .utils import get_player_id

tiers_bp = Blueprint("tiers", __name__, url_prefix="/api/tiers")


def _open_game():
    puzzle, puzzle_id = current_app.extensions["dailytiers"].current()
    storage = PersistenceAdapter(SqlStore(get_player_id()))
    game = GameSession(
        puzzle,
        puzzle_id,
        storage,
        max_attempts=current_app.config["TIERS_MAX_ATTEMPTS"],
    )
    game.load()
    return game


@tiers_bp.route("/today")
def today():
    """Today's board plus the player's saved progress."""
    game = _open_game()
    return {"puzzle": game.board(), "state": game.state()}


@tiers_bp.route("/move", methods=["POST"])
def move():
    """Drop an item on a tier or back in the pool."""
    data = request.get_json(silent=True) or {}
    item_id = data.get("itemId")
    destination = data.get("destination")
    if not item_id or destination is None:
        return {"error": "itemId and destination are required."}, 400

    game = _open_game()
    if game.game_over:
        return {"error": "Today's puzzle is already finished.", "state": game.state()}, 409

    moved = game.move(str(item_id), str(destination))
    return {"moved": moved, "state": game.state()}


@tiers_bp.route("/submit", methods=["POST"])
def submit():
    """Check a full board. Once the game is over this just replays the results."""
    game = _open_game()
    payload = game.submit().to_dict()
    payload["state"] = game.state()
    if payload["gameOver"]:
        payload["puzzle"] = game.board()
    return payload
