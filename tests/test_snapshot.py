import json

from snapshot import serialize_snapshot


def test_basic_snapshot_structure(game):
    snap = serialize_snapshot(game)

    assert snap["round_number"] == 0
    assert snap["phase"] == "setup"
    assert snap["winner_id"] is None
    assert snap["last_dice_roll"] is None
    assert len(snap["players"]) == 4
    assert snap["board"] == {"buildings": [], "roads": []}

    p1 = snap["players"][0]
    assert set(["player_id", "name", "victory_points", "hand", "total_cards", "settlements", "cities", "roads"]).issubset(
        p1.keys()
    )


def test_snapshot_after_setup(setup_game):
    setup_game.roll_dice(1)
    snap = serialize_snapshot(setup_game)

    assert snap["phase"] == "playing"
    assert len(snap["board"]["buildings"]) == 8
    assert len(snap["board"]["roads"]) == 8
    assert all(b["type"] == "settlement" for b in snap["board"]["buildings"])
    assert snap["last_dice_roll"]["total"] == snap["last_dice_roll"]["die1"] + snap["last_dice_roll"]["die2"]

    for entry in snap["players"]:
        assert len(entry["settlements"]) == 2
        assert len(entry["roads"]) == 2
        assert entry["victory_points"] == 2

    # JSON-safe
    json.dumps(snap)
