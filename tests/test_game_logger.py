"""Tests for the event log sink."""

from confidential_grid.game_logger import GameLogger


class TestGameLogger:
    """Events are recorded in memory and on disk without secret values."""

    def test_events_written_to_file(self, tmp_path):
        logger = GameLogger(log_dir=str(tmp_path))
        logger.player_joined("0xA11CE")
        logger.building_placed("0xA11CE", 4)

        assert logger.events == [("PlayerJoined", "0xA11CE"), ("BuildingPlaced", "0xA11CE", 4)]
        content = (tmp_path / "game.log").read_text(encoding="utf-8")
        assert "PlayerJoined player=0xA11CE" in content
        assert "BuildingPlaced player=0xA11CE position=4" in content

    def test_store_log_has_no_balances(self, store, encryption, logger):
        store.join("0xA11CE")
        store.place_building("0xA11CE", 0, encryption.encrypt_input("0xA11CE", 4))

        with open(logger.log_file, encoding="utf-8") as f:
            content = f.read()
        assert "10000" not in content
        assert "9000" not in content
