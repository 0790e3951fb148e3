import dataclasses
import unittest
from rps_arena.core.config import GameConfig
from rps_arena.core.moves import Move
from rps_arena.core.state import RoundPhase
from rps_arena.recording.recorder import InMemoryRecorder
from rps_arena.session import GameSession


class TestConfig(unittest.TestCase):
    """
    Tests that GameConfig carries the documented defaults and rejects invalid values at construction.
    """

    def test_defaults(self):
        cfg = GameConfig()
        self.assertEqual(cfg.max_hp, 30)
        self.assertEqual(cfg.damage_per_round, 10)
        self.assertEqual(cfg.countdown_time, 5.0)
        self.assertEqual(cfg.history_size, 10)
        self.assertEqual(cfg.streak_gold_rewards, (10, 20, 30, 40))

    def test_invalid_values_rejected(self):
        for bad in ({"max_hp": 0}, {"max_hp": -30}, {"damage_per_round": -1}, {"countdown_time": 0},
                    {"reveal_delay": -1.0}, {"history_size": 0}, {"max_streak_multiplier": 0},
                    {"streak_gold_rewards": ()}, {"starting_gold": -5}):
            with self.assertRaises(ValueError, msg=str(bad)):
                GameConfig(**bad)

    def test_frozen(self):
        cfg = GameConfig()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            cfg.max_hp = 50


class TestSession(unittest.TestCase):

    def test_session_wires_config_into_ledgers(self):
        cfg = GameConfig(max_hp=50, damage_per_round=5, history_size=4, starting_gold=7)
        session = GameSession(cfg)
        self.assertEqual(session.match.max_hp, 50)
        self.assertEqual(session.match.damage_per_round, 5)
        self.assertEqual(session.pattern.history_size, 4)
        self.assertEqual(session.rewards.gold, 7)
        self.assertIs(session.engine.match, session.match)
        self.assertIs(session.engine.rank, session.rank)

    def test_unknown_opponent(self):
        with self.assertRaises(ValueError):
            GameSession(opponent="telepath")

    def test_reset_progression(self):
        session = GameSession()
        session.rank.add_points(700)
        session.streak.record_win()
        session.rewards.add_gems(3)
        session.pattern.record_move(Move.ROCK)
        session.reset_progression()
        self.assertEqual(session.rank.current_points, 0)
        self.assertEqual(session.streak.current_streak, 0)
        self.assertEqual((session.rewards.gold, session.rewards.gems), (100, 0))
        self.assertEqual(session.pattern.total_moves, 0)


class TestRecorder(unittest.TestCase):

    def test_records_all_notifications(self):
        session = GameSession(GameConfig(rng_seed=11))
        recorder = InMemoryRecorder("test")
        recorder.attach(session)
        session.start_match()
        while session.phase != RoundPhase.SELECTING:
            session.advance(session.engine.timer)
        session.select_move(Move.PAPER)
        types = {e.event_type for e in recorder.events()}
        for expected in ("HPChanged", "RoundStarted", "RoundEnded", "PointsChanged", "PatternUpdated",
                         "PhaseChanged", "MoveSelected", "RoundResolved"):
            self.assertIn(expected, types)
        sequences = [e.sequence for e in recorder.events()]
        self.assertEqual(sequences, list(range(len(sequences))))
        self.assertEqual(recorder.events("RoundStarted")[0].payload, {"round": 1})
        self.assertEqual(recorder.events("RoundStarted")[0].source, "MatchState")

    def test_detach_stops_recording(self):
        session = GameSession()
        recorder = InMemoryRecorder()
        recorder.attach(session)
        recorder.detach()
        session.start_match()
        self.assertEqual(recorder.events(), [])


if __name__ == '__main__':
    unittest.main()
