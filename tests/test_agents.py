import random
import unittest
from rps_arena.agents import AGENT_MAP, create_agent
from rps_arena.agents.pattern_agent import PatternAgent, StrictPatternAgent
from rps_arena.agents.random_agent import RandomAgent
from rps_arena.core.config import GameConfig
from rps_arena.core.moves import Move
from rps_arena.core.state import RoundPhase
from rps_arena.session import GameSession


class TestAgents(unittest.TestCase):
    """
    Tests for the opponent registry and strategies:
      - registered names resolve to agent classes,
      - the pattern agent counters the player's most frequent move once enough history exists.
    """

    def test_registry(self):
        for name in ("random", "pattern", "pattern_strict"):
            self.assertIn(name, AGENT_MAP)
        self.assertIsInstance(create_agent("Random", rng=random.Random(1)), RandomAgent)
        with self.assertRaises(ValueError):
            create_agent("nope")

    def test_random_agent_moves_are_playable(self):
        agent = RandomAgent(rng=random.Random(2))
        for _ in range(30):
            self.assertIn(agent.choose_move({}), Move.playable())

    def test_strict_pattern_agent_counters_prediction(self):
        agent = StrictPatternAgent(rng=random.Random(0))
        view = {"player_history": (Move.ROCK, Move.SCISSORS, Move.ROCK, Move.ROCK)}
        self.assertEqual(agent.predict(view), Move.ROCK)
        self.assertEqual(agent.choose_move(view), Move.PAPER)

    def test_pattern_agent_needs_history(self):
        agent = PatternAgent(rng=random.Random(0), min_history=3)
        view = {"player_history": (Move.SCISSORS,)}
        self.assertEqual(agent.predict(view), Move.NONE)
        self.assertIn(agent.choose_move(view), Move.playable())

    def test_pattern_opponent_exploits_repeated_rock(self):
        session = GameSession(GameConfig(max_hp=100, rng_seed=4), opponent="pattern_strict")
        session.start_match()
        for _ in range(4):
            while session.phase != RoundPhase.SELECTING:
                session.advance(session.engine.timer)
            session.select_move(Move.ROCK)
            session.advance(session.engine.timer)
        # from the fourth round on the opponent has three rocks to go on
        self.assertEqual(session.engine.round_log[-1]["opponent_move"], Move.PAPER)


if __name__ == '__main__':
    unittest.main()
