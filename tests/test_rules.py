import itertools
import random
import unittest
from rps_arena.core.moves import Move, RoundOutcome
from rps_arena.core.rules import counter_move, random_move, resolve_round


class TestRules(unittest.TestCase):
    """
    Tests for the win rule: anti-symmetry over every pair of playable moves,
    draws on equal moves and rejection of Move.NONE.
    """

    def test_known_wins(self):
        self.assertEqual(resolve_round(Move.ROCK, Move.SCISSORS), RoundOutcome.WIN)
        self.assertEqual(resolve_round(Move.PAPER, Move.ROCK), RoundOutcome.WIN)
        self.assertEqual(resolve_round(Move.SCISSORS, Move.PAPER), RoundOutcome.WIN)
        self.assertEqual(resolve_round(Move.SCISSORS, Move.ROCK), RoundOutcome.LOSE)

    def test_anti_symmetry(self):
        for a, b in itertools.product(Move.playable(), Move.playable()):
            forward = resolve_round(a, b)
            backward = resolve_round(b, a)
            if a == b:
                self.assertEqual(forward, RoundOutcome.DRAW)
            elif forward == RoundOutcome.WIN:
                self.assertEqual(backward, RoundOutcome.LOSE)
            else:
                self.assertEqual(backward, RoundOutcome.WIN)

    def test_none_is_never_scored(self):
        with self.assertRaises(ValueError):
            resolve_round(Move.NONE, Move.ROCK)
        with self.assertRaises(ValueError):
            resolve_round(Move.PAPER, Move.NONE)

    def test_counter_move_beats_move(self):
        for move in Move.playable():
            self.assertEqual(resolve_round(counter_move(move), move), RoundOutcome.WIN)

    def test_random_move_is_playable(self):
        rng = random.Random(3)
        drawn = {random_move(rng) for _ in range(200)}
        self.assertEqual(drawn, set(Move.playable()))

    def test_parse(self):
        self.assertEqual(Move.parse("r"), Move.ROCK)
        self.assertEqual(Move.parse(" Paper "), Move.PAPER)
        self.assertEqual(Move.parse("SCISSORS"), Move.SCISSORS)
        with self.assertRaises(ValueError):
            Move.parse("lizard")


if __name__ == '__main__':
    unittest.main()
