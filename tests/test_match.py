import random
import unittest
from rps_arena.core.match import MatchState
from rps_arena.core.moves import MatchResult, RoundOutcome


class TestMatchState(unittest.TestCase):

    def test_hp_bounds_hold_for_random_rounds(self):
        rng = random.Random(7)
        for _ in range(20):
            ms = MatchState(max_hp=30, damage_per_round=10)
            ms.start_match()
            for _ in range(12):
                ms.apply_round_result(rng.choice(list(RoundOutcome)))
                self.assertTrue(0 <= ms.player_hp <= ms.max_hp)
                self.assertTrue(0 <= ms.opponent_hp <= ms.max_hp)

    def test_three_wins_is_victory(self):
        ms = MatchState(max_hp=30, damage_per_round=10)
        ended = []
        ms.subscribe("MatchEnded", ended.append)
        ms.start_match()
        for _ in range(3):
            ms.start_next_round()
            ms.apply_round_result(RoundOutcome.WIN)
        self.assertTrue(ms.is_match_ended)
        self.assertEqual((ms.player_hp, ms.opponent_hp), (30, 0))
        self.assertEqual(ms.current_round, 3)
        self.assertEqual(ms.match_result, MatchResult.VICTORY)
        self.assertEqual(ended, [{"type": "MatchEnded", "result": MatchResult.VICTORY}])

    def test_draw_deals_no_damage(self):
        ms = MatchState()
        ms.apply_round_result(RoundOutcome.DRAW)
        self.assertEqual((ms.player_hp, ms.opponent_hp), (30, 30))

    def test_damage_clamps_at_zero(self):
        ms = MatchState(max_hp=25, damage_per_round=10)
        for _ in range(3):
            ms.apply_round_result(RoundOutcome.LOSE)
        self.assertEqual(ms.player_hp, 0)
        self.assertEqual(ms.match_result, MatchResult.DEFEAT)

    def test_double_ko_is_defeat(self):
        ms = MatchState()
        ms.set_hp(0, 0)
        self.assertEqual(ms.match_result, MatchResult.DEFEAT)

    def test_set_hp_clamps(self):
        ms = MatchState(max_hp=30)
        ms.set_hp(99, -4)
        self.assertEqual((ms.player_hp, ms.opponent_hp), (30, 0))
        self.assertEqual(ms.match_result, MatchResult.VICTORY)

    def test_revived_match_is_classified_again(self):
        ms = MatchState(max_hp=30, damage_per_round=10)
        ended = []
        ms.subscribe("MatchEnded", ended.append)
        ms.start_match()
        ms.set_hp(0, 10)
        self.assertEqual(ms.match_result, MatchResult.DEFEAT)
        ms.set_hp(30, 10)
        self.assertFalse(ms.is_match_ended)
        self.assertIsNone(ms.match_result)
        ms.apply_round_result(RoundOutcome.WIN)
        self.assertTrue(ms.is_match_ended)
        self.assertEqual(ms.match_result, MatchResult.VICTORY)
        self.assertEqual([e["result"] for e in ended], [MatchResult.DEFEAT, MatchResult.VICTORY])

    def test_next_round_rejected_after_match_end(self):
        ms = MatchState()
        ms.set_hp(10, 0)
        round_before = ms.current_round
        with self.assertLogs("rps_arena.core.match", level="WARNING"):
            self.assertFalse(ms.start_next_round())
        self.assertEqual(ms.current_round, round_before)

    def test_round_events(self):
        ms = MatchState()
        seen = []
        ms.subscribe_all(seen.append)
        ms.start_match()
        ms.start_next_round()
        ms.apply_round_result(RoundOutcome.LOSE)
        self.assertEqual([e["type"] for e in seen], ["HPChanged", "RoundStarted", "RoundEnded", "HPChanged"])
        self.assertEqual(seen[2]["outcome"], RoundOutcome.LOSE)
        self.assertEqual(seen[3]["player_hp"], 20)

    def test_invalid_configuration(self):
        with self.assertRaises(ValueError):
            MatchState(max_hp=-1)


if __name__ == '__main__':
    unittest.main()
