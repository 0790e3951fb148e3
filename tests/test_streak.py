import unittest
from rps_arena.core.moves import RoundOutcome
from rps_arena.core.streak import StreakTracker


class TestStreakTracker(unittest.TestCase):

    def test_consecutive_wins_and_multiplier_cap(self):
        st = StreakTracker(max_multiplier=4)
        for n in range(1, 7):
            st.record_win()
            self.assertEqual(st.current_streak, n)
            self.assertEqual(st.current_multiplier, min(n, 4))

    def test_reward_table_repeats_last_entry(self):
        st = StreakTracker(gold_rewards=(10, 20, 30, 40))
        rewards = [st.record_win() for _ in range(6)]
        self.assertEqual(rewards, [10, 20, 30, 40, 40, 40])
        self.assertEqual(st.next_reward(), 40)

    def test_no_reward_without_streak(self):
        st = StreakTracker()
        self.assertEqual(st.gold_reward(), 0)
        self.assertEqual(st.next_reward(), 10)

    def test_loss_resets_draw_preserves(self):
        st = StreakTracker()
        st.record_win()
        st.record_win()
        st.record_non_win(RoundOutcome.DRAW)
        self.assertEqual(st.current_streak, 2)
        st.record_non_win(RoundOutcome.LOSE)
        self.assertEqual(st.current_streak, 0)
        self.assertEqual(st.current_multiplier, 0)

    def test_record_non_win_rejects_win(self):
        with self.assertRaises(ValueError):
            StreakTracker().record_non_win(RoundOutcome.WIN)

    def test_notifications(self):
        st = StreakTracker()
        changed, rewarded = [], []
        st.subscribe("StreakChanged", changed.append)
        st.subscribe("StreakReward", rewarded.append)
        st.record_win()
        st.reset()
        self.assertEqual([e["streak"] for e in changed], [1, 0])
        self.assertEqual(rewarded, [{"type": "StreakReward", "streak": 1, "gold": 10}])

    def test_defend_keeps_streak(self):
        st = StreakTracker()
        st.record_win()
        st.defend_streak()
        self.assertEqual(st.current_streak, 1)


if __name__ == '__main__':
    unittest.main()
