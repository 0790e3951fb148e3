"""
events.py
Names of the notifications fired by the RPS arena core.
"""

# match
ROUND_STARTED = "RoundStarted"
ROUND_ENDED = "RoundEnded"
HP_CHANGED = "HPChanged"
MATCH_ENDED = "MatchEnded"

# rank
POINTS_CHANGED = "PointsChanged"
RANK_CHANGED = "RankChanged"

# streak
STREAK_CHANGED = "StreakChanged"
STREAK_REWARD = "StreakReward"

# currency
CURRENCY_CHANGED = "CurrencyChanged"

# pattern analyzer
PATTERN_UPDATED = "PatternUpdated"

# engine
PHASE_CHANGED = "PhaseChanged"
MOVE_SELECTED = "MoveSelected"
MOVE_AUTO_SELECTED = "MoveAutoSelected"
ROUND_RESOLVED = "RoundResolved"
