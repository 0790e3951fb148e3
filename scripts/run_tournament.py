"""run_tournament.py
Round-robin tournament between RPS arena agents. For every ordered pairing one agent plays
the player seat (seeing the opponent's move window through the session's PatternAnalyzer)
and the other the opponent seat. Matches run through the real round engine with the
selection countdown, so rank points, streaks and gold accumulate as in a live session.

Results are written to CSV and a win-percentage bar chart.

Usage: python scripts/run_tournament.py --agents all --matches 20
"""
import os
import argparse
import csv
import datetime
import itertools
import logging
import random
from collections import defaultdict
from typing import Any, Dict, List

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

from rps_arena.agents import AGENT_MAP
from rps_arena.core.config import GameConfig
from rps_arena.core.moves import MatchResult, RoundOutcome
from rps_arena.core.state import RoundPhase
from rps_arena.session import GameSession

MATCH_HEADER = ['match_id', 'timestamp', 'player_agent', 'opponent_agent', 'result', 'rounds',
                'wins', 'losses', 'draws', 'auto_selected', 'player_hp', 'opponent_hp',
                'rank_points', 'rank', 'gold', 'best_streak']


def player_view(session: GameSession) -> Dict[str, Any]:
    # seen from the player seat, "player_history" holds the opponent's moves
    return {
        'round': session.match.current_round,
        'player_hp': session.match.opponent_hp,
        'opponent_hp': session.match.player_hp,
        'player_history': tuple(session.pattern.recent_moves(session.config.history_size)),
        'config': session.config,
    }


def run_match(player_key: str, opponent_key: str, cfg: GameConfig, match_id: str, seed: int) -> Dict[str, Any]:
    rng = random.Random(seed)
    player = AGENT_MAP[player_key](rng=random.Random(rng.random()))
    opponent = AGENT_MAP[opponent_key](rng=random.Random(rng.random()))
    session = GameSession(cfg, opponent_agent=opponent)

    best_streak = 0

    def track_streak(event):
        nonlocal best_streak
        best_streak = max(best_streak, event['streak'])

    session.streak.subscribe('StreakChanged', track_streak)
    session.start_match()
    engine = session.engine
    while not engine.is_terminal():
        if engine.phase == RoundPhase.SELECTING:
            session.select_move(player.choose_move(player_view(session)))
        else:
            session.advance(engine.timer)

    outcomes = [r['outcome'] for r in engine.round_log]
    return {
        'match_id': match_id,
        'timestamp': datetime.datetime.now(datetime.timezone.utc).isoformat(),
        'player_agent': player_key,
        'opponent_agent': opponent_key,
        'result': session.match.match_result.value,
        'rounds': session.match.current_round,
        'wins': outcomes.count(RoundOutcome.WIN),
        'losses': outcomes.count(RoundOutcome.LOSE),
        'draws': outcomes.count(RoundOutcome.DRAW),
        'auto_selected': sum(1 for r in engine.round_log if r['auto_selected']),
        'player_hp': session.match.player_hp,
        'opponent_hp': session.match.opponent_hp,
        'rank_points': session.rank.current_points,
        'rank': session.rank.rank_display,
        'gold': session.rewards.gold,
        'best_streak': best_streak,
    }


def write_rows_to_csv(rows: List[dict], path: str, header: List[str]):
    write_header = not os.path.exists(path)
    with open(path, 'a', newline='', encoding='utf-8') as f:
        writer = csv.DictWriter(f, fieldnames=header)
        if write_header:
            writer.writeheader()
        for r in rows:
            writer.writerow(r)


def aggregate_and_plot(agent_stats: Dict[str, dict], out_path: str):
    agents = sorted(agent_stats.keys())
    wins = [agent_stats[a].get('wins', 0) for a in agents]
    games = [agent_stats[a].get('games', 0) for a in agents]
    win_perc = [(w / g * 100.0) if g > 0 else 0.0 for w, g in zip(wins, games)]

    width = max(6, int(len(agents) * 0.6))
    plt.figure(figsize=(width, 4))
    bars = plt.bar(agents, win_perc, color='C0')
    plt.ylabel('Match win percentage (%)')
    plt.ylim(0, 100)
    plt.title('Tournament: match win% per agent')
    for rect, val in zip(bars, win_perc):
        plt.text(rect.get_x() + rect.get_width() / 2.0, rect.get_height() + 1.0, f"{val:.1f}%", ha='center', va='bottom', fontsize=8)
    plt.tight_layout()
    plt.savefig(out_path)
    plt.close()


def run_tournament(agent_keys: List[str], matches_per_pair: int, data_dir: str, seed: int):
    os.makedirs(data_dir, exist_ok=True)
    match_csv = os.path.join(data_dir, 'match_summary.csv')
    agent_csv = os.path.join(data_dir, 'agent_stats.csv')
    chart_png = os.path.join(data_dir, 'win_percentages.png')

    cfg = GameConfig(rng_seed=seed)
    agent_stats = defaultdict(lambda: defaultdict(int))
    match_rows = []

    pairs = list(itertools.product(agent_keys, agent_keys))
    total = len(pairs) * matches_per_pair
    counter = 0
    for (p_key, o_key) in pairs:
        for i in range(matches_per_pair):
            counter += 1
            match_id = f"{p_key}_vs_{o_key}_{i}"
            print(f"Running {counter}/{total}: {p_key} (player) vs {o_key} (opponent) match {i+1}/{matches_per_pair}...", end=' ')
            row = run_match(p_key, o_key, cfg, match_id, seed + counter)
            match_rows.append(row)

            player_won = row['result'] == MatchResult.VICTORY.value
            winner_key = p_key if player_won else o_key
            agent_stats[winner_key]['wins'] += 1
            agent_stats[p_key]['games'] += 1
            agent_stats[o_key]['games'] += 1
            agent_stats[p_key]['wins_as_player'] += int(player_won)
            agent_stats[o_key]['wins_as_opponent'] += int(not player_won)
            print(row['result'])

    write_rows_to_csv(match_rows, match_csv, MATCH_HEADER)

    agent_rows = []
    agent_header = ['agent', 'games', 'wins', 'win_percent', 'wins_as_player', 'wins_as_opponent']
    for agent in sorted(agent_keys):
        g = agent_stats[agent].get('games', 0)
        w = agent_stats[agent].get('wins', 0)
        agent_rows.append({
            'agent': agent,
            'games': g,
            'wins': w,
            'win_percent': f"{(w / g * 100.0) if g > 0 else 0.0:.3f}",
            'wins_as_player': agent_stats[agent].get('wins_as_player', 0),
            'wins_as_opponent': agent_stats[agent].get('wins_as_opponent', 0),
        })
    write_rows_to_csv(agent_rows, agent_csv, agent_header)

    aggregate_and_plot(agent_stats, chart_png)

    print(f"Tournament finished. Match summaries saved to {match_csv}")
    print(f"Per-agent stats: {agent_csv}")
    print(f"Win percentage chart: {chart_png}")


def parse_agent_list(s: str) -> List[str]:
    if s.strip().lower() == 'all':
        return sorted(list(AGENT_MAP.keys()))
    return [x.strip() for x in s.split(',') if x.strip()]


def main():
    parser = argparse.ArgumentParser(description='Run a round-robin tournament between RPS arena agents')
    parser.add_argument('--agents', type=str, default='all', help='Comma-separated list of agent keys from AGENT_MAP or "all"')
    parser.add_argument('--matches', type=int, default=10, help='Number of matches per ordered pairing')
    parser.add_argument('--data-dir', type=str, default='data', help='Directory to save csv and charts')
    parser.add_argument('--seed', type=int, default=69, help='Base RNG seed')
    parser.add_argument('--verbose', action='store_true', help='Log engine activity')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    agent_keys = parse_agent_list(args.agents)
    unknown = [a for a in agent_keys if a not in AGENT_MAP]
    if unknown:
        raise SystemExit(f"Unknown agents: {unknown}. Supported: {list(AGENT_MAP.keys())}")

    run_tournament(agent_keys, args.matches, args.data_dir, args.seed)


if __name__ == '__main__':
    main()
