import logging
import sys
import time
from typing import Optional


from rps_arena.core.config import GameConfig
from rps_arena.core import events
from rps_arena.core.moves import Move
from rps_arena.core.state import RoundPhase
from rps_arena.agents import AGENT_MAP
from rps_arena.session import GameSession


def print_status(session: GameSession):
    """
    Print HP, rank, streak and currency to the terminal.
    Args:
        session (GameSession): The running session.
    """
    match = session.match
    print(f"\n=== ROUND {match.current_round} ===")
    print(f"HP  you: {match.player_hp}/{match.max_hp}   opponent: {match.opponent_hp}/{match.max_hp}")
    print(f"Rank: {session.rank.rank_display} ({session.rank.current_points} pts, "
          f"{session.rank.points_to_next_tier()} to next tier)")
    print(f"Streak: {session.streak.current_streak} (x{session.streak.current_multiplier})   "
          f"Gold: {session.rewards.gold}  Gems: {session.rewards.gems}")
    print(session.pattern.statistics_string())



def prompt_move(seconds: float) -> Optional[Move]:
    """
    Prompt the human player for a move.
    Args:
        seconds (float): Countdown shown to the player.
    Returns:
        Move or None: The chosen move, or None to let the countdown run out.
    """
    while True:
        choice = input(f"Your move [r]ock/[p]aper/[s]cissors, empty to wait ({seconds:.0f}s): ").strip()
        if not choice:
            return None
        try:
            return Move.parse(choice)
        except ValueError as e:
            print(e)



def show_rules(config: GameConfig):
    """
    Print the current game rules and configuration to the terminal.
    Args:
        config (GameConfig): The game configuration.
    """
    print("\n=== GAME RULES ===")
    print("Rock beats Scissors, Paper beats Rock, Scissors beats Paper.")
    print(f"Both sides start with {config.max_hp} HP; the loser of a round takes {config.damage_per_round} damage.")
    print(f"You have {config.countdown_time:.0f}s to pick; when time runs out a move is picked for you.")
    print(f"Wins earn {config.base_win_points} points x streak (max x{config.max_streak_multiplier}), "
          f"losses cost {-config.base_lose_points}, draws earn {config.draw_points}.")



def attach_printer(session: GameSession):
    """
    Subscribe terminal output to the session notifications.
    """
    def on_event(event):
        t = event["type"]
        if t == events.MOVE_AUTO_SELECTED:
            print(f"Time's up! Auto-selected {event['move']} for you.")
        elif t == events.ROUND_RESOLVED:
            print(f"You: {event['player_move']}  vs  Opponent: {event['opponent_move']}  -> "
                  f"{event['outcome'].value.upper()}")
        elif t == events.STREAK_REWARD:
            print(f"{event['streak']} win streak! +{event['gold']} gold bonus")
        elif t == events.RANK_CHANGED:
            print(f"*** Rank changed: {event['tier'].display_name} {event['division'].name} ***")
        elif t == events.MATCH_ENDED:
            print(f"\n--- MATCH ENDED: {event['result'].value.upper()} ---")

    session.engine.subscribe_all(on_event)
    session.streak.subscribe(events.STREAK_REWARD, on_event)
    session.rank.subscribe(events.RANK_CHANGED, on_event)
    session.match.subscribe(events.MATCH_ENDED, on_event)



def play_match(session: GameSession, pace: float = 0.5):
    """
    Play one match as a human against the session's opponent.
    Non-interactive phases are shortened by `pace` (0 skips the pauses).
    Args:
        session (GameSession): Session to play in.
        pace (float): Fraction of each pause actually slept.
    """
    engine = session.engine
    session.start_match()
    while not engine.is_terminal():
        if engine.phase == RoundPhase.SELECTING:
            print_status(session)
            started = time.monotonic()
            move = prompt_move(engine.timer)
            elapsed = time.monotonic() - started
            if move is None or elapsed >= engine.timer:
                if move is not None:
                    print("Too slow!")
                session.advance(engine.timer)
            else:
                session.advance(elapsed)
                session.select_move(move)
        else:
            time.sleep(engine.timer * pace)
            session.advance(engine.timer)

    match = session.match
    print(f"Rounds played: {match.current_round}")
    print(f"Final HP  you: {match.player_hp}  opponent: {match.opponent_hp}")
    print(f"Rank: {session.rank.rank_display} ({session.rank.current_points} pts)  Gold: {session.rewards.gold}")



if __name__ == "__main__":
    # Simple launcher: allow user to view rules and pick an opponent
    # create config at runtime with rng_seed=None so every session is different
    logging.basicConfig(level=logging.WARNING)
    cfg = GameConfig(rng_seed=None)
    print("Welcome to RPS Arena (CLI)")
    session = None
    while True:
        print("\nMenu:\n  1) Show rules\n  2) Play\n  3) Quit")
        sel = input("Choose: ").strip()
        if sel == "1":
            show_rules(cfg)
            continue
        if sel == "2":
            if session is None:
                agent_choice = "random"
                if len(sys.argv) > 1:
                    agent_choice = sys.argv[1]
                else:
                    a = input(f"Choose opponent {sorted(AGENT_MAP)} [default random]: ").strip()
                    if a:
                        agent_choice = a
                try:
                    session = GameSession(cfg, opponent=agent_choice)
                except ValueError as e:
                    print(e)
                    continue
                attach_printer(session)
            try:
                play_match(session)
            except KeyboardInterrupt:
                print("\nMatch abandoned.")
                session.restart()
            continue
        if sel == "3":
            print("Goodbye")
            break
        print("Unknown choice")
