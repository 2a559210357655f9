#!/usr/bin/env python3
"""
AI Move Suggester Script

This script takes a board representation as input and returns the AI's
suggested move for tic-tac-toe.

Usage:
    tictactoe-suggest <board_string> <current_player> [options]

Board String Format:
    9-character string representing cells 0-8 in row-major order, where:
    - 'X' = X occupies this cell
    - 'O' = O occupies this cell
    - '_' = Empty cell

Example:
    tictactoe-suggest "_________" X
    tictactoe-suggest "XX_OO____" X --format json
"""

import sys
import argparse
import json
import logging
from typing import List, Optional

from .models.enums import CellMark
from .game.board import Board
from .ai.agent import AIAgent, AIDecision
from .ai.evaluation.win_detector import WinEvaluator
from .ai.strategy import RuleBasedStrategy


def parse_board_string(board_string: str) -> Board:
    """
    Parse a board string into a Board and check it could occur in play.

    Args:
        board_string: 9-character string representing the board state

    Returns:
        Board with the specified state

    Raises:
        ValueError: If board string is invalid
    """
    board = Board.from_string(board_string)

    # X moves first, so X has as many marks as O or one more
    x_count = board.count(CellMark.X)
    o_count = board.count(CellMark.O)
    if x_count < o_count or x_count > o_count + 1:
        raise ValueError(f"Invalid move count: X has {x_count} moves, O has {o_count} moves")

    return board


def player_to_move(board: Board) -> CellMark:
    """Work out whose turn it is from the mark counts."""
    return CellMark.X if board.count(CellMark.X) == board.count(CellMark.O) else CellMark.O


def format_output(decision: AIDecision, format_type: str = 'human') -> str:
    """
    Format the AI decision output.

    Args:
        decision: AIDecision object
        format_type: Output format ('human', 'json', 'simple')

    Returns:
        Formatted output string
    """
    if format_type == 'json':
        output = {
            'suggested_move': decision.index,
            'player': decision.mark.value,
            'rule': decision.rule.value if decision.rule else None,
            'reasoning': decision.reasoning,
            'move_time': decision.move_time,
        }
        return json.dumps(output, indent=2)

    elif format_type == 'simple':
        return str(decision.index)

    else:  # human format
        output = []
        output.append(f"AI Suggested Move: {decision.index}")
        output.append(f"Player: {decision.mark.value}")
        output.append(f"Rule: {decision.rule.value if decision.rule else 'n/a'}")
        output.append(f"Reasoning: {decision.reasoning}")
        output.append(f"Time taken: {decision.move_time:.6f}s")
        return "\n".join(output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Get AI move suggestion for tic-tac-toe",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Get move for X on empty board
  tictactoe-suggest "_________" X

  # Get move for O after X took the center
  tictactoe-suggest "____X____" O

  # Reproducible corner/edge choice and JSON output
  tictactoe-suggest "X___O____" X --seed 7 --format json

  # Simple output (just the cell number)
  tictactoe-suggest "XX_OO____" X --format simple
        """
    )

    parser.add_argument(
        'board_string',
        help='9-character board representation (X/O/_ for each cell 0-8)'
    )

    parser.add_argument(
        'current_player',
        choices=['X', 'O'],
        help='Current player to move (X or O)'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for the AI random tie-breaks (default: unseeded)'
    )

    parser.add_argument(
        '--format',
        choices=['human', 'json', 'simple'],
        default='human',
        help='Output format (default: human)'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to handle command line arguments and run AI move suggestion."""
    args = build_parser().parse_args(argv)

    try:
        # Parse inputs
        board = parse_board_string(args.board_string)
        current_player = CellMark.from_char(args.current_player)

        # Validate that it's the correct player's turn
        expected = player_to_move(board)
        if expected != current_player:
            print(f"Error: Board indicates it's {expected.value}'s turn, but you specified {current_player.value}",
                  file=sys.stderr)
            return 1

        result = WinEvaluator().evaluate(board)
        if result.has_winner or board.is_full():
            print(f"Error: Game is already over ({result})", file=sys.stderr)
            return 1

        agent = AIAgent(
            current_player,
            RuleBasedStrategy(seed=args.seed),
            enable_logging=args.verbose
        )
        if args.verbose:
            agent.logger.setLevel(logging.DEBUG)

        decision = agent.decide(board)
        print(format_output(decision, args.format))

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
