"""Plain-text rendering of match events, shared by the CLI and the web viewer."""

from __future__ import annotations

from typing import Iterable

from src.engine.base import ActionType, EndReason, MatchOutcome, RoundEvent, Tile


def format_tile(tile: Tile) -> str:
    return f"<{tile.half_a}:{tile.half_b}>"


def format_tiles(tiles: Iterable[Tile]) -> str:
    """Space-separated tiles, e.g. ``<3:3> <3:5>``."""
    return " ".join(format_tile(t) for t in tiles)


def format_action(event: RoundEvent) -> str:
    """The single line saying what the acting player did."""
    if event.action == ActionType.OPENING:
        return f"Round #{event.round_number}: {event.player} starts the game with {format_tile(event.tile)}"
    if event.action == ActionType.PLAY:
        return (
            f"{event.player} plays {format_tile(event.tile)} "
            f"to connect with {format_tile(event.connected_to)} ({event.side.value} end)"
        )
    if event.action == ActionType.DRAW:
        return f"{event.player} can't play - drawing new domino tile."
    if event.action == ActionType.PASS:
        return f"{event.player} can't play and the pack is empty - passing."
    return f"{event.player} gets the following tiles: {format_tiles(event.dealt)}"


def format_event(event: RoundEvent) -> list[str]:
    """Render one event as one or more log lines."""
    if event.action in (ActionType.DEAL, ActionType.OPENING):
        return [format_action(event)]

    lines = [
        f"Round {event.round_number}: {event.player}",
        f"Tiles in hand: {format_tiles(event.hand)}",
        f"Playable: {format_tiles(event.playable) or 'none'}",
        format_action(event),
        f"Board is now: {format_tiles(event.board)}",
        f"Pack size: {event.pack_size}",
    ]
    return lines


def format_outcome(outcome: MatchOutcome) -> list[str]:
    """Render the end-of-game summary."""
    if outcome.reason == EndReason.WINNER_BY_EMPTY_HAND:
        return [f"{outcome.winner} wins in {outcome.rounds} moves!"]

    lines = ["Game ends with no winner:"]
    for name, size in outcome.hand_sizes.items():
        lines.append(f"{name} has {size} dominoes left.")
    return lines


def render_match_log(
    events: Iterable[RoundEvent],
    outcome: MatchOutcome | None = None,
) -> str:
    """Full match history as a single block of text."""
    lines: list[str] = []
    for event in events:
        if event.action not in (ActionType.DEAL, ActionType.OPENING):
            lines.append("")
        lines.extend(format_event(event))
    if outcome is not None:
        lines.append("")
        lines.extend(format_outcome(outcome))
    return "\n".join(lines)
