"""
Domino Duel - Match Engine

Runs one two-player match from the deal to the final round.

Game Rules:
- 28-tile double-six pack, shuffled, 7 tiles dealt to each player
- A random player opens with a random tile from their hand
- Players alternate; each plays the first playable tile in hand order
- A player with nothing playable draws one tile, or passes if the pack is empty
- Emptying your hand wins; passing on an empty pack blocks the match

Each Match owns its board, pack and players. Nothing is shared between
matches, so any number of them can run side by side in one process.
"""

import logging
import random
from collections import deque
from typing import Sequence

from src.engine.base import (
    ActionType,
    BoardEnd,
    EndReason,
    MatchOutcome,
    MatchStatus,
    RoundEvent,
    Tile,
)
from src.engine.board import Board
from src.engine.hand import Player
from src.engine.pack import Pack
from src.engine.validators import validate_player_names, validate_tiles_per_hand

logger = logging.getLogger(__name__)

DEFAULT_TILES_PER_HAND = 7


class Match:
    """
    A single domino match and its turn loop.

    State moves NOT_STARTED -> RUNNING -> FINISHED. Every step appends a
    RoundEvent; rendering those events is left to the caller.
    """

    def __init__(
        self,
        player_names: Sequence[str],
        *,
        tiles_per_hand: int = DEFAULT_TILES_PER_HAND,
        rng: random.Random | None = None,
        pack: Pack | None = None,
        shuffle: bool = True,
    ) -> None:
        names = validate_player_names(player_names)
        self.tiles_per_hand = validate_tiles_per_hand(tiles_per_hand)
        self._rng = rng or random.Random()
        self._shuffle = shuffle

        self.players: tuple[Player, ...] = tuple(Player(name) for name in names)
        self.board = Board()
        self.pack = pack if pack is not None else Pack.build_full_set()

        self._seating: deque[Player] = deque(self.players)
        self._events: list[RoundEvent] = []
        self._status = MatchStatus.NOT_STARTED
        self._outcome: MatchOutcome | None = None
        self.round_number = 0

    @property
    def status(self) -> MatchStatus:
        return self._status

    @property
    def outcome(self) -> MatchOutcome | None:
        return self._outcome

    @property
    def events(self) -> tuple[RoundEvent, ...]:
        return tuple(self._events)

    @property
    def current_player(self) -> Player:
        """Player at the head of the seating (the last one to act)."""
        return self._seating[0]

    def start(
        self,
        opening_player: int | None = None,
        opening_tile_index: int | None = None,
    ) -> list[RoundEvent]:
        """
        Deal the hands and lay the opening tile.

        Args:
            opening_player: Index of the opener in seating order (random if None)
            opening_tile_index: Index of the opening tile in the opener's hand
                (random if None)

        Returns:
            The DEAL and OPENING events emitted

        Raises:
            RuntimeError: If the match has already started
            ValueError: If the pack cannot fill both hands
        """
        if self._status != MatchStatus.NOT_STARTED:
            raise RuntimeError(f"Match already started (status: {self._status.value}).")

        if self._shuffle:
            self.pack.shuffle(self._rng)

        needed = len(self.players) * self.tiles_per_hand
        if self.pack.remaining_count() < needed:
            raise ValueError(
                f"Cannot deal {self.tiles_per_hand} tiles to each of {len(self.players)} players, "
                f"only {self.pack.remaining_count()} left in the pack."
            )

        first_event = len(self._events)
        for player in self.players:
            dealt = self.pack.deal_hand(player, self.tiles_per_hand)
            self._emit(player, ActionType.DEAL, dealt=tuple(t.copy() for t in dealt))

        if opening_player is None:
            opening_player = self._rng.randrange(len(self.players))
        opener = self.players[opening_player]
        if opening_tile_index is None:
            opening_tile_index = self._rng.randrange(opener.hand.size())

        # Opener takes the head of the seating; play then alternates from them.
        self._seating.rotate(-opening_player)

        tile = opener.hand.remove_at(opening_tile_index)
        self.board.place_opening(tile)
        self.round_number = 1
        self._status = MatchStatus.RUNNING
        self._emit(opener, ActionType.OPENING, tile=tile)

        logger.info(
            "Match started: %s opens with %s",
            opener.name, tile,
        )

        if opener.hand.size() == 0:
            self._finish_with_winner(opener)

        return self._events[first_event:]

    def play_round(self) -> RoundEvent:
        """
        Play one round for the next player in the seating.

        Returns:
            The PLAY, DRAW or PASS event for the round

        Raises:
            RuntimeError: If the match is not running
        """
        if self._status != MatchStatus.RUNNING:
            raise RuntimeError(f"Cannot play a round, match is {self._status.value}.")

        self.round_number += 1
        self._seating.rotate(-1)
        player = self._seating[0]

        playable = player.hand.playable_tiles(self.board.ends())
        hand_before = tuple(t.copy() for t in player.hand)
        playable_before = tuple(t.copy() for t in playable)
        passed = False

        if playable:
            # Simplest policy: the first playable tile in hand order.
            selected = player.hand.remove(playable[0])
            linked, side = self.board.place_tile(selected)
            event = self._emit(
                player,
                ActionType.PLAY,
                tile=selected,
                connected_to=linked,
                side=side,
                hand=hand_before,
                playable=playable_before,
            )
        else:
            drawn = self.pack.draw_one()
            if drawn is not None:
                player.hand.add(drawn)
                event = self._emit(
                    player, ActionType.DRAW, tile=drawn,
                    hand=hand_before, playable=playable_before,
                )
            else:
                passed = True
                event = self._emit(
                    player, ActionType.PASS,
                    hand=hand_before, playable=playable_before,
                )

        logger.debug(
            "Round %d: %s %s (hand=%d, pack=%d)",
            self.round_number, player.name, event.action.name.lower(),
            event.hand_size, event.pack_size,
        )

        self._check_game_end(player, passed)
        return event

    def run(self) -> MatchOutcome:
        """Start the match if needed and play rounds until it finishes."""
        if self._status == MatchStatus.NOT_STARTED:
            self.start()
        while self._status == MatchStatus.RUNNING:
            self.play_round()
        if self._outcome is None:
            raise RuntimeError("Match stopped running without an outcome.")
        return self._outcome

    def _check_game_end(self, player: Player, passed: bool) -> None:
        if player.hand.size() == 0:
            self._finish_with_winner(player)
        elif passed and self.pack.remaining_count() == 0:
            self._finish(EndReason.BLOCKED, winner=None)

    def _finish_with_winner(self, player: Player) -> None:
        self._finish(EndReason.WINNER_BY_EMPTY_HAND, winner=player.name)

    def _finish(self, reason: EndReason, winner: str | None) -> None:
        self._status = MatchStatus.FINISHED
        self._outcome = MatchOutcome(
            reason=reason,
            winner=winner,
            rounds=self.round_number,
            hand_sizes={p.name: p.hand.size() for p in self.players},
            hand_pips={p.name: p.hand.pips() for p in self.players},
        )
        logger.info(
            "Match finished after %d rounds: %s (winner=%s)",
            self.round_number, reason.value, winner,
        )

    def _emit(
        self,
        player: Player,
        action: ActionType,
        tile: Tile | None = None,
        connected_to: Tile | None = None,
        side: BoardEnd | None = None,
        dealt: tuple[Tile, ...] = (),
        hand: tuple[Tile, ...] = (),
        playable: tuple[Tile, ...] = (),
    ) -> RoundEvent:
        event = RoundEvent(
            round_number=self.round_number,
            player=player.name,
            action=action,
            tile=tile.copy() if tile is not None else None,
            connected_to=connected_to.copy() if connected_to is not None else None,
            board=self.board.snapshot(),
            hand_size=player.hand.size(),
            pack_size=self.pack.remaining_count(),
            side=side,
            dealt=dealt,
            hand=hand,
            playable=playable,
        )
        self._events.append(event)
        return event


def play_match(
    player_names: Sequence[str],
    *,
    tiles_per_hand: int = DEFAULT_TILES_PER_HAND,
    seed: int | None = None,
) -> tuple[MatchOutcome, tuple[RoundEvent, ...]]:
    """
    Play a complete match with a freshly shuffled pack.

    Args:
        player_names: Exactly two player names
        tiles_per_hand: Size of the opening hands
        seed: Seed for shuffling and the opening pick (random if None)

    Returns:
        Tuple of (outcome, events)
    """
    match = Match(
        player_names,
        tiles_per_hand=tiles_per_hand,
        rng=random.Random(seed),
    )
    outcome = match.run()
    return outcome, match.events
