"""
Dominion Extended Actions - Cards that need follow-on decisions.

Each frame is registered against its card type with @extended_action.
Playing the card pushes the frame onto the action stack; while it is on
top, its follow_on_actions() are the only legal actions and it observes
every action taken until it reports completion.

resolve_card() is the single place a played card's effects are applied,
both for a normal play and for Throne Room's second play.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from ...engine_core.action import Action, DoNothing, PassAction
from ...engine_core.action_stack import ExtendedAction
from .actions import DiscardCard, GainCard, PlayCard, TrashCard
from .cards import CardType, get_card
from .effects import ON_PLAY
from .state import ACTIONS, BUYS, COINS

if TYPE_CHECKING:
    from .state import DominionGameState

MILITIA_HAND_LIMIT = 3
CHAPEL_TRASH_LIMIT = 4
WORKSHOP_MAX_COST = 4
REMODEL_EXTRA_COST = 2
MINE_EXTRA_COST = 3
MONEYLENDER_COINS = 3

FRAME_FACTORIES: dict[CardType, type[DominionFrame]] = {}


def extended_action(card_type: CardType) -> Callable[[type[DominionFrame]], type[DominionFrame]]:
    """Register a frame class as the extended action for a card type."""
    def register(cls: type[DominionFrame]) -> type[DominionFrame]:
        FRAME_FACTORIES[card_type] = cls
        return cls
    return register


def resolve_card(state: DominionGameState, player: int, card_type: CardType) -> None:
    """Apply a played card: flat bonuses, on-play effect, then its extended action."""
    card = get_card(card_type)
    if card.plus_cards:
        state.draw_cards(player, card.plus_cards)
    if card.plus_actions:
        state.turn_order.grant(player, ACTIONS, card.plus_actions)
    if card.plus_buys:
        state.turn_order.grant(player, BUYS, card.plus_buys)
    if card.plus_coins:
        state.turn_order.grant(player, COINS, card.plus_coins)

    effect = ON_PLAY.get(card_type)
    if effect is not None:
        effect(state, player)

    frame_cls = FRAME_FACTORIES.get(card_type)
    if frame_cls is not None:
        state.action_stack.push(frame_cls.start(state, player))


def gain_options(
    state: DominionGameState,
    player: int,
    max_cost: int,
    treasure_only: bool = False,
    to_hand: bool = False,
) -> list[Action]:
    """GainCard actions for every non-empty pile costing up to max_cost."""
    options: list[Action] = []
    for card_type in state.cards_to_buy():
        card = get_card(card_type)
        if card.cost > max_cost:
            continue
        if treasure_only and not card.is_treasure:
            continue
        options.append(GainCard(player, card_type, to_hand=to_hand))
    return options


def _declines(frame: ExtendedAction, action: Action) -> bool:
    return action.player_id == frame.player_id and isinstance(action, (DoNothing, PassAction))


@dataclass
class DominionFrame(ExtendedAction):
    """Base for Dominion extended actions."""

    @classmethod
    def start(cls, state: DominionGameState, player: int) -> DominionFrame:
        return cls(player_id=player)


@extended_action(CardType.CELLAR)
@dataclass
class CellarFrame(DominionFrame):
    """Discard any number of cards, then draw that many."""
    discarded: int = 0
    done: bool = False

    def register_action_taken(self, state, action):
        if action.player_id != self.player_id:
            return
        if isinstance(action, DiscardCard):
            self.discarded += 1
        elif _declines(self, action):
            state.draw_cards(self.player_id, self.discarded)
            self.done = True

    def execution_complete(self, state):
        return self.done

    def follow_on_actions(self, state):
        actions: list[Action] = [DiscardCard(self.player_id, t) for t in state.hand_types(self.player_id)]
        actions.append(DoNothing(self.player_id))
        return actions


@extended_action(CardType.CHAPEL)
@dataclass
class ChapelFrame(DominionFrame):
    """Trash up to four cards from hand."""
    trashed: int = 0
    done: bool = False

    def register_action_taken(self, state, action):
        if action.player_id != self.player_id:
            return
        if isinstance(action, TrashCard):
            self.trashed += 1
            self.done = self.trashed >= CHAPEL_TRASH_LIMIT
        elif _declines(self, action):
            self.done = True

    def execution_complete(self, state):
        return self.done

    def follow_on_actions(self, state):
        actions: list[Action] = [TrashCard(self.player_id, t) for t in state.hand_types(self.player_id)]
        actions.append(DoNothing(self.player_id))
        return actions


@extended_action(CardType.MILITIA)
@dataclass
class MilitiaFrame(DominionFrame):
    """Each other player discards down to three cards, in turn order."""
    victims: list[int] = field(default_factory=list)

    @classmethod
    def start(cls, state, player):
        victims = [p for p in state.other_players(player) if not state.is_protected(p)]
        return cls(player_id=player, victims=victims)

    def _next_victim(self, state: DominionGameState) -> int | None:
        for p in self.victims:
            if state.hands[p].count > MILITIA_HAND_LIMIT:
                return p
        return None

    def register_action_taken(self, state, action):
        # Progress is read from hand sizes
        pass

    def execution_complete(self, state):
        return self._next_victim(state) is None

    def follow_on_actions(self, state):
        victim = self._next_victim(state)
        if victim is None:
            return []
        return [DiscardCard(victim, t) for t in state.hand_types(victim)]

    def deciding_player(self, state):
        victim = self._next_victim(state)
        return self.player_id if victim is None else victim


@extended_action(CardType.WORKSHOP)
@dataclass
class WorkshopFrame(DominionFrame):
    """Gain a card costing up to 4."""
    done: bool = False

    def register_action_taken(self, state, action):
        if action.player_id != self.player_id:
            return
        if isinstance(action, GainCard) or _declines(self, action):
            self.done = True

    def execution_complete(self, state):
        return self.done

    def follow_on_actions(self, state):
        return gain_options(state, self.player_id, WORKSHOP_MAX_COST) or [DoNothing(self.player_id)]


@extended_action(CardType.MONEYLENDER)
@dataclass
class MoneylenderFrame(DominionFrame):
    """You may trash a Copper from your hand for +3 coins."""
    done: bool = False

    def register_action_taken(self, state, action):
        if action.player_id != self.player_id:
            return
        if isinstance(action, TrashCard) and action.card_type == CardType.COPPER:
            state.turn_order.grant(self.player_id, COINS, MONEYLENDER_COINS)
            self.done = True
        elif _declines(self, action):
            self.done = True

    def execution_complete(self, state):
        return self.done

    def follow_on_actions(self, state):
        actions: list[Action] = []
        if state.hands[self.player_id].contains(CardType.COPPER):
            actions.append(TrashCard(self.player_id, CardType.COPPER))
        actions.append(DoNothing(self.player_id))
        return actions


@extended_action(CardType.REMODEL)
@dataclass
class RemodelFrame(DominionFrame):
    """Trash a card from hand, gain a card costing up to 2 more."""
    budget: int | None = None
    done: bool = False

    def register_action_taken(self, state, action):
        if action.player_id != self.player_id:
            return
        if isinstance(action, TrashCard) and self.budget is None:
            self.budget = get_card(action.card_type).cost + REMODEL_EXTRA_COST
        elif isinstance(action, GainCard) or _declines(self, action):
            self.done = True

    def execution_complete(self, state):
        return self.done

    def follow_on_actions(self, state):
        if self.budget is None:
            options: list[Action] = [TrashCard(self.player_id, t) for t in state.hand_types(self.player_id)]
        else:
            options = gain_options(state, self.player_id, self.budget)
        return options or [DoNothing(self.player_id)]


@extended_action(CardType.MINE)
@dataclass
class MineFrame(DominionFrame):
    """You may trash a Treasure; gain a Treasure to hand costing up to 3 more."""
    budget: int | None = None
    done: bool = False

    def register_action_taken(self, state, action):
        if action.player_id != self.player_id:
            return
        if isinstance(action, TrashCard) and self.budget is None:
            self.budget = get_card(action.card_type).cost + MINE_EXTRA_COST
        elif isinstance(action, GainCard) or _declines(self, action):
            self.done = True

    def execution_complete(self, state):
        return self.done

    def follow_on_actions(self, state):
        if self.budget is None:
            actions: list[Action] = [
                TrashCard(self.player_id, t)
                for t in state.hand_types(self.player_id)
                if get_card(t).is_treasure
            ]
            actions.append(DoNothing(self.player_id))
            return actions
        options = gain_options(state, self.player_id, self.budget, treasure_only=True, to_hand=True)
        return options or [DoNothing(self.player_id)]


@extended_action(CardType.THRONE_ROOM)
@dataclass
class ThroneRoomFrame(DominionFrame):
    """
    Play an action card from hand twice.

    The first play is the chosen PlayCard action itself. Once that play
    (and any extended action it pushed) has resolved, this frame is back
    on top and applies the second play. An extended action pushed by the
    second play sits above this frame and is resolved before it pops.
    """
    enthroned: CardType | None = None
    plays: int = 0
    declined: bool = False

    def register_action_taken(self, state, action):
        if action.player_id != self.player_id:
            return
        if isinstance(action, PlayCard) and self.enthroned is None:
            self.enthroned = action.card_type
            self.plays = 1
        elif _declines(self, action):
            self.declined = True

    def execution_complete(self, state):
        if self.declined:
            return True
        if self.enthroned is None:
            return False
        if self.plays == 1:
            self.plays = 2
            resolve_card(state, self.player_id, self.enthroned)
        return True

    def follow_on_actions(self, state):
        actions: list[Action] = [
            PlayCard(self.player_id, t, free=True)
            for t in state.hand_types(self.player_id)
            if get_card(t).is_action
        ]
        actions.append(DoNothing(self.player_id))
        return actions
