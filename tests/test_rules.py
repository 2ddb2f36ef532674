"""Unit tests for the playable filter, rotation and setup."""

import pytest
from unoengine.engine import (
    Card,
    Color,
    Deck,
    Direction,
    Game,
    SetupError,
    next_player,
    playable_cards,
)
from unoengine.engine.rules import deal, seed_discard

from helpers import B, G, R, ScriptedAgent, draw_two, num, reverse, skip


def test_playable_matches_color_rank_and_type() -> None:
    hand = [num(R, 1), num(B, 5), num(G, 2), skip(G), Card.wild()]
    assert playable_cards(hand, num(R, 5), 0) == [num(R, 1), num(B, 5), Card.wild()]
    assert playable_cards(hand, skip(B), 0) == [num(B, 5), skip(G), Card.wild()]


def test_playable_stacking_only_identical_card() -> None:
    four = Card.wild(draw_four=True)
    hand = [draw_two(R), four, num(R, 1)]
    assert playable_cards(hand, four, 4) == [four]
    assert playable_cards(hand, draw_two(R), 2) == [draw_two(R)]
    # A draw two of another color does not stack
    assert playable_cards(hand, draw_two(B), 2) == []


def test_playable_after_penalty_discharged() -> None:
    hand = [num(R, 1), draw_two(B), Card.wild(), num(G, 3)]
    assert playable_cards(hand, draw_two(R), 0) == [num(R, 1), draw_two(B), Card.wild()]


def test_playable_on_wild_with_named_color() -> None:
    hand = [num(R, 1), num(B, 5), Card.wild()]
    assert playable_cards(hand, Card.wild(), 0, Color.BLUE) == [num(B, 5), Card.wild()]
    assert playable_cards(hand, Card.wild(), 0) == hand


def test_next_player_clockwise() -> None:
    assert next_player(0, Direction.CLOCKWISE, 3) == 1
    assert next_player(2, Direction.CLOCKWISE, 3) == 0


def test_next_player_counter_clockwise() -> None:
    assert next_player(2, Direction.COUNTER_CLOCKWISE, 3) == 1
    assert next_player(0, Direction.COUNTER_CLOCKWISE, 3) == 2


def test_direction_flip_twice_is_identity() -> None:
    d = Direction.CLOCKWISE
    assert d.flipped() is Direction.COUNTER_CLOCKWISE
    assert d.flipped().flipped() is d
    assert next_player(1, d.flipped().flipped(), 4) == next_player(1, d, 4)


def test_setup_deals_seven_and_seeds_discard() -> None:
    game = Game([ScriptedAgent(f"p{i}") for i in range(3)], seed=1)
    game.setup()
    state = game.state
    for seat in state.seats:
        assert len(seat.hand) == 7
    assert len(state.discard_pile) == 1
    assert not state.discard_pile[0].is_wild
    assert len(state.draw_pile) == 108 - 7 * 3 - 1
    assert state.current_player == 0
    assert state.direction is Direction.CLOCKWISE
    assert state.pending_draws == 0


def test_setup_requires_two_players() -> None:
    game = Game([ScriptedAgent("solo")], seed=1)
    with pytest.raises(SetupError):
        game.setup()


def test_setup_fails_when_deck_too_small() -> None:
    game = Game([ScriptedAgent(f"p{i}") for i in range(16)], seed=1)
    with pytest.raises(SetupError):
        game.setup()
    assert not game.started


def test_seed_discard_sends_wilds_back() -> None:
    game = Game([ScriptedAgent("a"), ScriptedAgent("b")], seed=3)
    game.state.draw_pile = Deck([num(R, 1), Card.wild(draw_four=True), Card.wild()])
    top = seed_discard(game.state)
    assert top == num(R, 1)
    assert game.state.discard_pile == [num(R, 1)]
    assert sorted(map(str, game.state.draw_pile)) == ["wild", "wild_draw_four"]


def test_seed_discard_fails_with_only_wilds() -> None:
    game = Game([ScriptedAgent("a"), ScriptedAgent("b")], seed=3)
    game.state.draw_pile = Deck([Card.wild(), Card.wild(draw_four=True)])
    with pytest.raises(SetupError):
        seed_discard(game.state)


def test_deal_fails_without_enough_cards() -> None:
    game = Game([ScriptedAgent("a"), ScriptedAgent("b")], seed=3)
    game.state.draw_pile = Deck([reverse(R)] * 13)
    with pytest.raises(SetupError):
        deal(game.state)


def test_seed_discard_digs_under_many_wilds() -> None:
    game = Game([ScriptedAgent("a"), ScriptedAgent("b")], seed=11)
    wilds = [Card.wild(), Card.wild(draw_four=True)] * 6
    game.state.draw_pile = Deck([num(G, 4)] + wilds)
    top = seed_discard(game.state)
    assert top == num(G, 4)
    assert len(game.state.draw_pile) == len(wilds)
    assert all(c.is_wild for c in game.state.draw_pile)


def test_seed_discard_fails_on_empty_pile() -> None:
    game = Game([ScriptedAgent("a"), ScriptedAgent("b")], seed=3)
    game.state.draw_pile = Deck([])
    with pytest.raises(SetupError):
        seed_discard(game.state)
