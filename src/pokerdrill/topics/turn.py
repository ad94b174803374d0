"""Turn drills: barrelling, probing and delayed continuation bets."""

from __future__ import annotations

from enum import Enum

from ..core.models import Card, Difficulty, Position, TrainingScenario, Topic
from ..dynamic.bet_sizing import BIG_BLIND, Span, percent_of, scale
from ..dynamic.cards import format_board, format_hand
from ..dynamic.evaluator import (
    SUIT_INDEX,
    BoardTexture,
    TurnCard,
    TurnStrength,
    board_texture,
    classify_turn_card,
    classify_turn_strength,
    four_rank_window,
    suit_counts,
)
from ..dynamic.seating import SeatAssignment
from .base import Decision, TopicContext, Wording, deal, option, scenario

__all__ = [
    "BarrelCard",
    "barrel_card",
    "decide_delayed_cbet",
    "decide_turn_barrel",
    "decide_turn_probe",
    "delayed_cbet",
    "turn_barrel_decision",
    "turn_probe_bet",
]

# (stack in BB, pot in BB)
_TB_SIZING = {
    Difficulty.BEGINNER: (Span.fixed(100), Span(14, 22)),
    Difficulty.INTERMEDIATE: (Span(50, 130), Span(10, 28)),
    Difficulty.ADVANCED: (Span(25, 200), Span(8, 40)),
}

# (pot in BB, stack in BB); probe and delayed c-bet share the same pots
_CHECKED_FLOP_SIZING = {
    Difficulty.BEGINNER: (Span(6, 14), Span.fixed(80)),
    Difficulty.INTERMEDIATE: (Span(4, 20), Span(40, 100)),
    Difficulty.ADVANCED: (Span(4, 30), Span(20, 150)),
}

_STRENGTH_WORDS = {
    TurnStrength.STRONG: ("a strong hand", "strong (overpair / top pair good kicker / two pair / set)"),
    TurnStrength.MEDIUM: ("a medium hand", "medium (middle pair / weak top pair / underpair)"),
    TurnStrength.WEAK: ("a weak hand", "weak (missed / low pair / air)"),
}


def _split(board: tuple[Card, ...]) -> tuple[tuple[Card, ...], Card]:
    return board[:3], board[3]


def _strength_facts(strength: TurnStrength) -> dict[str, str]:
    simple, technical = _STRENGTH_WORDS[strength]
    return {"strength": simple, "strength_tech": technical}


# ---------------------------------------------------------------------------
# Turn barrel (TB)


class BarrelCard(Enum):
    DRAW_COMPLETE = "DrawComplete"
    SCARE_BROADWAY = "ScareBroadway"
    BLANK = "Blank"


def barrel_card(flop: tuple[Card, ...], turn: Card) -> BarrelCard:
    if suit_counts(flop)[SUIT_INDEX[turn.suit]] >= 2 or four_rank_window([*flop, turn]):
        return BarrelCard.DRAW_COMPLETE
    if turn.rank >= 10:
        return BarrelCard.SCARE_BROADWAY
    return BarrelCard.BLANK


def decide_turn_barrel(card: BarrelCard, flop_texture: BoardTexture) -> Decision:
    if card is BarrelCard.DRAW_COMPLETE:
        return Decision("A", "DrawComplete")
    if card is BarrelCard.SCARE_BROADWAY:
        return Decision("C", "ScareBroadway")
    if flop_texture is BoardTexture.DRY:
        return Decision("A", "Blank:Dry")
    return Decision("B", "Blank:Wet")


_BARREL_WORDS = {
    BarrelCard.DRAW_COMPLETE: ("completes a lot of draws", "a draw-completing card"),
    BarrelCard.SCARE_BROADWAY: ("is a big card that scares your opponent", "a broadway scare card"),
    BarrelCard.BLANK: ("changes nothing", "a blank"),
}


def turn_barrel_decision(ctx: TopicContext) -> TrainingScenario:
    hand, board = deal(ctx.rng, 4)
    stack_span, pot_span = _TB_SIZING[ctx.difficulty]
    stack_bb = stack_span.sample(ctx.rng)
    pot_bb = pot_span.sample(ctx.rng)
    hero_pos = Position.BTN if ctx.rng.chance(0.5) else Position.CO

    flop, turn = _split(board)
    card = barrel_card(flop, turn)
    texture = board_texture(flop)
    decision = decide_turn_barrel(card, texture)

    bb = BIG_BLIND
    pot, stack = pot_bb * bb, stack_bb * bb
    medium, large = scale(pot, 1, 2), scale(pot, 4, 5)
    simple_card, tech_card = _BARREL_WORDS[card]
    facts = {
        "hand": format_hand(hand),
        "flop": format_board(flop),
        "turn": turn,
        "pos": hero_pos,
        "pot": pot,
        "stack": stack,
        "medium": medium,
        "large": large,
        "card": simple_card,
        "card_tech": tech_card,
        "tex": {BoardTexture.DRY: "dry", BoardTexture.SEMI_WET: "semi-wet", BoardTexture.WET: "wet"}[texture],
    }
    question = ctx.pick(
        "You raised from the {pos}, bet the flop {flop} and got called. You have {hand}. The turn is {turn}, "
        "which {card}. Pot: {pot} chips. Your opponent checks. What do you do?",
        "Hero ({pos}) c-bet a {tex} {flop} flop and BB called. Turn {turn} is {card_tech}. Hero holds {hand}, "
        "pot {pot}, {stack} behind. BB checks. Barrel or check back?",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Check back", decision, facts=facts,
               right=Wording("Correct. Check. This turn is good for the hands your opponent called with, so "
                             "slow down.",
                             "Correct. Check back. The turn is {card_tech}; the caller's range improves here and "
                             "a second barrel gets too few folds on a {tex} runout."),
               wrong=Wording("Checking gives up here. Keep betting.",
                             "Checking forfeits fold equity: {card_tech} on this runout favours the aggressor's "
                             "range.")),
        option(ctx, "B", f"Bet medium ({medium} chips)", decision, facts=facts,
               right=Wording("Correct. Bet {medium} chips. The turn changed nothing and your opponent still has "
                             "draws that should pay.",
                             "Correct. Barrel ~50% ({medium} chips). A blank on a {tex} flop keeps villain's "
                             "draws alive; a medium barrel denies equity and builds the pot."),
               wrong=Wording("A medium bet is not right on this turn.",
                             "A 50% barrel misreads {card_tech}: either the size is too small to pressure or the "
                             "spot calls for a check.")),
        option(ctx, "C", f"Bet large ({large} chips)", decision, facts=facts,
               right=Wording("Correct. Bet big, {large} chips. This card scares your opponent, so push hard.",
                             "Correct. Barrel large (~80%, {large} chips). {card_tech} hits the raiser's range far "
                             "more than the caller's; a big barrel maximises fold equity."),
               wrong=Wording("Betting big here risks too many chips.",
                             "An 80% barrel on {card_tech} over-commits; villain's continuing range is too strong "
                             "for this sizing.")),
    ]
    return scenario(
        ctx,
        Topic.TURN_BARREL_DECISION,
        decision,
        hero_position=hero_pos,
        hero_hand=hand,
        board=board,
        players=SeatAssignment(hero=hero_pos, villain=Position.BB).players(stack, stack),
        pot=pot,
        question=question,
        answers=answers,
    )


# ---------------------------------------------------------------------------
# Turn probe bet (PB)


def decide_turn_probe(strength: TurnStrength) -> Decision:
    if strength is TurnStrength.STRONG:
        return Decision("C", "Strong:ProbeLarge")
    if strength is TurnStrength.MEDIUM:
        return Decision("B", "Medium:ProbeSmall")
    return Decision("A", "Weak:Check")


def turn_probe_bet(ctx: TopicContext) -> TrainingScenario:
    hand, board = deal(ctx.rng, 4)
    pot_span, stack_span = _CHECKED_FLOP_SIZING[ctx.difficulty]
    pot_bb = pot_span.sample(ctx.rng)
    stack_bb = stack_span.sample(ctx.rng)

    strength = classify_turn_strength(hand, board)
    decision = decide_turn_probe(strength)

    bb = BIG_BLIND
    pot, stack = pot_bb * bb, stack_bb * bb
    small, large = percent_of(pot, 40), percent_of(pot, 70)
    flop, turn = _split(board)
    facts = {
        "hand": format_hand(hand),
        "flop": format_board(flop),
        "turn": turn,
        "pot": pot,
        "pot_bb": pot_bb,
        "stack": stack,
        "small": small,
        "large": large,
        **_strength_facts(strength),
    }
    question = ctx.pick(
        "You are in the Big Blind with {hand}. The Button raised, you called, and the flop {flop} was checked "
        "by both players. The turn is {turn}. You have {strength}. Pot: {pot} chips. What do you do?",
        "BB vs BTN, flop {flop} checked through. Turn {turn}. Hero holds {hand}: {strength_tech}. "
        "Pot {pot} chips ({pot_bb} BB), {stack} behind. Hero is first to act. Probe or check?",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Check", decision, facts=facts,
               right=Wording("Correct. Check. You have {strength}, so betting only gets called by better hands.",
                             "Correct. Check. With {strength_tech} a probe has neither value nor enough fold "
                             "equity; the Button's checked-back range still contains plenty of showdown value."),
               wrong=Wording("Checking wastes your hand. Your opponent showed weakness on the flop, so bet.",
                             "Checking misses the probe: BTN's flop check caps their range and {strength_tech} "
                             "should bet.")),
        option(ctx, "B", f"Probe small ({small} chips ~40%)", decision, facts=facts,
               right=Wording("Correct. Bet small, {small} chips. Your hand is decent and a small bet gets called "
                             "by worse.",
                             "Correct. Small probe (~40%, {small} chips). {strength_tech} gets thin value and "
                             "protection against the capped range without bloating the pot."),
               wrong=Wording("A small bet is the wrong size with this hand.",
                             "A 40% probe mismatches {strength_tech}: value hands want a bigger size and air "
                             "should check.")),
        option(ctx, "C", f"Probe large ({large} chips ~70%)", decision, facts=facts,
               right=Wording("Correct. Bet big, {large} chips. You have a strong hand and your opponent is weak. "
                             "Build the pot.",
                             "Correct. Large probe (~70%, {large} chips). {strength_tech} against a capped range "
                             "wants to build the pot for the river."),
               wrong=Wording("Betting big with this hand risks too much.",
                             "A 70% probe with {strength_tech} folds out worse and gets called by better.")),
    ]
    return scenario(
        ctx,
        Topic.TURN_PROBE_BET,
        decision,
        hero_position=Position.BB,
        hero_hand=hand,
        board=board,
        players=SeatAssignment(hero=Position.BB, villain=Position.BTN).players(stack, stack),
        pot=pot,
        question=question,
        answers=answers,
    )


# ---------------------------------------------------------------------------
# Delayed c-bet (DC)


def decide_delayed_cbet(strength: TurnStrength, card: TurnCard) -> Decision:
    key = f"{strength.value}:{card.value}"
    if strength is TurnStrength.STRONG:
        return Decision("C", key)
    if strength is TurnStrength.MEDIUM and card is TurnCard.BLANK:
        return Decision("B", key)
    return Decision("A", key)


def delayed_cbet(ctx: TopicContext) -> TrainingScenario:
    hand, board = deal(ctx.rng, 4)
    pot_span, stack_span = _CHECKED_FLOP_SIZING[ctx.difficulty]
    pot_bb = pot_span.sample(ctx.rng)
    stack_bb = stack_span.sample(ctx.rng)

    flop, turn = _split(board)
    strength = classify_turn_strength(hand, board)
    card = classify_turn_card(flop, turn)
    decision = decide_delayed_cbet(strength, card)

    bb = BIG_BLIND
    pot, stack = pot_bb * bb, stack_bb * bb
    small, medium = percent_of(pot, 33), percent_of(pot, 60)
    facts = {
        "hand": format_hand(hand),
        "flop": format_board(flop),
        "turn": turn,
        "pot": pot,
        "pot_bb": pot_bb,
        "stack": stack,
        "small": small,
        "medium": medium,
        "card": "a scare card" if card is TurnCard.SCARE else "a blank",
        **_strength_facts(strength),
    }
    question = ctx.pick(
        "You raised on the Button and the Big Blind called. You checked back the flop {flop}. The turn is "
        "{turn} ({card}) and your opponent checks again. You have {hand}, {strength}. Pot: {pot} chips. "
        "Stack: {stack} chips. What do you do?",
        "Delayed c-bet spot. Hero opened BTN, BB called, flop {flop} checked through. Turn {turn} is {card}. "
        "BB checks. Hero holds {hand}: {strength_tech}. Pot: {pot} chips ({pot_bb} BB). Stack: {stack} chips.",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Check", decision, facts=facts,
               right=Wording("Correct. Check. The turn may have helped your opponent and your hand is not strong "
                             "enough to bet. Keep the pot small.",
                             "Correct. Check for pot control. With {strength_tech} on {card}, a delayed c-bet "
                             "bloats the pot when villain's continuing range has improved."),
               wrong=Wording("Checking again gives away too much. Your hand is good enough to bet now.",
                             "Checking twice with {strength_tech} surrenders too much value; fire a delayed "
                             "c-bet to build the pot.")),
        option(ctx, "B", f"Bet small ({small} chips ~33%)", decision, facts=facts,
               right=Wording("Correct. Bet small, {small} chips. Your hand is decent and a small bet gets called "
                             "by worse hands.",
                             "Correct. A small delayed c-bet (~33% pot) with {strength_tech} on a blank turn "
                             "gets value from weaker pairs and gutshots and keeps the pot manageable if raised."),
               wrong=Wording("A small bet is the wrong choice here.",
                             "A 33% delayed c-bet misplays {strength_tech} on {card}: strong hands size up and "
                             "weak ones check.")),
        option(ctx, "C", f"Bet medium ({medium} chips ~60%)", decision, facts=facts,
               right=Wording("Correct. Bet {medium} chips. You have a strong hand and your opponent checked "
                             "twice. Time to get value.",
                             "Correct. A medium delayed c-bet (~60% pot) with {strength_tech} is highest-EV; it "
                             "pressures the sticky part of BB's range and builds toward a river shove."),
               wrong=Wording("Betting this much with this hand is too risky.",
                             "A 60% delayed c-bet over-commits {strength_tech}; if raised you are in a tough "
                             "spot. Check or size down.")),
    ]
    return scenario(
        ctx,
        Topic.DELAYED_CBET,
        decision,
        hero_position=Position.BTN,
        hero_hand=hand,
        board=board,
        players=SeatAssignment(hero=Position.BTN, villain=Position.BB).players(stack, stack),
        pot=pot,
        question=question,
        answers=answers,
    )
