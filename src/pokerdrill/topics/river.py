"""River drills: bluffing, value betting, and calling or folding to a bet.

Each drill deals a full five-card board.  The made-hand classifiers in
:mod:`pokerdrill.dynamic.evaluator` bucket hero's holding, and the tables below
map the bucket (plus stack-to-pot ratio for bluffs) to an answer.
"""

from __future__ import annotations

from ..core.models import Difficulty, PlayerState, Position, TrainingScenario, Topic
from ..dynamic.bet_sizing import BIG_BLIND, Span, percent_of, scale
from ..dynamic.cards import format_board, format_hand
from ..dynamic.evaluator import (
    BluffType,
    CallerStrength,
    MadeHand,
    classify_bluff_type,
    classify_river_caller,
    classify_river_hand,
    required_equity,
    required_fold_frequency,
)
from ..dynamic.seating import SeatAssignment
from .base import Decision, TopicContext, Wording, deal, option, scenario

__all__ = [
    "bluff_spot",
    "decide_bluff",
    "decide_river_call",
    "decide_river_value",
    "river_call_or_fold",
    "river_value_bet",
]

LOW_SPR = 2.0

# (pot in BB, stack in BB) per difficulty
_BL_SIZING = {
    Difficulty.BEGINNER: (Span(10, 16), Span.fixed(50)),
    Difficulty.INTERMEDIATE: (Span(8, 24), Span(30, 80)),
    Difficulty.ADVANCED: (Span(6, 40), Span(15, 150)),
}

_RV_SIZING = {
    Difficulty.BEGINNER: (Span(10, 18), Span.fixed(60)),
    Difficulty.INTERMEDIATE: (Span(8, 28), Span(30, 80)),
    Difficulty.ADVANCED: (Span(6, 40), Span(15, 150)),
}

_RF_SIZING = {
    Difficulty.BEGINNER: (Span(10, 20), Span.fixed(80)),
    Difficulty.INTERMEDIATE: (Span(8, 28), Span(30, 100)),
    Difficulty.ADVANCED: (Span(6, 40), Span(15, 150)),
}


def _chips(spans: tuple[Span, Span], ctx: TopicContext) -> tuple[int, int]:
    pot_span, stack_span = spans
    pot_bb = pot_span.sample(ctx.rng)
    stack_bb = stack_span.sample(ctx.rng)
    return pot_bb * BIG_BLIND, stack_bb * BIG_BLIND


def _heads_up_btn(stack: int) -> tuple[PlayerState, ...]:
    return SeatAssignment(hero=Position.BTN, villain=Position.BB).players(stack, stack)


# ---------------------------------------------------------------------------
# Bluff spot (BL)


def decide_bluff(bluff: BluffType, spr: float) -> Decision:
    if bluff is BluffType.CAPPED_RANGE:
        return Decision("A", "CappedRange")
    low = spr < LOW_SPR
    key = f"{bluff.value}:{'LowSPR' if low else 'HighSPR'}"
    return Decision("A" if low else "C", key)


_BLUFF_WORDS = {
    BluffType.MISSED_FLUSH_DRAW: ("your flush draw missed", "a missed flush draw with good blockers"),
    BluffType.OVERCARD_BRICK: ("you have two high cards that did not pair", "unpaired overcards on a bricked runout"),
    BluffType.CAPPED_RANGE: ("your range looks weak here", "a capped range that cannot credibly rep the nuts"),
}


def bluff_spot(ctx: TopicContext) -> TrainingScenario:
    hand, board = deal(ctx.rng, 5)
    pot, stack = _chips(_BL_SIZING[ctx.difficulty], ctx)
    spr = stack / pot

    bluff = classify_bluff_type(hand, board)
    decision = decide_bluff(bluff, spr)

    small, large = percent_of(pot, 40), percent_of(pot, 75)
    simple_holding, tech_holding = _BLUFF_WORDS[bluff]
    facts = {
        "hand": format_hand(hand),
        "board": format_board(board),
        "pot": pot,
        "stack": stack,
        "spr": f"{spr:.1f}",
        "small": small,
        "large": large,
        "small_ff": round(required_fold_frequency(small, pot) * 100),
        "large_ff": round(required_fold_frequency(large, pot) * 100),
        "shove_ff": round(required_fold_frequency(stack, pot) * 100),
        "holding": simple_holding,
        "holding_tech": tech_holding,
    }
    question = ctx.pick(
        "You are on the Button with {hand} on the river. The board is {board} and {holding}. Your opponent "
        "checks to you. Pot: {pot} chips. Stack: {stack} chips. What do you do?",
        "River, BTN vs BB. Hero holds {hand} on {board}: {holding_tech}. BB checks. Pot {pot}, stack {stack} "
        "(SPR {spr}). Choose a bluffing line.",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Check", decision, facts=facts,
               right=Wording("Correct. Check. A bluff here will not get enough folds to be worth it.",
                             "Correct. Check. With {holding_tech} at SPR {spr}, no bluff size clears its break-even "
                             "fold frequency against BB's calling range."),
               wrong=Wording("Checking gives up the pot. A bet can make your opponent fold here.",
                             "Checking surrenders: {holding_tech} is a good bluff candidate and a large bet only "
                             "needs ~{large_ff}% folds.")),
        option(ctx, "B", f"Bet small ({small} chips)", decision, facts=facts,
               right=Wording("A small bet works here.", "A small bluff is correct here."),
               wrong=Wording("A small bet rarely makes anyone fold on the river. Bet big or check.",
                             "A 40% bluff needs ~{small_ff}% folds but is too cheap to fold out anything; "
                             "river bluffs should be polarised.")),
        option(ctx, "C", f"Bet large ({large} chips)", decision, facts=facts,
               right=Wording("Correct. Bet big, {large} chips. Since {holding}, checking cannot win. A big bet "
                             "folds out many hands.",
                             "Correct. Large bluff (~75%, {large} chips). {holding_tech} at SPR {spr} makes a "
                             "credible polar bet; it needs ~{large_ff}% folds."),
               wrong=Wording("Betting big here risks too many chips on a bluff.",
                             "A 75% bluff needs ~{large_ff}% folds and BB's range will not fold that often here.")),
        option(ctx, "D", f"All-in ({stack} chips)", decision, facts=facts,
               right=Wording("Going all-in works here.", "Shoving is correct here."),
               wrong=Wording("Going all-in risks your whole stack on a bluff. A smaller bet does the same job.",
                             "A shove needs ~{shove_ff}% folds; a 75% bet achieves the same fold equity far "
                             "more cheaply.")),
    ]
    return scenario(
        ctx,
        Topic.BLUFF_SPOT,
        decision,
        hero_position=Position.BTN,
        hero_hand=hand,
        board=board,
        players=_heads_up_btn(stack),
        pot=pot,
        question=question,
        answers=answers,
    )


# ---------------------------------------------------------------------------
# River value bet (RV)


def decide_river_value(made: MadeHand) -> Decision:
    if made is MadeHand.NUTS:
        return Decision("D", "Nuts:Overbet")
    if made is MadeHand.STRONG:
        return Decision("C", "Strong:LargeBet")
    return Decision("A", "Medium:Check")


_MADE_WORDS = {
    MadeHand.NUTS: ("the best possible hand", "the nuts or near-nuts"),
    MadeHand.STRONG: ("a strong hand", "a strong made hand (two pair / trips)"),
    MadeHand.MEDIUM: ("a medium hand", "a medium-strength hand with showdown value"),
}


def river_value_bet(ctx: TopicContext) -> TrainingScenario:
    hand, board = deal(ctx.rng, 5)
    pot, stack = _chips(_RV_SIZING[ctx.difficulty], ctx)

    made = classify_river_hand(hand, board)
    decision = decide_river_value(made)

    small, large, over = percent_of(pot, 33), percent_of(pot, 75), percent_of(pot, 125)
    simple_made, tech_made = _MADE_WORDS[made]
    facts = {
        "hand": format_hand(hand),
        "board": format_board(board),
        "pot": pot,
        "stack": stack,
        "small": small,
        "large": large,
        "over": over,
        "made": simple_made,
        "made_tech": tech_made,
    }
    question = ctx.pick(
        "You are on the Button with {hand}. The river board is {board} and you have {made}. Your opponent "
        "checks. Pot: {pot} chips. What do you do?",
        "River, BTN vs BB. Hero holds {hand} on {board}: {made_tech}. BB checks. Pot {pot}, {stack} behind. "
        "Choose a value sizing.",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Check", decision, facts=facts,
               right=Wording("Correct. Check. Your hand is good enough to win at showdown but not good enough "
                             "to bet.",
                             "Correct. Check back. {made_tech} is a bluff-catcher here; betting is only called "
                             "by better and folds out worse."),
               wrong=Wording("Checking wastes a strong hand. Bet to win more chips.",
                             "Checking {made_tech} leaves value on the table; worse hands will call a bet.")),
        option(ctx, "B", f"Bet small ({small} chips ~33%)", decision, facts=facts,
               right=Wording("A small bet works here.", "A thin value bet is correct here."),
               wrong=Wording("A small bet wins too little with this hand.",
                             "A 33% bet under-values {made_tech}; it either should be bigger or be a check.")),
        option(ctx, "C", f"Bet large ({large} chips ~75%)", decision, facts=facts,
               right=Wording("Correct. Bet big, {large} chips. Plenty of worse hands will still call.",
                             "Correct. Large value bet (~75%, {large} chips). {made_tech} beats enough of BB's "
                             "calling range to size up."),
               wrong=Wording("A big bet is the wrong choice with this hand.",
                             "A 75% bet misplays {made_tech}: the nuts wants an overbet and medium hands should "
                             "check.")),
        option(ctx, "D", f"Overbet ({over} chips ~125%)", decision, facts=facts,
               right=Wording("Correct. Bet more than the pot, {over} chips. You have the best hand, so win as "
                             "much as you can.",
                             "Correct. Overbet (~125%, {over} chips). With {made_tech} your range is polarised "
                             "and BB's bluff-catchers are forced to pay the maximum."),
               wrong=Wording("Betting more than the pot is too much with this hand.",
                             "An overbet with {made_tech} only gets called by better.")),
    ]
    return scenario(
        ctx,
        Topic.RIVER_VALUE_BET,
        decision,
        hero_position=Position.BTN,
        hero_hand=hand,
        board=board,
        players=_heads_up_btn(stack),
        pot=pot,
        question=question,
        answers=answers,
    )


# ---------------------------------------------------------------------------
# River call or fold (RF)

# caller tier -> (bet percent of pot, sizing label, correct answer, branch key)
_RF_TABLE = {
    CallerStrength.STRONG: (33, "small", "C", "Strong:SmallBet:Raise"),
    CallerStrength.MARGINAL: (67, "standard", "B", "Marginal:StdBet:Call"),
    CallerStrength.WEAK: (100, "large", "A", "Weak:LargeBet:Fold"),
}


def decide_river_call(strength: CallerStrength) -> Decision:
    _, _, correct, key = _RF_TABLE[strength]
    return Decision(correct, key)


def river_call_or_fold(ctx: TopicContext) -> TrainingScenario:
    hand, board = deal(ctx.rng, 5)
    pot, stack = _chips(_RF_SIZING[ctx.difficulty], ctx)

    strength = classify_river_caller(hand, board)
    decision = decide_river_call(strength)
    percent, sizing, _, _ = _RF_TABLE[strength]

    bet = percent_of(pot, percent)
    raise_to = scale(bet, 5, 2)
    facts = {
        "hand": format_hand(hand),
        "board": format_board(board),
        "pot": pot,
        "stack": stack,
        "bet": bet,
        "raise": raise_to,
        "sizing": sizing,
        "needed": round(required_equity(bet, pot + bet) * 100),
        "strength": strength.value.lower(),
    }
    question = ctx.pick(
        "You are on the Button with {hand}. The river board is {board}. Your opponent bets {bet} chips into "
        "{pot}. You have a {strength} hand. What do you do?",
        "River, BTN vs BB. Hero holds {hand} on {board} ({strength} bluff-catcher tier). BB leads {bet} chips "
        "into {pot} (a {sizing} bet). Calling needs ~{needed}% equity. Fold, call or raise?",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Fold", decision, facts=facts,
               right=Wording("Correct. Fold. Your hand is weak and your opponent made a big bet.",
                             "Correct. Fold. A {sizing} bet is weighted to value and a {strength} hand does not "
                             "win ~{needed}% of the time."),
               wrong=Wording("Folding is too weak. Your hand is good enough to continue.",
                             "Folding a {strength} hand to a {sizing} bet over-folds; you need only ~{needed}% "
                             "equity.")),
        option(ctx, "B", f"Call ({bet} chips)", decision, facts=facts,
               right=Wording("Correct. Call. Your hand beats enough of your opponent's bluffs.",
                             "Correct. Call. A {strength} hand against a {sizing} bet clears the ~{needed}% "
                             "break-even and bluff-catches well."),
               wrong=Wording("Calling is not the best play with this hand.",
                             "Calling misplays a {strength} hand against a {sizing} bet: it is either a clear fold "
                             "or a value raise.")),
        option(ctx, "C", f"Raise to {raise_to} chips", decision, facts=facts,
               right=Wording("Correct. Raise to {raise} chips. Your hand is strong and the small bet lets you "
                             "win more.",
                             "Correct. Raise to {raise}. A {sizing} bet caps BB's range and a {strength} hand is "
                             "ahead of most of what calls a raise."),
               wrong=Wording("Raising with this hand risks too many chips.",
                             "Raising a {strength} hand against a {sizing} bet only gets called by better.")),
    ]
    return scenario(
        ctx,
        Topic.RIVER_CALL_OR_FOLD,
        decision,
        hero_position=Position.BTN,
        hero_hand=hand,
        board=board,
        players=_heads_up_btn(stack),
        pot=pot,
        current_bet=bet,
        question=question,
        answers=answers,
    )
