"""Flop drills: continuation bets, pot odds, check-raises, semi-bluffs and
c-bets in 3-bet pots."""

from __future__ import annotations

from enum import Enum

from ..core.models import Card, Difficulty, Position, TrainingScenario, Topic
from ..dynamic.bet_sizing import BIG_BLIND, Span, percent_of, round_half_up, scale
from ..dynamic.cards import format_board, format_hand
from ..dynamic.evaluator import (
    BoardTexture,
    DrawType,
    board_texture,
    classify_draw,
    draw_equity,
    hero_has_flush_draw,
    hero_has_straight_draw,
    hero_pairs_board,
    required_equity,
)
from ..dynamic.seating import SeatAssignment
from .base import Decision, TopicContext, Wording, deal, option, scenario

__all__ = [
    "BoardFavour",
    "FlopInteraction",
    "MadeStrength",
    "check_raise_spot",
    "continuation_bet",
    "decide_check_raise",
    "decide_continuation_bet",
    "decide_pot_odds",
    "decide_semi_bluff",
    "decide_three_bet_pot_cbet",
    "flop_interaction",
    "pot_odds_and_equity",
    "semi_bluff_decision",
    "three_bet_pot_cbet",
    "three_bet_strength",
]

# (stack in BB, pot in BB) per difficulty
_CB_SIZING = {
    Difficulty.BEGINNER: (Span.fixed(100), Span(8, 14)),
    Difficulty.INTERMEDIATE: (Span(60, 130), Span(6, 20)),
    Difficulty.ADVANCED: (Span(20, 200), Span(4, 30)),
}

_CR_SIZING = {
    Difficulty.BEGINNER: (Span.fixed(100), Span(8, 14)),
    Difficulty.INTERMEDIATE: (Span(50, 130), Span(6, 20)),
    Difficulty.ADVANCED: (Span(20, 200), Span(4, 30)),
}

_SB_SIZING = {
    Difficulty.BEGINNER: (Span.fixed(60), Span(8, 14)),
    Difficulty.INTERMEDIATE: (Span(35, 120), Span(6, 20)),
    Difficulty.ADVANCED: (Span(20, 200), Span(4, 30)),
}

# (pot in BB, stack in BB) per difficulty
_3B_SIZING = {
    Difficulty.BEGINNER: (Span(10, 14), Span.fixed(100)),
    Difficulty.INTERMEDIATE: (Span(8, 18), Span(50, 100)),
    Difficulty.ADVANCED: (Span(6, 22), Span(30, 150)),
}

_PO_POTS = {
    Difficulty.BEGINNER: Span(8, 12),
    Difficulty.INTERMEDIATE: Span(6, 20),
    Difficulty.ADVANCED: Span(4, 30),
}

_TEXTURE_WORDS = {
    BoardTexture.DRY: ("a dry board with few draws", "dry"),
    BoardTexture.SEMI_WET: ("a board with some draws", "semi-wet"),
    BoardTexture.WET: ("a board with lots of draws", "wet"),
}


def _sample_pair(spans: tuple[Span, Span], ctx: TopicContext) -> tuple[int, int]:
    first, second = spans
    return first.sample(ctx.rng), second.sample(ctx.rng)


# ---------------------------------------------------------------------------
# Continuation bet (CB)


def decide_continuation_bet(texture: BoardTexture, range_advantage: bool) -> Decision:
    if texture is BoardTexture.DRY:
        return Decision("B", "Dry:RangeAdv") if range_advantage else Decision("A", "Dry:NoRangeAdv")
    return Decision("C", texture.value)


def continuation_bet(ctx: TopicContext) -> TrainingScenario:
    hand, board = deal(ctx.rng, 3)
    stack_bb, pot_bb = _sample_pair(_CB_SIZING[ctx.difficulty], ctx)
    hero_pos = Position.BTN if ctx.rng.chance(0.5) else Position.CO

    texture = board_texture(board)
    range_advantage = hero_pos.is_late() and min(card.rank for card in board) <= 8
    decision = decide_continuation_bet(texture, range_advantage)

    bb = BIG_BLIND
    pot, stack = pot_bb * bb, stack_bb * bb
    small, large, over = scale(pot, 1, 3), scale(pot, 3, 4), scale(pot, 5, 4)
    simple_texture, tech_texture = _TEXTURE_WORDS[texture]
    facts = {
        "hand": format_hand(hand),
        "board": format_board(board),
        "pos": hero_pos,
        "pot": pot,
        "pot_bb": pot_bb,
        "stack": stack,
        "small": small,
        "large": large,
        "over": over,
        "texture": simple_texture,
        "tex": tech_texture,
        "adv": "you hold the range advantage" if range_advantage else "the big blind's range connects well",
    }
    question = ctx.pick(
        "You raised before the flop from the {pos} and the Big Blind called. You have {hand}. "
        "The flop is {board}, {texture}. Pot: {pot} chips. Your opponent checks. What do you do?",
        "SRP, hero opened from {pos} and BB defended. Hero holds {hand} on {board} ({tex} texture), "
        "{pot} chips in the pot ({pot_bb} BB), {stack} behind. BB checks. Choose a c-bet strategy.",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Check", decision, facts=facts,
               right=Wording("Correct. Check. This flop helps your opponent more than you, so betting would be "
                             "called or raised too often.",
                             "Correct. Check back. On a {tex} board where {adv}, c-betting gets check-raised and "
                             "floated too often; checking protects your range."),
               wrong=Wording("Checking gives your opponent a free card. You should bet here.",
                             "Checking forfeits equity denial and initiative on a {tex} board; a bet is required.")),
        option(ctx, "B", f"Bet small ({small} chips)", decision, facts=facts,
               right=Wording("Correct. Bet small, {small} chips. Your opponent missed this flop most of the time, so "
                             "a cheap bet wins the pot often.",
                             "Correct. Range-bet small ({small} chips, ~33%). On a {tex} board {adv}; a small "
                             "c-bet with your whole range is efficient and hard to play against."),
               wrong=Wording("A small bet is not right here.",
                             "A 33% c-bet is the wrong tool on a {tex} board here: it either gives draws a cheap "
                             "price or bets into a range that connects better than yours.")),
        option(ctx, "C", f"Bet large ({large} chips)", decision, facts=facts,
               right=Wording("Correct. Bet big, {large} chips. There are many draws on this flop, so make your "
                             "opponent pay to see the next card.",
                             "Correct. Bet large ({large} chips, ~75%). On a {tex} board equity shifts fast, so "
                             "charge draws and deny equity with a polar sizing."),
               wrong=Wording("Betting big risks too many chips on a flop like this.",
                             "A 75% c-bet overplays a {tex} board; villain folds only hands you beat and continues "
                             "with the rest.")),
        option(ctx, "D", f"Overbet ({over} chips)", decision, facts=facts,
               right=Wording("Overbetting works here.", "An overbet is correct here."),
               wrong=Wording("Betting more than the pot is too much on the flop. A normal bet does the job for "
                             "fewer chips.",
                             "A 125% flop overbet ({over} chips) is reserved for nut advantage situations and "
                             "polarised ranges; here it risks too much for too little fold equity.")),
    ]
    return scenario(
        ctx,
        Topic.POSTFLOP_CONTINUATION_BET,
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
# Pot odds and equity (PO)


def decide_pot_odds(draw: DrawType, equity: float, needed: float) -> Decision:
    call = equity >= needed
    return Decision("A" if call else "B", f"{draw.value}:{'Call' if call else 'Fold'}")


def _bet_fraction(ctx: TopicContext) -> float:
    if ctx.difficulty is Difficulty.BEGINNER:
        return 0.50
    if ctx.difficulty is Difficulty.INTERMEDIATE:
        return 0.33 + ctx.rng.random() * (1.0 - 0.33)
    return 0.25 + ctx.rng.random() * (1.5 - 0.25)


def pot_odds_and_equity(ctx: TopicContext) -> TrainingScenario:
    hand, board = deal(ctx.rng, 3)
    pot_bb = _PO_POTS[ctx.difficulty].sample(ctx.rng)
    fraction = _bet_fraction(ctx)

    bb = BIG_BLIND
    pot = pot_bb * bb
    bet = max(round_half_up(pot * fraction), 1)
    draw = classify_draw(board)
    equity = draw_equity(draw, 2)
    needed = required_equity(bet, pot)
    decision = decide_pot_odds(draw, equity, needed)

    stack = 100 * bb
    facts = {
        "hand": format_hand(hand),
        "board": format_board(board),
        "pot": pot,
        "bet": bet,
        "draw": draw.label,
        "equity": round(equity * 100),
        "needed": round(needed * 100),
    }
    question = ctx.pick(
        "You are in the Big Blind with {hand}. The flop is {board} and you have a {draw}. Pot: {pot} chips. "
        "Your opponent bets {bet} chips. Your hand wins about {equity}% of the time by the river. Call or fold?",
        "Hero in BB with {hand} on {board} holding a {draw}. Pot {pot} chips, villain (BTN) bets {bet}. "
        "Equity with two cards to come is ~{equity}%. Price requires ~{needed}%. Call or fold?",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Call", decision, facts=facts,
               right=Wording("Correct. Call. You win about {equity}% of the time and only need {needed}% to make "
                             "calling worth it.",
                             "Correct. Call. Required equity is {bet} / ({pot} + {bet}) = ~{needed}% and the {draw} "
                             "carries ~{equity}% with two cards to come, so the call is +EV."),
               wrong=Wording("Calling costs too much. You need to win {needed}% of the time but only win about "
                             "{equity}%.",
                             "Calling is -EV: the price demands ~{needed}% equity and a {draw} has only ~{equity}% "
                             "over two streets.")),
        option(ctx, "B", "Fold", decision, facts=facts,
               right=Wording("Correct. Fold. The bet is too big for your chances: you need {needed}% but win only "
                             "about {equity}%.",
                             "Correct. Fold. ~{equity}% equity for a {draw} falls short of the ~{needed}% the "
                             "{bet}-chip bet demands; implied odds do not close the gap reliably."),
               wrong=Wording("Folding gives up a good price. You win about {equity}% and only need {needed}%.",
                             "Folding is a mistake: ~{equity}% equity clears the ~{needed}% requirement, so calling "
                             "shows a direct profit.")),
    ]
    return scenario(
        ctx,
        Topic.POT_ODDS_AND_EQUITY,
        decision,
        hero_position=Position.BB,
        hero_hand=hand,
        board=board,
        players=SeatAssignment(hero=Position.BB, villain=Position.BTN).players(stack, stack),
        pot=pot,
        current_bet=bet,
        question=question,
        answers=answers,
    )


# ---------------------------------------------------------------------------
# Check-raise (CR)


class BoardFavour(Enum):
    BIG_BLIND = "BBFav"
    IN_POSITION = "IPFav"


class FlopInteraction(Enum):
    STRONG = "Strong"
    COMBO_DRAW = "ComboDraw"
    DRAW = "Draw"
    WEAK = "Weak"


def board_favour(board: tuple[Card, ...]) -> BoardFavour:
    # low connected boards hit the big blind's wide defending range
    if sum(card.rank for card in board) <= 20:
        return BoardFavour.BIG_BLIND
    return BoardFavour.IN_POSITION


def flop_interaction(hand: tuple[Card, Card], board: tuple[Card, ...]) -> FlopInteraction:
    flush = hero_has_flush_draw(hand, board)
    straight = hero_has_straight_draw(hand, board)
    if flush and straight:
        return FlopInteraction.COMBO_DRAW
    if flush or straight:
        return FlopInteraction.DRAW
    if hero_pairs_board(hand, board):
        return FlopInteraction.STRONG
    return FlopInteraction.WEAK


def decide_check_raise(favour: BoardFavour, interaction: FlopInteraction) -> Decision:
    key = f"{favour.value}:{interaction.value}"
    if favour is BoardFavour.BIG_BLIND and interaction is FlopInteraction.STRONG:
        return Decision("C", key)
    if interaction is FlopInteraction.COMBO_DRAW:
        return Decision("C", key)
    if favour is BoardFavour.IN_POSITION and interaction is FlopInteraction.WEAK:
        return Decision("A", key)
    return Decision("B", key)


_INTERACTION_WORDS = {
    FlopInteraction.STRONG: ("you hit a pair", "a made hand"),
    FlopInteraction.COMBO_DRAW: ("you have a big draw", "a combo draw"),
    FlopInteraction.DRAW: ("you have a draw", "a draw"),
    FlopInteraction.WEAK: ("you missed", "air"),
}


def check_raise_spot(ctx: TopicContext) -> TrainingScenario:
    hand, board = deal(ctx.rng, 3)
    stack_bb, pot_bb = _sample_pair(_CR_SIZING[ctx.difficulty], ctx)
    bet_pct = ctx.rng.randint(50, 70)

    favour = board_favour(board)
    interaction = flop_interaction(hand, board)
    decision = decide_check_raise(favour, interaction)

    bb = BIG_BLIND
    pot, stack = pot_bb * bb, stack_bb * bb
    bet = max(percent_of(pot, bet_pct), bb)
    check_raise = scale(bet, 5, 2)
    simple_hit, tech_hit = _INTERACTION_WORDS[interaction]
    facts = {
        "hand": format_hand(hand),
        "board": format_board(board),
        "pot": pot,
        "stack": stack,
        "bet": bet,
        "pct": bet_pct,
        "cr": check_raise,
        "cr_bb": scale(check_raise, 1, bb),
        "hit": simple_hit,
        "holding": tech_hit,
        "favours": "your" if favour is BoardFavour.BIG_BLIND else "the raiser's",
    }
    question = ctx.pick(
        "You are in the Big Blind with {hand}. The flop is {board} and {hit}. You checked and the Button bet "
        "{bet} chips into a pot of {pot} chips. What do you do?",
        "BB vs BTN single-raised pot. Hero holds {hand} ({holding}) on {board}, which favours {favours} range. "
        "Hero checks, BTN c-bets {bet} chips (~{pct}% pot) into {pot}. Fold, call, or check-raise to {cr}?",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Fold", decision, facts=facts,
               right=Wording("Correct. Fold. You missed and this flop is better for your opponent.",
                             "Correct. Fold. With {holding} on a board that favours the raiser, you lack the "
                             "equity to continue against a ~{pct}% c-bet."),
               wrong=Wording("Folding is too quick. Your hand still has a good chance here.",
                             "Folding {holding} here over-folds the big blind against a ~{pct}% c-bet.")),
        option(ctx, "B", "Call", decision, facts=facts,
               right=Wording("Correct. Call. Your hand is good enough to continue but not to raise.",
                             "Correct. Flat. {holding} on this texture realises equity best by calling; a "
                             "check-raise folds out worse and isolates you against better."),
               wrong=Wording("Just calling is not the best play here.",
                             "Flatting misplays {holding}: this spot calls for either a check-raise or a fold.")),
        option(ctx, "C", f"Raise to {facts['cr_bb']} BB", decision, facts=facts,
               right=Wording("Correct. Raise to {cr} chips. Your hand is strong or has lots of ways to improve, "
                             "so build the pot now.",
                             "Correct. Check-raise to {cr} chips ({cr_bb} BB). {holding} on a board favouring "
                             "{favours} range is ideal for a raise: value or strong equity with fold equity."),
               wrong=Wording("Raising puts too many chips in with this hand.",
                             "Check-raising {holding} here turns the hand into a bluff against a range that "
                             "continues with everything that beats you.")),
    ]
    return scenario(
        ctx,
        Topic.CHECK_RAISE_SPOT,
        decision,
        hero_position=Position.BB,
        hero_hand=hand,
        board=board,
        players=SeatAssignment(hero=Position.BB, villain=Position.BTN).players(stack, stack),
        pot=pot,
        current_bet=bet,
        question=question,
        answers=answers,
    )


# ---------------------------------------------------------------------------
# Semi-bluff (SB)


def decide_semi_bluff(draw: DrawType, stack_bb: int) -> Decision:
    if draw is DrawType.COMBO_DRAW:
        return Decision("C", "ComboDraw")
    if draw is DrawType.FLUSH_DRAW:
        return Decision("B", "FlushDraw")
    if draw is DrawType.OESD:
        return Decision("C", "OESD:Deep") if stack_bb >= 40 else Decision("B", "OESD:Short")
    return Decision("A", "GutShot")


def semi_bluff_decision(ctx: TopicContext) -> TrainingScenario:
    hand, board = deal(ctx.rng, 3)
    stack_bb, pot_bb = _sample_pair(_SB_SIZING[ctx.difficulty], ctx)
    bet_pct = ctx.rng.randint(50, 75)
    in_position = ctx.rng.chance(0.5)

    draw = classify_draw(board)
    decision = decide_semi_bluff(draw, stack_bb)

    bb = BIG_BLIND
    pot, stack = pot_bb * bb, stack_bb * bb
    bet = max(percent_of(pot, bet_pct), bb)
    raise_to = scale(bet, 5, 2)
    seats = (
        SeatAssignment(hero=Position.BTN, villain=Position.BB)
        if in_position
        else SeatAssignment(hero=Position.BB, villain=Position.CO)
    )
    facts = {
        "hand": format_hand(hand),
        "board": format_board(board),
        "pos": seats.hero,
        "villain": seats.villain,
        "pot": pot,
        "bet": bet,
        "pct": bet_pct,
        "raise": raise_to,
        "stack_bb": stack_bb,
        "draw": draw.label,
        "equity": round(draw_equity(draw, 2) * 100),
    }
    question = ctx.pick(
        "You have {hand} in the {pos} and the flop is {board}, giving you a {draw}. Your opponent bets {bet} "
        "chips into {pot}. Stack: {stack_bb} big blinds. What do you do?",
        "Hero ({pos}) holds {hand} on {board}: a {draw} with ~{equity}% equity. {villain} bets {bet} (~{pct}% pot) "
        "into {pot}, {stack_bb} BB effective. Fold, call or semi-bluff raise to {raise}?",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Fold", decision, facts=facts,
               right=Wording("Correct. Fold. A {draw} hits too rarely to keep paying.",
                             "Correct. Fold. A {draw} has ~{equity}% equity, too little to call and with no fold "
                             "equity story to raise."),
               wrong=Wording("Folding gives up a good draw. You have plenty of ways to win.",
                             "Folding a {draw} with ~{equity}% equity is too tight against this sizing.")),
        option(ctx, "B", "Call", decision, facts=facts,
               right=Wording("Correct. Call. Your draw is good enough to see the next card, but a raise risks too much.",
                             "Correct. Flat. The {draw} has the odds to continue, and at {stack_bb} BB a raise "
                             "commits too much of the stack without enough fold equity."),
               wrong=Wording("Just calling is too passive with this draw.",
                             "Flatting under-plays the {draw}: raising adds fold equity on top of ~{equity}% raw equity.")),
        option(ctx, "C", f"Raise to {raise_to} chips", decision, facts=facts,
               right=Wording("Correct. Raise to {raise} chips. You can win right now if they fold, and you have lots "
                             "of cards that improve you if they call.",
                             "Correct. Semi-bluff raise to {raise}. The {draw} plus {stack_bb} BB of depth gives "
                             "maximum fold equity while keeping ~{equity}% when called."),
               wrong=Wording("Raising with this draw risks too many chips.",
                             "Raising a {draw} here is spew: the stack depth or the draw's equity does not support "
                             "a semi-bluff.")),
    ]
    return scenario(
        ctx,
        Topic.SEMI_BLUFF_DECISION,
        decision,
        hero_position=seats.hero,
        hero_hand=hand,
        board=board,
        players=seats.players(stack, stack),
        pot=pot,
        current_bet=bet,
        question=question,
        answers=answers,
    )


# ---------------------------------------------------------------------------
# 3-bet pot c-bet (3B)


class MadeStrength(Enum):
    STRONG = "Strong"
    WEAK = "Weak"


def three_bet_strength(hand: tuple[Card, Card], board: tuple[Card, ...]) -> MadeStrength:
    # any pair with the board, or an overpair
    if hero_pairs_board(hand, board):
        return MadeStrength.STRONG
    if hand[0].rank == hand[1].rank and hand[0].rank > max(card.rank for card in board):
        return MadeStrength.STRONG
    return MadeStrength.WEAK


def decide_three_bet_pot_cbet(texture: BoardTexture, strength: MadeStrength) -> Decision:
    wetness = "Dry" if texture is BoardTexture.DRY else "Wet"
    if strength is MadeStrength.STRONG:
        if texture is BoardTexture.DRY:
            return Decision("B", f"{wetness}:{strength.value}:SmallCbet")
        return Decision("C", f"{wetness}:{strength.value}:LargeCbet")
    return Decision("A", f"{wetness}:{strength.value}:Check")


def three_bet_pot_cbet(ctx: TopicContext) -> TrainingScenario:
    hand, board = deal(ctx.rng, 3)
    pot_bb, stack_bb = _sample_pair(_3B_SIZING[ctx.difficulty], ctx)

    texture = board_texture(board)
    strength = three_bet_strength(hand, board)
    decision = decide_three_bet_pot_cbet(texture, strength)

    bb = BIG_BLIND
    pot, stack = pot_bb * bb, stack_bb * bb
    small, large = percent_of(pot, 33), percent_of(pot, 67)
    facts = {
        "hand": format_hand(hand),
        "board": format_board(board),
        "pot": pot,
        "stack": stack,
        "spr": f"{stack / pot:.1f}",
        "small": small,
        "large": large,
        "tex": "dry" if texture is BoardTexture.DRY else "wet",
        "made": "a strong hand" if strength is MadeStrength.STRONG else "a weak hand",
    }
    question = ctx.pick(
        "You re-raised before the flop on the Button and the Big Blind called. You have {hand} ({made}). "
        "The flop is {board}. Pot: {pot} chips. Your opponent checks. What do you do?",
        "3-bet pot, hero BTN vs BB. Hero holds {hand} ({made}) on a {tex} {board} flop. Pot {pot}, stacks "
        "{stack} (SPR {spr}). BB checks. Choose a line.",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Check back", decision, facts=facts,
               right=Wording("Correct. Check. Your hand missed, and betting here rarely makes a better hand fold.",
                             "Correct. Check back. With {made} at SPR {spr} on a {tex} board, c-betting "
                             "bloats the pot against a range that connects better than your holding."),
               wrong=Wording("Checking wastes a strong hand. Bet to build the pot.",
                             "Checking {made} in a 3-bet pot at SPR {spr} forfeits value and protection.")),
        option(ctx, "B", f"C-bet small ({small} chips ~33%)", decision, facts=facts,
               right=Wording("Correct. Bet small, {small} chips. The flop has few draws, so a small bet gets value "
                             "from worse hands.",
                             "Correct. Small c-bet ({small} chips). On a {tex} board at SPR {spr} a 33% bet "
                             "extracts value from a wide range of worse hands and sets up stacks."),
               wrong=Wording("A small bet is not right here.",
                             "A 33% c-bet is the wrong size: {made} on a {tex} board wants either a bigger bet "
                             "or a check.")),
        option(ctx, "C", f"C-bet large ({large} chips ~67%)", decision, facts=facts,
               right=Wording("Correct. Bet big, {large} chips. There are many draws, so make them pay to chase.",
                             "Correct. Large c-bet ({large} chips). {made} on a {tex} board needs protection; "
                             "67% charges draws and gets stacks in by the river at SPR {spr}."),
               wrong=Wording("Betting big here risks too many chips.",
                             "A 67% c-bet overplays {made} on a {tex} board; it folds out worse and gets called "
                             "by better.")),
    ]
    return scenario(
        ctx,
        Topic.THREE_BET_POT_CBET,
        decision,
        hero_position=Position.BTN,
        hero_hand=hand,
        board=board,
        players=SeatAssignment(hero=Position.BTN, villain=Position.BB).players(stack, stack),
        pot=pot,
        question=question,
        answers=answers,
    )
