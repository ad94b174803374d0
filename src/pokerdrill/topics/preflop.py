"""Preflop drills: open/facing-open/3-bet pots, ICM push-fold, isolation,
squeeze and big blind defence.

Hand strength always comes from :func:`classify_hand`; each table below only
maps that category (plus position, stage or stack depth) to an answer.
"""

from __future__ import annotations

from enum import Enum

from ..core.models import Card, Difficulty, GameType, Position, TrainingScenario, Topic
from ..dynamic.bet_sizing import BIG_BLIND, TOURNAMENT_BIG_BLIND, Span
from ..dynamic.cards import canonical_hand_abbrev, format_hand
from ..dynamic.deck import Deck
from ..dynamic.evaluator import HandCategory, classify_hand, hand_category_name
from ..dynamic.seating import POSITIONS_6MAX, POSITIONS_9MAX, SeatAssignment, ring
from .base import Decision, TopicContext, Wording, deal, option, scenario

__all__ = [
    "DefenseTier",
    "PreflopSpot",
    "PushTier",
    "SqueezeTier",
    "TournamentStage",
    "anti_limper_isolation",
    "big_blind_defense",
    "decide_big_blind_defense",
    "decide_icm",
    "decide_isolation",
    "decide_preflop",
    "decide_squeeze",
    "defense_tier",
    "icm_push_fold",
    "isolation_size_bb",
    "preflop_decision",
    "push_threshold",
    "push_tier",
    "squeeze_play",
    "squeeze_tier",
]

_STRONGEST = (HandCategory.PREMIUM, HandCategory.STRONG)


# ---------------------------------------------------------------------------
# Preflop decision (PF)


class PreflopSpot(Enum):
    OPEN_RAISE = "OpenRaise"
    FACING_OPEN = "FacingOpen"
    THREE_BET_POT = "ThreeBetPot"


_SPOTS = (PreflopSpot.OPEN_RAISE, PreflopSpot.FACING_OPEN, PreflopSpot.THREE_BET_POT)

_PF_STACKS = {
    Difficulty.BEGINNER: Span(80, 120),
    Difficulty.INTERMEDIATE: Span(40, 150),
    Difficulty.ADVANCED: Span(15, 300),
}


def decide_preflop(spot: PreflopSpot, category: HandCategory, late: bool) -> Decision:
    name = hand_category_name(category)
    seat = "IP" if late else "OOP"
    if spot is PreflopSpot.OPEN_RAISE:
        raise_it = category in _STRONGEST or (late and category in (HandCategory.PLAYABLE, HandCategory.MARGINAL))
        return Decision("B" if raise_it else "A", f"OpenRaise:{name}:{seat}")
    if spot is PreflopSpot.FACING_OPEN:
        if category in _STRONGEST:
            correct = "C"
        elif category is HandCategory.PLAYABLE:
            correct = "C" if late else "B"
        else:
            correct = "A"
        return Decision(correct, f"FacingOpen:{name}:{seat}")
    if category is HandCategory.PREMIUM:
        correct = "C"
    elif category in (HandCategory.STRONG, HandCategory.PLAYABLE):
        correct = "B"
    else:
        correct = "A"
    return Decision(correct, f"ThreeBetPot:{name}")


def preflop_decision(ctx: TopicContext) -> TrainingScenario:
    rng = ctx.rng
    six_max = rng.chance(0.5)
    spot = _SPOTS[rng.randint(0, 2)]
    pool = POSITIONS_6MAX if six_max else POSITIONS_9MAX
    hero_pos = rng.choice(pool)
    stacks = _PF_STACKS[ctx.difficulty]
    stack = stacks.sample(rng)

    deck = Deck.shuffled(rng)
    hand = (deck.deal(), deck.deal())
    players = ring(pool, hero_pos, stack, lambda: stacks.sample(rng))

    category = classify_hand(hand)
    late = hero_pos.is_late()
    decision = decide_preflop(spot, category, late)

    bb = BIG_BLIND
    stack_bb = stack // bb
    facts = {
        "hand": format_hand(hand),
        "abbrev": canonical_hand_abbrev(hand),
        "pos": hero_pos,
        "seats": len(pool),
        "stack_bb": stack_bb,
        "cat": hand_category_name(category),
        "seat_note": "in position" if late else "out of position",
    }

    if spot is PreflopSpot.OPEN_RAISE:
        pot, current_bet = bb + bb // 2, 0
        facts["open_bb"] = 3 if stack_bb >= 40 else 2
        question = ctx.pick(
            "You have {hand} in {pos} at a {seats}-handed table. Stack: {stack_bb} big blinds. "
            "Everyone before you folded. What do you do?",
            "{seats}-max cash game, {stack_bb} BB effective. Action folds to you in {pos} with {hand} "
            "({abbrev}, a {cat} holding). Do you open, limp or fold?",
        ).format(**facts)
        answers = [
            option(ctx, "A", "Fold", decision, facts=facts,
                   right=Wording("Correct. {hand} is too weak to play from {pos}. Folding saves chips for a better spot.",
                                 "Correct. {abbrev} is a {cat} hand and sits outside a sound opening range from {pos} "
                                 "{seat_note}; opening it loses money against the players left to act."),
                   wrong=Wording("Folding throws away a good hand. {hand} is worth a raise from {pos}.",
                                 "Folding {abbrev} is too tight. A {cat} hand {seat_note} is a profitable open here.")),
            option(ctx, "B", f"Raise to {facts['open_bb']} BB", decision, facts=facts,
                   right=Wording("Correct. Raise to {open_bb} big blinds. {hand} is strong enough to take the lead and "
                                 "you can win the blinds right away.",
                                 "Correct. Open to {open_bb} BB. {abbrev} ({cat}) is inside the opening range from "
                                 "{pos}; raising first in takes the initiative and wins the blinds uncontested often."),
                   wrong=Wording("Raising with {hand} from {pos} puts chips in with a hand that usually loses. Fold instead.",
                                 "Opening {abbrev} from {pos} {seat_note} is too loose; a {cat} hand does not "
                                 "realise enough equity against the ranges behind you.")),
            option(ctx, "C", "Call", decision, facts=facts,
                   right=Wording("Calling is fine here.", "Limping is acceptable here."),
                   wrong=Wording("Just calling the big blind (limping) is rarely a good idea. Either raise or fold.",
                                 "Open-limping {abbrev} gives up fold equity and invites isolation raises. "
                                 "Raise or fold; limping is dominated by both.")),
        ]
    elif spot is PreflopSpot.FACING_OPEN:
        raiser = 3 * bb if stack_bb >= 40 else 2 * bb
        three_bet = raiser * 3
        pot, current_bet = bb // 2 + bb + raiser, raiser
        facts.update(raise_bb=raiser // bb, three_bet_bb=three_bet // bb)
        question = ctx.pick(
            "You have {hand} in {pos} at a {seats}-handed table. Stack: {stack_bb} big blinds. "
            "A player before you raised to {raise_bb} big blinds. What do you do?",
            "{seats}-max cash game, {stack_bb} BB effective. You hold {hand} ({abbrev}, {cat}) in {pos} "
            "facing a {raise_bb} BB open. Fold, flat or 3-bet to {three_bet_bb} BB?",
        ).format(**facts)
        answers = [
            option(ctx, "A", "Fold", decision, facts=facts,
                   right=Wording("Correct. Someone already raised and {hand} is not good enough to continue. Let it go.",
                                 "Correct. {abbrev} is a {cat} hand; against an opening range it is dominated too "
                                 "often to call or 3-bet profitably."),
                   wrong=Wording("Folding here is too cautious. {hand} can play against one raise.",
                                 "Folding {abbrev} against a single open is too tight for a {cat} holding.")),
            option(ctx, "B", "Call", decision, facts=facts,
                   right=Wording("Correct. Call and see a flop. {hand} plays well but is not strong enough to re-raise "
                                 "from {pos}.",
                                 "Correct. Flatting {abbrev} {seat_note} keeps the opener's weaker hands in and avoids "
                                 "bloating the pot with a {cat} hand that cannot stand a 4-bet."),
                   wrong=Wording("Just calling is not the best play with {hand} here.",
                                 "Flatting {abbrev} is a mistake here: {cat} hands either have enough equity to "
                                 "3-bet for value or too little to continue.")),
            option(ctx, "C", f"Raise to {facts['three_bet_bb']} BB", decision, facts=facts,
                   right=Wording("Correct. Re-raise to {three_bet_bb} big blinds. {hand} is strong, so build the pot now.",
                                 "Correct. 3-bet to {three_bet_bb} BB. {abbrev} is a {cat} hand that is ahead of the "
                                 "opener's range and plays well in a bloated pot {seat_note}."),
                   wrong=Wording("Re-raising with {hand} is too aggressive against a player who already showed strength.",
                                 "3-betting {abbrev} here turns a {cat} hand into a bluff with poor blockers; "
                                 "it folds out worse and gets called by better.")),
        ]
    else:
        open_size = 3 * bb
        three_bet = open_size * 3
        four_bet = three_bet * 3
        pot, current_bet = bb // 2 + bb + open_size + three_bet, three_bet
        facts.update(open_bb=open_size // bb, three_bet_bb=three_bet // bb, four_bet_bb=four_bet // bb)
        question = ctx.pick(
            "You have {hand} in {pos} at a {seats}-handed table. Stack: {stack_bb} big blinds. "
            "You raised to {open_bb} big blinds and an opponent re-raised to {three_bet_bb} big blinds. What do you do?",
            "{seats}-max cash game, {stack_bb} BB effective. You opened {abbrev} ({hand}) to {open_bb} BB from {pos} "
            "and face a 3-bet to {three_bet_bb} BB. Fold, call or 4-bet to {four_bet_bb} BB?",
        ).format(**facts)
        answers = [
            option(ctx, "A", "Fold", decision, facts=facts,
                   right=Wording("Correct. The re-raise shows a strong hand and {hand} cannot keep up. Fold.",
                                 "Correct. Against a 3-bet range {abbrev} ({cat}) is dominated; folding loses only "
                                 "the open while continuing bleeds chips."),
                   wrong=Wording("Folding is too weak. {hand} is good enough to keep playing against a re-raise.",
                                 "Folding {abbrev} to a 3-bet over-folds; a {cat} hand has to continue to stop the "
                                 "3-bettor from profiting with any two cards.")),
            option(ctx, "B", "Call", decision, facts=facts,
                   right=Wording("Correct. Call and see the flop. {hand} is good but not strong enough to re-raise again.",
                                 "Correct. Calling keeps {abbrev} in with good equity against the 3-bet range while "
                                 "avoiding a 4-bet that only gets action from better hands."),
                   wrong=Wording("Just calling is not right with {hand} here.",
                                 "Flatting the 3-bet with {abbrev} is a mistake: the hand belongs in the "
                                 "{cat} bucket, which is either a fold or a 4-bet here.")),
            option(ctx, "C", f"4-bet to {facts['four_bet_bb']} BB", decision, facts=facts,
                   right=Wording("Correct. Re-raise again to {four_bet_bb} big blinds. {hand} is one of the very best "
                                 "hands and you want more chips in the middle.",
                                 "Correct. 4-bet to {four_bet_bb} BB. {abbrev} is a premium holding at the top of your "
                                 "range; it gets value from worse and is happy to stack off."),
                   wrong=Wording("Re-raising again with {hand} puts too many chips at risk.",
                                 "4-betting {abbrev} inflates the pot with a {cat} hand that is behind the continuing "
                                 "range; keep the 4-bet for premiums.")),
        ]

    return scenario(
        ctx,
        Topic.PREFLOP_DECISION,
        decision,
        hero_position=hero_pos,
        hero_hand=hand,
        players=players,
        pot=pot,
        current_bet=current_bet,
        question=question,
        answers=answers,
    )


# ---------------------------------------------------------------------------
# ICM push/fold (IC)


class TournamentStage(Enum):
    EARLY = "Early"
    MIDDLE = "Middle"
    BUBBLE = "Bubble"
    FINAL_TABLE = "FinalTable"


class PushTier(Enum):
    PREMIUM = "Premium"
    STRONG = "Strong"
    PLAYABLE = "Playable"
    WEAK = "Weak"


_STAGES = (TournamentStage.EARLY, TournamentStage.MIDDLE, TournamentStage.BUBBLE, TournamentStage.FINAL_TABLE)

_STAGE_LABELS = {
    TournamentStage.EARLY: "early levels",
    TournamentStage.MIDDLE: "middle stages",
    TournamentStage.BUBBLE: "the money bubble",
    TournamentStage.FINAL_TABLE: "the final table",
}

_FIELD_SIZES = {
    TournamentStage.EARLY: Span(60, 120),
    TournamentStage.MIDDLE: Span(25, 60),
    TournamentStage.BUBBLE: Span(10, 18),
    TournamentStage.FINAL_TABLE: Span(3, 9),
}

_PUSH_BASE = {
    TournamentStage.EARLY: 20,
    TournamentStage.MIDDLE: 15,
    TournamentStage.BUBBLE: 10,
    TournamentStage.FINAL_TABLE: 12,
}

_RISK_PREMIUM = {
    TournamentStage.EARLY: 3,
    TournamentStage.MIDDLE: 8,
    TournamentStage.BUBBLE: 20,
    TournamentStage.FINAL_TABLE: 15,
}

_ICM_STACKS = {
    Difficulty.BEGINNER: Span(6, 18),
    Difficulty.INTERMEDIATE: Span(4, 25),
    Difficulty.ADVANCED: Span(3, 30),
}


def push_tier(hand: tuple[Card, Card]) -> PushTier:
    high, low = sorted((card.rank for card in hand), reverse=True)
    suited = hand[0].suit is hand[1].suit
    pair = high == low
    if (pair and high >= 12) or (high, low, suited) == (14, 13, True):
        return PushTier.PREMIUM
    if (pair and high >= 10) or (high == 14 and low >= 12):
        return PushTier.STRONG
    if (pair and high >= 7) or (high == 14 and suited and low >= 10) or (suited and high >= 12 and low >= 11):
        return PushTier.PLAYABLE
    return PushTier.WEAK


def push_threshold(stage: TournamentStage, tier: PushTier) -> int:
    base = _PUSH_BASE[stage]
    if tier is PushTier.PREMIUM:
        return base + 8
    if tier is PushTier.STRONG:
        return base + 3
    if tier is PushTier.PLAYABLE:
        return base
    return max(base - 4, 0)


def decide_icm(stage: TournamentStage, tier: PushTier, stack_bb: int) -> Decision:
    push = stack_bb <= push_threshold(stage, tier)
    return Decision("A" if push else "B", f"{stage.value}:{'Push' if push else 'Fold'}")


def icm_push_fold(ctx: TopicContext) -> TrainingScenario:
    rng = ctx.rng
    stage = _STAGES[rng.randint(0, 3)]
    hero_bb = _ICM_STACKS[ctx.difficulty].sample(rng)
    villain_bb = rng.randint(20, 60)
    field_size = _FIELD_SIZES[stage].sample(rng)
    paid = -(-field_size * 15 // 100)
    hand, _ = deal(rng, 0)

    tier = push_tier(hand)
    threshold = push_threshold(stage, tier)
    decision = decide_icm(stage, tier, hero_bb)

    bb = TOURNAMENT_BIG_BLIND
    hero_pos = Position.BTN
    facts = {
        "hand": format_hand(hand),
        "abbrev": canonical_hand_abbrev(hand),
        "stage": _STAGE_LABELS[stage],
        "left": field_size,
        "paid": paid,
        "stack_bb": hero_bb,
        "villain_bb": villain_bb,
        "tier": tier.value.lower(),
        "threshold": threshold,
        "premium": _RISK_PREMIUM[stage],
    }
    question = ctx.pick(
        "Tournament, {stage}. {left} players left and the top {paid} get paid. You have {hand} on the Button "
        "with {stack_bb} big blinds. Everyone folded to you and the big blind has {villain_bb} big blinds. "
        "Go all-in or fold?",
        "Tournament: {stage}. {left} players remain, top {paid} paid. Hero on BTN with {hand} ({abbrev}), "
        "{stack_bb} BB effective against a {villain_bb} BB big blind. Folds to you. ICM risk premium here is "
        "about {premium}%. Shove or fold?",
    ).format(**facts)
    answers = [
        option(ctx, "A", "All-in", decision, facts=facts,
               right=Wording("Correct. Go all-in. With only {stack_bb} big blinds and {hand}, pushing now wins the "
                             "blinds often and still has a good chance when called.",
                             "Correct. Shove. {abbrev} is a {tier} push hand and {stack_bb} BB is inside the "
                             "{threshold} BB shoving threshold for {stage}; fold equity plus showdown equity beats "
                             "the ~{premium}% ICM risk premium."),
               wrong=Wording("Going all-in risks your tournament life with a hand that is not good enough at this stage.",
                             "Shoving {abbrev} with {stack_bb} BB exceeds the {threshold} BB threshold for a {tier} hand "
                             "in {stage}; the ~{premium}% risk premium makes this push -$EV.")),
        option(ctx, "B", "Fold", decision, facts=facts,
               right=Wording("Correct. Fold. {hand} is not strong enough to risk all your chips right now, and you "
                             "still have enough chips to wait.",
                             "Correct. Fold. {stack_bb} BB is above the {threshold} BB shoving threshold for a "
                             "{tier} hand in {stage}; survival equity outweighs the chip EV of the push."),
               wrong=Wording("Folding is too careful. Your stack is short and {hand} is good enough to go all-in.",
                             "Folding gives up too much: at {stack_bb} BB a {tier} hand like {abbrev} clears the "
                             "{threshold} BB threshold even after the ~{premium}% ICM premium.")),
    ]
    return scenario(
        ctx,
        Topic.ICM_AND_TOURNAMENT_DECISION,
        decision,
        game_type=GameType.TOURNAMENT,
        hero_position=hero_pos,
        hero_hand=hand,
        players=SeatAssignment(hero=hero_pos, villain=Position.BB).players(hero_bb * bb, villain_bb * bb),
        pot=bb + bb // 2,
        question=question,
        answers=answers,
    )


# ---------------------------------------------------------------------------
# Anti-limper isolation (AL)

_ISO_SEATS = (Position.CO, Position.BTN, Position.SB)

_AL_STACKS = {
    Difficulty.BEGINNER: Span(60, 120),
    Difficulty.INTERMEDIATE: Span(30, 150),
    Difficulty.ADVANCED: Span(15, 200),
}


def isolation_size_bb(limpers: int) -> int:
    return {1: 4, 2: 5}.get(limpers, 6)


def decide_isolation(category: HandCategory, late: bool) -> Decision:
    if category in _STRONGEST:
        return Decision("C", category.value)
    if category is HandCategory.PLAYABLE:
        return Decision("C", "Playable:IP") if late else Decision("B", "Playable:OOP")
    return Decision("A", category.value)


def anti_limper_isolation(ctx: TopicContext) -> TrainingScenario:
    rng = ctx.rng
    hand, _ = deal(rng, 0)
    hero_pos = _ISO_SEATS[rng.randint(0, 2)]
    limpers = rng.randint(1, 3)
    stack_bb = _AL_STACKS[ctx.difficulty].sample(rng)

    category = classify_hand(hand)
    late = hero_pos.is_late()
    decision = decide_isolation(category, late)

    bb = BIG_BLIND
    stack = stack_bb * bb
    iso_bb = isolation_size_bb(limpers)
    facts = {
        "hand": format_hand(hand),
        "abbrev": canonical_hand_abbrev(hand),
        "pos": hero_pos,
        "limpers": limpers,
        "players": "player" if limpers == 1 else "players",
        "stack_bb": stack_bb,
        "iso_bb": iso_bb,
        "iso_chips": iso_bb * bb,
        "cat": hand_category_name(category),
        "seat_note": "in position" if late else "out of position",
    }
    question = ctx.pick(
        "You have {hand} in {pos}. {limpers} {players} just called the big blind instead of raising. "
        "Stack: {stack_bb} big blinds. What do you do?",
        "{limpers} limper(s) to you in {pos}, {stack_bb} BB effective. You hold {hand} ({abbrev}, {cat}). "
        "Fold, over-limp or isolate to {iso_bb} BB?",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Fold", decision, facts=facts,
               right=Wording("Correct. Fold. {hand} is not strong enough here, even against players who only called.",
                             "Correct. {abbrev} is a {cat} hand; isolating it gets called by the limpers' better "
                             "holdings and over-limping plays a weak hand in a multiway pot."),
               wrong=Wording("Folding is too cautious. Limpers are usually weak, and {hand} can punish them.",
                             "Folding {abbrev} passes up a profitable isolation spot against a capped limping range.")),
        option(ctx, "B", "Call", decision, facts=facts,
               right=Wording("Correct. Just call. {hand} plays well in a cheap pot, but you will act first after the "
                             "flop so keep it small.",
                             "Correct. Over-limp. A {cat} hand {seat_note} realises its equity best in a cheap "
                             "multiway pot; isolating bloats a pot you will play out of position."),
               wrong=Wording("Just calling lets everyone see a cheap flop. Make a decision: raise or fold.",
                             "Over-limping {abbrev} surrenders the initiative; with this holding either isolate "
                             "for value or fold.")),
        option(ctx, "C", f"Raise to {iso_bb} BB", decision, facts=facts,
               right=Wording("Correct. Raise to {iso_chips} chips ({iso_bb} big blinds). {hand} is good and you want "
                             "to play against one weak player, not several.",
                             "Correct. Isolate to {iso_bb} BB. {abbrev} dominates a limping range; the raise thins "
                             "the field and takes the initiative {seat_note}."),
               wrong=Wording("Raising with {hand} here is too ambitious. You will often be called by better hands.",
                             "Isolating {abbrev} from {pos} is too loose: a {cat} hand does not play well in a "
                             "raised pot {seat_note}.")),
    ]
    return scenario(
        ctx,
        Topic.ANTI_LIMPER_ISOLATION,
        decision,
        hero_position=hero_pos,
        hero_hand=hand,
        players=SeatAssignment(hero=hero_pos, villain=Position.UTG).players(stack, stack),
        pot=bb + bb // 2 + bb * limpers,
        current_bet=bb,
        question=question,
        answers=answers,
    )


# ---------------------------------------------------------------------------
# Squeeze (SQ) and big blind defence (BD)


class SqueezeTier(Enum):
    PREMIUM = "Premium"
    SPECULATIVE = "Speculative"
    WEAK = "Weak"


class DefenseTier(Enum):
    STRONG = "Strong"
    PLAYABLE = "Playable"
    WEAK = "Weak"


# (raise size in BB, effective stack in BB) per difficulty
_RAISE_AND_STACK = {
    Difficulty.BEGINNER: (Span.fixed(3), Span.fixed(100)),
    Difficulty.INTERMEDIATE: (Span(2, 4), Span(60, 120)),
    Difficulty.ADVANCED: (Span(2, 5), Span(25, 150)),
}

_CALLERS = {
    Difficulty.BEGINNER: Span.fixed(1),
    Difficulty.INTERMEDIATE: Span(1, 2),
    Difficulty.ADVANCED: Span(1, 3),
}


def squeeze_tier(category: HandCategory) -> SqueezeTier:
    if category in _STRONGEST:
        return SqueezeTier.PREMIUM
    if category is HandCategory.PLAYABLE:
        return SqueezeTier.SPECULATIVE
    return SqueezeTier.WEAK


def decide_squeeze(tier: SqueezeTier) -> Decision:
    if tier is SqueezeTier.PREMIUM:
        return Decision("C", "Premium:Squeeze")
    if tier is SqueezeTier.SPECULATIVE:
        return Decision("B", "Speculative:Call")
    return Decision("A", "Weak:Fold")


def squeeze_play(ctx: TopicContext) -> TrainingScenario:
    rng = ctx.rng
    hand, _ = deal(rng, 0)
    callers = _CALLERS[ctx.difficulty].sample(rng)
    raise_span, stack_span = _RAISE_AND_STACK[ctx.difficulty]
    open_bb = raise_span.sample(rng)
    stack_bb = stack_span.sample(rng)

    tier = squeeze_tier(classify_hand(hand))
    decision = decide_squeeze(tier)

    bb = BIG_BLIND
    squeeze_bb = open_bb * 3 + callers * open_bb
    pot_bb = open_bb + callers * open_bb + 1
    facts = {
        "hand": format_hand(hand),
        "abbrev": canonical_hand_abbrev(hand),
        "open_bb": open_bb,
        "callers": callers,
        "caller_word": "player" if callers == 1 else "players",
        "stack_bb": stack_bb,
        "pot_bb": pot_bb,
        "squeeze_bb": squeeze_bb,
        "squeeze_chips": squeeze_bb * bb,
        "tier": tier.value.lower(),
    }
    question = ctx.pick(
        "You have {hand} on the Button. A player raised to {open_bb} big blinds and {callers} {caller_word} called. "
        "Stack: {stack_bb} big blinds. What do you do?",
        "UTG opens to {open_bb} BB, {callers} caller(s). Hero on BTN with {hand} ({abbrev}), {stack_bb} BB "
        "effective, {pot_bb} BB in the pot. Fold, flat or squeeze to {squeeze_bb} BB?",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Fold", decision, facts=facts,
               right=Wording("Correct. Fold. {hand} is not good enough to get involved in a pot that is already "
                             "raised and called.",
                             "Correct. {abbrev} is a weak holding here; it is dominated by the opener and too "
                             "thin to flat into a multiway raised pot."),
               wrong=Wording("Folding gives up a good opportunity with {hand}.",
                             "Folding a {tier} hand like {abbrev} here passes up clear equity in a pot of {pot_bb} BB.")),
        option(ctx, "B", f"Call ({open_bb} BB)", decision, facts=facts,
               right=Wording("Correct. Call. {hand} can win a big pot if it hits the flop, and you get to act last.",
                             "Correct. Flat. {abbrev} is speculative: it has the implied odds to call {open_bb} BB "
                             "in position but does not want to face a 4-bet."),
               wrong=Wording("Just calling is not the best choice with {hand} in this spot.",
                             "Flatting {abbrev} is a mistake: a {tier} hand should either squeeze for value or "
                             "stay out of the pot.")),
        option(ctx, "C", f"Squeeze to {squeeze_bb * bb} chips ({squeeze_bb} BB)", decision, facts=facts,
               right=Wording("Correct. Re-raise big to {squeeze_chips} chips. {hand} is strong, and the callers are "
                             "unlikely to have a great hand.",
                             "Correct. Squeeze to {squeeze_bb} BB. {abbrev} is a premium holding; the dead money from "
                             "{callers} capped caller(s) makes a large 3-bet highly profitable."),
               wrong=Wording("Re-raising with {hand} is too risky against {callers} {caller_word} plus the raiser.",
                             "Squeezing {abbrev} turns a {tier} hand into a bluff facing several ranges; "
                             "the opener's continuing range crushes it.")),
    ]
    stack = stack_bb * bb
    return scenario(
        ctx,
        Topic.SQUEEZE_PLAY,
        decision,
        hero_position=Position.BTN,
        hero_hand=hand,
        players=SeatAssignment(hero=Position.BTN, villain=Position.UTG).players(stack, stack),
        pot=pot_bb * bb,
        current_bet=open_bb * bb,
        question=question,
        answers=answers,
    )


_BD_RAISERS = (Position.UTG, Position.CO, Position.BTN)


def defense_tier(category: HandCategory) -> DefenseTier:
    if category in _STRONGEST:
        return DefenseTier.STRONG
    if category in (HandCategory.PLAYABLE, HandCategory.MARGINAL):
        return DefenseTier.PLAYABLE
    return DefenseTier.WEAK


def decide_big_blind_defense(tier: DefenseTier) -> Decision:
    if tier is DefenseTier.STRONG:
        return Decision("C", "Strong:ThreeBet")
    if tier is DefenseTier.PLAYABLE:
        return Decision("B", "Playable:Call")
    return Decision("A", "Weak:Fold")


def big_blind_defense(ctx: TopicContext) -> TrainingScenario:
    rng = ctx.rng
    hand, _ = deal(rng, 0)
    villain_pos = _BD_RAISERS[rng.randint(0, 2)]
    raise_span, stack_span = _RAISE_AND_STACK[ctx.difficulty]
    raise_bb = raise_span.sample(rng)
    stack_bb = stack_span.sample(rng)

    tier = defense_tier(classify_hand(hand))
    decision = decide_big_blind_defense(tier)

    bb = BIG_BLIND
    three_bet_bb = raise_bb * 3 + 1
    facts = {
        "hand": format_hand(hand),
        "abbrev": canonical_hand_abbrev(hand),
        "villain": villain_pos,
        "raise_bb": raise_bb,
        "stack_bb": stack_bb,
        "pot_bb": raise_bb + 1,
        "three_bet_bb": three_bet_bb,
        "three_bet_chips": three_bet_bb * bb,
        "tier": tier.value.lower(),
    }
    question = ctx.pick(
        "You are in the Big Blind with {hand}. The {villain} raised to {raise_bb} big blinds and everyone else "
        "folded. Stack: {stack_bb} big blinds. What do you do?",
        "{villain} opens to {raise_bb} BB, folds to hero in the BB with {hand} ({abbrev}), {stack_bb} BB "
        "effective. Fold, defend by calling, or 3-bet to {three_bet_bb} BB?",
    ).format(**facts)
    answers = [
        option(ctx, "A", "Fold", decision, facts=facts,
               right=Wording("Correct. Fold. Even with a discount, {hand} is too weak to play against this raise.",
                             "Correct. {abbrev} is below the BB defending range versus a {villain} open; the "
                             "discount does not make up for poor equity realisation out of position."),
               wrong=Wording("Folding is too tight. You already have a big blind in, so {hand} is worth defending.",
                             "Folding {abbrev} over-folds the big blind; a {tier} hand defends profitably with "
                             "the pot odds on offer.")),
        option(ctx, "B", f"Call ({raise_bb} BB)", decision, facts=facts,
               right=Wording("Correct. Call. You already paid part of the price, and {hand} is good enough to see a flop.",
                             "Correct. Flat. {abbrev} is a playable defend; calling {raise_bb} BB keeps the "
                             "{villain}'s bluffs in and avoids a bloated pot out of position."),
               wrong=Wording("Just calling is not the best option with {hand} here.",
                             "Calling with {abbrev} misplays a {tier} hand: it either wants to 3-bet for value or "
                             "fold.")),
        option(ctx, "C", f"3-bet to {three_bet_bb * bb} chips ({three_bet_bb} BB)", decision, facts=facts,
               right=Wording("Correct. Re-raise to {three_bet_chips} chips. {hand} is strong, so make the pot bigger "
                             "while you are ahead.",
                             "Correct. 3-bet to {three_bet_bb} BB. {abbrev} is well ahead of a {villain} opening range; "
                             "raising denies equity and builds the pot with the best hand."),
               wrong=Wording("Re-raising with {hand} risks too much from the Big Blind.",
                             "3-betting {abbrev} from the BB turns a {tier} hand into a bluff that plays badly "
                             "out of position when called.")),
    ]
    stack = stack_bb * bb
    return scenario(
        ctx,
        Topic.BIG_BLIND_DEFENSE,
        decision,
        hero_position=Position.BB,
        hero_hand=hand,
        players=SeatAssignment(hero=Position.BB, villain=villain_pos).players(stack, stack),
        pot=(raise_bb + 1) * bb,
        current_bet=raise_bb * bb,
        question=question,
        answers=answers,
    )
