"""Per-topic decision tables, grouped by street."""

from .base import Decision, TopicContext
from .flop import (
    check_raise_spot,
    continuation_bet,
    pot_odds_and_equity,
    semi_bluff_decision,
    three_bet_pot_cbet,
)
from .preflop import anti_limper_isolation, big_blind_defense, icm_push_fold, preflop_decision, squeeze_play
from .river import bluff_spot, river_call_or_fold, river_value_bet
from .turn import delayed_cbet, turn_barrel_decision, turn_probe_bet

__all__ = [
    "Decision",
    "TopicContext",
    "anti_limper_isolation",
    "big_blind_defense",
    "bluff_spot",
    "check_raise_spot",
    "continuation_bet",
    "delayed_cbet",
    "icm_push_fold",
    "pot_odds_and_equity",
    "preflop_decision",
    "river_call_or_fold",
    "river_value_bet",
    "semi_bluff_decision",
    "squeeze_play",
    "three_bet_pot_cbet",
    "turn_barrel_decision",
    "turn_probe_bet",
]
