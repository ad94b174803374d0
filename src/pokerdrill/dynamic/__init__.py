"""Cards, deck, random stream and the situation evaluator."""
