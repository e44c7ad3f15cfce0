import sys

from substitute import build_tour, join_tokens, tokenize_all

sentences = [
    "The quick brown fox is very cool, supposedly.",
    "The brown color is very very pretty, no?",
    "We're here (in Wilkes-Barre), finally!",
]
tour = build_tour(tokenize_all(sentences))

# Each plan moves from one sentence to the next, closing the loop
for plan in tour:
    sys.stdout.write(f"{join_tokens(plan.source)} -> {join_tokens(plan.target)} (cost {plan.cost})\n")

# Individual actions of the first step
for action in tour[0].actions:
    sys.stdout.write(f"  {action}\n")
