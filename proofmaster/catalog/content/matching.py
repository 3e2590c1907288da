"""Prompt/answer pairs for the matching drill."""

from ..models import MatchingPair

MATCHING_PAIRS = [
    MatchingPair(prompt="¬(P ∧ Q)", answer="¬P ∨ ¬Q", category="De Morgan #1"),
    MatchingPair(prompt="¬(P ∨ Q)", answer="¬P ∧ ¬Q", category="De Morgan #2"),
    MatchingPair(prompt="P ⟹ Q (contrapositive)", answer="¬Q ⟹ ¬P", category="Contrapositive Law"),
    MatchingPair(prompt="P ⟹ Q (as disjunction)", answer="¬P ∨ Q", category="Implication Law"),
    MatchingPair(prompt="¬(P ⟹ Q)", answer="P ∧ ¬Q", category="Negation of Conditional"),
    MatchingPair(prompt="¬(∀x, P(x))", answer="∃x, ¬P(x)", category="Quantifier Negation"),
    MatchingPair(prompt="¬(∃x, P(x))", answer="∀x, ¬P(x)", category="Quantifier Negation"),
    MatchingPair(prompt="A ∪ B (complement)", answer="Ā ∩ B̄", category="De Morgan for Sets"),
    MatchingPair(prompt="A ∩ B (complement)", answer="Ā ∪ B̄", category="De Morgan for Sets"),
    MatchingPair(prompt="P ∧ (Q ∨ R)", answer="(P ∧ Q) ∨ (P ∧ R)", category="Distributive Law"),
    MatchingPair(prompt="{x : x ∈ A or x ∈ B}", answer="A ∪ B", category="Union"),
    MatchingPair(prompt="{x : x ∈ A and x ∈ B}", answer="A ∩ B", category="Intersection"),
    MatchingPair(prompt="{x : x ∈ A and x ∉ B}", answer="A \\ B", category="Set Difference"),
    MatchingPair(prompt="U \\ A", answer="Ā", category="Complement"),
    MatchingPair(prompt="Set of all subsets of A", answer="𝒫(A)", category="Power Set"),
]
