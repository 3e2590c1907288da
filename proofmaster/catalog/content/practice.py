"""
Open-ended practice problems.

partial_hints are tried in the order written here; the first trigger found
in a submission supplies the feedback.
"""

from ..models import PracticeProblem

PRACTICE_PROBLEMS = [
    PracticeProblem(
        question="Negate the statement: ∀x ∈ ℝ, x² ≥ 0",
        answer="∃x ∈ ℝ, x² < 0",
        keywords=["∃", "exists", "x²", "< 0", "negative"],
        partial_hints={
            "∀": "You kept ∀ — negating ∀ gives ∃! Flip it.",
            "x² > 0": "Almost — ≥ 0 negates to < 0.",
            "< 0": "Good negated predicate! Also flip ∀ to ∃.",
        },
        hint="Negating ∀ gives ∃, and negate the predicate: ≥ 0 becomes < 0",
        explanation="¬(∀x ∈ ℝ, x² ≥ 0) = ∃x ∈ ℝ, ¬(x² ≥ 0) = ∃x ∈ ℝ, x² < 0",
    ),
    PracticeProblem(
        question="Write the contrapositive of: 'If n² is even, then n is even'",
        answer="If n is odd, then n² is odd",
        keywords=["odd", "n is odd", "n² is odd", "contrapositive"],
        partial_hints={
            "even": "Remember the contrapositive negates both. Even becomes odd.",
            "n²": "Good — n² appears. But negate it: n² even becomes n² odd.",
        },
        hint="Contrapositive: flip and negate. 'If P then Q' becomes 'If ¬Q then ¬P'",
        explanation="Original: (n² even) ⟹ (n even). Contrapositive: (n odd) ⟹ (n² odd)",
    ),
    PracticeProblem(
        question="Let A = {1,2,3,4,5} and B = {3,4,5,6,7}. Find A ∩ B.",
        answer="{3, 4, 5}",
        keywords=["3", "4", "5"],
        partial_hints={
            "6": "6 is in B but NOT in A — intersection only keeps elements in BOTH.",
            "1": "1 is in A but NOT in B.",
        },
        hint="Intersection = elements that appear in BOTH A and B",
        explanation="A ∩ B = {x : x ∈ A AND x ∈ B} = {3,4,5}",
    ),
    PracticeProblem(
        question="Simplify ¬(P ⟹ Q) using logical equivalences.",
        answer="P ∧ ¬Q",
        keywords=["P ∧ ¬Q", "P and not Q", "P∧¬Q"],
        partial_hints={
            "¬P": "¬P appears in the inverse, not the negation. P stays positive.",
            "∨": "The negation of P⟹Q doesn't have an OR.",
            "¬Q": "You got ¬Q — now what about P? It stays positive.",
        },
        hint="P⟹Q fails exactly when P is true AND Q is false",
        explanation="¬(P⟹Q) = ¬(¬P∨Q) = ¬(¬P)∧¬Q = P∧¬Q  by De Morgan + Double Negation",
    ),
    PracticeProblem(
        question="Prove that A ∩ B ⊆ A for any sets A and B.",
        answer="Let x ∈ A ∩ B. Then x ∈ A and x ∈ B. In particular, x ∈ A. Therefore A ∩ B ⊆ A.",
        keywords=["let x", "x ∈ A", "x ∈ B", "therefore", "particular"],
        partial_hints={
            "assume": "Good instinct! Try 'Let x ∈ A ∩ B'",
            "x ∈ A ∩ B": "Great start! Now unpack the definition of intersection.",
            "definition": "Use Definition 1.5: x ∈ A∩B means x∈A AND x∈B.",
        },
        hint="Element-chasing proof: Let x ∈ A∩B, use definition of ∩, conclude x ∈ A",
        explanation="Let x ∈ A∩B. By definition, x∈A and x∈B. In particular, x∈A. Therefore A∩B ⊆ A. □",
    ),
    PracticeProblem(
        question="Is P ∧ Q logically equivalent to ¬(¬P ∨ ¬Q)? Justify.",
        answer="Yes — by De Morgan: ¬(¬P ∨ ¬Q) = ¬(¬P) ∧ ¬(¬Q) = P ∧ Q",
        keywords=["yes", "de morgan", "double negation", "P ∧ Q"],
        partial_hints={
            "no": "Actually yes — apply De Morgan's law to ¬(¬P ∨ ¬Q).",
            "truth table": "Truth table works! But try the faster route: De Morgan directly.",
            "de morgan": "Exactly! Apply De Morgan: ¬(¬P∨¬Q) = ¬(¬P)∧¬(¬Q). Now simplify.",
        },
        hint="Apply De Morgan to the outer negation, then use Double Negation twice",
        explanation="¬(¬P∨¬Q) =^{DM} ¬(¬P)∧¬(¬Q) =^{DN} P∧Q  ✓",
    ),
]
