"""Textbook sections with their key definitions, in study order."""

from ..models import Section

SECTIONS = [
    Section(
        key="1.1",
        title="Introduction to Sets",
        page=3,
        definitions={
            "Set": "A collection of things called elements. a ∈ A means a is in A.",
            "Empty Set": "∅ = {} — no elements; |∅| = 0.",
            "Cardinality": "|A| = number of elements in A.",
            "Set-builder": "X = {expression : rule} — all values of expression satisfying rule.",
            "ℕ": "{1, 2, 3, 4, ...}",
            "ℤ": "{..., −2, −1, 0, 1, 2, ...}",
            "ℚ": "{m/n : m,n ∈ ℤ, n ≠ 0}",
            "ℝ": "All real numbers",
        },
    ),
    Section(
        key="1.2",
        title="The Cartesian Product",
        page=8,
        definitions={
            "Ordered pair": "(a, b) — equals (c,d) iff a=c and b=d.",
            "A × B": "{(a,b) : a ∈ A, b ∈ B}; |A×B| = |A|·|B|.",
            "ℝ²": "ℝ × ℝ — the real coordinate plane.",
        },
    ),
    Section(
        key="1.3",
        title="Subsets",
        page=12,
        definitions={
            "A ⊆ B": "Every element of A is in B (∀x, x∈A ⟹ x∈B).",
            "A ⊊ B": "A ⊆ B and A ≠ B (proper subset).",
            "∅ rule": "∅ ⊆ A for every set A (vacuously true).",
        },
    ),
    Section(
        key="1.4",
        title="Power Sets",
        page=15,
        definitions={
            "𝒫(A)": "The set of ALL subsets of A.",
            "|𝒫(A)|": "If |A| = n, then |𝒫(A)| = 2ⁿ.",
        },
    ),
    Section(
        key="1.5",
        title="Union, Intersection, Difference",
        page=18,
        definitions={
            "A ∪ B": "{x : x ∈ A or x ∈ B}",
            "A ∩ B": "{x : x ∈ A and x ∈ B}",
            "A − B": "{x : x ∈ A and x ∉ B}",
        },
    ),
    Section(
        key="1.6",
        title="Complement",
        page=20,
        definitions={
            "Ā": "U − A = {x ∈ U : x ∉ A}",
            "De Morgan (sets) 1": "(A ∪ B)̄ = Ā ∩ B̄",
            "De Morgan (sets) 2": "(A ∩ B)̄ = Ā ∪ B̄",
        },
    ),
    Section(
        key="1.7",
        title="Venn Diagrams",
        page=22,
        definitions={
            "Venn diagram": "Closed curves; shaded region represents the described set.",
            "Key rule": "Parentheses essential when mixing ∪ and ∩.",
        },
    ),
    Section(
        key="2.1",
        title="Statements",
        page=35,
        definitions={
            "Statement": "A declarative sentence that is either T or F (not both).",
            "Open sentence": "Contains a variable; truth depends on its value.",
        },
    ),
    Section(
        key="2.2",
        title="And, Or, Not",
        page=39,
        definitions={
            "P ∧ Q": "True only when both P and Q are true.",
            "P ∨ Q": "True when at least one of P, Q is true (inclusive or).",
            "¬P": "True when P is false.",
        },
    ),
    Section(
        key="2.3",
        title="Conditional Statements",
        page=42,
        definitions={
            "P ⟹ Q": "If P then Q. False ONLY when P=T and Q=F.",
            "Contrapositive": "¬Q ⟹ ¬P — logically equivalent to P ⟹ Q.",
            "Converse": "Q ⟹ P — NOT equivalent to P ⟹ Q.",
            "'P only if Q'": "Means P ⟹ Q.",
            "'Q whenever P'": "Means P ⟹ Q.",
        },
    ),
    Section(
        key="2.4",
        title="Biconditional Statements",
        page=46,
        definitions={
            "P ⟺ Q": "True when P and Q have the SAME truth value.",
            "Iff phrases": "'P iff Q', 'necessary and sufficient', 'P is equivalent to Q'.",
        },
    ),
    Section(
        key="2.5",
        title="Truth Tables for Statements",
        page=48,
        definitions={
            "Tautology": "A statement true for every assignment of truth values.",
            "Contradiction": "A statement false for every assignment of truth values.",
            "Compound statement": "Built using ∧, ∨, ¬, ⟹, ⟺.",
        },
    ),
    Section(
        key="2.6",
        title="Logical Equivalence",
        page=50,
        definitions={
            "P ≡ Q": "Logically equivalent — same truth table in every row.",
            "De Morgan 1": "¬(P ∧ Q) ≡ (¬P) ∨ (¬Q)",
            "De Morgan 2": "¬(P ∨ Q) ≡ (¬P) ∧ (¬Q)",
            "Contrapositive law": "P ⟹ Q ≡ (¬Q) ⟹ (¬P)",
            "Implication as disjunction": "P ⟹ Q ≡ (¬P) ∨ Q",
            "Distributive 1": "P ∧ (Q ∨ R) ≡ (P ∧ Q) ∨ (P ∧ R)",
            "Distributive 2": "P ∨ (Q ∧ R) ≡ (P ∨ Q) ∧ (P ∨ R)",
        },
    ),
]
