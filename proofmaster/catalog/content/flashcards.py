"""Flashcard decks: laws, definitions and negation rules by study page."""

from ..models import Flashcard, FlashcardDeck

FLASHCARD_DECKS = [
    FlashcardDeck(
        key="page-1",
        title="Logic Laws & Set Notation",
        cards=(
            Flashcard(
                id="page-1.1", deck="page-1",
                question="¬(P ∧ Q) ≡ ?",
                answer="¬P ∨ ¬Q",
                hint="De Morgan: flip AND→OR, negate each",
                law="De Morgan #1 (p.51)",
            ),
            Flashcard(
                id="page-1.2", deck="page-1",
                question="¬(P ∨ Q) ≡ ?",
                answer="¬P ∧ ¬Q",
                hint="De Morgan: flip OR→AND, negate each",
                law="De Morgan #2 (p.51)",
            ),
            Flashcard(
                id="page-1.3", deck="page-1",
                question="P ⟹ Q ≡ ? (contrapositive)",
                answer="¬Q ⟹ ¬P",
                hint="Negate both sides and flip direction",
                law="Contrapositive Law (p.51)",
            ),
            Flashcard(
                id="page-1.4", deck="page-1",
                question="P ⟹ Q ≡ ? (as disjunction)",
                answer="¬P ∨ Q",
                hint="If P fails OR Q holds",
                law="Implication Law (p.51)",
            ),
            Flashcard(
                id="page-1.5", deck="page-1",
                question="¬(¬P) ≡ ?",
                answer="P",
                hint="Two negations cancel",
                law="Double Negation (p.52)",
            ),
            Flashcard(
                id="page-1.6", deck="page-1",
                question="P ∧ (Q ∨ R) ≡ ?",
                answer="(P ∧ Q) ∨ (P ∧ R)",
                hint="Distribute ∧ over ∨",
                law="Distributive Law (p.52)",
            ),
            Flashcard(
                id="page-1.7", deck="page-1",
                question="P ∨ (Q ∧ R) ≡ ?",
                answer="(P ∨ Q) ∧ (P ∨ R)",
                hint="Distribute ∨ over ∧",
                law="Distributive Law (p.52)",
            ),
            Flashcard(
                id="page-1.8", deck="page-1",
                question="A ∪ B̄ = ?",
                answer="Ā ∩ B̄",
                hint="De Morgan for sets: complement of union",
                law="De Morgan for Sets (p.163)",
            ),
            Flashcard(
                id="page-1.9", deck="page-1",
                question="A ∩ B̄ = ?",
                answer="Ā ∪ B̄",
                hint="De Morgan for sets: complement of intersection",
                law="De Morgan for Sets (p.163)",
            ),
            Flashcard(
                id="page-1.10", deck="page-1",
                question="What is |𝒫(A)| when |A| = n?",
                answer="2ⁿ",
                hint="Each element is either IN or OUT",
                law="Power Set Theorem (p.15)",
            ),
        ),
    ),
    FlashcardDeck(
        key="page-2",
        title="Sets & Operations",
        cards=(
            Flashcard(
                id="page-2.1", deck="page-2",
                question="A ∪ B = ?",
                answer="{x : x ∈ A or x ∈ B}",
                hint="Union: everything in A, B, or both",
                law="Definition 1.5 (p.18)",
            ),
            Flashcard(
                id="page-2.2", deck="page-2",
                question="A ∩ B = ?",
                answer="{x : x ∈ A and x ∈ B}",
                hint="Intersection: only what's in both",
                law="Definition 1.5 (p.18)",
            ),
            Flashcard(
                id="page-2.3", deck="page-2",
                question="A \\ B = ?",
                answer="{x : x ∈ A and x ∉ B}",
                hint="Difference: in A but NOT in B",
                law="Definition 1.5 (p.18)",
            ),
            Flashcard(
                id="page-2.4", deck="page-2",
                question="Ā = ? (complement)",
                answer="U \\ A = {x ∈ U : x ∉ A}",
                hint="Everything in the universe NOT in A",
                law="Definition 1.6 (p.20)",
            ),
            Flashcard(
                id="page-2.5", deck="page-2",
                question="Is ∅ ⊆ A always true?",
                answer="Yes — vacuously true for ALL sets A",
                hint="No element of ∅ fails to be in A",
                law="p.13",
            ),
            Flashcard(
                id="page-2.6", deck="page-2",
                question="A ∩ Ā = ?",
                answer="∅",
                hint="A set and its complement share nothing",
                law="p.20",
            ),
            Flashcard(
                id="page-2.7", deck="page-2",
                question="A ∪ Ā = ?",
                answer="U (the universal set)",
                hint="Together they cover everything",
                law="p.20",
            ),
            Flashcard(
                id="page-2.8", deck="page-2",
                question="A = B if and only if?",
                answer="A ⊆ B and B ⊆ A",
                hint="Subset in both directions means equal",
                law="p.13",
            ),
            Flashcard(
                id="page-2.9", deck="page-2",
                question="If |A| = m and |B| = n, then |A × B| = ?",
                answer="mn",
                hint="m choices for a, n for b",
                law="p.9",
            ),
            Flashcard(
                id="page-2.10", deck="page-2",
                question="A ∪ ∅ = ?",
                answer="A",
                hint="Adding nothing changes nothing",
                law="p.18",
            ),
        ),
    ),
    FlashcardDeck(
        key="page-3",
        title="Logical Statements",
        cards=(
            Flashcard(
                id="page-3.1", deck="page-3",
                question="When is P ⟹ Q FALSE?",
                answer="Only when P is TRUE and Q is FALSE",
                hint="All other rows are true!",
                law="Truth table (p.42)",
            ),
            Flashcard(
                id="page-3.2", deck="page-3",
                question="Converse of P ⟹ Q?",
                answer="Q ⟹ P",
                hint="Swap hypothesis and conclusion",
                law="p.43",
            ),
            Flashcard(
                id="page-3.3", deck="page-3",
                question="Contrapositive of P ⟹ Q?",
                answer="¬Q ⟹ ¬P",
                hint="Negate and flip — equivalent to original",
                law="p.43",
            ),
            Flashcard(
                id="page-3.4", deck="page-3",
                question="Is the converse equivalent to P ⟹ Q?",
                answer="NO — converse is NOT equivalent",
                hint="'If rains → umbrella' ≠ 'If umbrella → rains'",
                law="p.51",
            ),
            Flashcard(
                id="page-3.5", deck="page-3",
                question="Is the contrapositive equivalent to P ⟹ Q?",
                answer="YES — always logically equivalent",
                hint="Same truth table in every row",
                law="p.51",
            ),
            Flashcard(
                id="page-3.6", deck="page-3",
                question="∀x ∈ S, P(x) means?",
                answer="For EVERY x in S, P(x) holds",
                hint="Universal — must hold for all, no exceptions",
                law="p.53",
            ),
            Flashcard(
                id="page-3.7", deck="page-3",
                question="∃x ∈ S, P(x) means?",
                answer="There EXISTS at least one x in S with P(x)",
                hint="Existential — just one witness is enough",
                law="p.54",
            ),
            Flashcard(
                id="page-3.8", deck="page-3",
                question="Is 'or' in math inclusive or exclusive?",
                answer="INCLUSIVE — P ∨ Q is true when one OR BOTH are true",
                hint="Unlike everyday English 'either/or'",
                law="p.40",
            ),
            Flashcard(
                id="page-3.9", deck="page-3",
                question="P ⟺ Q is true when?",
                answer="When P and Q have the SAME truth value",
                hint="Both true, or both false",
                law="p.46",
            ),
            Flashcard(
                id="page-3.10", deck="page-3",
                question="Open sentence vs. statement?",
                answer="Open sentence depends on a variable; statement is always T or F",
                hint="'x > 0' is open; '5 > 0' is a statement",
                law="p.35–36",
            ),
        ),
    ),
    FlashcardDeck(
        key="page-4",
        title="Negations",
        cards=(
            Flashcard(
                id="page-4.1", deck="page-4",
                question="¬(P ⟹ Q) ≡ ?",
                answer="P ∧ ¬Q",
                hint="Conditional fails only when hypothesis T and conclusion F",
                law="p.59",
            ),
            Flashcard(
                id="page-4.2", deck="page-4",
                question="¬(∀x ∈ S, P(x)) ≡ ?",
                answer="∃x ∈ S, ¬P(x)",
                hint="'Not all' means 'at least one fails'",
                law="Eq. 2.8 (p.60)",
            ),
            Flashcard(
                id="page-4.3", deck="page-4",
                question="¬(∃x ∈ S, P(x)) ≡ ?",
                answer="∀x ∈ S, ¬P(x)",
                hint="'None exists' means 'all fail'",
                law="Eq. 2.9 (p.60)",
            ),
            Flashcard(
                id="page-4.4", deck="page-4",
                question="Negate: 'x is even and x > 0'",
                answer="'x is odd OR x ≤ 0'",
                hint="Negate a conjunction: De Morgan — AND becomes OR",
                law="p.60",
            ),
            Flashcard(
                id="page-4.5", deck="page-4",
                question="Negate: 'All primes are odd'",
                answer="'There exists a prime that is NOT odd' (e.g. 2)",
                hint="Negate ∀: ∃ with negated predicate",
                law="p.60",
            ),
            Flashcard(
                id="page-4.6", deck="page-4",
                question="¬(∀x, ∃y, P(x,y)) ≡ ?",
                answer="∃x, ∀y, ¬P(x,y)",
                hint="Flip each quantifier, negate the predicate",
                law="p.62",
            ),
            Flashcard(
                id="page-4.7", deck="page-4",
                question="Negate: P ∨ Q",
                answer="¬P ∧ ¬Q",
                hint="De Morgan: OR becomes AND, negate each",
                law="De Morgan #2 (p.51)",
            ),
            Flashcard(
                id="page-4.8", deck="page-4",
                question="Negate: P ∧ Q",
                answer="¬P ∨ ¬Q",
                hint="De Morgan: AND becomes OR, negate each",
                law="De Morgan #1 (p.51)",
            ),
            Flashcard(
                id="page-4.9", deck="page-4",
                question="Is ¬(P ⟹ Q) the same as ¬P ⟹ ¬Q?",
                answer="NO — ¬(P⟹Q) = P ∧ ¬Q, not ¬P⟹¬Q",
                hint="Common mistake! The inverse ¬P⟹¬Q is NOT the negation",
                law="p.59",
            ),
            Flashcard(
                id="page-4.10", deck="page-4",
                question="Negate: ∃x ∈ ℝ, x² = -1",
                answer="∀x ∈ ℝ, x² ≠ -1  (TRUE)",
                hint="Negate ∃ → ∀, negate predicate",
                law="p.60",
            ),
        ),
    ),
    FlashcardDeck(
        key="page-5",
        title="Logical Equivalence",
        cards=(
            Flashcard(
                id="page-5.1", deck="page-5",
                question="Two statements are logically equivalent when?",
                answer="Their truth tables match in EVERY row",
                hint="Not just sometimes — every case must agree",
                law="p.50",
            ),
            Flashcard(
                id="page-5.2", deck="page-5",
                question="P ⟹ Q ≡ ¬P ∨ Q — true or false?",
                answer="TRUE — logically equivalent",
                hint="Verify: P=T,Q=F gives F on both sides",
                law="p.51",
            ),
            Flashcard(
                id="page-5.3", deck="page-5",
                question="Are P⟹Q and Q⟹P equivalent?",
                answer="NO — converse is not equivalent",
                hint="P=T,Q=F: P⟹Q is F but Q⟹P is T",
                law="p.51",
            ),
            Flashcard(
                id="page-5.4", deck="page-5",
                question="Simplify ¬(¬P ∨ Q)",
                answer="P ∧ ¬Q",
                hint="De Morgan: ¬(¬P∨Q) = ¬(¬P)∧¬Q = P∧¬Q",
                law="p.51",
            ),
            Flashcard(
                id="page-5.5", deck="page-5",
                question="Name the law: P∧Q ≡ Q∧P",
                answer="Commutative Law for ∧",
                hint="Order doesn't matter for AND",
                law="p.52",
            ),
            Flashcard(
                id="page-5.6", deck="page-5",
                question="Name the law: P∧(Q∧R) ≡ (P∧Q)∧R",
                answer="Associative Law for ∧",
                hint="Grouping doesn't matter",
                law="p.52",
            ),
            Flashcard(
                id="page-5.7", deck="page-5",
                question="How do you PROVE two statements are equivalent?",
                answer="Build a truth table and verify every row matches",
                hint="Systematic: check all 2ⁿ combinations",
                law="p.50",
            ),
            Flashcard(
                id="page-5.8", deck="page-5",
                question="¬(¬P) ≡ ?",
                answer="P",
                hint="Two negatives make a positive",
                law="Double Negation (p.52)",
            ),
            Flashcard(
                id="page-5.9", deck="page-5",
                question="P ⟺ Q ≡ ?",
                answer="(P ∧ Q) ∨ (¬P ∧ ¬Q)",
                hint="True exactly when both match",
                law="p.49",
            ),
            Flashcard(
                id="page-5.10", deck="page-5",
                question="P ∧ (Q ∨ R) ≡ ?",
                answer="(P ∧ Q) ∨ (P ∧ R)",
                hint="Distributive law — ∧ distributes over ∨",
                law="p.52",
            ),
        ),
    ),
]
