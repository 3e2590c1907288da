"""
Exercise bank: Hammack, Book of Proof (Ed. 3.3), sections 1.1 to 2.6.

Exercises are listed in study order; that order drives navigation.
"""

from ..models import (
    Exercise,
    ExerciseKind,
    RemixableExercise,
    TruthTable,
    TruthTableExercise,
)
from . import remixes

EXERCISES = [
    # 1.1 A
    RemixableExercise(
        id="1.1.A.1", section="1.1", part="A",
        question="Write {5x − 1 : x ∈ ℤ} by listing elements.",
        answer="{..., −11, −6, −1, 4, 9, 14, ...}",
        hint="Plug in x = ..., −2, −1, 0, 1, 2, ...",
        external_query_hint="5x-1 for x = -3,-2,-1,0,1,2,3",
        kind=ExerciseKind.LIST,
        generator=remixes.linear_set_listing,
    ),
    Exercise(
        id="1.1.A.2", section="1.1", part="A",
        question="Write {3x + 2 : x ∈ ℤ} by listing elements.",
        answer="{..., −4, −1, 2, 5, 8, 11, ...}",
        hint="Plug in x = ..., −2, −1, 0, 1, 2, ...",
        external_query_hint="3x+2 for x=-2,-1,0,1,2,3",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.3", section="1.1", part="A",
        question="Write {x ∈ ℤ : −2 ≤ x < 7} by listing elements.",
        answer="{−2, −1, 0, 1, 2, 3, 4, 5, 6}",
        hint="All integers from −2 up to (not including) 7.",
        external_query_hint="integers from -2 to 6",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.4", section="1.1", part="A",
        question="Write {x ∈ ℕ : −2 < x ≤ 7} by listing elements.",
        answer="{1, 2, 3, 4, 5, 6, 7}",
        hint="ℕ starts at 1; take naturals ≤ 7.",
        external_query_hint="natural numbers from 1 to 7",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.5", section="1.1", part="A",
        question="Write {x ∈ ℝ : x² = 3} by listing elements.",
        answer="{√3, −√3}",
        hint="Solve x² = 3 over ℝ.",
        external_query_hint="solve x^2 = 3",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.6", section="1.1", part="A",
        question="Write {x ∈ ℝ : x² = 9} by listing elements.",
        answer="{3, −3}",
        hint="Solve x² = 9.",
        external_query_hint="solve x^2 = 9",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.7", section="1.1", part="A",
        question="Write {x ∈ ℝ : x² + 5x = −6} by listing elements.",
        answer="{−2, −3}",
        hint="Factor x² + 5x + 6 = (x+2)(x+3) = 0.",
        external_query_hint="solve x^2 + 5x + 6 = 0",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.8", section="1.1", part="A",
        question="Write {x ∈ ℝ : x³ + 5x² = −6x} by listing elements.",
        answer="{0, −2, −3}",
        hint="Factor: x(x² + 5x + 6) = x(x+2)(x+3) = 0.",
        external_query_hint="solve x^3 + 5x^2 + 6x = 0",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.9", section="1.1", part="A",
        question="Write {x ∈ ℝ : sin(πx) = 0} by listing elements.",
        answer="{..., −2, −1, 0, 1, 2, ...} = ℤ",
        hint="sin(πx) = 0 iff x = n for n ∈ ℤ.",
        external_query_hint="solve sin(pi*x) = 0",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.10", section="1.1", part="A",
        question="Write {x ∈ ℝ : cos(x) = 1} by listing elements.",
        answer="{..., −2π, 0, 2π, 4π, ...} = {2kπ : k ∈ ℤ}",
        hint="cos(x) = 1 iff x = 2kπ for k ∈ ℤ.",
        external_query_hint="solve cos(x) = 1",
        kind=ExerciseKind.LIST,
    ),
    RemixableExercise(
        id="1.1.A.11", section="1.1", part="A",
        question="Write {x ∈ ℤ : |x| < 5} by listing elements.",
        answer="{−4, −3, −2, −1, 0, 1, 2, 3, 4}",
        hint="All integers with absolute value less than 5.",
        external_query_hint="integers x with |x| < 5",
        kind=ExerciseKind.LIST,
        generator=remixes.bounded_integers_listing,
    ),
    Exercise(
        id="1.1.A.12", section="1.1", part="A",
        question="Write {x ∈ ℤ : |2x| < 5} by listing elements.",
        answer="{−2, −1, 0, 1, 2}",
        hint="|2x| < 5 means |x| < 2.5, so x ∈ {−2,−1,0,1,2}.",
        external_query_hint="integers x with |2x| < 5",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.13", section="1.1", part="A",
        question="Write {x ∈ ℤ : |6x| < 5} by listing elements.",
        answer="{0}",
        hint="|6x| < 5 means |x| < 5/6 < 1, so x = 0 only.",
        external_query_hint="integers x with |6x| < 5",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.14", section="1.1", part="A",
        question="Write {5x : x ∈ ℤ, |2x| ≤ 8} by listing elements.",
        answer="{−20, −15, −10, −5, 0, 5, 10, 15, 20}",
        hint="|2x| ≤ 8 means x ∈ {−4,...,4}; multiply each by 5.",
        external_query_hint="5x for x = -4,-3,-2,-1,0,1,2,3,4",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.15", section="1.1", part="A",
        question="Write {5a + 2b : a, b ∈ ℤ} by listing elements.",
        answer="ℤ (all integers), since gcd(5, 2) = 1",
        hint="gcd(5,2)=1 so every integer n = 5a+2b for some a,b ∈ ℤ.",
        external_query_hint="gcd(5,2)",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.1.A.16", section="1.1", part="A",
        question="Write {6a + 2b : a, b ∈ ℤ} by listing elements.",
        answer="2ℤ = {..., −4, −2, 0, 2, 4, ...} (all even integers)",
        hint="6a+2b = 2(3a+b); since 3a+b runs over all ℤ, the set = 2ℤ.",
        external_query_hint="gcd(6,2)",
        kind=ExerciseKind.LIST,
    ),
    # 1.1 B
    Exercise(
        id="1.1.B.17", section="1.1", part="B",
        question="Write {2, 4, 8, 16, 32, 64, ...} in set-builder notation.",
        answer="{2ⁿ : n ∈ ℕ}",
        hint="Each element is a power of 2.",
        external_query_hint="2^n for n=1,2,3,4,5,6",
        kind=ExerciseKind.BUILDER,
    ),
    Exercise(
        id="1.1.B.18", section="1.1", part="B",
        question="Write {0, 4, 16, 36, 64, 100, ...} in set-builder notation.",
        answer="{(2n)² : n ∈ ℕ ∪ {0}} = {4n² : n ≥ 0}",
        hint="Squares of even numbers: 0=0², 4=2², 16=4², ...",
        external_query_hint="(2n)^2 for n=0,1,2,3,4,5",
        kind=ExerciseKind.BUILDER,
    ),
    Exercise(
        id="1.1.B.19", section="1.1", part="B",
        question="Write {..., −6, −3, 0, 3, 6, 9, 12, 15, ...} in set-builder notation.",
        answer="{3n : n ∈ ℤ}",
        hint="Multiples of 3.",
        external_query_hint="3n for n=-2,-1,0,1,2,3,4,5",
        kind=ExerciseKind.BUILDER,
    ),
    Exercise(
        id="1.1.B.20", section="1.1", part="B",
        question="Write {..., −8, −3, 2, 7, 12, 17, ...} in set-builder notation.",
        answer="{5n + 2 : n ∈ ℤ}",
        hint="Consecutive terms differ by 5; one value is 2 = 5(0)+2.",
        external_query_hint="5n+2 for n=-2,-1,0,1,2,3",
        kind=ExerciseKind.BUILDER,
    ),
    Exercise(
        id="1.1.B.21", section="1.1", part="B",
        question="Write {0, 1, 4, 9, 16, 25, 36, ...} in set-builder notation.",
        answer="{n² : n ∈ ℕ ∪ {0}}",
        hint="Perfect squares starting from 0.",
        external_query_hint="n^2 for n=0,1,2,3,4,5,6",
        kind=ExerciseKind.BUILDER,
    ),
    Exercise(
        id="1.1.B.22", section="1.1", part="B",
        question="Write {3, 6, 11, 18, 27, 38, ...} in set-builder notation.",
        answer="{n² + 2 : n ∈ ℕ}",
        hint="1²+2=3, 2²+2=6, 3²+2=11, ...",
        external_query_hint="n^2+2 for n=1,2,3,4,5,6",
        kind=ExerciseKind.BUILDER,
    ),
    Exercise(
        id="1.1.B.23", section="1.1", part="B",
        question="Write {3, 4, 5, 6, 7, 8} in set-builder notation.",
        answer="{x ∈ ℤ : 3 ≤ x ≤ 8}",
        hint="Integers from 3 to 8 inclusive.",
        external_query_hint="integers from 3 to 8",
        kind=ExerciseKind.BUILDER,
    ),
    Exercise(
        id="1.1.B.24", section="1.1", part="B",
        question="Write {−4, −3, −2, −1, 0, 1, 2} in set-builder notation.",
        answer="{x ∈ ℤ : −4 ≤ x ≤ 2}",
        hint="Integers from −4 to 2 inclusive.",
        external_query_hint="integers from -4 to 2",
        kind=ExerciseKind.BUILDER,
    ),
    Exercise(
        id="1.1.B.25", section="1.1", part="B",
        question="Write {..., 1/8, 1/4, 1/2, 1, 2, 4, 8, ...} in set-builder notation.",
        answer="{2ⁿ : n ∈ ℤ}",
        hint="Powers of 2 for all integer exponents.",
        external_query_hint="2^n for n=-3,-2,-1,0,1,2,3",
        kind=ExerciseKind.BUILDER,
    ),
    Exercise(
        id="1.1.B.26", section="1.1", part="B",
        question="Write {..., 1/27, 1/9, 1/3, 1, 3, 9, 27, ...} in set-builder notation.",
        answer="{3ⁿ : n ∈ ℤ}",
        hint="Powers of 3 for all integer exponents.",
        external_query_hint="3^n for n=-3,-2,-1,0,1,2,3",
        kind=ExerciseKind.BUILDER,
    ),
    Exercise(
        id="1.1.B.27", section="1.1", part="B",
        question="Write {..., −π, −π/2, 0, π/2, π, 3π/2, 2π, ...} in set-builder notation.",
        answer="{nπ/2 : n ∈ ℤ}",
        hint="Multiples of π/2.",
        external_query_hint="n*pi/2 for n=-2,-1,0,1,2,3,4",
        kind=ExerciseKind.BUILDER,
    ),
    Exercise(
        id="1.1.B.28", section="1.1", part="B",
        question="Write {..., −3/2, −3/4, 0, 3/4, 3/2, 9/4, 3, ...} in set-builder notation.",
        answer="{3n/4 : n ∈ ℤ}",
        hint="Multiples of 3/4.",
        external_query_hint="3n/4 for n=-2,-1,0,1,2,3,4",
        kind=ExerciseKind.BUILDER,
    ),
    # 1.1 C
    RemixableExercise(
        id="1.1.C.29", section="1.1", part="C",
        question="Find |{{1}, {2,{3,4}}, ∅}|.",
        answer="3",
        hint="Count the top-level elements (each brace-group = 1 element).",
        external_query_hint="cardinality of {{1},{2,{3,4}},{}} = 3 elements",
        kind=ExerciseKind.CARDINALITY,
        generator=remixes.cardinality_of_size,
    ),
    Exercise(
        id="1.1.C.30", section="1.1", part="C",
        question="Find |{{1,4}, a, b, {{3,4}}, {∅}}|.",
        answer="5",
        hint="Five elements: {1,4}, a, b, {{3,4}}, {∅}.",
        external_query_hint="5 elements in the set",
        kind=ExerciseKind.CARDINALITY,
    ),
    RemixableExercise(
        id="1.1.C.33", section="1.1", part="C",
        question="Find |{x ∈ ℤ : |x| < 10}|.",
        answer="19",
        hint="Integers from −9 to 9: that's 2(9)+1 = 19.",
        external_query_hint="number of integers x with |x| < 10",
        kind=ExerciseKind.CARDINALITY,
        generator=remixes.bounded_integers_count,
    ),
    Exercise(
        id="1.1.C.34", section="1.1", part="C",
        question="Find |{x ∈ ℕ : |x| < 10}|.",
        answer="9",
        hint="Naturals 1 through 9.",
        external_query_hint="natural numbers less than 10",
        kind=ExerciseKind.CARDINALITY,
    ),
    Exercise(
        id="1.1.C.35", section="1.1", part="C",
        question="Find |{x ∈ ℤ : x² < 10}|.",
        answer="7",
        hint="x² < 10 means |x| ≤ 3 in ℤ: {−3,−2,−1,0,1,2,3}.",
        external_query_hint="integers x with x^2 < 10",
        kind=ExerciseKind.CARDINALITY,
    ),
    Exercise(
        id="1.1.C.36", section="1.1", part="C",
        question="Find |{x ∈ ℕ : x² < 10}|.",
        answer="3",
        hint="x=1,2,3 work (1,4,9 < 10); x=4 fails (16 ≥ 10).",
        external_query_hint="natural numbers x with x^2 < 10",
        kind=ExerciseKind.CARDINALITY,
    ),
    Exercise(
        id="1.1.C.37", section="1.1", part="C",
        question="Find |{x ∈ ℕ : x² < 0}|.",
        answer="0 (empty set — |∅| = 0)",
        hint="x² ≥ 0 for all real x, so no natural satisfies x² < 0.",
        external_query_hint="natural numbers x with x^2 < 0",
        kind=ExerciseKind.CARDINALITY,
    ),
    Exercise(
        id="1.1.C.38", section="1.1", part="C",
        question="Find |{x ∈ ℕ : 5x ≤ 20}|.",
        answer="4",
        hint="5x ≤ 20 means x ≤ 4; naturals: {1,2,3,4}.",
        external_query_hint="natural numbers x with 5x <= 20",
        kind=ExerciseKind.CARDINALITY,
    ),
    # 1.2
    Exercise(
        id="1.2.A.1", section="1.2", part="A",
        question="Find A × B for A = {1, 2, 3} and B = {a, b}.",
        answer="{(1,a),(1,b),(2,a),(2,b),(3,a),(3,b)}",
        hint="Pair each element of A with each element of B.",
        external_query_hint="{1,2,3} cross product {a,b}",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.2.A.2", section="1.2", part="A",
        question="If |A| = 4 and |A × B| = 20, find |B|.",
        answer="|B| = 5, since |A × B| = |A|·|B| = 4·5 = 20.",
        hint="Use |A × B| = |A|·|B|.",
        external_query_hint="20/4 = 5",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.2.A.3", section="1.2", part="A",
        question="Write out {0,1} × {0,1} × {0,1}.",
        answer="{(0,0,0),(0,0,1),(0,1,0),(0,1,1),(1,0,0),(1,0,1),(1,1,0),(1,1,1)}",
        hint="All binary triples — 2³ = 8 elements.",
        external_query_hint="{0,1}^3 number of elements = 8",
        kind=ExerciseKind.LIST,
    ),
    # 1.3
    RemixableExercise(
        id="1.3.A.1", section="1.3", part="A",
        question="List all subsets of A = {1, 2, 3}.",
        answer="∅, {1}, {2}, {3}, {1,2}, {1,3}, {2,3}, {1,2,3}  (2³ = 8 total)",
        hint="A set with n elements has 2ⁿ subsets.",
        external_query_hint="subsets of {1,2,3}",
        kind=ExerciseKind.LIST,
        generator=remixes.subsets_listing,
    ),
    Exercise(
        id="1.3.A.2", section="1.3", part="A",
        question="True or False: {2, 3} ⊆ {1, 2, 3, 4}.",
        answer="TRUE — every element of {2,3} is in {1,2,3,4}.",
        hint="Check each element: 2 ∈ {1,2,3,4} ✓, 3 ∈ {1,2,3,4} ✓.",
        external_query_hint="{2,3} subset of {1,2,3,4}",
        kind=ExerciseKind.TFQ,
    ),
    Exercise(
        id="1.3.A.3", section="1.3", part="A",
        question="True or False: {1, 5} ⊆ {1, 2, 3, 4}.",
        answer="FALSE — 5 ∉ {1,2,3,4}.",
        hint="5 is not in the second set.",
        external_query_hint="{1,5} subset of {1,2,3,4} = false",
        kind=ExerciseKind.TFQ,
    ),
    Exercise(
        id="1.3.A.4", section="1.3", part="A",
        question="True or False: ∅ ⊆ {1, 2, 3}.",
        answer="TRUE — ∅ is a subset of every set (vacuously true).",
        hint="No element of ∅ fails to be in any set — there are none!",
        external_query_hint="empty set is subset of every set",
        kind=ExerciseKind.TFQ,
    ),
    # 1.4
    Exercise(
        id="1.4.A.1", section="1.4", part="A",
        question="Find 𝒫({1, 2}).",
        answer="{∅, {1}, {2}, {1,2}}  (4 = 2² elements)",
        hint="Enumerate all subsets of {1,2}.",
        external_query_hint="power set of {1,2}",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.4.A.2", section="1.4", part="A",
        question="Find 𝒫(∅).",
        answer="{∅}  (1 = 2⁰ element)",
        hint="The only subset of ∅ is ∅ itself.",
        external_query_hint="power set of empty set",
        kind=ExerciseKind.LIST,
    ),
    RemixableExercise(
        id="1.4.A.3", section="1.4", part="A",
        question="How many elements does 𝒫(𝒫({a,b})) have?",
        answer="2^(2²) = 2⁴ = 16",
        hint="|{a,b}|=2, so |𝒫({a,b})|=4, so |𝒫(𝒫({a,b}))|=2⁴=16.",
        external_query_hint="2^(2^2)",
        kind=ExerciseKind.CARDINALITY,
        generator=remixes.power_set_size,
    ),
    # 1.5
    Exercise(
        id="1.5.A.1", section="1.5", part="A",
        question="Let A={4,3,6,7,1,9}, B={5,6,8,4}. Find A∪B and A∩B.",
        answer="A∪B = {1,3,4,5,6,7,8,9};  A∩B = {4,6}",
        hint="Union: combine all; Intersection: only common elements.",
        external_query_hint="union and intersection of {4,3,6,7,1,9} and {5,6,8,4}",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.5.A.2", section="1.5", part="A",
        question="For intervals: find [2,5] ∪ [3,6],  [2,5] ∩ [3,6],  and [2,5] − [3,6].",
        answer="[2,5]∪[3,6] = [2,6];  [2,5]∩[3,6] = [3,5];  [2,5]−[3,6] = [2,3)",
        hint="Sketch both intervals on a number line.",
        external_query_hint="[2,5] union [3,6], [2,5] intersect [3,6]",
        kind=ExerciseKind.LIST,
    ),
    # 1.6
    Exercise(
        id="1.6.A.1", section="1.6", part="A",
        question="Let U={1,...,10}, A={2,4,6,8,10}. Find Ā.",
        answer="{1,3,5,7,9}",
        hint="Ā = U − A = all elements of U not in A.",
        external_query_hint="{1,2,...,10} minus {2,4,6,8,10}",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="1.6.A.2", section="1.6", part="A",
        question="Verify De Morgan's law: Let U={1,...,10}, A={2,4,6,8,10}, B={1,2,3,4,5}. Show (A∪B)̄ = Ā∩B̄.",
        answer="A∪B={1,2,3,4,5,6,8,10}, (A∪B)̄={7,9}\nĀ={1,3,5,7,9}, B̄={6,7,8,9,10}, Ā∩B̄={7,9} ✓",
        hint="Compute each side separately and verify they're equal.",
        external_query_hint="complement of ({2,4,6,8,10} union {1,2,3,4,5}) in {1,...,10}",
        kind=ExerciseKind.LIST,
    ),
    # 2.1
    Exercise(
        id="2.1.A.1", section="2.1", part="A",
        question="Is 'The number 3 is odd.' a statement? If so, is it T or F?",
        answer="Yes, it is a statement. It is TRUE.",
        hint="Statements are declarative sentences with a definite truth value.",
        external_query_hint="3 is odd",
        kind=ExerciseKind.TFQ,
    ),
    Exercise(
        id="2.1.A.2", section="2.1", part="A",
        question="Is 'x + 3 = 8' a statement?",
        answer="No — it is an open sentence. Truth depends on x.",
        hint="Open sentences contain free variables.",
        external_query_hint="x + 3 = 8 is an open sentence",
        kind=ExerciseKind.TFQ,
    ),
    Exercise(
        id="2.1.A.3", section="2.1", part="A",
        question="Is 'Every even integer greater than 2 is the sum of two primes.' a statement?",
        answer="Yes — this is Goldbach's Conjecture. It IS a statement (T or F, even if unknown).",
        hint="Declarative sentence → statement, regardless of whether we know its truth value.",
        external_query_hint="Goldbach's conjecture",
        kind=ExerciseKind.TFQ,
    ),
    # 2.2
    Exercise(
        id="2.2.A.1", section="2.2", part="A",
        question="Symbolize: 'The number 8 is both even and a power of 2.'",
        answer="P ∧ Q  where P: '8 is even', Q: '8 is a power of 2'.",
        hint="'Both ... and ...' → conjunction ∧.",
        external_query_hint="8 is even AND 8 is a power of 2",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="2.2.A.2", section="2.2", part="A",
        question="Symbolize: 'At least one of x and y equals 0.'",
        answer="P ∨ Q  where P: 'x = 0', Q: 'y = 0'.",
        hint="'At least one' → inclusive or ∨.",
        external_query_hint="x=0 or y=0",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="2.2.A.3", section="2.2", part="A",
        question="Symbolize: 'x ∈ A − B'.",
        answer="P ∧ ¬Q  where P: 'x ∈ A', Q: 'x ∈ B'.",
        hint="x ∈ A−B means x ∈ A AND x ∉ B.",
        external_query_hint="x in A and x not in B",
        kind=ExerciseKind.LIST,
    ),
    TruthTableExercise(
        id="2.2.A.4", section="2.2", part="A",
        question="Give the truth table for P ∧ Q.",
        answer="TT→T, TF→F, FT→F, FF→F",
        hint="True ONLY when both are true.",
        external_query_hint="truth table P AND Q",
        kind=ExerciseKind.TRUTH_TABLE,
        truth_table=TruthTable(
            variables=("P", "Q"),
            formula="P ∧ Q",
            rows=(
                ("T", "T", "T"),
                ("T", "F", "F"),
                ("F", "T", "F"),
                ("F", "F", "F"),
            ),
        ),
    ),
    TruthTableExercise(
        id="2.2.A.5", section="2.2", part="A",
        question="Give the truth table for P ∨ Q.",
        answer="TT→T, TF→T, FT→T, FF→F",
        hint="False ONLY when both are false.",
        external_query_hint="truth table P OR Q",
        kind=ExerciseKind.TRUTH_TABLE,
        truth_table=TruthTable(
            variables=("P", "Q"),
            formula="P ∨ Q",
            rows=(
                ("T", "T", "T"),
                ("T", "F", "T"),
                ("F", "T", "T"),
                ("F", "F", "F"),
            ),
        ),
    ),
    # 2.3
    Exercise(
        id="2.3.A.1", section="2.3", part="A",
        question="Convert: 'An integer is divisible by 8 only if it is divisible by 4.' to 'If P, then Q' form.",
        answer="If an integer is divisible by 8, then it is divisible by 4.",
        hint="'P only if Q' means P ⟹ Q.",
        external_query_hint="8 divides n implies 4 divides n",
        kind=ExerciseKind.LIST,
    ),
    TruthTableExercise(
        id="2.3.A.2", section="2.3", part="A",
        question="Give the truth table for P ⟹ Q.",
        answer="TT→T, TF→F, FT→T, FF→T",
        hint="The ONLY false row is when P=T and Q=F.",
        external_query_hint="truth table P implies Q",
        kind=ExerciseKind.TRUTH_TABLE,
        truth_table=TruthTable(
            variables=("P", "Q"),
            formula="P ⟹ Q",
            rows=(
                ("T", "T", "T"),
                ("T", "F", "F"),
                ("F", "T", "T"),
                ("F", "F", "T"),
            ),
        ),
    ),
    Exercise(
        id="2.3.A.3", section="2.3", part="A",
        question="What is the contrapositive of 'If n is even, then n² is even'?",
        answer="If n² is odd, then n is odd.  (¬Q ⟹ ¬P)",
        hint="Contrapositive: negate both and flip direction.",
        external_query_hint="contrapositive of if n is even then n^2 is even",
        kind=ExerciseKind.LIST,
    ),
    Exercise(
        id="2.3.A.4", section="2.3", part="A",
        question="Is the contrapositive logically equivalent to the original conditional?",
        answer="YES — P ⟹ Q ≡ ¬Q ⟹ ¬P. They have identical truth tables.",
        hint="Verify with a 4-row truth table.",
        external_query_hint="P implies Q equivalent to not Q implies not P",
        kind=ExerciseKind.TFQ,
    ),
    # 2.4
    Exercise(
        id="2.4.A.1", section="2.4", part="A",
        question="Convert to iff form: 'If xy = 0 then x = 0 or y = 0, and conversely.'",
        answer="xy = 0 if and only if x = 0 or y = 0.",
        hint="'and conversely' always indicates an iff statement.",
        external_query_hint="xy = 0 iff x=0 or y=0",
        kind=ExerciseKind.LIST,
    ),
    TruthTableExercise(
        id="2.4.A.2", section="2.4", part="A",
        question="Give the truth table for P ⟺ Q.",
        answer="TT→T, TF→F, FT→F, FF→T",
        hint="True exactly when P and Q have the SAME truth value.",
        external_query_hint="truth table P iff Q",
        kind=ExerciseKind.TRUTH_TABLE,
        truth_table=TruthTable(
            variables=("P", "Q"),
            formula="P ⟺ Q",
            rows=(
                ("T", "T", "T"),
                ("T", "F", "F"),
                ("F", "T", "F"),
                ("F", "F", "T"),
            ),
        ),
    ),
    # 2.5
    TruthTableExercise(
        id="2.5.A.1", section="2.5", part="A",
        question="Build the truth table for P ∨ (Q ⟹ R).",
        answer="(P,Q,R)=(T,T,T)→T; (T,T,F)→T; (T,F,T)→T; (T,F,F)→T; (F,T,T)→T; (F,T,F)→F; (F,F,T)→T; (F,F,F)→T",
        hint="First build Q⟹R column, then apply P∨(Q⟹R).",
        external_query_hint="truth table P OR (Q implies R)",
        kind=ExerciseKind.TRUTH_TABLE,
        truth_table=TruthTable(
            variables=("P", "Q", "R"),
            formula="P ∨ (Q ⟹ R)",
            rows=(
                ("T", "T", "T", "T"),
                ("T", "T", "F", "T"),
                ("T", "F", "T", "T"),
                ("T", "F", "F", "T"),
                ("F", "T", "T", "T"),
                ("F", "T", "F", "F"),
                ("F", "F", "T", "T"),
                ("F", "F", "F", "T"),
            ),
        ),
    ),
    TruthTableExercise(
        id="2.5.A.2", section="2.5", part="A",
        question="Build the truth table for ¬(P ⟹ Q).",
        answer="TT→F, TF→T, FT→F, FF→F  (true ONLY in the TF row)",
        hint="¬(P⟹Q) is true only when P=T, Q=F.",
        external_query_hint="truth table NOT (P implies Q)",
        kind=ExerciseKind.TRUTH_TABLE,
        truth_table=TruthTable(
            variables=("P", "Q"),
            formula="¬(P ⟹ Q)",
            rows=(
                ("T", "T", "F"),
                ("T", "F", "T"),
                ("F", "T", "F"),
                ("F", "F", "F"),
            ),
        ),
    ),
    TruthTableExercise(
        id="2.5.A.3", section="2.5", part="A",
        question="Build the truth table for (P ∧ ¬P) ⟹ Q.",
        answer="All four rows → T. This is a tautology (false hypothesis ⟹ anything is T).",
        hint="P ∧ ¬P is always F; F ⟹ Q is always T.",
        external_query_hint="truth table (P AND NOT P) implies Q",
        kind=ExerciseKind.TRUTH_TABLE,
        truth_table=TruthTable(
            variables=("P", "Q"),
            formula="(P ∧ ¬P) ⟹ Q",
            rows=(
                ("T", "T", "T"),
                ("T", "F", "T"),
                ("F", "T", "T"),
                ("F", "F", "T"),
            ),
        ),
    ),
    TruthTableExercise(
        id="2.5.A.4", section="2.5", part="A",
        question="Build the truth table for ¬(¬P ∨ ¬Q).",
        answer="TT→T, TF→F, FT→F, FF→F  (same as P ∧ Q — De Morgan!)",
        hint="By De Morgan: ¬(¬P ∨ ¬Q) = ¬¬P ∧ ¬¬Q = P ∧ Q.",
        external_query_hint="truth table NOT(NOT P OR NOT Q)",
        kind=ExerciseKind.TRUTH_TABLE,
        truth_table=TruthTable(
            variables=("P", "Q"),
            formula="¬(¬P ∨ ¬Q)",
            rows=(
                ("T", "T", "T"),
                ("T", "F", "F"),
                ("F", "T", "F"),
                ("F", "F", "F"),
            ),
        ),
    ),
    Exercise(
        id="2.5.A.5", section="2.5", part="A",
        question="Suppose ((P∧Q)∨R) ⟹ (R∨S) is false. Find the truth values of P,Q,R,S.",
        answer="P=T, Q=T, R=F, S=F. (Hypothesis must be T, conclusion F; R∨S=F requires R=F,S=F; then (T∧T)∨F=T ✓)",
        hint="A conditional is false only when hypothesis=T and conclusion=F. Work backwards.",
        external_query_hint="(P AND Q OR R) implies (R OR S) is false",
        kind=ExerciseKind.LIST,
    ),
    # 2.6
    TruthTableExercise(
        id="2.6.A.1", section="2.6", part="A",
        question="Use a truth table to show ¬(P ∧ Q) ≡ (¬P) ∨ (¬Q). (De Morgan's 1st Law)",
        answer="Both columns agree on all 4 rows: TT→F/F, TF→T/T, FT→T/T, FF→T/T ✓",
        hint="Build a 4-row table with columns for both sides and compare.",
        external_query_hint="truth table NOT(P AND Q) = (NOT P) OR (NOT Q)",
        kind=ExerciseKind.TRUTH_TABLE,
        truth_table=TruthTable(
            variables=("P", "Q"),
            formula="¬(P ∧ Q)  vs  (¬P) ∨ (¬Q)",
            rows=(
                ("T", "T", "F", "F"),
                ("T", "F", "T", "T"),
                ("F", "T", "T", "T"),
                ("F", "F", "T", "T"),
            ),
        ),
    ),
    TruthTableExercise(
        id="2.6.A.2", section="2.6", part="A",
        question="Use a truth table to show P ⟹ Q ≡ (¬P) ∨ Q.",
        answer="Both columns agree: TT→T/T, TF→F/F, FT→T/T, FF→T/T ✓",
        hint="'If P then Q' is the same as 'P is false or Q is true.'",
        external_query_hint="truth table P implies Q = (NOT P) OR Q",
        kind=ExerciseKind.TRUTH_TABLE,
        truth_table=TruthTable(
            variables=("P", "Q"),
            formula="P ⟹ Q  vs  (¬P) ∨ Q",
            rows=(
                ("T", "T", "T", "T"),
                ("T", "F", "F", "F"),
                ("F", "T", "T", "T"),
                ("F", "F", "T", "T"),
            ),
        ),
    ),
    Exercise(
        id="2.6.A.3", section="2.6", part="A",
        question="Are P ∨ (Q ∧ R) and (P ∨ Q) ∧ R logically equivalent?",
        answer="NO — counterexample: P=T, Q=F, R=F gives T vs F.",
        hint="Try P=T, Q=R=F: LHS = T∨(F∧F)=T, RHS = (T∨F)∧F = F.",
        external_query_hint="truth table P OR (Q AND R) vs (P OR Q) AND R",
        kind=ExerciseKind.TFQ,
    ),
    Exercise(
        id="2.6.A.4", section="2.6", part="A",
        question="Are ¬(P ⟹ Q) and P ∧ ¬Q logically equivalent?",
        answer="YES — ¬(P⟹Q) is true only when P=T,Q=F, same as P∧¬Q.",
        hint="Check all 4 rows — both are true only in the TF row.",
        external_query_hint="NOT(P implies Q) equivalent to P AND NOT Q",
        kind=ExerciseKind.TFQ,
    ),
    Exercise(
        id="2.6.A.5", section="2.6", part="A",
        question="State and explain De Morgan's 2nd law for logic.",
        answer="¬(P ∨ Q) ≡ (¬P) ∧ (¬Q). 'Not (P or Q)' = 'not P and not Q'. Verified by 4-row truth table.",
        hint="Flip ∨ to ∧ and negate both sides.",
        external_query_hint="De Morgan NOT(P OR Q) = (NOT P) AND (NOT Q)",
        kind=ExerciseKind.LIST,
    ),
]
