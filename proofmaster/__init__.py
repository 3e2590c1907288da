"""ProofMaster - study core for an introductory proofs course.

Main namespace package containing the study submodules:
- proofmaster.answer: Answer normalization and grading protocols
- proofmaster.catalog: Exercise catalog, static course content, remixing
- proofmaster.progress: Per-session mastery tracking
- proofmaster.drills: Flashcard, matching and rapid-fire drill engines
- proofmaster.query: Client for the computational-knowledge query proxy
"""

__version__ = "0.1.0"

__all__ = []
